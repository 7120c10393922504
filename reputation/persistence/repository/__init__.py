"""PostgreSQL repository implementations."""

from reputation.persistence.repository.leaderboard import PostgresLeaderboardRepository
from reputation.persistence.repository.point_ledger import PostgresPointLedgerRepository
from reputation.persistence.repository.votable import PostgresVotableRepository
from reputation.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresLeaderboardRepository",
    "PostgresPointLedgerRepository",
    "PostgresVotableRepository",
    "PostgresVoteRepository",
]
