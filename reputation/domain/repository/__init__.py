"""Repository interfaces for the reputation domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from reputation.domain.repository.leaderboard import LeaderboardRepository
from reputation.domain.repository.point_ledger import PointLedgerRepository
from reputation.domain.repository.votable import VotableRepository
from reputation.domain.repository.vote import VoteRepository

__all__ = [
    "LeaderboardRepository",
    "PointLedgerRepository",
    "VotableRepository",
    "VoteRepository",
]
