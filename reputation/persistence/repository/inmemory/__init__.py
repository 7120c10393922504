"""In-memory repository implementations for testing."""

from .leaderboard import InMemoryLeaderboardRepository
from .point_ledger import InMemoryPointLedgerRepository
from .votable import InMemoryVotableRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryLeaderboardRepository",
    "InMemoryPointLedgerRepository",
    "InMemoryVotableRepository",
    "InMemoryVoteRepository",
]
