"""Leaderboard repository interface (read-only)."""

from abc import ABC, abstractmethod
from typing import List, Optional

from reputation.domain.model import LeaderboardEntry
from reputation.domain.value import ActorId


class LeaderboardRepository(ABC):
    """Read-only rank queries over point balances."""

    @abstractmethod
    async def find_points(self, actor_id: ActorId) -> Optional[int]:
        """Return the actor's points, or None if the actor has no balance."""
        pass

    @abstractmethod
    async def count_above(self, points: int) -> int:
        """Count actors with strictly more than ``points``."""
        pass

    @abstractmethod
    async def find_page(self, limit: int, offset: int) -> List[LeaderboardEntry]:
        """Return ranked entries ordered by points descending.

        Ranks are competition ranks computed over every balance, not just
        the requested page. Ties are ordered by actor id.

        Args:
            limit: Page size
            offset: Number of entries to skip

        Returns:
            Ranked leaderboard entries
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count actors holding a balance."""
        pass
