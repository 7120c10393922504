"""Ranking domain service."""

from typing import Optional

import logfire

from reputation.config import LeaderboardSettings
from reputation.domain.error import ValidationError
from reputation.domain.model import LeaderboardPage
from reputation.domain.repository import LeaderboardRepository
from reputation.domain.value import ActorId

from .base import Service


class RankingService(Service):
    """Read-only rank and leaderboard queries.

    Ranks are competition ranks: ``1 + number of actors with more points``,
    so tied actors share a rank.
    """

    def __init__(
        self,
        leaderboard_repository: LeaderboardRepository,
        leaderboard_settings: LeaderboardSettings,
    ) -> None:
        """Initialize ranking service.

        Args:
            leaderboard_repository: Leaderboard repository
            leaderboard_settings: Pagination defaults
        """
        self.leaderboard_repository = leaderboard_repository
        self.leaderboard_settings = leaderboard_settings

    async def rank(self, actor_id: ActorId) -> Optional[int]:
        """Compute an actor's rank.

        Args:
            actor_id: The actor's ID

        Returns:
            The rank (1 is best), or None if the actor has no balance
        """
        with logfire.span("ranking.rank", actor_id=actor_id):
            points = await self.leaderboard_repository.find_points(actor_id)
            if points is None:
                return None
            return 1 + await self.leaderboard_repository.count_above(points)

    async def leaderboard(
        self, limit: Optional[int] = None, offset: int = 0
    ) -> LeaderboardPage:
        """Return one page of the leaderboard.

        Args:
            limit: Page size (defaults to the configured size, capped at the
                configured maximum)
            offset: Number of entries to skip

        Returns:
            Ranked entries plus the number of ranked actors

        Raises:
            ValidationError: If limit < 1 or offset < 0
        """
        if limit is None:
            limit = self.leaderboard_settings.default_limit
        if limit < 1:
            raise ValidationError("limit must be at least 1")
        if offset < 0:
            raise ValidationError("offset must not be negative")
        limit = min(limit, self.leaderboard_settings.max_limit)

        with logfire.span("ranking.leaderboard", limit=limit, offset=offset):
            entries = await self.leaderboard_repository.find_page(limit, offset)
            total = await self.leaderboard_repository.count()

            logfire.info("Leaderboard page built", count=len(entries), total=total)
            return LeaderboardPage(
                entries=entries, total=total, limit=limit, offset=offset
            )
