"""Get leaderboard use case."""

from typing import Optional

from pydantic import BaseModel

from reputation.application.usecase.base import BaseUseCase
from reputation.domain.model import ordinal
from reputation.domain.service import RankingService
from reputation.domain.value import PointsTier


class LeaderboardItem(BaseModel):
    """Leaderboard row in response."""

    actor_id: str
    display_name: Optional[str]
    points: int
    rank: int
    rank_label: str
    tier: PointsTier


class GetLeaderboardRequest(BaseModel):
    """Get leaderboard request.

    ``limit`` defaults to the configured page size; values above the
    configured maximum are capped rather than rejected.
    """

    limit: Optional[int] = None
    offset: int = 0


class GetLeaderboardResponse(BaseModel):
    """Get leaderboard response."""

    entries: list[LeaderboardItem]
    total: int
    limit: int
    offset: int


class GetLeaderboardUseCase(BaseUseCase):
    """Use case for listing the leaderboard."""

    def __init__(self, ranking_service: RankingService) -> None:
        """Initialize get leaderboard use case.

        Args:
            ranking_service: Ranking domain service
        """
        self.ranking_service = ranking_service

    async def execute(self, request: GetLeaderboardRequest) -> GetLeaderboardResponse:
        """Execute get leaderboard flow.

        Args:
            request: Pagination parameters

        Returns:
            One page of ranked actors

        Raises:
            ValidationError: If limit < 1 or offset < 0
        """
        page = await self.ranking_service.leaderboard(
            limit=request.limit, offset=request.offset
        )

        return GetLeaderboardResponse(
            entries=[
                LeaderboardItem(
                    actor_id=entry.actor_id,
                    display_name=entry.display_name,
                    points=entry.points,
                    rank=entry.rank,
                    rank_label=ordinal(entry.rank),
                    tier=PointsTier.for_points(entry.points),
                )
                for entry in page.entries
            ],
            total=page.total,
            limit=page.limit,
            offset=page.offset,
        )
