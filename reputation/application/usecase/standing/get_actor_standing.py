"""Get actor standing use case."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from reputation.application.usecase.base import BaseUseCase
from reputation.domain.model import ordinal
from reputation.domain.service import PointLedgerService, RankingService
from reputation.domain.value import ActorId, PointsTier


class GetActorStandingRequest(BaseModel):
    """Get actor standing request."""

    actor_id: str


class GetActorStandingResponse(BaseModel):
    """An actor's balance, rank and badge tier."""

    actor_id: str
    points: int
    rank: Optional[int]
    rank_label: str  # "1st", "2nd", ...
    tier: PointsTier
    updated_at: datetime


class GetActorStandingUseCase(BaseUseCase):
    """Use case for reading an actor's points and rank.

    Reading a standing creates the actor's balance if it does not exist yet,
    so a freshly seen actor is ranked like everyone else.
    """

    def __init__(
        self,
        point_ledger_service: PointLedgerService,
        ranking_service: RankingService,
    ) -> None:
        """Initialize get actor standing use case.

        Args:
            point_ledger_service: Point ledger domain service
            ranking_service: Ranking domain service
        """
        self.point_ledger_service = point_ledger_service
        self.ranking_service = ranking_service

    async def execute(
        self, request: GetActorStandingRequest
    ) -> GetActorStandingResponse:
        """Execute get actor standing flow.

        Args:
            request: Get actor standing request

        Returns:
            Balance, rank and presentation helpers
        """
        actor_id = ActorId(request.actor_id)
        balance = await self.point_ledger_service.get_balance(actor_id)
        rank = await self.ranking_service.rank(actor_id)

        return GetActorStandingResponse(
            actor_id=balance.actor_id,
            points=balance.points,
            rank=rank,
            rank_label=ordinal(rank),
            tier=PointsTier.for_points(balance.points),
            updated_at=balance.updated_at,
        )
