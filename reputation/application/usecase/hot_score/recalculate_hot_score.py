"""Recalculate hot score use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from reputation.application.usecase.base import BaseUseCase
from reputation.domain.service import HotScoreService
from reputation.domain.value import VotableId


class RecalculateHotScoreRequest(BaseModel):
    """Recalculate hot score request.

    Leave ``thread_id`` unset to recalculate every thread.
    """

    thread_id: Optional[str] = None


class RecalculateHotScoreResponse(BaseModel):
    """Recalculate hot score response."""

    refreshed: int
    hot_score: Optional[float] = None  # Set when a single thread was requested


class RecalculateHotScoreUseCase(BaseUseCase):
    """Use case for recomputing cached hot scores."""

    def __init__(self, hot_score_service: HotScoreService) -> None:
        """Initialize recalculate hot score use case.

        Args:
            hot_score_service: Hot score domain service
        """
        self.hot_score_service = hot_score_service

    async def execute(
        self, request: RecalculateHotScoreRequest
    ) -> RecalculateHotScoreResponse:
        """Execute recalculate hot score flow.

        Raises:
            NotFoundError: If a single thread was requested and does not exist
        """
        with logfire.span("recalculate_hot_score.execute", thread_id=request.thread_id):
            if request.thread_id is not None:
                score = await self.hot_score_service.refresh(
                    VotableId(request.thread_id)
                )
                return RecalculateHotScoreResponse(refreshed=1, hot_score=score)

            refreshed = await self.hot_score_service.refresh_all()
            return RecalculateHotScoreResponse(refreshed=refreshed)
