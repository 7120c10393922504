"""Record action use case."""

import logfire
from pydantic import BaseModel

from reputation.application.usecase.base import BaseUseCase
from reputation.config import PointsSettings
from reputation.domain.service import PointLedgerService
from reputation.domain.value import ActionType, ActorId


class RecordActionRequest(BaseModel):
    """Record action request."""

    actor_id: str
    action_type: ActionType
    reference_id: str  # ID of the post, comment, like... the action refers to


class RecordActionResponse(BaseModel):
    """Record action response."""

    actor_id: str
    action_type: ActionType
    points_awarded: int


class RecordActionUseCase(BaseUseCase):
    """Use case for awarding the configured points for a user action."""

    def __init__(
        self, point_ledger_service: PointLedgerService, points_settings: PointsSettings
    ) -> None:
        """Initialize record action use case.

        Args:
            point_ledger_service: Point ledger domain service
            points_settings: Base points per action type
        """
        self.point_ledger_service = point_ledger_service
        self.points_settings = points_settings

    async def execute(self, request: RecordActionRequest) -> RecordActionResponse:
        """Execute record action flow.

        Action types without configured base points earn nothing.

        Args:
            request: Record action request

        Returns:
            Points actually awarded
        """
        base_points = self.points_settings.base_points.get(request.action_type, 0)
        if base_points <= 0:
            logfire.debug(
                "Action type not reputable", action_type=request.action_type.value
            )

        awarded = await self.point_ledger_service.award_points(
            ActorId(request.actor_id),
            request.action_type,
            request.reference_id,
            base_points,
        )

        return RecordActionResponse(
            actor_id=request.actor_id,
            action_type=request.action_type,
            points_awarded=awarded,
        )
