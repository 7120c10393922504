"""Point ledger domain service."""

import sys
from datetime import timedelta
from typing import List, Optional
from uuid import uuid4

import logfire

from reputation.config import PointsSettings
from reputation.domain.model import (
    ActionLogEntry,
    PointBalance,
    apply_diminishing_returns,
)
from reputation.domain.repository import PointLedgerRepository
from reputation.domain.value import ActionLogId, ActionType, ActorId
from reputation.util.clock import Clock

from .base import Service


class PointLedgerService(Service):
    """Domain service that awards reputation points.

    Every award attempt with a positive base is logged, so repeated actions
    inside the trailing window earn less (see ``ActionPolicy``).
    """

    def __init__(
        self,
        point_ledger_repository: PointLedgerRepository,
        points_settings: PointsSettings,
        clock: Clock,
    ) -> None:
        """Initialize point ledger service.

        Args:
            point_ledger_repository: Ledger repository
            points_settings: Window, cap and policy configuration
            clock: Time source
        """
        self.point_ledger_repository = point_ledger_repository
        self.points_settings = points_settings
        self.policy_table = points_settings.policy_table
        self.clock = clock

    async def award_points(
        self,
        actor_id: ActorId,
        action_type: ActionType,
        reference_id: str,
        base_points: int,
    ) -> int:
        """Award points for one action.

        Never raises: any failure is logged and turned into a zero award,
        with every write of the attempt rolled back. The caller's own
        transaction is left usable.

        Args:
            actor_id: Actor earning the points
            action_type: What the actor did, as an ``ActionType`` or its value
            reference_id: Entity the action refers to (post id, like id...)
            base_points: Configured value of the action

        Returns:
            Points actually granted (0 when withheld or on failure)
        """
        if base_points <= 0:
            return 0

        with logfire.span(
            "point_ledger.award_points",
            actor_id=actor_id,
            action_type=action_type,
            reference_id=reference_id,
            base_points=base_points,
        ):
            try:
                return await self._award(
                    actor_id, ActionType(action_type), reference_id, base_points
                )
            except Exception:
                logfire.error(
                    "Points award failed, zero by failure",
                    actor_id=actor_id,
                    action_type=action_type,
                    reference_id=reference_id,
                    _exc_info=sys.exc_info(),
                )
                return 0

    async def _award(
        self,
        actor_id: ActorId,
        action_type: ActionType,
        reference_id: str,
        base_points: int,
    ) -> int:
        now = self.clock.now()
        since = now - timedelta(seconds=self.points_settings.window_seconds)

        async with self.point_ledger_repository.serialize(actor_id):
            recent_count = await self.point_ledger_repository.count_recent_actions(
                actor_id, action_type, since
            )
            awarded = apply_diminishing_returns(
                base_points, recent_count, self.policy_table.policy_for(action_type)
            )

            await self.point_ledger_repository.append_action(
                ActionLogEntry(
                    id=ActionLogId(uuid4()),
                    actor_id=actor_id,
                    action_type=action_type,
                    reference_id=reference_id,
                    points_awarded=awarded,
                    created_at=now,
                )
            )

            if awarded == 0:
                logfire.info(
                    "Points withheld, zero by policy",
                    actor_id=actor_id,
                    action_type=action_type.value,
                    recent_count=recent_count,
                )
                return 0

            balance = await self.point_ledger_repository.credit(
                actor_id, awarded, self.points_settings.max_points, now
            )

        logfire.info(
            "Points awarded",
            actor_id=actor_id,
            action_type=action_type.value,
            points=awarded,
            recent_count=recent_count,
            balance=balance.points,
        )
        return awarded

    async def get_balance(self, actor_id: ActorId) -> PointBalance:
        """Get an actor's balance, creating it on first read.

        Args:
            actor_id: The actor's ID

        Returns:
            The actor's balance
        """
        with logfire.span("point_ledger.get_balance", actor_id=actor_id):
            return await self.point_ledger_repository.get_or_create_balance(
                actor_id, self.points_settings.initial_points, self.clock.now()
            )

    async def get_action_history(
        self,
        actor_id: ActorId,
        action_type: Optional[ActionType] = None,
        limit: int = 50,
    ) -> List[ActionLogEntry]:
        """Read an actor's audit trail, newest first."""
        return await self.point_ledger_repository.find_actions(
            actor_id, action_type=action_type, limit=limit
        )
