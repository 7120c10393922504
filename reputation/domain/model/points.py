"""Point balance and action log entities."""

from datetime import datetime

from pydantic import Field

from reputation.domain.model.common import DomainModel
from reputation.domain.value import ActionLogId, ActionType, ActorId

MAX_POINTS = 999_999


class PointBalance(DomainModel):
    """Accumulated reputation of one actor.

    Business rules:
    - One row per actor, created lazily on first award or first read
    - Never decreases through the ledger and never exceeds the cap
    """

    actor_id: ActorId
    points: int = Field(default=0, ge=0, le=MAX_POINTS)
    updated_at: datetime


class ActionLogEntry(DomainModel):
    """Immutable record of one award attempt.

    Entries with ``points_awarded == 0`` are kept: they still count towards
    the diminishing-returns window.
    """

    id: ActionLogId
    actor_id: ActorId
    action_type: ActionType
    reference_id: str = Field(min_length=1, max_length=255)
    points_awarded: int = Field(ge=0)
    created_at: datetime
