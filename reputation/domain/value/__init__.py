"""Domain value objects for the reputation engine."""

from reputation.domain.value.identifiers import ActionLogId, ActorId, VotableId
from reputation.domain.value.types import (
    ActionType,
    PointsTier,
    UserVote,
    VotableRef,
    VotableType,
    VoteType,
)

__all__ = [
    # Identifiers
    "ActorId",
    "VotableId",
    "ActionLogId",
    # Types
    "ActionType",
    "VotableType",
    "VoteType",
    "UserVote",
    "PointsTier",
    "VotableRef",
]
