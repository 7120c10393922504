"""Standing and leaderboard use cases."""

from .get_actor_standing import (
    GetActorStandingRequest,
    GetActorStandingResponse,
    GetActorStandingUseCase,
)
from .get_leaderboard import (
    GetLeaderboardRequest,
    GetLeaderboardResponse,
    GetLeaderboardUseCase,
    LeaderboardItem,
)

__all__ = [
    "GetActorStandingRequest",
    "GetActorStandingResponse",
    "GetActorStandingUseCase",
    "GetLeaderboardRequest",
    "GetLeaderboardResponse",
    "GetLeaderboardUseCase",
    "LeaderboardItem",
]
