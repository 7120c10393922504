"""Hot score use cases."""

from .recalculate_hot_score import (
    RecalculateHotScoreRequest,
    RecalculateHotScoreResponse,
    RecalculateHotScoreUseCase,
)

__all__ = [
    "RecalculateHotScoreRequest",
    "RecalculateHotScoreResponse",
    "RecalculateHotScoreUseCase",
]
