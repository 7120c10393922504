"""Points use cases."""

from .record_action import (
    RecordActionRequest,
    RecordActionResponse,
    RecordActionUseCase,
)

__all__ = [
    "RecordActionRequest",
    "RecordActionResponse",
    "RecordActionUseCase",
]
