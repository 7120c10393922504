"""Votable entity.

Threads and replies are owned by the forum; the engine only maintains
their vote counters and, for threads, the cached hot score.
"""

from pydantic import AwareDatetime, Field

from reputation.domain.model.common import DomainModel
from reputation.domain.value import VotableRef, VotableType


class Votable(DomainModel):
    """Vote counters and ranking inputs of a thread or reply."""

    ref: VotableRef
    upvote_count: int = Field(default=0, ge=0)
    downvote_count: int = Field(default=0, ge=0)
    reply_count: int = Field(default=0, ge=0)
    created_at: AwareDatetime
    hot_score: float = 0.0

    @property
    def is_thread(self) -> bool:
        return self.ref.votable_type == VotableType.THREAD
