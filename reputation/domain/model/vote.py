"""Vote entity and the per-voter toggle state machine.

Each voter holds at most one live vote per votable. Casting the same
direction twice clears it; casting the opposite direction switches it.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from reputation.domain.model.common import DomainModel
from reputation.domain.value import ActorId, UserVote, VotableRef, VoteType


class Vote(DomainModel):
    """A live vote.

    Business rules:
    - One vote per voter per votable (primary key in storage)
    - Removing a vote deletes the row; there is no "neutral" row
    """

    votable: VotableRef
    voter_id: ActorId
    vote_type: VoteType
    created_at: datetime
    updated_at: datetime


class VoteTransition(DomainModel):
    """Outcome of casting a vote from a given state."""

    previous: Optional[VoteType]
    next: Optional[VoteType]
    upvote_delta: int
    downvote_delta: int

    @property
    def clears(self) -> bool:
        return self.next is None


def _delta(vote_type: Optional[VoteType], sign: int) -> tuple[int, int]:
    if vote_type == VoteType.UPVOTE:
        return sign, 0
    if vote_type == VoteType.DOWNVOTE:
        return 0, sign
    return 0, 0


def resolve_vote(current: Optional[VoteType], cast: VoteType) -> VoteTransition:
    """Apply one cast to the voter's current state.

    Args:
        current: The voter's live vote, or None
        cast: Direction being cast

    Returns:
        Next state and the count changes it implies
    """
    next_state = None if current == cast else cast

    up_out, down_out = _delta(current, -1)
    up_in, down_in = _delta(next_state, 1)

    return VoteTransition(
        previous=current,
        next=next_state,
        upvote_delta=up_out + up_in,
        downvote_delta=down_out + down_in,
    )


class VoteTally(DomainModel):
    """Counts on a votable after a vote, plus the caller's own vote."""

    upvote_count: int = Field(ge=0)
    downvote_count: int = Field(ge=0)
    user_vote: UserVote
