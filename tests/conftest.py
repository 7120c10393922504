"""Test configuration and helpers."""

from datetime import datetime, timedelta

import logfire

from reputation.domain.model import Votable
from reputation.domain.value import VotableId, VotableRef, VotableType

# Keep spans and logs local; nothing is exported during tests
logfire.configure(send_to_logfire=False, console=False)


def thread_ref(thread_id: str = "thread-1") -> VotableRef:
    """Reference to a thread."""
    return VotableRef(votable_type=VotableType.THREAD, votable_id=VotableId(thread_id))


def reply_ref(reply_id: str = "reply-1") -> VotableRef:
    """Reference to a reply."""
    return VotableRef(votable_type=VotableType.REPLY, votable_id=VotableId(reply_id))


def make_votable(
    ref: VotableRef,
    now: datetime,
    age: timedelta = timedelta(0),
    reply_count: int = 0,
) -> Votable:
    """Build a votable created ``age`` before ``now``."""
    return Votable(ref=ref, created_at=now - age, reply_count=reply_count)
