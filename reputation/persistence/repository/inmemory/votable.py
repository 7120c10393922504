"""In-memory votable repository for testing."""

import asyncio
from collections import defaultdict
from contextlib import asynccontextmanager
from typing import AsyncIterator, List, Optional

from reputation.domain.model import Votable
from reputation.domain.repository.votable import VotableRepository
from reputation.domain.value import VotableRef

from .vote import InMemoryVoteRepository


class InMemoryVotableRepository(VotableRepository):
    """In-memory implementation of VotableRepository for testing.

    Given the vote repository, a failed locked block also rolls back the
    votes written inside it, as the surrounding transaction would.
    """

    def __init__(self, votes: Optional[InMemoryVoteRepository] = None) -> None:
        self._votes = votes
        self._votables: dict[tuple[str, str], Votable] = {}
        self._locks: defaultdict[tuple[str, str], asyncio.Lock] = defaultdict(
            asyncio.Lock
        )

    @staticmethod
    def _key(ref: VotableRef) -> tuple[str, str]:
        return (ref.votable_type.value, ref.votable_id)

    @asynccontextmanager
    async def lock(self, ref: VotableRef) -> AsyncIterator[Optional[Votable]]:
        """Hold the votable's lock; undo its writes if the block fails."""
        key = self._key(ref)
        async with self._locks[key]:
            snapshot = self._votables.get(key)
            votes = self._votes.snapshot(ref) if self._votes is not None else None
            try:
                yield snapshot
            except BaseException:
                if snapshot is not None:
                    self._votables[key] = snapshot
                if votes is not None:
                    self._votes.restore(ref, votes)
                raise

    async def find(self, ref: VotableRef) -> Optional[Votable]:
        """Find a votable by reference."""
        return self._votables.get(self._key(ref))

    async def register(self, votable: Votable) -> Votable:
        """Create a votable, or update the reply count of an existing one."""
        key = self._key(votable.ref)
        existing = self._votables.get(key)
        if existing is not None:
            votable = existing.model_copy(update={"reply_count": votable.reply_count})
        self._votables[key] = votable
        return votable

    async def apply_vote_delta(
        self, ref: VotableRef, upvote_delta: int, downvote_delta: int
    ) -> Optional[Votable]:
        """Adjust counters, flooring each at zero."""
        key = self._key(ref)
        current = self._votables.get(key)
        if current is None:
            return None

        # Yield between read and write, like a round trip to the database
        await asyncio.sleep(0)
        updated = current.model_copy(
            update={
                "upvote_count": max(current.upvote_count + upvote_delta, 0),
                "downvote_count": max(current.downvote_count + downvote_delta, 0),
            }
        )
        self._votables[key] = updated
        return updated

    async def update_hot_score(self, ref: VotableRef, hot_score: float) -> None:
        """Store a thread's hot score."""
        key = self._key(ref)
        current = self._votables.get(key)
        if current is not None:
            self._votables[key] = current.model_copy(update={"hot_score": hot_score})

    async def find_threads(self, limit: int = 500, offset: int = 0) -> List[Votable]:
        """List threads ordered by creation time."""
        threads = sorted(
            (v for v in self._votables.values() if v.is_thread),
            key=lambda v: (v.created_at, v.ref.votable_id),
        )
        return threads[offset : offset + limit]
