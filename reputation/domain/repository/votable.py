"""Votable repository interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager
from typing import List, Optional

from reputation.domain.model import Votable
from reputation.domain.value import VotableRef


class VotableRepository(ABC):
    """Repository for vote counters and hot scores of threads and replies."""

    @abstractmethod
    def lock(self, ref: VotableRef) -> AbstractAsyncContextManager[Optional[Votable]]:
        """Hold an exclusive lock on a votable for the duration of a block.

        Yields the votable as read under the lock, or None if it does not
        exist. Vote casts on the same votable are serialized by this lock.
        """
        pass

    @abstractmethod
    async def find(self, ref: VotableRef) -> Optional[Votable]:
        """Find a votable by reference.

        Returns:
            The votable if found, None otherwise
        """
        pass

    @abstractmethod
    async def register(self, votable: Votable) -> Votable:
        """Create a votable, or refresh the reply count of an existing one.

        Vote counters and the hot score of an existing votable are left
        untouched.

        Returns:
            The stored votable
        """
        pass

    @abstractmethod
    async def apply_vote_delta(
        self, ref: VotableRef, upvote_delta: int, downvote_delta: int
    ) -> Optional[Votable]:
        """Atomically adjust vote counters, flooring each at zero.

        Returns:
            The votable after the change, or None if it does not exist
        """
        pass

    @abstractmethod
    async def update_hot_score(self, ref: VotableRef, hot_score: float) -> None:
        """Store a freshly computed hot score."""
        pass

    @abstractmethod
    async def find_threads(self, limit: int = 500, offset: int = 0) -> List[Votable]:
        """List threads in a stable order, for batch recalculation."""
        pass
