"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from reputation.domain.model import Vote
from reputation.domain.value import ActorId, VotableRef


class VoteRepository(ABC):
    """Repository for live votes.

    At most one vote exists per (votable, voter).
    """

    @abstractmethod
    async def find(self, votable: VotableRef, voter_id: ActorId) -> Optional[Vote]:
        """Find a voter's live vote on a votable.

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def upsert(self, vote: Vote) -> Vote:
        """Create the vote or replace the direction of the existing one.

        Args:
            vote: The vote to store

        Returns:
            The stored vote
        """
        pass

    @abstractmethod
    async def delete(self, votable: VotableRef, voter_id: ActorId) -> bool:
        """Delete a voter's vote.

        Returns:
            True if a vote was deleted, False if none existed
        """
        pass
