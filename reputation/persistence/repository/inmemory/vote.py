"""In-memory vote repository for testing."""

from typing import Optional

from reputation.domain.model import Vote
from reputation.domain.repository.vote import VoteRepository
from reputation.domain.value import ActorId, VotableRef


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self) -> None:
        self._votes: dict[tuple[str, str, ActorId], Vote] = {}

    @staticmethod
    def _key(votable: VotableRef, voter_id: ActorId) -> tuple[str, str, ActorId]:
        return (votable.votable_type.value, votable.votable_id, voter_id)

    async def find(self, votable: VotableRef, voter_id: ActorId) -> Optional[Vote]:
        """Find a voter's vote on a votable."""
        return self._votes.get(self._key(votable, voter_id))

    async def upsert(self, vote: Vote) -> Vote:
        """Create or replace a vote."""
        self._votes[self._key(vote.votable, vote.voter_id)] = vote
        return vote

    async def delete(self, votable: VotableRef, voter_id: ActorId) -> bool:
        """Delete a voter's vote."""
        return self._votes.pop(self._key(votable, voter_id), None) is not None

    async def count_by_votable(self, votable: VotableRef) -> dict[str, int]:
        """Count live votes per direction (used to check counter drift)."""
        counts = {"upvote": 0, "downvote": 0}
        for vote in self._votes.values():
            if vote.votable == votable:
                counts[vote.vote_type.value] += 1
        return counts

    def snapshot(self, votable: VotableRef) -> list[Vote]:
        """Copy of every live vote on a votable."""
        return [vote for vote in self._votes.values() if vote.votable == votable]

    def restore(self, votable: VotableRef, votes: list[Vote]) -> None:
        """Replace every vote on a votable with a snapshot."""
        for key in [k for k, v in self._votes.items() if v.votable == votable]:
            del self._votes[key]
        for vote in votes:
            self._votes[self._key(vote.votable, vote.voter_id)] = vote
