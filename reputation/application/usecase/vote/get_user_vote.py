"""Get user vote use case."""

from typing import Optional

from pydantic import BaseModel

from reputation.application.usecase.base import BaseUseCase
from reputation.application.usecase.vote.parsing import parse_votable_ref
from reputation.domain.service import VoteService
from reputation.domain.value import ActorId, UserVote


class GetUserVoteRequest(BaseModel):
    """Get user vote request."""

    votable_type: str
    votable_id: str
    voter_id: Optional[str] = None  # None for anonymous viewers


class GetUserVoteResponse(BaseModel):
    """Get user vote response."""

    user_vote: UserVote


class GetUserVoteUseCase(BaseUseCase):
    """Use case for reading the viewer's vote on a thread or reply."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize get user vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: GetUserVoteRequest) -> GetUserVoteResponse:
        """Execute get user vote flow.

        Raises:
            ValidationError: If the votable type is invalid
            NotFoundError: If the votable does not exist
        """
        ref = parse_votable_ref(request.votable_type, request.votable_id)
        voter_id = ActorId(request.voter_id) if request.voter_id else None

        user_vote = await self.vote_service.get_user_vote(ref, voter_id)
        return GetUserVoteResponse(user_vote=user_vote)
