"""Cast vote use case."""

import sys
from typing import Optional

import logfire
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError

from reputation.application.usecase.base import BaseUseCase
from reputation.application.usecase.vote.parsing import (
    parse_votable_ref,
    parse_vote_type,
)
from reputation.domain.error import StorageError
from reputation.domain.service import HotScoreService, VoteService
from reputation.domain.value import ActorId, UserVote, VotableType


class CastVoteRequest(BaseModel):
    """Cast vote request.

    All fields arrive as raw strings from the request handler.
    """

    votable_type: str  # "thread" or "reply"
    votable_id: str
    voter_id: str  # Authenticated actor ID
    vote_type: str  # "upvote" or "downvote"


class CastVoteResponse(BaseModel):
    """Cast vote response."""

    votable_type: VotableType
    votable_id: str
    upvote_count: int
    downvote_count: int
    user_vote: UserVote
    hot_score: Optional[float] = None  # Set for threads only


class CastVoteUseCase(BaseUseCase):
    """Use case for voting on a thread or reply."""

    def __init__(
        self, vote_service: VoteService, hot_score_service: HotScoreService
    ) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
            hot_score_service: Hot score domain service
        """
        self.vote_service = vote_service
        self.hot_score_service = hot_score_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Thread votes refresh the thread's hot score in the same unit of work.

        Args:
            request: Cast vote request

        Returns:
            Counts after the vote, the voter's vote and the thread hot score

        Raises:
            ValidationError: If the votable type or vote type is invalid
            NotFoundError: If the votable does not exist
            StorageError: If persistence fails
        """
        ref = parse_votable_ref(request.votable_type, request.votable_id)
        vote_type = parse_vote_type(request.vote_type)

        tally = await self.vote_service.cast_vote(
            ref, ActorId(request.voter_id), vote_type
        )

        hot_score = None
        if ref.votable_type == VotableType.THREAD:
            try:
                hot_score = await self.hot_score_service.refresh(ref.votable_id)
            except SQLAlchemyError as e:
                logfire.error(
                    "Hot score refresh failed after vote",
                    votable=str(ref),
                    _exc_info=sys.exc_info(),
                )
                raise StorageError("refresh_hot_score", e) from e

        return CastVoteResponse(
            votable_type=ref.votable_type,
            votable_id=ref.votable_id,
            upvote_count=tally.upvote_count,
            downvote_count=tally.downvote_count,
            user_vote=tally.user_vote,
            hot_score=hot_score,
        )
