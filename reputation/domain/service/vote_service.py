"""Vote domain service."""

import sys
from datetime import datetime
from typing import Optional

import logfire
from sqlalchemy.exc import SQLAlchemyError

from reputation.domain.error import NotFoundError, StorageError, ValidationError
from reputation.domain.model import Votable, Vote, VoteTally, resolve_vote
from reputation.domain.repository import VotableRepository, VoteRepository
from reputation.domain.value import ActorId, UserVote, VotableRef, VoteType
from reputation.util.clock import Clock

from .base import Service


def _not_found(ref: VotableRef) -> NotFoundError:
    return NotFoundError(ref.votable_type.value.capitalize(), ref.votable_id)


class VoteService(Service):
    """Domain service for votes on threads and replies."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        votable_repository: VotableRepository,
        clock: Clock,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            votable_repository: Votable repository
            clock: Time source
        """
        self.vote_repository = vote_repository
        self.votable_repository = votable_repository
        self.clock = clock

    async def cast_vote(
        self, ref: VotableRef, voter_id: ActorId, vote_type: VoteType
    ) -> VoteTally:
        """Cast a vote with toggle semantics.

        Casting the voter's current direction again removes the vote;
        casting the other direction switches it. Counts change by the
        matching deltas and never drop below zero.

        Args:
            ref: Thread or reply being voted on
            voter_id: Voter's ID
            vote_type: Direction cast

        Returns:
            Counts after the vote and the voter's resulting vote

        Raises:
            NotFoundError: If the votable does not exist
            StorageError: If persistence fails
        """
        with logfire.span(
            "vote.cast_vote",
            votable=str(ref),
            voter_id=voter_id,
            vote_type=vote_type.value,
        ):
            try:
                return await self._cast(ref, voter_id, vote_type)
            except SQLAlchemyError as e:
                logfire.error(
                    "Vote storage failure",
                    votable=str(ref),
                    voter_id=voter_id,
                    _exc_info=sys.exc_info(),
                )
                raise StorageError("cast_vote", e) from e

    async def _cast(
        self, ref: VotableRef, voter_id: ActorId, vote_type: VoteType
    ) -> VoteTally:
        async with self.votable_repository.lock(ref) as votable:
            if votable is None:
                logfire.warn("Vote on non-existent votable", votable=str(ref))
                raise _not_found(ref)

            existing = await self.vote_repository.find(ref, voter_id)
            transition = resolve_vote(
                existing.vote_type if existing else None, vote_type
            )
            now = self.clock.now()

            if transition.clears:
                await self.vote_repository.delete(ref, voter_id)
            else:
                await self.vote_repository.upsert(
                    Vote(
                        votable=ref,
                        voter_id=voter_id,
                        vote_type=transition.next,
                        created_at=existing.created_at if existing else now,
                        updated_at=now,
                    )
                )

            updated = await self.votable_repository.apply_vote_delta(
                ref, transition.upvote_delta, transition.downvote_delta
            )
            if updated is None:
                raise _not_found(ref)

        logfire.info(
            "Vote cast",
            votable=str(ref),
            voter_id=voter_id,
            previous=transition.previous.value if transition.previous else None,
            next=transition.next.value if transition.next else None,
            upvote_count=updated.upvote_count,
            downvote_count=updated.downvote_count,
        )
        return VoteTally(
            upvote_count=updated.upvote_count,
            downvote_count=updated.downvote_count,
            user_vote=UserVote.from_vote_type(transition.next),
        )

    async def get_user_vote(
        self, ref: VotableRef, voter_id: Optional[ActorId]
    ) -> UserVote:
        """Get a voter's current vote.

        Args:
            ref: Thread or reply
            voter_id: Voter's ID, or None for anonymous viewers

        Returns:
            The voter's vote, ``UserVote.NONE`` if absent or anonymous

        Raises:
            NotFoundError: If the votable does not exist
        """
        if await self.votable_repository.find(ref) is None:
            raise _not_found(ref)
        if voter_id is None:
            return UserVote.NONE

        vote = await self.vote_repository.find(ref, voter_id)
        return UserVote.from_vote_type(vote.vote_type if vote else None)

    async def register_votable(
        self,
        ref: VotableRef,
        created_at: datetime,
        reply_count: int = 0,
    ) -> Votable:
        """Make a thread or reply votable, or update its reply count.

        Called by the forum when content is created and when replies are
        added to a thread.

        Raises:
            ValidationError: If created_at has no timezone
        """
        if created_at.tzinfo is None:
            raise ValidationError("created_at must be timezone-aware")

        with logfire.span("vote.register_votable", votable=str(ref)):
            return await self.votable_repository.register(
                Votable(ref=ref, created_at=created_at, reply_count=reply_count)
            )
