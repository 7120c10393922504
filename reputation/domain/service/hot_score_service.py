"""Hot score calculation for discussion threads.

    score = (upvotes - downvotes + reply_count * reply_weight)
            / (age_hours + time_offset) ** gravity

With the default settings (reply weight 0.5, offset 2, gravity 1.5) a thread
keeps roughly a third of its score after four hours.
"""

from datetime import datetime, timezone

import logfire

from reputation.config import RankingSettings
from reputation.domain.error import NotFoundError
from reputation.domain.repository import VotableRepository
from reputation.domain.value import VotableId, VotableRef, VotableType
from reputation.util.clock import Clock

from .base import Service


def _as_utc(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


class HotScoreCalculator:
    """Pure time-decayed ranking formula."""

    def __init__(self, ranking_settings: RankingSettings) -> None:
        self.ranking_settings = ranking_settings

    def compute(
        self,
        upvotes: int,
        downvotes: int,
        reply_count: int,
        created_at: datetime,
        now: datetime,
    ) -> float:
        """Compute a thread's hot score.

        A ``created_at`` in the future is treated as age zero. Naive
        datetimes are taken to be UTC.

        Args:
            upvotes: Upvote count
            downvotes: Downvote count
            reply_count: Number of replies
            created_at: Thread creation time
            now: Reference time

        Returns:
            The hot score (negative for net-downvoted threads)
        """
        age_hours = (_as_utc(now) - _as_utc(created_at)).total_seconds() / 3600
        if age_hours < 0:
            logfire.warn(
                "Thread created in the future, clamping age",
                created_at=created_at.isoformat(),
                now=now.isoformat(),
            )
            age_hours = 0.0

        settings = self.ranking_settings
        numerator = upvotes - downvotes + reply_count * settings.reply_weight
        return numerator / (age_hours + settings.time_offset) ** settings.gravity


class HotScoreService(Service):
    """Recomputes the cached hot score stored on threads."""

    def __init__(
        self,
        votable_repository: VotableRepository,
        calculator: HotScoreCalculator,
        clock: Clock,
    ) -> None:
        """Initialize hot score service.

        Args:
            votable_repository: Votable repository
            calculator: Hot score formula
            clock: Time source
        """
        self.votable_repository = votable_repository
        self.calculator = calculator
        self.clock = clock

    async def refresh(self, thread_id: VotableId) -> float:
        """Recompute and store one thread's hot score.

        Args:
            thread_id: The thread's ID

        Returns:
            The new hot score

        Raises:
            NotFoundError: If the thread does not exist
        """
        ref = VotableRef(votable_type=VotableType.THREAD, votable_id=thread_id)
        with logfire.span("hot_score.refresh", thread_id=thread_id):
            thread = await self.votable_repository.find(ref)
            if thread is None:
                logfire.warn(
                    "Hot score refresh for non-existent thread", thread_id=thread_id
                )
                raise NotFoundError("Thread", thread_id)

            score = self.calculator.compute(
                thread.upvote_count,
                thread.downvote_count,
                thread.reply_count,
                thread.created_at,
                self.clock.now(),
            )
            await self.votable_repository.update_hot_score(ref, score)
            return score

    async def refresh_all(self, batch_size: int = 500) -> int:
        """Recompute every thread's hot score against one reference time.

        Args:
            batch_size: Threads read per query

        Returns:
            Number of threads refreshed
        """
        now = self.clock.now()
        refreshed = 0
        offset = 0

        with logfire.span("hot_score.refresh_all", batch_size=batch_size):
            while True:
                threads = await self.votable_repository.find_threads(
                    limit=batch_size, offset=offset
                )
                for thread in threads:
                    score = self.calculator.compute(
                        thread.upvote_count,
                        thread.downvote_count,
                        thread.reply_count,
                        thread.created_at,
                        now,
                    )
                    await self.votable_repository.update_hot_score(thread.ref, score)
                refreshed += len(threads)

                if len(threads) < batch_size:
                    break
                offset += batch_size

            logfire.info("Hot scores refreshed", count=refreshed)
            return refreshed
