"""PostgreSQL implementation of Votable repository."""

from contextlib import asynccontextmanager
from typing import AsyncIterator, List, Optional

from sqlalchemy import and_, func, select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from reputation.domain.model import Votable
from reputation.domain.repository import VotableRepository
from reputation.domain.value import VotableRef, VotableType
from reputation.persistence.mappers import row_to_votable, votable_to_dict
from reputation.persistence.tables import votables_table


def _votable_key(ref: VotableRef):
    return and_(
        votables_table.c.votable_type == ref.votable_type.value,
        votables_table.c.votable_id == ref.votable_id,
    )


class PostgresVotableRepository(VotableRepository):
    """PostgreSQL implementation of VotableRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @asynccontextmanager
    async def lock(self, ref: VotableRef) -> AsyncIterator[Optional[Votable]]:
        """Lock the votable row with SELECT ... FOR UPDATE.

        The row lock is held until the surrounding transaction ends.
        """
        stmt = select(votables_table).where(_votable_key(ref)).with_for_update()
        result = await self.session.execute(stmt)
        row = result.fetchone()
        yield row_to_votable(row._asdict()) if row else None

    async def find(self, ref: VotableRef) -> Optional[Votable]:
        """Find a votable by reference."""
        stmt = select(votables_table).where(_votable_key(ref))
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_votable(row._asdict()) if row else None

    async def register(self, votable: Votable) -> Votable:
        """Insert the votable, or update only its reply count."""
        stmt = pg_insert(votables_table).values(**votable_to_dict(votable))
        stmt = stmt.on_conflict_do_update(
            index_elements=[votables_table.c.votable_type, votables_table.c.votable_id],
            set_={"reply_count": stmt.excluded.reply_count},
        ).returning(*votables_table.c)

        result = await self.session.execute(stmt)
        return row_to_votable(result.one()._asdict())

    async def apply_vote_delta(
        self, ref: VotableRef, upvote_delta: int, downvote_delta: int
    ) -> Optional[Votable]:
        """Adjust counters in one UPDATE, flooring each at zero."""
        stmt = (
            update(votables_table)
            .where(_votable_key(ref))
            .values(
                upvote_count=func.greatest(
                    votables_table.c.upvote_count + upvote_delta, 0
                ),
                downvote_count=func.greatest(
                    votables_table.c.downvote_count + downvote_delta, 0
                ),
            )
            .returning(*votables_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_votable(row._asdict()) if row else None

    async def update_hot_score(self, ref: VotableRef, hot_score: float) -> None:
        """Store a thread's hot score."""
        stmt = (
            update(votables_table)
            .where(_votable_key(ref))
            .values(hot_score=hot_score)
        )
        await self.session.execute(stmt)

    async def find_threads(self, limit: int = 500, offset: int = 0) -> List[Votable]:
        """List threads ordered by creation time."""
        stmt = (
            select(votables_table)
            .where(votables_table.c.votable_type == VotableType.THREAD.value)
            .order_by(votables_table.c.created_at, votables_table.c.votable_id)
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_votable(row._asdict()) for row in result.fetchall()]
