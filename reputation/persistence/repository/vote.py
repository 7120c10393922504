"""PostgreSQL implementation of Vote repository."""

from typing import Optional

from sqlalchemy import and_, delete, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from reputation.domain.model import Vote
from reputation.domain.repository import VoteRepository
from reputation.domain.value import ActorId, VotableRef
from reputation.persistence.mappers import row_to_vote, vote_to_dict
from reputation.persistence.tables import votes_table


def _vote_key(votable: VotableRef, voter_id: ActorId):
    return and_(
        votes_table.c.votable_type == votable.votable_type.value,
        votes_table.c.votable_id == votable.votable_id,
        votes_table.c.voter_id == voter_id,
    )


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find(self, votable: VotableRef, voter_id: ActorId) -> Optional[Vote]:
        """Find a voter's vote on a votable."""
        stmt = select(votes_table).where(_vote_key(votable, voter_id))
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def upsert(self, vote: Vote) -> Vote:
        """Insert the vote or switch its direction on the primary key."""
        stmt = pg_insert(votes_table).values(**vote_to_dict(vote))
        stmt = stmt.on_conflict_do_update(
            index_elements=[
                votes_table.c.votable_type,
                votes_table.c.votable_id,
                votes_table.c.voter_id,
            ],
            set_={
                "vote_type": stmt.excluded.vote_type,
                "updated_at": stmt.excluded.updated_at,
            },
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return vote

    async def delete(self, votable: VotableRef, voter_id: ActorId) -> bool:
        """Delete a voter's vote."""
        stmt = delete(votes_table).where(_vote_key(votable, voter_id))
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
