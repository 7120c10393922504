"""PostgreSQL implementation of PointLedger repository."""

from contextlib import asynccontextmanager
from datetime import datetime
from typing import AsyncIterator, List, Optional

import logfire
from sqlalchemy import and_, func, insert, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from reputation.domain.model import ActionLogEntry, PointBalance
from reputation.domain.repository import PointLedgerRepository
from reputation.domain.value import ActionType, ActorId
from reputation.persistence.mappers import (
    action_log_entry_to_dict,
    row_to_action_log_entry,
    row_to_point_balance,
)
from reputation.persistence.tables import point_actions_log_table, point_balances_table


class PostgresPointLedgerRepository(PointLedgerRepository):
    """PostgreSQL implementation of PointLedgerRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @asynccontextmanager
    async def serialize(self, actor_id: ActorId) -> AsyncIterator[None]:
        """Run the block in a SAVEPOINT holding the actor's advisory lock.

        The advisory lock is transaction scoped, so it is released when the
        surrounding transaction commits or rolls back.
        """
        async with self.session.begin_nested():
            await self.session.execute(
                select(func.pg_advisory_xact_lock(func.hashtext(actor_id)))
            )
            yield

    async def count_recent_actions(
        self, actor_id: ActorId, action_type: ActionType, since: datetime
    ) -> int:
        """Count log entries of one type inside the window."""
        stmt = (
            select(func.count())
            .select_from(point_actions_log_table)
            .where(
                and_(
                    point_actions_log_table.c.actor_id == actor_id,
                    point_actions_log_table.c.action_type == action_type.value,
                    point_actions_log_table.c.created_at >= since,
                )
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def append_action(self, entry: ActionLogEntry) -> ActionLogEntry:
        """Append an entry to the action log."""
        stmt = insert(point_actions_log_table).values(**action_log_entry_to_dict(entry))
        await self.session.execute(stmt)
        return entry

    async def credit(
        self, actor_id: ActorId, points: int, cap: int, at: datetime
    ) -> PointBalance:
        """Add points in a single upsert, clamped to the cap."""
        stmt = pg_insert(point_balances_table).values(
            actor_id=actor_id, points=min(points, cap), updated_at=at
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[point_balances_table.c.actor_id],
            set_={
                "points": func.least(
                    point_balances_table.c.points + stmt.excluded.points, cap
                ),
                "updated_at": stmt.excluded.updated_at,
            },
        ).returning(*point_balances_table.c)

        result = await self.session.execute(stmt)
        return row_to_point_balance(result.one()._asdict())

    async def find_balance(self, actor_id: ActorId) -> Optional[PointBalance]:
        """Find an actor's balance."""
        stmt = select(point_balances_table).where(
            point_balances_table.c.actor_id == actor_id
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_point_balance(row._asdict()) if row else None

    async def get_or_create_balance(
        self, actor_id: ActorId, initial_points: int, at: datetime
    ) -> PointBalance:
        """Insert the seed row unless one exists, then read the balance."""
        stmt = (
            pg_insert(point_balances_table)
            .values(actor_id=actor_id, points=initial_points, updated_at=at)
            .on_conflict_do_nothing(index_elements=[point_balances_table.c.actor_id])
            .returning(*point_balances_table.c)
        )
        created = (await self.session.execute(stmt)).fetchone()
        if created is not None:
            logfire.info("Point balance created", actor_id=actor_id)
            return row_to_point_balance(created._asdict())

        # Row already existed; the conflicting insert returns nothing
        existing = await self.session.execute(
            select(point_balances_table).where(
                point_balances_table.c.actor_id == actor_id
            )
        )
        return row_to_point_balance(existing.one()._asdict())

    async def find_actions(
        self,
        actor_id: ActorId,
        action_type: Optional[ActionType] = None,
        limit: int = 50,
    ) -> List[ActionLogEntry]:
        """List an actor's log entries, newest first."""
        stmt = select(point_actions_log_table).where(
            point_actions_log_table.c.actor_id == actor_id
        )
        if action_type is not None:
            stmt = stmt.where(
                point_actions_log_table.c.action_type == action_type.value
            )
        stmt = stmt.order_by(point_actions_log_table.c.created_at.desc()).limit(limit)

        result = await self.session.execute(stmt)
        return [row_to_action_log_entry(row._asdict()) for row in result.fetchall()]
