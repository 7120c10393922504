"""PostgreSQL implementation of Leaderboard repository."""

from typing import List, Optional

import logfire
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from reputation.domain.model import LeaderboardEntry
from reputation.domain.repository import LeaderboardRepository
from reputation.domain.value import ActorId
from reputation.persistence.mappers import row_to_leaderboard_entry
from reputation.persistence.tables import point_balances_table, users_table


class PostgresLeaderboardRepository(LeaderboardRepository):
    """PostgreSQL implementation of LeaderboardRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_points(self, actor_id: ActorId) -> Optional[int]:
        """Return the actor's points, or None without a balance."""
        stmt = select(point_balances_table.c.points).where(
            point_balances_table.c.actor_id == actor_id
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def count_above(self, points: int) -> int:
        """Count actors with strictly more points."""
        stmt = (
            select(func.count())
            .select_from(point_balances_table)
            .where(point_balances_table.c.points > points)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def find_page(self, limit: int, offset: int) -> List[LeaderboardEntry]:
        """Return ranked entries using RANK() over the whole table."""
        with logfire.span(
            "leaderboard_repository.find_page", limit=limit, offset=offset
        ):
            ranked = select(
                point_balances_table.c.actor_id,
                point_balances_table.c.points,
                func.rank()
                .over(order_by=point_balances_table.c.points.desc())
                .label("rank"),
            ).subquery("ranked")

            stmt = (
                select(
                    ranked.c.actor_id,
                    ranked.c.points,
                    ranked.c.rank,
                    users_table.c.name.label("display_name"),
                )
                .select_from(
                    ranked.outerjoin(users_table, users_table.c.id == ranked.c.actor_id)
                )
                .order_by(ranked.c.rank, ranked.c.actor_id)
                .limit(limit)
                .offset(offset)
            )

            result = await self.session.execute(stmt)
            return [
                row_to_leaderboard_entry(row._asdict()) for row in result.fetchall()
            ]

    async def count(self) -> int:
        """Count actors holding a balance."""
        stmt = select(func.count()).select_from(point_balances_table)
        result = await self.session.execute(stmt)
        return result.scalar_one()
