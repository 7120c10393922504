"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from reputation.config import Settings
from reputation.domain.repository import (
    LeaderboardRepository,
    PointLedgerRepository,
    VotableRepository,
    VoteRepository,
)
from reputation.persistence.database import create_engine, create_session_factory
from reputation.persistence.repository import (
    PostgresLeaderboardRepository,
    PostgresPointLedgerRepository,
    PostgresVotableRepository,
    PostgresVoteRepository,
)
from reputation.util.di.base import ProviderBase
from reputation.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the container closes."""
        engine = create_engine(settings)
        # Instrument SQLAlchemy for observability
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is automatically committed at the end of the request
        if no exception occurred, or rolled back if an exception was raised.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.debug("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_point_ledger_repository(
        self, session: AsyncSession
    ) -> PointLedgerRepository:
        """Provide PointLedger repository."""
        return PostgresPointLedgerRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_leaderboard_repository(
        self, session: AsyncSession
    ) -> LeaderboardRepository:
        """Provide Leaderboard repository."""
        return PostgresLeaderboardRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self, session: AsyncSession) -> VoteRepository:
        """Provide Vote repository."""
        return PostgresVoteRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_votable_repository(self, session: AsyncSession) -> VotableRepository:
        """Provide Votable repository."""
        return PostgresVotableRepository(session)
