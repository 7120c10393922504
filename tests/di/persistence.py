"""Mock persistence providers for testing."""

from dishka import Scope, provide

from reputation.domain.repository import (
    LeaderboardRepository,
    PointLedgerRepository,
    VotableRepository,
    VoteRepository,
)
from reputation.persistence.repository.inmemory import (
    InMemoryLeaderboardRepository,
    InMemoryPointLedgerRepository,
    InMemoryVotableRepository,
    InMemoryVoteRepository,
)
from reputation.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses REQUEST scope to ensure test isolation - each test gets fresh repositories.
    The leaderboard reads the balances of the same in-memory ledger, and the
    votable repository shares the vote store so failed votes roll back.
    """

    __is_mock__ = True

    @provide(scope=Scope.REQUEST)
    def get_in_memory_point_ledger(self) -> InMemoryPointLedgerRepository:
        """Provide in-memory point ledger."""
        return InMemoryPointLedgerRepository()

    @provide(scope=Scope.REQUEST)
    def get_point_ledger_repository(
        self, ledger: InMemoryPointLedgerRepository
    ) -> PointLedgerRepository:
        """Provide the in-memory ledger as PointLedgerRepository."""
        return ledger

    @provide(scope=Scope.REQUEST)
    def get_in_memory_leaderboard(
        self, ledger: InMemoryPointLedgerRepository
    ) -> InMemoryLeaderboardRepository:
        """Provide in-memory leaderboard over the ledger's balances."""
        return InMemoryLeaderboardRepository(ledger)

    @provide(scope=Scope.REQUEST)
    def get_leaderboard_repository(
        self, leaderboard: InMemoryLeaderboardRepository
    ) -> LeaderboardRepository:
        """Provide the in-memory leaderboard as LeaderboardRepository."""
        return leaderboard

    @provide(scope=Scope.REQUEST)
    def get_in_memory_votes(self) -> InMemoryVoteRepository:
        """Provide in-memory vote repository."""
        return InMemoryVoteRepository()

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self, votes: InMemoryVoteRepository) -> VoteRepository:
        """Provide the in-memory votes as VoteRepository."""
        return votes

    @provide(scope=Scope.REQUEST)
    def get_votable_repository(
        self, votes: InMemoryVoteRepository
    ) -> VotableRepository:
        """Provide in-memory votable repository that rolls back votes with it."""
        return InMemoryVotableRepository(votes)
