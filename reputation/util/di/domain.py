"""Domain layer DI providers."""

from dishka import Scope, provide

from reputation.config import LeaderboardSettings, PointsSettings, RankingSettings
from reputation.domain.repository import (
    LeaderboardRepository,
    PointLedgerRepository,
    VotableRepository,
    VoteRepository,
)
from reputation.domain.service import (
    HotScoreCalculator,
    HotScoreService,
    PointLedgerService,
    RankingService,
    VoteService,
)
from reputation.util.clock import Clock
from reputation.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each unit of work gets fresh service instances sharing one transaction.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_hot_score_calculator(
        self, ranking_settings: RankingSettings
    ) -> HotScoreCalculator:
        """Provide the stateless hot score formula."""
        return HotScoreCalculator(ranking_settings=ranking_settings)

    @provide
    def get_point_ledger_service(
        self,
        point_ledger_repository: PointLedgerRepository,
        points_settings: PointsSettings,
        clock: Clock,
    ) -> PointLedgerService:
        """Provide point ledger domain service."""
        return PointLedgerService(
            point_ledger_repository=point_ledger_repository,
            points_settings=points_settings,
            clock=clock,
        )

    @provide
    def get_ranking_service(
        self,
        leaderboard_repository: LeaderboardRepository,
        leaderboard_settings: LeaderboardSettings,
    ) -> RankingService:
        """Provide ranking domain service."""
        return RankingService(
            leaderboard_repository=leaderboard_repository,
            leaderboard_settings=leaderboard_settings,
        )

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        votable_repository: VotableRepository,
        clock: Clock,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            votable_repository=votable_repository,
            clock=clock,
        )

    @provide
    def get_hot_score_service(
        self,
        votable_repository: VotableRepository,
        calculator: HotScoreCalculator,
        clock: Clock,
    ) -> HotScoreService:
        """Provide hot score domain service."""
        return HotScoreService(
            votable_repository=votable_repository,
            calculator=calculator,
            clock=clock,
        )
