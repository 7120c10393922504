"""Application layer DI providers."""

from dishka import Scope, provide

from reputation.application.usecase.hot_score import RecalculateHotScoreUseCase
from reputation.application.usecase.points import RecordActionUseCase
from reputation.application.usecase.standing import (
    GetActorStandingUseCase,
    GetLeaderboardUseCase,
)
from reputation.application.usecase.vote import CastVoteUseCase, GetUserVoteUseCase
from reputation.config import PointsSettings
from reputation.domain.service import (
    HotScoreService,
    PointLedgerService,
    RankingService,
    VoteService,
)
from reputation.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Points use cases
    @provide(scope=Scope.REQUEST)
    def get_record_action_use_case(
        self,
        point_ledger_service: PointLedgerService,
        points_settings: PointsSettings,
    ) -> RecordActionUseCase:
        """Provide record action use case."""
        return RecordActionUseCase(
            point_ledger_service=point_ledger_service,
            points_settings=points_settings,
        )

    # Standing use cases
    @provide(scope=Scope.REQUEST)
    def get_actor_standing_use_case(
        self,
        point_ledger_service: PointLedgerService,
        ranking_service: RankingService,
    ) -> GetActorStandingUseCase:
        """Provide get actor standing use case."""
        return GetActorStandingUseCase(
            point_ledger_service=point_ledger_service,
            ranking_service=ranking_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_leaderboard_use_case(
        self, ranking_service: RankingService
    ) -> GetLeaderboardUseCase:
        """Provide get leaderboard use case."""
        return GetLeaderboardUseCase(ranking_service=ranking_service)

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(
        self, vote_service: VoteService, hot_score_service: HotScoreService
    ) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(
            vote_service=vote_service, hot_score_service=hot_score_service
        )

    @provide(scope=Scope.REQUEST)
    def get_user_vote_use_case(self, vote_service: VoteService) -> GetUserVoteUseCase:
        """Provide get user vote use case."""
        return GetUserVoteUseCase(vote_service=vote_service)

    # Hot score use cases
    @provide(scope=Scope.REQUEST)
    def get_recalculate_hot_score_use_case(
        self, hot_score_service: HotScoreService
    ) -> RecalculateHotScoreUseCase:
        """Provide recalculate hot score use case."""
        return RecalculateHotScoreUseCase(hot_score_service=hot_score_service)
