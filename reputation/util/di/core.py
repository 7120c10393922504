"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from reputation.config import (
    LeaderboardSettings,
    PointsSettings,
    RankingSettings,
    Settings,
)
from reputation.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_points_settings(self, settings: Settings) -> PointsSettings:
        """Provide points settings."""
        return settings.points

    @provide(scope=Scope.APP)
    def provide_ranking_settings(self, settings: Settings) -> RankingSettings:
        """Provide ranking settings."""
        return settings.ranking

    @provide(scope=Scope.APP)
    def provide_leaderboard_settings(self, settings: Settings) -> LeaderboardSettings:
        """Provide leaderboard settings."""
        return settings.leaderboard
