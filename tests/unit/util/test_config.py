"""Unit tests for settings loading."""

import pytest
from pydantic import ValidationError

from reputation.config import DatabaseSettings, PointsSettings, Settings
from reputation.domain.value import ActionType
from reputation.persistence.database import create_engine
from reputation.util.error import ConfigurationError


class TestSettings:
    """Tests for environment-driven configuration."""

    def test_defaults(self):
        settings = Settings()

        assert settings.points.window_seconds == 3600
        assert settings.points.max_points == 999_999
        assert settings.ranking.gravity == 1.5
        assert settings.ranking.time_offset == 2.0
        assert settings.ranking.reply_weight == 0.5
        assert settings.leaderboard.default_limit == 50
        assert settings.leaderboard.max_limit == 100

    def test_nested_env_override(self, monkeypatch):
        monkeypatch.setenv("POINTS__WINDOW_SECONDS", "1800")
        monkeypatch.setenv("RANKING__GRAVITY", "1.8")
        monkeypatch.setenv("DATABASE__URL", "postgresql+asyncpg://u:p@db:5432/rep")

        settings = Settings()

        assert settings.points.window_seconds == 1800
        assert settings.ranking.gravity == 1.8
        assert settings.database_url == "postgresql+asyncpg://u:p@db:5432/rep"

    def test_partial_base_points_override_keeps_other_defaults(self, monkeypatch):
        monkeypatch.setenv("POINTS__BASE_POINTS", '{"blog_created": 15}')

        base_points = Settings().points.base_points

        assert base_points[ActionType.BLOG_CREATED] == 15
        assert base_points[ActionType.BLOG_FEATURED] == 50

    def test_policy_override(self, monkeypatch):
        monkeypatch.setenv(
            "POINTS__POLICIES",
            '{"comment_received": {"full_threshold": 1, "reduced_threshold": 2,'
            ' "reduced_multiplier": 0.25}}',
        )

        table = Settings().points.policy_table

        assert table.policy_for(ActionType.COMMENT_RECEIVED).reduced_multiplier == 0.25
        assert table.policy_for(ActionType.LIKE_RECEIVED) is not None

    def test_initial_points_must_fit_under_cap(self):
        with pytest.raises(ValidationError):
            PointsSettings(max_points=10, initial_points=20)

    def test_non_postgres_url_rejected(self):
        settings = Settings(database=DatabaseSettings(url="sqlite+aiosqlite:///rep.db"))

        with pytest.raises(ConfigurationError, match="sqlite"):
            create_engine(settings)
