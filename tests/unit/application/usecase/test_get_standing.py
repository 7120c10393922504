"""Unit tests for the standing and leaderboard use cases."""

import pytest

from reputation.application.usecase.standing import (
    GetActorStandingRequest,
    GetActorStandingUseCase,
    GetLeaderboardRequest,
    GetLeaderboardUseCase,
)
from reputation.domain.error import ValidationError
from reputation.domain.service import PointLedgerService
from reputation.domain.value import ActionType, ActorId, PointsTier
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def award(unit_env, actor_id: str, times: int) -> None:
    """Award 50 points (blog_featured is never reduced) ``times`` times."""
    ledger = await unit_env.get(PointLedgerService)
    for i in range(times):
        await ledger.award_points(
            ActorId(actor_id), ActionType.BLOG_FEATURED, f"{actor_id}-{i}", 50
        )


class TestGetActorStandingUseCase:
    """Tests for GetActorStandingUseCase."""

    @pytest.mark.asyncio
    async def test_new_actor_gets_seeded_balance_and_rank(self, unit_env):
        use_case = await unit_env.get(GetActorStandingUseCase)
        await award(unit_env, "veteran", 3)

        response = await use_case.execute(GetActorStandingRequest(actor_id="newcomer"))

        assert response.points == 0
        assert response.rank == 2
        assert response.rank_label == "2nd"
        assert response.tier == PointsTier.NONE

    @pytest.mark.asyncio
    async def test_leader(self, unit_env):
        use_case = await unit_env.get(GetActorStandingUseCase)
        await award(unit_env, "leader", 12)
        await award(unit_env, "runner-up", 2)

        response = await use_case.execute(GetActorStandingRequest(actor_id="leader"))

        assert response.points == 600
        assert response.rank == 1
        assert response.rank_label == "1st"
        assert response.tier == PointsTier.SILVER


class TestGetLeaderboardUseCase:
    """Tests for GetLeaderboardUseCase."""

    @pytest.mark.asyncio
    async def test_lists_ranked_actors(self, unit_env):
        use_case = await unit_env.get(GetLeaderboardUseCase)
        await award(unit_env, "a", 2)
        await award(unit_env, "b", 2)
        await award(unit_env, "c", 1)

        response = await use_case.execute(GetLeaderboardRequest())

        assert response.total == 3
        assert response.limit == 50
        assert [(e.actor_id, e.rank, e.rank_label) for e in response.entries] == [
            ("a", 1, "1st"),
            ("b", 1, "1st"),
            ("c", 3, "3rd"),
        ]
        assert response.entries[0].tier == PointsTier.BRONZE

    @pytest.mark.asyncio
    async def test_rejects_bad_pagination(self, unit_env):
        use_case = await unit_env.get(GetLeaderboardUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(GetLeaderboardRequest(limit=0))
