"""Unit tests for RecalculateHotScoreUseCase."""

from datetime import timedelta

import pytest

from reputation.application.usecase.hot_score import (
    RecalculateHotScoreRequest,
    RecalculateHotScoreUseCase,
)
from reputation.domain.error import NotFoundError
from reputation.domain.repository import VotableRepository
from reputation.util.clock import FrozenClock
from tests.conftest import make_votable, thread_ref
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestRecalculateHotScoreUseCase:
    """Tests for RecalculateHotScoreUseCase."""

    @pytest.mark.asyncio
    async def test_single_thread_decays_over_time(self, unit_env):
        use_case = await unit_env.get(RecalculateHotScoreUseCase)
        votable_repo = await unit_env.get(VotableRepository)
        clock = await unit_env.get(FrozenClock)
        ref = thread_ref()
        await votable_repo.register(make_votable(ref, clock.now()))
        await votable_repo.apply_vote_delta(ref, 5, 0)

        fresh = await use_case.execute(RecalculateHotScoreRequest(thread_id="thread-1"))
        clock.advance(hours=10)
        stale = await use_case.execute(RecalculateHotScoreRequest(thread_id="thread-1"))

        assert fresh.refreshed == 1
        assert stale.hot_score < fresh.hot_score

    @pytest.mark.asyncio
    async def test_all_threads(self, unit_env):
        use_case = await unit_env.get(RecalculateHotScoreUseCase)
        votable_repo = await unit_env.get(VotableRepository)
        clock = await unit_env.get(FrozenClock)
        for i in range(3):
            await votable_repo.register(
                make_votable(thread_ref(f"t-{i}"), clock.now(), age=timedelta(days=i))
            )

        response = await use_case.execute(RecalculateHotScoreRequest())

        assert response.refreshed == 3
        assert response.hot_score is None

    @pytest.mark.asyncio
    async def test_missing_thread(self, unit_env):
        use_case = await unit_env.get(RecalculateHotScoreUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(RecalculateHotScoreRequest(thread_id="missing"))
