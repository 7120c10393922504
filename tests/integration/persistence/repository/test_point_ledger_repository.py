"""Integration tests for PostgresPointLedgerRepository and the leaderboard.

These tests run against a migrated PostgreSQL database and use fresh actor
ids so they can share a database with other data.
"""

from datetime import timedelta
from uuid import uuid4

import pytest

from reputation.domain.repository import LeaderboardRepository, PointLedgerRepository
from reputation.domain.service import PointLedgerService, RankingService
from reputation.domain.value import ActionType, ActorId
from reputation.util.clock import FrozenClock
from tests.harness import create_env_fixture, requires_database

pytestmark = requires_database

# Integration test fixture - real persistence, frozen clock
integration_env = create_env_fixture(unmock={"persistence"})


def new_actor() -> ActorId:
    return ActorId(f"it-{uuid4()}")


class TestPointLedgerRepositoryIntegration:
    """Integration tests for the ledger tables."""

    @pytest.mark.asyncio
    async def test_credit_upserts_and_caps(self, integration_env):
        repo = await integration_env.get(PointLedgerRepository)
        clock = await integration_env.get(FrozenClock)
        actor = new_actor()

        first = await repo.credit(actor, 60, 100, clock.now())
        second = await repo.credit(actor, 60, 100, clock.now())

        assert first.points == 60
        assert second.points == 100

    @pytest.mark.asyncio
    async def test_get_or_create_does_not_overwrite(self, integration_env):
        repo = await integration_env.get(PointLedgerRepository)
        clock = await integration_env.get(FrozenClock)
        actor = new_actor()
        await repo.credit(actor, 40, 999_999, clock.now())

        balance = await repo.get_or_create_balance(actor, 0, clock.now())

        assert balance.points == 40

    @pytest.mark.asyncio
    async def test_get_or_create_seeds_new_balance(self, integration_env):
        repo = await integration_env.get(PointLedgerRepository)
        clock = await integration_env.get(FrozenClock)
        actor = new_actor()

        balance = await repo.get_or_create_balance(actor, 5, clock.now())

        assert balance.actor_id == actor
        assert balance.points == 5
        assert (await repo.find_balance(actor)).points == 5

    @pytest.mark.asyncio
    async def test_window_count_uses_created_at(self, integration_env):
        ledger = await integration_env.get(PointLedgerService)
        repo = await integration_env.get(PointLedgerRepository)
        clock = await integration_env.get(FrozenClock)
        actor = new_actor()

        for i in range(3):
            await ledger.award_points(actor, ActionType.POST_CREATED, f"p-{i}", 5)

        since = clock.now() - timedelta(hours=1)
        posts = await repo.count_recent_actions(actor, ActionType.POST_CREATED, since)
        blogs = await repo.count_recent_actions(actor, ActionType.BLOG_CREATED, since)
        assert (posts, blogs) == (3, 0)

    @pytest.mark.asyncio
    async def test_failed_award_rolls_back_to_savepoint(
        self, integration_env, monkeypatch
    ):
        """A failing award leaves earlier work in the transaction intact."""
        ledger = await integration_env.get(PointLedgerService)
        repo = await integration_env.get(PointLedgerRepository)
        actor = new_actor()
        assert await ledger.award_points(actor, ActionType.POST_CREATED, "ok", 5) == 5

        async def failing_credit(*args, **kwargs):
            raise RuntimeError("injected failure")

        monkeypatch.setattr(repo, "credit", failing_credit)
        assert await ledger.award_points(actor, ActionType.POST_CREATED, "bad", 5) == 0
        monkeypatch.undo()

        actions = await repo.find_actions(actor)
        assert [a.reference_id for a in actions] == ["ok"]
        assert (await repo.find_balance(actor)).points == 5


class TestLeaderboardRepositoryIntegration:
    """Integration tests for rank queries."""

    @pytest.mark.asyncio
    async def test_tied_actors_share_rank(self, integration_env):
        ledger_repo = await integration_env.get(PointLedgerRepository)
        leaderboard_repo = await integration_env.get(LeaderboardRepository)
        ranking = await integration_env.get(RankingService)
        clock = await integration_env.get(FrozenClock)
        # Far above any realistic balance so the three lead the board
        a, b, c = new_actor(), new_actor(), new_actor()
        await ledger_repo.credit(a, 999_990, 999_999, clock.now())
        await ledger_repo.credit(b, 999_990, 999_999, clock.now())
        await ledger_repo.credit(c, 999_980, 999_999, clock.now())

        rank_a, rank_b, rank_c = [await ranking.rank(x) for x in (a, b, c)]

        assert rank_a == rank_b
        assert rank_c >= rank_a + 2

        page = await leaderboard_repo.find_page(limit=100, offset=0)
        for position in range(1, len(page)):
            previous, entry = page[position - 1], page[position]
            assert entry.points <= previous.points
            if entry.points == previous.points:
                assert entry.rank == previous.rank
            else:
                assert entry.rank == position + 1
