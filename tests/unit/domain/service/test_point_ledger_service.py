"""Unit tests for PointLedgerService."""

import asyncio

import pytest

from reputation.config import PointsSettings
from reputation.domain.model import ActionPolicy
from reputation.domain.service import PointLedgerService
from reputation.domain.value import ActionType, ActorId
from reputation.persistence.repository.inmemory import InMemoryPointLedgerRepository
from reputation.util.clock import FrozenClock
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()

ALICE = ActorId("alice")
BOB = ActorId("bob")


def make_ledger(
    repo: InMemoryPointLedgerRepository, clock: FrozenClock, **settings
) -> PointLedgerService:
    """Ledger with comment_created limited to F=5, R=10, M=0.5."""
    points_settings = PointsSettings(
        policies={
            ActionType.COMMENT_CREATED: ActionPolicy(
                full_threshold=5, reduced_threshold=10, reduced_multiplier=0.5
            )
        },
        **settings,
    )
    return PointLedgerService(
        point_ledger_repository=repo, points_settings=points_settings, clock=clock
    )


@pytest.fixture
def clock():
    return FrozenClock()


@pytest.fixture
def repo():
    return InMemoryPointLedgerRepository()


class TestAwardPoints:
    """Tests for award_points."""

    @pytest.mark.asyncio
    async def test_window_steps_down_then_stops(self, repo, clock):
        """Actions 1-5 earn 10, 6-10 earn 5, later ones earn nothing."""
        ledger = make_ledger(repo, clock)

        awards = [
            await ledger.award_points(
                ALICE, ActionType.COMMENT_CREATED, f"comment-{i}", 10
            )
            for i in range(12)
        ]

        assert awards == [10] * 5 + [5] * 5 + [0, 0]
        balance = await repo.find_balance(ALICE)
        assert balance.points == 75

    @pytest.mark.asyncio
    async def test_zero_awards_are_logged_and_count_towards_window(self, repo, clock):
        """Withheld awards still write a log entry."""
        ledger = make_ledger(repo, clock)

        for i in range(12):
            await ledger.award_points(ALICE, ActionType.COMMENT_CREATED, f"c-{i}", 10)

        actions = await ledger.get_action_history(ALICE, ActionType.COMMENT_CREATED)
        assert len(actions) == 12
        assert sorted(a.points_awarded for a in actions) == [0, 0] + [5] * 5 + [10] * 5

    @pytest.mark.asyncio
    async def test_window_expires(self, repo, clock):
        """Actions older than the window no longer reduce awards."""
        ledger = make_ledger(repo, clock)
        for i in range(10):
            await ledger.award_points(ALICE, ActionType.COMMENT_CREATED, f"c-{i}", 10)
        assert await ledger.award_points(
            ALICE, ActionType.COMMENT_CREATED, "late", 10
        ) == 0

        clock.advance(minutes=61)

        assert await ledger.award_points(
            ALICE, ActionType.COMMENT_CREATED, "next-hour", 10
        ) == 10

    @pytest.mark.asyncio
    async def test_window_is_per_actor_and_action_type(self, repo, clock):
        ledger = make_ledger(repo, clock)
        for i in range(10):
            await ledger.award_points(ALICE, ActionType.COMMENT_CREATED, f"c-{i}", 10)

        assert await ledger.award_points(BOB, ActionType.COMMENT_CREATED, "b", 10) == 10
        assert await ledger.award_points(ALICE, ActionType.POST_CREATED, "p", 5) == 5

    @pytest.mark.asyncio
    async def test_unlisted_action_type_always_full(self, repo, clock):
        ledger = make_ledger(repo, clock)

        awards = [
            await ledger.award_points(ALICE, ActionType.BLOG_FEATURED, f"b-{i}", 50)
            for i in range(30)
        ]

        assert awards == [50] * 30

    @pytest.mark.asyncio
    @pytest.mark.parametrize("base_points", [0, -5])
    async def test_non_positive_base_writes_nothing(self, repo, clock, base_points):
        ledger = make_ledger(repo, clock)

        awarded = await ledger.award_points(
            ALICE, ActionType.COMMENT_CREATED, "c", base_points
        )

        assert awarded == 0
        assert await repo.find_actions(ALICE) == []
        assert await repo.find_balance(ALICE) is None

    @pytest.mark.asyncio
    async def test_balance_is_capped(self, repo, clock):
        """Balances never exceed max_points; new rows start capped too."""
        ledger = make_ledger(repo, clock, max_points=100)

        await ledger.award_points(ALICE, ActionType.BLOG_FEATURED, "b-1", 60)
        await ledger.award_points(ALICE, ActionType.BLOG_FEATURED, "b-2", 60)
        await ledger.award_points(BOB, ActionType.BLOG_FEATURED, "b-3", 150)

        assert (await repo.find_balance(ALICE)).points == 100
        assert (await repo.find_balance(BOB)).points == 100

    @pytest.mark.asyncio
    async def test_failure_returns_zero_and_rolls_back(
        self, repo, clock, monkeypatch
    ):
        """A storage failure yields 0 and leaves no partial writes behind."""
        ledger = make_ledger(repo, clock)
        await ledger.award_points(ALICE, ActionType.COMMENT_CREATED, "ok", 10)

        async def failing_credit(*args, **kwargs):
            raise RuntimeError("connection reset")

        monkeypatch.setattr(repo, "credit", failing_credit)

        awarded = await ledger.award_points(
            ALICE, ActionType.COMMENT_CREATED, "boom", 10
        )

        assert awarded == 0
        assert [a.reference_id for a in await repo.find_actions(ALICE)] == ["ok"]
        assert (await repo.find_balance(ALICE)).points == 10

    @pytest.mark.asyncio
    async def test_invalid_reference_returns_zero(self, repo, clock):
        """Bad input is absorbed like any other failure."""
        ledger = make_ledger(repo, clock)

        assert await ledger.award_points(ALICE, ActionType.POST_CREATED, "", 5) == 0
        assert await repo.find_balance(ALICE) is None

    @pytest.mark.asyncio
    async def test_raw_action_type_value_is_accepted(self, repo, clock):
        ledger = make_ledger(repo, clock)

        awarded = await ledger.award_points(ALICE, "comment_created", "c-1", 2)

        assert awarded == 2
        [action] = await repo.find_actions(ALICE)
        assert action.action_type == ActionType.COMMENT_CREATED

    @pytest.mark.asyncio
    async def test_unknown_action_type_returns_zero(self, repo, clock):
        """An unrecognised action type is absorbed and writes nothing."""
        ledger = make_ledger(repo, clock)

        awarded = await ledger.award_points(ALICE, "comment_deleted", "c-1", 2)

        assert awarded == 0
        assert await repo.find_actions(ALICE) == []
        assert await repo.find_balance(ALICE) is None

    @pytest.mark.asyncio
    async def test_concurrent_awards_match_a_serial_order(self, repo, clock):
        """Concurrent awards for one actor see each other's log entries."""
        ledger = make_ledger(repo, clock)

        awards = await asyncio.gather(
            *(
                ledger.award_points(ALICE, ActionType.COMMENT_CREATED, f"c-{i}", 10)
                for i in range(15)
            )
        )

        assert sorted(awards, reverse=True) == [10] * 5 + [5] * 5 + [0] * 5
        assert (await repo.find_balance(ALICE)).points == 75
        assert len(await repo.find_actions(ALICE)) == 15


class TestGetBalance:
    """Tests for get_balance."""

    @pytest.mark.asyncio
    async def test_first_read_creates_seeded_balance(self, repo, clock):
        ledger = make_ledger(repo, clock, initial_points=25)

        balance = await ledger.get_balance(ALICE)

        assert balance.points == 25
        assert balance.updated_at == clock.now()
        assert await repo.find_balance(ALICE) == balance

    @pytest.mark.asyncio
    async def test_existing_balance_is_not_reseeded(self, repo, clock):
        ledger = make_ledger(repo, clock, initial_points=25)
        await ledger.award_points(ALICE, ActionType.BLOG_FEATURED, "b", 50)

        balance = await ledger.get_balance(ALICE)

        assert balance.points == 50


class TestLedgerFromContainer:
    """The container wires the ledger to the shared in-memory store."""

    @pytest.mark.asyncio
    async def test_award_with_default_settings(self, unit_env):
        ledger = await unit_env.get(PointLedgerService)

        awarded = await ledger.award_points(
            ALICE, ActionType.LIKE_RECEIVED, "like-1", 1
        )
        balance = await ledger.get_balance(ALICE)

        assert awarded == 1
        assert balance.points == 1
