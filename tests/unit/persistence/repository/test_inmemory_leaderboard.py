"""Unit tests for the in-memory ledger and leaderboard repositories."""

from datetime import datetime, timezone

import pytest

from reputation.domain.value import ActorId
from reputation.persistence.repository.inmemory import (
    InMemoryLeaderboardRepository,
    InMemoryPointLedgerRepository,
)

NOW = datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)


class TestInMemoryLeaderboard:
    """The in-memory leaderboard must rank like SQL RANK()."""

    @pytest.mark.asyncio
    async def test_competition_ranking(self):
        ledger = InMemoryPointLedgerRepository()
        leaderboard = InMemoryLeaderboardRepository(ledger)
        for actor_id, points in [("d", 10), ("a", 50), ("c", 30), ("b", 50), ("e", 10)]:
            await ledger.credit(ActorId(actor_id), points, 999_999, NOW)

        entries = await leaderboard.find_page(limit=10, offset=0)

        assert [(e.actor_id, e.rank) for e in entries] == [
            ("a", 1),
            ("b", 1),
            ("c", 3),
            ("d", 4),
            ("e", 4),
        ]
        assert await leaderboard.count_above(30) == 2
        assert await leaderboard.count() == 5


class TestInMemoryPointLedger:
    """Savepoint emulation of the in-memory ledger."""

    @pytest.mark.asyncio
    async def test_failed_block_only_undoes_its_own_actor(self):
        ledger = InMemoryPointLedgerRepository()
        await ledger.credit(ActorId("a"), 5, 999_999, NOW)

        with pytest.raises(RuntimeError):
            async with ledger.serialize(ActorId("a")):
                await ledger.credit(ActorId("a"), 7, 999_999, NOW)
                await ledger.credit(ActorId("b"), 3, 999_999, NOW)
                raise RuntimeError("boom")

        assert (await ledger.find_balance(ActorId("a"))).points == 5
        assert (await ledger.find_balance(ActorId("b"))).points == 3
