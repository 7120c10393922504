"""In-memory point ledger repository for testing."""

import asyncio
from collections import defaultdict
from contextlib import asynccontextmanager
from datetime import datetime
from typing import AsyncIterator, List, Optional

from reputation.domain.model import ActionLogEntry, PointBalance
from reputation.domain.repository.point_ledger import PointLedgerRepository
from reputation.domain.value import ActionType, ActorId


class InMemoryPointLedgerRepository(PointLedgerRepository):
    """In-memory implementation of PointLedgerRepository for testing.

    Per-actor ``asyncio.Lock`` objects stand in for the advisory lock and a
    snapshot of the actor's state stands in for the savepoint.
    """

    def __init__(self) -> None:
        self._balances: dict[ActorId, PointBalance] = {}
        self._actions: list[ActionLogEntry] = []
        self._locks: defaultdict[ActorId, asyncio.Lock] = defaultdict(asyncio.Lock)

    @asynccontextmanager
    async def serialize(self, actor_id: ActorId) -> AsyncIterator[None]:
        """Hold the actor's lock; undo the actor's writes if the block fails."""
        async with self._locks[actor_id]:
            balance = self._balances.get(actor_id)
            action_count = len(self._actions)
            try:
                yield
            except BaseException:
                if balance is None:
                    self._balances.pop(actor_id, None)
                else:
                    self._balances[actor_id] = balance
                self._actions[action_count:] = [
                    a for a in self._actions[action_count:] if a.actor_id != actor_id
                ]
                raise

    async def count_recent_actions(
        self, actor_id: ActorId, action_type: ActionType, since: datetime
    ) -> int:
        """Count log entries of one type inside the window."""
        # Yield so that unserialized callers would interleave here
        await asyncio.sleep(0)
        return sum(
            1
            for a in self._actions
            if a.actor_id == actor_id
            and a.action_type == action_type
            and a.created_at >= since
        )

    async def append_action(self, entry: ActionLogEntry) -> ActionLogEntry:
        """Append an entry to the action log."""
        self._actions.append(entry)
        return entry

    async def credit(
        self, actor_id: ActorId, points: int, cap: int, at: datetime
    ) -> PointBalance:
        """Add points, clamped to the cap."""
        current = self._balances.get(actor_id)
        total = (current.points if current else 0) + points
        balance = PointBalance(actor_id=actor_id, points=min(total, cap), updated_at=at)
        self._balances[actor_id] = balance
        return balance

    async def find_balance(self, actor_id: ActorId) -> Optional[PointBalance]:
        """Find an actor's balance."""
        return self._balances.get(actor_id)

    async def get_or_create_balance(
        self, actor_id: ActorId, initial_points: int, at: datetime
    ) -> PointBalance:
        """Return the balance, seeding it if missing."""
        return self._balances.setdefault(
            actor_id,
            PointBalance(actor_id=actor_id, points=initial_points, updated_at=at),
        )

    async def find_actions(
        self,
        actor_id: ActorId,
        action_type: Optional[ActionType] = None,
        limit: int = 50,
    ) -> List[ActionLogEntry]:
        """List an actor's log entries, newest first."""
        actions = [
            a
            for a in self._actions
            if a.actor_id == actor_id
            and (action_type is None or a.action_type == action_type)
        ]
        actions.sort(key=lambda a: a.created_at, reverse=True)
        return actions[:limit]

    def balances(self) -> List[PointBalance]:
        """All stored balances (used by the in-memory leaderboard)."""
        return list(self._balances.values())
