"""In-memory leaderboard repository for testing."""

from typing import List, Optional

from reputation.domain.model import LeaderboardEntry
from reputation.domain.repository.leaderboard import LeaderboardRepository
from reputation.domain.value import ActorId

from .point_ledger import InMemoryPointLedgerRepository


class InMemoryLeaderboardRepository(LeaderboardRepository):
    """Leaderboard over the balances of an in-memory ledger."""

    def __init__(self, ledger: InMemoryPointLedgerRepository) -> None:
        self._ledger = ledger
        self._display_names: dict[ActorId, str] = {}

    def set_display_name(self, actor_id: ActorId, name: str) -> None:
        """Stand-in for the platform's users table."""
        self._display_names[actor_id] = name

    async def find_points(self, actor_id: ActorId) -> Optional[int]:
        """Return the actor's points, or None without a balance."""
        balance = await self._ledger.find_balance(actor_id)
        return balance.points if balance else None

    async def count_above(self, points: int) -> int:
        """Count actors with strictly more points."""
        return sum(1 for b in self._ledger.balances() if b.points > points)

    async def find_page(self, limit: int, offset: int) -> List[LeaderboardEntry]:
        """Return ranked entries (competition ranking)."""
        balances = sorted(
            self._ledger.balances(), key=lambda b: (-b.points, b.actor_id)
        )

        entries = []
        for position, balance in enumerate(balances):
            if position > 0 and balance.points == balances[position - 1].points:
                rank = entries[-1].rank
            else:
                rank = position + 1
            entries.append(
                LeaderboardEntry(
                    actor_id=balance.actor_id,
                    display_name=self._display_names.get(balance.actor_id),
                    points=balance.points,
                    rank=rank,
                )
            )

        return entries[offset : offset + limit]

    async def count(self) -> int:
        """Count actors holding a balance."""
        return len(self._ledger.balances())
