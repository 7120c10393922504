"""Point ledger repository interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager
from datetime import datetime
from typing import List, Optional

from reputation.domain.model import ActionLogEntry, PointBalance
from reputation.domain.value import ActionType, ActorId


class PointLedgerRepository(ABC):
    """Repository for the action log and point balances.

    Defines the contract for ledger persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    def serialize(self, actor_id: ActorId) -> AbstractAsyncContextManager[None]:
        """Run a block as one atomic unit, exclusive per actor.

        Concurrent blocks for the same actor run one after another. If the
        block raises, every write made inside it is rolled back while the
        caller's surrounding transaction stays usable.

        Args:
            actor_id: Actor whose ledger is being changed
        """
        pass

    @abstractmethod
    async def count_recent_actions(
        self, actor_id: ActorId, action_type: ActionType, since: datetime
    ) -> int:
        """Count log entries of one type created at or after ``since``.

        Args:
            actor_id: The actor's ID
            action_type: Action type to count
            since: Start of the trailing window (inclusive)

        Returns:
            Number of matching entries, zero-point entries included
        """
        pass

    @abstractmethod
    async def append_action(self, entry: ActionLogEntry) -> ActionLogEntry:
        """Append an entry to the action log.

        Args:
            entry: The entry to write

        Returns:
            The written entry
        """
        pass

    @abstractmethod
    async def credit(
        self, actor_id: ActorId, points: int, cap: int, at: datetime
    ) -> PointBalance:
        """Atomically add points to a balance, creating it if needed.

        The resulting balance is ``min(current + points, cap)``; a missing
        balance is created with ``min(points, cap)``.

        Args:
            actor_id: The actor's ID
            points: Positive amount to add
            cap: Maximum balance
            at: Timestamp recorded as ``updated_at``

        Returns:
            The balance after the credit
        """
        pass

    @abstractmethod
    async def find_balance(self, actor_id: ActorId) -> Optional[PointBalance]:
        """Find an actor's balance.

        Returns:
            The balance if it exists, None otherwise
        """
        pass

    @abstractmethod
    async def get_or_create_balance(
        self, actor_id: ActorId, initial_points: int, at: datetime
    ) -> PointBalance:
        """Return the balance, seeding it with ``initial_points`` if missing.

        Concurrent first reads must not create two rows or overwrite an
        award that landed in between.
        """
        pass

    @abstractmethod
    async def find_actions(
        self,
        actor_id: ActorId,
        action_type: Optional[ActionType] = None,
        limit: int = 50,
    ) -> List[ActionLogEntry]:
        """List an actor's log entries, newest first.

        Args:
            actor_id: The actor's ID
            action_type: Optional filter on action type
            limit: Maximum number of entries

        Returns:
            Matching entries ordered by ``created_at`` descending
        """
        pass
