"""Test harness for unit and integration tests.

Integration tests assume PostgreSQL is running and migrated
(``python scripts/run_migrations.py``). Settings are loaded from environment
variables (configure via .env or export).
"""

import os

import pytest
import pytest_asyncio

from reputation.util.di import Component
from tests.di import build_test_container

requires_database = pytest.mark.skipif(
    os.getenv("REPUTATION_INTEGRATION") != "1",
    reason="set REPUTATION_INTEGRATION=1 to run against PostgreSQL",
)


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields request-scoped container for service access
    - Closes the container afterwards

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked, no database needed
        unit_env = create_env_fixture()

        # Integration tests - real persistence, assumes postgres running
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_award(unit_env):
            ledger = await unit_env.get(PointLedgerService)
            assert await ledger.award_points(...) == 10
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment
