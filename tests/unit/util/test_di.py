"""Unit tests for provider selection."""

import pytest

from reputation.util.di import (
    ClockProvider,
    PersistenceProvider,
    ProdClockProvider,
    ProdConfigProvider,
    ProdPersistenceProvider,
    get_provider,
)
from reputation.util.error import DependencyInjectionError
from tests.di import MockClockProvider, MockPersistenceProvider, build_test_container


def test_concrete_provider_is_used_as_is():
    assert get_provider(ProdConfigProvider) is ProdConfigProvider


@pytest.mark.parametrize(
    "base, prod, mock",
    [
        (ClockProvider, ProdClockProvider, MockClockProvider),
        (PersistenceProvider, ProdPersistenceProvider, MockPersistenceProvider),
    ],
)
def test_mockable_component_selection(base, prod, mock):
    assert get_provider(base, use_mock=False) is prod
    assert get_provider(base, use_mock=True) is mock


def test_unknown_component_rejected():
    with pytest.raises(DependencyInjectionError, match="Unknown components"):
        build_test_container(unmock={"bluesky"})
