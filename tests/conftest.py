"""Core test fixtures for dice tests."""

from unittest.mock import Mock

import pytest

from src.config import get_settings
from src.dice.random_source import reset_default_random_source


@pytest.fixture(autouse=True)
def fresh_defaults():
    """Clear cached settings and the shared random source around each test."""
    get_settings.cache_clear()
    reset_default_random_source()
    yield
    get_settings.cache_clear()
    reset_default_random_source()


@pytest.fixture
def scripted_rng():
    """Build a random source that returns the given values in order."""

    def _make(*values: int) -> Mock:
        rng = Mock()
        rng.randint.side_effect = list(values)
        return rng

    return _make
