"""
Shared pytest fixtures and configuration for cadence tests.

This module provides:
- State cleanup fixtures for test isolation (settings cache, seeded
  random sources, structlog context)
- A fixed clock and a seeded random generator so schedule construction
  is deterministic

Usage:
    Fixtures are auto-discovered by pytest. Use them as function arguments:

    def test_forced_start(clock, t0):
        schedule = every_with_initial("1m", "10s", clock=clock)
        ...
"""

import random
import sys
from datetime import UTC, datetime
from pathlib import Path
from typing import Callable, Generator

import pytest
import structlog

# Ensure cadence package is importable
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from cadence.core.logging import clear_context
from cadence.core.scheduling import reset_random_sources
from cadence.core.settings import clear_settings_cache


# =============================================================================
# Test Markers Configuration
# =============================================================================


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Mark all tests without explicit markers as unit tests."""
    for item in items:
        markers = {mark.name for mark in item.iter_markers()}
        if not markers.intersection({"unit", "slow"}):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Isolation Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def clean_state_fixture() -> Generator[None, None, None]:
    """
    Reset process-wide state before and after each test.

    Settings are cached, seeded random sources are shared per seed,
    structlog context lives in contextvars, and configure_logging() replaces
    the global structlog configuration; any of them would otherwise leak
    between tests.
    """
    clear_settings_cache()
    reset_random_sources()
    clear_context()
    structlog.reset_defaults()
    yield
    clear_settings_cache()
    reset_random_sources()
    clear_context()
    structlog.reset_defaults()


# =============================================================================
# Clock and Randomness Fixtures
# =============================================================================


@pytest.fixture
def t0() -> datetime:
    """Construction time with a non-zero sub-second component (12:00:03.420)."""
    return datetime(2025, 6, 15, 12, 0, 3, 420000, tzinfo=UTC)


@pytest.fixture
def t0_truncated(t0: datetime) -> datetime:
    """``t0`` with its sub-second component stripped."""
    return t0.replace(microsecond=0)


@pytest.fixture
def clock(t0: datetime) -> Callable[[], datetime]:
    """Clock frozen at ``t0``."""
    return lambda: t0


@pytest.fixture
def rng() -> random.Random:
    """Seeded generator for reproducible randomized offsets."""
    return random.Random(1234)
