"""Pytest fixtures for timewise tests."""

import pytest

from timewise import clock

# 2024-06-15T12:00:00Z
NOW_MS = 1718452800000


@pytest.fixture(autouse=True)
def reset_clock():
    """Make sure no test leaks a pinned clock into the next one."""
    clock.reset_clock()
    yield
    clock.reset_clock()


@pytest.fixture
def frozen_now():
    """Pin the clock at 2024-06-15T12:00:00Z and return that epoch-ms value.

    Usage:
        def test_something(frozen_now):
            assert Instant.now().millis == frozen_now
    """
    clock.set_clock(lambda: NOW_MS)
    return NOW_MS
