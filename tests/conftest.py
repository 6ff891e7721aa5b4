"""Shared test fixtures."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from src.cs_cache.infrastructure.memory_cache import InMemoryCacheAdapter


class FakeClock:
    """Manually advanced monotonic clock for TTL tests."""

    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def memory_cache(clock: FakeClock) -> InMemoryCacheAdapter:
    return InMemoryCacheAdapter(clock=clock)


@pytest.fixture
def db() -> MagicMock:
    """AsyncSession stand-in: repositories are mocked, only commit/rollback matter."""
    session = MagicMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    return session

