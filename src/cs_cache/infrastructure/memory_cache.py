"""In-process cache adapter with per-key TTL.

Used when CACHE_BACKEND=memory (single worker, no Redis) and as the real
cache in unit and HTTP tests. Expired entries are dropped lazily on get().

The clock is injectable so tests can step past a TTL without sleeping:

    now = [0.0]
    cache = InMemoryCacheAdapter(clock=lambda: now[0])
    await cache.set("post:1", "{}", ttl_seconds=5)
    now[0] = 6.0
    assert await cache.get("post:1") is None
"""

import logging
import time
from collections.abc import Callable

logger = logging.getLogger(__name__)


class InMemoryCacheAdapter:
    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._store: dict[str, tuple[str, float]] = {}

    async def get(self, key: str) -> str | None:
        entry = self._store.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if self._clock() >= expires_at:
            del self._store[key]
            logger.debug("Cache entry expired: key=%s", key)
            return None
        return value

    async def set(self, key: str, value: str, ttl_seconds: int) -> None:
        self._store[key] = (value, self._clock() + ttl_seconds)

    async def delete(self, key: str) -> None:
        self._store.pop(key, None)

    def keys(self) -> list[str]:
        """Keys currently held, expired or not."""
        return list(self._store)
