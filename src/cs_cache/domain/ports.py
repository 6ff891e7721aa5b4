# src/cs_cache/domain/ports.py
"""Cache adapter Protocol: the key/value store the accessor sits in front of.

Implementations:
  - infrastructure/redis_cache.py   (RedisCacheAdapter)    production
  - infrastructure/memory_cache.py  (InMemoryCacheAdapter) single-process / tests

Every method may raise CacheUnavailableError; callers other than the
cache-aside accessor should not need to talk to an adapter directly.
"""

from typing import Protocol


class CacheAdapterProtocol(Protocol):
    async def get(self, key: str) -> str | None: ...

    async def set(self, key: str, value: str, ttl_seconds: int) -> None: ...

    async def delete(self, key: str) -> None: ...
