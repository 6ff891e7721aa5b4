"""CacheAsideAccessor — read-through / invalidate-on-write between a handler,
the relational store and a cache adapter.

read():  cache hit → (value, CACHE), loader not called. An optional
         decode() checks a hit against the expected shape; an entry that
         is not JSON or that decode() rejects is treated as a miss.
         miss      → loader(); None means not found and nothing is cached;
                     otherwise the JSON snapshot is stored with the TTL and
                     (value, DATABASE) is returned.
write(): mutation first. If it raises, no key is touched. On success every
         key in invalidate_keys is deleted, best-effort.

Cache failures (CacheUnavailableError) are logged and swallowed: reads fall
back to the store, writes keep their result. Store failures propagate.

Known race: a read-miss that loaded data before a concurrent write committed
can refill the key after that write's invalidation. The entry is then stale
until its TTL runs out; it is never a state the store did not hold.

The accessor keeps no state between calls; one instance serves all requests.
"""

import json
import logging
from collections.abc import Awaitable, Callable, Iterable
from typing import Any, TypeVar

from src.cs_cache.domain.models import CachedRead, ReadSource
from src.cs_cache.domain.ports import CacheAdapterProtocol
from src.cs_common.errors import CacheUnavailableError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CacheAsideAccessor:
    def __init__(
        self,
        cache: CacheAdapterProtocol,
        dumps: Callable[[Any], str] = json.dumps,
        loads: Callable[[str], Any] = json.loads,
    ) -> None:
        self._cache = cache
        self._dumps = dumps
        self._loads = loads

    async def read(
        self,
        key: str,
        ttl_seconds: int,
        loader: Callable[[], Awaitable[T | None]],
        decode: Callable[[Any], T] | None = None,
    ) -> CachedRead[T] | None:
        if ttl_seconds <= 0:
            raise ValueError(f"ttl_seconds must be positive, got {ttl_seconds}")

        cached = await self._cache_get(key)
        if cached is not None:
            try:
                value = self._loads(cached)
                if decode is not None:
                    value = decode(value)
            except (ValueError, TypeError):
                logger.warning("Undecodable cache entry, treating as miss: key=%s", key)
            else:
                logger.info("Cache hit: key=%s", key)
                return CachedRead(value=value, source=ReadSource.CACHE)

        logger.info("Cache miss: key=%s, loading from database", key)
        loaded = await loader()
        if loaded is None:
            return None

        await self._cache_set(key, self._dumps(loaded), ttl_seconds)
        return CachedRead(value=loaded, source=ReadSource.DATABASE)

    async def write(
        self,
        mutation: Callable[[], Awaitable[T]],
        invalidate_keys: Iterable[str],
    ) -> T:
        # Evaluate keys before the mutation so a lazy iterable can't observe it
        keys = list(invalidate_keys)
        result = await mutation()
        for key in keys:
            try:
                await self._cache.delete(key)
            except CacheUnavailableError as exc:
                logger.warning("Cache invalidation failed: key=%s (%s)", key, exc.message)
        if keys:
            logger.info("Cache invalidated: keys=%s", ",".join(keys))
        return result

    async def _cache_get(self, key: str) -> str | None:
        try:
            return await self._cache.get(key)
        except CacheUnavailableError as exc:
            logger.warning(
                "Cache lookup failed, serving from database: key=%s (%s)", key, exc.message
            )
            return None

    async def _cache_set(self, key: str, payload: str, ttl_seconds: int) -> None:
        try:
            await self._cache.set(key, payload, ttl_seconds)
        except CacheUnavailableError as exc:
            logger.warning("Cache fill failed: key=%s (%s)", key, exc.message)
