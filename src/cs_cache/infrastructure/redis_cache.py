"""RedisCacheAdapter — CacheAdapterProtocol over redis.asyncio.

Connection and timeout errors are translated into CacheUnavailableError so
the accessor can degrade to store-only service. Socket timeouts come from
settings.REDIS_SOCKET_TIMEOUT_SECONDS (see redis_client.get_redis).

The client decodes replies as UTF-8; a value that is not valid UTF-8 was not
written by this adapter and reads as a miss.
"""

import logging

import redis.asyncio as aioredis
from redis.exceptions import RedisError

from src.cs_common.errors import CacheUnavailableError

logger = logging.getLogger(__name__)

_UNAVAILABLE = (RedisError, OSError, TimeoutError)


class RedisCacheAdapter:
    def __init__(self, client: aioredis.Redis) -> None:
        self._client = client

    async def get(self, key: str) -> str | None:
        try:
            return await self._client.get(key)
        except UnicodeDecodeError:
            logger.warning("Non-UTF-8 cache entry, treating as miss: key=%s", key)
            return None
        except _UNAVAILABLE as exc:
            raise CacheUnavailableError(f"GET {key} failed: {exc}") from exc

    async def set(self, key: str, value: str, ttl_seconds: int) -> None:
        try:
            await self._client.setex(key, ttl_seconds, value)
        except _UNAVAILABLE as exc:
            raise CacheUnavailableError(f"SETEX {key} failed: {exc}") from exc

    async def delete(self, key: str) -> None:
        try:
            await self._client.delete(key)
        except _UNAVAILABLE as exc:
            raise CacheUnavailableError(f"DEL {key} failed: {exc}") from exc
