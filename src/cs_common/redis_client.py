"""Redis client factory, shared by the post cache and the session store.

Connection lifecycle is explicit: startup and the health endpoint call
check_redis() and act on the returned status, instead of relying on
connect/error event callbacks.
"""

import logging

import redis.asyncio as aioredis
from redis.exceptions import RedisError

from config.settings import settings
from src.cs_common.enums import ConnectionStatus

logger = logging.getLogger(__name__)

_redis_pool: aioredis.Redis | None = None


async def get_redis() -> aioredis.Redis:
    """Get or create the Redis connection pool."""
    global _redis_pool  # noqa: PLW0603
    if _redis_pool is None:
        _redis_pool = aioredis.from_url(
            settings.REDIS_URL,
            decode_responses=True,
            socket_timeout=settings.REDIS_SOCKET_TIMEOUT_SECONDS,
            socket_connect_timeout=settings.REDIS_SOCKET_TIMEOUT_SECONDS,
        )
    return _redis_pool


async def check_redis() -> ConnectionStatus:
    """PING the server. Never raises; reports the outcome as a status."""
    client = await get_redis()
    try:
        pong = await client.ping()
    except (RedisError, OSError) as exc:
        logger.warning("Redis unreachable: %s", exc)
        return ConnectionStatus.DISCONNECTED
    return ConnectionStatus.CONNECTED if pong else ConnectionStatus.DISCONNECTED


async def close_redis() -> None:
    """Close the Redis connection pool."""
    global _redis_pool  # noqa: PLW0603
    if _redis_pool is not None:
        await _redis_pool.aclose()
        _redis_pool = None
