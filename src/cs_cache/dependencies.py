"""FastAPI dependencies for the cache layer.

CACHE_BACKEND=redis  → RedisCacheAdapter over the shared pool
CACHE_BACKEND=memory → one process-wide InMemoryCacheAdapter
"""

from typing import Annotated

from fastapi import Depends

from config.settings import settings
from src.cs_cache.application.accessor import CacheAsideAccessor
from src.cs_cache.domain.ports import CacheAdapterProtocol
from src.cs_cache.infrastructure.memory_cache import InMemoryCacheAdapter
from src.cs_cache.infrastructure.redis_cache import RedisCacheAdapter
from src.cs_common.redis_client import get_redis

_memory_cache = InMemoryCacheAdapter()


async def get_cache_adapter() -> CacheAdapterProtocol:
    if settings.CACHE_BACKEND == "memory":
        return _memory_cache
    return RedisCacheAdapter(await get_redis())


async def get_cache_accessor(
    cache: Annotated[CacheAdapterProtocol, Depends(get_cache_adapter)],
) -> CacheAsideAccessor:
    return CacheAsideAccessor(cache)
