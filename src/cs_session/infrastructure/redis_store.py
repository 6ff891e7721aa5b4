"""RedisSessionStore — session data as JSON under sess:<id> with a TTL.

The TTL is reset on every save, so an active session keeps living while an
abandoned one expires on its own.
"""

import json
import logging
from typing import Any

import redis.asyncio as aioredis
from redis.exceptions import RedisError

from src.cs_common.errors import SessionStoreUnavailableError
from src.cs_session.domain.models import session_key

logger = logging.getLogger(__name__)

_UNAVAILABLE = (RedisError, OSError, TimeoutError)


class RedisSessionStore:
    def __init__(self, client: aioredis.Redis) -> None:
        self._client = client

    async def load(self, session_id: str) -> dict[str, Any] | None:
        try:
            raw = await self._client.get(session_key(session_id))
        except _UNAVAILABLE as exc:
            raise SessionStoreUnavailableError() from exc
        if raw is None:
            return None
        try:
            data = json.loads(raw)
        except ValueError:
            logger.warning("Discarding undecodable session: id=%s", session_id)
            return None
        return data if isinstance(data, dict) else None

    async def save(self, session_id: str, data: dict[str, Any], ttl_seconds: int) -> None:
        try:
            await self._client.setex(session_key(session_id), ttl_seconds, json.dumps(data))
        except _UNAVAILABLE as exc:
            raise SessionStoreUnavailableError() from exc

    async def destroy(self, session_id: str) -> None:
        try:
            await self._client.delete(session_key(session_id))
        except _UNAVAILABLE as exc:
            raise SessionStoreUnavailableError() from exc
