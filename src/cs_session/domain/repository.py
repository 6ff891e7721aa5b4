"""Session store Protocol — externally owned session state keyed by id.

Implementations raise SessionStoreUnavailableError when the backing store
cannot be reached.
"""

from typing import Any, Protocol


class SessionStoreProtocol(Protocol):
    async def load(self, session_id: str) -> dict[str, Any] | None: ...

    async def save(self, session_id: str, data: dict[str, Any], ttl_seconds: int) -> None: ...

    async def destroy(self, session_id: str) -> None: ...
