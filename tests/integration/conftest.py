"""HTTP-level fixtures.

The ASGI app runs for real (routing, middleware, exception handlers,
dependency wiring); only the two external stores are replaced through
app.dependency_overrides:
  - relational store → in-memory repositories below + a MagicMock session
  - cache / session store → InMemoryCacheAdapter + a dict-backed session store
"""

from collections.abc import AsyncGenerator
from datetime import UTC, datetime, timedelta
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import ASGITransport, AsyncClient

from src.cs_blog.api.router import get_post_repository
from src.cs_blog.domain.models import Post
from src.cs_cache.dependencies import get_cache_adapter
from src.cs_common.database import check_database, get_db_session
from src.cs_common.enums import ConnectionStatus
from src.cs_common.redis_client import check_redis
from src.cs_session.api.dependencies import get_session_store
from src.cs_todo.api.router import get_todo_service
from src.cs_todo.application.service import TodoApplicationService
from src.cs_todo.domain.models import Todo
from src.main import app

_EPOCH = datetime(2026, 1, 1, tzinfo=UTC)


class InMemoryPostRepository:
    def __init__(self) -> None:
        self.rows: dict[int, Post] = {}
        self._next_id = 1
        self.list_calls = 0

    async def get_post(self, db: Any, post_id: int) -> Post | None:
        return self.rows.get(post_id)

    async def list_posts(self, db: Any) -> list[Post]:
        self.list_calls += 1
        return sorted(self.rows.values(), key=lambda p: (p.created_at, p.id), reverse=True)

    async def insert_post(self, db: Any, title: str, content: str, author: str) -> Post:
        ts = _EPOCH + timedelta(seconds=self._next_id)
        post = Post(self._next_id, title, content, author, ts, ts)
        self.rows[post.id] = post
        self._next_id += 1
        return post

    async def update_post(
        self, db: Any, post_id: int, title: str | None, content: str | None
    ) -> Post | None:
        post = self.rows.get(post_id)
        if post is None:
            return None
        updated = Post(
            post.id,
            title if title is not None else post.title,
            content if content is not None else post.content,
            post.author,
            post.created_at,
            post.updated_at + timedelta(minutes=1),
        )
        self.rows[post_id] = updated
        return updated

    async def delete_post(self, db: Any, post_id: int) -> bool:
        return self.rows.pop(post_id, None) is not None


class InMemoryTodoRepository:
    def __init__(self) -> None:
        self.rows: dict[int, Todo] = {}
        self._next_id = 1

    async def list_todos(self, db: Any) -> list[Todo]:
        return sorted(self.rows.values(), key=lambda t: t.id, reverse=True)

    async def insert_todo(self, db: Any, title: str) -> Todo:
        todo = Todo(self._next_id, title, False, _EPOCH)
        self.rows[todo.id] = todo
        self._next_id += 1
        return todo

    async def toggle_todo(self, db: Any, todo_id: int) -> Todo | None:
        todo = self.rows.get(todo_id)
        if todo is None:
            return None
        todo.completed = not todo.completed
        return todo

    async def delete_todo(self, db: Any, todo_id: int) -> bool:
        return self.rows.pop(todo_id, None) is not None


class DictSessionStore:
    def __init__(self) -> None:
        self.data: dict[str, dict[str, Any]] = {}

    async def load(self, session_id: str) -> dict[str, Any] | None:
        stored = self.data.get(session_id)
        return dict(stored) if stored is not None else None

    async def save(self, session_id: str, data: dict[str, Any], ttl_seconds: int) -> None:
        self.data[session_id] = dict(data)

    async def destroy(self, session_id: str) -> None:
        self.data.pop(session_id, None)


@pytest.fixture
def post_repo() -> InMemoryPostRepository:
    return InMemoryPostRepository()


@pytest.fixture
def todo_repo() -> InMemoryTodoRepository:
    return InMemoryTodoRepository()


@pytest.fixture
def session_store() -> DictSessionStore:
    return DictSessionStore()


@pytest.fixture
def cache_adapter(memory_cache):
    """Override in a test module to swap the cache the app sees."""
    return memory_cache


@pytest.fixture
def db_status() -> ConnectionStatus:
    return ConnectionStatus.CONNECTED


@pytest.fixture
def redis_status() -> ConnectionStatus:
    return ConnectionStatus.CONNECTED


@pytest.fixture
async def api(
    post_repo, todo_repo, session_store, cache_adapter, db, db_status, redis_status
) -> AsyncGenerator[AsyncClient, None]:
    """Client against the real app with external stores swapped for fakes."""

    async def _db_session():
        yield db

    todo_service = TodoApplicationService(repo=todo_repo)
    app.dependency_overrides.update({
        get_db_session: _db_session,
        get_post_repository: lambda: post_repo,
        get_cache_adapter: lambda: cache_adapter,
        get_todo_service: lambda: todo_service,
        get_session_store: lambda: session_store,
        check_database: lambda: db_status,
        check_redis: lambda: redis_status,
    })
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def broken_cache() -> MagicMock:
    from src.cs_common.errors import CacheUnavailableError

    cache = MagicMock()
    for name in ("get", "set", "delete"):
        setattr(cache, name, AsyncMock(side_effect=CacheUnavailableError("connection refused")))
    return cache
