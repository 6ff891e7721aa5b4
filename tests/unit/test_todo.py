# tests/unit/test_todo.py
"""Unit tests for TodoApplicationService (mock repo) and TodoRepository (mock session)."""
from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.cs_common.errors import InternalError, TodoNotFoundError
from src.cs_todo.application.service import TodoApplicationService
from src.cs_todo.domain.models import Todo
from src.cs_todo.infrastructure.persistence import TodoRepository


def _make_todo(**kwargs) -> Todo:
    defaults = dict(id=1, title="Buy milk", completed=False, created_at=datetime.now(UTC))
    defaults.update(kwargs)
    return Todo(**defaults)


@pytest.fixture
def mock_repo():
    return MagicMock()


class TestTodoService:
    @pytest.mark.asyncio
    async def test_list(self, db, mock_repo):
        mock_repo.list_todos = AsyncMock(return_value=[_make_todo(id=2), _make_todo(id=1)])

        todos = await TodoApplicationService(repo=mock_repo).list_todos(db)

        assert [t.id for t in todos] == [2, 1]

    @pytest.mark.asyncio
    async def test_create_commits(self, db, mock_repo):
        mock_repo.insert_todo = AsyncMock(return_value=_make_todo(id=3, title="Walk"))

        todo = await TodoApplicationService(repo=mock_repo).create_todo(db, "Walk")

        assert todo.title == "Walk"
        assert todo.completed is False
        db.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_toggle_returns_flipped_todo(self, db, mock_repo):
        mock_repo.toggle_todo = AsyncMock(return_value=_make_todo(completed=True))

        todo = await TodoApplicationService(repo=mock_repo).toggle_todo(db, 1)

        assert todo.completed is True
        db.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_toggle_missing_raises_and_rolls_back(self, db, mock_repo):
        mock_repo.toggle_todo = AsyncMock(return_value=None)

        with pytest.raises(TodoNotFoundError):
            await TodoApplicationService(repo=mock_repo).toggle_todo(db, 9)

        db.rollback.assert_awaited_once()
        db.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_delete_missing_raises(self, db, mock_repo):
        mock_repo.delete_todo = AsyncMock(return_value=False)

        with pytest.raises(TodoNotFoundError):
            await TodoApplicationService(repo=mock_repo).delete_todo(db, 9)

    @pytest.mark.asyncio
    async def test_store_failure_rolls_back(self, db, mock_repo):
        mock_repo.insert_todo = AsyncMock(side_effect=RuntimeError("db down"))

        with pytest.raises(RuntimeError):
            await TodoApplicationService(repo=mock_repo).create_todo(db, "x")

        db.rollback.assert_awaited_once()


class TestTodoRepository:
    @pytest.mark.asyncio
    async def test_toggle_flips_in_sql(self):
        row = MagicMock(id=1, title="t", completed=True, created_at=datetime.now(UTC))
        result = MagicMock()
        result.fetchone.return_value = row
        session = MagicMock()
        session.execute = AsyncMock(return_value=result)

        todo = await TodoRepository().toggle_todo(session, 1)

        assert todo.completed is True
        assert "NOT completed" in str(session.execute.call_args.args[0])

    @pytest.mark.asyncio
    async def test_list_orders_by_id_desc(self):
        result = MagicMock()
        result.fetchall.return_value = []
        session = MagicMock()
        session.execute = AsyncMock(return_value=result)

        assert await TodoRepository().list_todos(session) == []
        assert "ORDER BY id DESC" in str(session.execute.call_args.args[0])

    @pytest.mark.asyncio
    async def test_insert_without_returned_row_is_internal_error(self):
        result = MagicMock()
        result.fetchone.return_value = None
        session = MagicMock()
        session.execute = AsyncMock(return_value=result)

        with pytest.raises(InternalError):
            await TodoRepository().insert_todo(session, "t")
