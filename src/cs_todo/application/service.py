"""TodoApplicationService — thin composition layer, no cache.

Mutations commit on success and roll back on any error, including the
not-found case.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from src.cs_common.errors import TodoNotFoundError
from src.cs_todo.application.schemas import TodoOut
from src.cs_todo.domain.repository import TodoRepositoryProtocol
from src.cs_todo.infrastructure.persistence import TodoRepository


class TodoApplicationService:
    def __init__(self, repo: TodoRepositoryProtocol | None = None) -> None:
        self._repo: TodoRepositoryProtocol = repo or TodoRepository()

    async def list_todos(self, db: AsyncSession) -> list[TodoOut]:
        todos = await self._repo.list_todos(db)
        return [TodoOut.from_domain(t) for t in todos]

    async def create_todo(self, db: AsyncSession, title: str) -> TodoOut:
        try:
            todo = await self._repo.insert_todo(db, title)
            await db.commit()
        except Exception:
            await db.rollback()
            raise
        return TodoOut.from_domain(todo)

    async def toggle_todo(self, db: AsyncSession, todo_id: int) -> TodoOut:
        try:
            todo = await self._repo.toggle_todo(db, todo_id)
            if todo is None:
                raise TodoNotFoundError(todo_id)
            await db.commit()
        except Exception:
            await db.rollback()
            raise
        return TodoOut.from_domain(todo)

    async def delete_todo(self, db: AsyncSession, todo_id: int) -> None:
        try:
            if not await self._repo.delete_todo(db, todo_id):
                raise TodoNotFoundError(todo_id)
            await db.commit()
        except Exception:
            await db.rollback()
            raise
