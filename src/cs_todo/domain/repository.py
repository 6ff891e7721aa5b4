from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from src.cs_todo.domain.models import Todo


class TodoRepositoryProtocol(Protocol):
    async def list_todos(self, db: AsyncSession) -> list[Todo]: ...

    async def insert_todo(self, db: AsyncSession, title: str) -> Todo: ...

    async def toggle_todo(self, db: AsyncSession, todo_id: int) -> Todo | None: ...

    async def delete_todo(self, db: AsyncSession, todo_id: int) -> bool: ...
