"""TodoRepository — raw text() SQL over the todos table.

Toggle flips `completed` inside the UPDATE itself; there is no
read-modify-write round trip.
"""

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from src.cs_common.errors import InternalError
from src.cs_todo.domain.models import Todo

_LIST_TODOS_SQL = text("""
    SELECT id, title, completed, created_at
    FROM todos
    ORDER BY id DESC
""")

_INSERT_TODO_SQL = text("""
    INSERT INTO todos (title, completed)
    VALUES (:title, false)
    RETURNING id, title, completed, created_at
""")

_TOGGLE_TODO_SQL = text("""
    UPDATE todos
    SET completed = NOT completed
    WHERE id = :todo_id
    RETURNING id, title, completed, created_at
""")

_DELETE_TODO_SQL = text("""
    DELETE FROM todos
    WHERE id = :todo_id
    RETURNING id
""")


def _row_to_todo(row: object) -> Todo:
    return Todo(
        id=row.id,  # type: ignore[attr-defined]
        title=row.title,  # type: ignore[attr-defined]
        completed=row.completed,  # type: ignore[attr-defined]
        created_at=row.created_at,  # type: ignore[attr-defined]
    )


class TodoRepository:
    async def list_todos(self, db: AsyncSession) -> list[Todo]:
        result = await db.execute(_LIST_TODOS_SQL)
        return [_row_to_todo(row) for row in result.fetchall()]

    async def insert_todo(self, db: AsyncSession, title: str) -> Todo:
        result = await db.execute(_INSERT_TODO_SQL, {"title": title})
        row = result.fetchone()
        if row is None:
            raise InternalError("Todo insert returned no rows")
        return _row_to_todo(row)

    async def toggle_todo(self, db: AsyncSession, todo_id: int) -> Todo | None:
        result = await db.execute(_TOGGLE_TODO_SQL, {"todo_id": todo_id})
        row = result.fetchone()
        return _row_to_todo(row) if row else None

    async def delete_todo(self, db: AsyncSession, todo_id: int) -> bool:
        result = await db.execute(_DELETE_TODO_SQL, {"todo_id": todo_id})
        return result.fetchone() is not None
