"""cs_todo REST endpoints (mounted at the root, no /api prefix).

GET    /todos            list, newest id first
POST   /todos            create (completed=false)
PATCH  /todos/{todo_id}  toggle completed
DELETE /todos/{todo_id}  delete
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from src.cs_common.database import get_db_session
from src.cs_common.response import ApiResponse, success_response
from src.cs_todo.application.schemas import CreateTodoRequest
from src.cs_todo.application.service import TodoApplicationService

router = APIRouter(prefix="/todos", tags=["todos"])

_service = TodoApplicationService()


async def get_todo_service() -> TodoApplicationService:
    return _service


TodoService = Annotated[TodoApplicationService, Depends(get_todo_service)]
DbSession = Annotated[AsyncSession, Depends(get_db_session)]


@router.get("")
async def list_todos(
    request: Request,
    service: TodoService,
    db: DbSession,
) -> ApiResponse:
    todos = await service.list_todos(db)
    return success_response([t.model_dump() for t in todos], request)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_todo(
    body: CreateTodoRequest,
    request: Request,
    service: TodoService,
    db: DbSession,
) -> ApiResponse:
    todo = await service.create_todo(db, body.title)
    return success_response(todo.model_dump(), request)


@router.patch("/{todo_id}")
async def toggle_todo(
    todo_id: int,
    request: Request,
    service: TodoService,
    db: DbSession,
) -> ApiResponse:
    todo = await service.toggle_todo(db, todo_id)
    return success_response(todo.model_dump(), request)


@router.delete("/{todo_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_todo(
    todo_id: int,
    service: TodoService,
    db: DbSession,
) -> Response:
    await service.delete_todo(db, todo_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
