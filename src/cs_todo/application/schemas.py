from pydantic import BaseModel, Field

from src.cs_todo.domain.models import Todo


class CreateTodoRequest(BaseModel):
    title: str = Field(..., min_length=1, max_length=500)


class TodoOut(BaseModel):
    id: int
    title: str
    completed: bool
    created_at: str

    @classmethod
    def from_domain(cls, t: Todo) -> "TodoOut":
        return cls(
            id=t.id,
            title=t.title,
            completed=t.completed,
            created_at=t.created_at.isoformat(),
        )
