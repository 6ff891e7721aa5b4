"""Domain models for cs_todo, pure dataclasses, no business logic."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Todo:
    id: int
    title: str
    completed: bool
    created_at: datetime
