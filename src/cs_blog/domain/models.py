"""Domain models for cs_blog — pure dataclasses, no business logic."""

from dataclasses import dataclass
from datetime import datetime

POSTS_ALL_KEY = "posts:all"


def post_key(post_id: int) -> str:
    return f"post:{post_id}"


@dataclass
class Post:
    id: int
    title: str
    content: str
    author: str
    created_at: datetime
    updated_at: datetime
