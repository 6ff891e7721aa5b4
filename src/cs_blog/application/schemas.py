"""Pydantic schemas for cs_blog requests and responses.

PostOut is also the cache snapshot format: the accessor stores
PostOut.model_dump() (timestamps already ISO strings), so a cache hit
re-validates into exactly what the database path produced.
"""

from pydantic import BaseModel, Field

from src.cs_blog.domain.models import Post
from src.cs_cache.domain.models import ReadSource

DEFAULT_AUTHOR = "Anonymous"


class CreatePostRequest(BaseModel):
    title: str = Field(..., min_length=1, max_length=500)
    content: str = Field(..., min_length=1)
    author: str | None = Field(None, max_length=200)


class UpdatePostRequest(BaseModel):
    """Absent fields keep their stored value."""

    title: str | None = Field(None, min_length=1, max_length=500)
    content: str | None = Field(None, min_length=1)


class PostOut(BaseModel):
    id: int
    title: str
    content: str
    author: str
    created_at: str
    updated_at: str

    @classmethod
    def from_domain(cls, p: Post) -> "PostOut":
        return cls(
            id=p.id,
            title=p.title,
            content=p.content,
            author=p.author,
            created_at=p.created_at.isoformat(),
            updated_at=p.updated_at.isoformat(),
        )


class PostListResponse(BaseModel):
    posts: list[PostOut]
    source: ReadSource


class PostDetailResponse(BaseModel):
    post: PostOut
    source: ReadSource
