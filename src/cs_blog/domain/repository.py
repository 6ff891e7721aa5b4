# src/cs_blog/domain/repository.py
"""Repository Protocol — the relational store behind the post cache.

Unit tests inject a mock or an in-memory fake conforming to this Protocol.
infrastructure/persistence.py provides the PostgreSQL implementation.
None / False results mean "no such id", never an error.
"""

from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from src.cs_blog.domain.models import Post


class PostRepositoryProtocol(Protocol):
    async def get_post(self, db: AsyncSession, post_id: int) -> Post | None: ...

    async def list_posts(self, db: AsyncSession) -> list[Post]: ...

    async def insert_post(
        self, db: AsyncSession, title: str, content: str, author: str
    ) -> Post: ...

    async def update_post(
        self,
        db: AsyncSession,
        post_id: int,
        title: str | None,
        content: str | None,
    ) -> Post | None: ...

    async def delete_post(self, db: AsyncSession, post_id: int) -> bool: ...
