"""PostApplicationService — posts through the cache-aside accessor.

Reads:  posts:all (list) and post:<id> (detail) go through accessor.read().
        Cache hits are re-validated as PostOut; a stale or foreign entry
        that does not fit is reloaded from the database.
Writes: each mutation commits inside its closure, so the accessor only
        invalidates after the change is durable. A failed or not-found
        mutation rolls back and leaves the cache untouched.

Invalidation is coarse: every write drops posts:all, and
update/delete also drop the item key of the post they touch.
"""

from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from config.settings import settings
from src.cs_blog.application.schemas import (
    DEFAULT_AUTHOR,
    PostDetailResponse,
    PostListResponse,
    PostOut,
)
from src.cs_blog.domain.models import POSTS_ALL_KEY, post_key
from src.cs_blog.domain.repository import PostRepositoryProtocol
from src.cs_cache.application.accessor import CacheAsideAccessor
from src.cs_common.errors import PostNotFoundError

T = TypeVar("T")


def _decode_listing(raw: Any) -> list[PostOut]:
    if not isinstance(raw, list):
        raise TypeError(f"expected a list of posts, got {type(raw).__name__}")
    return [PostOut.model_validate(p) for p in raw]


async def _in_transaction(db: AsyncSession, op: Callable[[], Awaitable[T]]) -> T:
    try:
        result = await op()
        await db.commit()
    except Exception:
        await db.rollback()
        raise
    return result


class PostApplicationService:
    def __init__(
        self,
        accessor: CacheAsideAccessor,
        repo: PostRepositoryProtocol,
        list_ttl_seconds: int = settings.POSTS_LIST_TTL_SECONDS,
        item_ttl_seconds: int = settings.POST_ITEM_TTL_SECONDS,
    ) -> None:
        self._accessor = accessor
        self._repo = repo
        self._list_ttl = list_ttl_seconds
        self._item_ttl = item_ttl_seconds

    async def list_posts(self, db: AsyncSession) -> PostListResponse:
        async def load() -> list[dict]:
            posts = await self._repo.list_posts(db)
            return [PostOut.from_domain(p).model_dump() for p in posts]

        read = await self._accessor.read(
            POSTS_ALL_KEY, self._list_ttl, load, decode=_decode_listing
        )
        return PostListResponse(posts=read.value, source=read.source)  # type: ignore[union-attr]

    async def get_post(self, db: AsyncSession, post_id: int) -> PostDetailResponse:
        async def load() -> dict | None:
            post = await self._repo.get_post(db, post_id)
            return PostOut.from_domain(post).model_dump() if post else None

        read = await self._accessor.read(
            post_key(post_id), self._item_ttl, load, decode=PostOut.model_validate
        )
        if read is None:
            raise PostNotFoundError(post_id)
        return PostDetailResponse(post=read.value, source=read.source)

    async def create_post(
        self, db: AsyncSession, title: str, content: str, author: str | None
    ) -> PostOut:
        async def insert() -> PostOut:
            post = await self._repo.insert_post(db, title, content, author or DEFAULT_AUTHOR)
            return PostOut.from_domain(post)

        return await self._accessor.write(
            lambda: _in_transaction(db, insert), [POSTS_ALL_KEY]
        )

    async def update_post(
        self,
        db: AsyncSession,
        post_id: int,
        title: str | None,
        content: str | None,
    ) -> PostOut:
        async def update() -> PostOut:
            post = await self._repo.update_post(db, post_id, title, content)
            if post is None:
                raise PostNotFoundError(post_id)
            return PostOut.from_domain(post)

        return await self._accessor.write(
            lambda: _in_transaction(db, update), [POSTS_ALL_KEY, post_key(post_id)]
        )

    async def delete_post(self, db: AsyncSession, post_id: int) -> None:
        async def delete() -> None:
            if not await self._repo.delete_post(db, post_id):
                raise PostNotFoundError(post_id)

        await self._accessor.write(
            lambda: _in_transaction(db, delete), [POSTS_ALL_KEY, post_key(post_id)]
        )
