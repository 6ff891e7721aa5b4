"""PostRepository — concrete implementation of PostRepositoryProtocol.

All queries use raw text() SQL (no ORM). Mutations use ... RETURNING so a
single round trip yields the stored row; 0 rows means the id does not exist.

Transaction ownership: the CALLER (PostApplicationService) commits or rolls
back. The repository never commits.
"""

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from src.cs_blog.domain.models import Post
from src.cs_common.errors import InternalError

# ---------------------------------------------------------------------------
# SQL
# ---------------------------------------------------------------------------

_COLUMNS = "id, title, content, author, created_at, updated_at"

_GET_POST_SQL = text(f"""
    SELECT {_COLUMNS}
    FROM posts
    WHERE id = :post_id
""")

_LIST_POSTS_SQL = text(f"""
    SELECT {_COLUMNS}
    FROM posts
    ORDER BY created_at DESC, id DESC
""")

_INSERT_POST_SQL = text(f"""
    INSERT INTO posts (title, content, author)
    VALUES (:title, :content, :author)
    RETURNING {_COLUMNS}
""")

# asyncpg NULL parameter pattern: CAST(:param AS TYPE) keeps COALESCE typed
_UPDATE_POST_SQL = text(f"""
    UPDATE posts
    SET title = COALESCE(CAST(:title AS TEXT), title),
        content = COALESCE(CAST(:content AS TEXT), content),
        updated_at = NOW()
    WHERE id = :post_id
    RETURNING {_COLUMNS}
""")

_DELETE_POST_SQL = text("""
    DELETE FROM posts
    WHERE id = :post_id
    RETURNING id
""")

# ---------------------------------------------------------------------------
# Row mapper
# ---------------------------------------------------------------------------


def _row_to_post(row: object) -> Post:
    return Post(
        id=row.id,  # type: ignore[attr-defined]
        title=row.title,  # type: ignore[attr-defined]
        content=row.content,  # type: ignore[attr-defined]
        author=row.author,  # type: ignore[attr-defined]
        created_at=row.created_at,  # type: ignore[attr-defined]
        updated_at=row.updated_at,  # type: ignore[attr-defined]
    )


# ---------------------------------------------------------------------------
# Repository
# ---------------------------------------------------------------------------


class PostRepository:
    async def get_post(self, db: AsyncSession, post_id: int) -> Post | None:
        result = await db.execute(_GET_POST_SQL, {"post_id": post_id})
        row = result.fetchone()
        return _row_to_post(row) if row else None

    async def list_posts(self, db: AsyncSession) -> list[Post]:
        result = await db.execute(_LIST_POSTS_SQL)
        return [_row_to_post(row) for row in result.fetchall()]

    async def insert_post(
        self, db: AsyncSession, title: str, content: str, author: str
    ) -> Post:
        result = await db.execute(
            _INSERT_POST_SQL,
            {"title": title, "content": content, "author": author},
        )
        row = result.fetchone()
        if row is None:
            raise InternalError("Post insert returned no rows")
        return _row_to_post(row)

    async def update_post(
        self,
        db: AsyncSession,
        post_id: int,
        title: str | None,
        content: str | None,
    ) -> Post | None:
        result = await db.execute(
            _UPDATE_POST_SQL,
            {"post_id": post_id, "title": title, "content": content},
        )
        row = result.fetchone()
        return _row_to_post(row) if row else None

    async def delete_post(self, db: AsyncSession, post_id: int) -> bool:
        result = await db.execute(_DELETE_POST_SQL, {"post_id": post_id})
        return result.fetchone() is not None
