"""002: create posts table

Revision ID: 002
Revises: 001
Create Date: 2026-10-18
"""
from typing import Sequence, Union
from alembic import op

revision: str = "002"
down_revision: Union[str, None] = "001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute("""
        CREATE TABLE posts (
            id          SERIAL          PRIMARY KEY,
            title       VARCHAR(500)    NOT NULL,
            content     TEXT            NOT NULL,
            author      VARCHAR(200)    NOT NULL DEFAULT 'Anonymous',
            created_at  TIMESTAMPTZ     NOT NULL DEFAULT NOW(),
            updated_at  TIMESTAMPTZ     NOT NULL DEFAULT NOW(),
            CONSTRAINT ck_posts_title_not_blank   CHECK (length(title) > 0),
            CONSTRAINT ck_posts_content_not_blank CHECK (length(content) > 0)
        );
    """)
    # Listing is ORDER BY created_at DESC, id DESC
    op.execute("CREATE INDEX idx_posts_created_at ON posts (created_at DESC, id DESC);")


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS posts CASCADE;")
