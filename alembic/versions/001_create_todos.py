"""001: create todos table

Revision ID: 001
Revises:
Create Date: 2026-10-18
"""
from typing import Sequence, Union
from alembic import op

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute("""
        CREATE TABLE todos (
            id          SERIAL          PRIMARY KEY,
            title       VARCHAR(500)    NOT NULL,
            completed   BOOLEAN         NOT NULL DEFAULT FALSE,
            created_at  TIMESTAMPTZ     NOT NULL DEFAULT NOW(),
            CONSTRAINT ck_todos_title_not_blank CHECK (length(title) > 0)
        );
    """)


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS todos CASCADE;")
