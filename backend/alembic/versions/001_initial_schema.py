"""Initial schema: users, tasks, blogs, comments, likes, shares

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  Creates every table the API needs in one step.
How:   Generic sa.Uuid columns (native UUID on PostgreSQL, CHAR(32) elsewhere)
       so the same migration also runs against SQLite.

Rollback: downgrade() drops all tables in reverse dependency order
(destructive: all data lost).
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _created_at() -> sa.Column:
    return sa.Column(
        "created_at",
        sa.DateTime(timezone=True),
        server_default=sa.text("CURRENT_TIMESTAMP"),
        nullable=False,
    )


def _owner() -> sa.Column:
    return sa.Column(
        "user_id",
        sa.Uuid(),
        sa.ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )


def _blog_ref() -> sa.Column:
    return sa.Column(
        "blog_id",
        sa.Uuid(),
        sa.ForeignKey("blogs.id", ondelete="CASCADE"),
        nullable=False,
    )


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("email", sa.String(255), nullable=False, unique=True),
        sa.Column("password_hash", sa.String(128), nullable=False),
        sa.Column("image", sa.Text(), nullable=True),
        _created_at(),
    )

    op.create_table(
        "tasks",
        sa.Column("id", sa.Uuid(), primary_key=True),
        _owner(),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("completed", sa.Boolean(), nullable=False, server_default=sa.false()),
        _created_at(),
    )
    op.create_index("ix_tasks_user_id", "tasks", ["user_id"])
    op.create_index("idx_tasks_user_created", "tasks", ["user_id", "created_at"])

    op.create_table(
        "blogs",
        sa.Column("id", sa.Uuid(), primary_key=True),
        _owner(),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("image", sa.Text(), nullable=True),
        sa.Column("video", sa.Text(), nullable=True),
        sa.Column("likes_count", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column("shares_count", sa.Integer(), nullable=False, server_default=sa.text("0")),
        _created_at(),
    )
    op.create_index("ix_blogs_user_id", "blogs", ["user_id"])
    op.create_index("idx_blogs_created_at", "blogs", ["created_at"])

    op.create_table(
        "comments",
        sa.Column("id", sa.Uuid(), primary_key=True),
        _owner(),
        _blog_ref(),
        sa.Column("content", sa.Text(), nullable=False),
        _created_at(),
    )
    op.create_index("ix_comments_user_id", "comments", ["user_id"])
    op.create_index("ix_comments_blog_id", "comments", ["blog_id"])
    op.create_index("idx_comments_blog_created", "comments", ["blog_id", "created_at"])

    for name in ("likes", "shares"):
        # Likes are one per user and post; shares are not deduplicated
        constraints = (
            [sa.UniqueConstraint("user_id", "blog_id", name="uq_likes_user_blog")]
            if name == "likes"
            else []
        )
        op.create_table(
            name,
            sa.Column("id", sa.Uuid(), primary_key=True),
            _owner(),
            _blog_ref(),
            _created_at(),
            *constraints,
        )
        op.create_index(f"ix_{name}_user_id", name, ["user_id"])
        op.create_index(f"ix_{name}_blog_id", name, ["blog_id"])


def downgrade() -> None:
    for name in ("shares", "likes", "comments", "blogs", "tasks", "users"):
        op.drop_table(name)
