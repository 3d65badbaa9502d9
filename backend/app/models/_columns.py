"""Column factories shared by every model."""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def id_column() -> Mapped[uuid.UUID]:
    # Generated client-side so the same model works on PostgreSQL and SQLite
    return mapped_column(Uuid, primary_key=True, default=uuid.uuid4)


def created_at_column() -> Mapped[datetime]:
    return mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
    )


def owner_column(comment: str = "Owning user") -> Mapped[uuid.UUID]:
    """The owner-identifier that every mutation is scoped by."""
    return mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment=comment,
    )


def blog_ref_column() -> Mapped[uuid.UUID]:
    return mapped_column(
        Uuid,
        ForeignKey("blogs.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
