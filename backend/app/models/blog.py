"""
Inkpost Backend — Blog Model
==============================

What:  Blog posts with optional inline media and engagement counters.

Table Design Rationale:
    - image / video hold self-describing data URLs
      (`data:<mime>;base64,<payload>`) rather than file references. Size is
      bounded at upload time (MAX_MEDIA_SIZE) because the payload is read
      back with every fetch of the post.
    - likes_count / shares_count are denormalized. They are only changed in
      the same transaction that inserts or deletes the matching Like/Share
      row, so they stay equal to the row counts.
    - created_at index serves the public newest-first listing.
"""

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import Index, Integer, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base
from app.models._columns import created_at_column, id_column, owner_column
from app.models.user import User


class Blog(Base):
    __tablename__ = "blogs"

    id: Mapped[uuid.UUID] = id_column()
    user_id: Mapped[uuid.UUID] = owner_column(comment="Author of the post")
    title: Mapped[str] = mapped_column(String(300), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False, default="")
    image: Mapped[Optional[str]] = mapped_column(Text, nullable=True, default=None)
    video: Mapped[Optional[str]] = mapped_column(Text, nullable=True, default=None)
    likes_count: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, server_default=text("0")
    )
    shares_count: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, server_default=text("0")
    )
    created_at: Mapped[datetime] = created_at_column()

    # Read-only; always loaded explicitly (selectinload) by BlogService
    author: Mapped[User] = relationship(User, lazy="raise", viewonly=True)

    __table_args__ = (
        Index("idx_blogs_created_at", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<Blog(id={self.id}, likes={self.likes_count}, shares={self.shares_count})>"
