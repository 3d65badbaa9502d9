"""Inkpost Backend — Comment Model."""

import uuid
from datetime import datetime

from sqlalchemy import Index, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base
from app.models._columns import (
    blog_ref_column,
    created_at_column,
    id_column,
    owner_column,
)
from app.models.user import User


class Comment(Base):
    __tablename__ = "comments"

    id: Mapped[uuid.UUID] = id_column()
    user_id: Mapped[uuid.UUID] = owner_column(comment="Author of the comment")
    blog_id: Mapped[uuid.UUID] = blog_ref_column()
    content: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = created_at_column()

    author: Mapped[User] = relationship(User, lazy="raise", viewonly=True)

    __table_args__ = (
        Index("idx_comments_blog_created", "blog_id", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<Comment(id={self.id}, blog_id={self.blog_id})>"
