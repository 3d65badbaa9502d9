"""
Inkpost Backend — Engagement Models (Likes & Shares)
=====================================================

A Like is unique per (user, blog); the constraint is what turns a racing
second like into AlreadyLikedError instead of a double count. Shares are
not deduplicated: a user may share the same post any number of times.
"""

import uuid
from datetime import datetime

from sqlalchemy import UniqueConstraint
from sqlalchemy.orm import Mapped

from app.database import Base
from app.models._columns import (
    blog_ref_column,
    created_at_column,
    id_column,
    owner_column,
)


class Like(Base):
    __tablename__ = "likes"

    id: Mapped[uuid.UUID] = id_column()
    user_id: Mapped[uuid.UUID] = owner_column()
    blog_id: Mapped[uuid.UUID] = blog_ref_column()
    created_at: Mapped[datetime] = created_at_column()

    __table_args__ = (
        UniqueConstraint("user_id", "blog_id", name="uq_likes_user_blog"),
    )


class Share(Base):
    __tablename__ = "shares"

    id: Mapped[uuid.UUID] = id_column()
    user_id: Mapped[uuid.UUID] = owner_column()
    blog_id: Mapped[uuid.UUID] = blog_ref_column()
    created_at: Mapped[datetime] = created_at_column()
