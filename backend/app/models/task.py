"""
Inkpost Backend — Task Model
==============================

Per-user to-do items. Tasks are private: every query filters on `user_id`.
"""

import uuid
from datetime import datetime

from sqlalchemy import Boolean, Index, String, Text, false
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.models._columns import created_at_column, id_column, owner_column


class Task(Base):
    __tablename__ = "tasks"

    id: Mapped[uuid.UUID] = id_column()
    user_id: Mapped[uuid.UUID] = owner_column()
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    completed: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=false()
    )
    created_at: Mapped[datetime] = created_at_column()

    __table_args__ = (
        Index("idx_tasks_user_created", "user_id", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<Task(id={self.id}, completed={self.completed})>"
