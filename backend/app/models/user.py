"""
Inkpost Backend — User Model
==============================

What:  The `users` table: identity records for signup and login.
Why:   Owns identity and the stored password hash. Every other table points
       back here through its owner-identifier column.

Table Design Rationale:
    - email is UNIQUE and stored exactly as submitted (case-sensitive).
      The constraint backs up the service-level pre-check, so two concurrent
      signups with the same email cannot both succeed.
    - password_hash holds a bcrypt string (salt and cost embedded); the
      plaintext never reaches this table.
    - image is an optional avatar string supplied at signup.
"""

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.models._columns import created_at_column, id_column


class User(Base):
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = id_column()
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    password_hash: Mapped[str] = mapped_column(String(128), nullable=False)
    image: Mapped[Optional[str]] = mapped_column(Text, nullable=True, default=None)
    created_at: Mapped[datetime] = created_at_column()

    def __repr__(self) -> str:
        # No email or hash in reprs; they end up in logs
        return f"<User(id={self.id})>"
