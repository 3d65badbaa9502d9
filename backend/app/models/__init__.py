"""
Inkpost Backend — ORM Models
==============================

Importing this package registers every table on `Base.metadata`, which is
what `create_tables()` and Alembic's autogenerate rely on.
"""

from app.models.user import User
from app.models.task import Task
from app.models.blog import Blog
from app.models.comment import Comment
from app.models.engagement import Like, Share

__all__ = ["User", "Task", "Blog", "Comment", "Like", "Share"]
