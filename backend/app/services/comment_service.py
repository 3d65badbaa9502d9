"""
Inkpost Backend — Comment Service
===================================

Comments hang off a blog post. Adding one requires the post to exist;
listing is public and oldest-first (conversation order).

Deletion is looked up by comment id alone. A missing comment is a 404; a
comment written by someone else is a 403 and is left untouched (see the
REVEAL policy in services/ownership.py).
"""

import logging
import uuid
from typing import List

from sqlalchemy import asc, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.exceptions import DatabaseError, InkpostError
from app.models.comment import Comment
from app.schemas.comment import CommentResponse
from app.services.blog_service import author_summary, blog_service
from app.services.ownership import ensure_owner

logger = logging.getLogger(__name__)


def to_comment_response(comment: Comment, with_author: bool = False) -> CommentResponse:
    return CommentResponse(
        id=comment.id,
        user_id=comment.user_id,
        blog_id=comment.blog_id,
        content=comment.content,
        created_at=comment.created_at,
        author=author_summary(comment.author) if with_author else None,
    )


class CommentService:

    async def add_comment(
        self,
        db: AsyncSession,
        user_id: uuid.UUID,
        blog_id: uuid.UUID,
        content: str,
    ) -> CommentResponse:
        """
        Raises:
            NotFoundError: the blog post does not exist
        """
        try:
            await blog_service.get_blog_or_404(db, blog_id)
            comment = Comment(user_id=user_id, blog_id=blog_id, content=content)
            db.add(comment)
            await db.flush()
            await db.refresh(comment)
            logger.info("Comment %s added to blog %s by %s", comment.id, blog_id, user_id)
            return to_comment_response(comment)
        except InkpostError:
            raise
        except SQLAlchemyError as e:
            logger.error("Database error adding comment: %s", str(e), exc_info=True)
            raise DatabaseError(context={"operation": "add_comment", "blog_id": str(blog_id)})

    async def list_comments(self, db: AsyncSession, blog_id: uuid.UUID) -> List[CommentResponse]:
        """Comments on a post, oldest first. Unknown post → empty list."""
        try:
            result = await db.execute(
                select(Comment)
                .options(selectinload(Comment.author))
                .where(Comment.blog_id == blog_id)
                .order_by(asc(Comment.created_at))
            )
            return [to_comment_response(c, with_author=True) for c in result.scalars().all()]
        except SQLAlchemyError as e:
            logger.error("Database error listing comments: %s", str(e), exc_info=True)
            raise DatabaseError(context={"operation": "list_comments", "blog_id": str(blog_id)})

    async def delete_comment(
        self, db: AsyncSession, user_id: uuid.UUID, comment_id: uuid.UUID
    ) -> None:
        """
        Raises:
            NotFoundError:  no such comment
            ForbiddenError: comment belongs to another user
        """
        try:
            comment = ensure_owner("comment", await db.get(Comment, comment_id), user_id, comment_id)
            await db.delete(comment)
            await db.flush()
            logger.info("Comment %s deleted by %s", comment_id, user_id)
        except InkpostError:
            raise
        except SQLAlchemyError as e:
            logger.error("Database error deleting comment %s: %s", comment_id, str(e), exc_info=True)
            raise DatabaseError(context={"operation": "delete_comment", "comment_id": str(comment_id)})


comment_service = CommentService()
