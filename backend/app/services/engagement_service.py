"""
Inkpost Backend — Engagement Service (Likes & Shares)
=======================================================

What:  Like, unlike and share a blog post, keeping the post's denormalized
       likes_count / shares_count in step with the Like / Share rows.

Consistency:
    Each operation is two writes: the engagement row and the counter.
    Both go through the request's session and are committed together by
    get_db_session (or rolled back together on any error), so a failure
    between them cannot leave the counter off by one.

    Counters are bumped with `SET likes_count = likes_count + 1` in SQL,
    not read-modify-write in Python, so concurrent likes by different users
    do not lose updates.

    Duplicate likes are stopped twice: an explicit lookup (the normal path)
    and the (user_id, blog_id) UNIQUE constraint (two racing requests from
    the same user). Either way the caller gets AlreadyLikedError and the
    counter moves by exactly one.
"""

import logging
import uuid

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import (
    AlreadyLikedError,
    DatabaseError,
    InkpostError,
    NotLikedError,
)
from app.models.blog import Blog
from app.models.engagement import Like, Share
from app.schemas.blog import EngagementResponse
from app.services.blog_service import blog_service

logger = logging.getLogger(__name__)


class EngagementService:

    async def _bump(self, db: AsyncSession, blog_id: uuid.UUID, column, delta: int) -> Blog:
        await db.execute(
            update(Blog)
            .where(Blog.id == blog_id)
            .values({column: column + delta})
            .execution_options(synchronize_session=False)
        )
        blog = await db.get(Blog, blog_id)
        await db.refresh(blog, attribute_names=["likes_count", "shares_count"])
        return blog

    @staticmethod
    def _ack(message: str, blog: Blog) -> EngagementResponse:
        return EngagementResponse(
            message=message,
            likes_count=blog.likes_count,
            shares_count=blog.shares_count,
        )

    async def like(
        self, db: AsyncSession, user_id: uuid.UUID, blog_id: uuid.UUID
    ) -> EngagementResponse:
        """
        Raises:
            NotFoundError:     the blog post does not exist
            AlreadyLikedError: this user already likes the post
        """
        try:
            await blog_service.get_blog_or_404(db, blog_id)
            existing = await db.execute(
                select(Like.id).where(Like.user_id == user_id, Like.blog_id == blog_id)
            )
            if existing.scalar_one_or_none() is not None:
                raise AlreadyLikedError()

            db.add(Like(user_id=user_id, blog_id=blog_id))
            await db.flush()
            blog = await self._bump(db, blog_id, Blog.likes_count, 1)
            logger.info("Blog %s liked by %s", blog_id, user_id)
            return self._ack("Liked", blog)
        except InkpostError:
            raise
        except IntegrityError:
            raise AlreadyLikedError(context={"race": True})
        except SQLAlchemyError as e:
            logger.error("Database error liking blog %s: %s", blog_id, str(e), exc_info=True)
            raise DatabaseError(context={"operation": "like", "blog_id": str(blog_id)})

    async def unlike(
        self, db: AsyncSession, user_id: uuid.UUID, blog_id: uuid.UUID
    ) -> EngagementResponse:
        """
        Raises:
            NotLikedError: there is no like from this user on this post
        """
        try:
            result = await db.execute(
                select(Like).where(Like.user_id == user_id, Like.blog_id == blog_id)
            )
            like = result.scalar_one_or_none()
            if like is None:
                raise NotLikedError()

            await db.delete(like)
            await db.flush()
            blog = await self._bump(db, blog_id, Blog.likes_count, -1)
            logger.info("Blog %s unliked by %s", blog_id, user_id)
            return self._ack("Unliked", blog)
        except InkpostError:
            raise
        except SQLAlchemyError as e:
            logger.error("Database error unliking blog %s: %s", blog_id, str(e), exc_info=True)
            raise DatabaseError(context={"operation": "unlike", "blog_id": str(blog_id)})

    async def share(
        self, db: AsyncSession, user_id: uuid.UUID, blog_id: uuid.UUID
    ) -> EngagementResponse:
        """
        Record a share. Repeated shares by the same user all count.

        Raises:
            NotFoundError: the blog post does not exist
        """
        try:
            await blog_service.get_blog_or_404(db, blog_id)
            db.add(Share(user_id=user_id, blog_id=blog_id))
            await db.flush()
            blog = await self._bump(db, blog_id, Blog.shares_count, 1)
            logger.info("Blog %s shared by %s", blog_id, user_id)
            return self._ack("Shared", blog)
        except InkpostError:
            raise
        except SQLAlchemyError as e:
            logger.error("Database error sharing blog %s: %s", blog_id, str(e), exc_info=True)
            raise DatabaseError(context={"operation": "share", "blog_id": str(blog_id)})


engagement_service = EngagementService()
