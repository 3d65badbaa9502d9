"""
Inkpost Backend — Blog Service
================================

What:  Blog post creation, public reads, and owner-only update/delete.

Read model:
    GET /blogs           → every post, newest first, with an author summary
                           (id, name, image).
    GET /blogposts/{id}  → one post, author summary including email.

Mutation model:
    update/delete use `id AND user_id = caller`; a foreign post reads as
    absent (NotFoundError, 404). Deleting a post also removes its comments,
    likes and shares in the same transaction, so no engagement rows outlive
    the post they point at.
"""

import logging
import uuid
from typing import List, Optional

from sqlalchemy import delete, desc, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.exceptions import DatabaseError, InkpostError, NotFoundError
from app.models.blog import Blog
from app.models.comment import Comment
from app.models.engagement import Like, Share
from app.models.user import User
from app.schemas.blog import BlogResponse
from app.schemas.common import AuthorSummary
from app.services.ownership import ensure_owner

logger = logging.getLogger(__name__)


def author_summary(user: Optional[User], include_email: bool = False) -> Optional[AuthorSummary]:
    if user is None:
        return None
    return AuthorSummary(
        id=user.id,
        name=user.name,
        image=user.image,
        email=user.email if include_email else None,
    )


def to_blog_response(
    blog: Blog, author: Optional[User] = None, include_email: bool = False
) -> BlogResponse:
    """Build the response explicitly; `Blog.author` is never lazy-loaded."""
    return BlogResponse(
        id=blog.id,
        user_id=blog.user_id,
        title=blog.title,
        content=blog.content,
        image=blog.image,
        video=blog.video,
        likes_count=blog.likes_count,
        shares_count=blog.shares_count,
        created_at=blog.created_at,
        author=author_summary(author, include_email),
    )


class BlogService:

    async def get_blog_or_404(self, db: AsyncSession, blog_id: uuid.UUID) -> Blog:
        """Used by comment and engagement services to check the parent post."""
        blog = await db.get(Blog, blog_id)
        if blog is None:
            raise NotFoundError(resource="blog post", resource_id=str(blog_id))
        return blog

    async def create_blog(
        self,
        db: AsyncSession,
        user_id: uuid.UUID,
        title: str,
        content: str,
        image: Optional[str] = None,
    ) -> BlogResponse:
        try:
            blog = Blog(user_id=user_id, title=title, content=content, image=image)
            db.add(blog)
            await db.flush()
            await db.refresh(blog)
            logger.info("Blog %s created by %s (image=%s)", blog.id, user_id, image is not None)
            return to_blog_response(blog)
        except SQLAlchemyError as e:
            logger.error("Database error creating blog: %s", str(e), exc_info=True)
            raise DatabaseError(context={"operation": "create_blog"})

    async def list_blogs(self, db: AsyncSession) -> List[BlogResponse]:
        """All posts, newest first."""
        try:
            result = await db.execute(
                select(Blog)
                .options(selectinload(Blog.author))
                .order_by(desc(Blog.created_at))
            )
            return [to_blog_response(b, b.author) for b in result.scalars().all()]
        except SQLAlchemyError as e:
            logger.error("Database error listing blogs: %s", str(e), exc_info=True)
            raise DatabaseError(context={"operation": "list_blogs"})

    async def get_blog(self, db: AsyncSession, blog_id: uuid.UUID) -> BlogResponse:
        """
        Raises:
            NotFoundError: no post with this id
        """
        try:
            result = await db.execute(
                select(Blog).options(selectinload(Blog.author)).where(Blog.id == blog_id)
            )
            blog = result.scalar_one_or_none()
            if blog is None:
                raise NotFoundError(resource="blog post", resource_id=str(blog_id))
            return to_blog_response(blog, blog.author, include_email=True)
        except InkpostError:
            raise
        except SQLAlchemyError as e:
            logger.error("Database error fetching blog %s: %s", blog_id, str(e), exc_info=True)
            raise DatabaseError(context={"operation": "get_blog", "blog_id": str(blog_id)})

    async def _get_owned(
        self, db: AsyncSession, blog_id: uuid.UUID, user_id: uuid.UUID
    ) -> Optional[Blog]:
        result = await db.execute(
            select(Blog).where(Blog.id == blog_id, Blog.user_id == user_id)
        )
        return result.scalar_one_or_none()

    async def update_blog(
        self,
        db: AsyncSession,
        user_id: uuid.UUID,
        blog_id: uuid.UUID,
        title: Optional[str] = None,
        content: Optional[str] = None,
        image: Optional[str] = None,
        video: Optional[str] = None,
    ) -> BlogResponse:
        """
        Update the caller's post. None means "leave unchanged"; media is only
        replaced when a new upload was sent.

        Raises:
            NotFoundError: absent, or owned by someone else
        """
        try:
            blog = ensure_owner("blog post", await self._get_owned(db, blog_id, user_id), user_id, blog_id)
            changes = {"title": title, "content": content, "image": image, "video": video}
            for field, value in changes.items():
                if value is not None:
                    setattr(blog, field, value)
            await db.flush()
            await db.refresh(blog)
            return to_blog_response(blog)
        except InkpostError:
            raise
        except SQLAlchemyError as e:
            logger.error("Database error updating blog %s: %s", blog_id, str(e), exc_info=True)
            raise DatabaseError(context={"operation": "update_blog", "blog_id": str(blog_id)})

    async def delete_blog(
        self, db: AsyncSession, user_id: uuid.UUID, blog_id: uuid.UUID
    ) -> None:
        try:
            blog = ensure_owner("blog post", await self._get_owned(db, blog_id, user_id), user_id, blog_id)
            for model in (Comment, Like, Share):
                await db.execute(delete(model).where(model.blog_id == blog_id))
            await db.delete(blog)
            await db.flush()
            logger.info("Blog %s deleted by %s", blog_id, user_id)
        except InkpostError:
            raise
        except SQLAlchemyError as e:
            logger.error("Database error deleting blog %s: %s", blog_id, str(e), exc_info=True)
            raise DatabaseError(context={"operation": "delete_blog", "blog_id": str(blog_id)})


blog_service = BlogService()
