"""
Inkpost Backend — Blog Route Handlers
=======================================

What:  Blog posts, their comments, and likes/shares.

Route Inventory:
    POST   /blogs                        bearer, multipart(title, content, image?)
    GET    /blogs                        public, newest first
    GET    /blogposts/{id}               public
    PUT    /blogposts/{id}               bearer, multipart(title?, content?, image?, video?)
    DELETE /blogposts/{id}               bearer
    POST   /blogposts/{id}/comments      bearer
    GET    /blogposts/{id}/comments      public
    POST   /blogposts/{id}/like          bearer
    DELETE /blogposts/{id}/like          bearer
    POST   /blogposts/{id}/share         bearer

Uploaded media is validated and turned into data URLs by MediaService
before the blog service sees it.
"""

import uuid
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.middleware.auth_guard import require_auth
from app.schemas.auth import TokenClaim
from app.schemas.blog import (
    BlogEnvelope,
    BlogListResponse,
    BlogPostEnvelope,
    EngagementResponse,
)
from app.schemas.comment import CommentCreate, CommentEnvelope, CommentListResponse
from app.schemas.common import ErrorResponse, MessageResponse
from app.services.blog_service import blog_service
from app.services.comment_service import comment_service
from app.services.engagement_service import engagement_service
from app.services.media_service import media_service

AUTH_RESPONSES = {
    401: {"description": "Token missing", "model": ErrorResponse},
    403: {"description": "Invalid or expired token", "model": ErrorResponse},
}
NOT_FOUND = {404: {"description": "Blog post not found", "model": ErrorResponse}}

router = APIRouter(tags=["Blogs"])


# ── Posts ─────────────────────────────────────────────────────────────────

@router.post(
    "/blogs",
    status_code=201,
    response_model=BlogEnvelope,
    responses={**AUTH_RESPONSES, 400: {"description": "Bad media upload", "model": ErrorResponse}},
    summary="Create a blog post",
)
async def create_blog(
    title: str = Form(..., min_length=1, max_length=300),
    content: str = Form(""),
    image: Optional[UploadFile] = File(None, description="Image, stored inline as a data URL"),
    claim: TokenClaim = Depends(require_auth),
    db: AsyncSession = Depends(get_db_session),
) -> BlogEnvelope:
    image_url = await media_service.encode_upload("image", image)
    blog = await blog_service.create_blog(db, claim.user_id, title, content, image_url)
    return BlogEnvelope(message="Blog created successfully", blog=blog)


@router.get("/blogs", response_model=BlogListResponse, summary="List all blog posts, newest first")
async def list_blogs(db: AsyncSession = Depends(get_db_session)) -> BlogListResponse:
    return BlogListResponse(blogs=await blog_service.list_blogs(db))


@router.get(
    "/blogposts/{blog_id}",
    response_model=BlogPostEnvelope,
    responses=NOT_FOUND,
    summary="Get one blog post",
)
async def get_blog(
    blog_id: uuid.UUID,
    db: AsyncSession = Depends(get_db_session),
) -> BlogPostEnvelope:
    return BlogPostEnvelope(blog_post=await blog_service.get_blog(db, blog_id))


@router.put(
    "/blogposts/{blog_id}",
    response_model=BlogPostEnvelope,
    responses={**AUTH_RESPONSES, **NOT_FOUND},
    summary="Update the caller's blog post",
)
async def update_blog(
    blog_id: uuid.UUID,
    title: Optional[str] = Form(None, min_length=1, max_length=300),
    content: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
    video: Optional[UploadFile] = File(None),
    claim: TokenClaim = Depends(require_auth),
    db: AsyncSession = Depends(get_db_session),
) -> BlogPostEnvelope:
    """Fields left out keep their current value. 404 if absent or not the caller's."""
    blog = await blog_service.update_blog(
        db,
        claim.user_id,
        blog_id,
        title=title,
        content=content,
        image=await media_service.encode_upload("image", image),
        video=await media_service.encode_upload("video", video),
    )
    return BlogPostEnvelope(message="Blog post updated", blog_post=blog)


@router.delete(
    "/blogposts/{blog_id}",
    response_model=MessageResponse,
    responses={**AUTH_RESPONSES, **NOT_FOUND},
    summary="Delete the caller's blog post",
)
async def delete_blog(
    blog_id: uuid.UUID,
    claim: TokenClaim = Depends(require_auth),
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    await blog_service.delete_blog(db, claim.user_id, blog_id)
    return MessageResponse(message="Blog post deleted")


# ── Comments ──────────────────────────────────────────────────────────────

@router.post(
    "/blogposts/{blog_id}/comments",
    status_code=201,
    response_model=CommentEnvelope,
    responses={**AUTH_RESPONSES, **NOT_FOUND},
    summary="Comment on a blog post",
)
async def add_comment(
    blog_id: uuid.UUID,
    body: CommentCreate,
    claim: TokenClaim = Depends(require_auth),
    db: AsyncSession = Depends(get_db_session),
) -> CommentEnvelope:
    comment = await comment_service.add_comment(db, claim.user_id, blog_id, body.content)
    return CommentEnvelope(message="Comment added", comment=comment)


@router.get(
    "/blogposts/{blog_id}/comments",
    response_model=CommentListResponse,
    summary="List comments on a blog post",
)
async def list_comments(
    blog_id: uuid.UUID,
    db: AsyncSession = Depends(get_db_session),
) -> CommentListResponse:
    return CommentListResponse(comments=await comment_service.list_comments(db, blog_id))


# ── Likes & Shares ────────────────────────────────────────────────────────

@router.post(
    "/blogposts/{blog_id}/like",
    status_code=201,
    response_model=EngagementResponse,
    responses={**AUTH_RESPONSES, **NOT_FOUND, 400: {"description": "Already liked", "model": ErrorResponse}},
    summary="Like a blog post",
)
async def like_blog(
    blog_id: uuid.UUID,
    claim: TokenClaim = Depends(require_auth),
    db: AsyncSession = Depends(get_db_session),
) -> EngagementResponse:
    return await engagement_service.like(db, claim.user_id, blog_id)


@router.delete(
    "/blogposts/{blog_id}/like",
    response_model=EngagementResponse,
    responses={**AUTH_RESPONSES, 400: {"description": "Not liked yet", "model": ErrorResponse}},
    summary="Remove the caller's like",
)
async def unlike_blog(
    blog_id: uuid.UUID,
    claim: TokenClaim = Depends(require_auth),
    db: AsyncSession = Depends(get_db_session),
) -> EngagementResponse:
    return await engagement_service.unlike(db, claim.user_id, blog_id)


@router.post(
    "/blogposts/{blog_id}/share",
    status_code=201,
    response_model=EngagementResponse,
    responses={**AUTH_RESPONSES, **NOT_FOUND},
    summary="Share a blog post",
)
async def share_blog(
    blog_id: uuid.UUID,
    claim: TokenClaim = Depends(require_auth),
    db: AsyncSession = Depends(get_db_session),
) -> EngagementResponse:
    return await engagement_service.share(db, claim.user_id, blog_id)
