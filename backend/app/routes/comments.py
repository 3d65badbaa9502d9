"""Inkpost Backend — DELETE /comments/{id}."""

import uuid

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.middleware.auth_guard import require_auth
from app.schemas.auth import TokenClaim
from app.schemas.common import ErrorResponse, MessageResponse
from app.services.comment_service import comment_service

router = APIRouter(prefix="/comments", tags=["Comments"])


@router.delete(
    "/{comment_id}",
    response_model=MessageResponse,
    responses={
        401: {"description": "Token missing", "model": ErrorResponse},
        403: {"description": "Invalid token, or not the comment's author", "model": ErrorResponse},
        404: {"description": "Comment not found", "model": ErrorResponse},
    },
    summary="Delete one of the caller's comments",
)
async def delete_comment(
    comment_id: uuid.UUID,
    claim: TokenClaim = Depends(require_auth),
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    await comment_service.delete_comment(db, claim.user_id, comment_id)
    return MessageResponse(message="Comment deleted successfully")
