"""Request/response schemas for comments."""

import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from app.schemas.common import AuthorSummary


class CommentCreate(BaseModel):
    content: str = Field(min_length=1, max_length=5_000)


class CommentResponse(BaseModel):
    id: uuid.UUID
    user_id: uuid.UUID
    blog_id: uuid.UUID
    content: str
    created_at: datetime
    author: Optional[AuthorSummary] = None


class CommentEnvelope(BaseModel):
    message: str
    comment: CommentResponse


class CommentListResponse(BaseModel):
    comments: List[CommentResponse]
