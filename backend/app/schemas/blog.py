"""Response schemas for blog posts. Create/update bodies arrive as multipart forms."""

import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from app.schemas.common import AuthorSummary


class BlogResponse(BaseModel):
    id: uuid.UUID
    user_id: uuid.UUID
    title: str
    content: str
    image: Optional[str] = Field(default=None, description="data:<mime>;base64,<payload>")
    video: Optional[str] = Field(default=None, description="data:<mime>;base64,<payload>")
    likes_count: int
    shares_count: int
    created_at: datetime
    author: Optional[AuthorSummary] = None


class BlogEnvelope(BaseModel):
    message: str
    blog: BlogResponse


class BlogPostEnvelope(BaseModel):
    message: Optional[str] = None
    blog_post: BlogResponse


class BlogListResponse(BaseModel):
    blogs: List[BlogResponse]


class EngagementResponse(BaseModel):
    """Acknowledgement for like/unlike/share with the post's updated counters."""
    message: str
    likes_count: int
    shares_count: int
