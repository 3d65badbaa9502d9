"""Shared response models: envelopes, errors, health, author summaries."""

import uuid
from typing import Optional

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Plain acknowledgement, e.g. {"message": "Task deleted"}."""
    message: str = Field(description="Human-readable outcome")


class AuthorSummary(BaseModel):
    """
    Public view of a user embedded in blog and comment payloads.

    email is only filled on single-post reads (GET /blogposts/{id}).
    """
    id: uuid.UUID
    name: str
    image: Optional[str] = None
    email: Optional[str] = None

    model_config = {"from_attributes": True}


class ErrorResponse(BaseModel):
    """
    Standardized error body for every non-2xx response.

    Example:
        {
            "error": "not_found",
            "message": "Task not found",
            "request_id": "1f0c9a2b"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    status: str = Field(description="Overall service status: healthy or unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected or disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
