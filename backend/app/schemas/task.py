"""Request/response schemas for the per-user task list."""

import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class TaskCreate(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    description: str = Field(default="", max_length=10_000)


class TaskUpdate(BaseModel):
    """Partial update: only the fields present in the body are applied."""
    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, max_length=10_000)
    completed: Optional[bool] = None


class TaskResponse(BaseModel):
    id: uuid.UUID
    user_id: uuid.UUID
    title: str
    description: str
    completed: bool
    created_at: datetime

    model_config = {"from_attributes": True}


class TaskEnvelope(BaseModel):
    message: str
    task: TaskResponse


class TaskListResponse(BaseModel):
    tasks: List[TaskResponse]
