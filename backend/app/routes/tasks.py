"""
Inkpost Backend — Task Route Handlers
=======================================

All task routes require a bearer token; the caller only ever sees and
touches their own tasks.
"""

import uuid

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.middleware.auth_guard import require_auth
from app.schemas.auth import TokenClaim
from app.schemas.common import ErrorResponse, MessageResponse
from app.schemas.task import TaskCreate, TaskEnvelope, TaskListResponse, TaskUpdate
from app.services.task_service import task_service

AUTH_RESPONSES = {
    401: {"description": "Token missing", "model": ErrorResponse},
    403: {"description": "Invalid or expired token", "model": ErrorResponse},
}
NOT_FOUND = {404: {"description": "Task not found", "model": ErrorResponse}}

router = APIRouter(prefix="/tasks", tags=["Tasks"], responses=AUTH_RESPONSES)


@router.post("", status_code=201, response_model=TaskEnvelope, summary="Create a task")
async def create_task(
    body: TaskCreate,
    claim: TokenClaim = Depends(require_auth),
    db: AsyncSession = Depends(get_db_session),
) -> TaskEnvelope:
    task = await task_service.create_task(db, claim.user_id, body)
    return TaskEnvelope(message="Task created", task=task)


@router.get("", response_model=TaskListResponse, summary="List the caller's tasks")
async def list_tasks(
    claim: TokenClaim = Depends(require_auth),
    db: AsyncSession = Depends(get_db_session),
) -> TaskListResponse:
    return TaskListResponse(tasks=await task_service.list_tasks(db, claim.user_id))


@router.put("/{task_id}", response_model=TaskEnvelope, responses=NOT_FOUND, summary="Update a task")
async def update_task(
    task_id: uuid.UUID,
    body: TaskUpdate,
    claim: TokenClaim = Depends(require_auth),
    db: AsyncSession = Depends(get_db_session),
) -> TaskEnvelope:
    task = await task_service.update_task(db, claim.user_id, task_id, body)
    return TaskEnvelope(message="Task updated", task=task)


@router.delete("/{task_id}", response_model=MessageResponse, responses=NOT_FOUND, summary="Delete a task")
async def delete_task(
    task_id: uuid.UUID,
    claim: TokenClaim = Depends(require_auth),
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    await task_service.delete_task(db, claim.user_id, task_id)
    return MessageResponse(message="Task deleted")
