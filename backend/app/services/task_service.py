"""
Inkpost Backend — Task Service
================================

What:  CRUD for per-user task lists.
Why:   Tasks are private. Every query, reads included, is scoped to the
       caller's user id, so another user's task is simply invisible.

Ownership:
    update/delete look the task up with `id AND user_id = caller`. A task
    owned by someone else therefore reads as absent and yields NotFoundError
    (404), exactly like a task that does not exist.
"""

import logging
import uuid
from typing import List, Optional

from sqlalchemy import desc, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import DatabaseError, InkpostError
from app.models.task import Task
from app.schemas.task import TaskCreate, TaskResponse, TaskUpdate
from app.services.ownership import ensure_owner

logger = logging.getLogger(__name__)


class TaskService:
    """Stateless; every method receives the request's session."""

    async def _get_owned(
        self, db: AsyncSession, task_id: uuid.UUID, user_id: uuid.UUID
    ) -> Optional[Task]:
        result = await db.execute(
            select(Task).where(Task.id == task_id, Task.user_id == user_id)
        )
        return result.scalar_one_or_none()

    async def create_task(
        self, db: AsyncSession, user_id: uuid.UUID, data: TaskCreate
    ) -> TaskResponse:
        try:
            task = Task(user_id=user_id, title=data.title, description=data.description)
            db.add(task)
            await db.flush()
            await db.refresh(task)
            logger.info("Task %s created by %s", task.id, user_id)
            return TaskResponse.model_validate(task)
        except SQLAlchemyError as e:
            logger.error("Database error creating task: %s", str(e), exc_info=True)
            raise DatabaseError(context={"operation": "create_task"})

    async def list_tasks(self, db: AsyncSession, user_id: uuid.UUID) -> List[TaskResponse]:
        """The caller's tasks only, newest first."""
        try:
            result = await db.execute(
                select(Task)
                .where(Task.user_id == user_id)
                .order_by(desc(Task.created_at))
            )
            return [TaskResponse.model_validate(t) for t in result.scalars().all()]
        except SQLAlchemyError as e:
            logger.error("Database error listing tasks: %s", str(e), exc_info=True)
            raise DatabaseError(context={"operation": "list_tasks"})

    async def update_task(
        self,
        db: AsyncSession,
        user_id: uuid.UUID,
        task_id: uuid.UUID,
        data: TaskUpdate,
    ) -> TaskResponse:
        """
        Apply the fields present in `data` to the caller's task.

        Raises:
            NotFoundError: no such task for this caller
        """
        try:
            task = ensure_owner("task", await self._get_owned(db, task_id, user_id), user_id, task_id)
            for field, value in data.model_dump(exclude_unset=True).items():
                if value is not None:
                    setattr(task, field, value)
            await db.flush()
            await db.refresh(task)
            return TaskResponse.model_validate(task)
        except InkpostError:
            raise
        except SQLAlchemyError as e:
            logger.error("Database error updating task %s: %s", task_id, str(e), exc_info=True)
            raise DatabaseError(context={"operation": "update_task", "task_id": str(task_id)})

    async def delete_task(
        self, db: AsyncSession, user_id: uuid.UUID, task_id: uuid.UUID
    ) -> None:
        try:
            task = ensure_owner("task", await self._get_owned(db, task_id, user_id), user_id, task_id)
            await db.delete(task)
            await db.flush()
            logger.info("Task %s deleted by %s", task_id, user_id)
        except InkpostError:
            raise
        except SQLAlchemyError as e:
            logger.error("Database error deleting task %s: %s", task_id, str(e), exc_info=True)
            raise DatabaseError(context={"operation": "delete_task", "task_id": str(task_id)})


task_service = TaskService()
