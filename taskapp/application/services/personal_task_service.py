"""Personal task service.

Personal tasks are owned exclusively by their creator. Reads and updates
go through owner-scoped store queries, so another user's task id is
reported as not found rather than forbidden.
"""

from __future__ import annotations

from structlog import get_logger

from taskapp.application.dtos.tasks import CreatePersonalTaskDTO, UpdatePersonalTaskDTO
from taskapp.domain.errors.task import TaskNotFoundError
from taskapp.domain.models.principal import Principal
from taskapp.domain.models.task import PersonalTask
from taskapp.domain.services.task_lifecycle import (
    apply_personal_task_update,
    initial_status,
)
from taskapp.infrastructure.adapters.persistence.personal_task_repository import (
    PersonalTaskRepository,
)

logger = get_logger()


class PersonalTaskService:
    """List, create and update the caller's own tasks."""

    def __init__(self, tasks: PersonalTaskRepository) -> None:
        self._tasks = tasks

    async def list_tasks(self, principal: Principal) -> list[PersonalTask]:
        return await self._tasks.list_for_owner(principal.user_id)

    async def create_task(
        self, principal: Principal, request: CreatePersonalTaskDTO
    ) -> PersonalTask:
        task = await self._tasks.add(
            PersonalTask(
                id="",
                name=request.name,
                status=initial_status(request.status),
                description=request.description,
                deadline=request.deadline,
                category=request.category,
                owner_user_id=principal.user_id,
            )
        )
        logger.info("personal_task_created", user_id=principal.user_id, task_id=task.id)
        return task

    async def update_task(
        self, principal: Principal, task_id: str, request: UpdatePersonalTaskDTO
    ) -> PersonalTask:
        """Update one of the caller's tasks.

        Raises:
            TaskNotFoundError: If the caller owns no task with this id.
        """
        task = await self._tasks.get_owned(task_id, principal.user_id)
        if task is None:
            raise TaskNotFoundError(task_id)

        changes = request.changes()
        stored = await self._tasks.save_fields(
            apply_personal_task_update(task, changes), changes.keys()
        )
        if stored is None:
            raise TaskNotFoundError(task_id)

        logger.info(
            "personal_task_updated",
            user_id=principal.user_id,
            task_id=task_id,
            fields=sorted(changes),
        )
        return stored
