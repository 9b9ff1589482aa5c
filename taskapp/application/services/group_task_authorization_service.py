"""Group task authorization service.

Decides, for every group task operation, whether the acting principal is
permitted, then applies the lifecycle transition and persists it.

Order of checks for every operation:
1. Group must exist (GroupNotFoundError)
2. Caller must hold a collaborator row (NotGroupMemberError)
3. Role must be allowed for the operation (rule table)
4. Task must exist inside the group, for update and complete
5. Assignee, if given, must be a member of the group (InvalidAssignmentError)

A non-member therefore always gets Forbidden before any task lookup, so
task existence never leaks to outsiders.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

from taskapp.application.dtos.tasks import (
    CreateGroupTaskDTO,
    GroupTaskView,
    UpdateGroupTaskDTO,
)
from taskapp.application.services.group_membership_service import GroupMembershipService
from taskapp.domain.errors.group import InvalidAssignmentError
from taskapp.domain.errors.identity import ForbiddenError
from taskapp.domain.errors.task import TaskNotFoundError
from taskapp.domain.models.group import Collaborator
from taskapp.domain.models.principal import Principal
from taskapp.domain.models.task import GroupTask
from taskapp.domain.primitives import utc_now
from taskapp.domain.services.group_task_policy import (
    GroupTaskOperation,
    authorize_group_task_operation,
    is_visible_to,
    merge_visible_batches,
    sees_all_group_tasks,
)
from taskapp.domain.services.task_lifecycle import (
    COMPLETION_FIELDS,
    apply_group_task_update,
    complete_group_task,
    initial_status,
)
from taskapp.infrastructure.adapters.persistence.group_task_repository import (
    GroupTaskRepository,
)
from taskapp.infrastructure.adapters.persistence.user_repository import UserRepository
from taskapp.infrastructure.observability import get_logger_for_service


class GroupTaskAuthorizationService:
    """Authorizes and performs create, list, update and complete on group tasks.

    Attributes:
        _membership: Membership registry answering group and role queries.
        _tasks: Group task store adapter.
        _users: User store adapter, used for assignee summaries.
        _clock: Source of completion timestamps.
    """

    def __init__(
        self,
        membership: GroupMembershipService,
        tasks: GroupTaskRepository,
        users: UserRepository,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._membership = membership
        self._tasks = tasks
        self._users = users
        self._clock = clock
        self._log = get_logger_for_service(type(self).__name__, component="authorization")

    async def _authorize(
        self, operation: GroupTaskOperation, principal: Principal, group_id: str
    ) -> Collaborator:
        await self._membership.require_group(group_id)
        membership = await self._membership.get_membership(group_id, principal.user_id)
        try:
            return authorize_group_task_operation(
                operation, membership, principal.user_id, group_id
            )
        except ForbiddenError:
            self._log.warning(
                "group_task_access_denied",
                operation=operation.value,
                user_id=principal.user_id,
                group_id=group_id,
            )
            raise

    async def _validate_assignment(self, group_id: str, assignee_id: str | None) -> None:
        if assignee_id is None:
            return
        if await self._membership.get_membership(group_id, assignee_id) is None:
            raise InvalidAssignmentError(group_id, assignee_id)

    async def _require_task(self, task_id: str, group_id: str) -> GroupTask:
        task = await self._tasks.get_in_group(task_id, group_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    async def create_task(
        self, principal: Principal, group_id: str, request: CreateGroupTaskDTO
    ) -> GroupTask:
        """Create a task in a group.

        Nothing is persisted when the assignee is invalid.

        Raises:
            GroupNotFoundError: If the group does not exist.
            NotGroupMemberError: If the caller is not a member.
            InvalidAssignmentError: If the assignee is not a member.
        """
        await self._authorize(GroupTaskOperation.CREATE, principal, group_id)
        await self._validate_assignment(group_id, request.assigned_to)

        task = await self._tasks.add(
            GroupTask(
                id="",
                name=request.name,
                status=initial_status(request.status),
                description=request.description,
                deadline=request.deadline,
                category=request.category,
                group_id=group_id,
                created_by=principal.user_id,
                assigned_to=request.assigned_to,
            )
        )
        self._log.info(
            "group_task_created",
            group_id=group_id,
            task_id=task.id,
            user_id=principal.user_id,
            assigned_to=task.assigned_to,
        )
        return task

    async def list_tasks(self, principal: Principal, group_id: str) -> list[GroupTaskView]:
        """List the group tasks visible to the caller.

        Admins see every task in the group. Collaborators see the union of
        tasks assigned to them and tasks they created.

        Raises:
            GroupNotFoundError: If the group does not exist.
            NotGroupMemberError: If the caller is not a member.
        """
        membership = await self._authorize(GroupTaskOperation.LIST, principal, group_id)

        if sees_all_group_tasks(membership):
            tasks = await self._tasks.list_for_group(group_id)
        else:
            assigned = await self._tasks.list_assigned_to(group_id, principal.user_id)
            created = await self._tasks.list_created_by(group_id, principal.user_id)
            tasks = merge_visible_batches(assigned, created)

        return await self._enrich([task for task in tasks if is_visible_to(task, membership)])

    async def update_task(
        self,
        principal: Principal,
        group_id: str,
        task_id: str,
        request: UpdateGroupTaskDTO,
    ) -> GroupTask:
        """Apply a generic update to a group task.

        Only supplied fields change. Completion metadata is left as is.

        Raises:
            GroupNotFoundError: If the group does not exist.
            NotGroupMemberError: If the caller is not a member.
            TaskNotFoundError: If the task is not in the group.
            InvalidAssignmentError: If a new assignee is not a member.
        """
        await self._authorize(GroupTaskOperation.UPDATE, principal, group_id)
        task = await self._require_task(task_id, group_id)

        changes = request.changes()
        await self._validate_assignment(group_id, changes.get("assigned_to"))

        updated = apply_group_task_update(task, changes)
        stored = await self._tasks.save_fields(updated, changes.keys())
        if stored is None:
            raise TaskNotFoundError(task_id)

        self._log.info(
            "group_task_updated",
            group_id=group_id,
            task_id=task_id,
            user_id=principal.user_id,
            fields=sorted(changes),
        )
        return stored

    async def complete_task(
        self, principal: Principal, group_id: str, task_id: str
    ) -> GroupTask:
        """Mark a group task completed by the caller.

        Completing an already completed task succeeds and overwrites
        completed_by and completed_at.

        Raises:
            GroupNotFoundError: If the group does not exist.
            NotGroupMemberError: If the caller is not a member.
            TaskNotFoundError: If the task is not in the group.
        """
        await self._authorize(GroupTaskOperation.COMPLETE, principal, group_id)
        task = await self._require_task(task_id, group_id)

        completed = complete_group_task(task, principal.user_id, self._clock())
        stored = await self._tasks.save_fields(completed, COMPLETION_FIELDS)
        if stored is None:
            raise TaskNotFoundError(task_id)

        self._log.info(
            "group_task_completed",
            group_id=group_id,
            task_id=task_id,
            user_id=principal.user_id,
            recompleted=task.is_completed,
        )
        return stored

    async def _enrich(self, tasks: list[GroupTask]) -> list[GroupTaskView]:
        """Resolve creator and assignee summaries in one batched lookup."""
        referenced = [task.created_by for task in tasks]
        referenced += [task.assigned_to for task in tasks if task.assigned_to]
        summaries = await self._users.summaries(referenced)
        return [
            GroupTaskView(
                task=task,
                created_by=summaries.get(task.created_by),
                assigned_to=summaries.get(task.assigned_to) if task.assigned_to else None,
            )
            for task in tasks
        ]
