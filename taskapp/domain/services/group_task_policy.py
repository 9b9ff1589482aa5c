"""Group task authorization rules.

Rule table deciding which group roles may perform each group task
operation, plus the visibility filter used when listing.

Rules:
- CREATE, LIST, UPDATE, COMPLETE: any member (admin or collaborator)
- Assignment on CREATE and UPDATE: assignee must be a member of the group
- LIST: admins see every task of the group; collaborators see the union of
  tasks assigned to them and tasks they created
- Adding collaborators: group admin only
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from typing import Final

from taskapp.domain.errors.group import NotGroupAdminError, NotGroupMemberError
from taskapp.domain.errors.identity import ForbiddenError
from taskapp.domain.models.group import Collaborator, GroupRole
from taskapp.domain.models.task import GroupTask


class GroupTaskOperation(str, Enum):
    """Operations on group tasks that require authorization."""

    CREATE = "create"
    LIST = "list"
    UPDATE = "update"
    COMPLETE = "complete"


_ANY_MEMBER: Final[frozenset[GroupRole]] = frozenset(
    {GroupRole.ADMIN, GroupRole.COLLABORATOR}
)

GROUP_TASK_RULES: Final[dict[GroupTaskOperation, frozenset[GroupRole]]] = {
    GroupTaskOperation.CREATE: _ANY_MEMBER,
    GroupTaskOperation.LIST: _ANY_MEMBER,
    GroupTaskOperation.UPDATE: _ANY_MEMBER,
    GroupTaskOperation.COMPLETE: _ANY_MEMBER,
}

def authorize_group_task_operation(
    operation: GroupTaskOperation,
    membership: Collaborator | None,
    user_id: str,
    group_id: str,
) -> Collaborator:
    """Check that a caller may perform an operation in a group.

    Args:
        operation: The requested operation.
        membership: The caller's collaborator row in the group, if any.
        user_id: The acting user.
        group_id: The target group.

    Returns:
        The caller's membership, for role-dependent follow-up decisions.

    Raises:
        NotGroupMemberError: If the caller holds no row in the group.
        ForbiddenError: If the caller's role is not allowed for the operation.
    """
    if membership is None or membership.group_id != group_id:
        raise NotGroupMemberError(user_id, group_id)

    if membership.role not in GROUP_TASK_RULES[operation]:
        raise ForbiddenError(
            user_id,
            f"Role '{membership.role.value}' may not {operation.value} group tasks",
        )

    return membership


def authorize_collaborator_addition(
    membership: Collaborator | None, user_id: str, group_id: str
) -> Collaborator:
    """Only the group admin may add collaborators.

    Raises:
        NotGroupAdminError: If the caller is not an admin of the group.
    """
    if membership is None or membership.group_id != group_id or not membership.is_admin:
        raise NotGroupAdminError(user_id, group_id)
    return membership


def sees_all_group_tasks(membership: Collaborator) -> bool:
    """Admins see every task of their group."""
    return membership.is_admin


def is_visible_to(task: GroupTask, membership: Collaborator) -> bool:
    """Decide whether a single task is visible to a member.

    Args:
        task: Candidate task.
        membership: The viewer's collaborator row.

    Returns:
        True if the viewer may see the task.
    """
    if task.group_id != membership.group_id:
        return False
    if sees_all_group_tasks(membership):
        return True
    return membership.user_id in (task.assigned_to, task.created_by)


def merge_visible_batches(*batches: Iterable[GroupTask]) -> list[GroupTask]:
    """Union task batches, de-duplicated by id in first-seen order."""
    seen: set[str] = set()
    merged: list[GroupTask] = []
    for batch in batches:
        for task in batch:
            if task.id in seen:
                continue
            seen.add(task.id)
            merged.append(task)
    return merged
