"""Task lifecycle transitions.

State machine for group tasks:

    created --update--> updated (status may change freely)
    created|updated --complete--> completed
        status forced to "completada", completed_by/completed_at set together

Completion metadata is written only by ``complete_group_task``. A later
generic update may change status but leaves completion metadata untouched.
Re-completing an already completed task overwrites completed_by and
completed_at.

Personal tasks follow the same update shape without completion metadata.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Any, Final, Mapping

from taskapp.domain.models.task import (
    COMPLETED_STATUS,
    PENDING_STATUS,
    GroupTask,
    PersonalTask,
)

PERSONAL_TASK_UPDATABLE_FIELDS: Final[frozenset[str]] = frozenset(
    {"name", "status", "description", "deadline", "category"}
)
GROUP_TASK_UPDATABLE_FIELDS: Final[frozenset[str]] = (
    PERSONAL_TASK_UPDATABLE_FIELDS | {"assigned_to"}
)
COMPLETION_FIELDS: Final[frozenset[str]] = frozenset(
    {"status", "completed_by", "completed_at"}
)


def _check_fields(changes: Mapping[str, Any], allowed: frozenset[str]) -> None:
    unknown = set(changes) - allowed
    if unknown:
        raise ValueError(f"Fields not updatable: {', '.join(sorted(unknown))}")


def initial_status(status: str | None) -> str:
    """Status for a newly created task; clients may omit it."""
    return status or PENDING_STATUS


def apply_personal_task_update(
    task: PersonalTask, changes: Mapping[str, Any]
) -> PersonalTask:
    """Apply a partial update to a personal task.

    Raises:
        ValueError: If a change targets a non-updatable field.
    """
    _check_fields(changes, PERSONAL_TASK_UPDATABLE_FIELDS)
    return replace(task, **dict(changes))


def apply_group_task_update(task: GroupTask, changes: Mapping[str, Any]) -> GroupTask:
    """Apply a generic update to a group task.

    Completion metadata cannot be set here; stale completion metadata from
    an earlier completion is preserved.

    Raises:
        ValueError: If a change targets a non-updatable field.
    """
    _check_fields(changes, GROUP_TASK_UPDATABLE_FIELDS)
    return replace(task, **dict(changes))


def complete_group_task(
    task: GroupTask, completed_by: str, completed_at: datetime
) -> GroupTask:
    """Mark a group task completed by a member.

    Args:
        task: Task to complete; may already be completed.
        completed_by: The member completing it.
        completed_at: Completion time.

    Returns:
        The completed task.
    """
    return replace(
        task,
        status=COMPLETED_STATUS,
        completed_by=completed_by,
        completed_at=completed_at,
    )
