"""Task lookup errors."""

from __future__ import annotations

from taskapp.domain.exceptions import ErrorKind, TaskAppError


class TaskNotFoundError(TaskAppError):
    """Raised when a task does not exist in the caller's scope.

    For personal tasks the scope is the owner; for group tasks it is the
    group. A task outside the scope is reported as not found.

    Attributes:
        task_id: The task that was looked up.
    """

    kind = ErrorKind.NOT_FOUND

    def __init__(self, task_id: str) -> None:
        self.task_id = task_id
        super().__init__(f"Task not found: {task_id}")
