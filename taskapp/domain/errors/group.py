"""Group membership and group task authorization errors.

These errors are raised by the membership registry and the group task
authorization service:
- GroupNotFoundError: unknown group
- NotGroupMemberError: caller holds no collaborator row in the group
- NotGroupAdminError: caller is a member but not the group admin
- DuplicateCollaboratorError: (group, user) row already exists
- InvalidAssignmentError: assignee is not a member of the group
"""

from __future__ import annotations

from taskapp.domain.errors.identity import ForbiddenError
from taskapp.domain.exceptions import ErrorKind, TaskAppError


class GroupNotFoundError(TaskAppError):
    """Raised when a referenced group does not exist.

    Attributes:
        group_id: The group that was looked up.
    """

    kind = ErrorKind.NOT_FOUND

    def __init__(self, group_id: str) -> None:
        self.group_id = group_id
        super().__init__(f"Group not found: {group_id}")


class NotGroupMemberError(ForbiddenError):
    """Raised when the caller is not a member of the target group."""

    def __init__(self, user_id: str, group_id: str) -> None:
        self.group_id = group_id
        super().__init__(user_id, "You do not have access to this group")


class NotGroupAdminError(ForbiddenError):
    """Raised when a non-admin attempts an admin-only group operation."""

    def __init__(self, user_id: str, group_id: str) -> None:
        self.group_id = group_id
        super().__init__(user_id, "Only the group admin can add collaborators")


class DuplicateCollaboratorError(TaskAppError):
    """Raised when a user already holds a collaborator row in the group.

    Attributes:
        group_id: The target group.
        user_id: The user that is already a member.
    """

    kind = ErrorKind.CONFLICT

    def __init__(self, group_id: str, user_id: str) -> None:
        self.group_id = group_id
        self.user_id = user_id
        super().__init__("The user is already a collaborator in this group")


class InvalidAssignmentError(TaskAppError):
    """Raised when a task is assigned to someone outside the group.

    Attributes:
        group_id: The group owning the task.
        assignee_id: The rejected assignee.
    """

    kind = ErrorKind.INVALID_ASSIGNMENT

    def __init__(self, group_id: str, assignee_id: str) -> None:
        self.group_id = group_id
        self.assignee_id = assignee_id
        super().__init__("The assigned user is not a collaborator of the group")
