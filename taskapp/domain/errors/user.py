"""User account errors."""

from __future__ import annotations

from taskapp.domain.exceptions import ErrorKind, TaskAppError


class UserNotFoundError(TaskAppError):
    """Raised when a user cannot be resolved by id or email.

    Attributes:
        lookup: The id or email that was looked up.
    """

    kind = ErrorKind.NOT_FOUND

    def __init__(self, lookup: str) -> None:
        self.lookup = lookup
        super().__init__(f"User not found: {lookup}")


class EmailAlreadyRegisteredError(TaskAppError):
    """Raised when an email is already used by another account."""

    kind = ErrorKind.CONFLICT

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(f"A user with email '{email}' already exists")
