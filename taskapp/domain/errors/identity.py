"""Identity and access errors.

- UnauthenticatedError: no principal could be resolved from the request
- ForbiddenError: principal resolved but lacks the required role or membership
- InvalidCredentialsError: login attempted with a wrong password
"""

from __future__ import annotations

from taskapp.domain.exceptions import ErrorKind, TaskAppError


class UnauthenticatedError(TaskAppError):
    """Raised when a credential token is missing, unknown or expired."""

    kind = ErrorKind.UNAUTHENTICATED

    def __init__(self, reason: str = "Access denied") -> None:
        self.reason = reason
        super().__init__(reason)


class ForbiddenError(TaskAppError):
    """Raised when an authenticated principal is not allowed to act.

    Attributes:
        user_id: The acting user.
        reason: Why the action was refused.
    """

    kind = ErrorKind.FORBIDDEN

    def __init__(self, user_id: str, reason: str) -> None:
        """Initialize the error.

        Args:
            user_id: The acting user.
            reason: Why the action was refused.
        """
        self.user_id = user_id
        self.reason = reason
        super().__init__(reason)


class SystemRoleRequiredError(ForbiddenError):
    """Raised when an operation requires an elevated system role."""

    def __init__(self, user_id: str, required_role: str) -> None:
        self.required_role = required_role
        super().__init__(
            user_id, f"Access denied. The '{required_role}' role is required."
        )


class InvalidCredentialsError(TaskAppError):
    """Raised when a password does not match the stored credential."""

    kind = ErrorKind.INVALID_CREDENTIALS

    def __init__(self) -> None:
        super().__init__("Incorrect password")
