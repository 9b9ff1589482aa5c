"""Base exception classes for the TaskApp domain layer."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Stable error taxonomy shared by every layer.

    Each kind maps 1:1 to an outward transport status in the API layer.
    """

    UNAUTHENTICATED = "unauthenticated"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INVALID_ASSIGNMENT = "invalid_assignment"
    INVALID_CREDENTIALS = "invalid_credentials"
    SERVER_FAULT = "server_fault"


class TaskAppError(Exception):
    """Base exception for all domain errors.

    All domain-specific exceptions MUST inherit from this class and set
    ``kind``. The API layer translates errors by kind only.
    """

    kind: ErrorKind = ErrorKind.SERVER_FAULT

    def __init__(self, message: str = "") -> None:
        """Initialize the exception with an optional message.

        Args:
            message: Human-readable error description.
        """
        super().__init__(message)
        self.message = message
