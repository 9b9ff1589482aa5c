"""Domain errors for TaskApp.

Provides specific exception classes for different failure scenarios.
All exceptions inherit from TaskAppError and carry an ErrorKind.
"""

from taskapp.domain.errors.group import (
    DuplicateCollaboratorError,
    GroupNotFoundError,
    InvalidAssignmentError,
    NotGroupAdminError,
    NotGroupMemberError,
)
from taskapp.domain.errors.identity import (
    ForbiddenError,
    InvalidCredentialsError,
    SystemRoleRequiredError,
    UnauthenticatedError,
)
from taskapp.domain.errors.store import DuplicateDocumentError, StoreFaultError
from taskapp.domain.errors.task import TaskNotFoundError
from taskapp.domain.errors.user import EmailAlreadyRegisteredError, UserNotFoundError
from taskapp.domain.exceptions import ErrorKind, TaskAppError

__all__: list[str] = [
    "DuplicateCollaboratorError",
    "DuplicateDocumentError",
    "EmailAlreadyRegisteredError",
    "ErrorKind",
    "ForbiddenError",
    "GroupNotFoundError",
    "InvalidAssignmentError",
    "InvalidCredentialsError",
    "NotGroupAdminError",
    "NotGroupMemberError",
    "StoreFaultError",
    "SystemRoleRequiredError",
    "TaskAppError",
    "TaskNotFoundError",
    "UnauthenticatedError",
    "UserNotFoundError",
]
