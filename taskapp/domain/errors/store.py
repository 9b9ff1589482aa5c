"""Document store errors.

Raised by Store implementations; services translate DuplicateDocumentError
into the domain conflict that matches the collection.
"""

from __future__ import annotations

from taskapp.domain.exceptions import ErrorKind, TaskAppError


class DuplicateDocumentError(TaskAppError):
    """Raised when an insert collides with a unique key.

    Attributes:
        collection: Target collection.
        key: The unique key fields that collided.
    """

    kind = ErrorKind.CONFLICT

    def __init__(self, collection: str, key: tuple[str, ...]) -> None:
        self.collection = collection
        self.key = key
        super().__init__(
            f"Duplicate document in '{collection}' for unique key {', '.join(key)}"
        )


class StoreFaultError(TaskAppError):
    """Raised when the backing store fails unexpectedly.

    The underlying cause message is kept for diagnostics only.
    """

    kind = ErrorKind.SERVER_FAULT

    def __init__(self, operation: str, cause: str) -> None:
        self.operation = operation
        self.cause = cause
        super().__init__(f"Store operation '{operation}' failed: {cause}")
