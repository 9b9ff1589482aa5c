"""Document store port.

Protocol for the generic document store backing every collection.
Documents are flat mappings keyed by a store-generated string id; every
returned document includes its ``id``.

Uniqueness:
Implementations MUST enforce the keys in ``UNIQUE_KEYS`` at insert time
and raise DuplicateDocumentError on collision. Application code still
pre-checks, but the store closes the read-then-write race.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Final, Protocol

Document = dict[str, Any]

UNIQUE_KEYS: Final[dict[str, tuple[tuple[str, ...], ...]]] = {
    "users": (("email",),),
    "collaborators": (("group_id", "user_id"),),
}


class DocumentStoreProtocol(Protocol):
    """Protocol for document persistence.

    All methods are async for non-blocking I/O.
    """

    async def get(self, collection: str, document_id: str) -> Document | None:
        """Retrieve a document by id.

        Returns:
            The document if found, None otherwise.
        """
        ...

    async def get_many(
        self, collection: str, document_ids: Iterable[str]
    ) -> list[Document]:
        """Retrieve several documents in one round trip.

        Unknown ids are skipped; order of the result is unspecified.
        """
        ...

    async def find(
        self, collection: str, filters: Mapping[str, Any]
    ) -> list[Document]:
        """Find documents whose fields equal every filter value (AND).

        Args:
            collection: Collection name.
            filters: Field name to required value. An empty mapping matches all.

        Returns:
            Matching documents in insertion order.
        """
        ...

    async def insert(self, collection: str, fields: Mapping[str, Any]) -> str:
        """Insert a new document.

        Returns:
            The generated document id.

        Raises:
            DuplicateDocumentError: If a unique key collides.
        """
        ...

    async def update(
        self, collection: str, document_id: str, fields: Mapping[str, Any]
    ) -> Document | None:
        """Merge fields into an existing document.

        Returns:
            The updated document, or None if it does not exist.

        Raises:
            DuplicateDocumentError: If the change collides with a unique key.
        """
        ...

    async def delete(self, collection: str, document_id: str) -> bool:
        """Remove a document. Used only for compensating failed writes.

        Returns:
            True if a document was removed.
        """
        ...
