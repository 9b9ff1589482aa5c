"""Document store stub.

In-memory implementation of DocumentStoreProtocol. Used by tests and as
the default store in development. Unique keys from UNIQUE_KEYS are
enforced at insert and update time; the check and the write happen
without an intervening await, so concurrent coroutines cannot both pass.

This stub is NOT durable. Use PostgresDocumentStore for persistence.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any
from uuid import uuid4

from taskapp.application.ports.document_store import (
    UNIQUE_KEYS,
    Document,
    DocumentStoreProtocol,
)
from taskapp.domain.errors.store import DuplicateDocumentError


class DocumentStoreStub(DocumentStoreProtocol):
    """In-memory document store.

    Test Control Methods:
        - add_document: Seed a document with a chosen id
        - fail_inserts_into: Make inserts into a collection raise
        - documents: Snapshot of a collection (for assertions)
        - count: Number of documents in a collection
        - clear: Drop everything

    Example:
        store = DocumentStoreStub()
        user_id = await store.insert("users", {"email": "ana@example.com"})
        store.fail_inserts_into("collaborators", RuntimeError("boom"))
    """

    def __init__(
        self,
        unique_keys: Mapping[str, tuple[tuple[str, ...], ...]] | None = None,
    ) -> None:
        """Initialize the stub with empty storage.

        Args:
            unique_keys: Unique key definitions per collection.
                Defaults to UNIQUE_KEYS.
        """
        self._collections: dict[str, dict[str, Document]] = {}
        self._unique_keys = dict(UNIQUE_KEYS if unique_keys is None else unique_keys)
        self._insert_failures: dict[str, Exception] = {}

    # =========================================================================
    # Protocol Implementation
    # =========================================================================

    async def get(self, collection: str, document_id: str) -> Document | None:
        document = self._collection(collection).get(document_id)
        return dict(document) if document is not None else None

    async def get_many(
        self, collection: str, document_ids: Iterable[str]
    ) -> list[Document]:
        documents = self._collection(collection)
        return [
            dict(documents[document_id])
            for document_id in dict.fromkeys(document_ids)
            if document_id in documents
        ]

    async def find(
        self, collection: str, filters: Mapping[str, Any]
    ) -> list[Document]:
        return [
            dict(document)
            for document in self._collection(collection).values()
            if all(document.get(field) == value for field, value in filters.items())
        ]

    async def insert(self, collection: str, fields: Mapping[str, Any]) -> str:
        failure = self._insert_failures.pop(collection, None)
        if failure is not None:
            raise failure

        document_id = uuid4().hex
        document = {**fields, "id": document_id}
        self._check_unique(collection, document, exclude_id=None)
        self._collection(collection)[document_id] = document
        return document_id

    async def update(
        self, collection: str, document_id: str, fields: Mapping[str, Any]
    ) -> Document | None:
        documents = self._collection(collection)
        existing = documents.get(document_id)
        if existing is None:
            return None

        updated = {**existing, **fields, "id": document_id}
        self._check_unique(collection, updated, exclude_id=document_id)
        documents[document_id] = updated
        return dict(updated)

    async def delete(self, collection: str, document_id: str) -> bool:
        return self._collection(collection).pop(document_id, None) is not None

    # =========================================================================
    # Internals
    # =========================================================================

    def _collection(self, collection: str) -> dict[str, Document]:
        return self._collections.setdefault(collection, {})

    def _check_unique(
        self, collection: str, candidate: Document, exclude_id: str | None
    ) -> None:
        for key in self._unique_keys.get(collection, ()):
            candidate_value = tuple(candidate.get(field) for field in key)
            for document_id, document in self._collection(collection).items():
                if document_id == exclude_id:
                    continue
                if tuple(document.get(field) for field in key) == candidate_value:
                    raise DuplicateDocumentError(collection, key)

    # =========================================================================
    # Test Control Methods
    # =========================================================================

    def add_document(self, collection: str, document: Document) -> None:
        """Seed a document verbatim (synchronous for test setup).

        The document must carry its own ``id``. Unique keys are not checked.
        """
        self._collection(collection)[document["id"]] = dict(document)

    def fail_inserts_into(self, collection: str, error: Exception) -> None:
        """Make the next insert into ``collection`` raise ``error``."""
        self._insert_failures[collection] = error

    def documents(self, collection: str) -> list[Document]:
        """Snapshot of every document in a collection, in insertion order."""
        return [dict(document) for document in self._collection(collection).values()]

    def count(self, collection: str) -> int:
        return len(self._collection(collection))

    def clear(self) -> None:
        """Clear all stored documents and pending failures."""
        self._collections.clear()
        self._insert_failures.clear()
