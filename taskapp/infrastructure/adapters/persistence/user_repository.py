"""User store adapter.

Thin query helpers over the document store for the users collection.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Any

from taskapp.application.ports.document_store import DocumentStoreProtocol
from taskapp.domain.errors.store import DuplicateDocumentError
from taskapp.domain.errors.user import EmailAlreadyRegisteredError
from taskapp.domain.models.user import USERS_COLLECTION, SystemRole, User, UserSummary
from taskapp.domain.primitives import to_iso


class UserRepository:
    """Reads and writes user documents."""

    def __init__(self, store: DocumentStoreProtocol) -> None:
        self._store = store

    async def get(self, user_id: str) -> User | None:
        document = await self._store.get(USERS_COLLECTION, user_id)
        return User.from_document(document) if document else None

    async def get_by_email(self, email: str) -> User | None:
        documents = await self._store.find(USERS_COLLECTION, {"email": email})
        return User.from_document(documents[0]) if documents else None

    async def list_all(self) -> list[User]:
        documents = await self._store.find(USERS_COLLECTION, {})
        return [User.from_document(document) for document in documents]

    async def get_many(self, user_ids: Iterable[str]) -> dict[str, User]:
        """Resolve a batch of ids in one store call.

        Returns:
            Mapping of id to user for the ids that exist.
        """
        unique_ids = sorted({user_id for user_id in user_ids if user_id})
        if not unique_ids:
            return {}
        documents = await self._store.get_many(USERS_COLLECTION, unique_ids)
        return {document["id"]: User.from_document(document) for document in documents}

    async def summaries(self, user_ids: Iterable[str]) -> dict[str, UserSummary]:
        users = await self.get_many(user_ids)
        return {user_id: user.summary() for user_id, user in users.items()}

    async def add(
        self,
        username: str,
        email: str,
        password_hash: str,
        role: SystemRole,
        last_login: datetime | None,
    ) -> User:
        """Insert a new user.

        Raises:
            EmailAlreadyRegisteredError: If the email is already taken.
        """
        user = User(
            id="",
            username=username,
            email=email,
            password_hash=password_hash,
            role=role,
            last_login=last_login,
        )
        try:
            user_id = await self._store.insert(USERS_COLLECTION, user.to_document())
        except DuplicateDocumentError as e:
            raise EmailAlreadyRegisteredError(email) from e
        return User(
            id=user_id,
            username=username,
            email=email,
            password_hash=password_hash,
            role=role,
            last_login=last_login,
        )

    async def update_fields(self, user_id: str, fields: Mapping[str, Any]) -> User | None:
        """Merge fields into a user document.

        ``role`` may be given as a SystemRole and ``last_login`` as a datetime;
        both are converted to their stored form.

        Raises:
            EmailAlreadyRegisteredError: If a new email collides.
        """
        document: dict[str, Any] = dict(fields)
        if isinstance(document.get("role"), SystemRole):
            document["role"] = document["role"].value
        if isinstance(document.get("last_login"), datetime):
            document["last_login"] = to_iso(document["last_login"])
        try:
            updated = await self._store.update(USERS_COLLECTION, user_id, document)
        except DuplicateDocumentError as e:
            raise EmailAlreadyRegisteredError(str(document.get("email"))) from e
        return User.from_document(updated) if updated else None
