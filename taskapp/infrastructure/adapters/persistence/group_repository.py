"""Group and collaborator store adapter.

Every collaborator query is scoped by group id.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from taskapp.application.ports.document_store import DocumentStoreProtocol
from taskapp.domain.errors.group import DuplicateCollaboratorError
from taskapp.domain.errors.store import DuplicateDocumentError
from taskapp.domain.models.group import (
    COLLABORATORS_COLLECTION,
    GROUPS_COLLECTION,
    Collaborator,
    Group,
    GroupRole,
)


class GroupRepository:
    """Reads and writes group and collaborator documents."""

    def __init__(self, store: DocumentStoreProtocol) -> None:
        self._store = store

    async def get(self, group_id: str) -> Group | None:
        document = await self._store.get(GROUPS_COLLECTION, group_id)
        return Group.from_document(document) if document else None

    async def get_many(self, group_ids: Iterable[str]) -> dict[str, Group]:
        unique_ids = sorted(set(group_ids))
        if not unique_ids:
            return {}
        documents = await self._store.get_many(GROUPS_COLLECTION, unique_ids)
        return {document["id"]: Group.from_document(document) for document in documents}

    async def add_group(self, name: str, admin_user_id: str, created_at: datetime) -> Group:
        group = Group(id="", name=name, admin_user_id=admin_user_id, created_at=created_at)
        group_id = await self._store.insert(GROUPS_COLLECTION, group.to_document())
        return Group(
            id=group_id, name=name, admin_user_id=admin_user_id, created_at=created_at
        )

    async def remove_group(self, group_id: str) -> bool:
        return await self._store.delete(GROUPS_COLLECTION, group_id)

    async def get_membership(self, group_id: str, user_id: str) -> Collaborator | None:
        documents = await self._store.find(
            COLLABORATORS_COLLECTION, {"group_id": group_id, "user_id": user_id}
        )
        return Collaborator.from_document(documents[0]) if documents else None

    async def add_collaborator(
        self, group_id: str, user_id: str, role: GroupRole
    ) -> Collaborator:
        """Insert a collaborator row.

        Raises:
            DuplicateCollaboratorError: If (group_id, user_id) already exists.
        """
        row = Collaborator(id="", group_id=group_id, user_id=user_id, role=role)
        try:
            row_id = await self._store.insert(COLLABORATORS_COLLECTION, row.to_document())
        except DuplicateDocumentError as e:
            raise DuplicateCollaboratorError(group_id, user_id) from e
        return Collaborator(id=row_id, group_id=group_id, user_id=user_id, role=role)

    async def list_collaborators(self, group_id: str) -> list[Collaborator]:
        documents = await self._store.find(COLLABORATORS_COLLECTION, {"group_id": group_id})
        return [Collaborator.from_document(document) for document in documents]

    async def memberships_for_user(self, user_id: str) -> list[Collaborator]:
        documents = await self._store.find(COLLABORATORS_COLLECTION, {"user_id": user_id})
        return [Collaborator.from_document(document) for document in documents]
