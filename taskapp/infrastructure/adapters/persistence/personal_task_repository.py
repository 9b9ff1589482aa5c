"""Personal task store adapter.

Every lookup is scoped by owner, so a task owned by someone else is simply
not found.
"""

from __future__ import annotations

from collections.abc import Iterable

from taskapp.application.ports.document_store import DocumentStoreProtocol
from taskapp.domain.models.task import PERSONAL_TASKS_COLLECTION, PersonalTask


class PersonalTaskRepository:
    """Reads and writes personal task documents."""

    def __init__(self, store: DocumentStoreProtocol) -> None:
        self._store = store

    async def list_for_owner(self, owner_user_id: str) -> list[PersonalTask]:
        documents = await self._store.find(
            PERSONAL_TASKS_COLLECTION, {"user_id": owner_user_id}
        )
        return [PersonalTask.from_document(document) for document in documents]

    async def get_owned(self, task_id: str, owner_user_id: str) -> PersonalTask | None:
        documents = await self._store.find(
            PERSONAL_TASKS_COLLECTION, {"id": task_id, "user_id": owner_user_id}
        )
        return PersonalTask.from_document(documents[0]) if documents else None

    async def add(self, task: PersonalTask) -> PersonalTask:
        task_id = await self._store.insert(PERSONAL_TASKS_COLLECTION, task.to_document())
        return PersonalTask.from_document({"id": task_id, **task.to_document()})

    async def save_fields(
        self, task: PersonalTask, field_names: Iterable[str]
    ) -> PersonalTask | None:
        """Persist the named fields of an already-transitioned task."""
        document = task.to_document()
        changes = {name: document[name] for name in field_names}
        updated = await self._store.update(PERSONAL_TASKS_COLLECTION, task.id, changes)
        return PersonalTask.from_document(updated) if updated else None
