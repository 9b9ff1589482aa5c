"""Group task store adapter.

Every query is scoped by group id. The visibility filter issues the
assigned-to and created-by queries separately; the caller unions them.
"""

from __future__ import annotations

from collections.abc import Iterable

from taskapp.application.ports.document_store import DocumentStoreProtocol
from taskapp.domain.models.task import GROUP_TASKS_COLLECTION, GroupTask


class GroupTaskRepository:
    """Reads and writes group task documents."""

    def __init__(self, store: DocumentStoreProtocol) -> None:
        self._store = store

    async def _find(self, **filters: str) -> list[GroupTask]:
        documents = await self._store.find(GROUP_TASKS_COLLECTION, filters)
        return [GroupTask.from_document(document) for document in documents]

    async def get_in_group(self, task_id: str, group_id: str) -> GroupTask | None:
        tasks = await self._find(id=task_id, group_id=group_id)
        return tasks[0] if tasks else None

    async def list_for_group(self, group_id: str) -> list[GroupTask]:
        return await self._find(group_id=group_id)

    async def list_assigned_to(self, group_id: str, user_id: str) -> list[GroupTask]:
        return await self._find(group_id=group_id, assigned_to=user_id)

    async def list_created_by(self, group_id: str, user_id: str) -> list[GroupTask]:
        return await self._find(group_id=group_id, created_by=user_id)

    async def add(self, task: GroupTask) -> GroupTask:
        task_id = await self._store.insert(GROUP_TASKS_COLLECTION, task.to_document())
        return GroupTask.from_document({"id": task_id, **task.to_document()})

    async def save_fields(
        self, task: GroupTask, field_names: Iterable[str]
    ) -> GroupTask | None:
        """Persist the named fields of an already-transitioned task.

        Returns:
            The stored task, or None if it vanished in the meantime.
        """
        document = task.to_document()
        changes = {name: document[name] for name in field_names}
        updated = await self._store.update(GROUP_TASKS_COLLECTION, task.id, changes)
        return GroupTask.from_document(updated) if updated else None
