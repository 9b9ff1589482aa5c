"""Persistence adapters: document stores and per-collection repositories."""

from taskapp.infrastructure.adapters.persistence.group_repository import GroupRepository
from taskapp.infrastructure.adapters.persistence.group_task_repository import (
    GroupTaskRepository,
)
from taskapp.infrastructure.adapters.persistence.personal_task_repository import (
    PersonalTaskRepository,
)
from taskapp.infrastructure.adapters.persistence.postgres_document_store import (
    PostgresDocumentStore,
)
from taskapp.infrastructure.adapters.persistence.user_repository import UserRepository

__all__: list[str] = [
    "GroupRepository",
    "GroupTaskRepository",
    "PersonalTaskRepository",
    "PostgresDocumentStore",
    "UserRepository",
]
