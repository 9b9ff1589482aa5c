"""Task domain models.

Personal tasks belong to exactly one owner. Group tasks live inside a
group and carry assignment and completion metadata. Status is an open
string set by clients; only the completion operation forces a value.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Final

from taskapp.domain.primitives import parse_timestamp, to_iso

PERSONAL_TASKS_COLLECTION: Final[str] = "tasks"
GROUP_TASKS_COLLECTION: Final[str] = "group_tasks"

PENDING_STATUS: Final[str] = "pendiente"
COMPLETED_STATUS: Final[str] = "completada"


@dataclass(frozen=True)
class PersonalTask:
    """A private task visible only to its owner."""

    id: str
    name: str
    status: str
    description: str | None
    deadline: datetime | None
    category: str | None
    owner_user_id: str

    def to_document(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "status": self.status,
            "description": self.description,
            "deadline": to_iso(self.deadline),
            "category": self.category,
            "user_id": self.owner_user_id,
        }

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "status": self.status,
            "description": self.description,
            "deadline": self.deadline,
            "category": self.category,
            "user_id": self.owner_user_id,
        }

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> PersonalTask:
        return cls(
            id=document["id"],
            name=document.get("name") or "",
            status=document.get("status") or PENDING_STATUS,
            description=document.get("description"),
            deadline=parse_timestamp(document.get("deadline")),
            category=document.get("category"),
            owner_user_id=document["user_id"],
        )


@dataclass(frozen=True)
class GroupTask:
    """A task shared inside a group.

    Attributes:
        id: Store-generated identifier.
        name: Task title.
        status: Free-form status string.
        description: Optional details.
        deadline: Optional due date.
        category: Optional category label.
        group_id: Owning group.
        created_by: User who created the task.
        assigned_to: Optional assignee; a member of the group when assigned.
        completed_by: Member who last completed the task.
        completed_at: When the task was last completed.
    """

    id: str
    name: str
    status: str
    description: str | None
    deadline: datetime | None
    category: str | None
    group_id: str
    created_by: str
    assigned_to: str | None = None
    completed_by: str | None = None
    completed_at: datetime | None = None

    @property
    def is_completed(self) -> bool:
        return self.status == COMPLETED_STATUS

    def to_document(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "status": self.status,
            "description": self.description,
            "deadline": to_iso(self.deadline),
            "category": self.category,
            "group_id": self.group_id,
            "created_by": self.created_by,
            "assigned_to": self.assigned_to,
            "completed_by": self.completed_by,
            "completed_at": to_iso(self.completed_at),
        }

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> GroupTask:
        return cls(
            id=document["id"],
            name=document.get("name") or "",
            status=document.get("status") or PENDING_STATUS,
            description=document.get("description"),
            deadline=parse_timestamp(document.get("deadline")),
            category=document.get("category"),
            group_id=document["group_id"],
            created_by=document["created_by"],
            assigned_to=document.get("assigned_to"),
            completed_by=document.get("completed_by"),
            completed_at=parse_timestamp(document.get("completed_at")),
        )
