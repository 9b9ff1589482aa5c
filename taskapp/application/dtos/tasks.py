"""Task request and view DTOs.

Application-layer request structs for task operations. The API layer
converts validated pydantic request bodies into these DTOs, so services
never see raw request payloads.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import datetime
from typing import Any

from taskapp.domain.models.task import GroupTask
from taskapp.domain.models.user import UserSummary


def _provided(dto: object) -> dict[str, Any]:
    # None means "not supplied" for update requests
    return {
        field.name: getattr(dto, field.name)
        for field in fields(dto)  # type: ignore[arg-type]
        if getattr(dto, field.name) is not None
    }


@dataclass(frozen=True)
class CreatePersonalTaskDTO:
    name: str
    status: str | None = None
    description: str | None = None
    deadline: datetime | None = None
    category: str | None = None


@dataclass(frozen=True)
class UpdatePersonalTaskDTO:
    """Partial update of a personal task; only supplied fields change."""

    name: str | None = None
    status: str | None = None
    description: str | None = None
    deadline: datetime | None = None
    category: str | None = None

    def changes(self) -> dict[str, Any]:
        return _provided(self)


@dataclass(frozen=True)
class CreateGroupTaskDTO:
    """Request to create a task inside a group.

    Attributes:
        name: Task title.
        status: Initial status; defaults to "pendiente".
        description: Optional details.
        deadline: Optional due date.
        category: Optional category label.
        assigned_to: Optional assignee; must be a member of the group.
    """

    name: str
    status: str | None = None
    description: str | None = None
    deadline: datetime | None = None
    category: str | None = None
    assigned_to: str | None = None


@dataclass(frozen=True)
class UpdateGroupTaskDTO:
    """Generic update of a group task.

    Completion metadata is not part of this request; use the complete
    operation instead.

    Set ``clear_assignee`` to unassign the task; ``assigned_to`` is then
    ignored.
    """

    name: str | None = None
    status: str | None = None
    description: str | None = None
    deadline: datetime | None = None
    category: str | None = None
    assigned_to: str | None = None
    clear_assignee: bool = False

    def changes(self) -> dict[str, Any]:
        changes = _provided(self)
        del changes["clear_assignee"]
        if self.clear_assignee:
            changes["assigned_to"] = None
        return changes


@dataclass(frozen=True)
class GroupTaskView:
    """Group task enriched with creator and assignee summaries.

    Summaries are None when the referenced user cannot be resolved.
    """

    task: GroupTask
    created_by: UserSummary | None
    assigned_to: UserSummary | None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.task.id,
            "name": self.task.name,
            "status": self.task.status,
            "description": self.task.description,
            "deadline": self.task.deadline,
            "category": self.task.category,
            "group_id": self.task.group_id,
            "created_by": self.created_by.to_dict() if self.created_by else None,
            "assigned_to": self.assigned_to.to_dict() if self.assigned_to else None,
            "completed_by": self.task.completed_by,
            "completed_at": self.task.completed_at,
        }
