"""Group and collaborator domain models.

A group has exactly one admin, fixed at creation. Membership is recorded
as collaborator rows; a collaborator row is the unit of access control
for group tasks. At most one row exists per (group, user).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any

from taskapp.domain.primitives import parse_timestamp, to_iso

GROUPS_COLLECTION = "groups"
COLLABORATORS_COLLECTION = "collaborators"


class GroupRole(str, Enum):
    """Role held by a member inside one group."""

    ADMIN = "admin"
    COLLABORATOR = "collaborator"


@dataclass(frozen=True)
class Group:
    """A collaboration group.

    Attributes:
        id: Store-generated identifier.
        name: Group name.
        admin_user_id: The creator and sole admin.
        created_at: Creation timestamp (UTC).
    """

    id: str
    name: str
    admin_user_id: str
    created_at: datetime

    def to_document(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "admin": self.admin_user_id,
            "created_at": to_iso(self.created_at),
        }

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> Group:
        created_at = parse_timestamp(document.get("created_at"))
        if created_at is None:
            raise ValueError(f"Group {document.get('id')} has no created_at")
        return cls(
            id=document["id"],
            name=document.get("name") or "",
            admin_user_id=document["admin"],
            created_at=created_at,
        )


@dataclass(frozen=True)
class Collaborator:
    """Membership record tying a user to a group with a role."""

    id: str
    group_id: str
    user_id: str
    role: GroupRole

    @property
    def is_admin(self) -> bool:
        return self.role == GroupRole.ADMIN

    def to_document(self) -> dict[str, Any]:
        return {
            "group_id": self.group_id,
            "user_id": self.user_id,
            "role": self.role.value,
        }

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, **self.to_document()}

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> Collaborator:
        return cls(
            id=document["id"],
            group_id=document["group_id"],
            user_id=document["user_id"],
            role=GroupRole(document["role"]),
        )
