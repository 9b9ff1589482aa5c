"""Group membership view DTOs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from taskapp.domain.models.group import Collaborator, Group
from taskapp.domain.models.user import User


@dataclass(frozen=True)
class CollaboratorView:
    """Collaborator row joined with its user's public identity."""

    collaborator: Collaborator
    user: User

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.collaborator.id,
            "user": {
                "id": self.user.id,
                "username": self.user.username,
                "email": self.user.email,
            },
            "role": self.collaborator.role.value,
            "group_id": self.collaborator.group_id,
        }


@dataclass(frozen=True)
class GroupMembershipView:
    """One of the caller's memberships joined with its group.

    Attributes:
        membership: The caller's collaborator row.
        group: The group the row belongs to.
        admin_username: Username of the group admin, None if unresolvable.
    """

    membership: Collaborator
    group: Group
    admin_username: str | None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.membership.id,
            "group": {
                "id": self.group.id,
                "name": self.group.name,
                "admin": {
                    "id": self.group.admin_user_id,
                    "username": self.admin_username,
                },
                "created_at": self.group.created_at,
            },
            "role": self.membership.role.value,
            "user_id": self.membership.user_id,
        }
