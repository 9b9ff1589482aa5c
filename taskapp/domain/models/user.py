"""User domain models.

A user carries a global system role (user or master), distinct from the
per-group role held through collaborator rows.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any

from taskapp.domain.primitives import parse_timestamp, to_iso

USERS_COLLECTION = "users"


class SystemRole(str, Enum):
    """Global privilege level of a user."""

    USER = "user"
    MASTER = "master"


@dataclass(frozen=True)
class UserSummary:
    """Lightweight reference to a user, used when enriching tasks."""

    id: str
    username: str

    def to_dict(self) -> dict[str, str]:
        return {"id": self.id, "username": self.username}


@dataclass(frozen=True)
class User:
    """Registered account.

    Attributes:
        id: Store-generated identifier.
        username: Display name.
        email: Unique login email.
        password_hash: Opaque credential produced by the password hasher.
        role: Global system role.
        last_login: Timestamp of the last successful login.
    """

    id: str
    username: str
    email: str
    password_hash: str
    role: SystemRole = SystemRole.USER
    last_login: datetime | None = None

    @property
    def is_master(self) -> bool:
        return self.role == SystemRole.MASTER

    def summary(self) -> UserSummary:
        return UserSummary(id=self.id, username=self.username)

    def to_public_dict(self) -> dict[str, Any]:
        """Outward view of the account; never includes the credential."""
        return {
            "id": self.id,
            "username": self.username,
            "email": self.email,
            "role": self.role.value,
            "last_login": self.last_login,
        }

    def to_document(self) -> dict[str, Any]:
        return {
            "username": self.username,
            "email": self.email,
            "password": self.password_hash,
            "role": self.role.value,
            "last_login": to_iso(self.last_login),
        }

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> User:
        return cls(
            id=document["id"],
            username=document.get("username") or "",
            email=document["email"],
            password_hash=document.get("password") or "",
            role=SystemRole(document.get("role") or SystemRole.USER.value),
            last_login=parse_timestamp(document.get("last_login")),
        )
