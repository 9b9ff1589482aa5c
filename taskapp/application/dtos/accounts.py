"""Account request and result DTOs."""

from __future__ import annotations

from dataclasses import dataclass

from taskapp.domain.models.user import SystemRole


@dataclass(frozen=True)
class RegisterUserDTO:
    username: str
    email: str
    password: str


@dataclass(frozen=True)
class UpdateProfileDTO:
    username: str | None = None
    email: str | None = None


@dataclass(frozen=True)
class UpdateUserDTO:
    """Master-only update of another account, including its system role."""

    username: str | None = None
    email: str | None = None
    role: SystemRole | None = None


@dataclass(frozen=True)
class LoginResultDTO:
    """Successful login outcome.

    Attributes:
        token: Opaque session token for the Authorization header.
        user_id: The authenticated user.
        role: The user's system role.
    """

    token: str
    user_id: str
    role: SystemRole
