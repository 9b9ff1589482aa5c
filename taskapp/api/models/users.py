"""User API models. Credentials never appear in any response."""

from datetime import datetime

from pydantic import BaseModel, Field

from taskapp.domain.models.user import SystemRole, User


class UserResponse(BaseModel):
    """Public view of a user account."""

    id: str
    username: str
    email: str
    role: SystemRole
    last_login: datetime | None = None

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(**user.to_public_dict())


class UserUpdatedResponse(BaseModel):
    message: str
    user: UserResponse


class UpdateProfileRequest(BaseModel):
    """Profile update; omitted fields stay unchanged."""

    username: str | None = Field(default=None, min_length=1, max_length=100)
    email: str | None = Field(default=None, min_length=3, max_length=254)


class UpdateUserRequest(UpdateProfileRequest):
    """Master-only account update, including the system role."""

    role: SystemRole | None = None
