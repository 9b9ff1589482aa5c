"""Authentication request and response models."""

from pydantic import BaseModel, Field

from taskapp.domain.models.user import SystemRole


class RegisterRequest(BaseModel):
    """Body for registering a user or creating a master account."""

    username: str = Field(min_length=1, max_length=100)
    email: str = Field(min_length=3, max_length=254)
    password: str = Field(min_length=1)

    model_config = {
        "json_schema_extra": {
            "example": {
                "username": "ana",
                "email": "ana@example.com",
                "password": "s3cret",
            }
        },
    }


class RegisterResponse(BaseModel):
    message: str
    user_id: str


class LoginRequest(BaseModel):
    email: str = Field(min_length=3, max_length=254)
    password: str = Field(min_length=1)


class LoginResponse(BaseModel):
    """Successful login.

    Attributes:
        message: Human-readable confirmation.
        token: Bearer token for subsequent requests.
        user_id: The authenticated user.
        role: The user's system role.
    """

    message: str
    token: str
    user_id: str
    role: SystemRole


class DashboardResponse(BaseModel):
    message: str
    user_id: str
    email: str | None = None
