"""Security adapters: password hashing and session tokens."""

from taskapp.infrastructure.adapters.security.password_hasher import Pbkdf2PasswordHasher
from taskapp.infrastructure.adapters.security.session_token_registry import (
    SessionTokenRegistry,
)

__all__: list[str] = ["Pbkdf2PasswordHasher", "SessionTokenRegistry"]
