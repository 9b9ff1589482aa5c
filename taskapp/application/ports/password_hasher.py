"""Password hashing port."""

from __future__ import annotations

from typing import Protocol


class PasswordHasherProtocol(Protocol):
    """Protocol for producing and checking opaque password credentials."""

    def hash(self, password: str) -> str:
        """Return an opaque credential for the password."""
        ...

    def verify(self, password: str, credential: str) -> bool:
        """Check a password against a stored credential."""
        ...
