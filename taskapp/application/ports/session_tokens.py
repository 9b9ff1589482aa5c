"""Session token port.

Tokens are opaque to the core: the login flow issues one for a principal,
and the identity gate resolves it back. How tokens are minted or signed is
up to the implementation.
"""

from __future__ import annotations

from typing import Protocol

from taskapp.domain.models.principal import Principal


class SessionTokenProtocol(Protocol):
    """Protocol for issuing and resolving session tokens."""

    async def issue(self, principal: Principal) -> str:
        """Issue a new token for the principal."""
        ...

    async def resolve(self, token: str) -> Principal | None:
        """Resolve a token.

        Returns:
            The principal, or None if the token is unknown or expired.
        """
        ...
