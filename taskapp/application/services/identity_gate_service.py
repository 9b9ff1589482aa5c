"""Identity gate.

Resolves an opaque credential token into a Principal and checks global
system roles for administrative operations.

Unauthenticated means no valid principal could be resolved; Forbidden
means the principal is known but lacks the required system role.
"""

from __future__ import annotations

from structlog import get_logger

from taskapp.application.ports.session_tokens import SessionTokenProtocol
from taskapp.domain.errors.identity import SystemRoleRequiredError, UnauthenticatedError
from taskapp.domain.models.principal import Principal
from taskapp.domain.models.user import SystemRole, User
from taskapp.infrastructure.adapters.persistence.user_repository import UserRepository

logger = get_logger()


class IdentityGateService:
    """Authenticates callers and enforces system roles."""

    def __init__(self, users: UserRepository, tokens: SessionTokenProtocol) -> None:
        self._users = users
        self._tokens = tokens

    async def authenticate(self, credential_token: str | None) -> Principal:
        """Resolve a credential token into a principal.

        Args:
            credential_token: Token from the Authorization header, if any.

        Returns:
            The authenticated principal.

        Raises:
            UnauthenticatedError: If the token is missing, unknown or
                expired, or its user no longer exists.
        """
        log = logger.bind(component="identity_gate")

        if not credential_token:
            log.warning("auth_failed", reason="missing_token")
            raise UnauthenticatedError("Access denied")

        principal = await self._tokens.resolve(credential_token)
        if principal is None:
            log.warning("auth_failed", reason="invalid_token")
            raise UnauthenticatedError("Invalid token")

        if await self._users.get(principal.user_id) is None:
            log.warning("auth_failed", reason="unknown_user", user_id=principal.user_id)
            raise UnauthenticatedError("Invalid token")

        return principal

    async def require_system_role(self, principal: Principal, role: SystemRole) -> User:
        """Check that the principal holds a system role.

        Returns:
            The principal's user record.

        Raises:
            SystemRoleRequiredError: If the user is missing or has another role.
        """
        user = await self._users.get(principal.user_id)
        if user is None or user.role != role:
            logger.warning(
                "authz_failed",
                reason="insufficient_role",
                user_id=principal.user_id,
                required_role=role.value,
                provided_role=user.role.value if user else None,
            )
            raise SystemRoleRequiredError(principal.user_id, role.value)
        return user
