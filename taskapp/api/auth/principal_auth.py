"""Bearer token authentication dependencies.

Resolves the ``Authorization: Bearer <token>`` header into a Principal
through the identity gate, and gates master-only routes.
"""

from typing import Annotated

import structlog
from fastapi import Depends, Header

from taskapp.api.dependencies.services import get_identity_gate
from taskapp.application.services.identity_gate_service import IdentityGateService
from taskapp.domain.models.principal import Principal
from taskapp.domain.models.user import SystemRole

logger = structlog.get_logger(__name__)


def extract_bearer_token(authorization: str | None) -> str | None:
    """Return the token part of an Authorization header, if any."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


async def get_principal(
    authorization: Annotated[
        str | None,
        Header(description="Bearer token issued by POST /api/auth/login"),
    ] = None,
    identity_gate: IdentityGateService = Depends(get_identity_gate),
) -> Principal:
    """Authenticate the caller.

    Raises:
        UnauthenticatedError: If the header is missing or the token is invalid.
    """
    return await identity_gate.authenticate(extract_bearer_token(authorization))


async def require_master(
    principal: Principal = Depends(get_principal),
    identity_gate: IdentityGateService = Depends(get_identity_gate),
) -> Principal:
    """Authenticate the caller and require the master system role.

    Raises:
        UnauthenticatedError: If the caller is not authenticated.
        SystemRoleRequiredError: If the caller is not master.
    """
    await identity_gate.require_system_role(principal, SystemRole.MASTER)
    logger.info("master_authenticated", user_id=principal.user_id)
    return principal
