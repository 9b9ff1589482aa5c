"""User account service.

Registration, login, profile maintenance and master-only administration
of accounts. Credentials are hashed through the password hasher port and
never leave this service.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from datetime import datetime

from structlog import get_logger

from taskapp.application.dtos.accounts import (
    LoginResultDTO,
    RegisterUserDTO,
    UpdateProfileDTO,
    UpdateUserDTO,
)
from taskapp.application.ports.password_hasher import PasswordHasherProtocol
from taskapp.application.ports.session_tokens import SessionTokenProtocol
from taskapp.application.services.identity_gate_service import IdentityGateService
from taskapp.domain.errors.identity import InvalidCredentialsError
from taskapp.domain.errors.user import EmailAlreadyRegisteredError, UserNotFoundError
from taskapp.domain.models.principal import Principal
from taskapp.domain.models.user import SystemRole, User
from taskapp.domain.primitives import utc_now
from taskapp.infrastructure.adapters.persistence.user_repository import UserRepository

logger = get_logger()


class UserAccountService:
    """Account lifecycle operations.

    Master-only operations check the caller's system role through the
    identity gate before touching any account.
    """

    def __init__(
        self,
        users: UserRepository,
        hasher: PasswordHasherProtocol,
        tokens: SessionTokenProtocol,
        identity_gate: IdentityGateService,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._users = users
        self._hasher = hasher
        self._tokens = tokens
        self._identity_gate = identity_gate
        self._clock = clock

    async def _create_account(self, request: RegisterUserDTO, role: SystemRole) -> User:
        if await self._users.get_by_email(request.email) is not None:
            raise EmailAlreadyRegisteredError(request.email)
        user = await self._users.add(
            username=request.username,
            email=request.email,
            password_hash=await asyncio.to_thread(self._hasher.hash, request.password),
            role=role,
            last_login=self._clock(),
        )
        logger.info("user_registered", user_id=user.id, role=role.value)
        return user

    async def register(self, request: RegisterUserDTO) -> User:
        """Register a regular user.

        Raises:
            EmailAlreadyRegisteredError: If the email is taken.
        """
        return await self._create_account(request, SystemRole.USER)

    async def login(self, email: str, password: str) -> LoginResultDTO:
        """Check credentials and open a session.

        Raises:
            UserNotFoundError: If no user has the email.
            InvalidCredentialsError: If the password does not match.
        """
        log = logger.bind(component="login")

        user = await self._users.get_by_email(email)
        if user is None:
            log.warning("login_failed", reason="unknown_email")
            raise UserNotFoundError(email)

        if not await asyncio.to_thread(self._hasher.verify, password, user.password_hash):
            log.warning("login_failed", reason="bad_password", user_id=user.id)
            raise InvalidCredentialsError()

        token = await self._tokens.issue(Principal(user_id=user.id, email=user.email))
        await self._users.update_fields(user.id, {"last_login": self._clock()})

        log.info("login_succeeded", user_id=user.id)
        return LoginResultDTO(token=token, user_id=user.id, role=user.role)

    async def get_profile(self, principal: Principal) -> User:
        user = await self._users.get(principal.user_id)
        if user is None:
            raise UserNotFoundError(principal.user_id)
        return user

    async def update_profile(self, principal: Principal, request: UpdateProfileDTO) -> User:
        """Update the caller's own username and email.

        Raises:
            UserNotFoundError: If the caller's account vanished.
            EmailAlreadyRegisteredError: If the new email belongs to another user.
        """
        return await self._apply_user_update(
            principal.user_id, request.username, request.email, role=None
        )

    async def list_users(self, principal: Principal) -> list[User]:
        await self._identity_gate.require_system_role(principal, SystemRole.MASTER)
        return await self._users.list_all()

    async def update_user(
        self, principal: Principal, user_id: str, request: UpdateUserDTO
    ) -> User:
        """Master-only update of any account, including its role.

        Raises:
            SystemRoleRequiredError: If the caller is not master.
            UserNotFoundError: If the target does not exist.
            EmailAlreadyRegisteredError: If the new email belongs to another user.
        """
        await self._identity_gate.require_system_role(principal, SystemRole.MASTER)
        user = await self._apply_user_update(
            user_id, request.username, request.email, role=request.role
        )
        if request.role is not None:
            logger.info(
                "user_role_changed",
                user_id=user_id,
                role=request.role.value,
                changed_by=principal.user_id,
            )
        return user

    async def create_master(self, principal: Principal, request: RegisterUserDTO) -> User:
        await self._identity_gate.require_system_role(principal, SystemRole.MASTER)
        return await self._create_account(request, SystemRole.MASTER)

    async def _apply_user_update(
        self,
        user_id: str,
        username: str | None,
        email: str | None,
        role: SystemRole | None,
    ) -> User:
        if await self._users.get(user_id) is None:
            raise UserNotFoundError(user_id)

        if email is not None:
            holder = await self._users.get_by_email(email)
            if holder is not None and holder.id != user_id:
                raise EmailAlreadyRegisteredError(email)

        fields: dict[str, object] = {}
        if username is not None:
            fields["username"] = username
        if email is not None:
            fields["email"] = email
        if role is not None:
            fields["role"] = role

        updated = await self._users.update_fields(user_id, fields)
        if updated is None:
            raise UserNotFoundError(user_id)
        return updated
