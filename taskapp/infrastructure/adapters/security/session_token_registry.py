"""In-process session token registry.

Issues random opaque tokens at login and resolves them on each request.
Tokens expire after a configurable TTL. Sessions live in process memory,
so every API worker keeps its own registry.
"""

from __future__ import annotations

import secrets
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta

from structlog import get_logger

from taskapp.application.ports.session_tokens import SessionTokenProtocol
from taskapp.domain.models.principal import Principal
from taskapp.domain.primitives import utc_now

logger = get_logger()

DEFAULT_TOKEN_TTL_SECONDS = 3600


@dataclass(frozen=True)
class _Session:
    principal: Principal
    expires_at: datetime


class SessionTokenRegistry(SessionTokenProtocol):
    """Opaque session tokens with expiry."""

    def __init__(
        self,
        ttl_seconds: int = DEFAULT_TOKEN_TTL_SECONDS,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._ttl = timedelta(seconds=ttl_seconds)
        self._clock = clock
        self._sessions: dict[str, _Session] = {}

    async def issue(self, principal: Principal) -> str:
        now = self._clock()
        self._purge_expired(now)
        token = secrets.token_urlsafe(32)
        self._sessions[token] = _Session(principal=principal, expires_at=now + self._ttl)
        return token

    async def resolve(self, token: str) -> Principal | None:
        session = self._sessions.get(token)
        if session is None:
            return None
        if self._clock() >= session.expires_at:
            del self._sessions[token]
            logger.debug("session_token_expired", user_id=session.principal.user_id)
            return None
        return session.principal

    def _purge_expired(self, now: datetime) -> None:
        expired = [token for token, session in self._sessions.items() if now >= session.expires_at]
        for token in expired:
            del self._sessions[token]
        if expired:
            logger.debug("session_tokens_purged", count=len(expired))

    def active_count(self) -> int:
        return len(self._sessions)
