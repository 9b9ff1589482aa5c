"""
Pytest configuration and shared fixtures for TaskApp Manager tests.

Testing Standards:
- Async tests run under pytest-asyncio (auto mode enabled in pyproject.toml)
- Use AsyncMock for async function mocking
- Unit tests go in tests/unit/
- Integration tests go in tests/integration/
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable

import pytest

from taskapp.application.dtos.accounts import RegisterUserDTO
from taskapp.bootstrap.container import ServiceContainer, build_container
from taskapp.config.app_config import TEST_TASKAPP_CONFIG
from taskapp.domain.models.principal import Principal
from taskapp.infrastructure.stubs.document_store_stub import DocumentStoreStub

RegisterUser = Callable[..., Awaitable[Principal]]


@pytest.fixture
def anyio_backend() -> str:
    """Use asyncio as the async backend."""
    return "asyncio"


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from taskapp import __version__

    return __version__


@pytest.fixture
def store() -> DocumentStoreStub:
    """Fresh in-memory document store."""
    return DocumentStoreStub()


@pytest.fixture
def container(store: DocumentStoreStub) -> ServiceContainer:
    """Services wired around the in-memory store with cheap hashing."""
    return build_container(TEST_TASKAPP_CONFIG, store=store)


@pytest.fixture
def register_user(container: ServiceContainer) -> RegisterUser:
    """Register a user and return its principal."""

    async def _register(
        username: str, email: str | None = None, password: str = "secret"
    ) -> Principal:
        user = await container.accounts.register(
            RegisterUserDTO(
                username=username,
                email=email or f"{username}@example.com",
                password=password,
            )
        )
        return Principal(user_id=user.id, email=user.email)

    return _register
