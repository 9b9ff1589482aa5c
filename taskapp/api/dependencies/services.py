"""Service dependencies.

FastAPI dependencies exposing the wired services. The container is a
process singleton set during startup, or directly by tests.
"""

from __future__ import annotations

from taskapp.application.services.group_membership_service import GroupMembershipService
from taskapp.application.services.group_task_authorization_service import (
    GroupTaskAuthorizationService,
)
from taskapp.application.services.identity_gate_service import IdentityGateService
from taskapp.application.services.personal_task_service import PersonalTaskService
from taskapp.application.services.user_account_service import UserAccountService
from taskapp.bootstrap.container import ServiceContainer

# Singleton instance (initialized at startup)
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the service container singleton.

    Raises:
        RuntimeError: If the container was not initialized (startup error).
    """
    if _container is None:
        raise RuntimeError(
            "ServiceContainer not initialized. Call set_container() during startup."
        )
    return _container


def set_container(container: ServiceContainer | None) -> None:
    """Set the service container singleton.

    Called during application startup; also used in tests to inject a
    container built around a DocumentStoreStub. Pass None to reset.
    """
    global _container
    _container = container


def get_identity_gate() -> IdentityGateService:
    return get_container().identity_gate


def get_account_service() -> UserAccountService:
    return get_container().accounts


def get_personal_task_service() -> PersonalTaskService:
    return get_container().personal_tasks


def get_membership_service() -> GroupMembershipService:
    return get_container().membership


def get_group_task_service() -> GroupTaskAuthorizationService:
    return get_container().group_tasks
