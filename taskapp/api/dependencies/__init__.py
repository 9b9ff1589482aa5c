"""API dependencies for dependency injection."""

from taskapp.api.dependencies.services import (
    get_account_service,
    get_container,
    get_group_task_service,
    get_identity_gate,
    get_membership_service,
    get_personal_task_service,
    set_container,
)

__all__: list[str] = [
    "get_account_service",
    "get_container",
    "get_group_task_service",
    "get_identity_gate",
    "get_membership_service",
    "get_personal_task_service",
    "set_container",
]
