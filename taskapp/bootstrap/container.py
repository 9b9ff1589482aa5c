"""Service container.

Builds every application service around one injected document store.
The API layer holds a single container; tests build their own around a
DocumentStoreStub.
"""

from __future__ import annotations

from dataclasses import dataclass

from taskapp.application.ports.document_store import DocumentStoreProtocol
from taskapp.application.services.group_membership_service import GroupMembershipService
from taskapp.application.services.group_task_authorization_service import (
    GroupTaskAuthorizationService,
)
from taskapp.application.services.identity_gate_service import IdentityGateService
from taskapp.application.services.personal_task_service import PersonalTaskService
from taskapp.application.services.user_account_service import UserAccountService
from taskapp.bootstrap.database import get_session_factory
from taskapp.config.app_config import TaskAppConfig
from taskapp.infrastructure.adapters.persistence import (
    GroupRepository,
    GroupTaskRepository,
    PersonalTaskRepository,
    PostgresDocumentStore,
    UserRepository,
)
from taskapp.infrastructure.adapters.security import (
    Pbkdf2PasswordHasher,
    SessionTokenRegistry,
)
from taskapp.infrastructure.stubs.document_store_stub import DocumentStoreStub


@dataclass(frozen=True)
class ServiceContainer:
    """All wired services plus the store they share."""

    store: DocumentStoreProtocol
    identity_gate: IdentityGateService
    accounts: UserAccountService
    personal_tasks: PersonalTaskService
    membership: GroupMembershipService
    group_tasks: GroupTaskAuthorizationService


def create_document_store(config: TaskAppConfig) -> DocumentStoreProtocol:
    """Create the store selected by configuration."""
    if config.store_backend == "postgres":
        if config.database_url is None:
            raise ValueError("DATABASE_URL is required for the postgres store")
        return PostgresDocumentStore(get_session_factory(config.database_url))
    return DocumentStoreStub()


def build_container(
    config: TaskAppConfig, store: DocumentStoreProtocol | None = None
) -> ServiceContainer:
    """Wire services around a document store.

    Args:
        config: Process configuration.
        store: Store to use; created from config when omitted.

    Returns:
        The wired container.
    """
    store = store if store is not None else create_document_store(config)

    users = UserRepository(store)
    groups = GroupRepository(store)
    tokens = SessionTokenRegistry(ttl_seconds=config.token_ttl_seconds)

    identity_gate = IdentityGateService(users=users, tokens=tokens)
    membership = GroupMembershipService(groups=groups, users=users)

    return ServiceContainer(
        store=store,
        identity_gate=identity_gate,
        accounts=UserAccountService(
            users=users,
            hasher=Pbkdf2PasswordHasher(iterations=config.password_iterations),
            tokens=tokens,
            identity_gate=identity_gate,
        ),
        personal_tasks=PersonalTaskService(PersonalTaskRepository(store)),
        membership=membership,
        group_tasks=GroupTaskAuthorizationService(
            membership=membership,
            tasks=GroupTaskRepository(store),
            users=users,
        ),
    )
