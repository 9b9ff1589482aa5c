"""Unit tests for GroupMembershipService."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from taskapp.application.services.group_membership_service import GroupMembershipService
from taskapp.bootstrap.container import ServiceContainer
from taskapp.domain.errors.group import (
    DuplicateCollaboratorError,
    GroupNotFoundError,
    NotGroupAdminError,
)
from taskapp.domain.errors.store import DuplicateDocumentError, StoreFaultError
from taskapp.domain.errors.user import UserNotFoundError
from taskapp.domain.models.group import COLLABORATORS_COLLECTION, GROUPS_COLLECTION, GroupRole
from taskapp.domain.models.principal import Principal
from taskapp.infrastructure.adapters.persistence import GroupRepository, UserRepository
from taskapp.infrastructure.stubs.document_store_stub import DocumentStoreStub

FIXED_NOW = datetime(2026, 5, 4, 10, 0, tzinfo=timezone.utc)


@pytest.fixture
def membership(store: DocumentStoreStub) -> GroupMembershipService:
    return GroupMembershipService(
        groups=GroupRepository(store),
        users=UserRepository(store),
        clock=lambda: FIXED_NOW,
    )


class TestCreateGroup:
    @pytest.mark.asyncio
    async def test_creator_is_sole_admin(
        self, membership: GroupMembershipService, store: DocumentStoreStub, register_user
    ) -> None:
        ana = await register_user("ana")

        group = await membership.create_group(ana, "Household")

        assert group.admin_user_id == ana.user_id
        assert group.created_at == FIXED_NOW
        rows = store.documents(COLLABORATORS_COLLECTION)
        assert len(rows) == 1
        assert rows[0]["group_id"] == group.id
        assert rows[0]["user_id"] == ana.user_id
        assert rows[0]["role"] == GroupRole.ADMIN.value

    @pytest.mark.asyncio
    async def test_group_is_removed_when_admin_row_fails(
        self, membership: GroupMembershipService, store: DocumentStoreStub, register_user
    ) -> None:
        ana = await register_user("ana")
        store.fail_inserts_into(COLLABORATORS_COLLECTION, StoreFaultError("insert", "boom"))

        with pytest.raises(StoreFaultError):
            await membership.create_group(ana, "Household")

        assert store.count(GROUPS_COLLECTION) == 0
        assert store.count(COLLABORATORS_COLLECTION) == 0


class TestAddCollaborator:
    @pytest.mark.asyncio
    async def test_admin_adds_collaborator_by_email(
        self, membership: GroupMembershipService, register_user
    ) -> None:
        ana = await register_user("ana")
        bea = await register_user("bea")
        group = await membership.create_group(ana, "Household")

        row = await membership.add_collaborator(ana, group.id, "bea@example.com")

        assert row.user_id == bea.user_id
        assert row.role == GroupRole.COLLABORATOR
        assert await membership.get_membership(group.id, bea.user_id) == row

    @pytest.mark.asyncio
    async def test_second_add_is_conflict_without_duplicate_row(
        self, membership: GroupMembershipService, store: DocumentStoreStub, register_user
    ) -> None:
        ana = await register_user("ana")
        await register_user("bea")
        group = await membership.create_group(ana, "Household")
        await membership.add_collaborator(ana, group.id, "bea@example.com")

        with pytest.raises(DuplicateCollaboratorError):
            await membership.add_collaborator(ana, group.id, "bea@example.com")

        assert store.count(COLLABORATORS_COLLECTION) == 2

    @pytest.mark.asyncio
    async def test_store_rejects_duplicate_that_slips_past_precheck(
        self, store: DocumentStoreStub, register_user
    ) -> None:
        bea = await register_user("bea")
        groups = GroupRepository(store)
        await groups.add_collaborator("g-1", bea.user_id, GroupRole.COLLABORATOR)

        with pytest.raises(DuplicateCollaboratorError):
            await groups.add_collaborator("g-1", bea.user_id, GroupRole.COLLABORATOR)
        with pytest.raises(DuplicateDocumentError):
            await store.insert(
                COLLABORATORS_COLLECTION,
                {"group_id": "g-1", "user_id": bea.user_id, "role": "collaborator"},
            )

    @pytest.mark.asyncio
    async def test_collaborator_cannot_add(
        self, membership: GroupMembershipService, register_user
    ) -> None:
        ana = await register_user("ana")
        bea = await register_user("bea")
        await register_user("cai")
        group = await membership.create_group(ana, "Household")
        await membership.add_collaborator(ana, group.id, "bea@example.com")

        with pytest.raises(NotGroupAdminError):
            await membership.add_collaborator(bea, group.id, "cai@example.com")

    @pytest.mark.asyncio
    async def test_unknown_email_is_not_found(
        self, membership: GroupMembershipService, register_user
    ) -> None:
        ana = await register_user("ana")
        group = await membership.create_group(ana, "Household")

        with pytest.raises(UserNotFoundError):
            await membership.add_collaborator(ana, group.id, "nobody@example.com")


class TestListings:
    @pytest.mark.asyncio
    async def test_list_collaborators_joins_users(
        self, membership: GroupMembershipService, register_user
    ) -> None:
        ana = await register_user("ana")
        await register_user("bea")
        group = await membership.create_group(ana, "Household")
        await membership.add_collaborator(ana, group.id, "bea@example.com")

        views = await membership.list_collaborators(group.id)

        assert [view.user.username for view in views] == ["ana", "bea"]
        first = views[0].to_dict()
        assert first["role"] == "admin"
        assert first["user"] == {"id": ana.user_id, "username": "ana", "email": "ana@example.com"}

    @pytest.mark.asyncio
    async def test_list_collaborators_of_missing_group(
        self, membership: GroupMembershipService
    ) -> None:
        with pytest.raises(GroupNotFoundError):
            await membership.list_collaborators("missing")

    @pytest.mark.asyncio
    async def test_list_collaborators_skips_vanished_users(
        self, membership: GroupMembershipService, store: DocumentStoreStub, register_user
    ) -> None:
        ana = await register_user("ana")
        group = await membership.create_group(ana, "Household")
        store.add_document(
            COLLABORATORS_COLLECTION,
            {"id": "c-ghost", "group_id": group.id, "user_id": "ghost", "role": "collaborator"},
        )

        views = await membership.list_collaborators(group.id)

        assert [view.collaborator.user_id for view in views] == [ana.user_id]

    @pytest.mark.asyncio
    async def test_my_groups_include_admin_username(
        self, membership: GroupMembershipService, register_user
    ) -> None:
        ana = await register_user("ana")
        bea = await register_user("bea")
        group = await membership.create_group(ana, "Household")
        await membership.add_collaborator(ana, group.id, "bea@example.com")

        views = await membership.list_groups_for_user(bea)

        assert len(views) == 1
        body = views[0].to_dict()
        assert body["role"] == "collaborator"
        assert body["group"]["name"] == "Household"
        assert body["group"]["admin"] == {"id": ana.user_id, "username": "ana"}

    @pytest.mark.asyncio
    async def test_my_groups_skips_missing_groups(
        self, membership: GroupMembershipService, store: DocumentStoreStub
    ) -> None:
        store.add_document(
            COLLABORATORS_COLLECTION,
            {"id": "c-1", "group_id": "gone", "user_id": "u-1", "role": "admin"},
        )
        assert await membership.list_groups_for_user(Principal(user_id="u-1")) == []


class TestContainerWiring:
    @pytest.mark.asyncio
    async def test_container_membership_shares_store(
        self, container: ServiceContainer, store: DocumentStoreStub, register_user
    ) -> None:
        ana = await register_user("ana")
        await container.membership.create_group(ana, "Shared")
        assert store.count(GROUPS_COLLECTION) == 1
