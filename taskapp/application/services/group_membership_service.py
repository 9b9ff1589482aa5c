"""Group membership registry.

Tracks who belongs to which group and with what role, and answers
membership queries for the group task authorization service.

Invariants:
- A new group always has exactly one admin row, for its creator. If the
  admin row cannot be written the group document is removed again.
- At most one collaborator row per (group, user); the store enforces the
  same key so concurrent duplicate adds also end in a conflict.
- Only a group admin may add collaborators, always with role collaborator.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

from structlog import get_logger

from taskapp.application.dtos.groups import CollaboratorView, GroupMembershipView
from taskapp.domain.errors.group import DuplicateCollaboratorError, GroupNotFoundError
from taskapp.domain.errors.user import UserNotFoundError
from taskapp.domain.models.group import Collaborator, Group, GroupRole
from taskapp.domain.models.principal import Principal
from taskapp.domain.primitives import utc_now
from taskapp.domain.services.group_task_policy import authorize_collaborator_addition
from taskapp.infrastructure.adapters.persistence.group_repository import GroupRepository
from taskapp.infrastructure.adapters.persistence.user_repository import UserRepository

logger = get_logger()


class GroupMembershipService:
    """Registry of groups and their collaborator rows.

    Example:
        service = GroupMembershipService(groups=GroupRepository(store),
                                         users=UserRepository(store))
        group = await service.create_group(principal, "Household")
        await service.add_collaborator(principal, group.id, "bea@example.com")
    """

    def __init__(
        self,
        groups: GroupRepository,
        users: UserRepository,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._groups = groups
        self._users = users
        self._clock = clock

    async def create_group(self, principal: Principal, name: str) -> Group:
        """Create a group with the caller as its sole admin.

        Group and admin row are written as one logical unit: when the admin
        row fails, the group is deleted and the error propagates.

        Returns:
            The created group.
        """
        log = logger.bind(user_id=principal.user_id)

        group = await self._groups.add_group(
            name=name, admin_user_id=principal.user_id, created_at=self._clock()
        )
        try:
            await self._groups.add_collaborator(group.id, principal.user_id, GroupRole.ADMIN)
        except Exception:
            await self._groups.remove_group(group.id)
            log.error("group_creation_rolled_back", group_id=group.id)
            raise

        log.info("group_created", group_id=group.id)
        return group

    async def add_collaborator(
        self, principal: Principal, group_id: str, target_email: str
    ) -> Collaborator:
        """Add a user, found by email, as a collaborator of a group.

        Raises:
            NotGroupAdminError: If the caller is not the group admin.
            UserNotFoundError: If no user has the email.
            DuplicateCollaboratorError: If the user is already a member.
        """
        log = logger.bind(user_id=principal.user_id, group_id=group_id)

        membership = await self._groups.get_membership(group_id, principal.user_id)
        authorize_collaborator_addition(membership, principal.user_id, group_id)

        target = await self._users.get_by_email(target_email)
        if target is None:
            raise UserNotFoundError(target_email)

        if await self._groups.get_membership(group_id, target.id) is not None:
            raise DuplicateCollaboratorError(group_id, target.id)

        collaborator = await self._groups.add_collaborator(
            group_id, target.id, GroupRole.COLLABORATOR
        )
        log.info("collaborator_added", collaborator_user_id=target.id)
        return collaborator

    async def get_membership(self, group_id: str, user_id: str) -> Collaborator | None:
        return await self._groups.get_membership(group_id, user_id)

    async def require_group(self, group_id: str) -> Group:
        """Fetch a group or raise GroupNotFoundError."""
        group = await self._groups.get(group_id)
        if group is None:
            raise GroupNotFoundError(group_id)
        return group

    async def list_collaborators(self, group_id: str) -> list[CollaboratorView]:
        """List a group's collaborator rows joined with user identity.

        The caller's own membership is not checked. Rows whose user no
        longer exists are left out.

        Raises:
            GroupNotFoundError: If the group does not exist.
        """
        await self.require_group(group_id)
        rows = await self._groups.list_collaborators(group_id)
        users = await self._users.get_many(row.user_id for row in rows)
        return [
            CollaboratorView(collaborator=row, user=users[row.user_id])
            for row in rows
            if row.user_id in users
        ]

    async def list_groups_for_user(self, principal: Principal) -> list[GroupMembershipView]:
        """List the caller's memberships joined with their groups.

        Memberships pointing at a missing group are skipped.
        """
        memberships = await self._groups.memberships_for_user(principal.user_id)
        groups = await self._groups.get_many(row.group_id for row in memberships)
        admins = await self._users.summaries(group.admin_user_id for group in groups.values())

        views: list[GroupMembershipView] = []
        for membership in memberships:
            group = groups.get(membership.group_id)
            if group is None:
                continue
            admin = admins.get(group.admin_user_id)
            views.append(
                GroupMembershipView(
                    membership=membership,
                    group=group,
                    admin_username=admin.username if admin else None,
                )
            )
        return views
