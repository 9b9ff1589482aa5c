"""Application services orchestrating domain rules over the store."""

from taskapp.application.services.group_membership_service import GroupMembershipService
from taskapp.application.services.group_task_authorization_service import (
    GroupTaskAuthorizationService,
)
from taskapp.application.services.identity_gate_service import IdentityGateService
from taskapp.application.services.personal_task_service import PersonalTaskService
from taskapp.application.services.user_account_service import UserAccountService

__all__: list[str] = [
    "GroupMembershipService",
    "GroupTaskAuthorizationService",
    "IdentityGateService",
    "PersonalTaskService",
    "UserAccountService",
]
