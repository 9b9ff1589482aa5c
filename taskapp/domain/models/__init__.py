"""Domain models for TaskApp.

Contains immutable entities for users, groups, collaborator rows and
tasks. These models contain no infrastructure dependencies.
"""

from taskapp.domain.models.group import Collaborator, Group, GroupRole
from taskapp.domain.models.principal import Principal
from taskapp.domain.models.task import (
    COMPLETED_STATUS,
    PENDING_STATUS,
    GroupTask,
    PersonalTask,
)
from taskapp.domain.models.user import SystemRole, User, UserSummary

__all__: list[str] = [
    "COMPLETED_STATUS",
    "Collaborator",
    "Group",
    "GroupRole",
    "GroupTask",
    "PENDING_STATUS",
    "PersonalTask",
    "Principal",
    "SystemRole",
    "User",
    "UserSummary",
]
