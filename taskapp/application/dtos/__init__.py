"""Application DTOs.

Application layer defines its own request and view structs. The API layer
converts these to and from pydantic models.
"""

from taskapp.application.dtos.accounts import (
    LoginResultDTO,
    RegisterUserDTO,
    UpdateProfileDTO,
    UpdateUserDTO,
)
from taskapp.application.dtos.groups import CollaboratorView, GroupMembershipView
from taskapp.application.dtos.tasks import (
    CreateGroupTaskDTO,
    CreatePersonalTaskDTO,
    GroupTaskView,
    UpdateGroupTaskDTO,
    UpdatePersonalTaskDTO,
)

__all__: list[str] = [
    "CollaboratorView",
    "CreateGroupTaskDTO",
    "CreatePersonalTaskDTO",
    "GroupMembershipView",
    "GroupTaskView",
    "LoginResultDTO",
    "RegisterUserDTO",
    "UpdateGroupTaskDTO",
    "UpdatePersonalTaskDTO",
    "UpdateProfileDTO",
    "UpdateUserDTO",
]
