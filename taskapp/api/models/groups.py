"""Group, collaborator and group task API models."""

from datetime import datetime

from pydantic import BaseModel, Field

from taskapp.api.models.common import UserSummaryResponse
from taskapp.domain.models.group import Collaborator, Group, GroupRole
from taskapp.domain.models.task import GroupTask


class CreateGroupRequest(BaseModel):
    name: str = Field(min_length=1, max_length=200)


class GroupResponse(BaseModel):
    id: str
    name: str
    admin: str = Field(description="User id of the group admin")
    created_at: datetime

    @classmethod
    def from_domain(cls, group: Group) -> "GroupResponse":
        return cls(
            id=group.id,
            name=group.name,
            admin=group.admin_user_id,
            created_at=group.created_at,
        )


class GroupCreatedResponse(BaseModel):
    message: str
    group: GroupResponse


class AddCollaboratorRequest(BaseModel):
    email: str = Field(min_length=3, max_length=254)


class CollaboratorResponse(BaseModel):
    id: str
    group_id: str
    user_id: str
    role: GroupRole

    @classmethod
    def from_domain(cls, collaborator: Collaborator) -> "CollaboratorResponse":
        return cls(**collaborator.to_dict())


class CollaboratorAddedResponse(BaseModel):
    message: str
    collaborator: CollaboratorResponse


class CollaboratorUserResponse(BaseModel):
    id: str
    username: str
    email: str


class CollaboratorViewResponse(BaseModel):
    """Collaborator row joined with the member's identity."""

    id: str
    user: CollaboratorUserResponse
    role: GroupRole
    group_id: str


class MembershipGroupResponse(BaseModel):
    id: str
    name: str
    admin: UserSummaryResponse
    created_at: datetime


class MembershipResponse(BaseModel):
    """One of the caller's memberships, joined with its group."""

    id: str
    group: MembershipGroupResponse
    role: GroupRole
    user_id: str


class CreateGroupTaskRequest(BaseModel):
    """Body for creating a group task.

    ``assigned_to`` must be the id of a member of the same group.
    """

    name: str = Field(min_length=1, max_length=200)
    status: str | None = None
    description: str | None = None
    deadline: datetime | None = None
    category: str | None = None
    assigned_to: str | None = None


class UpdateGroupTaskRequest(BaseModel):
    """Generic group task update; omitted fields stay unchanged.

    Completion fields are not accepted here. An explicit null
    ``assigned_to`` unassigns the task.
    """

    name: str | None = Field(default=None, min_length=1, max_length=200)
    status: str | None = None
    description: str | None = None
    deadline: datetime | None = None
    category: str | None = None
    assigned_to: str | None = None

    model_config = {"extra": "forbid"}


class GroupTaskResponse(BaseModel):
    id: str
    name: str
    status: str
    description: str | None = None
    deadline: datetime | None = None
    category: str | None = None
    group_id: str
    created_by: str
    assigned_to: str | None = None
    completed_by: str | None = None
    completed_at: datetime | None = None

    @classmethod
    def from_domain(cls, task: GroupTask) -> "GroupTaskResponse":
        return cls(
            id=task.id,
            name=task.name,
            status=task.status,
            description=task.description,
            deadline=task.deadline,
            category=task.category,
            group_id=task.group_id,
            created_by=task.created_by,
            assigned_to=task.assigned_to,
            completed_by=task.completed_by,
            completed_at=task.completed_at,
        )


class GroupTaskMutationResponse(BaseModel):
    message: str
    task: GroupTaskResponse


class GroupTaskViewResponse(BaseModel):
    """Group task as listed, with creator and assignee resolved to summaries."""

    id: str
    name: str
    status: str
    description: str | None = None
    deadline: datetime | None = None
    category: str | None = None
    group_id: str
    created_by: UserSummaryResponse | None = None
    assigned_to: UserSummaryResponse | None = None
    completed_by: str | None = None
    completed_at: datetime | None = None
