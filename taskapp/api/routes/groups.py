"""Group, collaborator and group task endpoints.

Group task routes delegate every permission decision to
GroupTaskAuthorizationService:
- 404 when the group, or the task inside it, does not exist
- 403 when the caller is not a member of the group
- 400 when an assignee is not a member of the group
"""

from fastapi import APIRouter, Depends, status

from taskapp.api.auth.principal_auth import get_principal
from taskapp.api.dependencies.services import (
    get_group_task_service,
    get_membership_service,
)
from taskapp.api.models.common import ProblemDetail
from taskapp.api.models.groups import (
    AddCollaboratorRequest,
    CollaboratorAddedResponse,
    CollaboratorResponse,
    CollaboratorViewResponse,
    CreateGroupRequest,
    CreateGroupTaskRequest,
    GroupCreatedResponse,
    GroupResponse,
    GroupTaskMutationResponse,
    GroupTaskResponse,
    GroupTaskViewResponse,
    MembershipResponse,
    UpdateGroupTaskRequest,
)
from taskapp.application.dtos.tasks import CreateGroupTaskDTO, UpdateGroupTaskDTO
from taskapp.application.services.group_membership_service import GroupMembershipService
from taskapp.application.services.group_task_authorization_service import (
    GroupTaskAuthorizationService,
)
from taskapp.domain.models.principal import Principal

router = APIRouter(prefix="/api/groups", tags=["groups"])

GROUP_ACCESS_RESPONSES = {
    403: {"model": ProblemDetail, "description": "Caller is not a group member"},
    404: {"model": ProblemDetail, "description": "Group or task not found"},
}


# =============================================================================
# Groups
# =============================================================================


@router.get("", response_model=list[MembershipResponse])
async def list_my_groups(
    principal: Principal = Depends(get_principal),
    membership: GroupMembershipService = Depends(get_membership_service),
) -> list[MembershipResponse]:
    views = await membership.list_groups_for_user(principal)
    return [MembershipResponse(**view.to_dict()) for view in views]


@router.post("", response_model=GroupCreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_group(
    body: CreateGroupRequest,
    principal: Principal = Depends(get_principal),
    membership: GroupMembershipService = Depends(get_membership_service),
) -> GroupCreatedResponse:
    group = await membership.create_group(principal, body.name)
    return GroupCreatedResponse(
        message="Group created successfully", group=GroupResponse.from_domain(group)
    )


# =============================================================================
# Collaborators
# =============================================================================


@router.get(
    "/{group_id}/collaborators",
    response_model=list[CollaboratorViewResponse],
    responses={404: {"model": ProblemDetail, "description": "Group not found"}},
)
async def list_collaborators(
    group_id: str,
    principal: Principal = Depends(get_principal),
    membership: GroupMembershipService = Depends(get_membership_service),
) -> list[CollaboratorViewResponse]:
    views = await membership.list_collaborators(group_id)
    return [CollaboratorViewResponse(**view.to_dict()) for view in views]


@router.post(
    "/{group_id}/collaborators",
    response_model=CollaboratorAddedResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        403: {"model": ProblemDetail, "description": "Caller is not the group admin"},
        404: {"model": ProblemDetail, "description": "No user with that email"},
        409: {"model": ProblemDetail, "description": "User is already a member"},
    },
)
async def add_collaborator(
    group_id: str,
    body: AddCollaboratorRequest,
    principal: Principal = Depends(get_principal),
    membership: GroupMembershipService = Depends(get_membership_service),
) -> CollaboratorAddedResponse:
    collaborator = await membership.add_collaborator(principal, group_id, body.email)
    return CollaboratorAddedResponse(
        message="Collaborator added successfully",
        collaborator=CollaboratorResponse.from_domain(collaborator),
    )


# =============================================================================
# Group Tasks
# =============================================================================


@router.get(
    "/{group_id}/tasks",
    response_model=list[GroupTaskViewResponse],
    responses=GROUP_ACCESS_RESPONSES,
)
async def list_group_tasks(
    group_id: str,
    principal: Principal = Depends(get_principal),
    group_tasks: GroupTaskAuthorizationService = Depends(get_group_task_service),
) -> list[GroupTaskViewResponse]:
    """List the group tasks visible to the caller.

    Admins see every task; collaborators see tasks assigned to them or
    created by them.
    """
    views = await group_tasks.list_tasks(principal, group_id)
    return [GroupTaskViewResponse(**view.to_dict()) for view in views]


@router.post(
    "/{group_id}/tasks",
    response_model=GroupTaskMutationResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        **GROUP_ACCESS_RESPONSES,
        400: {"model": ProblemDetail, "description": "Assignee is not a group member"},
    },
)
async def create_group_task(
    group_id: str,
    body: CreateGroupTaskRequest,
    principal: Principal = Depends(get_principal),
    group_tasks: GroupTaskAuthorizationService = Depends(get_group_task_service),
) -> GroupTaskMutationResponse:
    task = await group_tasks.create_task(
        principal,
        group_id,
        CreateGroupTaskDTO(
            name=body.name,
            status=body.status,
            description=body.description,
            deadline=body.deadline,
            category=body.category,
            assigned_to=body.assigned_to,
        ),
    )
    return GroupTaskMutationResponse(
        message="Group task created successfully", task=GroupTaskResponse.from_domain(task)
    )


@router.put(
    "/{group_id}/tasks/{task_id}",
    response_model=GroupTaskMutationResponse,
    responses={
        **GROUP_ACCESS_RESPONSES,
        400: {"model": ProblemDetail, "description": "Assignee is not a group member"},
    },
)
async def update_group_task(
    group_id: str,
    task_id: str,
    body: UpdateGroupTaskRequest,
    principal: Principal = Depends(get_principal),
    group_tasks: GroupTaskAuthorizationService = Depends(get_group_task_service),
) -> GroupTaskMutationResponse:
    task = await group_tasks.update_task(
        principal,
        group_id,
        task_id,
        UpdateGroupTaskDTO(
            name=body.name,
            status=body.status,
            description=body.description,
            deadline=body.deadline,
            category=body.category,
            assigned_to=body.assigned_to,
            # explicit null unassigns; an omitted field leaves the assignee alone
            clear_assignee="assigned_to" in body.model_fields_set and body.assigned_to is None,
        ),
    )
    return GroupTaskMutationResponse(
        message="Group task updated successfully", task=GroupTaskResponse.from_domain(task)
    )


@router.put(
    "/{group_id}/tasks/{task_id}/complete",
    response_model=GroupTaskMutationResponse,
    responses=GROUP_ACCESS_RESPONSES,
)
async def complete_group_task(
    group_id: str,
    task_id: str,
    principal: Principal = Depends(get_principal),
    group_tasks: GroupTaskAuthorizationService = Depends(get_group_task_service),
) -> GroupTaskMutationResponse:
    """Mark a group task completed by the caller.

    Completing an already completed task overwrites completed_by and
    completed_at.
    """
    task = await group_tasks.complete_task(principal, group_id, task_id)
    return GroupTaskMutationResponse(
        message="Task marked as completed", task=GroupTaskResponse.from_domain(task)
    )
