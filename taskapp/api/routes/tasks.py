"""Personal task endpoints. Every route acts on the caller's own tasks."""

from fastapi import APIRouter, Depends, status

from taskapp.api.auth.principal_auth import get_principal
from taskapp.api.dependencies.services import get_personal_task_service
from taskapp.api.models.common import ProblemDetail
from taskapp.api.models.tasks import (
    CreatePersonalTaskRequest,
    PersonalTaskMutationResponse,
    PersonalTaskResponse,
    UpdatePersonalTaskRequest,
)
from taskapp.application.dtos.tasks import CreatePersonalTaskDTO, UpdatePersonalTaskDTO
from taskapp.application.services.personal_task_service import PersonalTaskService
from taskapp.domain.models.principal import Principal

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


@router.get("", response_model=list[PersonalTaskResponse])
async def list_tasks(
    principal: Principal = Depends(get_principal),
    tasks: PersonalTaskService = Depends(get_personal_task_service),
) -> list[PersonalTaskResponse]:
    return [PersonalTaskResponse.from_domain(task) for task in await tasks.list_tasks(principal)]


@router.post(
    "",
    response_model=PersonalTaskMutationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_task(
    body: CreatePersonalTaskRequest,
    principal: Principal = Depends(get_principal),
    tasks: PersonalTaskService = Depends(get_personal_task_service),
) -> PersonalTaskMutationResponse:
    task = await tasks.create_task(
        principal,
        CreatePersonalTaskDTO(
            name=body.name,
            status=body.status,
            description=body.description,
            deadline=body.deadline,
            category=body.category,
        ),
    )
    return PersonalTaskMutationResponse(
        message="Task created successfully", task=PersonalTaskResponse.from_domain(task)
    )


@router.put(
    "/{task_id}",
    response_model=PersonalTaskMutationResponse,
    responses={404: {"model": ProblemDetail, "description": "Caller owns no such task"}},
)
async def update_task(
    task_id: str,
    body: UpdatePersonalTaskRequest,
    principal: Principal = Depends(get_principal),
    tasks: PersonalTaskService = Depends(get_personal_task_service),
) -> PersonalTaskMutationResponse:
    task = await tasks.update_task(
        principal,
        task_id,
        UpdatePersonalTaskDTO(
            name=body.name,
            status=body.status,
            description=body.description,
            deadline=body.deadline,
            category=body.category,
        ),
    )
    return PersonalTaskMutationResponse(
        message="Task updated successfully", task=PersonalTaskResponse.from_domain(task)
    )
