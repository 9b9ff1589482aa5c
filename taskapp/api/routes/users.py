"""Profile and master-only user administration endpoints."""

from fastapi import APIRouter, Depends, status

from taskapp.api.auth.principal_auth import get_principal, require_master
from taskapp.api.dependencies.services import get_account_service
from taskapp.api.models.auth import RegisterRequest, RegisterResponse
from taskapp.api.models.common import ProblemDetail
from taskapp.api.models.users import (
    UpdateProfileRequest,
    UpdateUserRequest,
    UserResponse,
    UserUpdatedResponse,
)
from taskapp.application.dtos.accounts import (
    RegisterUserDTO,
    UpdateProfileDTO,
    UpdateUserDTO,
)
from taskapp.application.services.user_account_service import UserAccountService
from taskapp.domain.models.principal import Principal

router = APIRouter(prefix="/api", tags=["users"])

MASTER_ONLY_RESPONSES = {
    401: {"model": ProblemDetail, "description": "Missing or invalid token"},
    403: {"model": ProblemDetail, "description": "Caller is not master"},
}


# =============================================================================
# Own Profile
# =============================================================================


@router.get("/users/me", response_model=UserResponse)
async def get_profile(
    principal: Principal = Depends(get_principal),
    accounts: UserAccountService = Depends(get_account_service),
) -> UserResponse:
    return UserResponse.from_domain(await accounts.get_profile(principal))


@router.put(
    "/users/profile",
    response_model=UserUpdatedResponse,
    responses={409: {"model": ProblemDetail, "description": "Email already in use"}},
)
async def update_profile(
    body: UpdateProfileRequest,
    principal: Principal = Depends(get_principal),
    accounts: UserAccountService = Depends(get_account_service),
) -> UserUpdatedResponse:
    user = await accounts.update_profile(
        principal, UpdateProfileDTO(username=body.username, email=body.email)
    )
    return UserUpdatedResponse(
        message="Profile updated successfully", user=UserResponse.from_domain(user)
    )


# =============================================================================
# Master Administration
# =============================================================================


@router.get("/users", response_model=list[UserResponse], responses=MASTER_ONLY_RESPONSES)
async def list_users(
    principal: Principal = Depends(require_master),
    accounts: UserAccountService = Depends(get_account_service),
) -> list[UserResponse]:
    return [UserResponse.from_domain(user) for user in await accounts.list_users(principal)]


@router.put(
    "/users/{user_id}",
    response_model=UserUpdatedResponse,
    responses=MASTER_ONLY_RESPONSES,
)
async def update_user(
    user_id: str,
    body: UpdateUserRequest,
    principal: Principal = Depends(require_master),
    accounts: UserAccountService = Depends(get_account_service),
) -> UserUpdatedResponse:
    """Update any account, including its system role.

    Raises:
        403: Caller is not master.
        404: Target user does not exist.
        409: New email belongs to another user.
    """
    user = await accounts.update_user(
        principal,
        user_id,
        UpdateUserDTO(username=body.username, email=body.email, role=body.role),
    )
    return UserUpdatedResponse(
        message="User updated successfully", user=UserResponse.from_domain(user)
    )


@router.post(
    "/create-master",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    responses=MASTER_ONLY_RESPONSES,
)
async def create_master(
    body: RegisterRequest,
    principal: Principal = Depends(require_master),
    accounts: UserAccountService = Depends(get_account_service),
) -> RegisterResponse:
    user = await accounts.create_master(
        principal,
        RegisterUserDTO(username=body.username, email=body.email, password=body.password),
    )
    return RegisterResponse(message="Master user created successfully", user_id=user.id)
