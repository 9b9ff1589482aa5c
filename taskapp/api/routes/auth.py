"""Registration, login and dashboard endpoints."""

from fastapi import APIRouter, Depends, status

from taskapp.api.auth.principal_auth import get_principal
from taskapp.api.dependencies.services import get_account_service
from taskapp.api.models.auth import (
    DashboardResponse,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
)
from taskapp.api.models.common import ProblemDetail
from taskapp.application.dtos.accounts import RegisterUserDTO
from taskapp.application.services.user_account_service import UserAccountService
from taskapp.domain.models.principal import Principal

router = APIRouter(prefix="/api", tags=["auth"])


@router.post(
    "/auth/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"model": ProblemDetail, "description": "Email already registered"}},
)
async def register(
    body: RegisterRequest,
    accounts: UserAccountService = Depends(get_account_service),
) -> RegisterResponse:
    user = await accounts.register(
        RegisterUserDTO(username=body.username, email=body.email, password=body.password)
    )
    return RegisterResponse(message="User registered successfully", user_id=user.id)


@router.post(
    "/auth/login",
    response_model=LoginResponse,
    responses={
        400: {"model": ProblemDetail, "description": "Wrong password"},
        404: {"model": ProblemDetail, "description": "Unknown email"},
    },
)
async def login(
    body: LoginRequest,
    accounts: UserAccountService = Depends(get_account_service),
) -> LoginResponse:
    """Exchange email and password for a bearer token.

    Raises:
        404: No user has the email.
        400: The password does not match.
    """
    result = await accounts.login(body.email, body.password)
    return LoginResponse(
        message="Login successful",
        token=result.token,
        user_id=result.user_id,
        role=result.role,
    )


@router.get("/dashboard", response_model=DashboardResponse)
async def dashboard(principal: Principal = Depends(get_principal)) -> DashboardResponse:
    return DashboardResponse(
        message="Welcome to your dashboard",
        user_id=principal.user_id,
        email=principal.email,
    )
