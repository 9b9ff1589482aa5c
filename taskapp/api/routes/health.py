"""Service banner and health check endpoints."""

from fastapi import APIRouter

from taskapp.api.models.common import MessageResponse
from taskapp.api.models.health import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/", response_model=MessageResponse)
async def service_banner() -> MessageResponse:
    return MessageResponse(message="TaskApp Manager API is running")


@router.get("/v1/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Return health status.

    Returns:
        Health status with 200 OK.
    """
    return HealthResponse(status="healthy")
