"""API route modules."""

from taskapp.api.routes.auth import router as auth_router
from taskapp.api.routes.groups import router as groups_router
from taskapp.api.routes.health import router as health_router
from taskapp.api.routes.tasks import router as tasks_router
from taskapp.api.routes.users import router as users_router

__all__: list[str] = [
    "auth_router",
    "groups_router",
    "health_router",
    "tasks_router",
    "users_router",
]
