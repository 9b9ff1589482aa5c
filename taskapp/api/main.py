"""FastAPI application entry point for TaskApp Manager.

Run with:
    uvicorn taskapp.api.main:app --reload
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from structlog import get_logger

from taskapp import __version__
from taskapp.api.dependencies.services import set_container
from taskapp.api.errors import register_exception_handlers
from taskapp.api.middleware.logging_middleware import LoggingMiddleware
from taskapp.api.routes import (
    auth_router,
    groups_router,
    health_router,
    tasks_router,
    users_router,
)
from taskapp.bootstrap.container import ServiceContainer, build_container
from taskapp.bootstrap.database import close_database_engine
from taskapp.config.app_config import TaskAppConfig
from taskapp.infrastructure.adapters.persistence import PostgresDocumentStore
from taskapp.infrastructure.observability import configure_structlog

logger = get_logger()


def create_app(
    config: TaskAppConfig | None = None,
    container: ServiceContainer | None = None,
) -> FastAPI:
    """Build the FastAPI application.

    Args:
        config: Process configuration; read from the environment when omitted.
        container: Pre-built services; built from config at startup when omitted.

    Returns:
        The configured application.
    """
    config = config if config is not None else TaskAppConfig.from_environment()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        configure_structlog(environment=config.environment)
        services = container if container is not None else build_container(config)
        if isinstance(services.store, PostgresDocumentStore):
            await services.store.ensure_schema()
        set_container(services)
        logger.info(
            "taskapp_started",
            environment=config.environment,
            store_backend=config.store_backend,
        )
        try:
            yield
        finally:
            set_container(None)
            await close_database_engine()
            logger.info("taskapp_stopped")

    app = FastAPI(
        title="TaskApp Manager API",
        description="Personal and collaborative group task management",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[config.frontend_url],
        allow_credentials=config.frontend_url != "*",
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(LoggingMiddleware)
    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(users_router)
    app.include_router(tasks_router)
    app.include_router(groups_router)

    return app


app = create_app()
