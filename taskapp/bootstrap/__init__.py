"""Bootstrap wiring: database and the service container."""

from taskapp.bootstrap.container import ServiceContainer, build_container, create_document_store
from taskapp.bootstrap.database import close_database_engine, get_session_factory

__all__: list[str] = [
    "ServiceContainer",
    "build_container",
    "close_database_engine",
    "create_document_store",
    "get_session_factory",
]
