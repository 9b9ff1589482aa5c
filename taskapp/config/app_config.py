"""Application configuration.

Configuration for process wiring with environment variable overrides.
A ``.env`` file in the working directory is loaded first when present;
variables already set in the environment win.

Environment Variables:
- ENVIRONMENT: "production" for JSON logs, anything else for console (default: development)
- TASKAPP_STORE: "memory" or "postgres" (default: memory)
- DATABASE_URL: PostgreSQL connection string (required when TASKAPP_STORE=postgres)
- TASKAPP_TOKEN_TTL_SECONDS: Session token lifetime (default: 3600)
- TASKAPP_PASSWORD_ITERATIONS: PBKDF2 rounds (default: 260000)
- FRONTEND_URL: Allowed CORS origin (default: *)
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

STORE_BACKENDS = ("memory", "postgres")


def _get_int_env(key: str, default: int) -> int:
    """Get integer environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed integer value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


@dataclass(frozen=True)
class TaskAppConfig:
    """Process-level settings.

    Attributes:
        environment: Deployment environment; controls log rendering.
        store_backend: Which document store to wire ("memory" or "postgres").
        database_url: PostgreSQL URL, used by the postgres backend only.
        token_ttl_seconds: Session token lifetime.
        password_iterations: PBKDF2 iteration count for new credentials.
        frontend_url: Allowed CORS origin.
    """

    environment: str = "development"
    store_backend: str = "memory"
    database_url: str | None = None
    token_ttl_seconds: int = 3600
    password_iterations: int = 260_000
    frontend_url: str = "*"

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.store_backend not in STORE_BACKENDS:
            raise ValueError(
                f"store_backend must be one of {', '.join(STORE_BACKENDS)}, "
                f"got {self.store_backend!r}"
            )
        if self.store_backend == "postgres" and not self.database_url:
            raise ValueError("DATABASE_URL is required for the postgres store")
        if self.token_ttl_seconds < 1:
            raise ValueError(
                f"token_ttl_seconds must be positive, got {self.token_ttl_seconds}"
            )
        if self.password_iterations < 1:
            raise ValueError(
                f"password_iterations must be positive, got {self.password_iterations}"
            )

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @classmethod
    def from_environment(cls) -> TaskAppConfig:
        """Create config from environment variables with defaults."""
        load_dotenv(find_dotenv(usecwd=True), override=False)
        return cls(
            environment=os.environ.get("ENVIRONMENT", "development"),
            store_backend=os.environ.get("TASKAPP_STORE", "memory").lower(),
            database_url=os.environ.get("DATABASE_URL") or None,
            token_ttl_seconds=_get_int_env("TASKAPP_TOKEN_TTL_SECONDS", 3600),
            password_iterations=_get_int_env("TASKAPP_PASSWORD_ITERATIONS", 260_000),
            frontend_url=os.environ.get("FRONTEND_URL", "*"),
        )


# Low-cost hashing for unit tests
TEST_TASKAPP_CONFIG = TaskAppConfig(password_iterations=1_000)
