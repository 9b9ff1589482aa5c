"""Unit tests for TaskAppConfig."""

from __future__ import annotations

import pytest

from taskapp.config.app_config import TEST_TASKAPP_CONFIG, TaskAppConfig

ENV_KEYS = (
    "ENVIRONMENT",
    "TASKAPP_STORE",
    "DATABASE_URL",
    "TASKAPP_TOKEN_TTL_SECONDS",
    "TASKAPP_PASSWORD_ITERATIONS",
    "FRONTEND_URL",
)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> pytest.MonkeyPatch:
    # Keep a stray .env in the working directory out of these tests
    monkeypatch.chdir(tmp_path)
    for key in ENV_KEYS:
        # setenv first so values loaded from .env are undone at teardown
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    return monkeypatch


class TestTaskAppConfig:
    def test_defaults(self) -> None:
        config = TaskAppConfig()
        assert config.store_backend == "memory"
        assert config.token_ttl_seconds == 3600
        assert not config.is_production

    def test_from_environment_defaults(self, clean_env: pytest.MonkeyPatch) -> None:
        assert TaskAppConfig.from_environment() == TaskAppConfig()

    def test_from_environment_overrides(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("ENVIRONMENT", "production")
        clean_env.setenv("TASKAPP_STORE", "POSTGRES")
        clean_env.setenv("DATABASE_URL", "postgresql://u:p@db/tasks")
        clean_env.setenv("TASKAPP_TOKEN_TTL_SECONDS", "120")
        clean_env.setenv("FRONTEND_URL", "https://app.example.com")

        config = TaskAppConfig.from_environment()

        assert config.is_production
        assert config.store_backend == "postgres"
        assert config.database_url == "postgresql://u:p@db/tasks"
        assert config.token_ttl_seconds == 120
        assert config.frontend_url == "https://app.example.com"

    def test_invalid_integer_falls_back_to_default(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("TASKAPP_PASSWORD_ITERATIONS", "lots")
        assert TaskAppConfig.from_environment().password_iterations == 260_000

    def test_dotenv_file_is_loaded(self, clean_env: pytest.MonkeyPatch, tmp_path) -> None:
        (tmp_path / ".env").write_text("TASKAPP_TOKEN_TTL_SECONDS=42\n")
        assert TaskAppConfig.from_environment().token_ttl_seconds == 42

    def test_unknown_backend_rejected(self) -> None:
        with pytest.raises(ValueError, match="store_backend"):
            TaskAppConfig(store_backend="firestore")

    def test_postgres_requires_url(self) -> None:
        with pytest.raises(ValueError, match="DATABASE_URL"):
            TaskAppConfig(store_backend="postgres")

    def test_non_positive_ttl_rejected(self) -> None:
        with pytest.raises(ValueError, match="token_ttl_seconds"):
            TaskAppConfig(token_ttl_seconds=0)

    def test_test_config_uses_cheap_hashing(self) -> None:
        assert TEST_TASKAPP_CONFIG.password_iterations < TaskAppConfig().password_iterations
