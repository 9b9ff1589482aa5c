"""Unit tests for banner and health endpoints."""

import structlog
from fastapi import FastAPI
from fastapi.testclient import TestClient


def test_banner(client: TestClient) -> None:
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"message": "TaskApp Manager API is running"}


def test_health(client: TestClient) -> None:
    response = client.get("/v1/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_correlation_id_is_echoed(client: TestClient) -> None:
    response = client.get("/v1/health", headers={"X-Correlation-ID": "abc-123"})
    assert response.headers["X-Correlation-ID"] == "abc-123"


def test_correlation_id_is_generated(client: TestClient) -> None:
    response = client.get("/v1/health")
    assert response.headers["X-Correlation-ID"]


def test_app_version(client: TestClient, project_version: str) -> None:
    assert client.app.version == project_version


def test_startup_configures_structlog(app: FastAPI) -> None:
    structlog.reset_defaults()
    with TestClient(app):
        assert structlog.is_configured()
