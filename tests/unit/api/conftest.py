"""Fixtures for HTTP API tests.

The app is built around the in-memory container from tests/conftest.py,
so each test starts with an empty store.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from taskapp.api.main import create_app
from taskapp.bootstrap.container import ServiceContainer
from taskapp.config.app_config import TEST_TASKAPP_CONFIG


@dataclass(frozen=True)
class Session:
    user_id: str
    headers: dict[str, str]


@pytest.fixture
def app(container: ServiceContainer) -> FastAPI:
    """Create the full application around the test container."""
    return create_app(config=TEST_TASKAPP_CONFIG, container=container)


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def signup(client: TestClient) -> Callable[[str], Session]:
    """Register and log in a user through the API."""

    def _signup(username: str) -> Session:
        email = f"{username}@example.com"
        registered = client.post(
            "/api/auth/register",
            json={"username": username, "email": email, "password": "pw"},
        )
        assert registered.status_code == 201, registered.text
        login = client.post("/api/auth/login", json={"email": email, "password": "pw"})
        assert login.status_code == 200, login.text
        body = login.json()
        return Session(
            user_id=body["user_id"],
            headers={"Authorization": f"Bearer {body['token']}"},
        )

    return _signup
