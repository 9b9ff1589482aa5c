"""Unit tests for personal task routes."""

from fastapi.testclient import TestClient


class TestPersonalTaskRoutes:
    def test_create_list_update(self, client: TestClient, signup) -> None:
        ana = signup("ana")

        created = client.post(
            "/api/tasks",
            json={"name": "Pay rent", "deadline": "2026-11-05T00:00:00Z", "category": "home"},
            headers=ana.headers,
        )
        task = created.json()["task"]
        updated = client.put(
            f"/api/tasks/{task['id']}", json={"status": "completada"}, headers=ana.headers
        )
        listed = client.get("/api/tasks", headers=ana.headers)

        assert created.status_code == 201
        assert task["status"] == "pendiente"
        assert task["user_id"] == ana.user_id
        assert updated.status_code == 200
        assert updated.json()["task"]["status"] == "completada"
        assert updated.json()["task"]["category"] == "home"
        assert [item["id"] for item in listed.json()] == [task["id"]]

    def test_other_users_task_is_404(self, client: TestClient, signup) -> None:
        ana = signup("ana")
        bea = signup("bea")
        task_id = client.post("/api/tasks", json={"name": "Mine"}, headers=ana.headers).json()[
            "task"
        ]["id"]

        response = client.put(f"/api/tasks/{task_id}", json={"name": "x"}, headers=bea.headers)

        assert response.status_code == 404
        assert client.get("/api/tasks", headers=bea.headers).json() == []

    def test_requires_authentication(self, client: TestClient) -> None:
        assert client.get("/api/tasks").status_code == 401
