"""Unit tests for group, collaborator and group task routes."""

from __future__ import annotations

from fastapi.testclient import TestClient


def _create_group(client: TestClient, session, name: str = "Household") -> str:
    response = client.post("/api/groups", json={"name": name}, headers=session.headers)
    assert response.status_code == 201, response.text
    return response.json()["group"]["id"]


def _add(client: TestClient, admin, group_id: str, email: str):
    return client.post(
        f"/api/groups/{group_id}/collaborators", json={"email": email}, headers=admin.headers
    )


class TestGroups:
    def test_create_group_and_list_memberships(self, client: TestClient, signup) -> None:
        ana = signup("ana")
        bea = signup("bea")
        group_id = _create_group(client, ana)
        _add(client, ana, group_id, "bea@example.com")

        mine = client.get("/api/groups", headers=ana.headers).json()
        theirs = client.get("/api/groups", headers=bea.headers).json()

        assert mine[0]["role"] == "admin"
        assert mine[0]["group"]["id"] == group_id
        assert theirs[0]["role"] == "collaborator"
        assert theirs[0]["user_id"] == bea.user_id
        assert theirs[0]["group"]["admin"] == {"id": ana.user_id, "username": "ana"}

    def test_created_group_names_admin(self, client: TestClient, signup) -> None:
        ana = signup("ana")
        response = client.post("/api/groups", json={"name": "Office"}, headers=ana.headers)
        body = response.json()
        assert body["message"] == "Group created successfully"
        assert body["group"]["admin"] == ana.user_id


class TestCollaborators:
    def test_add_and_list(self, client: TestClient, signup) -> None:
        ana = signup("ana")
        bea = signup("bea")
        group_id = _create_group(client, ana)

        added = _add(client, ana, group_id, "bea@example.com")
        listed = client.get(f"/api/groups/{group_id}/collaborators", headers=ana.headers)

        assert added.status_code == 201
        assert added.json()["collaborator"]["user_id"] == bea.user_id
        assert added.json()["collaborator"]["role"] == "collaborator"
        assert [row["user"]["username"] for row in listed.json()] == ["ana", "bea"]

    def test_duplicate_is_409(self, client: TestClient, signup) -> None:
        ana = signup("ana")
        signup("bea")
        group_id = _create_group(client, ana)
        _add(client, ana, group_id, "bea@example.com")

        response = _add(client, ana, group_id, "bea@example.com")

        assert response.status_code == 409
        assert len(client.get(f"/api/groups/{group_id}/collaborators", headers=ana.headers).json()) == 2

    def test_non_admin_is_403(self, client: TestClient, signup) -> None:
        ana = signup("ana")
        bea = signup("bea")
        signup("cai")
        group_id = _create_group(client, ana)
        _add(client, ana, group_id, "bea@example.com")

        assert _add(client, bea, group_id, "cai@example.com").status_code == 403

    def test_unknown_email_is_404(self, client: TestClient, signup) -> None:
        ana = signup("ana")
        group_id = _create_group(client, ana)
        assert _add(client, ana, group_id, "ghost@example.com").status_code == 404

    def test_listing_unknown_group_is_404(self, client: TestClient, signup) -> None:
        ana = signup("ana")
        response = client.get("/api/groups/missing/collaborators", headers=ana.headers)
        assert response.status_code == 404


class TestGroupTasks:
    def test_lifecycle(self, client: TestClient, signup) -> None:
        ana = signup("ana")
        bea = signup("bea")
        group_id = _create_group(client, ana)
        _add(client, ana, group_id, "bea@example.com")

        created = client.post(
            f"/api/groups/{group_id}/tasks",
            json={"name": "Paint", "assigned_to": bea.user_id},
            headers=ana.headers,
        )
        task_id = created.json()["task"]["id"]
        updated = client.put(
            f"/api/groups/{group_id}/tasks/{task_id}",
            json={"description": "Two coats"},
            headers=bea.headers,
        )
        completed = client.put(
            f"/api/groups/{group_id}/tasks/{task_id}/complete", headers=bea.headers
        )
        listed = client.get(f"/api/groups/{group_id}/tasks", headers=bea.headers)

        assert created.status_code == 201
        assert created.json()["task"]["status"] == "pendiente"
        assert updated.json()["task"]["description"] == "Two coats"
        assert completed.json()["message"] == "Task marked as completed"
        assert completed.json()["task"]["completed_by"] == bea.user_id
        [view] = listed.json()
        assert view["status"] == "completada"
        assert view["created_by"] == {"id": ana.user_id, "username": "ana"}
        assert view["assigned_to"] == {"id": bea.user_id, "username": "bea"}
        assert view["completed_at"] is not None

    def test_non_member_assignee_is_400(self, client: TestClient, signup) -> None:
        ana = signup("ana")
        dan = signup("dan")
        group_id = _create_group(client, ana)

        response = client.post(
            f"/api/groups/{group_id}/tasks",
            json={"name": "Nope", "assigned_to": dan.user_id},
            headers=ana.headers,
        )

        assert response.status_code == 400
        assert client.get(f"/api/groups/{group_id}/tasks", headers=ana.headers).json() == []

    def test_outsider_is_403_even_for_unknown_task(self, client: TestClient, signup) -> None:
        ana = signup("ana")
        dan = signup("dan")
        group_id = _create_group(client, ana)

        assert client.get(f"/api/groups/{group_id}/tasks", headers=dan.headers).status_code == 403
        response = client.put(
            f"/api/groups/{group_id}/tasks/no-such-task/complete", headers=dan.headers
        )
        assert response.status_code == 403

    def test_unknown_group_is_404(self, client: TestClient, signup) -> None:
        ana = signup("ana")
        response = client.get("/api/groups/missing/tasks", headers=ana.headers)
        assert response.status_code == 404

    def test_unknown_task_is_404_for_member(self, client: TestClient, signup) -> None:
        ana = signup("ana")
        group_id = _create_group(client, ana)
        response = client.put(
            f"/api/groups/{group_id}/tasks/no-such-task", json={"name": "x"}, headers=ana.headers
        )
        assert response.status_code == 404

    def test_explicit_null_assignee_unassigns(self, client: TestClient, signup) -> None:
        ana = signup("ana")
        bea = signup("bea")
        group_id = _create_group(client, ana)
        _add(client, ana, group_id, "bea@example.com")
        task_id = client.post(
            f"/api/groups/{group_id}/tasks",
            json={"name": "T", "assigned_to": bea.user_id},
            headers=ana.headers,
        ).json()["task"]["id"]

        renamed = client.put(
            f"/api/groups/{group_id}/tasks/{task_id}", json={"name": "Renamed"}, headers=ana.headers
        )
        cleared = client.put(
            f"/api/groups/{group_id}/tasks/{task_id}",
            json={"assigned_to": None},
            headers=ana.headers,
        )
        listed = client.get(f"/api/groups/{group_id}/tasks", headers=ana.headers).json()

        assert renamed.json()["task"]["assigned_to"] == bea.user_id
        assert cleared.status_code == 200, cleared.text
        assert cleared.json()["task"]["assigned_to"] is None
        assert listed[0]["assigned_to"] is None
        assert client.get(f"/api/groups/{group_id}/tasks", headers=bea.headers).json() == []

    def test_completion_fields_are_not_updatable(self, client: TestClient, signup) -> None:
        ana = signup("ana")
        group_id = _create_group(client, ana)
        task_id = client.post(
            f"/api/groups/{group_id}/tasks", json={"name": "T"}, headers=ana.headers
        ).json()["task"]["id"]

        response = client.put(
            f"/api/groups/{group_id}/tasks/{task_id}",
            json={"completed_by": ana.user_id},
            headers=ana.headers,
        )

        assert response.status_code == 422
