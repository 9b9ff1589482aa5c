"""Unit tests for domain models, their document forms and timestamp helpers."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from taskapp.domain.models.group import Collaborator, Group, GroupRole
from taskapp.domain.models.task import GroupTask, PersonalTask
from taskapp.domain.models.user import SystemRole, User
from taskapp.domain.primitives import parse_timestamp, to_iso

CREATED = datetime(2026, 1, 15, 12, 30, tzinfo=timezone.utc)


class TestTimestamps:
    def test_naive_datetimes_are_treated_as_utc(self) -> None:
        assert to_iso(datetime(2026, 1, 15, 12, 30)) == "2026-01-15T12:30:00+00:00"

    def test_parse_round_trips(self) -> None:
        assert parse_timestamp(to_iso(CREATED)) == CREATED

    def test_none_passes_through(self) -> None:
        assert to_iso(None) is None
        assert parse_timestamp(None) is None

    def test_unsupported_value_is_rejected(self) -> None:
        with pytest.raises(TypeError):
            parse_timestamp(12345)


class TestUser:
    def test_public_dict_never_contains_credential(self) -> None:
        user = User(id="u-1", username="ana", email="ana@example.com", password_hash="x$y")
        public = user.to_public_dict()
        assert "password" not in public
        assert "password_hash" not in public
        assert public["role"] == "user"

    def test_document_round_trip(self) -> None:
        user = User(
            id="u-1",
            username="ana",
            email="ana@example.com",
            password_hash="hash",
            role=SystemRole.MASTER,
            last_login=CREATED,
        )
        assert User.from_document({"id": "u-1", **user.to_document()}) == user
        assert user.is_master

    def test_summary(self) -> None:
        user = User(id="u-1", username="ana", email="ana@example.com", password_hash="")
        assert user.summary().to_dict() == {"id": "u-1", "username": "ana"}


class TestGroupModels:
    def test_group_document_uses_admin_key(self) -> None:
        group = Group(id="g-1", name="Home", admin_user_id="u-1", created_at=CREATED)
        document = group.to_document()
        assert document["admin"] == "u-1"
        assert Group.from_document({"id": "g-1", **document}) == group

    def test_group_without_creation_time_is_invalid(self) -> None:
        with pytest.raises(ValueError):
            Group.from_document({"id": "g-1", "name": "Home", "admin": "u-1"})

    def test_collaborator_dict(self) -> None:
        row = Collaborator(id="c-1", group_id="g-1", user_id="u-1", role=GroupRole.ADMIN)
        assert row.is_admin
        assert row.to_dict() == {
            "id": "c-1",
            "group_id": "g-1",
            "user_id": "u-1",
            "role": "admin",
        }


class TestTaskModels:
    def test_personal_task_is_stored_under_user_id(self) -> None:
        task = PersonalTask(
            id="p-1",
            name="Read",
            status="pendiente",
            description=None,
            deadline=CREATED,
            category=None,
            owner_user_id="u-1",
        )
        document = task.to_document()
        assert document["user_id"] == "u-1"
        assert PersonalTask.from_document({"id": "p-1", **document}) == task

    def test_group_task_defaults_missing_status(self) -> None:
        task = GroupTask.from_document(
            {"id": "t-1", "name": "Paint", "group_id": "g-1", "created_by": "u-1"}
        )
        assert task.status == "pendiente"
        assert task.assigned_to is None
        assert task.completed_at is None
        assert not task.is_completed
