"""Unit tests for task lifecycle transitions."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from taskapp.domain.models.task import (
    COMPLETED_STATUS,
    PENDING_STATUS,
    GroupTask,
    PersonalTask,
)
from taskapp.domain.services.task_lifecycle import (
    apply_group_task_update,
    apply_personal_task_update,
    complete_group_task,
    initial_status,
)

T1 = datetime(2026, 3, 1, 9, 0, tzinfo=timezone.utc)
T2 = datetime(2026, 3, 2, 9, 0, tzinfo=timezone.utc)


@pytest.fixture
def group_task() -> GroupTask:
    return GroupTask(
        id="t-1",
        name="Buy paint",
        status=PENDING_STATUS,
        description="White, 5L",
        deadline=None,
        category="home",
        group_id="g-1",
        created_by="u-a",
        assigned_to="u-b",
    )


class TestInitialStatus:
    def test_defaults_to_pending(self) -> None:
        assert initial_status(None) == "pendiente"
        assert initial_status("") == "pendiente"

    def test_keeps_supplied_status(self) -> None:
        assert initial_status("en progreso") == "en progreso"


class TestGroupTaskUpdate:
    def test_only_supplied_fields_change(self, group_task: GroupTask) -> None:
        updated = apply_group_task_update(group_task, {"name": "Buy blue paint"})
        assert updated.name == "Buy blue paint"
        assert updated.description == "White, 5L"
        assert updated.assigned_to == "u-b"

    def test_completion_fields_are_rejected(self, group_task: GroupTask) -> None:
        with pytest.raises(ValueError, match="completed_by"):
            apply_group_task_update(group_task, {"completed_by": "u-a"})

    def test_stale_completion_metadata_is_preserved(self, group_task: GroupTask) -> None:
        completed = complete_group_task(group_task, "u-b", T1)
        reopened = apply_group_task_update(completed, {"status": PENDING_STATUS})
        assert reopened.status == PENDING_STATUS
        assert reopened.completed_by == "u-b"
        assert reopened.completed_at == T1


class TestCompleteGroupTask:
    def test_sets_status_and_metadata_together(self, group_task: GroupTask) -> None:
        completed = complete_group_task(group_task, "u-b", T1)
        assert completed.status == COMPLETED_STATUS
        assert completed.completed_by == "u-b"
        assert completed.completed_at == T1
        assert completed.is_completed

    def test_recompletion_overwrites(self, group_task: GroupTask) -> None:
        first = complete_group_task(group_task, "u-b", T1)
        second = complete_group_task(first, "u-a", T2)
        assert second.completed_by == "u-a"
        assert second.completed_at == T2


class TestPersonalTaskUpdate:
    def test_assignment_is_not_a_personal_field(self) -> None:
        task = PersonalTask(
            id="p-1",
            name="Read",
            status=PENDING_STATUS,
            description=None,
            deadline=None,
            category=None,
            owner_user_id="u-a",
        )
        with pytest.raises(ValueError, match="assigned_to"):
            apply_personal_task_update(task, {"assigned_to": "u-b"})
        assert apply_personal_task_update(task, {"category": "books"}).category == "books"
