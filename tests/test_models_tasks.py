# tests/test_models_tasks.py

from datetime import date, datetime, timezone

import pytest
from pydantic import ValidationError as PydanticValidationError

from taskflow.exceptions import ValidationError
from taskflow.models_tasks import Task, TaskDraft, TaskPriority, TaskStatus, TaskUpdate


@pytest.mark.parametrize(
    "description, priority",
    [
        ("Buy milk", TaskPriority.low),
        ("Write report", "High"),
        ("x", TaskPriority.medium),
        ("a" * 500, "Low"),
    ],
)
def test_valid_task_gets_id_pending_status_and_timestamps(description, priority) -> None:
    task = Task(description=description, priority=priority)

    assert isinstance(task.id, str) and task.id
    assert task.status == TaskStatus.pending
    assert task.priority == TaskPriority(priority)
    assert task.due_date is None
    assert isinstance(task.created_at, datetime)
    assert isinstance(task.updated_at, datetime)
    assert task.created_at == task.updated_at


def test_default_priority_is_medium() -> None:
    assert Task(description="Plain").priority == TaskPriority.medium


@pytest.mark.parametrize("description", ["", " ", "   ", "\t", "\n\t  \n"])
def test_blank_description_is_rejected(description) -> None:
    with pytest.raises(ValidationError, match="empty"):
        Task(description=description)


def test_too_long_description_is_rejected() -> None:
    with pytest.raises(ValidationError, match="cannot exceed 500 characters"):
        Task(description="a" * 501)


def test_invalid_priority_lists_valid_values() -> None:
    with pytest.raises(ValidationError, match="High, Medium, Low"):
        Task(description="Task", priority="Urgent")


def test_description_is_validated_before_priority() -> None:
    with pytest.raises(ValidationError, match="empty"):
        Task(description="  ", priority="Urgent")


@pytest.mark.parametrize("due_date", ["not-a-date", "2025-02-30", 12345, ""])
def test_invalid_due_date_is_rejected(due_date) -> None:
    with pytest.raises(ValidationError, match="Invalid due date"):
        Task(description="Task", due_date=due_date)


def test_due_date_accepts_date_datetime_and_iso_strings() -> None:
    assert Task(description="a", due_date=date(2030, 1, 31)).due_date == datetime(2030, 1, 31)
    assert Task(description="a", due_date="2030-01-31").due_date == datetime(2030, 1, 31)
    assert Task(description="a", due_date="2030-01-31T10:00:00Z").due_date == datetime(
        2030, 1, 31, 10, tzinfo=timezone.utc
    )


def test_invalid_status_is_rejected() -> None:
    with pytest.raises(ValidationError, match="Pending, InProgress, Completed"):
        Task(description="Task", status="Done")


def test_generated_ids_are_unique() -> None:
    ids = {Task(description=f"task {i}").id for i in range(100)}
    assert len(ids) == 100


def test_task_is_immutable() -> None:
    task = Task(description="Frozen")
    with pytest.raises(PydanticValidationError):
        task.description = "changed"


def test_rehydration_keeps_explicit_fields() -> None:
    created = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
    task = Task(
        id="abc",
        description="Old task",
        status="Completed",
        priority="Low",
        created_at=created,
        updated_at=created,
    )
    assert task.id == "abc"
    assert task.status == TaskStatus.completed
    assert task.created_at == created


def test_to_dict_uses_json_safe_values() -> None:
    task = Task(description="Serialize me", priority="High", due_date="2030-06-01")
    data = task.to_dict()

    assert data["priority"] == "High"
    assert data["status"] == "Pending"
    assert isinstance(data["created_at"], str)
    assert Task.from_dict(data) == task


def test_static_validators_work_without_a_task() -> None:
    assert Task.validate_description(" ok ") == " ok "
    assert Task.validate_priority("Low") is TaskPriority.low
    assert Task.validate_status("InProgress") is TaskStatus.in_progress
    assert Task.validate_due_date(None) is None
    with pytest.raises(ValidationError):
        Task.validate_description(None)


def test_update_tracks_only_explicit_fields() -> None:
    assert TaskUpdate().changes() == {}
    assert TaskUpdate(due_date=None).changes() == {"due_date": None}
    assert TaskUpdate(priority="High").changes() == {"priority": TaskPriority.high}


@pytest.mark.parametrize("field", ["id", "created_at", "updated_at", "title"])
def test_update_rejects_immutable_and_unknown_fields(field) -> None:
    with pytest.raises(ValidationError, match=field):
        TaskUpdate(**{field: "x"})


def test_update_validates_values() -> None:
    with pytest.raises(ValidationError, match="empty"):
        TaskUpdate(description="   ")
    with pytest.raises(ValidationError, match="priority"):
        TaskUpdate(priority="Whenever")


def test_draft_defaults_and_is_frozen() -> None:
    draft = TaskDraft(description="Plan trip")

    assert draft.priority == TaskPriority.medium
    assert draft.status == TaskStatus.pending
    assert draft.due_date is None
    with pytest.raises(PydanticValidationError):
        draft.description = "Other"


def test_draft_defers_value_checks_to_task() -> None:
    draft = TaskDraft(description="", priority="Whenever")

    with pytest.raises(ValidationError):
        Task(**draft.model_dump())
