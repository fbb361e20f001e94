# tests/test_store_tasks.py

from datetime import datetime, timezone

import pytest

from taskflow.exceptions import NotFoundError
from taskflow.models_tasks import Task, TaskDraft, TaskPriority, TaskStatus, TaskUpdate
from taskflow.storage import JsonFileStorage
from taskflow.store_tasks import TaskRepository


async def _seed(repository: TaskRepository, *descriptions: str):
    return [await repository.create(TaskDraft(description=d)) for d in descriptions]


STALE = datetime(2020, 1, 1, tzinfo=timezone.utc)


async def _seed_stale(storage, description: str) -> Task:
    """Store a task whose timestamps are well in the past."""
    task = Task(description=description, created_at=STALE, updated_at=STALE)
    await storage.save("tasks", [task.to_dict()])
    return task


@pytest.mark.asyncio
async def test_create_persists_under_tasks_key(repository, storage) -> None:
    task = await repository.create(TaskDraft(description="Buy milk", priority="Low"))

    stored = await storage.load("tasks")
    assert len(stored) == 1
    assert stored[0]["id"] == task.id
    assert stored[0]["description"] == "Buy milk"
    assert stored[0]["priority"] == "Low"


@pytest.mark.asyncio
async def test_get_all_keeps_insertion_order(repository) -> None:
    created = await _seed(repository, "first", "second", "third")
    assert [t.id for t in await repository.get_all()] == [t.id for t in created]


@pytest.mark.asyncio
async def test_get_by_id_missing_returns_none(repository) -> None:
    await _seed(repository, "only")
    assert await repository.get_by_id("nope") is None


@pytest.mark.asyncio
async def test_delete_removes_only_the_target(repository) -> None:
    a, b, c = await _seed(repository, "alpha", "beta", "gamma")

    await repository.delete(b.id)

    remaining = await repository.get_all()
    assert [(t.id, t.description) for t in remaining] == [
        (a.id, "alpha"),
        (c.id, "gamma"),
    ]
    assert await repository.get_by_id(b.id) is None


@pytest.mark.asyncio
async def test_delete_unknown_id_is_noop(repository) -> None:
    await _seed(repository, "alpha", "beta")
    before = await repository.get_all()

    await repository.delete("does-not-exist")

    assert await repository.get_all() == before


@pytest.mark.asyncio
async def test_update_preserves_identity_and_bumps_timestamp(repository, storage) -> None:
    task = await _seed_stale(storage, "original")

    updated = await repository.update(
        task.id, TaskUpdate(description="changed", priority=TaskPriority.high)
    )

    assert updated.id == task.id
    assert updated.created_at == task.created_at
    assert updated.created_at == STALE
    assert updated.updated_at > STALE
    assert updated.description == "changed"
    assert updated.priority == TaskPriority.high
    assert updated.status == task.status
    assert await repository.get_by_id(task.id) == updated


@pytest.mark.asyncio
async def test_empty_update_still_refreshes_timestamp(repository, storage) -> None:
    task = await _seed_stale(storage, "same")

    updated = await repository.update(task.id, TaskUpdate())

    assert updated.description == "same"
    assert updated.created_at == task.created_at
    assert updated.updated_at > STALE


@pytest.mark.asyncio
async def test_update_can_clear_due_date(repository) -> None:
    task = await repository.create(TaskDraft(description="due", due_date="2030-01-01"))

    updated = await repository.update(task.id, TaskUpdate(due_date=None))

    assert task.due_date is not None
    assert updated.due_date is None


@pytest.mark.asyncio
async def test_update_missing_task_raises(repository) -> None:
    with pytest.raises(NotFoundError) as exc_info:
        await repository.update("ghost", TaskUpdate(status=TaskStatus.completed))
    assert exc_info.value.task_id == "ghost"


@pytest.mark.asyncio
async def test_clear_empties_collection(repository, storage) -> None:
    await _seed(repository, "a", "b")
    await repository.clear()

    assert await repository.get_all() == []
    assert await storage.load("tasks") == []


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "stored",
    [
        {"not": "a list"},
        "garbage",
        [{"bogus": 1}],
        [{"id": "1", "description": "", "status": "Pending", "priority": "Low"}],
    ],
)
async def test_malformed_storage_degrades_to_empty(repository, storage, stored) -> None:
    await storage.save("tasks", stored)
    assert await repository.get_all() == []


@pytest.mark.asyncio
async def test_unreadable_file_storage_degrades_to_empty(tmp_path) -> None:
    path = tmp_path / "tasks.json"
    path.write_text("{broken", encoding="utf-8")

    assert await TaskRepository(JsonFileStorage(path)).get_all() == []


@pytest.mark.asyncio
async def test_create_recovers_unreadable_file_storage(tmp_path) -> None:
    path = tmp_path / "tasks.json"
    path.write_text("{broken", encoding="utf-8")
    repository = TaskRepository(JsonFileStorage(path))

    task = await repository.create(TaskDraft(description="Start over"))

    assert [t.id for t in await repository.get_all()] == [task.id]
