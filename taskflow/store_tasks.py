# -*- coding: utf-8 -*-

"""
Task Management - Repository.

Owns the canonical, insertion-ordered task collection, persisted as a
single list under the "tasks" storage key. Every mutation reads the whole
collection, changes it and writes it back (last write wins).
"""

from datetime import datetime, timezone
from typing import List, Optional

from loguru import logger

from taskflow.exceptions import NotFoundError
from taskflow.models_tasks import Task, TaskDraft, TaskUpdate
from taskflow.ports import StorageBackend


class TaskRepository:
    """Task CRUD over a key-value storage backend."""

    STORAGE_KEY = "tasks"

    def __init__(self, storage: StorageBackend):
        self._storage = storage

    async def _save_all(self, tasks: List[Task]) -> None:
        await self._storage.save(self.STORAGE_KEY, [t.to_dict() for t in tasks])

    async def create(self, draft: TaskDraft) -> Task:
        """Create a new task."""
        task = Task(
            description=draft.description,
            priority=draft.priority,
            due_date=draft.due_date,
            status=draft.status,
        )
        tasks = await self.get_all()
        tasks.append(task)
        await self._save_all(tasks)
        return task

    async def get_by_id(self, task_id: str) -> Optional[Task]:
        """Get a task by ID."""
        for task in await self.get_all():
            if task.id == task_id:
                return task
        return None

    async def get_all(self) -> List[Task]:
        """
        All tasks in insertion order.

        Missing, malformed or unreadable data yields an empty list.
        """
        try:
            data = await self._storage.load(self.STORAGE_KEY)
            if not isinstance(data, list):
                return []
            return [Task.from_dict(item) for item in data]
        except Exception as e:
            logger.warning(f"Failed to load tasks from storage, treating as empty: {e}")
            return []

    async def update(self, task_id: str, updates: TaskUpdate) -> Task:
        """Merge explicitly set fields over the task; id and created_at are kept."""
        tasks = await self.get_all()
        for index, task in enumerate(tasks):
            if task.id == task_id:
                break
        else:
            raise NotFoundError(task_id)

        merged = Task(
            **{
                **task.model_dump(),
                **updates.changes(),
                "id": task.id,
                "created_at": task.created_at,
                "updated_at": datetime.now(timezone.utc),
            }
        )
        tasks[index] = merged
        await self._save_all(tasks)
        return merged

    async def delete(self, task_id: str) -> None:
        """Delete a task. Missing ids are ignored."""
        tasks = await self.get_all()
        await self._save_all([t for t in tasks if t.id != task_id])

    async def clear(self) -> None:
        await self._save_all([])
