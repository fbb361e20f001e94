# -*- coding: utf-8 -*-

"""
Task Management - Service.

Business rules on top of the repository: validation before delegation,
existence checks for status changes and updates, filtering and search.
Returned tasks are snapshots; they do not follow later changes.
"""

from typing import Any, List, Mapping, Optional, Union

from loguru import logger

from taskflow.exceptions import NotFoundError
from taskflow.models_tasks import (
    Task,
    TaskDraft,
    TaskPriority,
    TaskStats,
    TaskStatus,
    TaskUpdate,
)
from taskflow.ports import TaskRepositoryPort


def _matches(
    task: Task,
    status: Optional[TaskStatus],
    priority: Optional[TaskPriority],
    query: Optional[str],
) -> bool:
    if status is not None and task.status != status:
        return False
    if priority is not None and task.priority != priority:
        return False
    if query is not None and query.lower() not in task.description.lower():
        return False
    return True


class TaskService:
    """Task business rules. Presentation layers talk only to this class."""

    def __init__(self, repository: TaskRepositoryPort):
        self._repository = repository

    async def _require(self, task_id: str) -> Task:
        task = await self._repository.get_by_id(task_id)
        if task is None:
            raise NotFoundError(task_id)
        return task

    async def _set_status(self, task_id: str, status: TaskStatus) -> Task:
        await self._require(task_id)
        task = await self._repository.update(task_id, TaskUpdate(status=status))
        logger.info(f"Task {task_id} status -> {status.value}")
        return task

    async def add_task(
        self,
        description: str,
        priority: Union[TaskPriority, str] = TaskPriority.medium,
        due_date: Any = None,
    ) -> Task:
        """Create a task; status always starts as Pending."""
        Task.validate_description(description)
        priority = Task.validate_priority(priority)

        task = await self._repository.create(
            TaskDraft(
                description=description,
                priority=priority,
                due_date=due_date,
                status=TaskStatus.pending,
            )
        )
        logger.info(f"Task created: {task.id} - {task.description}")
        return task

    async def complete_task(self, task_id: str) -> Task:
        return await self._set_status(task_id, TaskStatus.completed)

    async def uncomplete_task(self, task_id: str) -> Task:
        return await self._set_status(task_id, TaskStatus.pending)

    async def start_task(self, task_id: str) -> Task:
        """Move a task to InProgress."""
        return await self._set_status(task_id, TaskStatus.in_progress)

    async def delete_task(self, task_id: str) -> None:
        await self._repository.delete(task_id)
        logger.info(f"Task deleted: {task_id}")

    async def update_task(
        self, task_id: str, updates: Union[TaskUpdate, Mapping[str, Any]]
    ) -> Task:
        """
        Apply a partial update.

        A plain mapping is converted to TaskUpdate first, so unknown or
        immutable fields (id, created_at) are rejected with ValidationError.
        """
        await self._require(task_id)

        if not isinstance(updates, TaskUpdate):
            updates = TaskUpdate(**dict(updates))

        changes = updates.changes()
        if "description" in changes:
            Task.validate_description(changes["description"])
        if "priority" in changes:
            Task.validate_priority(changes["priority"])

        task = await self._repository.update(task_id, updates)
        logger.info(f"Task updated: {task_id} ({', '.join(changes) or 'no fields'})")
        return task

    async def get_task(self, task_id: str) -> Task:
        return await self._require(task_id)

    async def get_all_tasks(self) -> List[Task]:
        return await self._repository.get_all()

    async def filter_by_status(self, status: Union[TaskStatus, str]) -> List[Task]:
        return await self.query_tasks(status=status)

    async def filter_by_priority(self, priority: Union[TaskPriority, str]) -> List[Task]:
        return await self.query_tasks(priority=priority)

    async def search(self, query: str) -> List[Task]:
        """Case-insensitive substring match on description. "" matches all."""
        return await self.query_tasks(query=query)

    async def query_tasks(
        self,
        status: Union[TaskStatus, str, None] = None,
        priority: Union[TaskPriority, str, None] = None,
        query: Optional[str] = None,
    ) -> List[Task]:
        """Tasks matching every given criterion, in insertion order."""
        if status is not None:
            status = Task.validate_status(status)
        if priority is not None:
            priority = Task.validate_priority(priority)

        tasks = await self._repository.get_all()
        return [t for t in tasks if _matches(t, status, priority, query)]

    async def get_stats(self) -> TaskStats:
        tasks = await self._repository.get_all()
        total = len(tasks)
        completed = sum(1 for t in tasks if t.status == TaskStatus.completed)
        return TaskStats(
            total=total,
            completed=completed,
            pending=sum(1 for t in tasks if t.status == TaskStatus.pending),
            in_progress=sum(1 for t in tasks if t.status == TaskStatus.in_progress),
            high=sum(
                1 for t in tasks
                if t.priority == TaskPriority.high and t.status != TaskStatus.completed
            ),
            # Half-up: 1 of 8 is 13
            progress=int(completed * 100 / total + 0.5) if total else 0,
        )
