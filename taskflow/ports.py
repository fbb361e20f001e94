# -*- coding: utf-8 -*-

"""
Ports (interfaces) between the layers.

The service depends on TaskRepositoryPort and the repository on
StorageBackend, so alternative backends (file, database, network) can be
swapped in without touching business rules.
"""

from typing import Any, List, Mapping, Optional, Protocol, Union

from taskflow.models_tasks import Task, TaskDraft, TaskPriority, TaskStatus, TaskUpdate


class StorageBackend(Protocol):
    """Key-value backend. Values round-trip structurally (JSON semantics)."""

    async def save(self, key: str, value: Any) -> None: ...

    async def load(self, key: str) -> Optional[Any]: ...

    async def remove(self, key: str) -> None: ...

    async def clear(self) -> None: ...


class TaskRepositoryPort(Protocol):
    async def create(self, draft: TaskDraft) -> Task: ...

    async def get_by_id(self, task_id: str) -> Optional[Task]: ...

    async def get_all(self) -> List[Task]: ...

    async def update(self, task_id: str, updates: TaskUpdate) -> Task: ...

    async def delete(self, task_id: str) -> None: ...

    async def clear(self) -> None: ...


class TaskServicePort(Protocol):
    """Public contract consumed by the console and web presentation layers."""

    async def add_task(
        self,
        description: str,
        priority: Union[TaskPriority, str] = TaskPriority.medium,
        due_date: Any = None,
    ) -> Task: ...

    async def complete_task(self, task_id: str) -> Task: ...

    async def uncomplete_task(self, task_id: str) -> Task: ...

    async def start_task(self, task_id: str) -> Task: ...

    async def delete_task(self, task_id: str) -> None: ...

    async def update_task(
        self, task_id: str, updates: Union[TaskUpdate, Mapping[str, Any]]
    ) -> Task: ...

    async def get_task(self, task_id: str) -> Task: ...

    async def get_all_tasks(self) -> List[Task]: ...

    async def filter_by_status(self, status: Union[TaskStatus, str]) -> List[Task]: ...

    async def filter_by_priority(self, priority: Union[TaskPriority, str]) -> List[Task]: ...

    async def search(self, query: str) -> List[Task]: ...
