# -*- coding: utf-8 -*-

"""
TaskFlow - task tracking with a console demo and a web UI.
"""

from taskflow.config import APP_VERSION
from taskflow.exceptions import NotFoundError, StorageError, TaskflowError, ValidationError
from taskflow.models_tasks import Task, TaskDraft, TaskPriority, TaskStatus, TaskUpdate
from taskflow.service_tasks import TaskService
from taskflow.storage import InMemoryStorage, JsonFileStorage
from taskflow.store_tasks import TaskRepository

__version__ = APP_VERSION

__all__ = [
    "InMemoryStorage",
    "JsonFileStorage",
    "NotFoundError",
    "StorageError",
    "Task",
    "TaskDraft",
    "TaskPriority",
    "TaskRepository",
    "TaskService",
    "TaskStatus",
    "TaskUpdate",
    "TaskflowError",
    "ValidationError",
]
