# -*- coding: utf-8 -*-

"""
Application wiring: storage -> repository -> service.
"""

from dataclasses import dataclass
from typing import Optional

from loguru import logger

from taskflow.config import STORAGE_PATH
from taskflow.ports import StorageBackend
from taskflow.service_tasks import TaskService
from taskflow.storage import InMemoryStorage, JsonFileStorage
from taskflow.store_tasks import TaskRepository


@dataclass
class AppComponents:
    storage: StorageBackend
    repository: TaskRepository
    service: TaskService


def create_storage(storage_path: Optional[str] = None) -> StorageBackend:
    """JSON file backend when a path is configured, in-memory otherwise."""
    path = STORAGE_PATH if storage_path is None else storage_path
    if path:
        logger.info(f"Using JSON file storage at {path}")
        return JsonFileStorage(path)
    logger.info("Using in-memory storage")
    return InMemoryStorage()


def build_components(storage: Optional[StorageBackend] = None) -> AppComponents:
    storage = storage if storage is not None else create_storage()
    repository = TaskRepository(storage)
    return AppComponents(storage=storage, repository=repository, service=TaskService(repository))
