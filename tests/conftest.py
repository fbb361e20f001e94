# tests/conftest.py

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from taskflow.main import create_app
from taskflow.service_tasks import TaskService
from taskflow.storage import InMemoryStorage, JsonFileStorage
from taskflow.store_tasks import TaskRepository


@pytest.fixture()
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture(params=["memory", "file"])
def any_storage(request, tmp_path: Path):
    """Both storage backends, so the shared contract is tested once for each."""
    if request.param == "memory":
        return InMemoryStorage()
    return JsonFileStorage(tmp_path / "store.json")


@pytest.fixture()
def repository(storage: InMemoryStorage) -> TaskRepository:
    return TaskRepository(storage)


@pytest.fixture()
def service(repository: TaskRepository) -> TaskService:
    return TaskService(repository)


@pytest.fixture()
def client(service: TaskService) -> TestClient:
    """Web app wired to the same in-memory service as the `service` fixture."""
    return TestClient(create_app(service=service))
