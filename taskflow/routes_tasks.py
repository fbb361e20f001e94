# -*- coding: utf-8 -*-

"""
Task Management - API Routes.

CRUD endpoints for task management at /v1/tasks. Service errors are
translated to HTTP errors: ValidationError -> 422, NotFoundError -> 404,
StorageError -> 500.
"""

from typing import NoReturn, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response
from loguru import logger

from taskflow.exceptions import NotFoundError, StorageError, TaskflowError, ValidationError
from taskflow.models_tasks import (
    Task,
    TaskCreate,
    TaskListResponse,
    TaskPatch,
    TaskStats,
    TaskUpdate,
)
from taskflow.service_tasks import TaskService


def get_task_service(request: Request) -> TaskService:
    return request.app.state.task_service


def _raise_http(e: TaskflowError) -> NoReturn:
    if isinstance(e, NotFoundError):
        raise HTTPException(status_code=404, detail="Task not found")
    if isinstance(e, ValidationError):
        raise HTTPException(status_code=422, detail=str(e))
    if isinstance(e, StorageError):
        logger.error(f"Storage failure: {e}")
        raise HTTPException(status_code=500, detail="Storage failure")
    raise HTTPException(status_code=400, detail=str(e))


# --- Router ---
router = APIRouter(prefix="/v1/tasks")


@router.post("", response_model=Task, status_code=201)
async def create_task(data: TaskCreate, service: TaskService = Depends(get_task_service)):
    """Create a new task."""
    try:
        return await service.add_task(data.description, data.priority, data.due_date)
    except TaskflowError as e:
        _raise_http(e)


@router.get("", response_model=TaskListResponse)
async def list_tasks(
    status: Optional[str] = Query(None, description="Filter by status"),
    priority: Optional[str] = Query(None, description="Filter by priority"),
    q: Optional[str] = Query(None, description="Case-insensitive description search"),
    service: TaskService = Depends(get_task_service),
):
    """List tasks, optionally filtered by status, priority and search text."""
    try:
        tasks = await service.query_tasks(status=status, priority=priority, query=q)
    except TaskflowError as e:
        _raise_http(e)
    return TaskListResponse(tasks=tasks, total=len(tasks))


@router.get("/stats", response_model=TaskStats)
async def get_stats(service: TaskService = Depends(get_task_service)):
    """Counters for the dashboard."""
    return await service.get_stats()


@router.get("/{task_id}", response_model=Task)
async def get_task(task_id: str, service: TaskService = Depends(get_task_service)):
    """Get a single task by ID."""
    try:
        return await service.get_task(task_id)
    except TaskflowError as e:
        _raise_http(e)


@router.patch("/{task_id}", response_model=Task)
async def patch_task(
    task_id: str, data: TaskPatch, service: TaskService = Depends(get_task_service)
):
    """Partial update of a task."""
    try:
        updates = TaskUpdate(**data.model_dump(exclude_unset=True))
        return await service.update_task(task_id, updates)
    except TaskflowError as e:
        _raise_http(e)


@router.post("/{task_id}/complete", response_model=Task)
async def complete_task(task_id: str, service: TaskService = Depends(get_task_service)):
    try:
        return await service.complete_task(task_id)
    except TaskflowError as e:
        _raise_http(e)


@router.post("/{task_id}/uncomplete", response_model=Task)
async def uncomplete_task(task_id: str, service: TaskService = Depends(get_task_service)):
    try:
        return await service.uncomplete_task(task_id)
    except TaskflowError as e:
        _raise_http(e)


@router.post("/{task_id}/start", response_model=Task)
async def start_task(task_id: str, service: TaskService = Depends(get_task_service)):
    try:
        return await service.start_task(task_id)
    except TaskflowError as e:
        _raise_http(e)


@router.delete("/{task_id}", status_code=204)
async def delete_task(task_id: str, service: TaskService = Depends(get_task_service)):
    """Delete a task. Unknown ids are not an error."""
    try:
        await service.delete_task(task_id)
    except TaskflowError as e:
        _raise_http(e)
    return Response(status_code=204)
