# -*- coding: utf-8 -*-

"""
TaskFlow - Exceptions.

ValidationError deliberately does not derive from ValueError: pydantic only
wraps ValueError/AssertionError raised inside validators, so ours propagate
to the caller unchanged.
"""

from typing import Optional


class TaskflowError(Exception):
    """Base class for all TaskFlow errors."""


class ValidationError(TaskflowError):
    """Invalid task data (description, priority, status, due date or update field)."""


class NotFoundError(TaskflowError):
    """Operation addressed a task id that does not exist."""

    def __init__(self, task_id: str, message: Optional[str] = None):
        self.task_id = task_id
        super().__init__(message or f"Task with id {task_id} not found")


class StorageError(TaskflowError):
    """The storage backend failed to persist or retrieve a value."""
