# -*- coding: utf-8 -*-

"""
Task Management - Pydantic Models.

Task is an immutable, validated value object. Every mutation goes through
the repository, which builds a new snapshot. Validators raise
taskflow.exceptions.ValidationError, which pydantic lets propagate as-is.
"""

import uuid
from datetime import date, datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from taskflow.exceptions import ValidationError

MAX_DESCRIPTION_LENGTH = 500


class TaskStatus(str, Enum):
    """Task status options."""
    pending = "Pending"
    in_progress = "InProgress"
    completed = "Completed"


class TaskPriority(str, Enum):
    """Task priority levels."""
    high = "High"
    medium = "Medium"
    low = "Low"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Task(BaseModel):
    """Complete task representation."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    description: str
    priority: TaskPriority = TaskPriority.medium
    due_date: Optional[datetime] = None
    status: TaskStatus = TaskStatus.pending
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)

    # --- Static validators (usable without building a Task) ---

    @staticmethod
    def validate_description(description: Any) -> str:
        """Non-empty after trimming and at most 500 characters."""
        if not isinstance(description, str) or not description.strip():
            raise ValidationError("Task description cannot be empty or contain only whitespace")
        if len(description) > MAX_DESCRIPTION_LENGTH:
            raise ValidationError(
                f"Task description cannot exceed {MAX_DESCRIPTION_LENGTH} characters"
            )
        return description

    @staticmethod
    def validate_priority(priority: Any) -> TaskPriority:
        try:
            return TaskPriority(priority)
        except ValueError:
            valid = ", ".join(p.value for p in TaskPriority)
            raise ValidationError(f"Invalid priority. Must be one of: {valid}")

    @staticmethod
    def validate_status(status: Any) -> TaskStatus:
        try:
            return TaskStatus(status)
        except ValueError:
            valid = ", ".join(s.value for s in TaskStatus)
            raise ValidationError(f"Invalid status. Must be one of: {valid}")

    @staticmethod
    def validate_due_date(due_date: Any) -> Optional[datetime]:
        """
        Accepts a datetime, a date (midnight) or an ISO-8601 string.

        None means "no due date". Anything else is rejected.
        """
        if due_date is None:
            return None
        if isinstance(due_date, datetime):
            return due_date
        if isinstance(due_date, date):
            return datetime(due_date.year, due_date.month, due_date.day)
        if isinstance(due_date, str) and due_date.strip():
            text = due_date.strip()
            if text.endswith("Z"):
                text = text[:-1] + "+00:00"
            try:
                return datetime.fromisoformat(text)
            except ValueError:
                pass
        raise ValidationError("Invalid due date")

    # --- Field hooks ---

    @model_validator(mode="before")
    @classmethod
    def fill_timestamps(cls, data: Any) -> Any:
        # New tasks get identical created/updated timestamps
        if isinstance(data, dict):
            data = dict(data)
            if data.get("created_at") is None:
                data["created_at"] = _utcnow()
            if data.get("updated_at") is None:
                data["updated_at"] = data["created_at"]
            if data.get("id") is None:
                data.pop("id", None)
        return data

    @field_validator("description", mode="before")
    @classmethod
    def check_description(cls, value: Any) -> str:
        return cls.validate_description(value)

    @field_validator("priority", mode="before")
    @classmethod
    def check_priority(cls, value: Any) -> TaskPriority:
        return cls.validate_priority(value)

    @field_validator("due_date", mode="before")
    @classmethod
    def check_due_date(cls, value: Any) -> Optional[datetime]:
        return cls.validate_due_date(value)

    @field_validator("status", mode="before")
    @classmethod
    def check_status(cls, value: Any) -> TaskStatus:
        return cls.validate_status(value)

    # --- Serialization ---

    def to_dict(self) -> Dict[str, Any]:
        """JSON-safe representation (enum values, ISO-8601 datetimes)."""
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Task":
        return cls.model_validate(data)


class TaskDraft(BaseModel):
    """Unvalidated payload for TaskRepository.create; Task checks the values."""
    model_config = ConfigDict(frozen=True)

    description: Any
    priority: Any = TaskPriority.medium
    due_date: Any = None
    status: Any = TaskStatus.pending


UPDATABLE_FIELDS = ("description", "priority", "due_date", "status")


class TaskUpdate(BaseModel):
    """
    Partial update of a task.

    Only explicitly set fields are applied; passing due_date=None clears the
    due date. id, created_at and updated_at are not updatable.
    """
    model_config = ConfigDict(frozen=True)

    description: Optional[str] = None
    priority: Optional[TaskPriority] = None
    due_date: Optional[datetime] = None
    status: Optional[TaskStatus] = None

    @model_validator(mode="before")
    @classmethod
    def reject_unknown_fields(cls, data: Any) -> Any:
        if isinstance(data, dict):
            unknown = sorted(set(data) - set(UPDATABLE_FIELDS))
            if unknown:
                raise ValidationError(
                    f"Cannot update field(s): {', '.join(unknown)}. "
                    f"Updatable fields: {', '.join(UPDATABLE_FIELDS)}"
                )
        return data

    @field_validator("description", mode="before")
    @classmethod
    def check_description(cls, value: Any) -> str:
        return Task.validate_description(value)

    @field_validator("priority", mode="before")
    @classmethod
    def check_priority(cls, value: Any) -> TaskPriority:
        return Task.validate_priority(value)

    @field_validator("due_date", mode="before")
    @classmethod
    def check_due_date(cls, value: Any) -> Optional[datetime]:
        return Task.validate_due_date(value)

    @field_validator("status", mode="before")
    @classmethod
    def check_status(cls, value: Any) -> TaskStatus:
        return Task.validate_status(value)

    def changes(self) -> Dict[str, Any]:
        """Fields that were explicitly set, as python values."""
        return self.model_dump(exclude_unset=True)


# --- API bodies ---

class TaskCreate(BaseModel):
    """Request body for creating a task. Values are checked by the service."""
    description: str
    priority: str = TaskPriority.medium.value
    due_date: Optional[str] = None


class TaskPatch(BaseModel):
    """Request body for partial update (PATCH)."""
    model_config = ConfigDict(extra="forbid")

    description: Optional[str] = None
    priority: Optional[str] = None
    due_date: Optional[str] = None
    status: Optional[str] = None


class TaskListResponse(BaseModel):
    """Filtered task list response."""
    tasks: List[Task]
    total: int


class TaskStats(BaseModel):
    """Dashboard counters for the web UI."""
    total: int
    completed: int
    pending: int
    in_progress: int
    high: int
    progress: int
