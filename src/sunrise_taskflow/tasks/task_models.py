# src/sunrise_taskflow/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any


class TaskNotFoundError(LookupError):
    """Raised when an operation targets a task id the registry does not hold."""

    def __init__(self, task_id: int) -> None:
        super().__init__(f"task {task_id} not found")
        self.task_id = task_id


class TaskValidationError(ValueError):
    """Raised for task input the registry refuses to store (e.g. a blank title)."""


@dataclass(slots=True)
class Task:
    id: int
    title: str
    description: str
    completed: bool
    created_at: datetime

    def to_dict(self) -> dict[str, Any]:
        """JSON shape used on the wire (camelCase createdAt)."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "completed": self.completed,
            "createdAt": self.created_at.isoformat(),
        }
