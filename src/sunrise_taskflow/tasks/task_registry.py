# src/sunrise_taskflow/tasks/task_registry.py

from __future__ import annotations

import logging
import threading
from dataclasses import replace
from datetime import datetime, timezone

from .task_models import Task, TaskNotFoundError, TaskValidationError

logger = logging.getLogger(__name__)


class TaskRegistry:
    """
    In-memory task registry.

    - ids are assigned from 1 upward and never reused, even after delete
    - dict insertion order is the creation order used for listing
    - one lock guards both the id counter and the collection

    Every method returns copies, so callers cannot mutate stored records.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._tasks: dict[int, Task] = {}
        self._next_id = 1
        logger.info("TaskRegistry ready (in-memory)")

    # ---- low-level helpers ----

    @staticmethod
    def _clean_title(title: object) -> str:
        if not isinstance(title, str) or not title.strip():
            raise TaskValidationError("title is required")
        return title

    @staticmethod
    def _clean_description(description: object) -> str:
        if description is None:
            return ""
        if not isinstance(description, str):
            raise TaskValidationError("description must be a string")
        return description

    def _require(self, task_id: int) -> Task:
        task = self._tasks.get(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    # ---- public API ----

    def count(self) -> int:
        with self._lock:
            return len(self._tasks)

    def create(self, title: str, description: str | None = None) -> Task:
        title = self._clean_title(title)
        description = self._clean_description(description)

        with self._lock:
            task = Task(
                id=self._next_id,
                title=title,
                description=description,
                completed=False,
                created_at=datetime.now(timezone.utc),
            )
            self._tasks[task.id] = task
            self._next_id += 1

        logger.debug("Task created id=%s title=%r", task.id, task.title)
        return replace(task)

    def list_all(self, completed: bool | None = None) -> list[Task]:
        """
        All tasks in creation order.

        With `completed` given, only tasks whose flag matches it. Never raises;
        an empty list means nothing matched.
        """
        with self._lock:
            tasks = list(self._tasks.values())
        if completed is not None:
            tasks = [t for t in tasks if t.completed == bool(completed)]
        return [replace(t) for t in tasks]

    def get(self, task_id: int) -> Task:
        with self._lock:
            return replace(self._require(task_id))

    def update(self, task_id: int, title: str, description: str | None = None) -> Task:
        """Replace title and description; completed and created_at are kept."""
        title = self._clean_title(title)
        description = self._clean_description(description)

        with self._lock:
            task = self._require(task_id)
            task.title = title
            task.description = description
            out = replace(task)

        logger.debug("Task updated id=%s", task_id)
        return out

    def complete(self, task_id: int) -> Task:
        """Mark a task completed. Completing a completed task is a no-op."""
        with self._lock:
            task = self._require(task_id)
            was_completed = task.completed
            task.completed = True
            out = replace(task)

        if not was_completed:
            logger.debug("Task completed id=%s", task_id)
        return out

    def delete(self, task_id: int) -> None:
        with self._lock:
            self._require(task_id)
            del self._tasks[task_id]
        logger.debug("Task deleted id=%s", task_id)
