# src/sunrise_taskflow/web/task_routes.py

"""
Task CRUD routes under /api/tasks.

| Method | Path                      | Success              |
|--------|---------------------------|----------------------|
| GET    | /api/tasks[?completed=]   | 200, list of tasks   |
| POST   | /api/tasks                | 201, created task    |
| GET    | /api/tasks/<id>           | 200, task            |
| PUT    | /api/tasks/<id>           | 200, updated task    |
| PATCH  | /api/tasks/<id>/complete  | 200, completed task  |
| DELETE | /api/tasks/<id>           | 204, no body         |

Unknown ids map to 404, bad input to 400; both with {"error": "..."}.
"""

from __future__ import annotations

import logging
from typing import Any

from flask import Blueprint, jsonify, request

from ..tasks.task_models import TaskNotFoundError, TaskValidationError
from .extension import get_state

logger = logging.getLogger(__name__)

tasks_bp = Blueprint("tasks", __name__, url_prefix="/api/tasks")

_BOOL_VALUES = {"true": True, "false": False}


def _json_body() -> dict[str, Any]:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise TaskValidationError("request body must be a JSON object")
    return data


@tasks_bp.errorhandler(TaskNotFoundError)
def _handle_not_found(exc: TaskNotFoundError):
    logger.info("Task not found id=%s (%s %s)", exc.task_id, request.method, request.path)
    return jsonify({"error": str(exc)}), 404


@tasks_bp.errorhandler(TaskValidationError)
def _handle_invalid(exc: TaskValidationError):
    logger.info("Rejected task request %s %s: %s", request.method, request.path, exc)
    return jsonify({"error": str(exc)}), 400


@tasks_bp.get("")
def list_tasks():
    raw = request.args.get("completed")
    completed: bool | None = None
    if raw is not None:
        key = raw.strip().lower()
        if key not in _BOOL_VALUES:
            raise TaskValidationError("completed must be 'true' or 'false'")
        completed = _BOOL_VALUES[key]

    tasks = get_state().task_registry.list_all(completed=completed)
    return jsonify([t.to_dict() for t in tasks])


@tasks_bp.post("")
def create_task():
    data = _json_body()
    task = get_state().task_registry.create(data.get("title"), data.get("description"))
    logger.info("Created task id=%s", task.id)
    return jsonify(task.to_dict()), 201


@tasks_bp.get("/<int:task_id>")
def get_task(task_id: int):
    return jsonify(get_state().task_registry.get(task_id).to_dict())


@tasks_bp.put("/<int:task_id>")
def update_task(task_id: int):
    data = _json_body()
    task = get_state().task_registry.update(task_id, data.get("title"), data.get("description"))
    return jsonify(task.to_dict())


@tasks_bp.patch("/<int:task_id>/complete")
def complete_task(task_id: int):
    return jsonify(get_state().task_registry.complete(task_id).to_dict())


@tasks_bp.delete("/<int:task_id>")
def delete_task(task_id: int):
    get_state().task_registry.delete(task_id)
    logger.info("Deleted task id=%s", task_id)
    return "", 204
