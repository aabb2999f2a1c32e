# src/sunrise_taskflow/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_registry import TaskRegistry
from ..users.user_directory import UserDirectory
from .counter import VisitCounter


@dataclass
class AppState:
    # Settings object (real Settings or a test SimpleNamespace).
    settings: object

    task_registry: TaskRegistry
    counter: VisitCounter
    users: UserDirectory
