# src/sunrise_taskflow/cli/bootstrap.py

"""
Composition root: turns settings into a wired AppState
(task registry, greeting counter, user directory).
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.counter import VisitCounter
from ..core.state import AppState
from ..tasks.task_registry import TaskRegistry
from ..users.user_directory import UserDirectory

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    counter_start = int(getattr(settings, "counter_start", 100))

    state = AppState(
        settings=settings,
        task_registry=TaskRegistry(),
        counter=VisitCounter(start=counter_start),
        users=UserDirectory(),
    )
    logger.debug("AppState created counter_start=%s", counter_start)
    return state
