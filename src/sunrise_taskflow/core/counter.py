# src/sunrise_taskflow/core/counter.py

from __future__ import annotations

import threading


class VisitCounter:
    """
    Shared visit counter for the greeting endpoints.

    The starting value comes from settings (counter_start), so a deployment that
    wants to count from 100 just configures it.
    """

    def __init__(self, start: int = 0) -> None:
        self._lock = threading.Lock()
        self._value = int(start)

    @property
    def value(self) -> int:
        with self._lock:
            return self._value

    def increment(self) -> int:
        """Add one and return the new value."""
        with self._lock:
            self._value += 1
            return self._value
