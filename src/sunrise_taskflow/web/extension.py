# src/sunrise_taskflow/web/extension.py

from __future__ import annotations

from flask import Flask, current_app

from ..core.state import AppState

EXTENSION_KEY = "taskflow"


def init_state(app: Flask, state: AppState) -> None:
    app.extensions[EXTENSION_KEY] = state


def get_state() -> AppState:
    """AppState of the app handling the current request."""
    return current_app.extensions[EXTENSION_KEY]
