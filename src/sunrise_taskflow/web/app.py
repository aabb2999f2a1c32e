# src/sunrise_taskflow/web/app.py

from __future__ import annotations

import logging

from flask import Flask

from ..cli.bootstrap import create_initial_state
from ..core.state import AppState
from .extension import init_state
from .greeting_routes import greetings_bp
from .task_routes import tasks_bp
from .user_routes import users_bp

logger = logging.getLogger(__name__)


def create_app(state: AppState | None = None) -> Flask:
    """
    Build the Flask application.

    Each call gets its own AppState unless one is passed in, so two apps
    (e.g. two tests) never share tasks or counters.
    """
    if state is None:
        state = create_initial_state()

    app = Flask(__name__)
    app.json.sort_keys = False
    init_state(app, state)

    app.register_blueprint(greetings_bp)
    app.register_blueprint(users_bp)
    app.register_blueprint(tasks_bp)

    logger.info(
        "App created name=%s tasks=%s",
        getattr(state.settings, "app_name", "sunrise-taskflow"),
        state.task_registry.count(),
    )
    return app
