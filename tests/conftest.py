# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from sunrise_taskflow.cli.bootstrap import create_initial_state
from sunrise_taskflow.core.state import AppState
from sunrise_taskflow.web.app import create_app


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the app factory.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="taskflow-test",
        log_level="DEBUG",
        log_dir=tmp_path / "logs",
        host="127.0.0.1",
        port=0,
        debug=False,
        counter_start=0,
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    return create_initial_state(settings=settings)


@pytest.fixture()
def app(state: AppState):
    app = create_app(state)
    app.config["TESTING"] = True
    return app


@pytest.fixture()
def client(app):
    with app.test_client() as c:
        yield c


@pytest.fixture()
def create_task(client):
    """POST a task and return the decoded response body."""

    def _create(title: str, description: str = "") -> dict:
        resp = client.post("/api/tasks", json={"title": title, "description": description})
        assert resp.status_code == 201
        return resp.get_json()

    return _create
