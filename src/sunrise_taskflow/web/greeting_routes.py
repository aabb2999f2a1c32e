# src/sunrise_taskflow/web/greeting_routes.py

from __future__ import annotations

from flask import Blueprint, Response

from .extension import get_state

greetings_bp = Blueprint("greetings", __name__)


def _plain(text: str) -> Response:
    return Response(text, mimetype="text/plain")


@greetings_bp.get("/hello")
def hello():
    count = get_state().counter.increment()
    return _plain(f"Hello, Flask! Count: {count}")


@greetings_bp.get("/world")
def world():
    count = get_state().counter.increment()
    return _plain(f"This is my world! Count: {count}")
