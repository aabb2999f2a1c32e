# src/sunrise_taskflow/web/user_routes.py

from __future__ import annotations

from flask import Blueprint, jsonify

from .extension import get_state

users_bp = Blueprint("users", __name__)


@users_bp.get("/users")
def list_users():
    return jsonify([u.to_dict() for u in get_state().users.list_users()])
