"""/login route checking credentials against the user list."""

from __future__ import annotations

from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request

from app.services import auth_service
from app.utils.errors import AuthError

bp = Blueprint("auth", __name__)


@bp.post("/login")
def login():
    """Validate email, password and role; no session is issued."""
    payload: Dict[str, Any] = request.get_json(silent=True) or {}
    if not isinstance(payload, dict):
        payload = {}

    try:
        user = auth_service.authenticate(
            payload.get("email"),
            payload.get("password"),
            payload.get("role"),
        )
    except AuthError:
        current_app.logger.info("Failed login for %r as %r", payload.get("email"), payload.get("role"))
        raise

    return jsonify(message="Login successful", user=user), 200
