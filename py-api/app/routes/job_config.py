"""/job-config routes for the application-form schema."""

from __future__ import annotations

from flask import Blueprint, jsonify, request

from app.services import config_service

bp = Blueprint("job_config", __name__, url_prefix="/job-config")


@bp.get("")
def get_job_config():
    return jsonify(config_service.get_config()), 200


@bp.put("")
def replace_job_config():
    """Replace the whole config document with the request body."""
    return jsonify(config_service.replace_config(request.get_json(silent=True))), 200
