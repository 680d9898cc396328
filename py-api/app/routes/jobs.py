"""/jobs routes; every job is returned together with the application form."""

from __future__ import annotations

from flask import Blueprint, jsonify, request

from app.services import job_service

bp = Blueprint("jobs", __name__, url_prefix="/jobs")


@bp.get("")
def list_jobs():
    return jsonify(job_service.list_jobs()), 200


@bp.get("/<job_id>")
def get_job(job_id: str):
    return jsonify(job_service.get_job(job_id)), 200


@bp.post("")
def create_job():
    """Append the posted job as-is; the caller supplies its id."""
    return jsonify(job_service.create_job(request.get_json(silent=True))), 201


@bp.put("/<job_id>")
def update_job(job_id: str):
    """Shallow-merge the posted fields onto the first job with this id."""
    return jsonify(job_service.update_job(job_id, request.get_json(silent=True))), 200


@bp.delete("/<job_id>")
def delete_job(job_id: str):
    return jsonify(job_service.delete_job(job_id)), 200
