"""/candidates CRUD routes."""

from __future__ import annotations

from flask import Blueprint, jsonify, request

from app.services import candidate_service

bp = Blueprint("candidates", __name__, url_prefix="/candidates")


@bp.get("")
def list_candidates():
    return jsonify(candidate_service.list_candidates()), 200


@bp.get("/<candidate_id>")
def get_candidate(candidate_id: str):
    return jsonify(candidate_service.get_candidate(candidate_id)), 200


@bp.post("")
def create_candidate():
    return jsonify(candidate_service.create_candidate(request.get_json(silent=True))), 201


@bp.put("/<candidate_id>")
def update_candidate(candidate_id: str):
    return jsonify(candidate_service.update_candidate(candidate_id, request.get_json(silent=True))), 200


@bp.delete("/<candidate_id>")
def delete_candidate(candidate_id: str):
    return jsonify(candidate_service.delete_candidate(candidate_id)), 200
