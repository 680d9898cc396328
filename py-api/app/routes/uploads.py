"""/upload and /uploads routes for profile photos."""

from __future__ import annotations

from flask import Blueprint, current_app, jsonify, make_response, request, send_from_directory
from werkzeug.exceptions import NotFound

from app.services import upload_service
from app.utils.errors import NotFoundError

bp = Blueprint("uploads", __name__)


@bp.post("/upload")
def upload_photo():
    """Accept a single image in the ``photo`` field and return its URL."""
    result = upload_service.save_photo(request.files.get("photo"))
    return jsonify(result), 200


@bp.get("/uploads/<filename>")
def get_uploaded_photo(filename: str):
    """Serve a previously uploaded photo from the configured storage."""
    if current_app.config["UPLOAD_STORAGE"] == "disk":
        try:
            return send_from_directory(current_app.config["UPLOAD_DIR"], filename)
        except NotFound:
            raise NotFoundError("File not found") from None

    record = upload_service.get_cached_photo(filename)
    response = make_response(record["buffer"], 200)
    response.headers["Content-Type"] = record["mimetype"]
    response.headers["Content-Length"] = str(len(record["buffer"]))
    return response
