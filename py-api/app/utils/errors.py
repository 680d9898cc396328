"""Exception types rendered as JSON error responses."""

from __future__ import annotations

from typing import Optional

from flask import Flask, current_app, jsonify, request
from werkzeug.exceptions import HTTPException, RequestEntityTooLarge

from app.config import describe_size_limit

UPLOAD_PATH = "/upload"


class ApiError(Exception):
    """Base class for failures that map onto an HTTP status code."""

    status_code = 500

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(ApiError):
    """Missing or malformed input."""

    status_code = 400


class AuthError(ApiError):
    """Credentials did not match any known user."""

    status_code = 401


class NotFoundError(ApiError):
    """Unknown record id or upload filename."""

    status_code = 404


class InternalError(ApiError):
    """Unexpected failure such as an unreadable data document."""

    status_code = 500


def register_error_handlers(app: Flask) -> None:
    """Render every failure as a ``{"error": message}`` JSON body."""

    @app.errorhandler(ApiError)
    def _handle_api_error(error: ApiError):
        return jsonify(error=error.message), error.status_code

    @app.errorhandler(RequestEntityTooLarge)
    def _handle_too_large(error: RequestEntityTooLarge):
        if request.path != UPLOAD_PATH:
            return jsonify(error=error.description), error.code
        return jsonify(error=describe_size_limit(current_app.config["UPLOAD_MAX_BYTES"])), 400

    @app.errorhandler(HTTPException)
    def _handle_http_error(error: HTTPException):
        return jsonify(error=error.description), error.code

    @app.errorhandler(Exception)
    def _handle_unexpected(error: Exception):
        current_app.logger.exception("Unhandled error while serving request")
        return jsonify(error=str(error) or "Internal server error"), 500
