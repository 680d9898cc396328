"""Flask application setup and blueprint wiring."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from flask import Flask
from flask_cors import CORS

from app.config import REQUEST_OVERHEAD_BYTES, load_config, resolve_paths, validate_config
from app.database import JsonDocumentStore
from app.routes import register_routes
from app.storage import UploadCache
from app.utils.errors import register_error_handlers

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-XSS-Protection": "1; mode=block",
}


def create_app(overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    """Configure and return the Flask application instance."""
    app = Flask(__name__)
    app.config.update(load_config())
    if overrides:
        app.config.update(overrides)
    resolve_paths(app.config)
    validate_config(app.config)

    app.logger.setLevel(app.config["LOG_LEVEL"])

    CORS(
        app,
        origins="*",
        methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "X-Requested-With"],
        supports_credentials=False,
        send_wildcard=True,
    )

    # Uploads over the per-file limit but within this bound get a precise
    # validation error; anything larger is cut off by Werkzeug.
    app.config["MAX_CONTENT_LENGTH"] = app.config["UPLOAD_MAX_BYTES"] + REQUEST_OVERHEAD_BYTES

    app.extensions["document_store"] = JsonDocumentStore(
        app.config["DATA_DIR"], read_policy=app.config["DATA_READ_POLICY"]
    )
    app.extensions["upload_cache"] = UploadCache()

    register_security_headers(app)
    register_error_handlers(app)
    register_routes(app)

    return app


def register_security_headers(app: Flask) -> None:
    """Attach the static hardening headers to every response."""

    @app.after_request
    def _add_security_headers(response):
        for header, value in SECURITY_HEADERS.items():
            response.headers[header] = value
        return response


app = create_app()
