"""Blueprint registration helper."""

from __future__ import annotations

from flask import Flask, jsonify

from .auth import bp as auth_bp
from .candidates import bp as candidates_bp
from .job_config import bp as job_config_bp
from .jobs import bp as jobs_bp
from .uploads import bp as uploads_bp


def register_routes(app: Flask) -> None:
    """Register all application blueprints on the provided Flask app."""
    app.register_blueprint(auth_bp)
    app.register_blueprint(jobs_bp)
    app.register_blueprint(job_config_bp)
    app.register_blueprint(candidates_bp)
    app.register_blueprint(uploads_bp)

    @app.get("/")
    def index():
        return jsonify(message="Recruitment API is running"), 200
