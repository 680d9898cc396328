"""Shared pytest fixtures for the Flask application."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

# Ensure the application package is importable during tests.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.main import create_app  # noqa: E402

SEED_USERS = {
    "users": [
        {"email": "a@x.com", "password": "p", "role": "admin", "name": "A"},
        {"email": "b@x.com", "password": "q", "role": "applicant", "name": "B"},
    ]
}

SEED_CONFIG = {
    "application_form": [
        {"key": "full_name", "validation": {"required": True}},
        {"key": "email", "validation": {"required": True}},
    ]
}


def write_document(data_dir: Path, name: str, document) -> None:
    data_dir.mkdir(parents=True, exist_ok=True)
    (data_dir / name).write_text(json.dumps(document), encoding="utf-8")


def read_document(data_dir: Path, name: str):
    return json.loads((data_dir / name).read_text(encoding="utf-8"))


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Provide a data directory seeded with users and a job config."""
    directory = tmp_path / "data"
    write_document(directory, "users.json", SEED_USERS)
    write_document(directory, "job_config.json", SEED_CONFIG)
    write_document(directory, "jobs.json", {"data": []})
    write_document(directory, "candidates.json", {"data": []})
    return directory


@pytest.fixture
def app_config(tmp_path: Path, data_dir: Path):
    return {
        "TESTING": True,
        "DATA_DIR": data_dir,
        "UPLOAD_DIR": tmp_path / "uploads",
        "UPLOAD_STORAGE": "memory",
        "DATA_READ_POLICY": "fail_open",
    }


@pytest.fixture
def app(app_config):
    return create_app(app_config)


@pytest.fixture
def client(app):
    return app.test_client()
