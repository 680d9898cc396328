"""Tests for photo upload and retrieval."""

from __future__ import annotations

from io import BytesIO
from pathlib import Path

import pytest

from app.main import create_app

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64
JPEG_BYTES = b"\xff\xd8\xff\xe0" + bytes(range(256)) * 4


def upload(client, filename, content, content_type, field="photo"):
    return client.post(
        "/upload",
        data={field: (BytesIO(content), filename, content_type)},
        content_type="multipart/form-data",
    )


def test_upload_and_fetch_from_memory(client, app):
    response = upload(client, "photo.jpg", JPEG_BYTES, "image/jpeg")

    assert response.status_code == 200
    body = response.get_json()
    assert body["success"] is True
    assert body["url"].startswith("/uploads/")
    assert body["url"] == f"/uploads/{body['filename']}"
    assert body["filename"].startswith("profile-")
    assert body["filename"].endswith(".jpg")
    assert body["filename"] in app.extensions["upload_cache"]

    fetched = client.get(body["url"])
    assert fetched.status_code == 200
    assert fetched.data == JPEG_BYTES
    assert fetched.headers["Content-Type"] == "image/jpeg"
    assert fetched.headers["Content-Length"] == str(len(JPEG_BYTES))


def test_upload_keeps_original_extension_case(client):
    body = upload(client, "Avatar.PNG", PNG_BYTES, "image/png").get_json()

    assert body["filename"].endswith(".PNG")


def test_uploads_get_distinct_filenames(client):
    first = upload(client, "a.png", PNG_BYTES, "image/png").get_json()
    second = upload(client, "a.png", PNG_BYTES, "image/png").get_json()

    assert first["filename"] != second["filename"]


def test_upload_rejects_text_file_with_spoofed_content_type(client):
    response = upload(client, "notes.txt", b"hello", "image/png")

    assert response.status_code == 400
    assert response.get_json() == {"error": "Only image files are allowed!"}


def test_upload_rejects_image_extension_with_wrong_content_type(client):
    response = upload(client, "photo.png", PNG_BYTES, "text/plain")

    assert response.status_code == 400


@pytest.mark.parametrize("filename, content_type", [("a.gif", "image/gif"), ("a.jpeg", "image/jpeg")])
def test_upload_accepts_other_image_types(client, filename, content_type):
    assert upload(client, filename, PNG_BYTES, content_type).status_code == 200


def test_upload_without_photo_field(client):
    response = upload(client, "photo.png", PNG_BYTES, "image/png", field="avatar")

    assert response.status_code == 400
    assert response.get_json() == {"error": "No file uploaded"}


def test_upload_rejects_file_over_limit(app_config):
    app = create_app({**app_config, "UPLOAD_MAX_BYTES": 1024})
    client = app.test_client()

    response = upload(client, "big.png", b"\x00" * 2048, "image/png")

    assert response.status_code == 400
    assert response.get_json() == {"error": "File too large. Maximum size is 1024 bytes."}


def test_upload_accepts_file_at_limit(app_config):
    app = create_app({**app_config, "UPLOAD_MAX_BYTES": 1024})
    client = app.test_client()

    assert upload(client, "exact.png", b"\x00" * 1024, "image/png").status_code == 200


def test_oversized_request_body_is_rejected_as_json(app_config):
    app = create_app({**app_config, "UPLOAD_MAX_BYTES": 1024})
    client = app.test_client()

    response = upload(client, "huge.png", b"\x00" * (256 * 1024), "image/png")

    assert response.status_code == 400
    assert "File too large" in response.get_json()["error"]


def test_fetch_unknown_upload_is_404(client):
    response = client.get("/uploads/profile-missing.png")

    assert response.status_code == 404
    assert response.get_json() == {"error": "File not found"}


def test_memory_cache_is_per_application(app_config, client):
    body = upload(client, "photo.png", PNG_BYTES, "image/png").get_json()

    restarted = create_app(app_config).test_client()

    assert restarted.get(body["url"]).status_code == 404


def test_disk_storage_writes_and_serves_file(app_config, tmp_path):
    app = create_app({**app_config, "UPLOAD_STORAGE": "disk"})
    client = app.test_client()

    body = upload(client, "photo.png", PNG_BYTES, "image/png").get_json()

    stored = tmp_path / "uploads" / body["filename"]
    assert stored.read_bytes() == PNG_BYTES
    assert body["message"] == "File uploaded successfully (disk storage)"
    assert len(app.extensions["upload_cache"]) == 0

    fetched = client.get(body["url"])
    assert fetched.status_code == 200
    assert fetched.data == PNG_BYTES
    assert fetched.headers["Content-Type"] == "image/png"


def test_disk_storage_unknown_file_is_404(app_config):
    client = create_app({**app_config, "UPLOAD_STORAGE": "disk"}).test_client()

    response = client.get("/uploads/profile-missing.png")

    assert response.status_code == 404
    assert response.get_json() == {"error": "File not found"}


def test_disk_storage_with_relative_upload_dir(app_config, monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    client = create_app(
        {**app_config, "UPLOAD_STORAGE": "disk", "UPLOAD_DIR": Path("./uploads")}
    ).test_client()

    body = upload(client, "a.png", PNG_BYTES, "image/png").get_json()

    assert (tmp_path / "uploads" / body["filename"]).read_bytes() == PNG_BYTES
    fetched = client.get(body["url"])
    assert fetched.status_code == 200
    assert fetched.data == PNG_BYTES
