"""Validation and storage of uploaded profile photos."""

from __future__ import annotations

import os
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

from flask import current_app
from werkzeug.datastructures import FileStorage

from app.config import describe_size_limit
from app.storage import get_upload_cache
from app.utils.errors import NotFoundError, ValidationError

ALLOWED_IMAGE_TYPES = frozenset({"jpeg", "jpg", "png", "gif"})

URL_PREFIX = "/uploads"


def is_allowed_extension(filename: str) -> bool:
    extension = os.path.splitext(filename)[1].lower()
    return extension.lstrip(".") in ALLOWED_IMAGE_TYPES


def is_allowed_mimetype(mimetype: Optional[str]) -> bool:
    if not mimetype:
        return False
    major, _, minor = mimetype.lower().partition("/")
    return major == "image" and minor in ALLOWED_IMAGE_TYPES


def build_filename(original_name: str) -> str:
    """Return ``profile-<uuid><ext>`` keeping the original extension as sent."""
    extension = os.path.splitext(original_name)[1]
    return f"profile-{uuid.uuid4()}{extension}"


def validate_photo(storage: Optional[FileStorage]) -> bytes:
    """
    Check an uploaded photo and return its bytes.

    The extension and the declared content type are checked independently,
    so a correct extension with a non-image content type is rejected and
    vice versa.

    Raises:
        ValidationError: If no file was sent, the type is not an allowed
            image type, or the file exceeds the configured size limit
    """
    if storage is None or not storage.filename:
        raise ValidationError("No file uploaded")

    if not (is_allowed_extension(storage.filename) and is_allowed_mimetype(storage.mimetype)):
        raise ValidationError("Only image files are allowed!")

    raw_bytes = storage.read()
    limit = current_app.config["UPLOAD_MAX_BYTES"]
    if len(raw_bytes) > limit:
        raise ValidationError(describe_size_limit(limit))

    return raw_bytes


def save_photo(storage: Optional[FileStorage]) -> Dict[str, Any]:
    """Validate and store a photo, returning the upload response payload."""
    raw_bytes = validate_photo(storage)
    filename = build_filename(storage.filename)
    backend = current_app.config["UPLOAD_STORAGE"]

    if backend == "disk":
        upload_dir = Path(current_app.config["UPLOAD_DIR"])
        upload_dir.mkdir(parents=True, exist_ok=True)
        (upload_dir / filename).write_bytes(raw_bytes)
    else:
        get_upload_cache().put(
            filename,
            {
                "buffer": raw_bytes,
                "mimetype": storage.mimetype,
                "original_name": storage.filename,
                "size": len(raw_bytes),
                "uploaded_at": datetime.now(timezone.utc).isoformat(),
            },
        )

    current_app.logger.info("Stored upload %s (%d bytes, %s storage)", filename, len(raw_bytes), backend)

    return {
        "success": True,
        "url": f"{URL_PREFIX}/{filename}",
        "filename": filename,
        "message": f"File uploaded successfully ({backend} storage)",
    }


def get_cached_photo(filename: str) -> Dict[str, Any]:
    """Return a photo record from the in-memory cache."""
    record = get_upload_cache().get(filename)
    if record is None:
        raise NotFoundError("File not found")
    return record
