"""Environment-driven configuration for the Flask application."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict

PROJECT_ROOT = Path(__file__).resolve().parents[1]

UPLOAD_LIMIT_BYTES = 5 * 1024 * 1024  # 5 MB per file

# Multipart framing on top of a maximum-size file.
REQUEST_OVERHEAD_BYTES = 64 * 1024

STORAGE_BACKENDS = ("memory", "disk")
READ_POLICIES = ("fail_open", "strict")


def load_config() -> Dict[str, Any]:
    """Read the configurable settings from the process environment."""
    return {
        "DATA_DIR": resolve_dir(os.getenv("DATA_DIR", str(PROJECT_ROOT / "data"))),
        "UPLOAD_DIR": resolve_dir(os.getenv("UPLOAD_DIR", str(PROJECT_ROOT / "uploads"))),
        "UPLOAD_STORAGE": os.getenv("UPLOAD_STORAGE", "memory").strip().lower(),
        "UPLOAD_MAX_BYTES": int(os.getenv("UPLOAD_MAX_BYTES", str(UPLOAD_LIMIT_BYTES))),
        "DATA_READ_POLICY": os.getenv("DATA_READ_POLICY", "fail_open").strip().lower(),
        "LOG_LEVEL": os.getenv("LOG_LEVEL", "INFO").upper(),
    }


def resolve_dir(value: Any) -> Path:
    """Anchor a directory setting to the working directory it was given in."""
    return Path(value).expanduser().resolve()


def resolve_paths(config: Dict[str, Any]) -> None:
    for key in ("DATA_DIR", "UPLOAD_DIR"):
        config[key] = resolve_dir(config[key])


def validate_config(config: Dict[str, Any]) -> None:
    """Reject unknown storage backends and read policies early."""
    if config["UPLOAD_STORAGE"] not in STORAGE_BACKENDS:
        raise ValueError(
            f"UPLOAD_STORAGE must be one of {', '.join(STORAGE_BACKENDS)}, "
            f"got {config['UPLOAD_STORAGE']!r}"
        )
    if config["DATA_READ_POLICY"] not in READ_POLICIES:
        raise ValueError(
            f"DATA_READ_POLICY must be one of {', '.join(READ_POLICIES)}, "
            f"got {config['DATA_READ_POLICY']!r}"
        )


def describe_size_limit(limit: int) -> str:
    """Return the user-facing message for an upload over ``limit`` bytes."""
    mib = 1024 * 1024
    if limit % mib == 0:
        return f"File too large. Maximum size is {limit // mib}MB."
    return f"File too large. Maximum size is {limit} bytes."
