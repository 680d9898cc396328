"""In-memory store for uploaded profile photos."""

from __future__ import annotations

import threading
from typing import Any, Dict, Optional

from flask import current_app


class UploadCache:
    """Thread-safe filename -> upload record map.

    Records live as long as the owning application and are never evicted.
    """

    def __init__(self) -> None:
        self._records: Dict[str, Dict[str, Any]] = {}
        self._lock = threading.Lock()

    def put(self, filename: str, record: Dict[str, Any]) -> None:
        with self._lock:
            self._records[filename] = record

    def get(self, filename: str) -> Optional[Dict[str, Any]]:
        with self._lock:
            return self._records.get(filename)

    def __contains__(self, filename: object) -> bool:
        with self._lock:
            return filename in self._records

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)


def get_upload_cache() -> UploadCache:
    """Return the upload cache bound to the current application."""
    return current_app.extensions["upload_cache"]
