"""JSON document persistence for users, jobs, candidates and job config."""

from __future__ import annotations

import copy
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Optional

from flask import current_app

from app.utils.errors import InternalError

_LOGGER = logging.getLogger(__name__)

USERS_DOCUMENT = "users.json"
JOBS_DOCUMENT = "jobs.json"
CANDIDATES_DOCUMENT = "candidates.json"
JOB_CONFIG_DOCUMENT = "job_config.json"

# Empty document returned for each file when it cannot be read.
DEFAULT_DOCUMENTS: Dict[str, Dict[str, Any]] = {
    USERS_DOCUMENT: {"users": []},
    JOBS_DOCUMENT: {"data": []},
    CANDIDATES_DOCUMENT: {"data": []},
    JOB_CONFIG_DOCUMENT: {"application_form": []},
}

# Top-level key that must hold a list for the document to be usable.
LIST_KEYS: Dict[str, str] = {
    USERS_DOCUMENT: "users",
    JOBS_DOCUMENT: "data",
    CANDIDATES_DOCUMENT: "data",
}


class JsonDocumentStore:
    """Whole-document load/save over JSON files in a single data directory.

    Every ``load`` reads the full file and every ``save`` rewrites it. Nothing
    coordinates a load with the save that follows it, so two interleaved
    read-modify-write cycles on the same document lose the earlier write.
    Saves go through a temporary file and ``os.replace`` so a crash never
    leaves a half-written document behind.
    """

    def __init__(self, data_dir: Path, read_policy: str = "fail_open") -> None:
        self.data_dir = Path(data_dir)
        self.read_policy = read_policy

    def path_for(self, name: str) -> Path:
        return self.data_dir / name

    def load(self, name: str) -> Dict[str, Any]:
        """Return the parsed document, degrading according to the read policy."""
        path = self.path_for(name)
        if not path.exists():
            return self._degrade(name, f"Data file not found: {path}", logging.WARNING)

        try:
            with path.open("r", encoding="utf-8") as handle:
                document = json.load(handle)
        except (OSError, ValueError) as exc:
            return self._degrade(name, f"Error reading {name}: {exc}", logging.ERROR)

        problem = _shape_problem(name, document)
        if problem:
            return self._degrade(name, f"Malformed {name}: {problem}", logging.ERROR)

        return document

    def save(self, name: str, document: Any) -> None:
        """Atomically replace the document on disk."""
        path = self.path_for(name)
        try:
            if not self.data_dir.exists():
                _LOGGER.info("Creating data directory: %s", self.data_dir)
            self.data_dir.mkdir(parents=True, exist_ok=True)

            fd, tmp_name = tempfile.mkstemp(prefix=f".{name}.", suffix=".tmp", dir=self.data_dir)
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    json.dump(document, handle, indent=2, ensure_ascii=False)
                os.replace(tmp_name, path)
            except BaseException:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise
        except (OSError, TypeError, ValueError) as exc:
            _LOGGER.error("Error writing %s: %s", name, exc)
            raise InternalError(f"Failed to write {name}") from exc

        _LOGGER.debug("Wrote %s", path)

    def _degrade(self, name: str, message: str, level: int) -> Dict[str, Any]:
        if self.read_policy == "strict":
            _LOGGER.error(message)
            raise InternalError(message)

        _LOGGER.log(level, "%s; using empty default", message)
        return copy.deepcopy(DEFAULT_DOCUMENTS.get(name, {}))


def _shape_problem(name: str, document: Any) -> Optional[str]:
    """Describe why a parsed document cannot be used, or return None."""
    if not isinstance(document, dict):
        return "top-level value is not an object"

    list_key = LIST_KEYS.get(name)
    if list_key is not None and not isinstance(document.get(list_key), list):
        return f"'{list_key}' is not a list"

    return None


def get_document_store() -> JsonDocumentStore:
    """Return the document store bound to the current application."""
    return current_app.extensions["document_store"]
