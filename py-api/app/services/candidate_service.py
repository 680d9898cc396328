"""Candidate records."""

from __future__ import annotations

from typing import Any, Dict

from app.database import CANDIDATES_DOCUMENT
from app.services.record_service import Record, RecordCollection

candidates = RecordCollection(CANDIDATES_DOCUMENT, "Candidate")


def list_candidates() -> Dict[str, Any]:
    return candidates.list()


def get_candidate(candidate_id: str) -> Record:
    return candidates.get(candidate_id)


def create_candidate(payload: Any) -> Record:
    return candidates.create(payload)


def update_candidate(candidate_id: str, payload: Any) -> Record:
    return candidates.update(candidate_id, payload)


def delete_candidate(candidate_id: str) -> Record:
    return candidates.delete(candidate_id)
