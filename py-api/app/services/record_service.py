"""Generic CRUD over a ``{"data": [...]}`` JSON document of open records."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from app.database import get_document_store
from app.utils.errors import NotFoundError, ValidationError

Record = Dict[str, Any]


def find_index(records: List[Any], record_id: str) -> Optional[int]:
    """Return the position of the first record whose ``id`` equals ``record_id``.

    Later records sharing the same id are never reached.
    """
    for index, record in enumerate(records):
        if isinstance(record, dict) and record.get("id") == record_id:
            return index
    return None


def shallow_merge(record: Record, patch: Record) -> Record:
    """Overlay the patch's top-level fields onto a copy of the record."""
    merged = dict(record)
    merged.update(patch)
    return merged


def require_object(payload: Any) -> Record:
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    return payload


class RecordCollection:
    """CRUD operations over one record document.

    Records are caller-identified by a string ``id``; nothing stops two
    records from sharing an id, in which case lookups see only the first.
    """

    def __init__(self, document: str, label: str) -> None:
        self.document = document
        self.label = label

    def load(self) -> Dict[str, Any]:
        return get_document_store().load(self.document)

    def save(self, document: Dict[str, Any]) -> None:
        get_document_store().save(self.document, document)

    def list(self) -> Dict[str, Any]:
        return self.load()

    def get(self, record_id: str) -> Record:
        records = self.load()["data"]
        index = self._require_index(records, record_id)
        return records[index]

    def create(self, payload: Any) -> Record:
        record = require_object(payload)
        if not isinstance(record.get("id"), str):
            raise ValidationError(f"{self.label} id must be a string")

        document = self.load()
        document["data"].append(record)
        self.save(document)
        return record

    def update(self, record_id: str, payload: Any) -> Record:
        patch = require_object(payload)
        if "id" in patch and not isinstance(patch["id"], str):
            raise ValidationError(f"{self.label} id must be a string")

        document = self.load()
        records = document["data"]
        index = self._require_index(records, record_id)
        records[index] = shallow_merge(records[index], patch)
        self.save(document)
        return records[index]

    def delete(self, record_id: str) -> Record:
        document = self.load()
        records = document["data"]
        index = self._require_index(records, record_id)
        removed = records.pop(index)
        self.save(document)
        return removed

    def _require_index(self, records: List[Any], record_id: str) -> int:
        index = find_index(records, record_id)
        if index is None:
            raise NotFoundError(f"{self.label} not found")
        return index
