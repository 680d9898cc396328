"""Single-document access to the application-form configuration."""

from __future__ import annotations

from typing import Any, Dict, List

from app.database import JOB_CONFIG_DOCUMENT, get_document_store
from app.services.record_service import require_object


def get_config() -> Dict[str, Any]:
    """Return the config document exactly as stored."""
    return get_document_store().load(JOB_CONFIG_DOCUMENT)


def replace_config(payload: Any) -> Dict[str, Any]:
    """Overwrite the whole config document and echo it back.

    No merge with the previous document, and no check that
    ``application_form`` is present.
    """
    document = require_object(payload)
    get_document_store().save(JOB_CONFIG_DOCUMENT, document)
    return document


def get_application_form() -> List[Any]:
    """Return the form field list attached to job responses."""
    form = get_config().get("application_form")
    return form if form is not None else []
