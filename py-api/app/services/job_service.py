"""Job postings, always returned alongside the current application form."""

from __future__ import annotations

from typing import Any, Dict

from app.database import JOBS_DOCUMENT
from app.services.config_service import get_application_form
from app.services.record_service import Record, RecordCollection

jobs = RecordCollection(JOBS_DOCUMENT, "Job")


def with_config(job: Record) -> Dict[str, Any]:
    """Return the job's fields plus a ``config`` key holding the form schema."""
    return {**job, "config": get_application_form()}


def list_jobs() -> Dict[str, Any]:
    return with_config(jobs.list())


def get_job(job_id: str) -> Dict[str, Any]:
    return with_config(jobs.get(job_id))


def create_job(payload: Any) -> Dict[str, Any]:
    return with_config(jobs.create(payload))


def update_job(job_id: str, payload: Any) -> Dict[str, Any]:
    return with_config(jobs.update(job_id, payload))


def delete_job(job_id: str) -> Dict[str, Any]:
    return with_config(jobs.delete(job_id))
