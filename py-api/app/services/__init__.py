"""Service layer modules for the recruitment API."""

from . import auth_service, candidate_service, config_service, job_service, record_service, upload_service

__all__ = [
    "auth_service",
    "candidate_service",
    "config_service",
    "job_service",
    "record_service",
    "upload_service",
]
