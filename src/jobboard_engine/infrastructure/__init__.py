"""Concrete infrastructure implementations."""

from .io.filesystem import LocalFileSystem
from .io.http import ApplicationsApiClient, build_applications_client
from .io.validation import (
    IncomingDataError,
    parse_application,
    parse_employer_profile,
    parse_job_seeker_profile,
)

__all__ = [
    "ApplicationsApiClient",
    "IncomingDataError",
    "LocalFileSystem",
    "build_applications_client",
    "parse_application",
    "parse_employer_profile",
    "parse_job_seeker_profile",
]
