"""HTTP client for the job board backend.

Usage example:
    from jobboard_engine.infrastructure.io.http import build_applications_client

    client = build_applications_client(
        base_url="http://localhost:5000/api",
        api_token="secret",
        timeout_seconds=30.0,
    )
    application = client.fetch_application("64f1c2")
"""

from __future__ import annotations

from typing import override

import requests

from ...domain.application import Application
from ...domain.profiles import EmployerProfile, JobSeekerProfile, ProfileKind
from ...exceptions import AuthenticationError, UpstreamError
from ...observability import get_logger
from ...protocols import ApplicationGateway
from ...types import StatusUpdatePayload
from .validation import (
    IncomingDataError,
    parse_application,
    parse_employer_profile,
    parse_job_seeker_profile,
    validate_json_as,
)

logger = get_logger("jobboard_engine.infrastructure.http")


def build_applications_client(
    *,
    base_url: str,
    api_token: str,
    timeout_seconds: float,
) -> ApplicationsApiClient:
    session = requests.Session()
    if api_token:
        session.headers["Authorization"] = f"Bearer {api_token}"
    session.headers["Accept"] = "application/json"
    return ApplicationsApiClient(
        session=session,
        base_url=base_url,
        timeout_seconds=timeout_seconds,
    )


def _response_details(response: requests.Response) -> str:
    """Return a compact status/body summary for error reporting."""
    try:
        body = response.text
    except (UnicodeDecodeError, ValueError, requests.RequestException):
        body = "<unreadable>"
    body = " ".join(body.split())
    if len(body) > 300:
        body = body[:300] + "..."
    return f"status={response.status_code}, body={body}"


class ApplicationsApiClient(ApplicationGateway):
    """Requests-backed gateway for applications and profiles.

    - 401/403 responses raise AuthenticationError
    - Other non-2xx responses and network failures raise UpstreamError
    - Malformed GET bodies raise IncomingDataError; PATCH bodies are ignored
    """

    def __init__(
        self,
        *,
        session: requests.Session,
        base_url: str,
        timeout_seconds: float = 30.0,
    ) -> None:
        self.session = session
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds

    @override
    def fetch_application(self, application_id: str) -> Application:
        payload = self._get_json(f"/applications/{application_id.strip()}")
        return parse_application(payload)

    @override
    def update_status(self, application_id: str, payload: StatusUpdatePayload) -> None:
        self._send("PATCH", f"/applications/{application_id.strip()}/status", body=payload)

    @override
    def fetch_profile(self, kind: ProfileKind) -> JobSeekerProfile | EmployerProfile:
        payload = self._get_json("/profile/details")
        if kind is ProfileKind.EMPLOYER:
            return parse_employer_profile(payload)
        return parse_job_seeker_profile(payload)

    def _send(
        self, method: str, path: str, *, body: StatusUpdatePayload | None = None
    ) -> requests.Response:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(method, url, json=body, timeout=self.timeout_seconds)
        except requests.RequestException as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            raise UpstreamError(f"Could not reach the backend: {exc}") from exc

        if response.status_code in (401, 403):
            details = _response_details(response)
            logger.warning("%s %s rejected: %s", method, url, details)
            raise AuthenticationError.for_status(response.status_code, details)

        try:
            response.raise_for_status()
        except requests.HTTPError as exc:
            details = _response_details(response)
            logger.warning("%s %s failed: %s", method, url, details)
            raise UpstreamError(
                f"Backend request failed ({details}).", status_code=response.status_code
            ) from exc
        return response

    def _get_json(self, path: str) -> dict[str, object]:
        response = self._send("GET", path)
        if not response.text.strip():
            return {}
        try:
            return validate_json_as(dict[str, object], response.text)
        except IncomingDataError:
            logger.warning("GET %s%s returned a non-object body", self.base_url, path)
            raise
