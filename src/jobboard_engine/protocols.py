"""Protocol definitions for dependency injection.

These protocols define the abstract interfaces the engine and its callers
depend on, enabling isolated unit testing with fake implementations.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .domain.application import Application
    from .domain.profiles import EmployerProfile, JobSeekerProfile, ProfileKind
    from .types import StatusUpdatePayload


@runtime_checkable
class Clock(Protocol):
    """Source of the current instant (timezone-aware)."""

    def __call__(self) -> datetime:
        """Return now."""
        ...


@runtime_checkable
class ApplicationGateway(Protocol):
    """Backend collaborator that owns applications and profiles."""

    def fetch_application(self, application_id: str) -> Application:
        """Fetch an application (``GET /applications/{id}``).

        Raises:
            UpstreamError: On network or HTTP errors.
        """
        ...

    def update_status(self, application_id: str, payload: StatusUpdatePayload) -> None:
        """Persist a status change (``PATCH /applications/{id}/status``).

        Raises:
            UpstreamError: On network or HTTP errors.
        """
        ...

    def fetch_profile(self, kind: ProfileKind) -> JobSeekerProfile | EmployerProfile:
        """Fetch the signed-in user's profile (``GET /profile/details``)."""
        ...


@runtime_checkable
class FileSystem(Protocol):
    """Abstract filesystem for reading config and profile files."""

    def read_text(self, path: Path) -> str:
        """Read text file."""
        ...

    def read_json(self, path: Path) -> dict[str, object]:
        """Read a JSON object from a file."""
        ...

    def exists(self, path: Path) -> bool:
        """Check if path exists."""
        ...
