"""Application records and the status vocabulary.

Usage example:
    from datetime import UTC, datetime

    from jobboard_engine.domain.application import Application, ApplicationStatus

    application = Application(
        id="665f1c2e9b",
        status=ApplicationStatus.PENDING,
        applied_at=datetime(2026, 5, 1, tzinfo=UTC),
    )
    assert not application.status.is_terminal
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from enum import StrEnum
from typing import TYPE_CHECKING

from ..exceptions import ValidationError

if TYPE_CHECKING:
    from ..application.status_engine import TransitionOutcome


class ApplicationStatus(StrEnum):
    """Statuses an application moves through."""

    PENDING = "pending"
    SHORTLISTED = "shortlisted"
    INTERVIEW_SCHEDULED = "interview_scheduled"
    HIRED = "hired"
    REJECTED = "rejected"
    WITHDRAWN = "withdrawn"

    @classmethod
    def parse(cls, value: str | ApplicationStatus) -> ApplicationStatus:
        """Parse a backend status string, tolerating case and whitespace."""
        if isinstance(value, ApplicationStatus):
            return value
        text = str(value).strip().lower().replace(" ", "_")
        try:
            return cls(text)
        except ValueError as exc:
            raise ValidationError.unknown_status(str(value)) from exc

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title()

    @property
    def is_terminal(self) -> bool:
        """Terminal for forward moves; hired/rejected can still be undone."""
        return self in _TERMINAL


_TERMINAL = frozenset(
    {ApplicationStatus.HIRED, ApplicationStatus.REJECTED, ApplicationStatus.WITHDRAWN}
)


class InterviewMode(StrEnum):
    """How an interview is held."""

    IN_PERSON = "in-person"
    VIRTUAL = "virtual"

    @classmethod
    def parse(cls, value: str | InterviewMode) -> InterviewMode:
        if isinstance(value, InterviewMode):
            return value
        text = str(value).strip().lower().replace("_", "-").replace(" ", "-")
        try:
            return cls(text)
        except ValueError as exc:
            raise ValidationError.unknown_interview_mode(str(value)) from exc


class Actor(StrEnum):
    """Who is asking for a status change."""

    EMPLOYER = "employer"
    APPLICANT = "applicant"


@dataclass(frozen=True)
class InterviewDetails:
    """Side data required to schedule an interview."""

    when: datetime
    mode: InterviewMode
    notes: str = ""


@dataclass(frozen=True)
class Application:
    """A job application as known to the backend.

    ``applied_at`` never changes; status changes produce a new record.
    """

    id: str
    status: ApplicationStatus
    applied_at: datetime | None = None
    job_id: str = ""
    interview: InterviewDetails | None = None

    def apply(self, outcome: TransitionOutcome) -> Application:
        """Return the record as it stands after a committed transition."""
        interview = outcome.interview if outcome.interview is not None else self.interview
        return replace(self, status=outcome.new_status, interview=interview)
