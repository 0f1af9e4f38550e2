"""Eligibility rules for submitting and withdrawing applications.

Usage example:
    from jobboard_engine.domain.completion import compute_completion
    from jobboard_engine.domain.eligibility import check_eligibility

    completion = compute_completion(profile)
    decision = check_eligibility(completion, has_resume=profile.has_resume)
    if not decision.eligible:
        print(decision.missing_fields)
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .application import Application, ApplicationStatus
from .completion import RESUME_LABEL, CompletionResult

DEFAULT_MIN_COMPLETION = 80


@dataclass(frozen=True)
class EligibilityDecision:
    """Whether a profile may apply, and what is still missing."""

    eligible: bool
    missing_fields: tuple[str, ...]
    percentage: int
    has_resume: bool


def check_eligibility(
    completion: CompletionResult,
    has_resume: bool,
    *,
    min_percentage: int = DEFAULT_MIN_COMPLETION,
) -> EligibilityDecision:
    """Gate a new application on completion and a resume on file.

    The resume label always leads ``missing_fields`` when it is absent; the
    other checklist gaps follow in checklist order.
    """
    missing: list[str] = []
    if not has_resume:
        missing.append(RESUME_LABEL)
    missing.extend(label for label in completion.missing_fields if label != RESUME_LABEL)
    return EligibilityDecision(
        eligible=completion.percentage >= min_percentage and has_resume,
        missing_fields=tuple(missing),
        percentage=completion.percentage,
        has_resume=has_resume,
    )


def completion_message(
    decision: EligibilityDecision, *, min_percentage: int = DEFAULT_MIN_COMPLETION
) -> str:
    """Guidance sentence for the completion dialog."""
    shortfall = max(0, min_percentage - decision.percentage)
    if decision.eligible:
        return (
            "Great! Your profile is complete and you have uploaded your resume. "
            "You can apply for jobs."
        )
    if not decision.has_resume and shortfall == 0:
        return (
            f"Your profile is {min_percentage}%+ complete, but you need to upload "
            "your resume to apply for jobs."
        )
    if decision.has_resume:
        return (
            f"You have uploaded your resume, but need {shortfall}% more profile "
            "completion to apply for jobs."
        )
    return (
        f"You need {shortfall}% more profile completion AND must upload your resume "
        "to apply for jobs."
    )


def has_active_application(applications: Iterable[Application], job_id: str) -> bool:
    """True when the job seeker already has a non-withdrawn application for the job."""
    target = job_id.strip()
    return any(
        app.job_id.strip() == target and app.status is not ApplicationStatus.WITHDRAWN
        for app in applications
    )


def can_withdraw(status: ApplicationStatus) -> bool:
    """Applicants may withdraw until the application is decided or withdrawn."""
    return not status.is_terminal
