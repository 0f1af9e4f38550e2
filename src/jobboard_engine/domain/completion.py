"""Profile completion scoring.

Usage example:
    from jobboard_engine.domain.completion import compute_completion
    from jobboard_engine.domain.profiles import JobSeekerProfile

    result = compute_completion(JobSeekerProfile(full_name="Aisha", email="a@example.com"))
    assert result.total_fields == 24
    assert 0 <= result.percentage <= 100
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ..normalization import is_filled, round_half_up
from .profiles import EmployerProfile, JobSeekerProfile, Profile

RESUME_LABEL = "Resume (Required for job applications)"

JOB_SEEKER_TOTAL_FIELDS = 24
EMPLOYER_TOTAL_FIELDS = 17

# Below this reported percentage the checklist gaps are still listed.
REPORTED_DETAIL_THRESHOLD = 80

type ChecklistItem[P] = tuple[str, Callable[[P], object]]

JOB_SEEKER_CHECKLIST: tuple[ChecklistItem[JobSeekerProfile], ...] = (
    # Personal info (9)
    ("Full Name", lambda p: p.full_name),
    ("Email", lambda p: p.email),
    ("Phone Number", lambda p: p.phone),
    ("Location", lambda p: p.location),
    ("Date of Birth", lambda p: p.date_of_birth),
    ("Nationality", lambda p: p.nationality),
    ("Professional Summary", lambda p: p.summary),
    ("Emirates ID", lambda p: p.emirates_id),
    ("Passport Number", lambda p: p.passport_number),
    # Experience (4)
    ("Current Role", lambda p: p.current_role),
    ("Company", lambda p: p.company),
    ("Years of Experience", lambda p: p.experience),
    ("Industry", lambda p: p.industry),
    # Education (4)
    ("Highest Degree", lambda p: p.degree),
    ("Institution", lambda p: p.institution),
    ("Year of Graduation", lambda p: p.graduation_year),
    ("Grade/CGPA", lambda p: p.grade),
    # Skills, preferences, certifications, resume (4)
    ("Skills", lambda p: p.skills),
    ("Job Preferences", lambda p: p.preferred_job_types),
    ("Certifications", lambda p: p.certifications),
    (RESUME_LABEL, lambda p: p.has_resume),
    # Social links (3)
    ("LinkedIn", lambda p: p.linkedin),
    ("Instagram", lambda p: p.instagram),
    ("Twitter/X", lambda p: p.twitter),
)

EMPLOYER_CHECKLIST: tuple[ChecklistItem[EmployerProfile], ...] = (
    # Company info (8)
    ("Company Name", lambda p: p.company_name),
    ("Company Email", lambda p: p.company_email),
    ("Phone Number", lambda p: p.phone),
    ("Website", lambda p: p.website),
    ("Industry", lambda p: p.industry),
    ("Team Size", lambda p: p.team_size),
    ("Founded Year", lambda p: p.founded_year),
    ("About Company", lambda p: p.about),
    # Contact person (3)
    ("Contact Name", lambda p: p.contact_name),
    ("Contact Email", lambda p: p.contact_email),
    ("Contact Phone", lambda p: p.contact_phone),
    # Location (3)
    ("Office Address", lambda p: p.office_address),
    ("City", lambda p: p.city),
    ("Country", lambda p: p.country),
    # Social (2)
    ("LinkedIn", lambda p: p.linkedin),
    ("Instagram", lambda p: p.instagram),
    # Branding (1)
    ("Company Logo", lambda p: p.logo),
)


@dataclass(frozen=True)
class CompletionResult:
    """Checklist outcome for one profile."""

    percentage: int
    completed_fields: int
    total_fields: int
    missing_fields: tuple[str, ...]


def _evaluate[P](
    profile: P, checklist: tuple[ChecklistItem[P], ...], total_fields: int
) -> CompletionResult:
    completed = 0
    missing: list[str] = []
    for label, getter in checklist:
        if is_filled(getter(profile)):
            completed += 1
        else:
            missing.append(label)
    return CompletionResult(
        percentage=percentage_of(completed, total_fields),
        completed_fields=completed,
        total_fields=total_fields,
        missing_fields=tuple(missing),
    )


def percentage_of(completed: int, total_fields: int) -> int:
    """Round ``completed / total`` to a whole percentage clamped to 0–100."""
    if total_fields <= 0:
        return 0
    return max(0, min(100, round_half_up(completed / total_fields * 100)))


def _from_reported(profile: JobSeekerProfile, reported: int) -> CompletionResult:
    checklist = _evaluate(profile, JOB_SEEKER_CHECKLIST, JOB_SEEKER_TOTAL_FIELDS)
    percentage = max(0, min(100, reported))
    missing = checklist.missing_fields
    if percentage >= REPORTED_DETAIL_THRESHOLD:
        missing = tuple(label for label in missing if label == RESUME_LABEL)
    return CompletionResult(
        percentage=percentage,
        completed_fields=round_half_up(percentage * JOB_SEEKER_TOTAL_FIELDS / 100),
        total_fields=JOB_SEEKER_TOTAL_FIELDS,
        missing_fields=missing,
    )


def compute_completion(profile: Profile) -> CompletionResult:
    """Score a profile against the checklist for its kind.

    A job seeker's backend-reported percentage, when present, replaces the
    checklist count. Only the resume gap is listed once it reaches
    ``REPORTED_DETAIL_THRESHOLD``.
    """
    if isinstance(profile, EmployerProfile):
        return _evaluate(profile, EMPLOYER_CHECKLIST, EMPLOYER_TOTAL_FIELDS)
    if profile.reported_percentage is not None:
        return _from_reported(profile, profile.reported_percentage)
    return _evaluate(profile, JOB_SEEKER_CHECKLIST, JOB_SEEKER_TOTAL_FIELDS)


def completion_percentage(profile: Profile) -> int:
    """Shortcut for ``compute_completion(profile).percentage``."""
    return compute_completion(profile).percentage


def completion_band(percentage: int) -> str:
    """Display band shown next to the completion bar (not the membership tier)."""
    if percentage >= 90:
        return "Platinum"
    if percentage >= 80:
        return "Gold"
    if percentage >= 60:
        return "Silver"
    return "Bronze"
