"""Pydantic-based validation of backend payloads into domain types."""

from __future__ import annotations

import math
import re
from datetime import UTC, datetime

from pydantic import TypeAdapter, ValidationError

from ...domain.application import Application, ApplicationStatus, InterviewDetails, InterviewMode
from ...domain.profiles import DocumentRef, EmployerProfile, JobSeekerProfile, RewardBalances
from ...exceptions import ValidationError as EngineValidationError
from ...types import (
    ApplicationInput,
    EducationInput,
    EmployerProfileInput,
    ExperienceInput,
    JobSeekerProfileInput,
    RewardsInput,
    SocialLinksInput,
)


_LEADING_INT_RE = re.compile(r"\s*([+-]?\d+)")


class IncomingDataError(ValueError):
    """Raised when inbound data fails validation."""


def validate_as[SchemaT](schema: type[SchemaT], payload: object) -> SchemaT:
    try:
        return TypeAdapter(schema).validate_python(payload)
    except ValidationError as exc:
        message = f"Invalid payload for {schema}."
        raise IncomingDataError(message) from exc


def validate_json_as[SchemaT](schema: type[SchemaT], payload: str | bytes | bytearray) -> SchemaT:
    try:
        return TypeAdapter(schema).validate_json(payload)
    except ValidationError as exc:
        message = f"Invalid JSON payload for {schema}."
        raise IncomingDataError(message) from exc


def unwrap_data(payload: object) -> object:
    """Strip the ``{"success": ..., "data": {...}}`` envelope when present."""
    if isinstance(payload, dict) and isinstance(payload.get("data"), dict):
        return payload["data"]
    return payload


def _as_str(value: object) -> str:
    if value is None or isinstance(value, bool):
        return ""
    if isinstance(value, int | float):
        # Zero counts as unanswered, like a blank form field.
        return str(value) if value else ""
    return value.strip() if isinstance(value, str) else ""


def _as_str_tuple(value: object) -> tuple[str, ...]:
    # Some forms store lists as comma-separated text.
    if value is None:
        return ()
    if isinstance(value, str):
        return tuple(part.strip() for part in value.split(",") if part.strip())
    try:
        items = validate_as(list[object], value)
    except IncomingDataError:
        return ()
    return tuple(text for text in (_as_str(item) for item in items) if text)


def _as_number(value: object) -> float:
    if isinstance(value, bool) or value is None:
        return 0
    if isinstance(value, int | float):
        return value
    try:
        return float(str(value).strip())
    except ValueError:
        return 0


def _as_reported_percentage(value: object) -> int | None:
    """Read ``profileCompleted`` as the profile page does: leading digits only.

    A missing value, empty text or numeric zero means nothing was reported.
    """
    if isinstance(value, bool) or not value:
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    match = _LEADING_INT_RE.match(str(value))
    return int(match.group(1)) if match else None


def _first_of[ItemT](items: list[ItemT] | None) -> ItemT | None:
    return items[0] if items else None


def parse_datetime(value: object) -> datetime | None:
    """Parse an ISO timestamp; naive values are read as UTC."""
    text = _as_str(value)
    if not text:
        return None
    try:
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError as exc:
        raise IncomingDataError(f"Invalid timestamp: {text!r}.") from exc
    return parsed if parsed.tzinfo is not None else parsed.replace(tzinfo=UTC)


def _parse_rewards(rewards_input: RewardsInput | None, payload: dict[str, object]) -> RewardBalances:
    rewards = rewards_input or {}
    return RewardBalances(
        applications=_as_number(rewards.get("applyForJobs")),
        rm_service=_as_number(rewards.get("rmService")),
        social=_as_number(rewards.get("socialMediaBonus")),
        referral_total=_as_number(payload.get("referralRewardPoints")),
        deducted=_as_number(payload.get("deductedPoints")),
    )


def parse_job_seeker_profile(payload: object) -> JobSeekerProfile:
    """Parse a job-seeker ``GET /profile/details`` payload."""
    raw = validate_as(dict[str, object], unwrap_data(payload))
    profile = validate_as(JobSeekerProfileInput, raw)
    experience: ExperienceInput = _first_of(profile.get("professionalExperience")) or {}
    education: EducationInput = _first_of(profile.get("education")) or {}
    preferences = profile.get("jobPreferences") or {}
    social: SocialLinksInput = profile.get("socialLinks") or {}
    resume = profile.get("resume")
    return JobSeekerProfile(
        full_name=_as_str(profile.get("fullName")) or _as_str(profile.get("name")),
        email=_as_str(profile.get("email")),
        phone=_as_str(profile.get("phoneNumber")),
        location=_as_str(profile.get("location")),
        date_of_birth=_as_str(profile.get("dateOfBirth")),
        nationality=_as_str(profile.get("nationality")),
        summary=_as_str(profile.get("professionalSummary")),
        emirates_id=_as_str(profile.get("emirateId")),
        passport_number=_as_str(profile.get("passportNumber")),
        current_role=_as_str(experience.get("currentRole")),
        company=_as_str(experience.get("company")),
        experience=_as_str(experience.get("yearsOfExperience")),
        industry=_as_str(experience.get("industry")),
        degree=_as_str(education.get("highestDegree")) or _as_str(education.get("degree")),
        institution=_as_str(education.get("institution")),
        graduation_year=_as_str(education.get("yearOfGraduation"))
        or _as_str(education.get("year")),
        grade=_as_str(education.get("gradeCgpa")) or _as_str(education.get("grade")),
        skills=_as_str_tuple(profile.get("skills")),
        preferred_job_types=_as_str_tuple(preferences.get("preferredJobType")),
        certifications=_as_str_tuple(profile.get("certifications")),
        resume=resume is True or bool(_as_str(resume)),
        resume_document=_as_str(profile.get("resumeDocument")),
        resume_url=_as_str(profile.get("resumeUrl")),
        resume_and_docs=_as_str_tuple(preferences.get("resumeAndDocs")),
        documents=tuple(
            DocumentRef(name=_as_str(doc.get("name")), type=_as_str(doc.get("type")))
            for doc in profile.get("documents") or []
        ),
        linkedin=_as_str(social.get("linkedIn")) or _as_str(social.get("linkedin")),
        instagram=_as_str(social.get("instagram")),
        twitter=_as_str(social.get("twitterX")) or _as_str(social.get("twitter")),
        reported_percentage=_as_reported_percentage(profile.get("profileCompleted")),
        rewards=_parse_rewards(profile.get("rewards"), raw),
    )


def parse_employer_profile(payload: object) -> EmployerProfile:
    """Parse an employer ``GET /profile/details`` payload."""
    raw = validate_as(dict[str, object], unwrap_data(payload))
    profile = validate_as(EmployerProfileInput, raw)
    contact = profile.get("contactPerson") or {}
    social: SocialLinksInput = profile.get("socialLinks") or {}
    documents = profile.get("documents") or {}
    return EmployerProfile(
        company_name=_as_str(profile.get("companyName")),
        company_email=_as_str(profile.get("companyEmail")) or _as_str(profile.get("email")),
        phone=_as_str(profile.get("phoneNumber")),
        website=_as_str(profile.get("website")),
        industry=_as_str(profile.get("industry")),
        team_size=_as_str(profile.get("teamSize")),
        founded_year=_as_str(profile.get("foundedYear")),
        about=_as_str(profile.get("aboutCompany")),
        contact_name=_as_str(contact.get("name")),
        contact_email=_as_str(contact.get("email")),
        contact_phone=_as_str(contact.get("phone")),
        office_address=_as_str(profile.get("companyLocation")),
        city=_as_str(profile.get("city")),
        country=_as_str(profile.get("country")),
        linkedin=_as_str(social.get("linkedin")) or _as_str(social.get("linkedIn")),
        # The employer form stores Instagram under the legacy "facebook" key.
        instagram=_as_str(social.get("instagram")) or _as_str(social.get("facebook")),
        logo=_as_str(profile.get("companyLogo")),
        business_license=_as_str(documents.get("businessLicense")),
        rewards=_parse_rewards(profile.get("rewards"), raw),
    )


def parse_application(payload: object) -> Application:
    """Parse a ``GET /applications/{id}`` payload."""
    application = validate_as(ApplicationInput, unwrap_data(payload))
    application_id = _as_str(application.get("_id")) or _as_str(application.get("id"))
    if not application_id:
        raise IncomingDataError("Application payload has no id.")
    job = application.get("jobId")
    job_id = _as_str(job.get("_id")) if isinstance(job, dict) else _as_str(job)
    try:
        status = ApplicationStatus.parse(_as_str(application.get("status")) or "pending")
        when = parse_datetime(application.get("interviewDate"))
        interview = None
        if when is not None:
            interview = InterviewDetails(
                when=when,
                mode=InterviewMode.parse(_as_str(application.get("interviewMode")) or "in-person"),
                notes=_as_str(application.get("interviewNotes")),
            )
    except EngineValidationError as exc:
        raise IncomingDataError(str(exc)) from exc
    return Application(
        id=application_id,
        status=status,
        applied_at=parse_datetime(application.get("appliedDate")),
        job_id=job_id,
        interview=interview,
    )
