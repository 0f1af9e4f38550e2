"""Tests for backend payload validation."""

from datetime import UTC, datetime

import pytest

from jobboard_engine.domain.application import ApplicationStatus, InterviewMode
from jobboard_engine.domain.completion import compute_completion
from jobboard_engine.infrastructure.io.validation import (
    IncomingDataError,
    parse_application,
    parse_datetime,
    parse_employer_profile,
    parse_job_seeker_profile,
    unwrap_data,
    validate_as,
    validate_json_as,
)

JOB_SEEKER_PAYLOAD: dict[str, object] = {
    "success": True,
    "data": {
        "fullName": "Aisha Al Mansoori",
        "email": "aisha@example.com",
        "phoneNumber": "+971500000000",
        "nationality": "Emirati",
        "professionalExperience": [
            {
                "currentRole": "Engineer",
                "company": "DP World",
                "yearsOfExperience": "4-6",
                "industry": "Logistics",
            },
            {"currentRole": "Intern", "company": "Old Co"},
        ],
        "education": [{"degree": "BSc", "institution": "UAE University", "year": 2016}],
        "skills": ["Python", " ", "SQL"],
        "jobPreferences": {"preferredJobType": "Full-time, Contract", "resumeAndDocs": []},
        "certifications": [],
        "documents": [{"name": "passport.pdf", "type": "id"}, {"name": "cv.pdf", "type": "Resume"}],
        "socialLinks": {"linkedIn": "https://linkedin.com/in/aisha", "twitterX": ""},
        "rewards": {"applyForJobs": 10, "rmService": "5", "socialMediaBonus": None},
        "referralRewardPoints": 40,
        "deductedPoints": 12,
        "unexpectedField": {"ignored": True},
    },
}


def test_parse_job_seeker_profile_maps_nested_fields() -> None:
    profile = parse_job_seeker_profile(JOB_SEEKER_PAYLOAD)

    assert profile.full_name == "Aisha Al Mansoori"
    assert profile.current_role == "Engineer"
    assert profile.company == "DP World"
    assert profile.years_of_experience == 6
    assert profile.degree == "BSc"
    assert profile.graduation_year == "2016"
    assert profile.skills == ("Python", "SQL")
    assert profile.preferred_job_types == ("Full-time", "Contract")
    assert profile.certifications == ()
    assert profile.has_resume is True
    assert profile.is_emirati is True
    assert profile.linkedin == "https://linkedin.com/in/aisha"
    assert profile.twitter == ""
    assert profile.rewards.applications == 10
    assert profile.rewards.rm_service == 5
    assert profile.rewards.social == 0
    assert profile.rewards.referral_total == 40
    assert profile.rewards.deducted == 12


def test_parse_job_seeker_profile_accepts_unwrapped_payload() -> None:
    profile = parse_job_seeker_profile({"name": "Omar", "resume": True})

    assert profile.full_name == "Omar"
    assert profile.has_resume is True


def test_parsed_profile_feeds_completion() -> None:
    result = compute_completion(parse_job_seeker_profile(JOB_SEEKER_PAYLOAD))

    assert "Full Name" not in result.missing_fields
    assert "Certifications" in result.missing_fields
    assert 0 < result.percentage < 100


def test_parse_employer_profile() -> None:
    profile = parse_employer_profile(
        {
            "data": {
                "companyName": "Emaar Properties",
                "email": "hr@emaar.example",
                "teamSize": 250,
                "foundedYear": 1997,
                "contactPerson": {"name": "Omar", "phone": "+971500000001"},
                "socialLinks": {"linkedin": "https://linkedin.com/company/emaar", "facebook": "@emaar"},
                "documents": {"businessLicense": "license.pdf"},
                "rewards": {"rmService": 15},
                "deductedPoints": 3,
            }
        }
    )

    assert profile.company_name == "Emaar Properties"
    assert profile.company_email == "hr@emaar.example"
    assert profile.team_size == "250"
    assert profile.founded_year == "1997"
    assert profile.contact_name == "Omar"
    assert profile.contact_email == ""
    assert profile.instagram == "@emaar"
    assert profile.business_license == "license.pdf"
    assert profile.rewards.rm_service == 15
    assert profile.rewards.deducted == 3


def test_profile_payload_must_be_an_object() -> None:
    with pytest.raises(IncomingDataError):
        parse_job_seeker_profile(["not", "an", "object"])


def test_profile_with_wrong_nested_shape_is_rejected() -> None:
    with pytest.raises(IncomingDataError):
        parse_employer_profile({"contactPerson": "Omar"})


def test_parse_application() -> None:
    application = parse_application(
        {
            "success": True,
            "data": {
                "_id": "665f1c2e9b",
                "jobId": {"_id": "job-7", "title": "Engineer"},
                "status": "interview_scheduled",
                "appliedDate": "2026-02-01T08:30:00Z",
                "interviewDate": "2026-03-10T10:00:00.000Z",
                "interviewMode": "virtual",
                "interviewNotes": "Teams",
            },
        }
    )

    assert application.id == "665f1c2e9b"
    assert application.job_id == "job-7"
    assert application.status is ApplicationStatus.INTERVIEW_SCHEDULED
    assert application.applied_at == datetime(2026, 2, 1, 8, 30, tzinfo=UTC)
    assert application.interview is not None
    assert application.interview.when == datetime(2026, 3, 10, 10, 0, tzinfo=UTC)
    assert application.interview.mode is InterviewMode.VIRTUAL
    assert application.interview.notes == "Teams"


def test_parse_application_defaults() -> None:
    application = parse_application({"id": "a1", "jobId": "job-1"})

    assert application.status is ApplicationStatus.PENDING
    assert application.job_id == "job-1"
    assert application.applied_at is None
    assert application.interview is None


@pytest.mark.parametrize(
    "payload",
    [
        {"status": "pending"},
        {"_id": "a1", "status": "archived"},
        {"_id": "a1", "interviewDate": "next tuesday"},
        {"_id": "a1", "interviewDate": "2026-03-10T10:00:00Z", "interviewMode": "pigeon"},
    ],
)
def test_parse_application_rejects_bad_payloads(payload: dict[str, object]) -> None:
    with pytest.raises(IncomingDataError):
        parse_application(payload)


def test_parse_datetime_reads_naive_values_as_utc() -> None:
    assert parse_datetime("2026-03-10T10:00:00") == datetime(2026, 3, 10, 10, 0, tzinfo=UTC)
    assert parse_datetime("") is None
    assert parse_datetime(None) is None


def test_unwrap_data_only_strips_object_envelopes() -> None:
    assert unwrap_data({"data": {"a": 1}}) == {"a": 1}
    assert unwrap_data({"data": [1, 2]}) == {"data": [1, 2]}
    assert unwrap_data("text") == "text"


def test_validate_helpers_raise_incoming_data_error() -> None:
    assert validate_as(dict[str, object], {"a": 1}) == {"a": 1}
    assert validate_json_as(dict[str, object], '{"a": 1}') == {"a": 1}
    with pytest.raises(IncomingDataError):
        validate_as(dict[str, object], [1])
    with pytest.raises(IncomingDataError):
        validate_json_as(dict[str, object], "[1]")


def test_zero_numbers_count_as_missing_fields() -> None:
    job_seeker = parse_job_seeker_profile(
        {
            "professionalExperience": [{"yearsOfExperience": 0}],
            "education": [{"gradeCgpa": 0, "yearOfGraduation": 0}],
        }
    )
    employer = parse_employer_profile({"teamSize": 0, "foundedYear": 0})

    job_seeker_missing = compute_completion(job_seeker).missing_fields
    assert "Years of Experience" in job_seeker_missing
    assert "Grade/CGPA" in job_seeker_missing
    assert "Year of Graduation" in job_seeker_missing
    employer_result = compute_completion(employer)
    assert employer_result.completed_fields == 0
    assert "Team Size" in employer_result.missing_fields
    assert "Founded Year" in employer_result.missing_fields


@pytest.mark.parametrize(
    ("reported", "expected"),
    [("90", 90), ("85%", 85), (72, 72), (64.9, 64), ("0", 0), (0, None), ("", None), ("n/a", None)],
)
def test_parse_job_seeker_profile_reads_reported_completion(
    reported: object, expected: int | None
) -> None:
    profile = parse_job_seeker_profile({"profileCompleted": reported})

    assert profile.reported_percentage == expected


def test_reported_completion_wins_over_checklist() -> None:
    profile = parse_job_seeker_profile({"data": {"profileCompleted": "90", "resumeUrl": "x"}})

    assert compute_completion(profile).percentage == 90
