"""Typed data contracts exchanged with the backend after IO validation."""

from __future__ import annotations

from typing import NotRequired, TypedDict

StatusUpdatePayload = TypedDict(
    "StatusUpdatePayload",
    {
        "status": str,
        "notes": NotRequired[str],
        "interviewDate": NotRequired[str],
        "interviewMode": NotRequired[str],
    },
)


class DocumentInput(TypedDict, total=False):
    """Document entry on a job-seeker profile."""

    name: str | None
    type: str | None


class ExperienceInput(TypedDict, total=False):
    currentRole: str | None
    company: str | None
    yearsOfExperience: str | int | float | None
    industry: str | None


class EducationInput(TypedDict, total=False):
    highestDegree: str | None
    degree: str | None
    institution: str | None
    yearOfGraduation: str | int | None
    year: str | int | None
    gradeCgpa: str | float | None
    grade: str | float | None


class JobPreferencesInput(TypedDict, total=False):
    preferredJobType: list[str] | str | None
    resumeAndDocs: list[object] | None


class SocialLinksInput(TypedDict, total=False):
    linkedIn: str | None
    linkedin: str | None
    instagram: str | None
    facebook: str | None
    twitterX: str | None
    twitter: str | None


class RewardsInput(TypedDict, total=False):
    applyForJobs: float | None
    rmService: float | None
    socialMediaBonus: float | None


class JobSeekerProfileInput(TypedDict, total=False):
    """``GET /profile/details`` shape for job seekers."""

    fullName: str | None
    name: str | None
    email: str | None
    phoneNumber: str | None
    location: str | None
    dateOfBirth: str | None
    nationality: str | None
    professionalSummary: str | None
    emirateId: str | None
    passportNumber: str | None
    professionalExperience: list[ExperienceInput] | None
    education: list[EducationInput] | None
    skills: list[str] | str | None
    jobPreferences: JobPreferencesInput | None
    certifications: list[str] | str | None
    resume: bool | str | None
    resumeDocument: str | None
    resumeUrl: str | None
    documents: list[DocumentInput] | None
    socialLinks: SocialLinksInput | None
    rewards: RewardsInput | None
    deductedPoints: float | None
    referralRewardPoints: float | None
    profileCompleted: str | int | float | None


class ContactPersonInput(TypedDict, total=False):
    name: str | None
    email: str | None
    phone: str | None


class EmployerDocumentsInput(TypedDict, total=False):
    businessLicense: str | None


class EmployerProfileInput(TypedDict, total=False):
    """``GET /profile/details`` shape for employers."""

    companyName: str | None
    companyEmail: str | None
    email: str | None
    phoneNumber: str | None
    website: str | None
    industry: str | None
    teamSize: str | int | None
    foundedYear: str | int | None
    aboutCompany: str | None
    contactPerson: ContactPersonInput | None
    companyLocation: str | None
    city: str | None
    country: str | None
    socialLinks: SocialLinksInput | None
    companyLogo: str | None
    documents: EmployerDocumentsInput | None
    rewards: RewardsInput | None
    deductedPoints: float | None


ApplicationInput = TypedDict(
    "ApplicationInput",
    {
        "_id": str | None,
        "id": str | None,
        "jobId": str | dict[str, object] | None,
        "status": str | None,
        "appliedDate": str | None,
        "interviewDate": str | None,
        "interviewMode": str | None,
        "interviewNotes": str | None,
    },
    total=False,
)
