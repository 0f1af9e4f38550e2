"""Typed profile shapes consumed by the scoring rules.

One closed dataclass per profile kind replaces ad hoc property probing over
untyped backend records. Fields the backend may omit default to empty values
and count as "not completed".
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from ..normalization import first_filled, is_emirati, is_filled, years_from_experience_band


class ProfileKind(StrEnum):
    """Which checklist and tier variant applies to a profile."""

    JOB_SEEKER = "job-seeker"
    EMPLOYER = "employer"


@dataclass(frozen=True)
class DocumentRef:
    """A document attached to a job-seeker profile."""

    name: str = ""
    type: str = ""

    @property
    def is_resume(self) -> bool:
        name = self.name.lower()
        return self.type.lower() == "resume" or "resume" in name or "cv" in name


@dataclass(frozen=True)
class RewardBalances:
    """Points the backend has credited for activity outside the profile."""

    applications: float = 0
    rm_service: float = 0
    social: float = 0
    referral_total: float = 0
    deducted: float = 0


@dataclass(frozen=True)
class JobSeekerProfile:
    """Job-seeker profile as returned by ``GET /profile/details``."""

    # Personal info
    full_name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    date_of_birth: str = ""
    nationality: str = ""
    summary: str = ""
    emirates_id: str = ""
    passport_number: str = ""
    # Most recent experience
    current_role: str = ""
    company: str = ""
    experience: str = ""
    industry: str = ""
    # Highest education
    degree: str = ""
    institution: str = ""
    graduation_year: str = ""
    grade: str = ""
    skills: tuple[str, ...] = ()
    preferred_job_types: tuple[str, ...] = ()
    certifications: tuple[str, ...] = ()
    # Resume, any of which counts
    resume: bool = False
    resume_document: str = ""
    resume_url: str = ""
    resume_and_docs: tuple[str, ...] = ()
    documents: tuple[DocumentRef, ...] = ()
    # Social links
    linkedin: str = ""
    instagram: str = ""
    twitter: str = ""
    rewards: RewardBalances = field(default_factory=RewardBalances)
    # Backend-computed completion (`profileCompleted`); wins over the checklist
    reported_percentage: int | None = None

    kind = ProfileKind.JOB_SEEKER

    @property
    def has_resume(self) -> bool:
        return (
            self.resume
            or is_filled(self.resume_document)
            or is_filled(self.resume_url)
            or is_filled(self.resume_and_docs)
            or any(doc.is_resume for doc in self.documents)
        )

    @property
    def is_emirati(self) -> bool:
        return is_emirati(self.nationality)

    @property
    def years_of_experience(self) -> float:
        return years_from_experience_band(self.experience)

    @property
    def display_name(self) -> str:
        return first_filled(self.full_name, self.email)


@dataclass(frozen=True)
class EmployerProfile:
    """Employer profile as returned by ``GET /profile/details``."""

    company_name: str = ""
    company_email: str = ""
    phone: str = ""
    website: str = ""
    industry: str = ""
    team_size: str = ""
    founded_year: str = ""
    about: str = ""
    contact_name: str = ""
    contact_email: str = ""
    contact_phone: str = ""
    office_address: str = ""
    city: str = ""
    country: str = ""
    linkedin: str = ""
    instagram: str = ""
    logo: str = ""
    business_license: str = ""
    rewards: RewardBalances = field(default_factory=RewardBalances)

    kind = ProfileKind.EMPLOYER

    @property
    def display_name(self) -> str:
        return first_filled(self.company_name, self.company_email)


type Profile = JobSeekerProfile | EmployerProfile
