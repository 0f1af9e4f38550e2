"""Membership tier rules for job seekers and employers.

Usage example:
    from jobboard_engine.domain.tiers import Tier, classify_job_seeker

    result = classify_job_seeker(percentage=100, years_of_experience=6, is_emirati=False)
    assert result.tier is Tier.GOLD
    assert result.adjusted_base_points == 500.0
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from ..normalization import matches_company, parse_team_size_lower_bound
from .profiles import EmployerProfile

JOB_SEEKER_BASE_POINTS = 50
JOB_SEEKER_POINTS_PER_PERCENT = 2
EMPLOYER_BASE_POINTS = 80
EMPLOYER_POINTS_PER_PERCENT = 2.5
PLATINUM_POINTS_THRESHOLD = 500

# Placeholder allow-list shipped with the portal; deployments override it
# through TOP_COMPANIES or the config file.
DEFAULT_TOP_COMPANIES = (
    "Tech Solutions LLC",
    "Emirates Group",
    "Dubai Holdings",
    "Emaar Properties",
    "Majid Al Futtaim",
    "Etisalat",
    "DP World",
    "Mashreq Bank",
    "Al-Futtaim Group",
    "Jumeirah Group",
)


class Tier(StrEnum):
    """Membership tier."""

    BLUE = "Blue"
    SILVER = "Silver"
    GOLD = "Gold"
    PLATINUM = "Platinum"


class ExperienceBracket(StrEnum):
    """Experience bracket used only to pick a Platinum multiplier."""

    BLUE = "Blue"
    SILVER = "Silver"
    GOLD = "Gold"


PLATINUM_MULTIPLIERS = {
    ExperienceBracket.BLUE: 2.0,
    ExperienceBracket.SILVER: 3.0,
    ExperienceBracket.GOLD: 4.0,
}

TIER_MULTIPLIERS = {
    Tier.GOLD: 2.0,
    Tier.SILVER: 1.5,
    Tier.BLUE: 1.0,
}


@dataclass(frozen=True)
class TierResult:
    """Tier decision and the points it implies.

    ``raw_base_points`` is what the rewards and admin views show;
    ``adjusted_base_points`` applies the tier multiplier as the profile page
    does. Callers pick one through the configured points mode.
    """

    tier: Tier
    raw_base_points: float
    multiplier: float = 1.0
    bracket: ExperienceBracket | None = None

    @property
    def adjusted_base_points(self) -> float:
        return self.raw_base_points * self.multiplier


def job_seeker_base_points(percentage: int) -> float:
    return JOB_SEEKER_BASE_POINTS + percentage * JOB_SEEKER_POINTS_PER_PERCENT


def employer_points(percentage: int) -> float:
    return EMPLOYER_BASE_POINTS + percentage * EMPLOYER_POINTS_PER_PERCENT


def experience_bracket(years_of_experience: float) -> ExperienceBracket:
    """Bracket experience: <=1 Blue, 2–5 Silver, anything else Gold."""
    if years_of_experience <= 1:
        return ExperienceBracket.BLUE
    if 2 <= years_of_experience <= 5:
        return ExperienceBracket.SILVER
    return ExperienceBracket.GOLD


def tier_multiplier(tier: Tier, bracket: ExperienceBracket) -> float:
    if tier is Tier.PLATINUM:
        return PLATINUM_MULTIPLIERS[bracket]
    return TIER_MULTIPLIERS[tier]


def job_seeker_tier(base_points: float, years_of_experience: float, is_emirati: bool) -> Tier:
    """Pick the job-seeker tier; the first matching rule wins."""
    if is_emirati:
        return Tier.PLATINUM
    if base_points >= PLATINUM_POINTS_THRESHOLD:
        return Tier.PLATINUM
    if years_of_experience >= 5:
        return Tier.GOLD
    if 2 <= years_of_experience <= 5:
        return Tier.SILVER
    return Tier.BLUE


def classify_job_seeker(
    *, percentage: int, years_of_experience: float, is_emirati: bool
) -> TierResult:
    """Classify a job seeker from completion, experience and nationality."""
    base_points = job_seeker_base_points(percentage)
    tier = job_seeker_tier(base_points, years_of_experience, is_emirati)
    bracket = experience_bracket(years_of_experience)
    return TierResult(
        tier=tier,
        raw_base_points=base_points,
        multiplier=tier_multiplier(tier, bracket),
        bracket=bracket,
    )


def employer_tier(points: float, team_size_lower_bound: int, is_top_company: bool) -> Tier:
    """Pick the employer tier; the first matching rule wins."""
    if points >= PLATINUM_POINTS_THRESHOLD:
        return Tier.PLATINUM
    if team_size_lower_bound <= 100:
        return Tier.BLUE
    if 101 <= team_size_lower_bound <= 500:
        return Tier.SILVER
    if 501 <= team_size_lower_bound <= 1000 or is_top_company:
        return Tier.GOLD
    return Tier.BLUE


def classify_employer(
    *, percentage: int, team_size: str | None, is_top_company: bool
) -> TierResult:
    """Classify an employer from completion, team size and the top-company list."""
    points = employer_points(percentage)
    tier = employer_tier(points, parse_team_size_lower_bound(team_size), is_top_company)
    return TierResult(tier=tier, raw_base_points=points)


def is_top_company(company_name: str | None, top_companies: Iterable[str]) -> bool:
    return matches_company(company_name, top_companies)


def is_verified_employer(profile: EmployerProfile, top_companies: Iterable[str]) -> bool:
    """Employers are verified when listed as a top company or licensed."""
    return is_top_company(profile.company_name, top_companies) or bool(
        profile.business_license.strip()
    )
