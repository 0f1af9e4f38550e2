"""Derived profile values: completion, tier and points.

Every surface that shows a completion bar, a tier badge or a points balance
goes through ``compute_profile_metrics`` so the numbers never diverge.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from ..domain.completion import CompletionResult, completion_band, compute_completion
from ..domain.eligibility import (
    DEFAULT_MIN_COMPLETION,
    EligibilityDecision,
    check_eligibility,
)
from ..domain.points import (
    DEFAULT_PLACEMENT_POINTS,
    BonusComponents,
    ReferralPoints,
    available_points,
    split_referral_points,
)
from ..domain.profiles import EmployerProfile, JobSeekerProfile, Profile
from ..domain.tiers import (
    DEFAULT_TOP_COMPANIES,
    TierResult,
    classify_employer,
    classify_job_seeker,
    is_top_company,
    is_verified_employer,
)


class PointsMode(StrEnum):
    """Which base-points figure feeds the available balance."""

    ADJUSTED = "adjusted"
    RAW = "raw"


@dataclass(frozen=True)
class ScoringRules:
    """Tunable inputs to the scoring rules."""

    points_mode: PointsMode = PointsMode.ADJUSTED
    min_completion_percentage: int = DEFAULT_MIN_COMPLETION
    top_companies: tuple[str, ...] = DEFAULT_TOP_COMPANIES
    placement_points: float = DEFAULT_PLACEMENT_POINTS


@dataclass(frozen=True)
class ProfileMetrics:
    """Everything a caller displays for one profile."""

    completion: CompletionResult
    band: str
    tier: TierResult
    base_points: float
    bonus: BonusComponents
    referral: ReferralPoints
    deducted: float
    available_points: int
    verified: bool = False

    @property
    def percentage(self) -> int:
        return self.completion.percentage


def compute_profile_metrics(
    profile: Profile,
    rules: ScoringRules | None = None,
    *,
    hired_referrals: int | None = None,
) -> ProfileMetrics:
    """Derive completion, tier and points for a profile.

    Args:
        profile: Job-seeker or employer profile.
        rules: Scoring rules; defaults apply when omitted.
        hired_referrals: Number of referred candidates hired, used to split the
            referral total into placement and sign-up points. ``None`` when the
            referral history is unavailable.
    """
    rules = rules or ScoringRules()
    completion = compute_completion(profile)
    verified = False
    if isinstance(profile, EmployerProfile):
        tier = classify_employer(
            percentage=completion.percentage,
            team_size=profile.team_size,
            is_top_company=is_top_company(profile.company_name, rules.top_companies),
        )
        verified = is_verified_employer(profile, rules.top_companies)
    else:
        tier = classify_job_seeker(
            percentage=completion.percentage,
            years_of_experience=profile.years_of_experience,
            is_emirati=profile.is_emirati,
        )

    if rules.points_mode is PointsMode.ADJUSTED:
        base_points = tier.adjusted_base_points
    else:
        base_points = tier.raw_base_points
    rewards = profile.rewards
    referral = split_referral_points(
        rewards.referral_total, hired_referrals, per_placement=rules.placement_points
    )
    bonus = BonusComponents(
        applications=rewards.applications,
        rm_service=rewards.rm_service,
        referral=referral.total,
        social=rewards.social,
    )
    return ProfileMetrics(
        completion=completion,
        band=completion_band(completion.percentage),
        tier=tier,
        base_points=base_points,
        bonus=bonus,
        referral=referral,
        deducted=rewards.deducted,
        available_points=available_points(base_points, bonus, rewards.deducted),
        verified=verified,
    )


def check_profile_eligibility(
    profile: JobSeekerProfile, rules: ScoringRules | None = None
) -> EligibilityDecision:
    """Run the eligibility gate straight from a job-seeker profile."""
    rules = rules or ScoringRules()
    return check_eligibility(
        compute_completion(profile),
        profile.has_resume,
        min_percentage=rules.min_completion_percentage,
    )

