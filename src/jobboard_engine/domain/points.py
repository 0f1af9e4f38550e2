"""Reward points ledger."""

from __future__ import annotations

from dataclasses import dataclass

from ..normalization import round_half_up

DEFAULT_PLACEMENT_POINTS = 20


@dataclass(frozen=True)
class BonusComponents:
    """Points earned outside profile completion."""

    applications: float = 0
    rm_service: float = 0
    referral: float = 0
    social: float = 0

    @property
    def total(self) -> float:
        return self.applications + self.rm_service + self.referral + self.social


@dataclass(frozen=True)
class ReferralPoints:
    """Referral reward split into job placements and sign-ups."""

    placement: float
    signup: float

    @property
    def total(self) -> float:
        return self.placement + self.signup


def available_points(
    base_points: float,
    bonus: BonusComponents | None = None,
    deducted: float = 0,
) -> int:
    """Return base + bonuses − deductions, never below zero.

    Deductions larger than the balance are absorbed, not reported.
    """
    components = bonus or BonusComponents()
    total = base_points + components.total
    return max(0, round_half_up(total - deducted))


def split_referral_points(
    total_referral_points: float,
    hired_referrals: int | None,
    *,
    per_placement: float = DEFAULT_PLACEMENT_POINTS,
) -> ReferralPoints:
    """Split the backend's referral total into placement and sign-up points.

    With no hired count available the whole total is treated as placements.
    """
    if hired_referrals is None:
        return ReferralPoints(placement=max(0, total_referral_points), signup=0)
    placement = max(0, hired_referrals) * per_placement
    return ReferralPoints(placement=placement, signup=max(0, total_referral_points - placement))
