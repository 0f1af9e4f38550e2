"""Domain modules for the engine."""

from .application import Actor, Application, ApplicationStatus, InterviewDetails, InterviewMode
from .completion import CompletionResult, compute_completion
from .eligibility import EligibilityDecision, check_eligibility
from .points import BonusComponents, available_points
from .profiles import EmployerProfile, JobSeekerProfile, ProfileKind
from .tiers import Tier, TierResult, classify_employer, classify_job_seeker

__all__ = [
    "Actor",
    "Application",
    "ApplicationStatus",
    "BonusComponents",
    "CompletionResult",
    "EligibilityDecision",
    "EmployerProfile",
    "InterviewDetails",
    "InterviewMode",
    "JobSeekerProfile",
    "ProfileKind",
    "Tier",
    "TierResult",
    "available_points",
    "check_eligibility",
    "classify_employer",
    "classify_job_seeker",
    "compute_completion",
]
