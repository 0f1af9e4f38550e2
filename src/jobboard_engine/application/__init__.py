"""Application services that orchestrate domain rules for callers."""

from .history import UndoHistoryTracker
from .profile_metrics import PointsMode, ProfileMetrics, ScoringRules, compute_profile_metrics
from .status_engine import StatusTransitionEngine, TransitionIntent, TransitionOutcome

__all__ = [
    "PointsMode",
    "ProfileMetrics",
    "ScoringRules",
    "StatusTransitionEngine",
    "TransitionIntent",
    "TransitionOutcome",
    "UndoHistoryTracker",
    "compute_profile_metrics",
]
