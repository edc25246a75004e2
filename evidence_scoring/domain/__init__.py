"""Domain models and input validation."""

from .models import (
    Stance,
    EvidenceLink,
    DirectionalLink,
    WeightedLink,
    Candidate,
    EnrichedCandidate,
    StanceBreakdown,
    PreponderanceResult,
    QualityRating,
    ScoreBreakdown,
    TotalScore,
    UserScoreResult,
    PointsRange,
    SessionScoreState,
)
from .validation import (
    DomainValidationError,
    check_link,
    check_points_inputs,
    validate_links,
)

__all__ = [
    "Stance",
    "EvidenceLink",
    "DirectionalLink",
    "WeightedLink",
    "Candidate",
    "EnrichedCandidate",
    "StanceBreakdown",
    "PreponderanceResult",
    "QualityRating",
    "ScoreBreakdown",
    "TotalScore",
    "UserScoreResult",
    "PointsRange",
    "SessionScoreState",
    "DomainValidationError",
    "check_link",
    "check_points_inputs",
    "validate_links",
]
