"""Evidence Scoring - relevance, preponderance and user scoring for fact-checks"""

__version__ = "0.1.0"

from evidence_scoring.domain import (
    Stance,
    EvidenceLink,
    Candidate,
    PreponderanceResult,
    UserScoreResult,
    SessionScoreState,
)
from evidence_scoring.scoring import (
    compute_relevance,
    enrich_and_rank,
    aggregate_preponderance,
    score_accuracy,
    score_mind_change,
    score_honesty,
    score_total,
    grade_for,
    stars_for,
    score_user,
    compute_link_points,
    max_link_points,
    link_points_range,
)

__all__ = [
    "Stance",
    "EvidenceLink",
    "Candidate",
    "PreponderanceResult",
    "UserScoreResult",
    "SessionScoreState",
    "compute_relevance",
    "enrich_and_rank",
    "aggregate_preponderance",
    "score_accuracy",
    "score_mind_change",
    "score_honesty",
    "score_total",
    "grade_for",
    "stars_for",
    "score_user",
    "compute_link_points",
    "max_link_points",
    "link_points_range",
]
