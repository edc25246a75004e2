"""Scoring modules for evidence links."""

from .relevance import compute_relevance, stance_bonus
from .ranking import (
    enrich,
    rank,
    enrich_and_rank,
    top_relevant,
    needs_more_evidence,
)
from .preponderance import aggregate_preponderance, aggregate_for_target
from .performance import (
    score_accuracy,
    score_mind_change,
    score_rating_honesty,
    score_honesty,
    score_total,
    grade_for,
    stars_for,
    score_user,
    credibility_stars,
)
from .game_points import (
    compute_link_points,
    max_link_points,
    link_points_range,
    format_points,
    apply_points,
    score_link_action,
    preview_total,
)

__all__ = [
    "compute_relevance",
    "stance_bonus",
    "enrich",
    "rank",
    "enrich_and_rank",
    "top_relevant",
    "needs_more_evidence",
    "aggregate_preponderance",
    "aggregate_for_target",
    "score_accuracy",
    "score_mind_change",
    "score_rating_honesty",
    "score_honesty",
    "score_total",
    "grade_for",
    "stars_for",
    "score_user",
    "credibility_stars",
    "compute_link_points",
    "max_link_points",
    "link_points_range",
    "format_points",
    "apply_points",
    "score_link_action",
    "preview_total",
]
