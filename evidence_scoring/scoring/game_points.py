"""
Points for the interactive linking game.

Each time a user drops a reference claim onto a task claim with a stance,
the stance is compared with the AI's veracity score for that reference
claim and earns between -10 and +10 points.
"""

import logging

from evidence_scoring.domain.models import PointsRange, SessionScoreState
from evidence_scoring.utils.numeric import round_half_up

logger = logging.getLogger(__name__)


MAX_POINTS = 10
STANCE_SCALE = 1.2
# Distance between the two ends of the stance scale
MAX_DIFFERENCE = STANCE_SCALE * 2


def normalize_veracity(ai_veracity_score: float) -> float:
    """Map an AI veracity score (-100 to 100) onto the stance scale."""
    return (ai_veracity_score / 100) * STANCE_SCALE


def compute_link_points(ai_veracity_score: float, user_stance: float) -> float:
    """
    Calculate points earned for linking a reference claim with a stance.

    Points fall linearly from +10 for a stance matching the AI's veracity
    score to -10 for the largest possible disagreement.

    Args:
        ai_veracity_score: AI truth rating for the reference claim (-100 to 100)
        user_stance: User-assigned support level (-1.2 to 1.2)

    Returns:
        Points rounded to one decimal
    """
    difference = abs(normalize_veracity(ai_veracity_score) - user_stance)
    points = MAX_POINTS - (difference / MAX_DIFFERENCE) * (MAX_POINTS * 2)
    return round_half_up(points, 1)


def max_link_points() -> int:
    """Get the maximum points for a single link action."""
    return MAX_POINTS


def link_points_range(ai_veracity_score: float) -> PointsRange:
    """
    Get the best and worst points achievable for a reference claim.

    The worst case is the stance exactly opposite the AI's normalized score.
    """
    worst_stance = -normalize_veracity(ai_veracity_score)
    return PointsRange(
        best=max_link_points(),
        worst=compute_link_points(ai_veracity_score, worst_stance),
    )


def format_points(points: float) -> str:
    """Format points with an explicit sign, e.g. "+10.0" or "-2.0"."""
    sign = "+" if points >= 0 else ""
    return f"{sign}{points:.1f}"


def apply_points(state: SessionScoreState, delta: float) -> SessionScoreState:
    """
    Add a point delta to a session's running score.

    Args:
        state: Current session state
        delta: Points earned by one action

    Returns:
        New session state
    """
    return SessionScoreState(
        total=round_half_up(state.total + delta, 1),
        actions=state.actions + 1,
    )


def score_link_action(
    state: SessionScoreState,
    ai_veracity_score: float,
    user_stance: float,
) -> tuple[SessionScoreState, float]:
    """
    Score one link action and fold it into the session.

    Returns:
        Tuple of (new session state, points earned)
    """
    delta = compute_link_points(ai_veracity_score, user_stance)
    new_state = apply_points(state, delta)
    logger.debug(f"Link action scored {format_points(delta)}, session total {new_state.total}")
    return new_state, delta


def preview_total(state: SessionScoreState) -> float:
    """Session total if the pending action earns the maximum points."""
    return state.total + max_link_points()
