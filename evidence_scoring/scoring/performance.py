"""
User performance scoring.

Compares a user's final rating of a task claim against what the evidence
says, rewards well-directed changes of mind, and checks how honestly the
user rated the quality of individual reference claims.
"""

import logging
from typing import Iterable

from evidence_scoring.domain.models import (
    PreponderanceResult,
    QualityRating,
    ScoreBreakdown,
    TotalScore,
    UserScoreResult,
)
from evidence_scoring.utils.numeric import round_half_up

logger = logging.getLogger(__name__)


MIND_CHANGE_THRESHOLD = 20
MIND_CHANGE_TOWARD_EVIDENCE = 75
MIND_CHANGE_ANY_UPDATE = 25

# Inclusive lower bounds, highest first
GRADE_THRESHOLDS = [
    (250, "A+"),
    (225, "A"),
    (200, "B+"),
    (175, "B"),
    (150, "C+"),
    (125, "C"),
    (100, "D"),
]

STAR_THRESHOLDS = [
    (250, 5),
    (200, 4),
    (150, 3),
    (100, 2),
]


def score_accuracy(user_rating: float, evidence_truth_score: float) -> float:
    """
    Score how close the user's rating is to the evidence truth score.

    Args:
        user_rating: User's final rating (0-100)
        evidence_truth_score: What the evidence says (0-100)

    Returns:
        100 minus the gap, floored at 0
    """
    return max(0, 100 - abs(user_rating - evidence_truth_score))


def score_mind_change(
    prior_belief: float,
    final_rating: float,
    evidence_truth_score: float,
) -> int:
    """
    Reward users who updated their belief.

    A shift of more than 20 points earns a bonus, larger when the final
    rating is strictly closer to the evidence than the prior belief was.

    Args:
        prior_belief: Rating before reviewing evidence (0-100)
        final_rating: Rating after reviewing evidence (0-100)
        evidence_truth_score: What the evidence says (0-100)

    Returns:
        0, 25 or 75
    """
    shift = abs(final_rating - prior_belief)
    if shift <= MIND_CHANGE_THRESHOLD:
        return 0

    moved_toward_evidence = (
        abs(final_rating - evidence_truth_score)
        < abs(prior_belief - evidence_truth_score)
    )
    if moved_toward_evidence:
        return MIND_CHANGE_TOWARD_EVIDENCE
    return MIND_CHANGE_ANY_UPDATE


def score_rating_honesty(user_quality: float, ai_quality: float) -> float:
    """Score one quality rating by its distance from the AI's rating."""
    return max(0, 100 - abs(user_quality - ai_quality))


def score_honesty(ratings: Iterable[QualityRating]) -> int:
    """
    Score how honestly a user rated reference claim quality.

    Args:
        ratings: User and AI quality ratings for each reference claim

    Returns:
        Rounded mean honesty over all ratings (0 for no ratings)
    """
    scores = [
        score_rating_honesty(rating.user_quality, rating.ai_quality)
        for rating in ratings
    ]
    if not scores:
        return 0
    return round_half_up(sum(scores) / len(scores))


def score_total(accuracy: float, honesty: float, mind_change: float) -> TotalScore:
    """Add up the score components. Totals are not capped."""
    return TotalScore(
        total=accuracy + honesty + mind_change,
        breakdown=ScoreBreakdown(
            accuracy=accuracy,
            honesty=honesty,
            mind_change=mind_change,
        ),
    )


def grade_for(total: float) -> str:
    """Get the letter grade for a total score."""
    for threshold, grade in GRADE_THRESHOLDS:
        if total >= threshold:
            return grade
    return "F"


def stars_for(average: float) -> int:
    """Get credibility stars (1-5) for an average total score."""
    for threshold, stars in STAR_THRESHOLDS:
        if average >= threshold:
            return stars
    return 1


def score_user(
    user_rating: float,
    prior_belief: float,
    preponderance: PreponderanceResult,
    ratings: Iterable[QualityRating] = (),
) -> UserScoreResult:
    """
    Score a user's session on one task claim.

    Args:
        user_rating: User's final rating (0-100)
        prior_belief: User's rating before reviewing evidence (0-100)
        preponderance: Aggregated evidence for the task claim
        ratings: User and AI quality ratings given during the session

    Returns:
        UserScoreResult with all components, grade and stars
    """
    truth = preponderance.evidence_truth_score

    accuracy = score_accuracy(user_rating, truth)
    honesty = score_honesty(ratings)
    mind_change = score_mind_change(prior_belief, user_rating, truth)
    total = score_total(accuracy, honesty, mind_change).total

    logger.debug(
        f"User score: accuracy={accuracy}, honesty={honesty}, "
        f"mind_change={mind_change}, total={total}"
    )

    return UserScoreResult(
        accuracy_score=accuracy,
        honesty_score=honesty,
        mind_change_bonus=mind_change,
        total=total,
        grade=grade_for(total),
        stars=stars_for(total),
        evidence_truth_score=truth,
        gap=abs(user_rating - truth),
    )


def credibility_stars(results: Iterable[UserScoreResult]) -> int:
    """
    Get credibility stars from a user's scored sessions.

    Args:
        results: Session results to average

    Returns:
        Stars for the average total (1 when there are no sessions)
    """
    totals = [result.total for result in results]
    if not totals:
        return 1
    return stars_for(sum(totals) / len(totals))
