"""
Relevance scoring for evidence links.

Turns one link into a non-negative ranking key combining the magnitude of
its support level, the assessor's confidence and how decisive its stance is.
"""

import logging

from evidence_scoring.domain.models import DirectionalLink, EvidenceLink, Stance

logger = logging.getLogger(__name__)


# Support and refute are decisive; nuance and insufficient less so
STANCE_WEIGHTS = {
    Stance.SUPPORT.value: 1.0,
    Stance.REFUTE.value: 1.0,
    Stance.NUANCE.value: 0.7,
    Stance.INSUFFICIENT.value: 0.3,
}

UNKNOWN_STANCE_WEIGHT = 0.5


def stance_bonus(stance: Stance | str) -> float:
    """
    Get the relevance multiplier for a stance.

    Unknown stances should never get past model validation. If one does,
    it is scored with UNKNOWN_STANCE_WEIGHT and logged.
    """
    key = getattr(stance, "value", stance)
    if key not in STANCE_WEIGHTS:
        logger.warning(f"Unknown stance {stance!r}, using weight {UNKNOWN_STANCE_WEIGHT}")
        return UNKNOWN_STANCE_WEIGHT
    return STANCE_WEIGHTS[key]


def compute_relevance(link: DirectionalLink | EvidenceLink | None) -> float:
    """
    Calculate the relevance score of a link.

    relevance = |support_level| x confidence x stance bonus x 100

    The result is a sort key and display magnitude, not a probability.

    Args:
        link: The link to score, or None when there is no link

    Returns:
        Relevance score (0 when there is no link)
    """
    if link is None:
        return 0.0

    if isinstance(link, EvidenceLink):
        link = link.directional()

    return abs(link.support_level) * link.confidence * stance_bonus(link.stance) * 100
