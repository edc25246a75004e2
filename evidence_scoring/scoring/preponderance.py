"""
Preponderance of evidence for a task claim.

Folds every assessed link for one task claim into a single 0-100 evidence
truth score: "what does the evidence actually say".
"""

import logging
import math
from typing import Iterable

from evidence_scoring.domain.models import (
    EvidenceLink,
    PreponderanceResult,
    Stance,
    StanceBreakdown,
    WeightedLink,
)
from evidence_scoring.utils.numeric import round_half_up

logger = logging.getLogger(__name__)


NEUTRAL_TRUTH_SCORE = 50

# Nuanced evidence counts half, and that half is split evenly between sides
NUANCE_WEIGHT_FACTOR = 0.5
NUANCE_SPLIT = 0.5


def aggregate_preponderance(
    links: Iterable[WeightedLink | EvidenceLink],
) -> PreponderanceResult:
    """
    Calculate the preponderance of evidence across links.

    Each link weighs quality_score x confidence. Support and refute links
    add their full weight to their side, nuance links add half their weight
    to a nuance pool split evenly between sides, and insufficient links are
    only counted.

    The result does not depend on link order.

    Args:
        links: Assessed links for one task claim

    Returns:
        PreponderanceResult (neutral score 50 when there is no weight)
    """
    support: list[float] = []
    refute: list[float] = []
    nuance: list[float] = []
    insufficient_count = 0

    for link in links:
        if isinstance(link, EvidenceLink):
            link = link.weighted()

        weight = link.quality_score * link.confidence
        stance = getattr(link.stance, "value", link.stance)

        if stance == Stance.SUPPORT.value:
            support.append(weight)
        elif stance == Stance.REFUTE.value:
            refute.append(weight)
        elif stance == Stance.NUANCE.value:
            nuance.append(weight * NUANCE_WEIGHT_FACTOR)
        elif stance == Stance.INSUFFICIENT.value:
            insufficient_count += 1
        else:
            logger.warning(f"Ignoring link with unknown stance {link.stance!r}")

    # fsum is exact, which keeps the result independent of link order
    support_weight = math.fsum(support)
    refute_weight = math.fsum(refute)
    nuance_weight = math.fsum(nuance)
    total_weight = math.fsum([support_weight, refute_weight, nuance_weight])

    adjusted_support = support_weight + nuance_weight * NUANCE_SPLIT
    adjusted_refute = refute_weight + nuance_weight * NUANCE_SPLIT
    denominator = adjusted_support + adjusted_refute

    evidence_truth_score = NEUTRAL_TRUTH_SCORE
    if denominator > 0:
        evidence_truth_score = round_half_up(adjusted_support / denominator * 100)

    breakdown = StanceBreakdown(
        supports=len(support),
        refutes=len(refute),
        nuances=len(nuance),
        insufficient=insufficient_count,
    )

    logger.debug(
        f"Preponderance over {breakdown.total} links: "
        f"score={evidence_truth_score}, total_weight={total_weight:.2f}"
    )

    return PreponderanceResult(
        evidence_truth_score=evidence_truth_score,
        total_weight=total_weight,
        support_weight=support_weight,
        refute_weight=refute_weight,
        nuance_weight=nuance_weight,
        breakdown=breakdown,
    )


def aggregate_for_target(
    links: Iterable[EvidenceLink],
    target_id: int | str,
) -> PreponderanceResult:
    """
    Calculate the preponderance of evidence for one task claim.

    Args:
        links: Evidence links for any number of task claims
        target_id: ID of the task claim to aggregate

    Returns:
        PreponderanceResult over the links to target_id
    """
    return aggregate_preponderance(
        link for link in links if link.targets(target_id)
    )
