"""
Ranking of references and reference claims for a task claim.

Candidates with an evidence link always come before candidates without one.
Linked candidates are ordered by relevance, unlinked ones by recency.
"""

import logging
from typing import Iterable, Sequence

from evidence_scoring.config import DEFAULT_TOP_LIMIT, DEFAULT_LINK_RATIO
from evidence_scoring.domain.models import Candidate, EnrichedCandidate, EvidenceLink, id_key
from evidence_scoring.scoring.relevance import compute_relevance

logger = logging.getLogger(__name__)


def _links_for_target(
    links: Iterable[EvidenceLink],
    target_id: int | str,
) -> dict[str, EvidenceLink]:
    """Index links to one task claim by source, keeping the first per source."""
    index: dict[str, EvidenceLink] = {}
    for link in links:
        if link.targets(target_id):
            index.setdefault(id_key(link.source_id), link)
    return index


def enrich(
    candidates: Iterable[Candidate],
    target_id: int | str,
    links: Iterable[EvidenceLink],
) -> list[EnrichedCandidate]:
    """
    Attach the relevance of each candidate's link to a task claim.

    Args:
        candidates: References or reference claims to enrich
        target_id: ID of the task claim
        links: All known evidence links

    Returns:
        Enriched candidates in input order
    """
    index = _links_for_target(links, target_id)

    enriched = []
    for candidate in candidates:
        link = index.get(id_key(candidate.id))
        if link is None:
            enriched.append(EnrichedCandidate(candidate=candidate))
            continue

        enriched.append(EnrichedCandidate(
            candidate=candidate,
            relevance_score=compute_relevance(link),
            stance=link.stance,
            confidence=link.confidence,
            support_level=link.support_level,
            rationale=link.rationale,
            has_link=True,
        ))

    return enriched


def _rank_key(item: EnrichedCandidate) -> tuple[int, float]:
    if item.has_link:
        return (0, -item.relevance_score)

    created_at = item.candidate.created_at
    # Missing timestamps count as oldest
    timestamp = created_at.timestamp() if created_at else float("-inf")
    return (1, -timestamp)


def rank(enriched: Iterable[EnrichedCandidate]) -> list[EnrichedCandidate]:
    """
    Order enriched candidates by evidentiary value.

    Linked candidates come first, by descending relevance. Unlinked
    candidates follow, newest first. Ties keep their input order.

    Args:
        enriched: Candidates from enrich()

    Returns:
        New sorted list (the input is not modified)
    """
    return sorted(enriched, key=_rank_key)


def enrich_and_rank(
    candidates: Iterable[Candidate],
    target_id: int | str,
    links: Iterable[EvidenceLink],
) -> list[EnrichedCandidate]:
    """Enrich candidates for a task claim and return them ranked."""
    ranked = rank(enrich(candidates, target_id, links))
    logger.debug(
        f"Ranked {len(ranked)} candidates for task claim {target_id} "
        f"({sum(1 for c in ranked if c.has_link)} linked)"
    )
    return ranked


def top_relevant(
    enriched: Iterable[EnrichedCandidate],
    limit: int = DEFAULT_TOP_LIMIT,
) -> list[EnrichedCandidate]:
    """
    Get the most relevant candidates.

    Args:
        enriched: Candidates from enrich()
        limit: Maximum number to return

    Returns:
        The first `limit` candidates of the ranked order
    """
    return rank(enriched)[:limit]


def needs_more_evidence(
    candidates: Sequence[Candidate],
    target_id: int | str,
    links: Iterable[EvidenceLink],
    ratio: float = DEFAULT_LINK_RATIO,
) -> bool:
    """
    Check whether too few candidates are linked to a task claim.

    Args:
        candidates: References or reference claims for the task
        target_id: ID of the task claim
        links: All known evidence links
        ratio: Minimum fraction of candidates that should be linked

    Returns:
        True if the linked fraction is below ratio (False for no candidates)
    """
    if not candidates:
        return False

    index = _links_for_target(links, target_id)
    linked_count = sum(1 for candidate in candidates if id_key(candidate.id) in index)

    return linked_count / len(candidates) < ratio
