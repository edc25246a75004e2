"""
Domain checks for scoring inputs.

The scoring functions never clamp or reject numbers outside their documented
ranges. Callers that want to catch bad upstream data run these checks first.
"""

import logging
from typing import Iterable

from .models import (
    EvidenceLink,
    CONFIDENCE_RANGE,
    QUALITY_SCORE_RANGE,
    SUPPORT_LEVEL_RANGE,
    VERACITY_RANGE,
)

logger = logging.getLogger(__name__)


class DomainValidationError(ValueError):
    """Raised by strict validation when inputs fall outside their domains."""

    def __init__(self, issues: list[str]):
        self.issues = issues
        super().__init__("; ".join(issues))


def _out_of_range(name: str, value: float, bounds: tuple[float, float]) -> str | None:
    low, high = bounds
    if value < low or value > high:
        return f"{name} {value} is out of range [{low}, {high}]"
    return None


def check_link(link: EvidenceLink) -> list[str]:
    """
    Check an evidence link's numeric fields against their domains.

    Args:
        link: The link to check

    Returns:
        List of issue strings (empty if valid)
    """
    checks = [
        _out_of_range("confidence", link.confidence, CONFIDENCE_RANGE),
        _out_of_range("quality_score", link.quality_score, QUALITY_SCORE_RANGE),
        _out_of_range("support_level", link.support_level, SUPPORT_LEVEL_RANGE),
    ]
    prefix = f"link {link.source_id}->{link.target_id}"
    return [f"{prefix}: {issue}" for issue in checks if issue]


def check_points_inputs(ai_veracity_score: float, user_stance: float) -> list[str]:
    """
    Check game point inputs against their domains.

    Args:
        ai_veracity_score: AI truth rating (-100 to 100)
        user_stance: User-assigned support level (-1.2 to 1.2)

    Returns:
        List of issue strings (empty if valid)
    """
    checks = [
        _out_of_range("ai_veracity_score", ai_veracity_score, VERACITY_RANGE),
        _out_of_range("user_stance", user_stance, SUPPORT_LEVEL_RANGE),
    ]
    return [issue for issue in checks if issue]


def validate_links(links: Iterable[EvidenceLink], strict: bool = False) -> list[str]:
    """
    Check every link and report the issues found.

    Args:
        links: Links to check
        strict: Raise instead of only logging

    Returns:
        List of all issues (empty if every link is valid)

    Raises:
        DomainValidationError: If strict and any link is out of range
    """
    issues = []
    for link in links:
        issues.extend(check_link(link))

    for issue in issues:
        logger.warning(f"Out-of-domain evidence link: {issue}")

    if issues and strict:
        raise DomainValidationError(issues)

    return issues
