"""
Tests for the preponderance aggregator.

Run with: pytest tests/test_preponderance.py -v
"""

import itertools

import pytest

from evidence_scoring.domain.models import Stance, EvidenceLink, WeightedLink
from evidence_scoring.scoring.preponderance import (
    aggregate_preponderance,
    aggregate_for_target,
)


def weighted(stance: str, confidence: float, quality: float) -> WeightedLink:
    """Create a preponderance input."""
    return WeightedLink(stance=stance, confidence=confidence, quality_score=quality)


class TestAggregatePreponderance:
    """Tests for aggregate_preponderance()."""

    def test_empty_is_neutral(self):
        """Test no links gives the neutral prior."""
        result = aggregate_preponderance([])

        assert result.evidence_truth_score == 50
        assert result.total_weight == 0
        assert result.support_weight == 0
        assert result.refute_weight == 0
        assert result.nuance_weight == 0
        assert result.breakdown.total == 0

    def test_equal_opposing_weight(self):
        """Test equal support and refute weight balances at 50."""
        result = aggregate_preponderance([
            weighted("support", 1, 100),
            weighted("refute", 1, 100),
        ])

        assert result.evidence_truth_score == 50
        assert result.support_weight == 100
        assert result.refute_weight == 100
        assert result.total_weight == 200
        assert result.breakdown.supports == 1
        assert result.breakdown.refutes == 1

    def test_single_support(self):
        """Test a lone supporting link scores 100."""
        result = aggregate_preponderance([weighted("support", 0.8, 90)])

        assert result.evidence_truth_score == 100
        assert result.support_weight == pytest.approx(72.0)
        assert result.refute_weight == 0

    def test_single_refute(self):
        """Test a lone refuting link scores 0."""
        result = aggregate_preponderance([weighted("refute", 0.5, 60)])

        assert result.evidence_truth_score == 0
        assert result.refute_weight == pytest.approx(30.0)

    def test_nuance_counts_half_split_evenly(self):
        """Test nuance adds half weight, split between both sides."""
        result = aggregate_preponderance([
            weighted("support", 1, 100),
            weighted("nuance", 1, 100),
        ])

        # support 100 + 25, refute 0 + 25
        assert result.nuance_weight == pytest.approx(50.0)
        assert result.total_weight == pytest.approx(150.0)
        assert result.evidence_truth_score == 83
        assert result.breakdown.nuances == 1

    def test_only_nuance_is_balanced(self):
        """Test nuance alone lands on 50 with weight."""
        result = aggregate_preponderance([weighted("nuance", 1, 80)])

        assert result.evidence_truth_score == 50
        assert result.has_signal

    def test_insufficient_counted_without_weight(self):
        """Test insufficient links are counted but add no weight."""
        result = aggregate_preponderance([
            weighted("insufficient", 1, 120),
            weighted("insufficient", 0.9, 100),
        ])

        assert result.evidence_truth_score == 50
        assert result.total_weight == 0
        assert result.breakdown.insufficient == 2
        assert not result.has_signal

    def test_insufficient_does_not_shift_score(self):
        """Test adding insufficient links leaves the score unchanged."""
        base = [weighted("support", 0.7, 80), weighted("refute", 0.4, 100)]

        without = aggregate_preponderance(base)
        with_insufficient = aggregate_preponderance(base + [weighted("insufficient", 1, 120)])

        assert without.evidence_truth_score == with_insufficient.evidence_truth_score
        assert without.total_weight == with_insufficient.total_weight

    def test_zero_confidence_is_no_signal(self):
        """Test links with zero weight fall back to the neutral score."""
        result = aggregate_preponderance([weighted("support", 0, 100)])

        assert result.evidence_truth_score == 50
        assert result.breakdown.supports == 1

    def test_rounds_half_up(self):
        """Test a 62.5 split rounds up to 63."""
        result = aggregate_preponderance([
            weighted("support", 1, 62.5),
            weighted("refute", 1, 37.5),
        ])

        assert result.evidence_truth_score == 63

    def test_order_independent(self):
        """Test every permutation of the links gives an identical result."""
        links = [
            weighted("support", 0.83, 97.3),
            weighted("refute", 0.61, 44.1),
            weighted("nuance", 0.77, 113.9),
            weighted("support", 0.1, 0.3),
            weighted("insufficient", 0.5, 50),
        ]

        results = {aggregate_preponderance(order) for order in itertools.permutations(links)}

        assert len(results) == 1

    def test_accepts_evidence_links(self):
        """Test full evidence links are projected onto their weights."""
        link = EvidenceLink(
            source_id=1,
            target_id=2,
            stance=Stance.SUPPORT,
            confidence=0.5,
            quality_score=100,
            support_level=-1.2,
        )

        result = aggregate_preponderance([link, weighted("refute", 1, 50)])

        assert result.support_weight == pytest.approx(50.0)
        assert result.evidence_truth_score == 50

    def test_unknown_stance_evidence_link_ignored(self, caplog):
        """Test an evidence link with an unknown stance adds no weight."""
        unknown = EvidenceLink.model_construct(
            source_id=1,
            target_id=7,
            stance="sideways",
            confidence=1.0,
            quality_score=100,
            support_level=1.0,
        )
        support = EvidenceLink(
            source_id=2, target_id=7, stance="support", confidence=0.5, quality_score=80
        )

        with caplog.at_level("WARNING"):
            result = aggregate_preponderance([unknown, support])

        assert result.evidence_truth_score == 100
        assert result.total_weight == pytest.approx(40.0)
        assert result.breakdown.total == 1
        assert "sideways" in caplog.text

    def test_support_level_does_not_affect_weight(self):
        """Test preponderance ignores support_level."""
        base = dict(source_id=1, target_id=2, stance="support", confidence=1.0, quality_score=80)

        weak = aggregate_preponderance([EvidenceLink(support_level=0.1, **base)])
        strong = aggregate_preponderance([EvidenceLink(support_level=1.2, **base)])

        assert weak == strong

    def test_accepts_generator(self):
        """Test links can be any iterable."""
        result = aggregate_preponderance(weighted("support", 1, 10) for _ in range(3))

        assert result.breakdown.supports == 3
        assert result.support_weight == pytest.approx(30.0)


class TestAggregateForTarget:
    """Tests for aggregate_for_target()."""

    def test_filters_by_task_claim(self):
        """Test only links to the requested task claim are aggregated."""
        links = [
            EvidenceLink(source_id=1, target_id=7, stance="support", confidence=1, quality_score=100),
            EvidenceLink(source_id=2, target_id=8, stance="refute", confidence=1, quality_score=100),
        ]

        result = aggregate_for_target(links, 7)

        assert result.evidence_truth_score == 100
        assert result.breakdown.refutes == 0

    def test_no_links_for_target(self):
        """Test a task claim without links is neutral."""
        links = [
            EvidenceLink(source_id=1, target_id=8, stance="refute", confidence=1, quality_score=100),
        ]

        result = aggregate_for_target(links, 7)

        assert result.evidence_truth_score == 50
        assert result.total_weight == 0

    def test_mixed_id_types(self):
        """Test string and numeric task claim IDs match."""
        links = [
            EvidenceLink(source_id="1", target_id="7", stance="support", confidence=1, quality_score=100),
            EvidenceLink(source_id=2, target_id=7, stance="refute", confidence=1, quality_score=50),
        ]

        by_int = aggregate_for_target(links, 7)
        by_str = aggregate_for_target(links, "7")

        assert by_int == by_str
        assert by_int.breakdown.total == 2
        assert by_int.evidence_truth_score == 67


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
