"""
Tests for user performance scoring.

Run with: pytest tests/test_performance.py -v
"""

import pytest

from evidence_scoring.domain.models import QualityRating, WeightedLink
from evidence_scoring.scoring.preponderance import aggregate_preponderance
from evidence_scoring.scoring.performance import (
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


@pytest.fixture
def balanced_evidence():
    """Preponderance with equal support and refute weight (score 50)."""
    return aggregate_preponderance([
        WeightedLink(stance="support", confidence=1, quality_score=100),
        WeightedLink(stance="refute", confidence=1, quality_score=100),
    ])


@pytest.fixture
def session_ratings():
    """Quality ratings from one session."""
    return [
        QualityRating(user_quality=90, ai_quality=85),
        QualityRating(user_quality=60, ai_quality=60),
    ]


class TestAccuracy:
    """Tests for score_accuracy()."""

    @pytest.mark.parametrize("value", [0, 25, 50, 99.5, 100])
    def test_exact_match(self, value):
        """Test matching the evidence scores 100."""
        assert score_accuracy(value, value) == 100

    def test_opposite_ends(self):
        """Test the largest possible gap scores 0."""
        assert score_accuracy(0, 100) == 0
        assert score_accuracy(100, 0) == 0

    def test_gap(self):
        """Test accuracy drops one point per point of gap."""
        assert score_accuracy(70, 50) == 80
        assert score_accuracy(30, 50) == 80

    def test_never_negative(self):
        """Test out-of-range ratings floor at 0."""
        assert score_accuracy(250, 0) == 0


class TestMindChange:
    """Tests for score_mind_change()."""

    def test_small_shift_no_bonus(self):
        """Test a shift of 20 or less earns nothing."""
        assert score_mind_change(30, 50, 50) == 0
        assert score_mind_change(50, 50, 0) == 0

    def test_shift_toward_evidence(self):
        """Test a large shift toward the evidence earns 75."""
        assert score_mind_change(30, 60, 50) == 75

    def test_shift_away_from_evidence(self):
        """Test a large shift away from the evidence still earns 25."""
        assert score_mind_change(60, 20, 80) == 25

    def test_overshoot_with_equal_gap(self):
        """Test landing the same distance away on the other side earns 25."""
        # gap 20 before and after: not strictly closer
        assert score_mind_change(30, 70, 50) == 25

    def test_just_over_threshold(self):
        """Test a shift just over 20 counts."""
        assert score_mind_change(0, 20.5, 100) == 75


class TestHonesty:
    """Tests for score_honesty() and score_rating_honesty()."""

    def test_single_rating(self):
        """Test one rating scores by its gap."""
        assert score_rating_honesty(90, 85) == 95
        assert score_rating_honesty(0, 120) == 0

    def test_empty(self):
        """Test no ratings scores 0."""
        assert score_honesty([]) == 0

    def test_average_rounds_half_up(self, session_ratings):
        """Test (95 + 100) / 2 = 97.5 rounds to 98."""
        assert score_honesty(session_ratings) == 98

    def test_all_honest(self):
        """Test matching every AI rating scores 100."""
        ratings = [QualityRating(user_quality=q, ai_quality=q) for q in (10, 50, 110)]
        assert score_honesty(ratings) == 100


class TestTotalAndGrades:
    """Tests for score_total(), grade_for() and stars_for()."""

    def test_total_is_plain_sum(self):
        """Test totals add up with a breakdown."""
        result = score_total(80, 98, 75)

        assert result.total == 253
        assert result.breakdown.accuracy == 80
        assert result.breakdown.honesty == 98
        assert result.breakdown.mind_change == 75

    def test_total_not_capped(self):
        """Test totals may exceed 250."""
        assert score_total(100, 100, 75).total == 275

    @pytest.mark.parametrize("total,grade", [
        (275, "A+"),
        (250, "A+"),
        (249.9, "A"),
        (225, "A"),
        (200, "B+"),
        (175, "B"),
        (150, "C+"),
        (125, "C"),
        (100, "D"),
        (99, "F"),
        (0, "F"),
    ])
    def test_grade_thresholds(self, total, grade):
        """Test grade thresholds are inclusive lower bounds."""
        assert grade_for(total) == grade

    @pytest.mark.parametrize("average,stars", [
        (300, 5),
        (250, 5),
        (200, 4),
        (199, 3),
        (150, 3),
        (100, 2),
        (99, 1),
        (0, 1),
        (-10, 1),
    ])
    def test_star_thresholds(self, average, stars):
        """Test stars never drop below 1."""
        assert stars_for(average) == stars


class TestScoreUser:
    """Tests for the composed session score."""

    def test_components_from_worked_example(self, session_ratings):
        """Test accuracy 80 + honesty 98 + mind change 75 grades A+."""
        accuracy = score_accuracy(70, 50)
        honesty = score_honesty(session_ratings)
        mind_change = score_mind_change(30, 60, 50)

        total = score_total(accuracy, honesty, mind_change).total

        assert (accuracy, honesty, mind_change) == (80, 98, 75)
        assert total == 253
        assert grade_for(total) == "A+"

    def test_score_user(self, balanced_evidence, session_ratings):
        """Test the composed result carries every component."""
        result = score_user(
            user_rating=55,
            prior_belief=20,
            preponderance=balanced_evidence,
            ratings=session_ratings,
        )

        assert result.evidence_truth_score == 50
        assert result.gap == 5
        assert result.accuracy_score == 95
        assert result.honesty_score == 98
        assert result.mind_change_bonus == 75
        assert result.total == 268
        assert result.grade == "A+"
        assert result.stars == 5

    def test_score_user_without_ratings(self, balanced_evidence):
        """Test a session with no quality ratings."""
        result = score_user(90, 85, balanced_evidence)

        assert result.honesty_score == 0
        assert result.mind_change_bonus == 0
        assert result.total == 60
        assert result.grade == "F"
        assert result.stars == 1

    def test_total_is_sum_of_components(self, balanced_evidence, session_ratings):
        """Test the total never drifts from its components."""
        result = score_user(10, 80, balanced_evidence, session_ratings)

        assert result.total == (
            result.accuracy_score + result.honesty_score + result.mind_change_bonus
        )

    def test_credibility_stars(self, balanced_evidence, session_ratings):
        """Test stars come from the average total over sessions."""
        strong = score_user(50, 10, balanced_evidence, session_ratings)   # 100 + 98 + 75
        weak = score_user(0, 0, balanced_evidence)                        # 50 + 0 + 0

        assert strong.total == 273
        assert weak.total == 50
        assert credibility_stars([strong, weak]) == 3   # average 161.5
        assert credibility_stars([strong]) == 5

    def test_credibility_stars_no_sessions(self):
        """Test a user without sessions gets 1 star."""
        assert credibility_stars([]) == 1


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
