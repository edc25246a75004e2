"""
Data models for evidence scoring.

Defines evidence links, ranking candidates and the result value objects
using Pydantic. Every model is frozen: results are created fresh by each
computation and can be shared, compared and hashed freely.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class Stance(str, Enum):
    """
    How a reference claim relates to a task claim.

    - SUPPORT: The reference claim backs the task claim.
    - REFUTE: The reference claim contradicts the task claim.
    - NUANCE: The reference claim qualifies or partially agrees.
    - INSUFFICIENT: The reference claim says too little to judge.
    """
    SUPPORT = "support"
    REFUTE = "refute"
    NUANCE = "nuance"
    INSUFFICIENT = "insufficient"


# Documented input domains. Nothing in the scoring modules enforces these;
# see evidence_scoring.domain.validation.
CONFIDENCE_RANGE = (0.0, 1.0)
QUALITY_SCORE_RANGE = (0.0, 120.0)
SUPPORT_LEVEL_RANGE = (-1.2, 1.2)
VERACITY_RANGE = (-100.0, 100.0)


def id_key(value: int | str) -> str:
    """
    Normalize a claim or reference ID for matching.

    Exports mix numeric and string IDs for the same record, so 7 and "7"
    must match.
    """
    return str(value)


class DirectionalLink(BaseModel):
    """
    The part of an evidence link that relevance ranking reads.

    Relevance measures directional magnitude, so it uses support_level.
    """

    stance: Stance = Field(description="Stance of the reference claim")
    confidence: float = Field(description="Confidence in the assessment (0-1)")
    support_level: float = Field(
        description="Signed strength of the stance (-1.2 to 1.2)"
    )

    class Config:
        frozen = True
        use_enum_values = True


class WeightedLink(BaseModel):
    """
    The part of an evidence link that the preponderance aggregator reads.

    Preponderance measures evidentiary strength, so it uses quality_score.
    """

    stance: Stance = Field(description="Stance of the reference claim")
    confidence: float = Field(description="Confidence in the assessment (0-1)")
    quality_score: float = Field(
        description="Quality of the evidence x 100 (0-120)"
    )

    class Config:
        frozen = True
        use_enum_values = True


class EvidenceLink(BaseModel):
    """
    An assessed link between a reference claim and a task claim.

    Produced upstream by a human or an AI assessment and replaced
    wholesale on re-assessment.
    """

    source_id: int | str = Field(
        description="ID of the reference claim or reference content"
    )
    target_id: int | str = Field(
        description="ID of the task claim under fact-check"
    )
    stance: Stance = Field(
        description="How the reference relates to the task claim"
    )
    confidence: float = Field(
        description="Confidence in the assessment (0-1)"
    )
    quality_score: float = Field(
        default=0.0,
        description="Quality of the evidence x 100 (0-120)"
    )
    support_level: float = Field(
        default=0.0,
        description="Signed strength of the stance (-1.2 to 1.2)"
    )
    rationale: str | None = Field(
        default=None,
        description="Why the assessor chose this stance"
    )
    quote: str | None = Field(
        default=None,
        description="Supporting excerpt from the reference"
    )
    created_by_ai: bool = Field(
        default=False,
        description="Whether an AI assessment produced the link"
    )
    created_at: datetime | None = Field(
        default=None,
        description="When the link was assessed"
    )

    class Config:
        frozen = True
        use_enum_values = True

    def directional(self) -> DirectionalLink:
        """Project onto the fields used for relevance scoring."""
        # Fields were validated on this link; an unknown stance that got past
        # validation must reach the scorer's fallback instead of raising here
        return DirectionalLink.model_construct(
            stance=self.stance,
            confidence=self.confidence,
            support_level=self.support_level,
        )

    def weighted(self) -> WeightedLink:
        """Project onto the fields used for preponderance."""
        return WeightedLink.model_construct(
            stance=self.stance,
            confidence=self.confidence,
            quality_score=self.quality_score,
        )

    def targets(self, target_id: int | str) -> bool:
        """Check if this link points at the given task claim."""
        return id_key(self.target_id) == id_key(target_id)


class Candidate(BaseModel):
    """A reference or reference claim that can be ranked for a task claim."""

    id: int | str = Field(description="ID matched against EvidenceLink.source_id")
    text: str | None = Field(
        default=None,
        description="Claim text or reference title, for display"
    )
    created_at: datetime | None = Field(
        default=None,
        description="Creation time, used to order unlinked candidates"
    )

    class Config:
        frozen = True


class EnrichedCandidate(BaseModel):
    """A candidate with the relevance of its link to one task claim."""

    candidate: Candidate
    relevance_score: float = 0.0
    # str admits a link stance that bypassed validation; it was scored at 0.5
    stance: Stance | str | None = None
    confidence: float | None = None
    support_level: float | None = None
    rationale: str | None = None
    has_link: bool = False

    class Config:
        frozen = True
        use_enum_values = True


class StanceBreakdown(BaseModel):
    """Number of links that fell into each stance bucket."""

    supports: int = 0
    refutes: int = 0
    nuances: int = 0
    insufficient: int = 0

    class Config:
        frozen = True

    @property
    def total(self) -> int:
        return self.supports + self.refutes + self.nuances + self.insufficient


class PreponderanceResult(BaseModel):
    """
    What the evidence for one task claim says overall.

    evidence_truth_score is 50 exactly when total_weight is 0.
    """

    evidence_truth_score: int = Field(
        default=50,
        description="Weighted share of supporting evidence (0-100)"
    )
    total_weight: float = 0.0
    support_weight: float = 0.0
    refute_weight: float = 0.0
    nuance_weight: float = 0.0
    breakdown: StanceBreakdown = Field(default_factory=StanceBreakdown)

    class Config:
        frozen = True

    @property
    def has_signal(self) -> bool:
        """Whether any weighted evidence contributed to the score."""
        return self.total_weight > 0


class QualityRating(BaseModel):
    """A user's quality rating for a reference claim next to the AI's."""

    user_quality: float
    ai_quality: float

    class Config:
        frozen = True


class ScoreBreakdown(BaseModel):
    accuracy: float
    honesty: float
    mind_change: float

    class Config:
        frozen = True


class TotalScore(BaseModel):
    total: float
    breakdown: ScoreBreakdown

    class Config:
        frozen = True


class UserScoreResult(BaseModel):
    """
    How well a user's final rating matched the evidence in one session.

    grade and stars derive from total only.
    """

    accuracy_score: float
    honesty_score: float
    mind_change_bonus: int
    total: float
    grade: str
    stars: int
    evidence_truth_score: int
    gap: float = Field(
        description="Distance between the user's rating and the evidence"
    )

    class Config:
        frozen = True


class PointsRange(BaseModel):
    """Best and worst points achievable for one link action."""

    best: float
    worst: float

    class Config:
        frozen = True


class SessionScoreState(BaseModel):
    """
    Running game score for one interactive session.

    Never mutated: apply_points() returns a new state.
    """

    total: float = 0.0
    actions: int = 0

    class Config:
        frozen = True
