"""
Result value objects produced by the scoring pipeline.

All results are frozen dataclasses built fresh on each scoring pass and never
mutated afterwards. Collections are tuples for the same reason.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from aptitude.models.enumerations import (
    Category,
    ImprovementPotential,
    PerformanceClassification,
    PerformanceProfile,
    QuestionType,
    ReadinessLevel,
    TierRank,
)


@dataclass(frozen=True)
class PartialCreditDetails:
    """Selection breakdown for a multipleSelect question."""
    correct_selections: int
    incorrect_selections: int
    missed_selections: int
    correct_ratio: float      # [0, 1]
    penalty_factor: float     # [0, 1]


@dataclass(frozen=True)
class QuestionResult:
    """Output of QuestionScorer.score()."""
    question_id: str
    category: Category
    type: QuestionType
    user_answers: Tuple[int, ...]
    correct_answers: Tuple[int, ...]
    earned_points: float
    max_points: float
    percentage: float                # [0, 100]
    is_correct: bool
    is_partial_credit: bool
    weight: float
    partial_credit: Optional[PartialCreditDetails] = None  # multipleSelect only
    time_spent: Optional[float] = None


@dataclass(frozen=True)
class CategoryResult:
    """Output of CategoryAggregator.aggregate()."""
    name: Category
    code: str
    earned_points: float
    max_points: float
    percentage: float                # [0, 100]
    total_weight: float              # Σ question weights
    weighted_contribution: float     # 0 until apply_weighted_contributions()
    tier: int
    rank: TierRank
    classification: PerformanceClassification
    question_count: int
    correct_count: int
    partial_credit_count: int
    incorrect_count: int
    questions: Tuple[str, ...]


@dataclass(frozen=True)
class CategorySummary:
    name: Category
    percentage: float
    tier: int
    question_count: int


@dataclass(frozen=True)
class OverallResult:
    """Output of OverallScorer.compute_overall()."""
    score: float          # weighted percentage, same as percentage
    max_possible: float   # raw Σ max points
    earned_points: float  # raw Σ earned points
    percentage: float
    tier: int
    rank: TierRank


@dataclass(frozen=True)
class ConsistencyMetrics:
    mean: float
    standard_deviation: float
    coefficient_of_variation: float  # percent
    range: float
    consistency_score: float         # [0, 100]


@dataclass(frozen=True)
class PerformanceAnalysis:
    """Output of PerformanceAnalyzer.analyze()."""
    exceptional: Tuple[CategorySummary, ...] = ()
    strengths: Tuple[CategorySummary, ...] = ()
    adequate: Tuple[CategorySummary, ...] = ()
    weaknesses: Tuple[CategorySummary, ...] = ()
    critical_weaknesses: Tuple[CategorySummary, ...] = ()
    consistency_score: float = 0.0
    improvement_potential: ImprovementPotential = ImprovementPotential.MEDIUM


@dataclass(frozen=True)
class ProfileAnalysis:
    profile: PerformanceProfile
    description: str
    characteristics: Tuple[str, ...]
    approach: str


# ---------------------------------------------------------------------------
# Recommendation payload (filled by an external recommender)
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class RoleSuitability:
    assessment: str = ""
    timeline: str = ""
    readiness_level: ReadinessLevel = ReadinessLevel.MEDIUM


@dataclass(frozen=True)
class CareerRecommendation:
    path: str
    match_reason: str
    relevant_strengths: Tuple[str, ...] = ()
    required_skills: Tuple[str, ...] = ()
    priority: str = "secondary"   # primary | secondary | alternative


@dataclass(frozen=True)
class FocusArea:
    category: Category
    priority: str                 # critical | high | medium | low
    current_score: float
    target_score: float
    reason: str
    estimated_effort: str


@dataclass(frozen=True)
class LearningResource:
    category: Category
    type: str                     # course | practice | reading | exercise | project
    title: str
    description: str
    difficulty: str               # beginner | intermediate | advanced
    url: Optional[str] = None
    duration: Optional[str] = None


@dataclass(frozen=True)
class RecommendationSet:
    career_paths: Tuple[CareerRecommendation, ...] = ()
    focus_areas: Tuple[FocusArea, ...] = ()
    learning_resources: Tuple[LearningResource, ...] = ()
    next_steps: Tuple[str, ...] = ()
    role_suitability: RoleSuitability = field(default_factory=RoleSuitability)
