"""
analysis/tier_classifier.py

Classification helpers over raw percentages: single-score classification,
distributions across many scores, and score-to-score comparison.
"""

from dataclasses import dataclass
from typing import Dict, List, Sequence

from aptitude.constants.tiers import (
    TIER_DEFINITIONS,
    TierDefinition,
    TierProgression,
    get_performance_classification,
    get_tier_definition,
    get_tier_from_percentage,
    get_tier_progression,
    get_tier_rank,
)
from aptitude.models.enumerations import PerformanceClassification, TierRank


@dataclass(frozen=True)
class ScoreClassification:
    percentage: float
    tier: int
    rank: TierRank
    classification: PerformanceClassification
    tier_definition: TierDefinition
    progression: TierProgression


@dataclass(frozen=True)
class DistributionBucket:
    count: int
    percentage: float


@dataclass(frozen=True)
class ScoreComparison:
    score1: float
    score2: float
    difference: float
    percent_change: float
    tier1: int
    tier2: int
    tier_change: int
    improved: bool
    tier_upgrade: bool


def classify_score(percentage: float) -> ScoreClassification:
    """Tier, rank, classification and progression for one percentage."""
    tier = get_tier_from_percentage(percentage)
    return ScoreClassification(
        percentage=percentage,
        tier=tier,
        rank=get_tier_rank(tier),
        classification=get_performance_classification(percentage),
        tier_definition=get_tier_definition(tier),
        progression=get_tier_progression(percentage),
    )


def classify_scores(percentages: Sequence[float]) -> List[ScoreClassification]:
    return [classify_score(p) for p in percentages]


def _bucketize(counts: Dict, total: int) -> Dict:
    return {
        key: DistributionBucket(count=n, percentage=(n / total * 100) if total else 0.0)
        for key, n in counts.items()
    }


def get_tier_distribution(percentages: Sequence[float]) -> Dict[int, DistributionBucket]:
    """Count and share of scores per tier (all five tiers always present)."""
    counts = {level: 0 for level in sorted(TIER_DEFINITIONS)}
    for p in percentages:
        counts[get_tier_from_percentage(p)] += 1
    return _bucketize(counts, len(percentages))


def get_classification_distribution(
    percentages: Sequence[float],
) -> Dict[PerformanceClassification, DistributionBucket]:
    """Count and share of scores per performance band."""
    counts = {c: 0 for c in PerformanceClassification}
    for p in percentages:
        counts[get_performance_classification(p)] += 1
    return _bucketize(counts, len(percentages))


def compare_scores(score1: float, score2: float) -> ScoreComparison:
    """
    Compare an earlier score with a later one.

    Examples:
        >>> compare_scores(50.0, 72.0).tier_change
        2
    """
    difference = score2 - score1
    tier1 = get_tier_from_percentage(score1)
    tier2 = get_tier_from_percentage(score2)
    return ScoreComparison(
        score1=score1,
        score2=score2,
        difference=difference,
        percent_change=(difference / score1 * 100) if score1 != 0 else 0.0,
        tier1=tier1,
        tier2=tier2,
        tier_change=tier2 - tier1,
        improved=difference > 0,
        tier_upgrade=tier2 > tier1,
    )
