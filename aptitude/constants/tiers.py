"""
Tier and Classification Constants
aptitude/constants/tiers.py

Two independent step functions over a percentage in [0, 100]:

    Tier (5 levels)                     Classification (5 bands)
    [0, 40)   → 1 Novice                [0, 45)   → critical-weakness
    [40, 55)  → 2 Beginner              [45, 60)  → weakness
    [55, 70)  → 3 Intermediate          [60, 75)  → adequate
    [70, 85)  → 4 Advanced              [75, 85)  → strength
    [85, 100] → 5 Expert                [85, 100] → exceptional

Lower bounds are inclusive. Percentages outside [0, 100] are clamped before
lookup; NaN is rejected.
"""

import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

import structlog

from aptitude.models.enumerations import (
    PerformanceClassification,
    ReadinessLevel,
    TierRank,
)
from aptitude.scoring.utils import clamp

logger = structlog.get_logger(__name__)

MIN_TIER = 1
MAX_TIER = 5


@dataclass(frozen=True)
class TierDefinition:
    level: int
    rank: TierRank
    min_percentage: float
    max_percentage: float
    description: str


TIER_DEFINITIONS: Mapping[int, TierDefinition] = MappingProxyType({
    5: TierDefinition(5, TierRank.EXPERT, 85.0, 100.0,
                      "Exceptional aptitude, ready for complex challenges"),
    4: TierDefinition(4, TierRank.ADVANCED, 70.0, 84.0,
                      "Strong aptitude, capable of independent work"),
    3: TierDefinition(3, TierRank.INTERMEDIATE, 55.0, 69.0,
                      "Solid foundation, needs guidance on complex tasks"),
    2: TierDefinition(2, TierRank.BEGINNER, 40.0, 54.0,
                      "Basic understanding, requires significant training"),
    1: TierDefinition(1, TierRank.NOVICE, 0.0, 39.0,
                      "Foundational development needed"),
})

# (lower bound, classification), highest band first
CLASSIFICATION_THRESHOLDS: Tuple[Tuple[float, PerformanceClassification], ...] = (
    (85.0, PerformanceClassification.EXCEPTIONAL),
    (75.0, PerformanceClassification.STRENGTH),
    (60.0, PerformanceClassification.ADEQUATE),
    (45.0, PerformanceClassification.WEAKNESS),
    (0.0, PerformanceClassification.CRITICAL_WEAKNESS),
)

READINESS_THRESHOLDS: Tuple[Tuple[float, ReadinessLevel], ...] = (
    (85.0, ReadinessLevel.HIGH),
    (70.0, ReadinessLevel.MEDIUM),
    (0.0, ReadinessLevel.LOW),
)


def normalize_percentage(percentage: float) -> float:
    """Clamp a percentage into [0, 100]; NaN raises ValueError."""
    value = float(percentage)
    if math.isnan(value):
        raise ValueError("percentage must be a number, got NaN")
    clamped = clamp(value, 0.0, 100.0)
    if clamped != value:
        logger.warning("percentage_clamped", percentage=value, clamped=clamped)
    return clamped


def get_tier_from_percentage(percentage: float) -> int:
    """
    Map a percentage to a tier level 1-5.

    Examples:
        >>> get_tier_from_percentage(85.0)
        5
        >>> get_tier_from_percentage(84.99)
        4
    """
    pct = normalize_percentage(percentage)
    for level in range(MAX_TIER, MIN_TIER - 1, -1):
        if pct >= TIER_DEFINITIONS[level].min_percentage:
            return level
    return MIN_TIER


def get_tier_rank(tier: int) -> TierRank:
    """Rank label for a tier level."""
    return TIER_DEFINITIONS[tier].rank


def get_tier_definition(tier: int) -> TierDefinition:
    return TIER_DEFINITIONS[tier]


def get_performance_classification(percentage: float) -> PerformanceClassification:
    """Map a percentage to one of the 5 performance bands."""
    pct = normalize_percentage(percentage)
    for lower, classification in CLASSIFICATION_THRESHOLDS:
        if pct >= lower:
            return classification
    return PerformanceClassification.CRITICAL_WEAKNESS


def get_next_tier_threshold(current_tier: int) -> Optional[float]:
    """Lower bound of the next tier, or None at the top tier."""
    if current_tier >= MAX_TIER:
        return None
    return TIER_DEFINITIONS[current_tier + 1].min_percentage


def get_distance_to_next_tier(percentage: float, current_tier: int) -> float:
    next_threshold = get_next_tier_threshold(current_tier)
    if next_threshold is None:
        return 0.0
    return max(0.0, next_threshold - percentage)


@dataclass(frozen=True)
class TierProgression:
    current_tier: int
    current_rank: TierRank
    current_percentage: float
    next_tier: Optional[int]
    next_rank: Optional[TierRank]
    next_threshold: Optional[float]
    distance_to_next: float
    progress_percentage: float  # progress within the current tier, 0-100


def get_tier_progression(percentage: float) -> TierProgression:
    """Where a percentage sits inside its tier and how far the next tier is."""
    pct = normalize_percentage(percentage)
    current_tier = get_tier_from_percentage(pct)
    current_def = TIER_DEFINITIONS[current_tier]
    next_tier = None if current_tier == MAX_TIER else current_tier + 1
    next_def = TIER_DEFINITIONS[next_tier] if next_tier else None

    tier_range = current_def.max_percentage - current_def.min_percentage
    progress_in_tier = pct - current_def.min_percentage
    progress = (progress_in_tier / tier_range * 100) if tier_range > 0 else 100.0

    return TierProgression(
        current_tier=current_tier,
        current_rank=current_def.rank,
        current_percentage=pct,
        next_tier=next_tier,
        next_rank=next_def.rank if next_def else None,
        next_threshold=next_def.min_percentage if next_def else None,
        distance_to_next=max(0.0, next_def.min_percentage - pct) if next_def else 0.0,
        progress_percentage=clamp(progress, 0.0, 100.0),
    )


def get_readiness_level(percentage: float) -> ReadinessLevel:
    """Role readiness: >=85 high, >=70 medium, otherwise low."""
    pct = normalize_percentage(percentage)
    for lower, level in READINESS_THRESHOLDS:
        if pct >= lower:
            return level
    return ReadinessLevel.LOW
