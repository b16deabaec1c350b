"""
analysis/performance_analyzer.py

Analyzes category results to find strengths and weaknesses, measure how
uniform performance is, and infer improvement potential and a profile.

Consistency:
    mean, σ      = population mean / std-dev of category percentages
    CV           = σ / mean × 100                (0 if mean = 0)
    consistency  = clamp(100 − 2 × CV, 0, 100)   (CV 0% → 100, CV ≥ 50% → 0)

Improvement potential (first match wins):
    1. overall ≥ 85                          → low
    2. overall < 60 and consistency > 70     → high
    3. overall < 70 or consistency < 50      → high
    4. otherwise                             → medium
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

import structlog

from aptitude.constants.tiers import (
    MAX_TIER,
    get_next_tier_threshold,
    get_performance_classification,
)
from aptitude.models.enumerations import (
    Category,
    ImprovementPotential,
    InsightPriority,
    PerformanceClassification,
    PerformanceProfile,
    TierRank,
)
from aptitude.models.results import (
    CategoryResult,
    CategorySummary,
    ConsistencyMetrics,
    OverallResult,
    PerformanceAnalysis,
    ProfileAnalysis,
)
from aptitude.scoring.utils import clamp, coefficient_of_variation, mean, std_dev

logger = structlog.get_logger(__name__)

# Profile rule thresholds
HIGH_PERFORMER_MIN_SCORE = 85.0
HIGH_PERFORMER_MIN_EXCEPTIONAL = 5
BALANCED_SCORE_RANGE = (70.0, 85.0)
BALANCED_MAX_VARIANCE = 2
SPECIALIST_MIN_VARIANCE = 4
DEVELOPING_SCORE_RANGE = (55.0, 70.0)

# Tier goal parameters
GOAL_FOCUS_BELOW = 75.0
GOAL_STEP = 15.0
GOAL_CAP = 85.0
GOAL_TOP_N = 3

_PROFILE_TEXT: Dict[PerformanceProfile, Tuple[str, Tuple[str, ...], str]] = {
    PerformanceProfile.HIGH_PERFORMER: (
        "Exceptional overall performance with strong skills across most areas",
        (
            "Consistently high scores",
            "Demonstrates mastery in multiple categories",
            "Ready for advanced challenges",
        ),
        "Focus on technology-specific skills and practical application",
    ),
    PerformanceProfile.BALANCED: (
        "Well-rounded performance with solid capabilities across all areas",
        (
            "Even performance distribution",
            "No major weaknesses",
            "Steady, reliable skills",
        ),
        "Build on existing foundation with structured learning",
    ),
    PerformanceProfile.SPECIALIST: (
        "High variance with clear strengths and areas needing development",
        (
            "Exceptional in some areas",
            "Struggles in others",
            "Uneven skill distribution",
        ),
        "Focus on strengthening weak areas while leveraging strengths",
    ),
    PerformanceProfile.DEVELOPING: (
        "Solid foundation with room for significant growth",
        (
            "Moderate performance",
            "Clear improvement potential",
            "Needs structured development",
        ),
        "Systematic training program targeting weak areas",
    ),
    PerformanceProfile.EARLY_STAGE: (
        "Foundational skills need development",
        (
            "Below threshold in most areas",
            "Requires intensive training",
            "Consider alternative paths",
        ),
        "Comprehensive foundational training or explore alternative roles",
    ),
}

# classification → (insight template, recommendation, priority)
_INSIGHTS: Dict[PerformanceClassification, Tuple[str, str, InsightPriority]] = {
    PerformanceClassification.EXCEPTIONAL: (
        "Outstanding performance in {name}",
        "Leverage this strength in career planning",
        InsightPriority.LOW,
    ),
    PerformanceClassification.STRENGTH: (
        "Strong capability in {name}",
        "Continue practicing to reach exceptional level",
        InsightPriority.MEDIUM,
    ),
    PerformanceClassification.ADEQUATE: (
        "Adequate performance in {name}",
        "Focus on improvement to reach strength level",
        InsightPriority.MEDIUM,
    ),
    PerformanceClassification.WEAKNESS: (
        "Needs improvement in {name}",
        "Dedicate study time to strengthen this area",
        InsightPriority.HIGH,
    ),
    PerformanceClassification.CRITICAL_WEAKNESS: (
        "Critical weakness in {name}",
        "Urgent: This requires intensive focused practice",
        InsightPriority.CRITICAL,
    ),
}


@dataclass(frozen=True)
class CategoryInsight:
    category: Category
    percentage: float
    classification: PerformanceClassification
    insight: str
    recommendation: str
    priority: InsightPriority


@dataclass(frozen=True)
class ImprovementTarget:
    category: Category
    current_score: float
    target_score: float
    impact: float          # gain in overall % if the target is reached


@dataclass(frozen=True)
class TierGoal:
    current_tier: int
    current_score: float
    next_tier: int
    next_tier_threshold: float
    points_needed: float
    categories_needing_improvement: Tuple[ImprovementTarget, ...]


@dataclass(frozen=True)
class PerformanceSummary:
    overall_score: float
    tier: int
    rank: TierRank
    top_category: Category
    top_score: float
    bottom_category: Category
    bottom_score: float
    average_category_score: float
    consistency_score: float
    improvement_potential: ImprovementPotential


def _summary(category: CategoryResult) -> CategorySummary:
    return CategorySummary(
        name=category.name,
        percentage=category.percentage,
        tier=category.tier,
        question_count=category.question_count,
    )


def empty_analysis() -> PerformanceAnalysis:
    """Placeholder analysis used when analysis is switched off."""
    return PerformanceAnalysis()


class PerformanceAnalyzer:
    """Classify categories and derive consistency, potential and profile."""

    def analyze(
        self,
        category_results: Sequence[CategoryResult],
        overall: OverallResult,
    ) -> PerformanceAnalysis:
        """
        Build the PerformanceAnalysis for a scored assessment.

        Args:
            category_results: Category results from the aggregator.
            overall: Overall result from the overall scorer.

        Returns:
            PerformanceAnalysis with five bands (each sorted by percentage,
            highest first), consistency score and improvement potential.
        """
        bands = self.classify_categories(category_results)
        consistency = self.calculate_consistency(category_results)
        potential = self.determine_improvement_potential(
            overall.percentage, consistency.consistency_score
        )

        logger.info(
            "performance_analyzed",
            overall_percentage=round(overall.percentage, 4),
            band_counts={k.value: len(v) for k, v in bands.items()},
            coefficient_of_variation=round(consistency.coefficient_of_variation, 4),
            consistency_score=round(consistency.consistency_score, 4),
            improvement_potential=potential.value,
        )

        return PerformanceAnalysis(
            exceptional=bands[PerformanceClassification.EXCEPTIONAL],
            strengths=bands[PerformanceClassification.STRENGTH],
            adequate=bands[PerformanceClassification.ADEQUATE],
            weaknesses=bands[PerformanceClassification.WEAKNESS],
            critical_weaknesses=bands[PerformanceClassification.CRITICAL_WEAKNESS],
            consistency_score=consistency.consistency_score,
            improvement_potential=potential,
        )

    def classify_categories(
        self, category_results: Sequence[CategoryResult]
    ) -> Dict[PerformanceClassification, Tuple[CategorySummary, ...]]:
        """Partition categories into the five bands, each sorted by percentage desc."""
        buckets: Dict[PerformanceClassification, List[CategorySummary]] = {
            c: [] for c in PerformanceClassification
        }
        for category in category_results:
            band = get_performance_classification(category.percentage)
            buckets[band].append(_summary(category))

        return {
            band: tuple(sorted(items, key=lambda s: s.percentage, reverse=True))
            for band, items in buckets.items()
        }

    def calculate_consistency(self, category_results: Sequence[CategoryResult]) -> ConsistencyMetrics:
        """Spread of category percentages mapped to a 0-100 consistency score."""
        if not category_results:
            return ConsistencyMetrics(0.0, 0.0, 0.0, 0.0, 0.0)

        scores = [c.percentage for c in category_results]
        avg = mean(scores)
        # identical scores have no spread
        std = 0.0 if max(scores) == min(scores) else std_dev(scores, avg)
        cv = coefficient_of_variation(std, avg)

        return ConsistencyMetrics(
            mean=avg,
            standard_deviation=std,
            coefficient_of_variation=cv,
            range=max(scores) - min(scores),
            consistency_score=clamp(100 - cv * 2, 0.0, 100.0),
        )

    def determine_improvement_potential(
        self, overall_score: float, consistency_score: float
    ) -> ImprovementPotential:
        if overall_score >= 85:
            return ImprovementPotential.LOW
        if overall_score < 60 and consistency_score > 70:
            return ImprovementPotential.HIGH
        if overall_score < 70 or consistency_score < 50:
            return ImprovementPotential.HIGH
        return ImprovementPotential.MEDIUM

    def identify_profile(
        self, overall: OverallResult, analysis: PerformanceAnalysis
    ) -> ProfileAnalysis:
        """
        Assign one of five qualitative profiles.

        variance = exceptional count + weakness count + critical weakness count
        is the heuristic used to separate specialists (≥ 4) from balanced
        performers (≤ 2, score 70-84).
        """
        score = overall.percentage
        exceptional = len(analysis.exceptional)
        weak = len(analysis.weaknesses) + len(analysis.critical_weaknesses)
        variance = exceptional + weak

        if score >= HIGH_PERFORMER_MIN_SCORE and exceptional >= HIGH_PERFORMER_MIN_EXCEPTIONAL:
            profile = PerformanceProfile.HIGH_PERFORMER
        elif BALANCED_SCORE_RANGE[0] <= score < BALANCED_SCORE_RANGE[1] and variance <= BALANCED_MAX_VARIANCE:
            profile = PerformanceProfile.BALANCED
        elif variance >= SPECIALIST_MIN_VARIANCE:
            profile = PerformanceProfile.SPECIALIST
        elif DEVELOPING_SCORE_RANGE[0] <= score < DEVELOPING_SCORE_RANGE[1]:
            profile = PerformanceProfile.DEVELOPING
        else:
            profile = PerformanceProfile.EARLY_STAGE

        description, characteristics, approach = _PROFILE_TEXT[profile]
        return ProfileAnalysis(
            profile=profile,
            description=description,
            characteristics=characteristics,
            approach=approach,
        )

    def generate_category_insights(
        self, category_results: Sequence[CategoryResult]
    ) -> List[CategoryInsight]:
        insights = []
        for category in category_results:
            classification = get_performance_classification(category.percentage)
            template, recommendation, priority = _INSIGHTS[classification]
            insights.append(CategoryInsight(
                category=category.name,
                percentage=category.percentage,
                classification=classification,
                insight=template.format(name=category.name.value),
                recommendation=recommendation,
                priority=priority,
            ))
        return insights

    def calculate_tier_goal(
        self,
        overall: OverallResult,
        category_results: Sequence[CategoryResult],
    ) -> Optional[TierGoal]:
        """
        What it takes to reach the next tier. None at the top tier.

        Candidate categories are those below 75%; each is targeted at +15
        points (capped at 85) and ranked by the weighted gain to the overall
        score. The top three are returned.
        """
        if overall.tier >= MAX_TIER:
            return None

        next_tier = overall.tier + 1
        threshold = get_next_tier_threshold(overall.tier)
        total_weight = sum(c.total_weight for c in category_results)

        targets = []
        for category in category_results:
            if category.percentage >= GOAL_FOCUS_BELOW:
                continue
            target = min(category.percentage + GOAL_STEP, GOAL_CAP)
            improvement = target - category.percentage
            impact = improvement * category.total_weight / total_weight if total_weight > 0 else 0.0
            targets.append(ImprovementTarget(
                category=category.name,
                current_score=category.percentage,
                target_score=target,
                impact=impact,
            ))
        targets.sort(key=lambda t: t.impact, reverse=True)

        return TierGoal(
            current_tier=overall.tier,
            current_score=overall.percentage,
            next_tier=next_tier,
            next_tier_threshold=threshold,
            points_needed=threshold - overall.percentage,
            categories_needing_improvement=tuple(targets[:GOAL_TOP_N]),
        )

    def generate_performance_summary(
        self,
        overall: OverallResult,
        category_results: Sequence[CategoryResult],
        analysis: PerformanceAnalysis,
    ) -> PerformanceSummary:
        if not category_results:
            raise ValueError("performance summary requires at least one category")

        ordered = sorted(category_results, key=lambda c: c.percentage, reverse=True)
        return PerformanceSummary(
            overall_score=overall.percentage,
            tier=overall.tier,
            rank=overall.rank,
            top_category=ordered[0].name,
            top_score=ordered[0].percentage,
            bottom_category=ordered[-1].name,
            bottom_score=ordered[-1].percentage,
            average_category_score=mean([c.percentage for c in category_results]),
            consistency_score=analysis.consistency_score,
            improvement_potential=analysis.improvement_potential,
        )
