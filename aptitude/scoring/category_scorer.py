# aptitude/scoring/category_scorer.py
"""
Category Aggregator
-------------------------------
Groups question results by category and computes per-category totals.

Two passes:
    1. aggregate()                    per-category earned/max/percentage/weight,
                                      tier and classification; weighted_contribution = 0
    2. apply_weighted_contributions() weighted_contribution =
                                      percentage × category_weight / Σ category_weights

The second pass needs the grand total of weights, so it runs once every
category is known.
"""
from collections import OrderedDict
from dataclasses import dataclass, replace
from typing import Dict, List, Optional, Sequence

import structlog

from aptitude.constants.categories import get_category_code
from aptitude.constants.tiers import (
    get_performance_classification,
    get_tier_from_percentage,
    get_tier_rank,
)
from aptitude.models.enumerations import Category, PerformanceClassification
from aptitude.models.results import CategoryResult, QuestionResult
from aptitude.scoring.utils import (
    coefficient_of_variation,
    mean,
    population_variance,
    safe_percentage,
)

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class CategoryStats:
    total_categories: int
    average_score: float
    highest: Optional[CategoryResult]
    lowest: Optional[CategoryResult]
    total_questions: int
    total_weight: float


@dataclass(frozen=True)
class CategoryVariance:
    mean: float
    variance: float
    standard_deviation: float
    coefficient_of_variation: float  # percent


class CategoryAggregator:
    """Aggregate question results into category results."""

    def group_by_category(
        self, question_results: Sequence[QuestionResult]
    ) -> Dict[Category, List[QuestionResult]]:
        """Group results by category, keeping first-seen order."""
        groups: Dict[Category, List[QuestionResult]] = OrderedDict()
        for result in question_results:
            groups.setdefault(result.category, []).append(result)
        return groups

    def score_category(
        self, category: Category, question_results: Sequence[QuestionResult]
    ) -> CategoryResult:
        """
        Build one CategoryResult from the results of its questions.

        Formula:
            percentage = Σ earned / Σ max × 100   (0 if Σ max = 0)
        """
        earned = sum(r.earned_points for r in question_results)
        max_points = sum(r.max_points for r in question_results)
        total_weight = sum(r.weight for r in question_results)
        percentage = safe_percentage(earned, max_points)

        tier = get_tier_from_percentage(percentage)

        correct_count = 0
        partial_count = 0
        incorrect_count = 0
        for r in question_results:
            if r.is_correct:
                correct_count += 1
            elif r.is_partial_credit:
                partial_count += 1
            else:
                incorrect_count += 1

        return CategoryResult(
            name=category,
            code=get_category_code(category),
            earned_points=earned,
            max_points=max_points,
            percentage=percentage,
            total_weight=total_weight,
            weighted_contribution=0.0,
            tier=tier,
            rank=get_tier_rank(tier),
            classification=get_performance_classification(percentage),
            question_count=len(question_results),
            correct_count=correct_count,
            partial_credit_count=partial_count,
            incorrect_count=incorrect_count,
            questions=tuple(r.question_id for r in question_results),
        )

    def aggregate(self, question_results: Sequence[QuestionResult]) -> List[CategoryResult]:
        """
        One CategoryResult per category present in the input, sorted by name.
        Categories with no questions are omitted.
        """
        groups = self.group_by_category(question_results)
        results = [self.score_category(cat, rs) for cat, rs in groups.items()]
        results.sort(key=lambda c: c.name.value)

        logger.info(
            "categories_aggregated",
            question_count=len(question_results),
            category_count=len(results),
            categories={c.code: round(c.percentage, 2) for c in results},
        )
        return results

    def apply_weighted_contributions(
        self, category_results: Sequence[CategoryResult]
    ) -> List[CategoryResult]:
        """
        Second pass: fill weighted_contribution on fresh copies.

        Formula:
            contribution = percentage × category_weight / Σ category_weights
        All contributions stay 0 when the weight total is 0.
        """
        total_weight = sum(c.total_weight for c in category_results)
        if total_weight == 0:
            return list(category_results)

        return [
            replace(c, weighted_contribution=c.percentage * c.total_weight / total_weight)
            for c in category_results
        ]


def get_category_stats(category_results: Sequence[CategoryResult]) -> CategoryStats:
    if not category_results:
        return CategoryStats(0, 0.0, None, None, 0, 0.0)

    by_score = sort_by_score(category_results)
    return CategoryStats(
        total_categories=len(category_results),
        average_score=mean([c.percentage for c in category_results]),
        highest=by_score[0],
        lowest=by_score[-1],
        total_questions=sum(c.question_count for c in category_results),
        total_weight=sum(c.total_weight for c in category_results),
    )


def filter_by_classification(
    category_results: Sequence[CategoryResult],
    classification: PerformanceClassification,
) -> List[CategoryResult]:
    return [c for c in category_results if c.classification == classification]


def sort_by_score(
    category_results: Sequence[CategoryResult], ascending: bool = False
) -> List[CategoryResult]:
    """Sort by percentage, highest first unless ascending."""
    ordered = sorted(category_results, key=lambda c: c.percentage, reverse=True)
    if ascending:
        ordered.reverse()
    return ordered


def get_top_categories(category_results: Sequence[CategoryResult], n: int) -> List[CategoryResult]:
    return sort_by_score(category_results)[:n]


def get_bottom_categories(category_results: Sequence[CategoryResult], n: int) -> List[CategoryResult]:
    return sort_by_score(category_results, ascending=True)[:n]


def find_category(
    category_results: Sequence[CategoryResult], category: Category
) -> Optional[CategoryResult]:
    for c in category_results:
        if c.name == category:
            return c
    return None


def calculate_category_variance(category_results: Sequence[CategoryResult]) -> CategoryVariance:
    """Population variance of category percentages and the CV in percent."""
    scores = [c.percentage for c in category_results]
    if not scores:
        return CategoryVariance(0.0, 0.0, 0.0, 0.0)

    avg = mean(scores)
    variance = population_variance(scores, avg)
    std = variance ** 0.5
    return CategoryVariance(
        mean=avg,
        variance=variance,
        standard_deviation=std,
        coefficient_of_variation=coefficient_of_variation(std, avg),
    )
