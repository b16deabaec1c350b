"""
scoring/overall_scorer.py

Computes the overall assessment score from category results.

Formula:
    overall % = Σ(category % × category weight) / Σ(category weight)

A weight-weighted mean of category percentages, not an average of question
percentages. Returns 0 when there are no categories or the weight total is 0.
Earned / max points are the raw, unweighted question tallies.
"""

from dataclasses import dataclass
from typing import Sequence

import structlog

from aptitude.constants.tiers import get_tier_from_percentage, get_tier_rank
from aptitude.models.enumerations import TierRank
from aptitude.models.results import CategoryResult, OverallResult
from aptitude.scoring.utils import clamp, weighted_mean

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class QuickScore:
    overall_score: float
    tier: int
    rank: TierRank


class OverallScorer:
    """Calculate the weighted overall score and tier."""

    def calculate_overall_score(self, category_results: Sequence[CategoryResult]) -> float:
        """
        Weighted mean of category percentages.

        Examples:
            >>> # A = 100% (weight 3), B = 25% (weight 2)
            >>> OverallScorer().calculate_overall_score([cat_a, cat_b])
            70.0
        """
        if not category_results:
            return 0.0
        score = weighted_mean(
            [c.percentage for c in category_results],
            [c.total_weight for c in category_results],
        )
        return clamp(score, 0.0, 100.0)

    def compute_overall(self, category_results: Sequence[CategoryResult]) -> OverallResult:
        """
        Assemble the OverallResult from the weighted-contribution pass output.

        Earned / max points are the raw category sums, which equal the sums
        over the constituent questions.
        """
        earned = float(sum(c.earned_points for c in category_results))
        max_points = float(sum(c.max_points for c in category_results))
        score = self.calculate_overall_score(category_results)
        tier = get_tier_from_percentage(score)
        rank = get_tier_rank(tier)

        logger.info(
            "overall_calculated",
            category_count=len(category_results),
            total_weight=sum(c.total_weight for c in category_results),
            overall_score=round(score, 4),
            earned_points=earned,
            max_possible=max_points,
            tier=tier,
            rank=rank.value,
        )

        return OverallResult(
            score=score,
            max_possible=max_points,
            earned_points=earned,
            percentage=score,
            tier=tier,
            rank=rank,
        )

    def quick_score(self, category_results: Sequence[CategoryResult]) -> QuickScore:
        """Overall percentage with tier and rank, without building a full result."""
        score = self.calculate_overall_score(category_results)
        tier = get_tier_from_percentage(score)
        return QuickScore(overall_score=score, tier=tier, rank=get_tier_rank(tier))
