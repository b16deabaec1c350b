# tests/test_tier_classifier.py
"""
Tier Classifier Tests - score classification, distributions, comparisons
"""

import pytest

from aptitude.analysis.tier_classifier import (
    classify_score,
    classify_scores,
    compare_scores,
    get_classification_distribution,
    get_tier_distribution,
)
from aptitude.models.enumerations import PerformanceClassification, TierRank


class TestClassifyScore:

    def test_classify_score(self):
        result = classify_score(72.0)
        assert result.tier == 4
        assert result.rank == TierRank.ADVANCED
        assert result.classification == PerformanceClassification.ADEQUATE
        assert result.tier_definition.min_percentage == 70.0
        assert result.progression.next_threshold == 85.0

    def test_classify_scores_keeps_order(self):
        results = classify_scores([10.0, 90.0, 55.0])
        assert [r.tier for r in results] == [1, 5, 3]


class TestDistributions:

    def test_tier_distribution(self):
        distribution = get_tier_distribution([10.0, 20.0, 60.0, 90.0])
        assert list(distribution) == [1, 2, 3, 4, 5]
        assert distribution[1].count == 2
        assert distribution[1].percentage == pytest.approx(50.0)
        assert distribution[2].count == 0
        assert distribution[5].percentage == pytest.approx(25.0)

    def test_tier_distribution_empty(self):
        distribution = get_tier_distribution([])
        assert all(b.count == 0 and b.percentage == 0.0 for b in distribution.values())

    def test_classification_distribution(self):
        distribution = get_classification_distribution([90.0, 80.0, 80.0, 30.0])
        assert distribution[PerformanceClassification.STRENGTH].count == 2
        assert distribution[PerformanceClassification.EXCEPTIONAL].percentage == pytest.approx(25.0)
        assert distribution[PerformanceClassification.WEAKNESS].count == 0
        assert set(distribution) == set(PerformanceClassification)


class TestCompareScores:

    def test_improvement_across_tiers(self):
        comparison = compare_scores(50.0, 72.0)
        assert comparison.difference == pytest.approx(22.0)
        assert comparison.percent_change == pytest.approx(44.0)
        assert comparison.tier1 == 2
        assert comparison.tier2 == 4
        assert comparison.tier_change == 2
        assert comparison.improved is True
        assert comparison.tier_upgrade is True

    def test_decline_within_tier(self):
        comparison = compare_scores(80.0, 75.0)
        assert comparison.improved is False
        assert comparison.tier_change == 0
        assert comparison.tier_upgrade is False

    def test_from_zero(self):
        assert compare_scores(0.0, 40.0).percent_change == 0.0
