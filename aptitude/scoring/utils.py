"""
Numeric Utilities
aptitude/scoring/utils.py

Zero-division-safe statistics shared by the scorers and the analyzer.
"""

import math
from typing import Sequence


def clamp(value: float, min_val: float = 0.0, max_val: float = 100.0) -> float:
    """Clamp value to range [min_val, max_val]."""
    return max(min_val, min(max_val, value))


def safe_percentage(part: float, whole: float) -> float:
    """part / whole × 100, or 0.0 when whole is not positive."""
    if whole <= 0:
        return 0.0
    return part / whole * 100


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean; 0.0 for an empty sequence."""
    if not values:
        return 0.0
    return sum(values) / len(values)


def weighted_mean(values: Sequence[float], weights: Sequence[float]) -> float:
    """
    Calculate weighted mean.

    Formula: Σ(value_i × weight_i) / Σ(weight_i)
    Returns 0.0 if there are no values or all weights are zero.
    """
    if len(values) != len(weights):
        raise ValueError("values and weights must have same length")

    total_weight = sum(weights)
    if total_weight == 0:
        return 0.0

    numerator = sum(v * w for v, w in zip(values, weights))
    return numerator / total_weight


def population_variance(values: Sequence[float], center: float) -> float:
    """Σ(value_i − center)² / n; 0.0 for an empty sequence."""
    if not values:
        return 0.0
    return sum((v - center) ** 2 for v in values) / len(values)


def std_dev(values: Sequence[float], center: float) -> float:
    """Population standard deviation around ``center``."""
    return math.sqrt(population_variance(values, center))


def coefficient_of_variation(std: float, center: float) -> float:
    """
    Coefficient of variation in percent, with zero-division protection.

    Formula: CV = std / mean × 100 (0 if mean is 0)
    """
    if center == 0:
        return 0.0
    return std / center * 100
