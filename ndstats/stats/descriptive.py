"""Descriptive Statistics - a report built on exact order statistics."""

from typing import Any, Dict

import numpy as np
from scipy import stats

from ..interpolate import get_interpolation
from ..interpolate.registry import InterpolationLike
from .quantile import QuantileStats
from .summary import SummaryStats

PERCENTILES = (0.10, 0.25, 0.50, 0.75, 0.90, 0.95, 0.99)


class DescriptiveStats:
    """
    Concepts covered:
    1. Mean, Median
    2. Standard Deviation, Variance, Standard Error
    3. Min, Max, Range, IQR
    4. Percentiles (P10, P25, P50, P75, P90, P95, P99)
    5. Skewness, Kurtosis
    6. Geometric Mean, Harmonic Mean
    7. Confidence Interval for the mean
    """

    @staticmethod
    def full_descriptives(data: Any, confidence: float = 0.95,
                          interpolation: InterpolationLike = None) -> Dict[str, Any]:
        """Complete descriptive statistics for a numeric array (NaN values skipped)."""
        values = np.asarray(data, dtype=np.float64).ravel()
        clean = values[~np.isnan(values)]
        n = len(clean)

        if n == 0:
            return {"error": "No valid data points", "n": 0, "n_missing": int(values.size)}

        # the quantile engine reorders its input, so it works on its own copy
        levels = QuantileStats.quantiles_axis_skipnan(clean.copy(), 0, (0.0, 1.0) + PERCENTILES, interpolation)
        pct = {float(level): float(value) for level, value in levels.items()}

        mean = SummaryStats.mean(clean)
        std = float(np.std(clean, ddof=1)) if n > 1 else 0.0
        se = std / np.sqrt(n)

        t_crit = stats.t.ppf((1 + confidence) / 2, df=n - 1) if n > 1 else 0.0

        return {
            "n": n,
            "n_missing": int(values.size - n),
            "mean": mean,
            "median": pct[0.5],
            "std": std,
            "variance": float(np.var(clean, ddof=1)) if n > 1 else 0.0,
            "se_mean": float(se),
            "min": pct[0.0],
            "max": pct[1.0],
            "range": pct[1.0] - pct[0.0],
            "q1": pct[0.25],
            "q3": pct[0.75],
            "iqr": pct[0.75] - pct[0.25],
            "skewness": SummaryStats.skewness(clean) if n > 2 else None,
            "kurtosis": SummaryStats.kurtosis(clean) if n > 3 else None,
            "geometric_mean": SummaryStats.geometric_mean(clean) if np.all(clean > 0) else None,
            "harmonic_mean": SummaryStats.harmonic_mean(clean) if np.all(clean > 0) else None,
            "ci_lower": float(mean - t_crit * se),
            "ci_upper": float(mean + t_crit * se),
            "confidence_level": confidence,
            "interpolation": get_interpolation(interpolation).NAME,
            "percentiles": {f"p{int(round(q * 100))}": pct[q] for q in PERCENTILES},
        }
