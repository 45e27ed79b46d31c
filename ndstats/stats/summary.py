"""Summary Statistics - means and central moments."""

from typing import Any, Optional

import numpy as np
from scipy import stats


def _flat(data: Any) -> np.ndarray:
    return np.asarray(data, dtype=np.float64).ravel()


class SummaryStats:
    """
    Concepts covered:
    1. Arithmetic mean
    2. Harmonic mean
    3. Geometric mean
    4. Central moments (any order)
    5. Skewness, Kurtosis

    Plain reductions over every element of the array; each returns None for
    empty input.
    """

    @staticmethod
    def mean(data: Any) -> Optional[float]:
        x = _flat(data)
        if x.size == 0:
            return None
        return float(np.mean(x))

    @staticmethod
    def harmonic_mean(data: Any) -> Optional[float]:
        """Harmonic mean, n / sum(1/x). Defined for non-negative data."""
        x = _flat(data)
        if x.size == 0:
            return None
        return float(stats.hmean(x))

    @staticmethod
    def geometric_mean(data: Any) -> Optional[float]:
        """Geometric mean, (prod x) ** (1/n), computed in log space."""
        x = _flat(data)
        if x.size == 0:
            return None
        return float(stats.gmean(x))

    @staticmethod
    def central_moment(data: Any, order: int) -> Optional[float]:
        """The ``order``-th central moment, mean((x - mean(x)) ** order)."""
        if order < 0:
            raise ValueError(f"moment order must be non-negative, got {order}")
        x = _flat(data)
        if x.size == 0:
            return None
        if order == 0:
            return 1.0
        if order == 1:
            return 0.0
        return float(stats.moment(x, order))

    @staticmethod
    def skewness(data: Any) -> Optional[float]:
        """Population skewness, m3 / m2 ** 1.5."""
        x = _flat(data)
        if x.size == 0:
            return None
        return float(stats.skew(x))

    @staticmethod
    def kurtosis(data: Any) -> Optional[float]:
        """Population excess kurtosis, m4 / m2 ** 2 - 3."""
        x = _flat(data)
        if x.size == 0:
            return None
        return float(stats.kurtosis(x))
