"""Statistical routines over n-dimensional arrays."""

from .descriptive import DescriptiveStats
from .quantile import BulkQuantileResult, QuantileStats
from .summary import SummaryStats

__all__ = [
    "QuantileStats",
    "BulkQuantileResult",
    "SummaryStats",
    "DescriptiveStats",
]
