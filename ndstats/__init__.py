"""Exact quantiles and order statistics for n-dimensional numpy arrays."""

import logging

from .errors import (
    AxisOutOfRangeError,
    InterpolationTypeError,
    InvalidQuantileLevelError,
    QuantileError,
    UnknownInterpolationError,
    UnorderableValueError,
)
from .frame import quantile_frame
from .interpolate import Higher, Interpolate, Linear, Lower, Midpoint, Nearest, get_interpolation
from .maybe_nan import NotNan
from .stats import BulkQuantileResult, DescriptiveStats, QuantileStats, SummaryStats

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "QuantileStats",
    "BulkQuantileResult",
    "SummaryStats",
    "DescriptiveStats",
    "quantile_frame",
    "Interpolate",
    "Lower",
    "Higher",
    "Nearest",
    "Midpoint",
    "Linear",
    "get_interpolation",
    "NotNan",
    "QuantileError",
    "InvalidQuantileLevelError",
    "AxisOutOfRangeError",
    "UnorderableValueError",
    "InterpolationTypeError",
    "UnknownInterpolationError",
]
