"""
Error taxonomy for quantile and order-statistic computations
"""
from typing import Optional


class QuantileError(Exception):
    """Base exception for order-statistic errors"""
    def __init__(self, message: str, suggestion: Optional[str] = None):
        self.message = message
        self.suggestion = suggestion
        super().__init__(self.message)


class InvalidQuantileLevelError(QuantileError, ValueError):
    """A requested quantile level lies outside [0, 1]"""
    def __init__(self, level: float):
        self.level = level
        super().__init__(
            f"Quantile level must be between 0 and 1 (inclusive), got {level!r}",
            suggestion="Use 0.5 for the median, 0.25/0.75 for quartiles",
        )


class AxisOutOfRangeError(QuantileError, IndexError):
    """The named axis does not exist in the array's shape"""
    def __init__(self, axis: int, ndim: int):
        self.axis = axis
        self.ndim = ndim
        super().__init__(f"axis {axis} is out of bounds for array of dimension {ndim}")


class UnorderableValueError(QuantileError, ValueError):
    """Values cannot be totally ordered (NaN, complex numbers)"""


class InterpolationTypeError(QuantileError, TypeError):
    """Element type lacks the arithmetic an interpolation variant needs"""


class UnknownInterpolationError(QuantileError, ValueError):
    """Interpolation name does not match any registered variant"""
