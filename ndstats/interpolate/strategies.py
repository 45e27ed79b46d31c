"""
Concrete interpolation strategies
"""
import numpy as np

from .base import Interpolate


class Lower(Interpolate):
    """Select the lower value."""
    NAME = "lower"

    @classmethod
    def needs_lower(cls, q, n):
        return True

    @classmethod
    def needs_higher(cls, q, n):
        return False

    @classmethod
    def interpolate(cls, lower, higher, q, n):
        return lower


class Higher(Interpolate):
    """Select the higher value."""
    NAME = "higher"

    @classmethod
    def needs_lower(cls, q, n):
        return False

    @classmethod
    def needs_higher(cls, q, n):
        return True

    @classmethod
    def interpolate(cls, lower, higher, q, n):
        return higher


class Nearest(Interpolate):
    """Select the nearest value; a fraction of exactly 0.5 rounds up."""
    NAME = "nearest"

    @classmethod
    def needs_lower(cls, q, n):
        return cls.float_quantile_index_fraction(q, n) < 0.5

    @classmethod
    def needs_higher(cls, q, n):
        return not cls.needs_lower(q, n)

    @classmethod
    def interpolate(cls, lower, higher, q, n):
        if cls.needs_lower(q, n):
            return lower
        return higher


def _is_integer(value):
    # np.timedelta64 subclasses np.signedinteger but must keep its unit
    return isinstance(value, np.integer) and not isinstance(value, np.timedelta64)


class _Arithmetic(Interpolate):
    REQUIRES_ARITHMETIC = True

    @classmethod
    def needs_lower(cls, q, n):
        return True

    @classmethod
    def needs_higher(cls, q, n):
        return True

    @classmethod
    def result_dtype(cls, dtype):
        # true division: integers come back as floats
        if dtype.kind in "fmO":
            return dtype
        return np.dtype(np.float64)


class Midpoint(_Arithmetic):
    """Select the midpoint of the two values, ``(lower + higher) / 2``."""
    NAME = "midpoint"

    @classmethod
    def interpolate(cls, lower, higher, q, n):
        if _is_integer(lower):
            # avoid overflow of lower + higher in fixed-width integers
            return (float(lower) + float(higher)) / 2
        return (lower + higher) / 2


class Linear(_Arithmetic):
    """Linearly interpolate, ``lower + (higher - lower) * fraction``.

    ``fraction`` is the fractional part of the quantile index.
    """
    NAME = "linear"

    @classmethod
    def interpolate(cls, lower, higher, q, n):
        fraction = cls.float_quantile_index_fraction(q, n)
        if _is_integer(lower):
            lower, higher = float(lower), float(higher)
        if fraction == 0:
            return lower
        return lower + (higher - lower) * fraction
