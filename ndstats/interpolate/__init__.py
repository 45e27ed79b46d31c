"""Interpolation strategies for quantile levels that fall between two data points."""

from .base import Interpolate
from .registry import get_interpolation, registry
from .strategies import Higher, Linear, Lower, Midpoint, Nearest

__all__ = [
    "Interpolate",
    "Lower",
    "Higher",
    "Nearest",
    "Midpoint",
    "Linear",
    "get_interpolation",
    "registry",
]
