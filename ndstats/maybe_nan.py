"""
NaN classification for order statistics.

Raw IEEE comparison is not a total order, so the selection engine must never
see NaN. This module detects NaN values, moves them out of a lane in place and
provides ``NotNan``, a float that is guaranteed comparable (usable as a sort
or mapping key).
"""
from __future__ import annotations

import math
from typing import Any

import numpy as np

from .errors import UnorderableValueError


class NotNan(float):
    """A float that is never NaN.

    Hashes and compares exactly like the plain float it wraps, so a mapping
    keyed by ``NotNan(0.5)`` can be indexed with ``0.5``. Negative zero is
    normalized to ``0.0``.
    """

    __slots__ = ()

    def __new__(cls, value: Any) -> "NotNan":
        f = float(value)
        if math.isnan(f):
            raise UnorderableValueError("NaN has no position in a total order")
        if f == 0.0:
            f = 0.0
        return super().__new__(cls, f)

    def __repr__(self) -> str:
        return f"NotNan({float(self)!r})"


def is_nan(value: Any) -> bool:
    """True for NaN floats and NaT (python, numpy or any type where x != x)."""
    try:
        return value != value
    except TypeError:
        return False


def nan_mask(values: np.ndarray) -> np.ndarray:
    """Boolean mask of NaN positions, for any orderable dtype."""
    kind = values.dtype.kind
    if kind in "fc":
        return np.isnan(values)
    if kind == "O":
        return np.fromiter((is_nan(v) for v in values.flat), dtype=bool, count=values.size).reshape(values.shape)
    if kind in "mM":
        # NaT compares false against everything, including itself
        return np.isnat(values)
    # integers, bools, strings: never NaN
    return np.zeros(values.shape, dtype=bool)


def has_nan(values: np.ndarray) -> bool:
    return bool(nan_mask(values).any())


def nan_sentinel(dtype: np.dtype):
    """The NaN used to signal "no valid data" for results of ``dtype`` (NaT for
    datetimes and timedeltas).

    The value is not taken from the data and may not occur in it.
    """
    if dtype.kind in "fc":
        return dtype.type(np.nan)
    if dtype.kind in "mM":
        return dtype.type("NaT", np.datetime_data(dtype)[0])
    return float("nan")


def remove_nan_mut(lane: np.ndarray) -> np.ndarray:
    """Move every non-NaN value to the front of ``lane``, in place.

    Returns a view over the non-NaN prefix. The order of the remaining values
    is unspecified; the lane keeps exactly its original multiset of values.
    """
    mask = nan_mask(lane)
    if not mask.any():
        return lane
    write = 0
    for read in range(lane.shape[0]):
        if not mask[read]:
            if read != write:
                lane[write], lane[read] = lane[read], lane[write]
            write += 1
    return lane[:write]
