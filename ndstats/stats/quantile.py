"""Order statistics - quantiles, min and max over n-dimensional arrays."""

from __future__ import annotations

import logging
from collections.abc import Iterable as IterableABC
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple, Type

import numpy as np

from ..errors import (
    AxisOutOfRangeError,
    InvalidQuantileLevelError,
    QuantileError,
    UnorderableValueError,
)
from ..interpolate import Interpolate, get_interpolation
from ..interpolate.registry import InterpolationLike
from ..maybe_nan import NotNan, has_nan, nan_mask, nan_sentinel, remove_nan_mut
from ..sort import get_many_from_sorted_mut

logger = logging.getLogger(__name__)

# level -> array with the queried axis removed, ascending by level
BulkQuantileResult = Dict[NotNan, np.ndarray]


# ============================================================================
# HELPER FUNCTIONS
# ============================================================================

def _as_level(q: Any) -> NotNan:
    if isinstance(q, (bool, np.bool_)):
        raise InvalidQuantileLevelError(q)
    try:
        level = NotNan(q)
    except (TypeError, ValueError):
        raise InvalidQuantileLevelError(q) from None
    if not 0.0 <= level <= 1.0:
        raise InvalidQuantileLevelError(q)
    return level


def _as_levels(qs: Iterable[Any]) -> List[NotNan]:
    """Validate every level, then deduplicate and sort ascending."""
    if isinstance(qs, np.ndarray):
        qs = qs.ravel().tolist()
    elif isinstance(qs, (str, bytes)) or not isinstance(qs, IterableABC):
        qs = [qs]
    levels = [_as_level(q) for q in qs]
    return sorted(set(levels))


def _as_array(array: Any) -> np.ndarray:
    arr = np.asarray(array)
    if not arr.flags.writeable:
        raise QuantileError(
            "array is read-only; quantiles are computed by reordering it in place",
            suggestion="Pass a writeable copy, e.g. array.copy()",
        )
    return arr


def _normalize_axis(axis: int, ndim: int) -> int:
    if isinstance(axis, bool) or not isinstance(axis, (int, np.integer)):
        raise TypeError(f"axis must be an integer, got {type(axis).__name__}")
    if not -ndim <= axis < ndim:
        raise AxisOutOfRangeError(int(axis), ndim)
    return int(axis) % ndim


def _check_orderable(arr: np.ndarray, strategy: Type[Interpolate], skipnan: bool) -> None:
    strategy.check_dtype(arr.dtype)
    if not skipnan and has_nan(arr):
        raise UnorderableValueError(
            "array contains NaN, which has no position in a total order",
            suggestion="Use the *_skipnan variant to ignore NaN values",
        )


def _nan_capable(dtype: np.dtype) -> np.dtype:
    """dtype able to hold both the results and the all-NaN sentinel"""
    if dtype.kind in "fmMO":
        return dtype
    if dtype.kind in "biu":
        return np.dtype(np.float64)
    return np.dtype(object)


def _lanes(arr: np.ndarray, axis: int) -> Iterator[Tuple[tuple, np.ndarray]]:
    """Yield (position in the reduced array, 1-d mutable view) for every lane."""
    moved = np.moveaxis(arr, axis, -1)
    for idx in np.ndindex(moved.shape[:-1]):
        yield idx, moved[idx]


def _lane_quantiles(lane: np.ndarray, levels: List[NotNan], strategy: Type[Interpolate]) -> Dict[NotNan, Any]:
    """
    Quantiles of one non-empty lane for every level.

    The union of order statistics required by all levels is selected in a
    single multi-rank pass; each index is fetched from the lane once.
    """
    n = lane.shape[0]
    ranks = [rank for level in levels for rank in strategy.required_indexes(level, n)]
    order_stats = get_many_from_sorted_mut(lane, ranks)

    out = {}
    for level in levels:
        lower = order_stats[strategy.lower_index(level, n)] if strategy.needs_lower(level, n) else None
        higher = order_stats[strategy.higher_index(level, n)] if strategy.needs_higher(level, n) else None
        out[level] = strategy.interpolate(lower, higher, level, n)
    return out


def _quantiles_along_axis(
    array: Any,
    axis: int,
    qs: Iterable[Any],
    interpolation: InterpolationLike,
    skipnan: bool,
) -> Optional[BulkQuantileResult]:
    # argument validation happens before any lane is touched
    levels = _as_levels(qs)
    strategy = get_interpolation(interpolation)
    arr = _as_array(array)
    axis = _normalize_axis(axis, arr.ndim)
    _check_orderable(arr, strategy, skipnan)

    logger.debug(
        "quantiles shape=%s axis=%d levels=%s interpolation=%s skipnan=%s",
        arr.shape, axis, [float(level) for level in levels], strategy.NAME, skipnan,
    )

    if arr.shape[axis] == 0 and not skipnan:
        logger.debug("axis %d has length 0: no quantile", axis)
        return None

    out_shape = arr.shape[:axis] + arr.shape[axis + 1:]
    out_dtype = strategy.result_dtype(arr.dtype)
    if skipnan:
        out_dtype = _nan_capable(out_dtype)
    results = {level: np.empty(out_shape, dtype=out_dtype) for level in levels}

    all_nan_lanes = 0
    for idx, lane in _lanes(arr, axis):
        if skipnan:
            lane = remove_nan_mut(lane)
            if lane.shape[0] == 0:
                all_nan_lanes += 1
                for level in levels:
                    results[level][idx] = nan_sentinel(out_dtype)
                continue
        for level, value in _lane_quantiles(lane, levels, strategy).items():
            results[level][idx] = value

    if all_nan_lanes:
        logger.debug("%d lane(s) had no valid values; filled with NaN", all_nan_lanes)
    return results


def _fold(flat: np.ndarray, pick_min: bool) -> Any:
    if flat.dtype.kind in "biufmM":
        return flat[np.argmin(flat) if pick_min else np.argmax(flat)]
    best = flat[0]
    for value in flat[1:]:
        # keep the first of equal elements
        if (value < best) if pick_min else (value > best):
            best = value
    return best


def _extreme(array: Any, pick_min: bool) -> Optional[Any]:
    arr = np.asarray(array)
    if arr.size == 0 or arr.dtype.kind == "c" or has_nan(arr):
        return None
    return _fold(arr.ravel(), pick_min)


def _extreme_skipnan(array: Any, pick_min: bool) -> Any:
    arr = np.asarray(array)
    if arr.dtype.kind == "c":
        raise UnorderableValueError(f"complex dtype {arr.dtype} has no total order")
    valid = arr[~nan_mask(arr)]
    if valid.size == 0:
        return nan_sentinel(arr.dtype)
    return _fold(valid, pick_min)


# ============================================================================
# PUBLIC API
# ============================================================================

class QuantileStats:
    """
    Exact order statistics over dense numeric arrays.

    Concepts covered:
    1. Min / Max (NaN-intolerant and NaN-skipping)
    2. Quantile of a 1-d array
    3. Quantile along an axis of an n-d array
    4. Several quantiles along an axis, sharing the selection work
    5. NaN-skipping counterparts of 2-4

    Quantiles are computed with quickselect, **in place**: each 1-d lane along
    the queried axis is reordered independently and no copy of the data is
    made. No assumptions should be made on the order of the elements
    afterwards, but every lane keeps exactly its original values.

    For a lane of length ``n`` the ``q``-th quantile is the element that would
    sit at index ``q * (n - 1)`` if the lane were sorted; when that index is
    not integral the interpolation strategy decides (see ``ndstats.interpolate``).
    ``q=0`` gives the minimum, ``q=0.5`` the median and ``q=1`` the maximum.

    Complexity: average O(m), worst case O(m^2), ``m`` the number of elements.
    """

    @staticmethod
    def min(array: Any) -> Optional[Any]:
        """Elementwise minimum; None if empty or any pair of values is unordered (NaN)."""
        return _extreme(array, pick_min=True)

    @staticmethod
    def max(array: Any) -> Optional[Any]:
        """Elementwise maximum; None if empty or any pair of values is unordered (NaN)."""
        return _extreme(array, pick_min=False)

    @staticmethod
    def min_skipnan(array: Any) -> Any:
        """
        Elementwise minimum, skipping NaN values.

        **Warning**: returns NaN if the array holds no non-NaN value. That NaN
        is a signal for "no valid data" and might not be in the array.
        """
        return _extreme_skipnan(array, pick_min=True)

    @staticmethod
    def max_skipnan(array: Any) -> Any:
        """
        Elementwise maximum, skipping NaN values.

        **Warning**: returns NaN if the array holds no non-NaN value. That NaN
        is a signal for "no valid data" and might not be in the array.
        """
        return _extreme_skipnan(array, pick_min=False)

    @staticmethod
    def quantile(lane: Any, q: float, interpolation: InterpolationLike = None) -> Optional[Any]:
        """
        The ``q``-th quantile of a 1-d array, or None if it is empty.

        Raises InvalidQuantileLevelError if ``q`` is not in [0, 1] and
        UnorderableValueError if the array contains NaN.
        """
        level = _as_level(q)
        strategy = get_interpolation(interpolation)
        arr = _as_array(lane)
        if arr.ndim != 1:
            raise QuantileError(
                f"quantile expects a 1-dimensional array, got {arr.ndim} dimensions",
                suggestion="Use quantile_axis for n-dimensional arrays",
            )
        _check_orderable(arr, strategy, skipnan=False)
        if arr.shape[0] == 0:
            return None
        return _lane_quantiles(arr, [level], strategy)[level]

    @staticmethod
    def quantile_axis(
        array: Any, axis: int, q: float, interpolation: InterpolationLike = None
    ) -> Optional[np.ndarray]:
        """
        The ``q``-th quantile of every 1-d lane along ``axis``.

        Returns an array shaped like ``array`` with ``axis`` removed (0-d for a
        1-d input), or None if ``axis`` has length 0.

        Raises InvalidQuantileLevelError, AxisOutOfRangeError or
        UnorderableValueError before anything is reordered.
        """
        results = _quantiles_along_axis(array, axis, [q], interpolation, skipnan=False)
        if results is None:
            return None
        return next(iter(results.values()))

    @staticmethod
    def quantiles_axis(
        array: Any, axis: int, qs: Iterable[float], interpolation: InterpolationLike = None
    ) -> Optional[BulkQuantileResult]:
        """
        Several quantiles of every 1-d lane along ``axis`` at once.

        Returns a dict ``{level: array with axis removed}`` ordered by ascending
        level, with repeated levels collapsed into one entry, or None if
        ``axis`` has length 0. Every level is validated before any work.
        """
        return _quantiles_along_axis(array, axis, qs, interpolation, skipnan=False)

    @staticmethod
    def quantile_skipnan(lane: Any, q: float, interpolation: InterpolationLike = None) -> Any:
        """
        The ``q``-th quantile of a 1-d array, ignoring NaN values.

        **Warning**: returns NaN if the array holds no non-NaN value (including
        an empty array). That NaN might not be in the array.
        """
        level = _as_level(q)
        strategy = get_interpolation(interpolation)
        arr = _as_array(lane)
        if arr.ndim != 1:
            raise QuantileError(
                f"quantile_skipnan expects a 1-dimensional array, got {arr.ndim} dimensions",
                suggestion="Use quantile_axis_skipnan for n-dimensional arrays",
            )
        _check_orderable(arr, strategy, skipnan=True)
        valid = remove_nan_mut(arr)
        if valid.shape[0] == 0:
            logger.debug("no valid values: returning NaN")
            return nan_sentinel(_nan_capable(strategy.result_dtype(arr.dtype)))
        return _lane_quantiles(valid, [level], strategy)[level]

    @staticmethod
    def quantile_axis_skipnan(
        array: Any, axis: int, q: float, interpolation: InterpolationLike = None
    ) -> np.ndarray:
        """
        The ``q``-th quantile along ``axis``, ignoring NaN values lane by lane.

        Lanes without any non-NaN value (or an axis of length 0) yield NaN.
        """
        results = _quantiles_along_axis(array, axis, [q], interpolation, skipnan=True)
        return next(iter(results.values()))

    @staticmethod
    def quantiles_axis_skipnan(
        array: Any, axis: int, qs: Iterable[float], interpolation: InterpolationLike = None
    ) -> BulkQuantileResult:
        """Bulk counterpart of quantile_axis_skipnan, ordered by ascending level."""
        return _quantiles_along_axis(array, axis, qs, interpolation, skipnan=True)
