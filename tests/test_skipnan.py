from __future__ import annotations

import math

import numpy as np
import pytest

from ndstats.errors import InvalidQuantileLevelError, UnorderableValueError
from ndstats.maybe_nan import NotNan, is_nan, nan_mask, remove_nan_mut
from ndstats.stats.quantile import QuantileStats

from .conftest import ALL_INTERPOLATIONS

pytestmark = pytest.mark.unit

NAN = np.nan


# -------------------------
# NaN classification
# -------------------------

def test_is_nan():
    assert is_nan(float("nan"))
    assert is_nan(np.float32("nan"))
    assert not is_nan(1.0)
    assert not is_nan("nan")
    assert not is_nan(None)


def test_nan_mask_for_object_and_integer_arrays():
    objects = np.array([1.0, None, float("nan"), "x"], dtype=object)
    assert nan_mask(objects).tolist() == [False, False, True, False]
    assert not nan_mask(np.arange(4)).any()


def test_nan_mask_marks_nat():
    deltas = np.array([1, "NaT", 3], dtype="m8[s]")
    dates = np.array(["2020-01-01", "NaT"], dtype="M8[D]")
    assert nan_mask(deltas).tolist() == [False, True, False]
    assert nan_mask(dates).tolist() == [False, True]
    assert is_nan(np.timedelta64("NaT"))


def test_remove_nan_mut_keeps_values_in_place():
    lane = np.array([NAN, 1.0, NAN, 3.0, 2.0])
    valid = remove_nan_mut(lane)
    assert sorted(valid.tolist()) == [1.0, 2.0, 3.0]
    assert np.shares_memory(valid, lane)
    assert np.isnan(lane[3:]).all()


def test_remove_nan_mut_without_nan_returns_lane():
    lane = np.array([2.0, 1.0])
    assert remove_nan_mut(lane) is lane


def test_not_nan():
    assert NotNan(0.5) == 0.5
    assert hash(NotNan(0.5)) == hash(0.5)
    assert {NotNan(0.5): "a"}[0.5] == "a"
    assert repr(NotNan(-0.0)) == "NotNan(0.0)"
    assert sorted([NotNan(0.9), NotNan(0.1)]) == [0.1, 0.9]
    with pytest.raises(UnorderableValueError):
        NotNan(float("nan"))


# -------------------------
# 1-d
# -------------------------

@pytest.mark.parametrize("interpolation", ["linear", "lower", "higher", "nearest", "midpoint"])
def test_nan_values_are_skipped(interpolation):
    lane = np.array([1, NAN, 3, NAN, 5])
    assert QuantileStats.quantile_skipnan(lane, 0.5, interpolation) == 3


@pytest.mark.parametrize("interpolation", ALL_INTERPOLATIONS)
def test_all_nan_lane_gives_nan_sentinel(interpolation):
    result = QuantileStats.quantile_skipnan(np.array([NAN, NAN]), 0.5, interpolation)
    assert math.isnan(result)


def test_empty_lane_gives_nan_sentinel():
    assert math.isnan(QuantileStats.quantile_skipnan(np.array([], dtype=np.float64), 0.5))
    assert math.isnan(QuantileStats.quantile_skipnan(np.array([], dtype=np.int64), 0.5, "lower"))


def test_skipnan_matches_filtered_quantile(rng):
    data = rng.normal(size=40)
    data[rng.choice(40, size=15, replace=False)] = NAN
    clean = data[~np.isnan(data)]
    for q in (0.0, 0.2, 0.5, 0.95, 1.0):
        assert QuantileStats.quantile_skipnan(data.copy(), q) == QuantileStats.quantile(clean.copy(), q)


def test_skipnan_lane_keeps_its_values():
    lane = np.array([4.0, NAN, 1.0, NAN, 2.0, 3.0])
    QuantileStats.quantile_skipnan(lane, 0.5)
    assert np.isnan(lane).sum() == 2
    assert sorted(lane[~np.isnan(lane)].tolist()) == [1.0, 2.0, 3.0, 4.0]


def test_skipnan_still_validates_level():
    lane = np.array([NAN, 2.0, 1.0])
    with pytest.raises(InvalidQuantileLevelError):
        QuantileStats.quantile_skipnan(lane, -1)
    assert np.isnan(lane[0])
    assert lane[1:].tolist() == [2.0, 1.0]


# -------------------------
# along an axis
# -------------------------

def test_quantile_axis_skipnan_with_all_nan_lane():
    data = np.array([
        [1.0, NAN, 3.0, NAN, 5.0],
        [NAN, NAN, NAN, NAN, NAN],
        [10.0, 20.0, 30.0, 40.0, 50.0],
    ])
    result = QuantileStats.quantile_axis_skipnan(data, 1, 0.5, "linear")
    assert result.shape == (3,)
    assert result[0] == 3.0
    assert math.isnan(result[1])
    assert result[2] == 30.0


def test_quantile_axis_skipnan_matches_nanquantile(rng):
    data = rng.normal(size=(6, 9))
    data[rng.random(size=data.shape) < 0.3] = NAN
    data[:, 0] = rng.normal(size=6)  # every lane along axis 1 keeps a value
    for q in (0.0, 0.1, 0.33, 0.77, 1.0):
        for interpolation in ("lower", "higher", "linear"):
            got = QuantileStats.quantile_axis_skipnan(data.copy(), 1, q, interpolation)
            expected = np.nanquantile(data, q, axis=1, method=interpolation)
            np.testing.assert_allclose(got, expected, rtol=1e-12, atol=1e-12)


def test_empty_axis_skipnan_is_nan_filled():
    result = QuantileStats.quantile_axis_skipnan(np.empty((2, 0)), 1, 0.5)
    assert result.shape == (2,)
    assert np.isnan(result).all()


def test_integer_input_promotes_to_float():
    data = np.array([[3, 1, 2], [6, 5, 4]])
    result = QuantileStats.quantile_axis_skipnan(data, 1, 0.5, "lower")
    assert result.dtype == np.float64
    assert result.tolist() == [2.0, 5.0]


def test_float32_keeps_dtype():
    data = np.array([[1.0, NAN], [NAN, NAN]], dtype=np.float32)
    result = QuantileStats.quantile_axis_skipnan(data, 1, 0.5, "linear")
    assert result.dtype == np.float32
    assert result[0] == 1.0
    assert np.isnan(result[1])


def test_nat_values_are_skipped():
    lane = np.array(["NaT", 3, 1, 2], dtype="m8[s]")
    assert QuantileStats.quantile_skipnan(lane, 0.5, "lower") == np.timedelta64(2, "s")


def test_timedelta_keeps_dtype_and_fills_nat():
    data = np.array([[4, "NaT", 2], ["NaT", "NaT", "NaT"]], dtype="m8[s]")
    result = QuantileStats.quantile_axis_skipnan(data, 1, 0.5, "linear")
    assert result.dtype == np.dtype("m8[s]")
    assert result[0] == np.timedelta64(3, "s")
    assert np.isnat(result[1])


def test_datetime_with_ordering_interpolation():
    lane = np.array(["2020-01-03", "NaT", "2020-01-01"], dtype="M8[D]")
    assert QuantileStats.quantile_skipnan(lane, 1.0, "higher") == np.datetime64("2020-01-03")
    assert np.isnat(QuantileStats.quantile_skipnan(np.array(["NaT"], dtype="M8[D]"), 0.5, "lower"))


def test_bulk_skipnan_ordering_and_values():
    data = np.array([[1.0, NAN, 3.0, NAN, 5.0], [NAN] * 5])
    result = QuantileStats.quantiles_axis_skipnan(data, 1, [1.0, 0.0, 0.5, 0.0], "lower")
    assert list(result) == [0.0, 0.5, 1.0]
    assert result[0.0][0] == 1.0
    assert result[0.5][0] == 3.0
    assert result[1.0][0] == 5.0
    assert all(math.isnan(values[1]) for values in result.values())


# -------------------------
# min / max
# -------------------------

def test_min_max():
    a = np.array([[3, 9], [-2, 4]])
    assert QuantileStats.min(a) == -2
    assert QuantileStats.max(a) == 9


def test_min_max_empty_is_none():
    assert QuantileStats.min(np.array([])) is None
    assert QuantileStats.max(np.array([])) is None


def test_min_max_with_nan_is_none():
    a = np.array([1.0, NAN, 0.5])
    assert QuantileStats.min(a) is None
    assert QuantileStats.max(a) is None


def test_min_max_skipnan():
    a = np.array([[1.0, NAN], [NAN, -4.0]])
    assert QuantileStats.min_skipnan(a) == -4.0
    assert QuantileStats.max_skipnan(a) == 1.0


def test_min_max_skipnan_all_nan_is_nan():
    assert math.isnan(QuantileStats.min_skipnan(np.array([NAN, NAN])))
    assert math.isnan(QuantileStats.max_skipnan(np.array([], dtype=np.float64)))


def test_min_max_with_nat():
    a = np.array([3, "NaT", 1], dtype="m8[s]")
    assert QuantileStats.min(a) is None
    assert QuantileStats.max(a) is None
    assert QuantileStats.min_skipnan(a) == np.timedelta64(1, "s")
    assert QuantileStats.max_skipnan(a) == np.timedelta64(3, "s")
    assert np.isnat(QuantileStats.min_skipnan(np.array(["NaT"], dtype="M8[D]")))


def test_min_max_objects_and_strings():
    assert QuantileStats.min(np.array(["b", "a", "c"], dtype=object)) == "a"
    assert QuantileStats.max(np.array(["b", "a", "c"], dtype=object)) == "c"


def test_min_max_complex():
    a = np.array([1 + 1j, 2 + 0j])
    assert QuantileStats.min(a) is None
    with pytest.raises(UnorderableValueError):
        QuantileStats.min_skipnan(a)
