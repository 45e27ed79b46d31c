"""
Quantiles of pandas DataFrame columns
"""
import logging
from typing import Iterable

import numpy as np
import pandas as pd

from .interpolate.registry import InterpolationLike
from .stats.quantile import QuantileStats

logger = logging.getLogger(__name__)


def quantile_frame(df: pd.DataFrame, levels: Iterable[float],
                   interpolation: InterpolationLike = None) -> pd.DataFrame:
    """
    Quantiles of every numeric column, NaN/NA values skipped.

    Returns a DataFrame indexed by the requested levels (deduplicated,
    ascending) with one column per numeric column of ``df``. A column with no
    valid value yields NaN. ``df`` itself is left untouched.
    """
    numeric = df.select_dtypes(include="number")
    skipped = [c for c in df.columns if c not in numeric.columns]
    if skipped:
        logger.debug("skipping non-numeric columns: %s", skipped)

    # to_numpy copies, so reordering happens on private data
    values = numeric.to_numpy(dtype=np.float64, na_value=np.nan, copy=True)
    results = QuantileStats.quantiles_axis_skipnan(values, 0, levels, interpolation)

    return pd.DataFrame(
        [results[level] for level in results],
        index=pd.Index([float(level) for level in results], name="quantile"),
        columns=numeric.columns,
    )
