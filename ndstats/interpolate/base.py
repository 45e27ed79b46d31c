"""
Base interpolation strategy and index arithmetic
"""
import math
from abc import ABC, abstractmethod
from typing import Any, Optional

import numpy as np

from ..errors import InterpolationTypeError, UnorderableValueError


class Interpolate(ABC):
    """Policy for turning the order statistics around a quantile level into a value.

    For a level ``q`` over a lane of length ``n`` the fractional index is
    ``q * (n - 1)``; the strategy first reports which neighbouring order
    statistics it needs (``needs_lower`` / ``needs_higher``) so that only those
    are selected, then combines them in ``interpolate``.

    Strategies are stateless and used as classes, never instantiated.
    """

    # Subclasses must define these
    NAME: str = None
    REQUIRES_ARITHMETIC: bool = False

    @classmethod
    def float_quantile_index(cls, q: float, n: int) -> float:
        return q * (n - 1)

    @classmethod
    def lower_index(cls, q: float, n: int) -> int:
        return math.floor(cls.float_quantile_index(q, n))

    @classmethod
    def higher_index(cls, q: float, n: int) -> int:
        return math.ceil(cls.float_quantile_index(q, n))

    @classmethod
    def float_quantile_index_fraction(cls, q: float, n: int) -> float:
        f = cls.float_quantile_index(q, n)
        return f - math.floor(f)

    @classmethod
    @abstractmethod
    def needs_lower(cls, q: float, n: int) -> bool:
        """Whether the order statistic at ``lower_index`` is required"""

    @classmethod
    @abstractmethod
    def needs_higher(cls, q: float, n: int) -> bool:
        """Whether the order statistic at ``higher_index`` is required"""

    @classmethod
    @abstractmethod
    def interpolate(cls, lower: Optional[Any], higher: Optional[Any], q: float, n: int) -> Any:
        """Combine the fetched order statistic(s); unneeded ones are passed as None"""

    @classmethod
    def required_indexes(cls, q: float, n: int) -> list:
        indexes = []
        if cls.needs_lower(q, n):
            indexes.append(cls.lower_index(q, n))
        if cls.needs_higher(q, n):
            indexes.append(cls.higher_index(q, n))
        return indexes

    @classmethod
    def check_dtype(cls, dtype: np.dtype) -> None:
        """Reject element types this strategy cannot work with."""
        if dtype.kind == "c":
            raise UnorderableValueError(
                f"complex dtype {dtype} has no total order",
                suggestion="Take the real part or the absolute value first",
            )
        if cls.REQUIRES_ARITHMETIC and dtype.kind not in "iufmO":
            raise InterpolationTypeError(
                f"'{cls.NAME}' interpolation needs arithmetic on the elements, dtype {dtype} has none",
                suggestion="Use 'lower', 'higher' or 'nearest' interpolation",
            )

    @classmethod
    def result_dtype(cls, dtype: np.dtype) -> np.dtype:
        """dtype of the values this strategy produces for input of ``dtype``"""
        return dtype
