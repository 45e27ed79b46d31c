"""
Interpolation registry and lookup
"""
from typing import Dict, List, Optional, Type, Union

from ..errors import UnknownInterpolationError
from .base import Interpolate
from .strategies import Higher, Linear, Lower, Midpoint, Nearest


class InterpolationRegistry:
    """Registry of the (closed) set of interpolation strategies"""

    def __init__(self):
        self._strategies: Dict[str, Type[Interpolate]] = {}
        self._register_all()

    def _register_all(self):
        self.register(Lower)
        self.register(Higher)
        self.register(Nearest)
        self.register(Midpoint)
        self.register(Linear)

    def register(self, strategy: Type[Interpolate]):
        if not strategy.NAME:
            raise ValueError(f"{strategy.__name__} does not define NAME")
        self._strategies[strategy.NAME] = strategy

    def get(self, name: str) -> Optional[Type[Interpolate]]:
        return self._strategies.get(name.strip().lower())

    def list_names(self) -> List[str]:
        return list(self._strategies)


registry = InterpolationRegistry()

InterpolationLike = Union[str, Type[Interpolate], None]


def get_interpolation(interpolation: InterpolationLike = None) -> Type[Interpolate]:
    """
    Resolve an interpolation given as a strategy class, a name, or None.

    None falls back to the configured default (NDSTATS_DEFAULT_INTERPOLATION).
    """
    if interpolation is None:
        # config validates its default against this registry
        from ..config import settings
        interpolation = settings.default_interpolation
    if isinstance(interpolation, type) and issubclass(interpolation, Interpolate):
        if registry.get(interpolation.NAME or "") is not interpolation:
            raise UnknownInterpolationError(f"{interpolation.__name__} is not a registered interpolation")
        return interpolation
    if isinstance(interpolation, str):
        strategy = registry.get(interpolation)
        if strategy is not None:
            return strategy
    raise UnknownInterpolationError(
        f"Unknown interpolation: {interpolation!r}",
        suggestion=f"Use one of: {', '.join(registry.list_names())}",
    )
