from __future__ import annotations

import numpy as np
import pytest

from ndstats.config import settings

ALL_INTERPOLATIONS = ["lower", "higher", "nearest", "midpoint", "linear"]


@pytest.fixture
def rng():
    return np.random.default_rng(20190612)


@pytest.fixture(autouse=True)
def _default_interpolation(monkeypatch):
    # tests never depend on a developer's NDSTATS_* environment
    monkeypatch.setattr(settings, "default_interpolation", "linear")
