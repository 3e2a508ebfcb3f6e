"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from typing import Callable

import pytest

from normal_map import f32, f64
from normal_map.numeric import Precision


@pytest.fixture(params=[Precision.FLOAT32, Precision.FLOAT64], ids=["f32", "f64"])
def precision(request: pytest.FixtureRequest) -> Precision:
    """Run a test once per float width."""
    return request.param


@pytest.fixture
def width(precision: Precision):
    """The ``normal_map.f32`` or ``normal_map.f64`` module matching ``precision``."""
    return f32 if precision == Precision.FLOAT32 else f64


@pytest.fixture
def approx(precision: Precision) -> Callable[[float], object]:
    """``pytest.approx`` with a tolerance suited to the float width."""
    tol = 1e-5 if precision == Precision.FLOAT32 else 1e-12

    def _approx(expected):
        return pytest.approx(expected, rel=tol, abs=tol)

    return _approx

