"""Exponential (power) mapping."""

import logging
import math
from typing import Optional

from ..errors import InvalidParameterError
from ..numeric import PrecisionLike
from ..units import Unit, make_shape
from .base import BaseMap, check_continuous_range

logger = logging.getLogger(__name__)


class PowerMap(BaseMap):
    """Exponential mapping where the normalized value is raised to the
    supplied exponent.

    ``denormalize(t) = min + t**exponent * (max - min)``. An exponent above
    1.0 gives more resolution near ``min``; below 1.0, near ``max``.

    Please note if you use a decibel unit, then the decibels are what will
    be mapped, not the raw amplitude.
    """

    __slots__ = ("_min", "_max", "_unit", "_shape", "_exponent", "_exponent_inv")

    def __init__(
        self,
        min_value: float,
        max_value: float,
        exponent: float,
        unit: Optional[Unit] = None,
        *,
        precision: PrecisionLike = None,
    ):
        super().__init__(precision)
        check_continuous_range(min_value, max_value)
        if not math.isfinite(exponent) or exponent <= 0.0:
            raise InvalidParameterError("exponent", exponent, "must be finite and > 0")

        n = self._numeric
        self._unit = unit if unit is not None else Unit.generic()
        self._min = n.scalar(min_value)
        self._max = n.scalar(max_value)
        self._exponent = n.scalar(exponent)
        self._exponent_inv = n.divide(n.scalar(1.0), self._exponent)
        self._shape = make_shape(min_value, max_value, self._unit, n)

        logger.debug(f"Created {self!r}")

    @property
    def min(self):
        return self._min

    @property
    def max(self):
        return self._max

    @property
    def exponent(self):
        return self._exponent

    @property
    def unit(self) -> Unit:
        return self._unit

    def __repr__(self) -> str:
        return (
            f"PowerMap(min={float(self._min)}, max={float(self._max)}, "
            f"exponent={float(self._exponent)}, unit={self._unit.kind.value}, "
            f"precision={self._numeric.precision.value})"
        )

    def _normalize(self, value, out=None):
        lin_mapped = self._shape.normalize(value, out=out)
        return self._numeric.powf(lin_mapped, self._exponent_inv, out=out)

    def _denormalize(self, normalized, out=None):
        curved = self._numeric.powf(normalized, self._exponent, out=out)
        return self._shape.denormalize(curved, out=out)
