"""Linear mapping."""

import logging
from typing import Optional

from ..numeric import PrecisionLike
from ..units import Unit, make_shape
from .base import BaseMap, check_continuous_range

logger = logging.getLogger(__name__)


class LinearMap(BaseMap):
    """Linear mapping.

    Please note if you use a decibel unit, then the decibels are what will
    be linearly mapped, not the raw amplitude: ``min_value``/``max_value``
    are dB levels while the values passed to ``normalize`` and returned by
    ``denormalize`` are amplitudes.

    No clamping is performed; values outside the range extrapolate.
    """

    __slots__ = ("_min", "_max", "_unit", "_shape")

    def __init__(
        self,
        min_value: float,
        max_value: float,
        unit: Optional[Unit] = None,
        *,
        precision: PrecisionLike = None,
    ):
        super().__init__(precision)
        check_continuous_range(min_value, max_value)

        self._unit = unit if unit is not None else Unit.generic()
        self._min = self._numeric.scalar(min_value)
        self._max = self._numeric.scalar(max_value)
        self._shape = make_shape(min_value, max_value, self._unit, self._numeric)

        logger.debug(f"Created {self!r}")

    @property
    def min(self):
        return self._min

    @property
    def max(self):
        return self._max

    @property
    def unit(self) -> Unit:
        return self._unit

    def __repr__(self) -> str:
        return (
            f"LinearMap(min={float(self._min)}, max={float(self._max)}, "
            f"unit={self._unit.kind.value}, precision={self._numeric.precision.value})"
        )

    def _normalize(self, value, out=None):
        return self._shape.normalize(value, out=out)

    def _denormalize(self, normalized, out=None):
        return self._shape.denormalize(normalized, out=out)
