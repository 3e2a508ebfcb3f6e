"""Logarithmic mapping using log2, useful for frequency (Hz) values."""

import logging

from ..numeric import PrecisionLike
from .base import BaseMap, check_continuous_range

logger = logging.getLogger(__name__)


class Log2Map(BaseMap):
    """Logarithmic mapping using ``log2``.

    Equal steps of the normalized value cover equal frequency ratios, e.g.
    ``Log2Map(20.0, 20480.0)`` spends 0.1 of the range per octave.

    Both bounds should be > 0.0. Non-positive bounds or values are not
    rejected; they produce non-finite results.
    """

    __slots__ = ("_min", "_max", "_min_log2", "_range_log2", "_range_log2_inv")

    def __init__(self, min_value: float, max_value: float, *, precision: PrecisionLike = None):
        super().__init__(precision)
        check_continuous_range(min_value, max_value)
        if min_value <= 0.0 or max_value <= 0.0:
            logger.warning(
                f"Log2Map bounds [{min_value}, {max_value}] are not positive; "
                "mapped values will be non-finite"
            )

        n = self._numeric
        self._min = n.scalar(min_value)
        self._max = n.scalar(max_value)
        self._min_log2 = n.log2(self._min)
        self._range_log2 = n.subtract(n.log2(self._max), self._min_log2)
        self._range_log2_inv = n.divide(n.scalar(1.0), self._range_log2)

        logger.debug(f"Created {self!r}")

    @property
    def min(self):
        return self._min

    @property
    def max(self):
        return self._max

    def __repr__(self) -> str:
        return (
            f"Log2Map(min={float(self._min)}, max={float(self._max)}, "
            f"precision={self._numeric.precision.value})"
        )

    def _normalize(self, value, out=None):
        n = self._numeric
        log_value = n.log2(value, out=out)
        return n.multiply(n.subtract(log_value, self._min_log2, out=out), self._range_log2_inv, out=out)

    def _denormalize(self, normalized, out=None):
        n = self._numeric
        log_value = n.add(n.multiply(normalized, self._range_log2, out=out), self._min_log2, out=out)
        return n.exp2(log_value, out=out)
