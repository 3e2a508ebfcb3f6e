"""Discrete integer mapping.

Any value usable as an index can be mapped, which includes plain ``int`` and
``IntEnum`` members:

    class Waveform(IntEnum):
        SINE = 0
        SAW = 1
        SQUARE = 2

    waveform_map = DiscreteMap.from_enum(Waveform)
    waveform_map.normalize_discrete(Waveform.SAW)                 # 0.5
    waveform_map.denormalize_to_discrete(0.9, into=Waveform)      # Waveform.SQUARE

The map only ever deals in integer indices. Turning an index back into a
caller type is delegated to the ``into`` callable, so any enumeration that
converts losslessly to and from ``int`` plugs in.
"""

import logging
import operator
from enum import Enum
from typing import Callable, MutableSequence, Protocol, Sequence, TypeVar, runtime_checkable

import numpy as np

from ..errors import InvalidRangeError
from ..numeric import PrecisionLike
from .base import BaseMap

logger = logging.getLogger(__name__)

T = TypeVar("T")


@runtime_checkable
class IndexConvertible(Protocol):
    """Anything that converts losslessly to an ``int`` index."""

    def __index__(self) -> int: ...


class DiscreteMap(BaseMap):
    """Discrete integer mapping over the inclusive range ``[min, max]``.

    Unlike the continuous curves, results are clamped to the range: every
    index produced by this map is a valid index. A NaN input lands on
    ``min``.

    Float values round half up on their offset from ``min``, so with
    ``DiscreteMap(-5, 5)`` the value ``-2.5`` rounds to ``-2``.
    """

    __slots__ = ("_min_index", "_max_index", "_min", "_max", "_range", "_range_inv", "_zero")

    def __init__(
        self,
        min_index: IndexConvertible,
        max_index: IndexConvertible,
        *,
        precision: PrecisionLike = None,
    ):
        super().__init__(precision)
        lo = operator.index(min_index)
        hi = operator.index(max_index)
        if lo >= hi:
            raise InvalidRangeError(lo, hi, "discrete range needs min < max")

        n = self._numeric
        self._min_index = lo
        self._max_index = hi
        self._min = n.scalar(lo)
        self._max = n.scalar(hi)
        self._range = n.scalar(hi - lo)
        self._range_inv = n.divide(n.scalar(1.0), self._range)
        self._zero = n.scalar(0.0)

        logger.debug(f"Created {self!r}")

    @classmethod
    def from_enum(cls, enum_cls: type[Enum], *, precision: PrecisionLike = None) -> "DiscreteMap":
        """Create a map spanning the smallest to the largest member of an enum.

        The enum's members must be index-convertible (e.g. ``IntEnum``).
        """
        indices = [operator.index(member) for member in enum_cls]
        if not indices:
            raise InvalidRangeError(None, None, f"{enum_cls.__name__} has no members")
        return cls(min(indices), max(indices), precision=precision)

    @property
    def min(self) -> int:
        return self._min_index

    @property
    def max(self) -> int:
        return self._max_index

    @property
    def num_steps(self) -> int:
        """Number of discrete states in the range."""
        return self._max_index - self._min_index + 1

    def __repr__(self) -> str:
        return (
            f"DiscreteMap(min={self._min_index}, max={self._max_index}, "
            f"precision={self._numeric.precision.value})"
        )

    def normalize_discrete(self, value: IndexConvertible):
        """Map a discrete index (or enum member) to ``[0.0, 1.0]``.

        Indices outside the range clamp to its ends.
        """
        index = min(max(operator.index(value), self._min_index), self._max_index)
        n = self._numeric
        return n.multiply(n.scalar(index - self._min_index), self._range_inv)

    def denormalize_to_discrete(self, normalized: float, into: Callable[[int], T] = int) -> T:
        """Un-map a normalized value to the nearest discrete index.

        The index is clamped to the range and passed through ``into`` (for
        example an ``IntEnum`` class) to build the result.
        """
        offset = self._offset(self._numeric.scalar(normalized))
        return into(self._min_index + int(offset))

    def normalize_discrete_array(
        self, in_values: Sequence[IndexConvertible], out_normalized: np.ndarray
    ) -> np.ndarray:
        """Map a sequence of indices (or enum members) into ``out_normalized``.

        Values are processed up to the length of the shorter sequence. Each
        element goes through ``normalize_discrete``.
        """
        count = min(len(in_values), len(out_normalized))
        for i in range(count):
            out_normalized[i] = self.normalize_discrete(in_values[i])
        return out_normalized

    def denormalize_to_discrete_array(
        self,
        in_normalized: Sequence[float],
        out_values: MutableSequence[T],
        into: Callable[[int], T] = int,
    ) -> MutableSequence[T]:
        """Un-map normalized values into ``out_values`` as indices built by ``into``.

        Values are processed up to the length of the shorter sequence. Each
        element goes through ``denormalize_to_discrete``.
        """
        count = min(len(in_normalized), len(out_values))
        for i in range(count):
            out_values[i] = self.denormalize_to_discrete(in_normalized[i], into)
        return out_values

    def _offset(self, normalized, out=None):
        """Rounded, clamped distance from ``min`` in steps."""
        n = self._numeric
        steps = n.round_half_up(n.multiply(normalized, self._range, out=out), out=out)
        return n.clamp(steps, self._zero, self._range, out=out)

    def _normalize(self, value, out=None):
        n = self._numeric
        steps = n.round_half_up(n.subtract(value, self._min, out=out), out=out)
        steps = n.clamp(steps, self._zero, self._range, out=out)
        return n.multiply(steps, self._range_inv, out=out)

    def _denormalize(self, normalized, out=None):
        return self._numeric.add(self._offset(normalized, out=out), self._min, out=out)
