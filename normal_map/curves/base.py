"""Abstract interface shared by every curve.

Curves implement two private hooks, ``_normalize`` and ``_denormalize``,
written against ``Numeric`` so they accept either a scalar or an array plus
an ``out`` buffer. ``BaseMap`` turns those hooks into the public scalar and
batch operations.

Batch operations process only the overlapping prefix of the input and output
sequences: with ``len(in) != len(out)`` the first ``min(len(in), len(out))``
elements are mapped and the rest of ``out`` is left untouched.
"""

import logging
import math
from abc import ABC, abstractmethod
from typing import Any, Optional, Protocol, Sequence, runtime_checkable

import numpy as np

from ..errors import InvalidRangeError
from ..numeric import NumpyFloat, Precision, PrecisionLike, get_numeric

logger = logging.getLogger(__name__)


@runtime_checkable
class NormalMapper(Protocol):
    """Protocol for anything that maps to and from ``[0.0, 1.0]``.

    Every curve and ``NormalMap`` satisfy it.
    """

    def normalize(self, value: float) -> Any:
        """Map a value to the normalized range ``[0.0, 1.0]``."""
        ...

    def denormalize(self, normalized: float) -> Any:
        """Un-map a normalized value to the corresponding value."""
        ...

    def normalize_array(self, in_values: Sequence[float], out_normalized: np.ndarray) -> np.ndarray:
        """Map a sequence of values into ``out_normalized``."""
        ...

    def denormalize_array(self, in_normalized: Sequence[float], out_values: np.ndarray) -> np.ndarray:
        """Un-map a sequence of normalized values into ``out_values``."""
        ...


def check_continuous_range(min_value: float, max_value: float) -> None:
    """Reject bounds a continuous curve cannot interpolate between."""
    if not (math.isfinite(min_value) and math.isfinite(max_value)):
        raise InvalidRangeError(min_value, max_value, "bounds must be finite")
    if min_value == max_value:
        raise InvalidRangeError(min_value, max_value, "min and max must differ")


class BaseMap(ABC):
    """Abstract base class for curves.

    Subclasses pin a float width by overriding the ``precision`` class
    attribute; ``None`` defers to ``settings.default_precision``.
    """

    __slots__ = ("_numeric",)

    precision: Optional[Precision] = None

    def __init__(self, precision: PrecisionLike = None):
        self._numeric = get_numeric(precision if precision is not None else self.precision)

    @property
    def numeric(self) -> NumpyFloat:
        return self._numeric

    @property
    def dtype(self) -> np.dtype:
        return self._numeric.dtype

    def normalize(self, value: float) -> Any:
        """Map a value to the normalized range ``[0.0, 1.0]``."""
        return self._normalize(self._numeric.scalar(value))

    def denormalize(self, normalized: float) -> Any:
        """Un-map a normalized value to the corresponding value."""
        return self._denormalize(self._numeric.scalar(normalized))

    def normalize_array(self, in_values: Sequence[float], out_normalized: np.ndarray) -> np.ndarray:
        """Map an array of values to the normalized range ``[0.0, 1.0]``.

        Values are processed up to the length of the shorter sequence.
        Returns ``out_normalized``.
        """
        inputs, outputs = self._overlap(in_values, out_normalized)
        self._normalize(inputs, out=outputs)
        return out_normalized

    def denormalize_array(self, in_normalized: Sequence[float], out_values: np.ndarray) -> np.ndarray:
        """Un-map an array of normalized values.

        Values are processed up to the length of the shorter sequence.
        Returns ``out_values``.
        """
        inputs, outputs = self._overlap(in_normalized, out_values)
        self._denormalize(inputs, out=outputs)
        return out_values

    def _overlap(self, in_values: Sequence[float], out_values: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
        if not isinstance(out_values, np.ndarray):
            raise TypeError(f"output must be a numpy array, got {type(out_values).__name__}")
        inputs = self._numeric.array(in_values)
        count = min(len(inputs), len(out_values))
        if len(inputs) != len(out_values):
            logger.debug(f"Length mismatch ({len(inputs)} in, {len(out_values)} out), mapping first {count}")
        return inputs[:count], out_values[:count]

    @abstractmethod
    def _normalize(self, value, out=None):
        """Normalize a scalar or, with ``out``, an array in place."""
        pass

    @abstractmethod
    def _denormalize(self, normalized, out=None):
        """Denormalize a scalar or, with ``out``, an array in place."""
        pass
