"""Float-width abstraction shared by every curve.

Curves are written once against the ``Numeric`` protocol and bound to
float32 or float64 by picking a ``NumpyFloat`` instance. Every operation
accepts a scalar or an ndarray plus an optional ``out`` array, so the
scalar path and the batch path run the same code:

    n = get_numeric("float32")
    n.multiply(n.subtract(x, lo, out=out), scale, out=out)

With ``out=None`` each call returns a numpy scalar of the bound width; with
an ``out`` array every step writes in place into that buffer. Callers that
need a mask (the clamped decibel floor) still allocate one temporary.
"""

from enum import Enum
from typing import Any, Optional, Protocol, Union, runtime_checkable

import numpy as np

from .config import settings


class Precision(str, Enum):
    """Supported floating-point widths."""

    FLOAT32 = "float32"
    FLOAT64 = "float64"

    @property
    def dtype(self) -> np.dtype:
        return np.dtype(self.value)


PrecisionLike = Union[Precision, str, type, np.dtype, None]


@runtime_checkable
class Numeric(Protocol):
    """Arithmetic and transcendental operations for one float width.

    Implementations are total: NaN and inf propagate per IEEE 754 and no
    operation raises for out-of-domain inputs.
    """

    precision: Precision
    dtype: np.dtype

    def scalar(self, value: Any) -> Any:
        """Construct a scalar of this width from a literal."""
        ...

    def array(self, values: Any) -> np.ndarray:
        """View ``values`` as an array of this width (copies only if needed)."""
        ...

    def add(self, a, b, out=None): ...

    def subtract(self, a, b, out=None): ...

    def multiply(self, a, b, out=None): ...

    def divide(self, a, b, out=None): ...

    def powf(self, base, exponent, out=None):
        """Raise ``base`` to a floating ``exponent``."""
        ...

    def log2(self, x, out=None): ...

    def exp2(self, x, out=None): ...

    def maximum(self, a, b, out=None): ...

    def clamp(self, x, lo, hi, out=None):
        """Clamp ``x`` to the inclusive range ``[lo, hi]``; NaN clamps to ``lo``."""
        ...

    def round_half_up(self, x, out=None):
        """Round to the nearest integer, ties toward +inf."""
        ...


class NumpyFloat:
    """``Numeric`` implementation backed by numpy ufuncs."""

    def __init__(self, precision: Precision):
        self.precision = precision
        self.dtype = precision.dtype
        self._type = self.dtype.type
        self._half = self._type(0.5)

    def __repr__(self) -> str:
        return f"NumpyFloat({self.precision.value})"

    def scalar(self, value: Any) -> Any:
        return self._type(value)

    def array(self, values: Any) -> np.ndarray:
        return np.asarray(values, dtype=self.dtype)

    def add(self, a, b, out=None):
        return np.add(a, b, out=out)

    def subtract(self, a, b, out=None):
        return np.subtract(a, b, out=out)

    def multiply(self, a, b, out=None):
        return np.multiply(a, b, out=out)

    def divide(self, a, b, out=None):
        with np.errstate(divide="ignore", invalid="ignore"):
            return np.divide(a, b, out=out)

    def powf(self, base, exponent, out=None):
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            return np.power(base, exponent, out=out)

    def log2(self, x, out=None):
        with np.errstate(divide="ignore", invalid="ignore"):
            return np.log2(x, out=out)

    def exp2(self, x, out=None):
        with np.errstate(over="ignore"):
            return np.exp2(x, out=out)

    def maximum(self, a, b, out=None):
        return np.maximum(a, b, out=out)

    def clamp(self, x, lo, hi, out=None):
        return np.fmin(np.fmax(x, lo, out=out), hi, out=out)

    def round_half_up(self, x, out=None):
        return np.floor(np.add(x, self._half, out=out), out=out)


_NUMERICS: dict[Precision, NumpyFloat] = {p: NumpyFloat(p) for p in Precision}


def resolve_precision(precision: PrecisionLike = None) -> Precision:
    """Turn a precision name, dtype or numpy type into a ``Precision``.

    ``None`` selects ``settings.default_precision``.
    """
    if precision is None:
        precision = settings.default_precision
    if isinstance(precision, Precision):
        return precision
    if not isinstance(precision, str):
        precision = np.dtype(precision).name
    return Precision(precision.lower())


def get_numeric(precision: PrecisionLike = None) -> NumpyFloat:
    """Get the shared numeric implementation for a float width."""
    return _NUMERICS[resolve_precision(precision)]


__all__ = [
    "Precision",
    "PrecisionLike",
    "Numeric",
    "NumpyFloat",
    "resolve_precision",
    "get_numeric",
]
