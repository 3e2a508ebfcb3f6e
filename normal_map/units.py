"""Units and the shaping applied before/after the continuous curves.

A ``Unit`` decides how a ``LinearMap`` or ``PowerMap`` distributes its
range. With ``UnitKind.GENERIC`` the bounds and the mapped values share one
scale. With ``UnitKind.DECIBELS`` the bounds are dB levels and the values
going in and out of the mapper are raw amplitudes, so the decibels are what
get mapped, not the amplitude.
"""

import math
from enum import Enum
from typing import Optional

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .config import settings
from .numeric import NumpyFloat, get_numeric

# dB change per doubling of amplitude: 20 * log10(2)
DB_PER_OCTAVE = 20.0 * math.log10(2.0)
OCTAVES_PER_DB = 1.0 / DB_PER_OCTAVE

_UNSET = object()


class UnitKind(str, Enum):
    """Available unit shapings."""

    GENERIC = "generic"
    DECIBELS = "decibels"


class Unit(BaseModel):
    """The unit a continuous curve maps.

    Use ``Unit.generic()`` or ``Unit.decibels()`` rather than building one
    by hand.
    """

    model_config = ConfigDict(frozen=True)

    kind: UnitKind = Field(default=UnitKind.GENERIC, description="Unit shaping")
    neg_infinity_clamp: Optional[float] = Field(
        default=None,
        description="dB level at or below which amplitudes are treated as silence (decibels only)",
    )

    @field_validator("neg_infinity_clamp")
    @classmethod
    def check_clamp(cls, v):
        if v is not None and not math.isfinite(v):
            raise ValueError("neg_infinity_clamp must be a finite dB level")
        return v

    @classmethod
    def generic(cls) -> "Unit":
        return cls(kind=UnitKind.GENERIC)

    @classmethod
    def decibels(cls, neg_infinity_clamp=_UNSET) -> "Unit":
        """Decibel unit.

        Args:
            neg_infinity_clamp: dB level (e.g. ``-90.0``) at or below which
                values clamp to silence. ``None`` disables clamping. When
                omitted, ``settings.decibel_floor_db`` is used.

        With no floor configured (the default), amplitude ``0.0`` normalizes
        to ``-inf``. Set ``NORMAL_MAP_DECIBEL_FLOOR_DB=-90`` for a fixed
        -90 dB silence floor instead.
        """
        if neg_infinity_clamp is _UNSET:
            neg_infinity_clamp = settings.decibel_floor_db
        return cls(kind=UnitKind.DECIBELS, neg_infinity_clamp=neg_infinity_clamp)

    @property
    def is_decibels(self) -> bool:
        return self.kind == UnitKind.DECIBELS


def db_to_coeff(db, numeric: Optional[NumpyFloat] = None, out=None):
    """Convert decibels to an amplitude coefficient (0 dB -> 1.0)."""
    n = numeric or get_numeric()
    return n.exp2(n.multiply(db, n.scalar(OCTAVES_PER_DB), out=out), out=out)


def coeff_to_db(coeff, numeric: Optional[NumpyFloat] = None, out=None):
    """Convert an amplitude coefficient to decibels (0.0 -> -inf)."""
    n = numeric or get_numeric()
    return n.multiply(n.log2(coeff, out=out), n.scalar(DB_PER_OCTAVE), out=out)


class GenericShape:
    """Plain linear interpolation between ``min`` and ``max``."""

    __slots__ = ("_n", "min", "range", "range_inv")

    def __init__(self, min_value: float, max_value: float, numeric: NumpyFloat):
        n = numeric
        self._n = n
        self.min = n.scalar(min_value)
        self.range = n.subtract(n.scalar(max_value), self.min)
        self.range_inv = n.divide(n.scalar(1.0), self.range)

    def normalize(self, value, out=None):
        n = self._n
        return n.multiply(n.subtract(value, self.min, out=out), self.range_inv, out=out)

    def denormalize(self, normalized, out=None):
        n = self._n
        return n.add(n.multiply(normalized, self.range, out=out), self.min, out=out)


class DecibelShape(GenericShape):
    """Linear interpolation in dB with amplitudes on the value side."""

    __slots__ = ()

    def normalize(self, value, out=None):
        return super().normalize(coeff_to_db(value, self._n, out=out), out=out)

    def denormalize(self, normalized, out=None):
        return db_to_coeff(super().denormalize(normalized, out=out), self._n, out=out)


class ClampedDecibelShape(DecibelShape):
    """``DecibelShape`` with a floor below which the amplitude is silence.

    The array path builds a boolean mask of floored elements, one temporary
    per call.
    """

    __slots__ = ("clamp_db", "clamp_coeff", "_zero")

    def __init__(self, min_value: float, max_value: float, clamp_db: float, numeric: NumpyFloat):
        super().__init__(min_value, max_value, numeric)
        self.clamp_db = numeric.scalar(clamp_db)
        self.clamp_coeff = db_to_coeff(self.clamp_db, numeric)
        self._zero = numeric.scalar(0.0)

    def normalize(self, value, out=None):
        return super().normalize(self._n.maximum(value, self.clamp_coeff, out=out), out=out)

    def denormalize(self, normalized, out=None):
        coeff = super().denormalize(normalized, out=out)
        if out is None:
            return self._zero if coeff <= self.clamp_coeff else coeff
        np.copyto(out, self._zero, where=out <= self.clamp_coeff)
        return out


def make_shape(min_value: float, max_value: float, unit: Unit, numeric: NumpyFloat) -> GenericShape:
    """Build the shaping for a unit."""
    if not unit.is_decibels:
        return GenericShape(min_value, max_value, numeric)
    if unit.neg_infinity_clamp is None:
        return DecibelShape(min_value, max_value, numeric)
    return ClampedDecibelShape(min_value, max_value, unit.neg_infinity_clamp, numeric)


__all__ = [
    "DB_PER_OCTAVE",
    "UnitKind",
    "Unit",
    "db_to_coeff",
    "coeff_to_db",
    "GenericShape",
    "DecibelShape",
    "ClampedDecibelShape",
    "make_shape",
]
