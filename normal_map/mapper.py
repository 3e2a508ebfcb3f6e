"""Unified mapper - one type for any curve chosen at runtime.

Example usage:
    from normal_map import NormalMap, Unit

    gain = NormalMap.linear(-90.0, 6.0, Unit.decibels(neg_infinity_clamp=-90.0))
    cutoff = NormalMap.log2(20.0, 20480.0)
    mode = NormalMap.discrete(-5, 5)

    cutoff.denormalize(0.5)  # 640.0
    mode.normalize(3.0)      # 0.8
"""

import logging
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional, Sequence, Union

import numpy as np

from .curves import DiscreteMap, IndexConvertible, LinearMap, Log2Map, PowerMap
from .numeric import NumpyFloat, Precision, PrecisionLike
from .units import Unit

if TYPE_CHECKING:
    from .schema import MapperConfig

logger = logging.getLogger(__name__)


class MapperKind(str, Enum):
    """The curve variant a ``NormalMap`` wraps."""

    LINEAR = "linear"
    POWER = "power"
    LOG2 = "log2"
    DISCRETE = "discrete"


Mapper = Union[LinearMap, PowerMap, Log2Map, DiscreteMap]

_KINDS: tuple[tuple[type, MapperKind], ...] = (
    (LinearMap, MapperKind.LINEAR),
    (PowerMap, MapperKind.POWER),
    (Log2Map, MapperKind.LOG2),
    (DiscreteMap, MapperKind.DISCRETE),
)


def mapper_kind(mapper: Any) -> MapperKind:
    """Get the kind of a curve, rejecting anything outside the four variants."""
    for curve_cls, kind in _KINDS:
        if isinstance(mapper, curve_cls):
            return kind
    raise TypeError(f"Not a curve variant: {type(mapper).__name__}")


class NormalMap:
    """A mapper that maps a range of values to and from the normalized
    range ``[0.0, 1.0]`` using whichever curve it was built with.

    The wrapped curve is fixed at construction. A discrete curve is driven
    through its float overloads, so ``normalize(3.0)`` rounds to the nearest
    index first.
    """

    __slots__ = ("_mapper", "_kind")

    # Float width used by the constructors when none is given
    precision: Optional[Precision] = None

    def __init__(self, mapper: Mapper):
        self._kind = mapper_kind(mapper)
        self._mapper = mapper

    @classmethod
    def linear(
        cls,
        min_value: float,
        max_value: float,
        unit: Optional[Unit] = None,
        *,
        precision: PrecisionLike = None,
    ) -> "NormalMap":
        """Create a ``NormalMap`` with linear mapping.

        Please note if you use a decibel unit, then the decibels are what
        will be linearly mapped, not the raw amplitude.
        """
        return cls(LinearMap(min_value, max_value, unit, precision=cls._precision(precision)))

    @classmethod
    def power(
        cls,
        min_value: float,
        max_value: float,
        exponent: float,
        unit: Optional[Unit] = None,
        *,
        precision: PrecisionLike = None,
    ) -> "NormalMap":
        """Create a ``NormalMap`` where the normalized value is raised to ``exponent``.

        Raises:
            InvalidParameterError: If ``exponent`` is not finite and > 0
        """
        return cls(PowerMap(min_value, max_value, exponent, unit, precision=cls._precision(precision)))

    @classmethod
    def log2(cls, min_value: float, max_value: float, *, precision: PrecisionLike = None) -> "NormalMap":
        """Create a ``NormalMap`` with logarithmic mapping, useful for Hz values."""
        return cls(Log2Map(min_value, max_value, precision=cls._precision(precision)))

    @classmethod
    def discrete(
        cls,
        min_index: IndexConvertible,
        max_index: IndexConvertible,
        *,
        precision: PrecisionLike = None,
    ) -> "NormalMap":
        """Create a ``NormalMap`` over a discrete integer range.

        Bounds may be ``int`` or any index-convertible value such as
        ``IntEnum`` members.
        """
        return cls(DiscreteMap(min_index, max_index, precision=cls._precision(precision)))

    @classmethod
    def discrete_enum(cls, enum_cls: type[Enum], *, precision: PrecisionLike = None) -> "NormalMap":
        """Create a discrete ``NormalMap`` spanning every member of an ``IntEnum``."""
        return cls(DiscreteMap.from_enum(enum_cls, precision=cls._precision(precision)))

    @classmethod
    def from_config(cls, config: "MapperConfig") -> "NormalMap":
        """Create a ``NormalMap`` from a declarative ``MapperConfig``."""
        logger.debug(f"Building {config.kind.value} mapper from config")
        return config.build(cls)

    @classmethod
    def _precision(cls, precision: PrecisionLike) -> PrecisionLike:
        return precision if precision is not None else cls.precision

    @property
    def mapper(self) -> Mapper:
        """The wrapped curve."""
        return self._mapper

    @property
    def kind(self) -> MapperKind:
        return self._kind

    @property
    def numeric(self) -> NumpyFloat:
        return self._mapper.numeric

    @property
    def dtype(self) -> np.dtype:
        return self._mapper.dtype

    def __repr__(self) -> str:
        return f"NormalMap({self._mapper!r})"

    def normalize(self, value: float) -> Any:
        """Map a value to the normalized range ``[0.0, 1.0]``."""
        return self._mapper.normalize(value)

    def denormalize(self, normalized: float) -> Any:
        """Un-map a normalized value to the corresponding value."""
        return self._mapper.denormalize(normalized)

    def normalize_array(self, in_values: Sequence[float], out_normalized: np.ndarray) -> np.ndarray:
        """Map an array of values to the normalized range ``[0.0, 1.0]``.

        Values are processed up to the length of the shorter sequence.
        """
        return self._mapper.normalize_array(in_values, out_normalized)

    def denormalize_array(self, in_normalized: Sequence[float], out_values: np.ndarray) -> np.ndarray:
        """Un-map an array of normalized values.

        Values are processed up to the length of the shorter sequence.
        """
        return self._mapper.denormalize_array(in_normalized, out_values)
