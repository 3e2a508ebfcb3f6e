"""Curve variants - the four fixed mapping shapes."""

from .base import BaseMap, NormalMapper, check_continuous_range
from .linear import LinearMap
from .power import PowerMap
from .log2 import Log2Map
from .discrete import DiscreteMap, IndexConvertible

__all__ = [
    # Interface
    "BaseMap",
    "NormalMapper",
    "check_continuous_range",
    # Curves
    "LinearMap",
    "PowerMap",
    "Log2Map",
    "DiscreteMap",
    "IndexConvertible",
]
