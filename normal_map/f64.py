"""Normal mapping using ``float64`` as the internal unit.

    from normal_map.f64 import LinearMap, NormalMap, Unit

    lin_map = LinearMap(-50.0, 50.0, Unit.generic())
    lin_map.normalize(25.0)  # numpy.float64(0.75)
"""

from . import curves as _curves
from . import mapper as _mapper
from .mapper import MapperKind
from .numeric import Precision
from .units import Unit, UnitKind


class LinearMap(_curves.LinearMap):
    __doc__ = _curves.LinearMap.__doc__
    __slots__ = ()
    precision = Precision.FLOAT64


class PowerMap(_curves.PowerMap):
    __doc__ = _curves.PowerMap.__doc__
    __slots__ = ()
    precision = Precision.FLOAT64


class Log2Map(_curves.Log2Map):
    __doc__ = _curves.Log2Map.__doc__
    __slots__ = ()
    precision = Precision.FLOAT64


class DiscreteMap(_curves.DiscreteMap):
    __doc__ = _curves.DiscreteMap.__doc__
    __slots__ = ()
    precision = Precision.FLOAT64


class NormalMap(_mapper.NormalMap):
    __doc__ = _mapper.NormalMap.__doc__
    __slots__ = ()
    precision = Precision.FLOAT64


__all__ = [
    "LinearMap",
    "PowerMap",
    "Log2Map",
    "DiscreteMap",
    "NormalMap",
    "MapperKind",
    "Unit",
    "UnitKind",
]
