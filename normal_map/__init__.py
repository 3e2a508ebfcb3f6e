"""Map values to and from the normalized range [0.0, 1.0].

A helper for DSP-style parameter mapping: a knob position in ``[0, 1]`` is
translated to and from a physical unit using a linear, power, log2 or
discrete curve.

```python
from normal_map.f32 import LinearMap, NormalMap, Unit
import numpy as np

lin_map = LinearMap(-50.0, 50.0, Unit.generic())
lin_map.normalize(25.0)     # 0.75
lin_map.denormalize(0.25)   # -25.0

# Efficiently map an array of values
in_normals = np.array([0.0, 1.0, 0.25, -0.25], dtype=np.float32)
out_values = np.zeros(4, dtype=np.float32)
lin_map.denormalize_array(in_normals, out_values)

# One type for any mapper
normal_map = NormalMap.discrete(-5, 5)
normal_map.normalize(3.0)   # 0.8
```

``normal_map.f32`` and ``normal_map.f64`` pin the float width; the classes
exported here follow ``settings.default_precision`` unless given
``precision=``.
"""

from .config import Settings, settings
from .errors import InvalidParameterError, InvalidRangeError, NormalMapError
from .logging_config import setup_logging
from .numeric import Numeric, NumpyFloat, Precision, get_numeric
from .units import Unit, UnitKind, coeff_to_db, db_to_coeff
from .curves import (
    BaseMap,
    DiscreteMap,
    IndexConvertible,
    LinearMap,
    Log2Map,
    NormalMapper,
    PowerMap,
)
from .mapper import MapperKind, NormalMap
from .schema import MapperConfig

__version__ = "0.3.0"

__all__ = [
    # Configuration
    "Settings",
    "settings",
    "setup_logging",
    # Errors
    "NormalMapError",
    "InvalidRangeError",
    "InvalidParameterError",
    # Numeric
    "Numeric",
    "NumpyFloat",
    "Precision",
    "get_numeric",
    # Units
    "Unit",
    "UnitKind",
    "db_to_coeff",
    "coeff_to_db",
    # Curves
    "BaseMap",
    "NormalMapper",
    "LinearMap",
    "PowerMap",
    "Log2Map",
    "DiscreteMap",
    "IndexConvertible",
    # Unified mapper
    "MapperKind",
    "NormalMap",
    "MapperConfig",
]
