"""Declarative mapper description.

Lets an application describe a parameter's mapping as data (e.g. inside its
own pydantic models) and build the ``NormalMap`` from it:

    config = MapperConfig(kind="log2", min_value=20.0, max_value=20480.0)
    cutoff = config.build()
"""

from typing import Optional

from pydantic import BaseModel, Field, model_validator

from .mapper import MapperKind, NormalMap
from .numeric import Precision
from .units import Unit, UnitKind


class MapperConfig(BaseModel):
    """Configuration for a single ``NormalMap``."""

    kind: MapperKind = Field(default=MapperKind.LINEAR, description="Curve variant")
    min_value: float = Field(description="Range minimum (dB for decibel units, index for discrete)")
    max_value: float = Field(description="Range maximum (dB for decibel units, index for discrete)")
    exponent: float = Field(default=1.0, gt=0, description="Power curve exponent")
    unit: UnitKind = Field(default=UnitKind.GENERIC, description="Unit shaping (linear/power only)")
    neg_infinity_clamp: Optional[float] = Field(
        default=None,
        description="dB floor treated as silence (decibel unit only, unset = settings default)",
    )
    precision: Optional[Precision] = Field(default=None, description="Float width (unset = settings default)")

    @model_validator(mode="after")
    def check_discrete_bounds(self):
        if self.kind == MapperKind.DISCRETE:
            for name in ("min_value", "max_value"):
                if not float(getattr(self, name)).is_integer():
                    raise ValueError(f"{name} must be an integer for a discrete mapper")
        return self

    def to_unit(self) -> Unit:
        """The ``Unit`` described by ``unit`` and ``neg_infinity_clamp``."""
        if self.unit == UnitKind.GENERIC:
            return Unit.generic()
        if "neg_infinity_clamp" in self.model_fields_set:
            return Unit.decibels(self.neg_infinity_clamp)
        return Unit.decibels()

    def build(self, mapper_cls: type[NormalMap] = NormalMap) -> NormalMap:
        """Create the described ``NormalMap``.

        Raises:
            InvalidRangeError: If the bounds are unusable for the curve
        """
        if self.kind == MapperKind.LINEAR:
            return mapper_cls.linear(self.min_value, self.max_value, self.to_unit(), precision=self.precision)
        if self.kind == MapperKind.POWER:
            return mapper_cls.power(
                self.min_value, self.max_value, self.exponent, self.to_unit(), precision=self.precision
            )
        if self.kind == MapperKind.LOG2:
            return mapper_cls.log2(self.min_value, self.max_value, precision=self.precision)
        return mapper_cls.discrete(int(self.min_value), int(self.max_value), precision=self.precision)
