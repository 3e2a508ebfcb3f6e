"""Exceptions raised when a mapper is constructed with invalid parameters.

Mapping itself never raises: out-of-domain inputs propagate through IEEE
arithmetic (NaN/inf) or are clamped by the discrete curve.
"""


class NormalMapError(ValueError):
    """Base class for all normal-map construction errors."""


class InvalidRangeError(NormalMapError):
    """Range bounds cannot describe a mapping (e.g. ``min == max``)."""

    def __init__(self, min_value, max_value, reason: str):
        self.min_value = min_value
        self.max_value = max_value
        super().__init__(f"Invalid range [{min_value}, {max_value}]: {reason}")


class InvalidParameterError(NormalMapError):
    """A curve parameter other than the bounds is out of its domain."""

    def __init__(self, name: str, value, reason: str):
        self.name = name
        self.value = value
        super().__init__(f"Invalid {name}={value!r}: {reason}")
