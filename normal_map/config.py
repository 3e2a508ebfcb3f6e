"""Configuration settings for normal-map."""

from typing import Literal, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """normal-map configuration settings.

    Every value can be overridden with a ``NORMAL_MAP_`` environment variable,
    e.g. ``NORMAL_MAP_DEFAULT_PRECISION=float32``.
    """

    # Logging settings
    # Root log level (DEBUG, INFO, WARNING, ERROR)
    log_level: str = "INFO"
    # Curve construction messages (set to DEBUG to trace mapper creation)
    log_level_curves: str = "INFO"

    # Float width used when a mapper is built without an explicit precision.
    # normal_map.f32 / normal_map.f64 ignore this and pin their own width.
    default_precision: Literal["float32", "float64"] = "float64"

    # Default neg_infinity_clamp for Unit.decibels(), in dB.
    # None = no clamp (0.0 amplitude maps to -inf dB).
    decibel_floor_db: Optional[float] = None

    @field_validator("default_precision", mode="before")
    @classmethod
    def coerce_precision(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v

    model_config = SettingsConfigDict(env_prefix="NORMAL_MAP_", env_file=".env", extra="ignore")


settings = Settings()
