"""Logging setup for applications embedding normal-map."""

import logging
import sys
from typing import Optional

from .config import Settings, settings as default_settings


def setup_logging(settings: Optional[Settings] = None) -> None:
    """Configure logging with sensible defaults.

    Log levels can be configured via environment variables:
      NORMAL_MAP_LOG_LEVEL=INFO          # Root level (DEBUG, INFO, WARNING, ERROR)
      NORMAL_MAP_LOG_LEVEL_CURVES=DEBUG  # Curve construction messages
    """
    settings = settings or default_settings
    root_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=root_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    module_levels = {
        "normal_map.curves": settings.log_level_curves,
        "normal_map.mapper": settings.log_level_curves,
    }

    for module, level_str in module_levels.items():
        level = getattr(logging, level_str.upper(), logging.INFO)
        logging.getLogger(module).setLevel(level)
