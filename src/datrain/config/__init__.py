"""Public configuration API for DatRain."""

from __future__ import annotations

from .loader import load_config_file, load_global_config
from .models import (
    ConfigError,
    ConfigIOError,
    ConfigNotFoundError,
    ConfigValidationError,
    ConfigYamlError,
    GlobalConfig,
)

__all__ = [
    "ConfigError",
    "ConfigIOError",
    "ConfigNotFoundError",
    "ConfigValidationError",
    "ConfigYamlError",
    "GlobalConfig",
    "load_config_file",
    "load_global_config",
]
