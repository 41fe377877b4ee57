"""Home directory lookup and OneDrive path construction."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from result import Err, Ok, Result

from .models import ConfigurationError
from .settings import MarkerSettings


def resolve_home_directory(
    env_var: str,
    environ: Mapping[str, str] | None = None,
) -> Result[Path, ConfigurationError]:
    """Read the home/profile directory from the environment.

    Args:
        env_var: Name of the variable to read
        environ: Environment mapping, defaults to ``os.environ``

    Returns:
        The directory as a path, or ConfigurationError when unset or empty
    """
    env = os.environ if environ is None else environ
    value = env.get(env_var)
    if not value:
        return Err(
            ConfigurationError(
                env_var=env_var,
                message=f"Required environment variable {env_var} is not set.",
            )
        )
    return Ok(Path(value))


def resolve_onedrive_folder(home: Path, settings: MarkerSettings) -> Path:
    return home / settings.vendor_folder


def build_marker_path(home: Path, settings: MarkerSettings) -> Path:
    # Intermediate directories are not checked; a missing folder surfaces on open.
    return resolve_onedrive_folder(home, settings) / settings.file_name


def resolve_marker_path(
    settings: MarkerSettings,
    environ: Mapping[str, str] | None = None,
) -> Result[Path, ConfigurationError]:
    return resolve_home_directory(settings.home_env_var, environ).map(lambda home: build_marker_path(home, settings))
