"""Shared XDG path discovery utilities."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from datrain.constants import APP_NAME


@dataclass(frozen=True)
class PathsConfig:
    config_dir_name: str = APP_NAME
    data_dir_name: str = APP_NAME
    global_config_filename: str = "config.yaml"
    log_filename: str = f"{APP_NAME}.log"


def get_global_config_root(config: PathsConfig) -> Path:
    """Get global config root directory.

    Returns ~/.config/{config_dir_name} (or XDG_CONFIG_HOME/{config_dir_name} if set).
    """
    xdg_base = os.getenv("XDG_CONFIG_HOME")
    base_dir = Path(xdg_base).expanduser() if xdg_base else Path.home() / ".config"
    return base_dir / config.config_dir_name


def get_global_config_path(config: PathsConfig) -> Path:
    return get_global_config_root(config) / config.global_config_filename


def get_data_directory(config: PathsConfig) -> Path:
    """Get XDG data directory.

    Returns ~/.local/share/{data_dir_name} (or XDG_DATA_HOME/{data_dir_name} if set).
    """
    xdg_data = os.getenv("XDG_DATA_HOME")
    base_dir = Path(xdg_data).expanduser() if xdg_data else Path.home() / ".local" / "share"
    return base_dir / config.data_dir_name
