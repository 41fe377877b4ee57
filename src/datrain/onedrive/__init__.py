"""DatRain OneDrive module."""

from .cache import copy_to_onedrive
from .models import (
    CacheError,
    CachedFile,
    CacheFailure,
    CacheReport,
    CacheSourceError,
    ConfigurationError,
    MarkerError,
    MarkerIOError,
    MarkerWriteResult,
    OneDriveError,
    OneDriveFolderError,
)
from .paths import build_marker_path, resolve_home_directory, resolve_marker_path, resolve_onedrive_folder
from .settings import MARKER_CONTENT, MarkerSettings, default_home_env_var
from .writer import write_marker

__all__ = [
    "MARKER_CONTENT",
    "CacheError",
    "CacheFailure",
    "CacheReport",
    "CacheSourceError",
    "CachedFile",
    "ConfigurationError",
    "MarkerError",
    "MarkerIOError",
    "MarkerSettings",
    "MarkerWriteResult",
    "OneDriveError",
    "OneDriveFolderError",
    "build_marker_path",
    "copy_to_onedrive",
    "default_home_env_var",
    "resolve_home_directory",
    "resolve_marker_path",
    "resolve_onedrive_folder",
    "write_marker",
]
