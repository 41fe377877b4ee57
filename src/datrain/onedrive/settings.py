"""Marker file and OneDrive folder settings."""

from __future__ import annotations

import sys
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StrictStr

_NonEmptyString = Annotated[StrictStr, Field(min_length=1)]

MARKER_CONTENT = "This is a DatRain sync test.\n"


def default_home_env_var() -> str:
    """Name of the variable holding the user's home/profile directory on this platform."""
    return "USERPROFILE" if sys.platform == "win32" else "HOME"


class MarkerSettings(BaseModel):
    """Where the marker file goes.

    The marker always contains ``MARKER_CONTENT``.

    The destination is ``$<home_env_var>/<vendor_folder>/<file_name>``.

    Attributes:
        home_env_var: Environment variable that holds the home/profile directory
        vendor_folder: OneDrive folder name below the home directory
        file_name: Marker file name inside the OneDrive folder
        cache_source_dir: Default source directory for ``datrain cache``
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    home_env_var: _NonEmptyString = Field(default_factory=default_home_env_var)
    vendor_folder: _NonEmptyString = "OneDrive"
    file_name: _NonEmptyString = "DatRainCacheTest.txt"
    cache_source_dir: _NonEmptyString = "cache_to_onedrive"
