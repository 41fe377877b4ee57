"""DatRain - drop marker files into the local OneDrive folder for the sync client.

By default, DatRain's internal logging is disabled when used as a library.
Library users can enable logging by calling datrain.enable_logging().
"""

from datrain.common import disable_library_logging, enable_library_logging

disable_library_logging()

enable_logging = enable_library_logging

__all__ = [
    "enable_logging",
]
