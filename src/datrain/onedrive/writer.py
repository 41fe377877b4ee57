"""Marker file writer."""

from __future__ import annotations

from pathlib import Path

from result import Err, Ok, Result

from datrain.common import create_logger

from .models import MarkerIOError, MarkerWriteResult

logger = create_logger("onedrive")


def write_marker(path: Path, content: str) -> Result[MarkerWriteResult, MarkerIOError]:
    """Create or truncate ``path`` and write ``content`` to it."""
    try:
        with path.open("w", encoding="utf-8") as handle:
            written = handle.write(content)
    except OSError as exc:
        logger.error("Failed to write marker file", path=str(path), error=str(exc))
        return Err(
            MarkerIOError(
                path=path,
                reason=exc.strerror or str(exc),
                message="Failed to open file in OneDrive folder",
            )
        )

    logger.info("Marker file written", path=str(path), characters=written)
    return Ok(MarkerWriteResult(path=path, characters_written=written))
