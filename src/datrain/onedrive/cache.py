"""Copy a local directory's files into the OneDrive folder."""

from __future__ import annotations

import shutil
from collections.abc import Mapping
from pathlib import Path

from result import Err, Ok, Result, is_err

from datrain.common import create_logger

from .models import CacheError, CachedFile, CacheFailure, CacheReport, CacheSourceError, OneDriveFolderError
from .paths import resolve_home_directory, resolve_onedrive_folder
from .settings import MarkerSettings

logger = create_logger("onedrive.cache")


def copy_to_onedrive(
    source_dir: Path,
    settings: MarkerSettings,
    environ: Mapping[str, str] | None = None,
) -> Result[CacheReport, CacheError]:
    """Copy every regular file in ``source_dir`` into the OneDrive folder.

    Subdirectories are skipped. A file that fails to copy is recorded in the
    report and the remaining files are still copied.
    """
    home = resolve_home_directory(settings.home_env_var, environ)
    if is_err(home):
        return home

    onedrive_dir = resolve_onedrive_folder(home.unwrap(), settings)
    if not onedrive_dir.is_dir():
        return Err(
            OneDriveFolderError(
                path=onedrive_dir,
                message=f"Could not locate OneDrive folder at {onedrive_dir}. Is OneDrive installed and set up?",
            )
        )

    if not source_dir.is_dir():
        return Err(
            CacheSourceError(
                path=source_dir,
                message=f"Source directory '{source_dir}' does not exist. Place files to sync to OneDrive here.",
            )
        )

    try:
        entries = sorted(source_dir.iterdir(), key=lambda entry: entry.name)
    except OSError as exc:
        return Err(CacheSourceError(path=source_dir, message=f"Failed to read source directory: {exc}"))

    report = CacheReport(destination=onedrive_dir)
    for entry in entries:
        if not entry.is_file():
            continue
        destination = onedrive_dir / entry.name
        try:
            shutil.copy(entry, destination)
        except OSError as exc:
            logger.warning("Failed to copy file", source=str(entry), error=str(exc))
            report.failures.append(CacheFailure(source=entry, message=str(exc)))
            continue
        logger.debug("Copied file", source=str(entry), destination=str(destination))
        report.copied.append(CachedFile(source=entry, destination=destination))

    logger.info(
        "Cache copy finished",
        destination=str(onedrive_dir),
        copied=len(report.copied),
        failed=len(report.failures),
    )
    return Ok(report)
