"""OneDrive marker and cache result/error models."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict


class OneDriveError(BaseModel):
    """Base OneDrive operation error."""

    model_config = ConfigDict(extra="forbid")

    message: str


class ConfigurationError(OneDriveError):
    """Required home directory environment variable is unset or empty."""

    env_var: str


class MarkerIOError(OneDriveError):
    """Opening or writing the marker file failed."""

    path: Path
    reason: str


class OneDriveFolderError(OneDriveError):
    """OneDrive folder does not exist below the home directory."""

    path: Path


class CacheSourceError(OneDriveError):
    """Cache source directory is missing or unreadable."""

    path: Path


type MarkerError = ConfigurationError | MarkerIOError
type CacheError = ConfigurationError | OneDriveFolderError | CacheSourceError


class MarkerWriteResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: Path
    characters_written: int


class CachedFile(BaseModel):
    model_config = ConfigDict(frozen=True)

    source: Path
    destination: Path


class CacheFailure(BaseModel):
    model_config = ConfigDict(frozen=True)

    source: Path
    message: str


class CacheReport(BaseModel):
    """Outcome of copying a source directory into the OneDrive folder."""

    destination: Path
    copied: list[CachedFile] = []
    failures: list[CacheFailure] = []

    @property
    def succeeded(self) -> bool:
        return not self.failures
