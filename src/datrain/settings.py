from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

from datrain.common import AppInfo, AppPaths
from datrain.onedrive import MarkerSettings
from datrain.utils import PathsConfig


class Settings(BaseSettings):
    app: AppInfo = AppInfo()
    paths: AppPaths = AppPaths()
    marker: MarkerSettings = MarkerSettings()

    model_config = SettingsConfigDict(
        env_prefix="DATRAIN_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        nested_model_default_partial_update=True,
    )

    def to_paths_config(self) -> PathsConfig:
        return PathsConfig(
            config_dir_name=self.paths.config_dir_name,
            data_dir_name=self.paths.data_dir_name,
            global_config_filename=self.paths.global_config_filename,
            log_filename=self.paths.log_filename,
        )


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


# Private singleton instance
_settings: Settings | None = None

# Convenience access - pre-initialized singleton
settings = get_settings()


__all__ = [
    "AppInfo",
    "AppPaths",
    "MarkerSettings",
    "Settings",
    "get_settings",
    "settings",
]
