from __future__ import annotations

from pathlib import Path

import pytest

from datrain.onedrive import MARKER_CONTENT, default_home_env_var
from datrain.settings import Settings


def test_settings_defaults() -> None:
    settings = Settings()

    assert settings.marker.home_env_var == default_home_env_var()
    assert settings.marker.vendor_folder == "OneDrive"
    assert settings.marker.file_name == "DatRainCacheTest.txt"


def test_settings_nested_env_override_keeps_other_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATRAIN_MARKER__HOME_ENV_VAR", "PROFILE_DIR")

    settings = Settings()

    assert settings.marker.home_env_var == "PROFILE_DIR"
    assert settings.marker.file_name == "DatRainCacheTest.txt"


def test_settings_paths_config_mirrors_app_paths() -> None:
    paths = Settings().to_paths_config()

    assert paths.config_dir_name == "datrain"
    assert paths.log_filename == "datrain.log"


def test_settings_ignore_unrelated_dotenv_keys(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / ".env").write_text("DATABASE_URL=postgres://x\nDATRAIN_MARKER__FILE_NAME=FromDotEnv.txt\n")
    monkeypatch.chdir(tmp_path)

    settings = Settings()

    assert settings.marker.file_name == "FromDotEnv.txt"


def test_settings_marker_content_cannot_be_overridden(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATRAIN_MARKER__CONTENT", "no trailing newline")

    settings = Settings()

    assert "content" not in settings.marker.model_dump()
    assert MARKER_CONTENT == "This is a DatRain sync test.\n"
