from __future__ import annotations

from pathlib import Path

import pytest
from result import is_err, is_ok

from datrain.onedrive import (
    ConfigurationError,
    MarkerSettings,
    build_marker_path,
    default_home_env_var,
    resolve_home_directory,
    resolve_marker_path,
)


def test_resolve_home_directory_reads_variable(tmp_path: Path) -> None:
    result = resolve_home_directory("DATRAIN_TEST_HOME", {"DATRAIN_TEST_HOME": str(tmp_path)})

    assert is_ok(result)
    assert result.unwrap() == tmp_path


@pytest.mark.parametrize("environ", [{}, {"DATRAIN_TEST_HOME": ""}])
def test_resolve_home_directory_rejects_missing_or_empty(environ: dict[str, str]) -> None:
    result = resolve_home_directory("DATRAIN_TEST_HOME", environ)

    assert is_err(result)
    error = result.unwrap_err()
    assert isinstance(error, ConfigurationError)
    assert error.env_var == "DATRAIN_TEST_HOME"
    assert error.message == "Required environment variable DATRAIN_TEST_HOME is not set."


def test_resolve_home_directory_defaults_to_process_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("DATRAIN_TEST_HOME", str(tmp_path))

    result = resolve_home_directory("DATRAIN_TEST_HOME")

    assert result.unwrap() == tmp_path


def test_build_marker_path_joins_fixed_subpath() -> None:
    home = Path("/users/some one")

    path = build_marker_path(home, MarkerSettings())

    assert path == home / "OneDrive" / "DatRainCacheTest.txt"


def test_build_marker_path_does_not_touch_file_system(tmp_path: Path) -> None:
    path = build_marker_path(tmp_path / "nowhere", MarkerSettings())

    assert not path.parent.exists()


def test_resolve_marker_path_uses_configured_variable(tmp_path: Path) -> None:
    settings = MarkerSettings(home_env_var="PROFILE_DIR", vendor_folder="OneDrive - Work", file_name="probe.txt")

    result = resolve_marker_path(settings, {"PROFILE_DIR": str(tmp_path)})

    assert result.unwrap() == tmp_path / "OneDrive - Work" / "probe.txt"


def test_resolve_marker_path_propagates_configuration_error() -> None:
    result = resolve_marker_path(MarkerSettings(home_env_var="PROFILE_DIR"), {})

    assert is_err(result)
    assert isinstance(result.unwrap_err(), ConfigurationError)


@pytest.mark.parametrize(
    ("platform", "expected"),
    [("win32", "USERPROFILE"), ("linux", "HOME"), ("darwin", "HOME")],
)
def test_default_home_env_var_follows_platform(
    platform: str, expected: str, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr("sys.platform", platform)

    assert default_home_env_var() == expected


def test_marker_settings_rejects_empty_values() -> None:
    with pytest.raises(ValueError):
        MarkerSettings(file_name="")
