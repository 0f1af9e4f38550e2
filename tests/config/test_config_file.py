"""Tests for config-file schema parsing and fail-fast validation."""

from __future__ import annotations

from pathlib import Path

import pytest

from jobboard_engine.config_file import EngineConfigFile, load_engine_config_file
from jobboard_engine.exceptions import (
    ConfigFileNotFoundError,
    ConfigFileParseError,
    ConfigFileValidationError,
)
from tests.fakes import InMemoryFileSystem

PATH = Path("config/engine.toml")


def _load(content: str) -> EngineConfigFile:
    fs = InMemoryFileSystem()
    fs.write_text(content.strip(), PATH)
    return load_engine_config_file(path=PATH, fs=fs)


def test_load_engine_config_file_parses_valid_toml() -> None:
    parsed = _load(
        """
schema_version = 1

[engine]
api_base_url = "https://jobs.example/api/"
timeout_seconds = 10
min_completion_percentage = 70
points_mode = " Raw "
referral_placement_points = 25.5
top_companies = ["Acme", " Globex ", ""]
"""
    )

    assert parsed.api_base_url == "https://jobs.example/api"
    assert parsed.timeout_seconds == 10
    assert parsed.min_completion_percentage == 70
    assert parsed.points_mode == "raw"
    assert parsed.referral_placement_points == 25.5
    assert parsed.top_companies == ("Acme", "Globex")


def test_empty_engine_section_leaves_everything_unset() -> None:
    parsed = _load("schema_version = 1\n[engine]\n")

    assert parsed.api_base_url is None
    assert parsed.points_mode is None
    assert parsed.top_companies is None


def test_load_engine_config_file_fails_when_file_missing() -> None:
    with pytest.raises(ConfigFileNotFoundError, match="Config file not found"):
        load_engine_config_file(path=Path("missing.toml"), fs=InMemoryFileSystem())


def test_load_engine_config_file_fails_for_invalid_toml() -> None:
    with pytest.raises(ConfigFileParseError):
        _load("schema_version = 1\n[engine\npoints_mode = 'raw'")


@pytest.mark.parametrize(
    "content",
    [
        "schema_version = 2\n[engine]\n",
        "[engine]\npoints_mode = 'raw'\n",
        "schema_version = 1\n",
        "schema_version = 1\n[engine]\nunknown_key = 1\n",
        "schema_version = 1\n[engine]\npoints_mode = 'doubled'\n",
        "schema_version = 1\n[engine]\nmin_completion_percentage = 120\n",
        "schema_version = 1\n[engine]\ntimeout_seconds = 0\n",
        "schema_version = 1\n[engine]\napi_base_url = 'ftp://jobs.example'\n",
        "schema_version = 1\n[engine]\ntop_companies = [' ', '']\n",
        "schema_version = 1\n[engine]\n[other]\nkey = 1\n",
    ],
)
def test_load_engine_config_file_fails_schema_validation(content: str) -> None:
    with pytest.raises(ConfigFileValidationError):
        _load(content)


def test_validation_error_names_the_field() -> None:
    with pytest.raises(ConfigFileValidationError, match="engine.points_mode"):
        _load("schema_version = 1\n[engine]\npoints_mode = 'doubled'\n")
