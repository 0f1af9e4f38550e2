"""Tests for EngineConfig behaviour."""

import pytest

import jobboard_engine.config as config_module
from jobboard_engine.application.profile_metrics import PointsMode, ScoringRules
from jobboard_engine.config import (
    DEFAULT_API_BASE_URL,
    EngineConfig,
    PercentageEnvVarError,
    PointsModeEnvVarError,
    PositiveNumberEnvVarError,
)
from jobboard_engine.config_file import EngineConfigFile
from jobboard_engine.domain.tiers import DEFAULT_TOP_COMPANIES


def _patch_env(monkeypatch: pytest.MonkeyPatch, env: dict[str, str]) -> None:
    def fake_getenv(key: str, default: str = "") -> str:
        return env.get(key, default)

    def fake_load_dotenv(dotenv_path: str | None = None) -> bool:
        _ = dotenv_path
        return True

    monkeypatch.setattr(config_module.os, "getenv", fake_getenv)
    monkeypatch.setattr(config_module, "load_dotenv", fake_load_dotenv)


def test_defaults() -> None:
    config = EngineConfig()

    assert config.api_base_url == DEFAULT_API_BASE_URL
    assert config.min_completion_percentage == 80
    assert config.points_mode is PointsMode.ADJUSTED
    assert config.referral_placement_points == 20
    assert config.top_companies == DEFAULT_TOP_COMPANIES


def test_from_env_reads_all_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    _patch_env(
        monkeypatch,
        {
            "JOBBOARD_API_BASE_URL": " https://jobs.example/api/ ",
            "JOBBOARD_API_TOKEN": " secret ",
            "JOBBOARD_TIMEOUT_SECONDS": "12.5",
            "MIN_COMPLETION_PERCENTAGE": "70",
            "POINTS_MODE": "RAW",
            "REFERRAL_PLACEMENT_POINTS": "25",
            "TOP_COMPANIES": "Acme, Globex ,,",
        },
    )

    config = EngineConfig.from_env()

    assert config.api_base_url == "https://jobs.example/api"
    assert config.api_token == "secret"
    assert config.timeout_seconds == 12.5
    assert config.min_completion_percentage == 70
    assert config.points_mode is PointsMode.RAW
    assert config.referral_placement_points == 25
    assert config.top_companies == ("Acme", "Globex")


def test_from_env_falls_back_to_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    _patch_env(monkeypatch, {})

    assert EngineConfig.from_env() == EngineConfig()


@pytest.mark.parametrize("value", ["0", "-3", "soon"])
def test_from_env_rejects_non_positive_timeout(
    monkeypatch: pytest.MonkeyPatch, value: str
) -> None:
    _patch_env(monkeypatch, {"JOBBOARD_TIMEOUT_SECONDS": value})

    with pytest.raises(PositiveNumberEnvVarError, match="JOBBOARD_TIMEOUT_SECONDS"):
        EngineConfig.from_env()


@pytest.mark.parametrize("value", ["101", "-1", "eighty"])
def test_from_env_rejects_bad_percentage(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    _patch_env(monkeypatch, {"MIN_COMPLETION_PERCENTAGE": value})

    with pytest.raises(PercentageEnvVarError):
        EngineConfig.from_env()


def test_from_env_rejects_unknown_points_mode(monkeypatch: pytest.MonkeyPatch) -> None:
    _patch_env(monkeypatch, {"POINTS_MODE": "doubled"})

    with pytest.raises(PointsModeEnvVarError, match="doubled"):
        EngineConfig.from_env()


def test_with_overrides_preserves_other_fields() -> None:
    base = EngineConfig(api_token="secret", timeout_seconds=5.0, top_companies=("Acme",))

    updated = base.with_overrides(min_completion_percentage=60, points_mode=PointsMode.RAW)

    assert updated.min_completion_percentage == 60
    assert updated.points_mode is PointsMode.RAW
    assert updated.api_token == "secret"
    assert updated.timeout_seconds == 5.0
    assert updated.top_companies == ("Acme",)
    assert base.min_completion_percentage == 80


def test_with_overrides_none_keeps_values() -> None:
    base = EngineConfig(api_base_url="https://jobs.example/api")

    assert base.with_overrides() == base


def test_with_file_overrides() -> None:
    base = EngineConfig(api_token="secret", min_completion_percentage=90)
    file_config = EngineConfigFile(
        api_base_url="https://staging.example/api",
        points_mode="raw",
        top_companies=("Initech",),
    )

    updated = base.with_file_overrides(file_config)

    assert updated.api_base_url == "https://staging.example/api"
    assert updated.points_mode is PointsMode.RAW
    assert updated.top_companies == ("Initech",)
    assert updated.min_completion_percentage == 90
    assert updated.api_token == "secret"


def test_scoring_rules_carry_scoring_settings() -> None:
    config = EngineConfig(
        min_completion_percentage=75,
        points_mode=PointsMode.RAW,
        referral_placement_points=30,
        top_companies=("Acme",),
    )

    assert config.scoring_rules() == ScoringRules(
        points_mode=PointsMode.RAW,
        min_completion_percentage=75,
        top_companies=("Acme",),
        placement_points=30,
    )
