"""Typed parsing and validation for engine config files."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .exceptions import ConfigFileNotFoundError, ConfigFileParseError, ConfigFileValidationError
from .protocols import FileSystem

_SCHEMA_VERSION = 1


@dataclass(frozen=True)
class EngineConfigFile:
    """Validated engine config values loaded from a TOML file."""

    api_base_url: str | None = None
    timeout_seconds: float | None = None
    min_completion_percentage: int | None = None
    points_mode: str | None = None
    referral_placement_points: float | None = None
    top_companies: tuple[str, ...] | None = None


class _EngineSectionModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    api_base_url: str | None = None
    timeout_seconds: float | None = None
    min_completion_percentage: int | None = None
    points_mode: str | None = None
    referral_placement_points: float | None = None
    top_companies: tuple[str, ...] | None = None

    @field_validator("api_base_url")
    @classmethod
    def _validate_base_url(cls, value: str | None) -> str | None:
        if value is None:
            return None
        text = value.strip().rstrip("/")
        if not text.startswith(("http://", "https://")):
            raise ValueError
        return text

    @field_validator("points_mode")
    @classmethod
    def _validate_points_mode(cls, value: str | None) -> str | None:
        if value is None:
            return None
        mode = value.strip().lower()
        if mode not in {"adjusted", "raw"}:
            raise ValueError
        return mode

    @field_validator("timeout_seconds", "referral_placement_points")
    @classmethod
    def _validate_positive_number(cls, value: float | None) -> float | None:
        if value is None:
            return None
        if value <= 0:
            raise ValueError
        return value

    @field_validator("min_completion_percentage")
    @classmethod
    def _validate_percentage(cls, value: int | None) -> int | None:
        if value is None:
            return None
        if value < 0 or value > 100:
            raise ValueError
        return value

    @field_validator("top_companies")
    @classmethod
    def _validate_top_companies(cls, value: tuple[str, ...] | None) -> tuple[str, ...] | None:
        if value is None:
            return None
        cleaned = tuple(item.strip() for item in value if item.strip())
        if not cleaned:
            raise ValueError
        return cleaned


class _ConfigFileModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    schema_version: int
    engine: _EngineSectionModel

    @field_validator("schema_version")
    @classmethod
    def _validate_schema_version(cls, value: int) -> int:
        if value != _SCHEMA_VERSION:
            raise ValueError
        return value


def _format_validation_error(exc: ValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ("<root>",)))
    message = str(first.get("msg", "invalid value"))
    return f"{location}: {message}"


def load_engine_config_file(*, path: Path, fs: FileSystem) -> EngineConfigFile:
    """Load and validate an engine TOML config file."""
    if not fs.exists(path):
        raise ConfigFileNotFoundError(str(path))

    raw_payload = fs.read_text(path)
    try:
        payload: object = tomllib.loads(raw_payload)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigFileParseError(str(path), str(exc)) from exc

    try:
        model = _ConfigFileModel.model_validate(payload)
    except ValidationError as exc:
        raise ConfigFileValidationError(str(path), _format_validation_error(exc)) from exc

    section = model.engine
    return EngineConfigFile(
        api_base_url=section.api_base_url,
        timeout_seconds=section.timeout_seconds,
        min_completion_percentage=section.min_completion_percentage,
        points_mode=section.points_mode,
        referral_placement_points=section.referral_placement_points,
        top_companies=section.top_companies,
    )
