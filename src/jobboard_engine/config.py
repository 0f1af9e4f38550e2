"""Centralised, injectable configuration for the application engine."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Self

from dotenv import load_dotenv

from .application.profile_metrics import PointsMode, ScoringRules
from .config_file import EngineConfigFile
from .domain.eligibility import DEFAULT_MIN_COMPLETION
from .domain.points import DEFAULT_PLACEMENT_POINTS
from .domain.tiers import DEFAULT_TOP_COMPANIES

DEFAULT_API_BASE_URL = "http://localhost:5000/api"


class PositiveNumberEnvVarError(ValueError):
    """Raised when an environment variable must be a positive number."""

    def __init__(self, env_name: str) -> None:
        super().__init__(f"{env_name} must be a positive number.")


class PercentageEnvVarError(ValueError):
    """Raised when an environment variable must be a percentage."""

    def __init__(self, env_name: str) -> None:
        super().__init__(f"{env_name} must be a whole number between 0 and 100.")


class PointsModeEnvVarError(ValueError):
    """Raised when POINTS_MODE is not a supported mode."""

    def __init__(self, value: str) -> None:
        super().__init__(f"POINTS_MODE must be 'adjusted' or 'raw' (got {value!r}).")


@dataclass(frozen=True)
class EngineConfig:
    """Immutable configuration for the engine and its backend client.

    Load from environment with `EngineConfig.from_env()` or construct directly for testing.
    """

    # Backend API
    api_base_url: str = DEFAULT_API_BASE_URL
    api_token: str = ""
    timeout_seconds: float = 30.0

    # Scoring
    min_completion_percentage: int = DEFAULT_MIN_COMPLETION
    points_mode: PointsMode = PointsMode.ADJUSTED
    referral_placement_points: float = DEFAULT_PLACEMENT_POINTS
    top_companies: tuple[str, ...] = DEFAULT_TOP_COMPANIES

    @classmethod
    def from_env(cls, dotenv_path: str | None = None) -> Self:
        """Load configuration from environment variables.

        Args:
            dotenv_path: Optional path to .env file. If None, uses default .env discovery.

        Returns:
            EngineConfig instance populated from environment.
        """
        load_dotenv(dotenv_path)

        return cls(
            api_base_url=os.getenv("JOBBOARD_API_BASE_URL", "").strip().rstrip("/")
            or DEFAULT_API_BASE_URL,
            api_token=os.getenv("JOBBOARD_API_TOKEN", "").strip(),
            timeout_seconds=_parse_positive_number(
                os.getenv("JOBBOARD_TIMEOUT_SECONDS", ""),
                env_name="JOBBOARD_TIMEOUT_SECONDS",
                default=30.0,
            ),
            min_completion_percentage=_parse_percentage(
                os.getenv("MIN_COMPLETION_PERCENTAGE", ""),
                env_name="MIN_COMPLETION_PERCENTAGE",
                default=DEFAULT_MIN_COMPLETION,
            ),
            points_mode=_parse_points_mode(os.getenv("POINTS_MODE", "")),
            referral_placement_points=_parse_positive_number(
                os.getenv("REFERRAL_PLACEMENT_POINTS", ""),
                env_name="REFERRAL_PLACEMENT_POINTS",
                default=DEFAULT_PLACEMENT_POINTS,
            ),
            top_companies=_parse_list(os.getenv("TOP_COMPANIES", "")) or DEFAULT_TOP_COMPANIES,
        )

    def with_overrides(
        self,
        *,
        api_base_url: str | None = None,
        min_completion_percentage: int | None = None,
        points_mode: PointsMode | None = None,
    ) -> Self:
        """Return a new config with specified overrides (for CLI options)."""
        return replace(
            self,
            api_base_url=self.api_base_url
            if api_base_url is None
            else api_base_url.strip().rstrip("/"),
            min_completion_percentage=self.min_completion_percentage
            if min_completion_percentage is None
            else min_completion_percentage,
            points_mode=self.points_mode if points_mode is None else points_mode,
        )

    def with_file_overrides(self, file_config: EngineConfigFile) -> Self:
        """Return a new config with config-file values overriding env/default values."""
        return replace(
            self,
            api_base_url=self.api_base_url
            if file_config.api_base_url is None
            else file_config.api_base_url,
            timeout_seconds=self.timeout_seconds
            if file_config.timeout_seconds is None
            else file_config.timeout_seconds,
            min_completion_percentage=self.min_completion_percentage
            if file_config.min_completion_percentage is None
            else file_config.min_completion_percentage,
            points_mode=self.points_mode
            if file_config.points_mode is None
            else PointsMode(file_config.points_mode),
            referral_placement_points=self.referral_placement_points
            if file_config.referral_placement_points is None
            else file_config.referral_placement_points,
            top_companies=self.top_companies
            if file_config.top_companies is None
            else file_config.top_companies,
        )

    def scoring_rules(self) -> ScoringRules:
        """The subset of settings the scoring rules consume."""
        return ScoringRules(
            points_mode=self.points_mode,
            min_completion_percentage=self.min_completion_percentage,
            top_companies=self.top_companies,
            placement_points=self.referral_placement_points,
        )


def _parse_list(s: str) -> tuple[str, ...]:
    """Parse comma-separated string into tuple of stripped values."""
    items = [item.strip() for item in s.split(",") if item.strip()]
    return tuple(items)


def _parse_positive_number(value: str, *, env_name: str, default: float) -> float:
    text = value.strip()
    if not text:
        return default
    try:
        parsed = float(text)
    except ValueError as exc:
        raise PositiveNumberEnvVarError(env_name) from exc
    if parsed <= 0:
        raise PositiveNumberEnvVarError(env_name)
    return parsed


def _parse_percentage(value: str, *, env_name: str, default: int) -> int:
    text = value.strip()
    if not text:
        return default
    try:
        parsed = int(text)
    except ValueError as exc:
        raise PercentageEnvVarError(env_name) from exc
    if parsed < 0 or parsed > 100:
        raise PercentageEnvVarError(env_name)
    return parsed


def _parse_points_mode(value: str) -> PointsMode:
    text = value.strip().lower()
    if not text:
        return PointsMode.ADJUSTED
    try:
        return PointsMode(text)
    except ValueError as exc:
        raise PointsModeEnvVarError(value) from exc
