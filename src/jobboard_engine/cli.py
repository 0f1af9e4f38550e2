"""CLI for the job board application engine.

Commands:
- score: Completion, tier and points for a profile JSON file
- check-eligibility: Whether a job-seeker profile may apply for jobs
- set-status: Validate a status change and send it to the backend
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Protocol

import typer
from rich import print as rprint

from . import __version__
from .application.profile_metrics import (
    PointsMode,
    ProfileMetrics,
    check_profile_eligibility,
    compute_profile_metrics,
)
from .application.status_engine import StatusTransitionEngine
from .config import EngineConfig
from .config_file import load_engine_config_file
from .domain.application import ApplicationStatus, InterviewDetails, InterviewMode
from .domain.eligibility import completion_message
from .domain.profiles import EmployerProfile, JobSeekerProfile, ProfileKind
from .exceptions import EngineError
from .infrastructure.io.validation import (
    IncomingDataError,
    parse_datetime,
    parse_employer_profile,
    parse_job_seeker_profile,
)
from .protocols import ApplicationGateway, FileSystem


class DependenciesBuilder(Protocol):
    """Protocol for constructing CLI dependencies."""

    def __call__(
        self,
        *,
        config: EngineConfig,
        build_gateway: bool,
    ) -> CliDependencies:
        """Build dependencies for CLI commands."""
        ...


@dataclass(frozen=True)
class CliDependencies:
    """Concrete dependencies required by the CLI."""

    fs: FileSystem
    gateway: ApplicationGateway | None


@dataclass(frozen=True)
class CliContext:
    """Runtime CLI context for a single command invocation."""

    config: EngineConfig
    deps_builder: DependenciesBuilder

    def build_dependencies(
        self,
        *,
        build_gateway: bool,
        config: EngineConfig | None = None,
    ) -> CliDependencies:
        """Return dependencies using the configured builder."""
        config_value = config or self.config
        return self.deps_builder(config=config_value, build_gateway=build_gateway)


class CliContextNotInitialisedError(typer.BadParameter):
    """Raised when CLI context is missing."""

    def __init__(self) -> None:
        super().__init__("CLI context is not initialised. Use the jobboard-engine entry point.")


class GatewayUnavailableError(typer.BadParameter):
    """Raised when a command needs the backend but no gateway was built."""

    def __init__(self) -> None:
        super().__init__("Backend client is not configured. Set JOBBOARD_API_BASE_URL.")


def _get_context(ctx: typer.Context) -> CliContext:
    if not isinstance(ctx.obj, CliContext):
        raise CliContextNotInitialisedError()
    return ctx.obj


def _version_callback(value: bool) -> None:
    if value:
        rprint(f"jobboard-engine {__version__}")
        raise typer.Exit()


def _fail(message: str) -> typer.Exit:
    rprint(f"[red]✗ {message}[/red]")
    return typer.Exit(code=1)


def _read_profile_payload(fs: FileSystem, path: Path) -> dict[str, object]:
    if not fs.exists(path):
        raise typer.BadParameter(f"Profile file not found: {path}", param_hint="PROFILE_JSON")
    return fs.read_json(path)


def _print_metrics(name: str, metrics: ProfileMetrics) -> None:
    tier = metrics.tier
    rprint(f"[bold]{name or 'Unnamed profile'}[/bold]")
    rprint(
        f"  Completion: {metrics.percentage}% ({metrics.band}), "
        f"{metrics.completion.completed_fields}/{metrics.completion.total_fields} fields"
    )
    rprint(f"  Tier: {tier.tier} (x{tier.multiplier:g})")
    rprint(
        f"  Base points: {tier.raw_base_points:g} raw, "
        f"{tier.adjusted_base_points:g} adjusted"
    )
    rprint(
        f"  Bonus: {metrics.bonus.total:g}  Deducted: {metrics.deducted:g}  "
        f"Available: [green]{metrics.available_points}[/green]"
    )
    if metrics.verified:
        rprint("  [cyan]Verified employer[/cyan]")


def create_app(deps_builder: DependenciesBuilder) -> typer.Typer:
    """Create a Typer app wired with the provided dependencies builder."""
    app = typer.Typer(
        add_completion=False,
        help="Job board application engine: profile scoring and application status changes",
    )

    @app.callback()
    def main(
        ctx: typer.Context,
        config_path: Annotated[
            Path | None,
            typer.Option(
                "--config",
                help="TOML config file (schema_version = 1, [engine] section)",
            ),
        ] = None,
        version: Annotated[
            bool,
            typer.Option(
                "--version",
                callback=_version_callback,
                is_eager=True,
                help="Show the package version and exit",
            ),
        ] = False,
    ) -> None:
        """Initialise CLI context."""
        _ = version
        config = EngineConfig.from_env()
        if config_path is not None:
            deps = deps_builder(config=config, build_gateway=False)
            try:
                file_config = load_engine_config_file(path=config_path, fs=deps.fs)
            except EngineError as exc:
                raise typer.BadParameter(str(exc), param_hint="--config") from exc
            config = config.with_file_overrides(file_config)
        ctx.obj = CliContext(config=config, deps_builder=deps_builder)

    @app.command()
    def score(
        ctx: typer.Context,
        profile_path: Annotated[
            Path,
            typer.Argument(metavar="PROFILE_JSON", help="Profile payload from /profile/details"),
        ],
        kind: Annotated[
            ProfileKind,
            typer.Option("--kind", "-k", help="Profile kind"),
        ] = ProfileKind.JOB_SEEKER,
        points_mode: Annotated[
            PointsMode | None,
            typer.Option(
                "--points-mode",
                help="Base points feeding the balance (default: POINTS_MODE)",
            ),
        ] = None,
    ) -> None:
        """Score a profile: completion, band, tier, multiplier and points."""
        state = _get_context(ctx)
        config = state.config.with_overrides(points_mode=points_mode)
        deps = state.build_dependencies(build_gateway=False, config=config)
        try:
            payload = _read_profile_payload(deps.fs, profile_path)
            profile: JobSeekerProfile | EmployerProfile
            if kind is ProfileKind.EMPLOYER:
                profile = parse_employer_profile(payload)
            else:
                profile = parse_job_seeker_profile(payload)
        except IncomingDataError as exc:
            raise _fail(str(exc)) from exc
        metrics = compute_profile_metrics(profile, config.scoring_rules())
        _print_metrics(profile.display_name, metrics)

    @app.command(name="check-eligibility")
    def check_eligibility_command(
        ctx: typer.Context,
        profile_path: Annotated[
            Path,
            typer.Argument(metavar="PROFILE_JSON", help="Job-seeker profile payload"),
        ],
        min_completion: Annotated[
            int | None,
            typer.Option(
                "--min-completion",
                min=0,
                max=100,
                help="Minimum completion percentage (default: MIN_COMPLETION_PERCENTAGE)",
            ),
        ] = None,
    ) -> None:
        """Check whether a job seeker may apply. Exits 1 when not eligible."""
        state = _get_context(ctx)
        config = state.config.with_overrides(min_completion_percentage=min_completion)
        deps = state.build_dependencies(build_gateway=False, config=config)
        try:
            profile = parse_job_seeker_profile(_read_profile_payload(deps.fs, profile_path))
        except IncomingDataError as exc:
            raise _fail(str(exc)) from exc
        decision = check_profile_eligibility(profile, config.scoring_rules())
        message = completion_message(decision, min_percentage=config.min_completion_percentage)
        if decision.eligible:
            rprint(f"[green]✓ Eligible[/green] ({decision.percentage}% complete)")
            rprint(f"  {message}")
            return
        rprint(f"[yellow]✗ Not eligible[/yellow] ({decision.percentage}% complete)")
        rprint(f"  {message}")
        for label in decision.missing_fields:
            rprint(f"  - {label}")
        raise typer.Exit(code=1)

    @app.command(name="set-status")
    def set_status(
        ctx: typer.Context,
        application_id: Annotated[str, typer.Argument(help="Application id")],
        status: Annotated[str, typer.Argument(help="New status, e.g. shortlisted")],
        notes: Annotated[
            str,
            typer.Option("--notes", "-n", help="Notes sent with the status change"),
        ] = "",
        when: Annotated[
            str | None,
            typer.Option("--when", help="Interview date and time (ISO 8601)"),
        ] = None,
        mode: Annotated[
            str,
            typer.Option("--mode", help="Interview mode: in-person or virtual"),
        ] = InterviewMode.IN_PERSON.value,
        api_url: Annotated[
            str | None,
            typer.Option("--api-url", help="Backend base URL (default: JOBBOARD_API_BASE_URL)"),
        ] = None,
    ) -> None:
        """Move an application to a new status through the backend."""
        state = _get_context(ctx)
        config = state.config.with_overrides(api_base_url=api_url)
        deps = state.build_dependencies(build_gateway=True, config=config)
        if deps.gateway is None:
            raise GatewayUnavailableError()
        engine = StatusTransitionEngine()
        try:
            target = ApplicationStatus.parse(status)
            side_data = None
            if when is not None:
                moment = parse_datetime(when)
                if moment is not None:
                    side_data = InterviewDetails(
                        when=moment, mode=InterviewMode.parse(mode), notes=notes
                    )
            application = deps.gateway.fetch_application(application_id)
            outcome = engine.transition(
                application.id, application.status, target, side_data, notes=notes
            )
            engine.commit(outcome, deps.gateway)
        except (EngineError, IncomingDataError) as exc:
            raise _fail(str(exc)) from exc
        rprint(
            f"[green]✓ {outcome.key}:[/green] "
            f"{outcome.previous_status.label} → {outcome.new_status.label}"
        )
        if outcome.interview is not None:
            rprint(
                f"  Interview: {outcome.interview.when.isoformat()} ({outcome.interview.mode})"
            )

    return app
