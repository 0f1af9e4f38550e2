"""Composition root for wiring CLI dependencies."""

from __future__ import annotations

from .cli import CliDependencies, create_app
from .config import EngineConfig
from .infrastructure import LocalFileSystem, build_applications_client
from .protocols import ApplicationGateway


def build_cli_dependencies(
    *,
    config: EngineConfig,
    build_gateway: bool,
) -> CliDependencies:
    """Build concrete dependencies for CLI commands.

    Args:
        config: Engine configuration (used for backend client wiring).
        build_gateway: Whether to construct the backend client when configuration permits.
    """
    fs = LocalFileSystem()
    gateway: ApplicationGateway | None = None
    if build_gateway and config.api_base_url:
        gateway = build_applications_client(
            base_url=config.api_base_url,
            api_token=config.api_token,
            timeout_seconds=config.timeout_seconds,
        )
    return CliDependencies(fs=fs, gateway=gateway)


app = create_app(build_cli_dependencies)
