"""
tokensmith CLI utilities.

Shared helpers used across CLI modules.
"""

from __future__ import annotations

import logging
import platform
from pathlib import Path

import typer
from rich.console import Console

from tokensmith._version import get_version
from tokensmith.core.errors import ManifestError
from tokensmith.core.ir import ThemeName, parse_theme
from tokensmith.core.manifest import ProjectConfig, default_log_level, load_project_config

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Exit code for an unusable tokensmith.toml
EXIT_MANIFEST = 2

console = Console()
err_console = Console(stderr=True)


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"tokensmith version {get_version()}")
        typer.echo(
            f"Python {platform.python_implementation()} {platform.python_version()} "
            f"on {platform.system()}"
        )
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Configure root logging from --verbose or TOKENSMITH_LOG_LEVEL."""
    level_name = "DEBUG" if verbose else default_log_level()
    logging.basicConfig(level=getattr(logging, level_name, logging.WARNING), format=LOG_FORMAT)


def load_config(project_dir: Path) -> ProjectConfig:
    """Load the project's configuration, exiting with code 2 when it is invalid."""
    try:
        return load_project_config(project_dir.resolve())
    except ManifestError as e:
        err_console.print(f"[red]Manifest error:[/red] {e}")
        raise typer.Exit(code=EXIT_MANIFEST)


def parse_theme_option(name: str) -> ThemeName:
    try:
        return parse_theme(name)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--theme") from None
