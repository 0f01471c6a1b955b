"""
tokensmith CLI.

- project.py: build, resolve and inspect commands
- migrate.py: flat-schema export
- utils.py: shared helpers (version, logging, config loading)
"""

from __future__ import annotations

from typing import Annotated

import typer

from .migrate import migrate_command
from .project import build_command, inspect_command, resolve_command
from .utils import configure_logging, version_callback

app = typer.Typer(
    help="tokensmith - build design tokens for web, Android and iOS",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version and environment information",
        ),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-V", help="Enable debug logging")
    ] = False,
) -> None:
    """tokensmith CLI main callback for global options."""
    configure_logging(verbose)


app.command(name="build")(build_command)
app.command(name="resolve")(resolve_command)
app.command(name="inspect")(inspect_command)
app.command(name="migrate")(migrate_command)


def main() -> None:
    app()


__all__ = ["app", "main"]
