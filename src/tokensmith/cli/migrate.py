"""
Flat-schema migration command for tokensmith CLI.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated

import typer

from tokensmith.core.errors import TokensmithError
from tokensmith.core.ir import DEFAULT_THEME
from tokensmith.core.migration import export_flat
from tokensmith.core.orchestrator import build_theme

from .utils import console, err_console, load_config, parse_theme_option


def migrate_command(
    theme: Annotated[str, typer.Option("--theme", "-t", help="Theme")] = DEFAULT_THEME.value,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output file (default: stdout)"),
    ] = None,
    project_dir: Annotated[
        Path,
        typer.Option("--project", "-p", help="Project directory (default: current directory)"),
    ] = Path("."),
) -> None:
    """
    Export a theme in the flat, schema-annotated token format.

    Examples:
        tokensmith migrate                        # Print to stdout
        tokensmith migrate -t classic-dark -o flat.json
    """
    config = load_config(project_dir)
    try:
        snapshot = build_theme(config, parse_theme_option(theme))
    except TokensmithError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)

    content = json.dumps(export_flat(snapshot), indent=2, ensure_ascii=False) + "\n"
    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(content, encoding="utf-8")
        console.print(f"Flat tokens written to {output}")
    else:
        typer.echo(content, nl=False)
