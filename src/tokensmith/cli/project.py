"""
Build and inspection commands for tokensmith CLI.

- build: render every theme for every configured platform
- resolve: show how a single token resolves
- inspect: list a theme's tokens with category statistics
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table

from tokensmith.core.errors import TokensmithError
from tokensmith.core.formatters import default_platforms
from tokensmith.core.formatters.base import format_scalar
from tokensmith.core.formatters.css import css_value
from tokensmith.core.ir import DEFAULT_THEME, THEME_ORDER, ThemeSnapshot
from tokensmith.core.orchestrator import BuildReport, build_all, build_theme

from .utils import console, err_console, load_config, parse_theme_option

ProjectOption = Annotated[
    Path,
    typer.Option("--project", "-p", help="Project directory (default: current directory)"),
]


def build_command(
    project_dir: ProjectOption = Path("."),
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output directory (default: [output] root)"),
    ] = None,
    themes: Annotated[
        list[str] | None,
        typer.Option("--theme", "-t", help="Theme to build (repeatable, default: all)"),
    ] = None,
) -> None:
    """
    Build design tokens for every theme and platform.

    Examples:
        tokensmith build                      # All themes, all platforms
        tokensmith build -t classic-dark      # One theme
        tokensmith build -o dist              # Custom output directory
    """
    config = load_config(project_dir)
    selected = [parse_theme_option(t) for t in themes] if themes else list(THEME_ORDER)

    report = build_all(
        config,
        default_platforms(config),
        themes=selected,
        output_root=output.resolve() if output else None,
    )
    _print_report(report, output.resolve() if output else config.output_root)
    raise typer.Exit(code=report.exit_code)


def _print_report(report: BuildReport, output_root: Path) -> None:
    table = Table(title="Themes")
    table.add_column("Theme")
    table.add_column("Status")
    table.add_column("Tokens", justify="right")
    table.add_column("Issues", justify="right")

    for snapshot in report.snapshots:
        status = "[green]built[/green]" if not snapshot.issues else "[yellow]built[/yellow]"
        label = f"{snapshot.theme.value} (default)" if snapshot.is_default else snapshot.theme.value
        table.add_row(label, status, str(len(snapshot.tokens)), str(len(snapshot.issues)))
    for failure in report.failures:
        table.add_row(failure.theme.value, "[red]failed[/red]", "-", "-")

    console.print(table)

    if report.written:
        console.print(f"\n[bold]Wrote {len(report.written)} file(s) to {output_root}[/bold]")
        for path in report.written:
            console.print(f"  {path}", markup=False)

    if report.failures:
        err_console.print(f"\n[red]Failed themes ({len(report.failures)}):[/red]")
        for failure in report.failures:
            err_console.print(f"  - {failure.format()}", markup=False)

    if report.issues:
        err_console.print(f"\n[yellow]Token issues ({len(report.issues)}):[/yellow]")
        for issue in report.issues:
            err_console.print(f"  - {issue.format()}", markup=False)

    if report.write_failures:
        err_console.print(f"\n[red]Failed writes ({len(report.write_failures)}):[/red]")
        for failure in report.write_failures:
            err_console.print(f"  - {failure.format()}", markup=False)


def _snapshot_or_exit(project_dir: Path, theme: str) -> ThemeSnapshot:
    config = load_config(project_dir)
    try:
        return build_theme(config, parse_theme_option(theme))
    except TokensmithError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)


def resolve_command(
    path: Annotated[str, typer.Argument(help="Dotted token path, e.g. color.accent.primary")],
    theme: Annotated[str, typer.Option("--theme", "-t", help="Theme")] = DEFAULT_THEME.value,
    project_dir: ProjectOption = Path("."),
) -> None:
    """Show the raw, resolved and CSS values of one token."""
    snapshot = _snapshot_or_exit(project_dir, theme)
    token = snapshot.get(path)
    if token is None:
        err_console.print(f"[red]Token '{path}' not found in {snapshot.theme.value}[/red]")
        raise typer.Exit(code=1)

    console.print(f"[bold]{token.name}[/bold] ({snapshot.theme.value})")
    console.print(f"  raw:      {format_scalar(token.token.raw_value)}", markup=False)
    console.print(f"  resolved: {format_scalar(token.value)}", markup=False)
    console.print(f"  css:      {css_value(token)}", markup=False)
    if token.token.source:
        console.print(f"  source:   {token.token.source}", markup=False)

    if not token.ok:
        for issue in snapshot.issues:
            if issue.path == path:
                err_console.print(f"[yellow]{issue.kind}:[/yellow] {issue.message}")
        raise typer.Exit(code=1)


def inspect_command(
    theme: Annotated[str, typer.Option("--theme", "-t", help="Theme")] = DEFAULT_THEME.value,
    category: Annotated[
        str | None,
        typer.Option("--category", "-c", help="Only tokens in this category (e.g. color)"),
    ] = None,
    project_dir: ProjectOption = Path("."),
) -> None:
    """List a theme's tokens with per-category statistics."""
    snapshot = _snapshot_or_exit(project_dir, theme)
    tokens = [t for t in snapshot.sorted_tokens() if category is None or t.category == category]

    if not tokens:
        console.print("[dim]No tokens found.[/dim]")
    else:
        table = Table(title=f"Tokens ({snapshot.theme.value})")
        table.add_column("Path")
        table.add_column("Value")
        table.add_column("Resolved")
        for token in tokens:
            resolved = format_scalar(token.value)
            if not token.ok:
                resolved = f"[red]{resolved}[/red]"
            table.add_row(token.name, format_scalar(token.token.raw_value), resolved)
        console.print(table)

    stats = Table(title="Statistics")
    stats.add_column("Metric")
    stats.add_column("Count", justify="right")
    for name, count in snapshot.stats().items():
        stats.add_row(name, str(count))
    for name, count in snapshot.category_counts().items():
        stats.add_row(f"category: {name}", str(count))
    console.print(stats)
