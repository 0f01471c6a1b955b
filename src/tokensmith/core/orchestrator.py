"""
Theme build orchestration.

Builds each theme independently (load, flatten, resolve), hands the
successful snapshots to every platform, and writes the rendered files.
A theme that fails is reported and skipped; it never stops the others.
"""

from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from .errors import SourceError, TokensmithError
from .flattener import flatten
from .formatters import OutputFile, Platform
from .ir import THEME_ORDER, ThemeName, ThemeSnapshot, TokenIssue
from .loader import load_theme_tree
from .manifest import ProjectConfig
from .resolver import ReferenceResolver

logger = logging.getLogger(__name__)


@dataclass
class ThemeFailure:
    """A theme that could not be built."""

    theme: ThemeName
    message: str
    source: Path | None = None

    def format(self) -> str:
        where = f" ({self.source})" if self.source else ""
        return f"{self.theme.value}: {self.message}{where}"


@dataclass
class WriteFailure:
    """An output file that could not be written."""

    path: Path
    message: str

    def format(self) -> str:
        return f"{self.path}: {self.message}"


@dataclass
class BuildReport:
    """
    Outcome of a build run.

    Attributes:
        snapshots: Successfully built themes, in build order
        failures: Themes that could not be built
        written: Files written, relative to the output root
        issues: Token-level problems across every built theme
        write_failures: Outputs that could not be written
    """

    snapshots: list[ThemeSnapshot] = field(default_factory=list)
    failures: list[ThemeFailure] = field(default_factory=list)
    written: list[Path] = field(default_factory=list)
    issues: list[TokenIssue] = field(default_factory=list)
    write_failures: list[WriteFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures and not self.issues and not self.write_failures

    @property
    def exit_code(self) -> int:
        return 0 if self.ok else 1

    def summary(self) -> str:
        lines = [
            f"Themes built: {len(self.snapshots)}/{len(self.snapshots) + len(self.failures)}",
            f"Files written: {len(self.written)}",
        ]
        if self.failures:
            lines.append(f"Failed themes: {len(self.failures)}")
            lines.extend(f"  - {f.format()}" for f in self.failures)
        if self.issues:
            lines.append(f"Token issues: {len(self.issues)}")
            lines.extend(f"  - {i.format()}" for i in self.issues)
        if self.write_failures:
            lines.append(f"Write failures: {len(self.write_failures)}")
            lines.extend(f"  - {w.format()}" for w in self.write_failures)
        return "\n".join(lines)


def build_theme(config: ProjectConfig, theme: ThemeName) -> ThemeSnapshot:
    """
    Load, flatten and resolve one theme.

    Raises:
        SourceNotFoundError: If the theme file is missing
        SourceParseError: If any source is not valid JSON
    """
    tree = load_theme_tree(config, theme.value)
    flat = flatten(tree, theme.value)
    issues = [TokenIssue.from_error(e, e.path, theme.value) for e in flat.issues]
    resolver = ReferenceResolver(flat.tokens, theme)
    snapshot = resolver.snapshot(theme, extra_issues=issues)
    logger.info(f"[{theme.value}] resolved {len(snapshot.tokens)} tokens")
    return snapshot


def build_all(
    config: ProjectConfig,
    platforms: Sequence[Platform],
    themes: Iterable[ThemeName] = THEME_ORDER,
    output_root: Path | None = None,
) -> BuildReport:
    """
    Build every requested theme and write each platform's output.

    Args:
        config: Project configuration
        platforms: Output targets, usually from ``default_platforms(config)``
        themes: Themes to build; always processed in canonical order
        output_root: Override for ``config.output_root``

    Returns:
        BuildReport describing built themes, failures and written files
    """
    report = BuildReport()
    requested = set(themes)

    for theme in THEME_ORDER:
        if theme not in requested:
            continue
        try:
            snapshot = build_theme(config, theme)
        except TokensmithError as e:
            source = e.path if isinstance(e, SourceError) else None
            logger.error(f"[{theme.value}] theme skipped: {e.message}")
            report.failures.append(ThemeFailure(theme=theme, message=e.message, source=source))
            continue
        report.snapshots.append(snapshot)
        report.issues.extend(snapshot.issues)

    root = output_root or config.output_root
    for platform in platforms:
        for output in platform.render(report.snapshots):
            try:
                write_output(root, output)
            except OSError as e:
                logger.error(f"Could not write {root / output.path}: {e}")
                report.write_failures.append(WriteFailure(path=output.path, message=str(e)))
                continue
            report.written.append(output.path)

    return report


def write_output(root: Path, output: OutputFile) -> Path:
    """Write one rendered file atomically under ``root``."""
    target = root / output.path
    target.parent.mkdir(parents=True, exist_ok=True)
    fd, temp_path = tempfile.mkstemp(prefix=f".{target.name}.", dir=target.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            f.write(output.content)
        os.replace(temp_path, target)
    except BaseException:
        Path(temp_path).unlink(missing_ok=True)
        raise
    logger.info(f"Wrote {target}")
    return target
