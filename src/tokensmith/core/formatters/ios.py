"""
iOS Swift output.

Per theme: a ``public enum`` of ``UIColor`` constants, named
``<Prefix>Color`` for the default theme and ``<Prefix>Color<Theme>`` for the
others. Shared: ``<Prefix>.swift`` with ``CGFloat`` constants for dimension
and numeric tokens, taken from the default theme.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from tokensmith.core.colors import to_uicolor
from tokensmith.core.ir import ResolvedToken, ThemeName, ThemeSnapshot, TokenCategory
from tokensmith.core.manifest import OutputConfig
from tokensmith.core.naming import swift_property_name, swift_type_name

from .base import (
    OutputFile,
    Platform,
    format_scalar,
    parse_number,
    primary_snapshot,
    unique_by_name,
)

_HEADER = "//\n// Do not edit directly\n// Generated by tokensmith\n//\n"


def color_type_name(prefix: str, theme: ThemeName | str, is_default: bool) -> str:
    if is_default:
        return swift_type_name(prefix)
    return swift_type_name(prefix, ThemeName(theme).pascal)


def format_swift_colors(
    tokens: Sequence[ResolvedToken], theme: ThemeName | str, is_default: bool, prefix: str
) -> str:
    """``UIColor`` constants for every token whose resolved value is a color."""
    candidates = []
    for token in tokens:
        if to_uicolor(token.value) is not None:
            candidates.append((swift_property_name(token.path), token))

    type_name = color_type_name(prefix, theme, is_default)
    lines = [
        _HEADER,
        "import UIKit",
        "",
        f"// Theme: {ThemeName(theme).value}",
        f"public enum {type_name} {{",
    ]
    for name, token in unique_by_name(candidates, "ios"):
        lines.append(f"    public static let {name} = {to_uicolor(token.value)}")
    lines.extend(["}", ""])
    return "\n".join(lines)


def format_swift_shared(tokens: Sequence[ResolvedToken], prefix: str) -> str:
    """``CGFloat`` constants for px and numeric tokens outside the color category."""
    candidates = []
    for token in tokens:
        if token.category == TokenCategory.COLOR:
            continue
        if parse_number(token.value) is not None:
            candidates.append((swift_property_name(token.path), token))

    lines = [_HEADER, "import CoreGraphics", "", f"public enum {prefix} {{"]
    for name, token in unique_by_name(candidates, "ios"):
        number = format_scalar(parse_number(token.value))
        lines.append(f"    public static let {name}: CGFloat = {number}")
    lines.extend(["}", ""])
    return "\n".join(lines)


def platform(output: OutputConfig) -> Platform:
    prefix = output.swift_prefix

    def render(snapshots: Sequence[ThemeSnapshot]) -> list[OutputFile]:
        root = Path(output.ios)
        files = []
        for s in snapshots:
            type_name = color_type_name(prefix, s.theme, s.is_default)
            files.append(
                OutputFile(
                    root / f"{type_name}.swift",
                    format_swift_colors(s.sorted_tokens(), s.theme, s.is_default, prefix),
                )
            )
        primary = primary_snapshot(snapshots)
        if primary is not None:
            files.append(
                OutputFile(
                    root / f"{prefix}.swift",
                    format_swift_shared(primary.sorted_tokens(), prefix),
                )
            )
        return files

    return Platform(name="ios", render=render)
