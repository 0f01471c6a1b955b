"""
Android resource XML output.

Per theme: ``colors.xml`` (default theme) or ``colors-<theme>.xml``. Shared:
``dimens.xml`` (``px`` -> ``dp``) and ``font_dimens.xml`` (``fontSize``
tokens, ``px`` -> ``sp``), taken from the default theme.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any
from xml.sax.saxutils import escape

from tokensmith.core.colors import to_android_color
from tokensmith.core.ir import ResolvedToken, ThemeSnapshot, TokenCategory
from tokensmith.core.manifest import OutputConfig
from tokensmith.core.naming import android_resource_name

from .base import OutputFile, Platform, format_scalar, parse_px, primary_snapshot, unique_by_name

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'


def to_android_dimension(value: Any, category: str) -> str | None:
    """
    ``"16px"`` -> ``"16dp"``, or ``"16sp"`` for the fontSize category.

    Non-px values return None.
    """
    number = parse_px(value)
    if number is None:
        return None
    unit = "sp" if category == TokenCategory.FONT_SIZE else "dp"
    return f"{format_scalar(number)}{unit}"


def colors_filename(theme: str, is_default: bool) -> str:
    return "colors.xml" if is_default else f"colors-{theme}.xml"


def _resources(description: str, entries: list[str]) -> str:
    lines = [
        XML_DECLARATION,
        "",
        "<!--",
        "  Do not edit directly",
        f"  {escape(description)}",
        "-->",
        "<resources>",
        *entries,
        "</resources>",
        "",
    ]
    return "\n".join(lines)


def format_android_colors(tokens: Sequence[ResolvedToken], theme: str, is_default: bool) -> str:
    """``<color>`` resources for every token whose resolved value is a color."""
    candidates = []
    for token in tokens:
        color = to_android_color(token.value)
        if color is not None:
            candidates.append((android_resource_name(token.path), token))

    entries = [
        f'  <color name="{name}">{to_android_color(token.value)}</color>'
        for name, token in unique_by_name(candidates, "android")
    ]
    suffix = " (default)" if is_default else ""
    return _resources(f"Design tokens - colors - theme {theme}{suffix}", entries)


def _dimens(tokens: Sequence[ResolvedToken], font_sizes: bool) -> list[str]:
    candidates = []
    for token in tokens:
        if (token.category == TokenCategory.FONT_SIZE) != font_sizes:
            continue
        if to_android_dimension(token.value, token.category) is not None:
            candidates.append((android_resource_name(token.path), token))
    return [
        f'  <dimen name="{name}">'
        f"{escape(to_android_dimension(token.value, token.category) or '')}</dimen>"
        for name, token in unique_by_name(candidates, "android")
    ]


def format_android_dimens(
    tokens: Sequence[ResolvedToken], theme: str | None = None, is_default: bool = True
) -> str:
    """``<dimen>`` resources in dp for px tokens outside the fontSize category."""
    return _resources("Design tokens - dimensions", _dimens(tokens, font_sizes=False))


def format_android_font_dimens(
    tokens: Sequence[ResolvedToken], theme: str | None = None, is_default: bool = True
) -> str:
    """``<dimen>`` resources in sp for px tokens in the fontSize category."""
    return _resources("Design tokens - font dimensions", _dimens(tokens, font_sizes=True))


def platform(output: OutputConfig) -> Platform:
    def render(snapshots: Sequence[ThemeSnapshot]) -> list[OutputFile]:
        root = Path(output.android)
        files = [
            OutputFile(
                root / colors_filename(s.theme.value, s.is_default),
                format_android_colors(s.sorted_tokens(), s.theme.value, s.is_default),
            )
            for s in snapshots
        ]
        primary = primary_snapshot(snapshots)
        if primary is not None:
            tokens = primary.sorted_tokens()
            files.append(OutputFile(root / "dimens.xml", format_android_dimens(tokens)))
            files.append(OutputFile(root / "font_dimens.xml", format_android_font_dimens(tokens)))
        return files

    return Platform(name="android", render=render)
