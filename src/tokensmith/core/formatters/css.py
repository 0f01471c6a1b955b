"""
CSS custom property output.

One combined document: the raw palette once in ``:root``, then one block per
theme selected with ``[data-theme="..."]``. The default theme's block also
matches ``:root``. References are kept one hop deep as ``var(--...)`` so the
browser repaints component tokens when the theme attribute changes.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from tokensmith.core.ir import (
    THEME_ORDER,
    ResolvedToken,
    ThemeName,
    ThemeSnapshot,
    TokenReference,
)
from tokensmith.core.manifest import OutputConfig
from tokensmith.core.naming import css_var_name, css_var_ref

from .base import OutputFile, Platform, format_scalar, primary_snapshot, unique_by_name


def css_value(token: ResolvedToken) -> str:
    if isinstance(token.display, TokenReference):
        return css_var_ref(token.display.path)
    return format_scalar(token.display)


def theme_selector(theme: str, is_default: bool) -> str:
    selector = f'[data-theme="{theme}"]'
    return f"{selector},\n:root" if is_default else selector


def _declarations(tokens: Sequence[ResolvedToken]) -> list[str]:
    lines = []
    named = [(css_var_name(token.path), token) for token in tokens]
    for name, token in unique_by_name(named, "css"):
        comment = token.token.comment
        suffix = f" /* {comment.replace('*/', '* /')} */" if comment else ""
        lines.append(f"  {name}: {css_value(token)};{suffix}")
    return lines


def format_theme_css(tokens: Sequence[ResolvedToken], theme: str, is_default: bool) -> str:
    """
    Render one theme's rule block.

    Args:
        tokens: Resolved tokens, sorted by path
        theme: Theme identifier
        is_default: Whether the block should also match ``:root``

    Returns:
        CSS rule block
    """
    label = ThemeName(theme).display_name
    heading = f"{label} theme (default)" if is_default else f"{label} theme"
    lines = [f"{theme_selector(theme, is_default)} {{", f"  /* {heading} */"]
    lines.extend(_declarations(tokens))
    lines.append("}")
    return "\n".join(lines)


def format_raw_colors_css(tokens: Sequence[ResolvedToken]) -> str:
    lines = [":root {", "  /* Raw colors */"]
    lines.extend(_declarations(tokens))
    lines.append("}")
    return "\n".join(lines)


def format_css_document(snapshots: Sequence[ThemeSnapshot]) -> str:
    """
    Render the combined stylesheet for every successfully built theme.

    Raw colors are identical across themes and come from the default theme
    (or the first theme built when the default failed).
    """
    built = ", ".join(s.theme.value for s in snapshots) or "none"
    parts = [
        "/**\n"
        " * Do not edit directly\n"
        " * Generated by tokensmith\n"
        " *\n"
        f" * Themes: {', '.join(t.value for t in THEME_ORDER)} (built: {built})\n"
        ' * Select a theme with data-theme="<theme>" on html or body;\n'
        " * classic-light is the default.\n"
        " */"
    ]

    primary = primary_snapshot(snapshots)
    if primary is not None and primary.raw_colors():
        parts.append(format_raw_colors_css(primary.raw_colors()))

    for snapshot in snapshots:
        parts.append(format_theme_css(snapshot.themed(), snapshot.theme.value, snapshot.is_default))

    return "\n\n".join(parts) + "\n"


def platform(output: OutputConfig) -> Platform:
    def render(snapshots: Sequence[ThemeSnapshot]) -> list[OutputFile]:
        if not snapshots:
            return []
        return [OutputFile(Path(output.css), format_css_document(snapshots))]

    return Platform(name="css", render=render)
