"""
Theme identifiers.

The pipeline builds exactly four themes, always in the same order, with
classic-light as the default (it also owns the ``:root`` selector and the
canonical output filenames).
"""

from __future__ import annotations

from enum import StrEnum


class ThemeName(StrEnum):
    """The fixed set of theme variants."""

    CLASSIC_LIGHT = "classic-light"
    CLASSIC_DARK = "classic-dark"
    ADVANCE_LIGHT = "advance-light"
    ADVANCE_DARK = "advance-dark"

    @property
    def mode(self) -> str:
        return self.value.split("-", 1)[1]

    @property
    def pascal(self) -> str:
        """``classic-dark`` -> ``ClassicDark``."""
        return "".join(part.capitalize() for part in self.value.split("-"))

    @property
    def display_name(self) -> str:
        """``classic-dark`` -> ``Classic Dark``."""
        return " ".join(part.capitalize() for part in self.value.split("-"))

    @property
    def is_default(self) -> bool:
        return self is DEFAULT_THEME


DEFAULT_THEME = ThemeName.CLASSIC_LIGHT

THEME_ORDER: tuple[ThemeName, ...] = (
    ThemeName.CLASSIC_LIGHT,
    ThemeName.CLASSIC_DARK,
    ThemeName.ADVANCE_LIGHT,
    ThemeName.ADVANCE_DARK,
)


def parse_theme(name: str) -> ThemeName:
    """Look up a theme by identifier, raising ValueError for unknown names."""
    try:
        return ThemeName(name)
    except ValueError:
        valid = ", ".join(t.value for t in THEME_ORDER)
        raise ValueError(f"Unknown theme '{name}' (expected one of: {valid})") from None
