"""
Color parsing and platform color conversion.

Accepted inputs:

- ``#RRGGBB`` and ``#RRGGBBAA``
- ``rgb(r, g, b)`` and ``rgba(r, g, b[, a])`` with r/g/b in 0-255 and a in 0-1
- ``transparent`` (fully transparent black)

Anything else is not a color; converters return None and callers leave the
value alone.
"""

from __future__ import annotations

import math
import re
from typing import Any, NamedTuple

_HEX = re.compile(r"^#([0-9a-fA-F]{6})([0-9a-fA-F]{2})?$")
_RGB_FUNC = re.compile(r"^rgba?\(([^()]*)\)$", re.IGNORECASE)


class RGBA(NamedTuple):
    """Channels 0-255, alpha 0-1."""

    red: float
    green: float
    blue: float
    alpha: float = 1.0


TRANSPARENT = RGBA(0, 0, 0, 0.0)


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative values (127.5 -> 128)."""
    return math.floor(value + 0.5)


def parse_color(value: Any) -> RGBA | None:
    """Parse a supported color string, or return None."""
    if not isinstance(value, str):
        return None
    text = value.strip()
    if text.lower() == "transparent":
        return TRANSPARENT

    match = _HEX.match(text)
    if match:
        rgb, alpha = match.groups()
        return RGBA(
            int(rgb[0:2], 16),
            int(rgb[2:4], 16),
            int(rgb[4:6], 16),
            int(alpha, 16) / 255 if alpha else 1.0,
        )

    match = _RGB_FUNC.match(text)
    if match:
        parts = [p.strip() for p in match.group(1).split(",")]
        if len(parts) not in (3, 4):
            return None
        try:
            numbers = [float(p) for p in parts]
        except ValueError:
            return None
        if any(not 0 <= c <= 255 for c in numbers[:3]):
            return None
        alpha = numbers[3] if len(numbers) == 4 else 1.0
        if not 0 <= alpha <= 1:
            return None
        return RGBA(numbers[0], numbers[1], numbers[2], alpha)

    return None


def to_android_color(value: Any) -> str | None:
    """
    Android ``#AARRGGBB``.

    Example:
        to_android_color("#2196F3") -> "#FF2196F3"
        to_android_color("rgba(33, 150, 243, 0.5)") -> "#802196F3"
    """
    color = parse_color(value)
    if color is None:
        return None
    channels = [
        round_half_up(color.alpha * 255),
        round_half_up(color.red),
        round_half_up(color.green),
        round_half_up(color.blue),
    ]
    return "#" + "".join(f"{min(max(c, 0), 255):02X}" for c in channels)


def to_uicolor_components(value: Any) -> tuple[float, float, float, float] | None:
    """Normalized (red, green, blue, alpha), each rounded to 3 decimal places."""
    color = parse_color(value)
    if color is None:
        return None
    return (
        round(color.red / 255, 3),
        round(color.green / 255, 3),
        round(color.blue / 255, 3),
        round(color.alpha, 3),
    )


def to_uicolor(value: Any) -> str | None:
    """Swift ``UIColor(red:green:blue:alpha:)`` initializer expression."""
    components = to_uicolor_components(value)
    if components is None:
        return None
    red, green, blue, alpha = components
    return f"UIColor(red: {red:.3f}, green: {green:.3f}, blue: {blue:.3f}, alpha: {alpha:.3f})"
