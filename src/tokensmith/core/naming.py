"""
Per-platform identifier conventions for token paths.

- CSS: ``--`` + kebab-cased segments (``fontSize.base`` -> ``--font-size-base``)
- Android: underscores, lower-cased (``color.rawColors.blue.500`` -> ``color_rawcolors_blue_500``)
- Swift: lower camel case (``color.rawColors.blue.500`` -> ``colorRawColorsBlue500``)
"""

from __future__ import annotations

import re
from collections.abc import Sequence

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")
_WORD_SPLIT = re.compile(r"[^A-Za-z0-9]+")


def _segments(path: str | Sequence[str]) -> list[str]:
    if isinstance(path, str):
        return path.split(".")
    return list(path)


def kebab_case(segment: str) -> str:
    """``rawColors`` -> ``raw-colors``, ``B`` -> ``b``, ``primary_hover`` -> ``primary-hover``."""
    words = [w for w in _WORD_SPLIT.split(_CAMEL_BOUNDARY.sub("-", segment)) if w]
    return "-".join(w.lower() for w in words)


def css_name(path: str | Sequence[str]) -> str:
    """Custom property name without the leading ``--``."""
    return "-".join(kebab_case(s) for s in _segments(path) if s)


def css_var_name(path: str | Sequence[str]) -> str:
    return f"--{css_name(path)}"


def css_var_ref(path: str | Sequence[str]) -> str:
    return f"var({css_var_name(path)})"


def android_resource_name(path: str | Sequence[str]) -> str:
    name = "_".join(_segments(path)).lower()
    return _WORD_SPLIT.sub("_", name)


def swift_property_name(path: str | Sequence[str]) -> str:
    words: list[str] = []
    for segment in _segments(path):
        words.extend(w for w in _WORD_SPLIT.split(segment) if w)
    if not words:
        return ""
    head = words[0][0].lower() + words[0][1:]
    name = head + "".join(w[0].upper() + w[1:] for w in words[1:])
    # Swift identifiers cannot start with a digit
    return f"_{name}" if name[0].isdigit() else name


def swift_type_name(prefix: str, theme_pascal: str | None = None) -> str:
    """``StyleDictionary`` + ``Color`` + optional theme suffix."""
    return f"{prefix}Color{theme_pascal or ''}"
