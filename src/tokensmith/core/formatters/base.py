"""
Shared formatter types and value helpers.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from tokensmith.core.ir import ResolvedToken, ThemeSnapshot

logger = logging.getLogger(__name__)

_NUMBER = re.compile(r"^(-?\d+(?:\.\d+)?)(px)?$")


@dataclass(frozen=True)
class OutputFile:
    """A rendered artifact, path relative to the output root."""

    path: Path
    content: str


@dataclass(frozen=True)
class Platform:
    """A named output target: turns the built snapshots into files."""

    name: str
    render: Callable[[Sequence[ThemeSnapshot]], list[OutputFile]]


def primary_snapshot(snapshots: Sequence[ThemeSnapshot]) -> ThemeSnapshot | None:
    """The default theme's snapshot, or the first one built when it failed."""
    for snapshot in snapshots:
        if snapshot.is_default:
            return snapshot
    return snapshots[0] if snapshots else None


def format_scalar(value: Any) -> str:
    """Render a literal for text output (``16.0`` -> ``16``)."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def parse_px(value: Any) -> float | None:
    """``"16px"`` -> 16.0; anything else -> None."""
    if not isinstance(value, str):
        return None
    match = _NUMBER.match(value.strip())
    if match and match.group(2):
        return float(match.group(1))
    return None


def parse_number(value: Any) -> float | None:
    """Numbers, numeric strings and px dimensions as a float; anything else -> None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        return float(value)
    if isinstance(value, str):
        match = _NUMBER.match(value.strip())
        if match:
            return float(match.group(1))
    return None


def unique_by_name(
    entries: Iterable[tuple[str, ResolvedToken]], platform: str
) -> list[tuple[str, ResolvedToken]]:
    """Drop entries whose generated identifier collides with an earlier one."""
    seen: dict[str, str] = {}
    unique = []
    for name, token in entries:
        if name in seen:
            logger.warning(
                f"{platform}: '{token.name}' and '{seen[name]}' both map to '{name}', "
                f"keeping '{seen[name]}'"
            )
            continue
        seen[name] = token.name
        unique.append((name, token))
    return unique
