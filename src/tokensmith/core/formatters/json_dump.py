"""
JSON dump of every built theme.

Nested by token path, keyed by theme::

    {"classic-light": {"color": {"rawColors": {"blue": {"500":
        {"value": "#2196F3", "resolvedValue": "#2196F3"}}}}}}
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from tokensmith.core.ir import ResolvedToken, ThemeSnapshot
from tokensmith.core.manifest import OutputConfig

from .base import OutputFile, Platform


def _nest(tokens: Sequence[ResolvedToken]) -> dict[str, Any]:
    tree: dict[str, Any] = {}
    for token in tokens:
        node = tree
        for segment in token.path[:-1]:
            node = node.setdefault(segment, {})
        node[token.path[-1]] = {"value": token.token.raw_value, "resolvedValue": token.value}
    return tree


def format_json_document(snapshots: Sequence[ThemeSnapshot]) -> str:
    document = {s.theme.value: _nest(s.sorted_tokens()) for s in snapshots}
    return json.dumps(document, indent=2, ensure_ascii=False) + "\n"


def platform(output: OutputConfig) -> Platform:
    def render(snapshots: Sequence[ThemeSnapshot]) -> list[OutputFile]:
        if not output.json or not snapshots:
            return []
        return [OutputFile(Path(output.json), format_json_document(snapshots))]

    return Platform(name="json", render=render)
