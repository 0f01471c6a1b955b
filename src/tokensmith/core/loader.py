"""
Token source loading.

Reads JSON token documents and deep-merges them into a single tree. Merge
rules:

- an incoming token leaf replaces whatever was at its path (last source wins)
- two groups at the same path merge key by key
- non-object members (arrays, scalars) are replaced wholesale, never merged
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from .errors import SourceNotFoundError, SourceParseError
from .ir import THEME_ORDER, TokenGroup, TokenLeaf, TokenNode
from .manifest import ProjectConfig

logger = logging.getLogger(__name__)

_GLOB_CHARS = frozenset("*?[")


# =============================================================================
# Tree construction and merging
# =============================================================================


def _is_leaf(obj: dict[str, Any]) -> bool:
    return "value" in obj and not isinstance(obj["value"], dict)


def parse_node(data: dict[str, Any], source: str | None = None) -> TokenNode:
    """
    Convert a decoded JSON object into a token tree.

    An object is a token leaf iff it has a ``value`` member that is not itself
    an object. Everything else is a group; its non-object members are kept as
    group attributes.
    """
    if _is_leaf(data):
        meta = {k: v for k, v in data.items() if k != "value"}
        return TokenLeaf(value=data["value"], meta=meta, source=source)

    children: dict[str, TokenNode] = {}
    attributes: dict[str, Any] = {}
    for key, child in data.items():
        if isinstance(child, dict):
            children[key] = parse_node(child, source)
        else:
            attributes[key] = child
    return TokenGroup(children=children, attributes=attributes)


def merge_nodes(base: TokenNode, incoming: TokenNode) -> TokenNode:
    """Deep-merge ``incoming`` over ``base`` without mutating either."""
    if isinstance(incoming, TokenLeaf):
        return incoming
    if isinstance(base, TokenLeaf):
        logger.warning(
            f"Group from {_first_source(incoming) or 'unknown source'} replaces token "
            f"defined in {base.source or 'unknown source'}"
        )
        return incoming

    children = dict(base.children)
    attributes = dict(base.attributes)
    for key, node in incoming.children.items():
        attributes.pop(key, None)
        children[key] = merge_nodes(children[key], node) if key in children else node
    for key, value in incoming.attributes.items():
        children.pop(key, None)
        attributes[key] = value
    return TokenGroup(children=children, attributes=attributes)


def merge_all(nodes: Iterable[TokenNode]) -> TokenGroup:
    merged: TokenNode = TokenGroup()
    for node in nodes:
        merged = merge_nodes(merged, node)
    if isinstance(merged, TokenLeaf):
        # A document whose root is itself a leaf has no path to live at
        return TokenGroup()
    return merged


def _first_source(node: TokenNode) -> str | None:
    if isinstance(node, TokenLeaf):
        return node.source
    for child in node.children.values():
        found = _first_source(child)
        if found:
            return found
    return None


# =============================================================================
# File access
# =============================================================================


def load_source(path: Path, theme: str | None = None) -> TokenNode:
    """
    Read one JSON token document.

    Raises:
        SourceNotFoundError: If the file does not exist
        SourceParseError: If it is not a JSON object
    """
    if not path.is_file():
        raise SourceNotFoundError(f"Token source not found: {path}", path, theme)

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise SourceParseError(f"Invalid JSON: {e}", path, theme) from e
    except (OSError, UnicodeDecodeError) as e:
        raise SourceParseError(f"Cannot read source: {e}", path, theme) from e

    if not isinstance(data, dict):
        raise SourceParseError(
            f"Token document must be a JSON object, got {type(data).__name__}", path, theme
        )

    logger.debug(f"Loaded {path}")
    return parse_node(data, source=str(path))


def expand_sources(
    root: Path,
    patterns: Iterable[str],
    exclude: set[Path] | None = None,
) -> list[Path]:
    """
    Expand source patterns relative to ``root``.

    Glob patterns (``**`` recurses) match in sorted order; plain paths are kept
    when they exist. Duplicates are dropped, first occurrence wins.
    """
    exclude = exclude or set()
    seen: set[Path] = set()
    paths: list[Path] = []
    for pattern in patterns:
        if _GLOB_CHARS & set(pattern):
            matches = sorted(p for p in root.glob(pattern) if p.is_file())
            if not matches:
                logger.debug(f"No sources match {root / pattern}")
        else:
            candidate = root / pattern
            matches = [candidate] if candidate.is_file() else []
            if not matches:
                logger.debug(f"Optional source {candidate} not present, treated as empty")
        for match in matches:
            key = match.resolve()
            if key in seen or key in exclude:
                continue
            seen.add(key)
            paths.append(match)
    return paths


def load_sources(
    root: Path,
    patterns: Iterable[str],
    theme: str | None = None,
    exclude: set[Path] | None = None,
    required: bool = False,
) -> TokenGroup:
    """
    Load and merge every source matching ``patterns``, in listed order.

    Raises:
        SourceNotFoundError: If ``required`` and nothing matches
    """
    patterns = list(patterns)
    paths = expand_sources(root, patterns, exclude)
    if required and not paths:
        raise SourceNotFoundError(
            f"No token sources match {', '.join(patterns)}", root, theme
        )
    return merge_all(load_source(p, theme) for p in paths)


def theme_source_path(config: ProjectConfig, theme: str) -> Path:
    return config.sources_root / config.theme_pattern(theme)


def load_theme_tree(config: ProjectConfig, theme: str) -> TokenGroup:
    """
    Load the merged source tree for one theme.

    Order: shared sources, the theme's own file, component sources. Theme files
    are never picked up by the shared or component patterns, so one theme's
    overrides cannot leak into another's set.

    Raises:
        SourceNotFoundError: If the theme file is missing
        SourceParseError: If any source is not valid JSON
    """
    root = config.sources_root
    theme_files = {theme_source_path(config, t.value).resolve() for t in THEME_ORDER}

    theme_path = theme_source_path(config, theme)
    if not theme_path.is_file():
        raise SourceNotFoundError(f"Theme source not found: {theme_path}", theme_path, theme)

    shared = load_sources(root, config.sources.shared, theme, exclude=theme_files)
    overrides = load_source(theme_path, theme)
    components = load_sources(root, config.sources.components, theme, exclude=theme_files)

    return merge_all([shared, overrides, components])
