"""
Flatten a merged source tree into a path -> Token mapping.

Traversal is depth-first in key order. Two path rewrites apply so that
documents written in the older theme-variant layout land where the
formatters expect them:

- ``theme.<family>.variant.<mode>.*`` -> ``color.foundation.*`` when
  ``<family>-<mode>`` is the theme being built; dropped otherwise
- ``component.*`` -> ``color.component.*``
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from .errors import MalformedTokenError
from .ir import Token, TokenGroup, TokenLeaf, TokenSet, parse_reference

logger = logging.getLogger(__name__)


@dataclass
class FlattenResult:
    """Tokens in traversal order, plus the leaves that had to be skipped."""

    tokens: TokenSet = field(default_factory=dict)
    issues: list[MalformedTokenError] = field(default_factory=list)


def flatten(tree: TokenGroup, theme: str | None = None) -> FlattenResult:
    """
    Flatten ``tree`` into a dotted-path mapping.

    Args:
        tree: Merged source tree
        theme: Theme being built; enables theme-variant path rewriting

    Returns:
        FlattenResult with usable tokens and MalformedTokenErrors for the rest
    """
    result = FlattenResult()
    _walk(tree, (), theme, result)
    return result


def _walk(
    group: TokenGroup,
    prefix: tuple[str, ...],
    theme: str | None,
    result: FlattenResult,
) -> None:
    for key, node in group.children.items():
        path = prefix + (key,)
        if isinstance(node, TokenLeaf):
            _add_leaf(path, node, theme, result)
        else:
            _walk(node, path, theme, result)


def _add_leaf(
    path: tuple[str, ...],
    leaf: TokenLeaf,
    theme: str | None,
    result: FlattenResult,
) -> None:
    rewritten = rewrite_path(path, theme)
    if rewritten is None:
        return

    name = ".".join(rewritten)
    problem = check_value(leaf.value)
    if problem:
        error = MalformedTokenError(name, leaf.value, problem, leaf.source)
        logger.warning(f"Skipping token: {error}")
        result.issues.append(error)
        return

    if name in result.tokens:
        logger.debug(f"'{name}' defined twice after path rewriting, keeping the later one")
    result.tokens[name] = Token(
        path=rewritten,
        raw_value=leaf.value,
        metadata=leaf.meta,
        source=leaf.source,
    )


def rewrite_path(path: tuple[str, ...], theme: str | None) -> tuple[str, ...] | None:
    """Map legacy layouts onto canonical paths; None means "not in this theme"."""
    if len(path) > 4 and path[0] == "theme" and path[2] == "variant":
        if theme is None or f"{path[1]}-{path[3]}" != theme:
            return None
        return ("color", "foundation") + path[4:]
    if path[0] == "component" and len(path) > 1:
        return ("color",) + path
    return path


def check_value(value: Any) -> str | None:
    """Return why ``value`` is unusable as a token value, or None if it is fine."""
    if value is None:
        return "Token has no value"
    if isinstance(value, bool) or not isinstance(value, str | int | float):
        return f"Token value must be a string or number, not {type(value).__name__}"
    if isinstance(value, str):
        if not value.strip():
            return "Token value is empty"
        if ("{" in value or "}" in value) and parse_reference(value) is None:
            return "References must be a single {path} making up the whole value"
    return None
