"""
tokensmith intermediate representation types.

Source tree nodes, flat tokens, resolution results and theme identifiers.
"""

from .nodes import TokenGroup, TokenLeaf, TokenNode
from .themes import DEFAULT_THEME, THEME_ORDER, ThemeName, parse_theme
from .tokens import (
    REFERENCE_PATTERN,
    ResolvedToken,
    ThemeSnapshot,
    Token,
    TokenCategory,
    TokenIssue,
    TokenReference,
    TokenSet,
    TokenValue,
    is_raw_color,
    parse_reference,
)

__all__ = [
    # Nodes
    "TokenGroup",
    "TokenLeaf",
    "TokenNode",
    # Themes
    "DEFAULT_THEME",
    "THEME_ORDER",
    "ThemeName",
    "parse_theme",
    # Tokens
    "REFERENCE_PATTERN",
    "ResolvedToken",
    "ThemeSnapshot",
    "Token",
    "TokenCategory",
    "TokenIssue",
    "TokenReference",
    "TokenSet",
    "TokenValue",
    "is_raw_color",
    "parse_reference",
]
