"""
Flat token types.

A Token is one leaf of the merged tree, addressed by its path. Resolution
results and per-theme snapshots wrap Tokens without changing them.
"""

from __future__ import annotations

import re
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .themes import ThemeName

# A value is a reference only when the whole string is a single {path}.
REFERENCE_PATTERN = re.compile(r"^\{([^{}]+)\}$")

TokenValue = str | int | float


class TokenCategory(StrEnum):
    """Categories that drive unit and platform rules (first path segment)."""

    COLOR = "color"
    SIZE = "size"
    FONT_SIZE = "fontSize"
    FONT_WEIGHT = "fontWeight"
    LINE_HEIGHT = "lineHeight"
    FONT_FAMILY = "fontFamily"


def parse_reference(value: Any) -> str | None:
    """Return the inner path of a full-string reference, else None."""
    if not isinstance(value, str):
        return None
    match = REFERENCE_PATTERN.match(value)
    if not match:
        return None
    return match.group(1).strip() or None


class Token(BaseModel):
    """
    A single design token.

    Example:
        Token(path=("color", "rawColors", "blue", "500"), raw_value="#2196F3")
    """

    model_config = ConfigDict(frozen=True)

    path: tuple[str, ...] = Field(description="Path segments, unique within a theme")
    raw_value: TokenValue = Field(description="Literal or {reference} as authored")
    metadata: dict[str, Any] = Field(default_factory=dict)
    source: str | None = Field(default=None, description="File the token came from")

    @property
    def name(self) -> str:
        return ".".join(self.path)

    @property
    def category(self) -> str:
        return self.path[0]

    @property
    def reference(self) -> str | None:
        return parse_reference(self.raw_value)

    @property
    def is_reference(self) -> bool:
        return self.reference is not None

    @property
    def comment(self) -> str | None:
        comment = self.metadata.get("comment")
        return str(comment) if comment else None


class TokenReference(BaseModel):
    """One-hop display result: the token a reference points at."""

    model_config = ConfigDict(frozen=True)

    path: str


class ResolvedToken(BaseModel):
    """A token with its fully resolved value and its one-hop display value."""

    model_config = ConfigDict(frozen=True)

    token: Token
    value: TokenValue = Field(description="Final literal, or the placeholder when degraded")
    display: TokenValue | TokenReference = Field(
        description="Literal, or the first hop of a reference chain"
    )
    ok: bool = True

    @property
    def name(self) -> str:
        return self.token.name

    @property
    def path(self) -> tuple[str, ...]:
        return self.token.path

    @property
    def category(self) -> str:
        return self.token.category


class TokenIssue(BaseModel):
    """A token-level problem recorded during a build (the token was degraded or skipped)."""

    model_config = ConfigDict(frozen=True)

    theme: str | None = None
    path: str
    kind: str
    message: str

    @classmethod
    def from_error(cls, error: Exception, path: str, theme: str | None = None) -> TokenIssue:
        message = getattr(error, "message", str(error))
        return cls(theme=theme, path=path, kind=type(error).__name__, message=message)

    def format(self) -> str:
        prefix = f"[{self.theme}] " if self.theme else ""
        return f"{prefix}{self.path}: {self.kind}: {self.message}"


class ThemeSnapshot(BaseModel):
    """Every token of one theme, resolved."""

    model_config = ConfigDict(frozen=True)

    theme: ThemeName
    is_default: bool = False
    tokens: dict[str, ResolvedToken] = Field(default_factory=dict)
    issues: list[TokenIssue] = Field(default_factory=list)

    def sorted_tokens(self) -> list[ResolvedToken]:
        return sorted(self.tokens.values(), key=lambda t: t.path)

    def raw_colors(self) -> list[ResolvedToken]:
        """Theme-agnostic palette tokens (``color.rawColors.*``)."""
        return [t for t in self.sorted_tokens() if is_raw_color(t.path)]

    def themed(self) -> list[ResolvedToken]:
        """Everything except the raw palette."""
        return [t for t in self.sorted_tokens() if not is_raw_color(t.path)]

    def get(self, path: str) -> ResolvedToken | None:
        return self.tokens.get(path)

    def category_counts(self) -> dict[str, int]:
        """Token count per top-level category, in first-seen path order."""
        counts: dict[str, int] = {}
        for token in self.sorted_tokens():
            counts[token.category] = counts.get(token.category, 0) + 1
        return counts

    def stats(self) -> dict[str, int]:
        tokens = self.sorted_tokens()
        return {
            "total": len(tokens),
            "raw colors": len(self.raw_colors()),
            "components": sum(1 for t in tokens if t.path[:2] == ("color", "component")),
            "references": sum(1 for t in tokens if t.token.is_reference),
            "issues": len(self.issues),
        }


def is_raw_color(path: tuple[str, ...]) -> bool:
    return len(path) > 1 and path[0] == TokenCategory.COLOR and path[1] == "rawColors"


# Flat mapping of one theme's tokens, keyed by dotted path
TokenSet = dict[str, Token]
