"""
Reference resolution.

A token whose whole value is ``{some.path}`` takes the value of the token at
that path. Resolution runs at one of two depths:

- ``FULL`` follows the chain to its literal (Android and iOS output)
- ``ONE_HOP`` stops at the first referenced token so CSS can emit
  ``var(--...)`` and keep the chain visible

Both depths walk the entire chain, so cycles and missing targets are reported
identically whichever depth a formatter asks for.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from enum import StrEnum

from .errors import CircularReferenceError, TokenReferenceError, UnresolvedReferenceError
from .ir import (
    ResolvedToken,
    ThemeName,
    ThemeSnapshot,
    Token,
    TokenIssue,
    TokenReference,
    TokenValue,
)

logger = logging.getLogger(__name__)


class ResolveDepth(StrEnum):
    """How far to follow a reference chain."""

    FULL = "full"
    ONE_HOP = "one_hop"


def resolve(
    path: str,
    tokens: Mapping[str, Token],
    visited: frozenset[str] = frozenset(),
    depth: ResolveDepth = ResolveDepth.FULL,
) -> TokenValue | TokenReference:
    """
    Resolve the token at ``path``.

    Literals come back unchanged. References are followed iteratively, so
    chain length is bounded only by the token set.

    Args:
        path: Dotted token path
        tokens: Flat token mapping for one theme
        visited: Paths already on the chain (a reference back into them is a cycle)
        depth: FULL for the final literal, ONE_HOP for a TokenReference to the
            first referenced token

    Returns:
        The literal value, or a TokenReference in ONE_HOP mode

    Raises:
        CircularReferenceError: If the chain revisits a path
        UnresolvedReferenceError: If the chain reaches a path not in ``tokens``
    """
    token = tokens.get(path)
    if token is None:
        raise UnresolvedReferenceError(path, token=path)

    first_hop = token.reference
    if first_hop is None:
        return token.raw_value

    chain = [path]
    seen = set(visited)
    current = token
    while (ref := current.reference) is not None:
        seen.add(current.name)
        if ref in seen:
            raise CircularReferenceError(chain + [ref], token=path)
        target = tokens.get(ref)
        if target is None:
            raise UnresolvedReferenceError(ref, referrer=current.name, token=path)
        chain.append(ref)
        current = target

    if depth is ResolveDepth.ONE_HOP:
        return TokenReference(path=first_hop)
    return current.raw_value


def resolve_for_display(
    path: str,
    tokens: Mapping[str, Token],
    render: Callable[[TokenReference], str],
) -> TokenValue:
    """
    One-hop resolution rendered in a target syntax.

    Example:
        resolve_for_display("a", tokens, lambda ref: f"var(--{ref.path})")
    """
    result = resolve(path, tokens, depth=ResolveDepth.ONE_HOP)
    if isinstance(result, TokenReference):
        return render(result)
    return result


class ReferenceResolver:
    """
    Degraded-mode resolver for one theme's token set.

    Failures are logged and recorded as TokenIssues instead of raised; the
    offending token keeps its unresolved ``{...}`` placeholder. Results are
    memoized for the lifetime of the resolver (one resolution pass).
    """

    def __init__(self, tokens: Mapping[str, Token], theme: ThemeName | str | None = None):
        self.tokens = tokens
        self.theme = str(theme) if theme is not None else None
        self.issues: list[TokenIssue] = []
        self._cache: dict[tuple[str, ResolveDepth], tuple[TokenValue | TokenReference, bool]] = (
            {}
        )

    def resolve(
        self, path: str, depth: ResolveDepth = ResolveDepth.FULL
    ) -> TokenValue | TokenReference:
        return self._lookup(path, depth)[0]

    def _lookup(
        self, path: str, depth: ResolveDepth
    ) -> tuple[TokenValue | TokenReference, bool]:
        key = (path, depth)
        if key not in self._cache:
            try:
                self._cache[key] = (resolve(path, self.tokens, depth=depth), True)
            except TokenReferenceError as e:
                if (path, _other(depth)) not in self._cache:
                    logger.warning(f"{self._where()}{e}")
                    self.issues.append(TokenIssue.from_error(e, path, self.theme))
                self._cache[key] = (e.placeholder, False)
        return self._cache[key]

    def resolve_token(self, path: str) -> ResolvedToken:
        token = self.tokens[path]
        value, ok = self._lookup(path, ResolveDepth.FULL)
        display, _ = self._lookup(path, ResolveDepth.ONE_HOP)
        if not ok:
            # Keep the author's own placeholder visible in display output
            display = token.raw_value
        return ResolvedToken(token=token, value=value, display=display, ok=ok)

    def snapshot(
        self, theme: ThemeName, extra_issues: list[TokenIssue] | None = None
    ) -> ThemeSnapshot:
        """Resolve every token into a ThemeSnapshot."""
        resolved = {path: self.resolve_token(path) for path in self.tokens}
        return ThemeSnapshot(
            theme=theme,
            is_default=theme.is_default,
            tokens=resolved,
            issues=list(extra_issues or []) + self.issues,
        )

    def _where(self) -> str:
        return f"[{self.theme}] " if self.theme else ""


def _other(depth: ResolveDepth) -> ResolveDepth:
    return ResolveDepth.ONE_HOP if depth is ResolveDepth.FULL else ResolveDepth.FULL
