"""Tests for reference resolution."""

from __future__ import annotations

import pytest
from conftest import make_tokens

from tokensmith.core.errors import CircularReferenceError, UnresolvedReferenceError
from tokensmith.core.ir import ThemeName, TokenReference
from tokensmith.core.resolver import (
    ReferenceResolver,
    ResolveDepth,
    resolve,
    resolve_for_display,
)

# =============================================================================
# resolve
# =============================================================================


class TestResolve:
    """Test strict resolution."""

    def test_literal_resolves_to_itself(self):
        tokens = make_tokens({"color.rawColors.blue.500": "#2196F3", "fontWeight.bold": 700})
        assert resolve("color.rawColors.blue.500", tokens) == "#2196F3"
        assert resolve("fontWeight.bold", tokens) == 700

    def test_single_reference(self):
        tokens = make_tokens({"A": "{B}", "B": "#000000"})
        assert resolve("A", tokens) == "#000000"

    def test_one_hop_returns_first_reference(self):
        tokens = make_tokens({"a": "{b}", "b": "{c}", "c": "4px"})
        assert resolve("a", tokens, depth=ResolveDepth.ONE_HOP) == TokenReference(path="b")
        assert resolve("c", tokens, depth=ResolveDepth.ONE_HOP) == "4px"

    @pytest.mark.parametrize("length", [100, 2000])
    def test_long_chains_terminate(self, length: int):
        values: dict[str, object] = {f"t{i}": f"{{t{i + 1}}}" for i in range(length)}
        values[f"t{length}"] = "#123456"
        tokens = make_tokens(values)
        assert resolve("t0", tokens) == "#123456"

    def test_reference_whitespace_is_ignored(self):
        tokens = make_tokens({"a": "{ b }", "b": "1px"})
        assert resolve("a", tokens) == "1px"


class TestResolveErrors:
    """Test cycle and missing-target detection."""

    def test_two_token_cycle_from_either_end(self):
        tokens = make_tokens({"A": "{B}", "B": "{A}"})
        with pytest.raises(CircularReferenceError) as exc_info:
            resolve("A", tokens)
        assert exc_info.value.chain == ["A", "B", "A"]
        with pytest.raises(CircularReferenceError) as exc_info:
            resolve("B", tokens)
        assert exc_info.value.chain == ["B", "A", "B"]

    def test_self_reference(self):
        tokens = make_tokens({"A": "{A}"})
        with pytest.raises(CircularReferenceError) as exc_info:
            resolve("A", tokens)
        assert exc_info.value.chain == ["A", "A"]
        assert exc_info.value.placeholder == "{A}"

    def test_one_hop_still_detects_cycles(self):
        tokens = make_tokens({"a": "{b}", "b": "{c}", "c": "{a}"})
        with pytest.raises(CircularReferenceError):
            resolve("a", tokens, depth=ResolveDepth.ONE_HOP)

    def test_missing_target(self):
        tokens = make_tokens({"a": "{b}", "b": "{missing.path}"})
        with pytest.raises(UnresolvedReferenceError) as exc_info:
            resolve("a", tokens)
        error = exc_info.value
        assert error.reference == "missing.path"
        assert error.referrer == "b"
        assert error.placeholder == "{missing.path}"

    def test_unknown_start_path(self):
        with pytest.raises(UnresolvedReferenceError):
            resolve("nope", make_tokens({}))

    def test_visited_paths_count_as_cycle(self):
        tokens = make_tokens({"a": "{b}", "b": "1px"})
        with pytest.raises(CircularReferenceError):
            resolve("a", tokens, visited=frozenset({"b"}))


def test_resolve_for_display():
    tokens = make_tokens({"A": "{B}", "B": "#000000"})
    render = lambda ref: f"var(--{ref.path.lower()})"  # noqa: E731
    assert resolve_for_display("A", tokens, render) == "var(--b)"
    assert resolve_for_display("B", tokens, render) == "#000000"


# =============================================================================
# ReferenceResolver (degraded mode)
# =============================================================================


class TestReferenceResolver:
    """Test the per-theme resolver that records issues instead of raising."""

    def test_cycle_keeps_placeholder(self):
        tokens = make_tokens({"A": "{B}", "B": "{A}", "C": "#000000"})
        resolver = ReferenceResolver(tokens, ThemeName.CLASSIC_LIGHT)
        resolved = resolver.resolve_token("A")
        assert resolved.ok is False
        assert resolved.value == "{A}"
        assert resolved.display == "{B}"
        assert resolver.resolve_token("C").value == "#000000"

    def test_missing_reference_placeholder(self):
        tokens = make_tokens({"a": "{b}", "b": "{gone}"})
        resolver = ReferenceResolver(tokens)
        assert resolver.resolve("a") == "{gone}"

    def test_one_issue_per_token(self):
        tokens = make_tokens({"A": "{B}", "B": "{A}"})
        resolver = ReferenceResolver(tokens, "classic-dark")
        snapshot = resolver.snapshot(ThemeName.CLASSIC_DARK)
        assert sorted(i.path for i in snapshot.issues) == ["A", "B"]
        assert all(i.kind == "CircularReferenceError" for i in snapshot.issues)
        assert all(i.theme == "classic-dark" for i in snapshot.issues)

    def test_snapshot_values(self):
        tokens = make_tokens({"a": "{b}", "b": "{c}", "c": "8px"})
        snapshot = ReferenceResolver(tokens).snapshot(ThemeName.CLASSIC_LIGHT)
        assert snapshot.is_default is True
        token = snapshot.get("a")
        assert token.value == "8px"
        assert token.display == TokenReference(path="b")
        assert snapshot.issues == []

    def test_results_are_memoized(self):
        tokens = make_tokens({"a": "{b}", "b": "1px"})
        resolver = ReferenceResolver(tokens)
        resolver.resolve("a")
        assert ("a", ResolveDepth.FULL) in resolver._cache
