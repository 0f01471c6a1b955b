"""Shared pytest fixtures for tokensmith tests."""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path

import pytest

from tokensmith.core.ir import THEME_ORDER, ThemeName, Token

RAW_COLORS = {
    "color": {
        "rawColors": {
            "blue": {"500": {"value": "#2196F3"}},
            "gray": {"900": {"value": "#212121"}},
            "white": {"value": "#FFFFFF"},
        }
    }
}

SCALES = {
    "size": {"spacing": {"md": {"value": "16px"}}},
    "fontSize": {"foundation": {"base": {"value": "16px"}}},
    "fontWeight": {"bold": {"value": 700}},
}

BUTTON = {
    "color": {
        "component": {"button": {"background": {"value": "{color.foundation.accent}"}}}
    }
}


def theme_document(theme: ThemeName) -> dict:
    background = "{color.rawColors.gray.900}" if theme.mode == "dark" else "{color.rawColors.white}"
    return {
        "color": {
            "foundation": {
                "background": {"value": background},
                "accent": {"value": "{color.rawColors.blue.500}", "comment": "Primary accent"},
            }
        }
    }


def write_json(path: Path, data: dict) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path


def write_project(root: Path, themes: Iterable[ThemeName] = THEME_ORDER) -> Path:
    """Write a small token project using the default layout."""
    tokens = root / "tokens"
    write_json(tokens / "color" / "raw.json", RAW_COLORS)
    write_json(tokens / "foundation" / "spacing.json", SCALES)
    write_json(tokens / "components" / "button.json", BUTTON)
    for theme in themes:
        write_json(tokens / "foundation" / f"theme-{theme.value}.json", theme_document(theme))
    return root


def make_tokens(values: dict[str, object]) -> dict[str, Token]:
    """Build a flat token mapping from ``{"a.b": value}``."""
    return {
        name: Token(path=tuple(name.split(".")), raw_value=value) for name, value in values.items()
    }


@pytest.fixture
def token_project(tmp_path: Path) -> Path:
    """A complete four-theme token project."""
    return write_project(tmp_path / "project")
