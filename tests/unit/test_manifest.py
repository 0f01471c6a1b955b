"""Tests for tokensmith.toml loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from tokensmith.core.errors import ManifestError
from tokensmith.core.manifest import (
    LOG_LEVEL_ENV,
    default_log_level,
    load_manifest,
    load_project_config,
)


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "tokensmith.toml"
    path.write_text(content, encoding="utf-8")
    return path


class TestLoadManifest:
    """Test manifest parsing and validation."""

    def test_defaults_without_manifest(self, tmp_path: Path):
        config = load_project_config(tmp_path)
        assert config.project_root == tmp_path
        assert config.sources.theme == "foundation/theme-{theme}.json"
        assert config.output.platforms == ["css", "android", "ios", "json"]
        assert config.output_root == tmp_path / "build"

    def test_full_manifest(self, tmp_path: Path):
        path = _write(
            tmp_path,
            """
[project]
name = "acme-tokens"

[sources]
root = "design"
shared = "palette/*.json"
theme = "themes/{theme}.json"

[output]
root = "dist"
swift_prefix = "Acme"
platforms = ["css", "ios"]
""",
        )
        config = load_manifest(path)
        assert config.name == "acme-tokens"
        assert config.sources_root == tmp_path / "design"
        assert config.sources.shared == ["palette/*.json"]
        assert config.theme_pattern("classic-dark") == "themes/classic-dark.json"
        assert config.output.swift_prefix == "Acme"
        assert config.output.platforms == ["css", "ios"]
        assert config.output.css == "web/tokens.css"

    def test_invalid_toml(self, tmp_path: Path):
        path = _write(tmp_path, "[project\nname = ")
        with pytest.raises(ManifestError, match="Invalid TOML"):
            load_manifest(path)

    def test_unknown_platform(self, tmp_path: Path):
        path = _write(tmp_path, '[output]\nplatforms = ["css", "flutter"]\n')
        with pytest.raises(ManifestError, match="flutter"):
            load_manifest(path)

    def test_theme_pattern_needs_placeholder(self, tmp_path: Path):
        path = _write(tmp_path, '[sources]\ntheme = "theme.json"\n')
        with pytest.raises(ManifestError, match="placeholder"):
            load_manifest(path)

    def test_swift_prefix_must_be_identifier(self, tmp_path: Path):
        path = _write(tmp_path, '[output]\nswift_prefix = "my-tokens"\n')
        with pytest.raises(ManifestError, match="swift_prefix"):
            load_manifest(path)

    def test_pattern_list_type_checked(self, tmp_path: Path):
        path = _write(tmp_path, "[sources]\ncomponents = [1, 2]\n")
        with pytest.raises(ManifestError, match="components"):
            load_manifest(path)


def test_log_level_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    assert default_log_level() == "WARNING"
    monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
    assert default_log_level() == "DEBUG"
