"""
Project configuration (tokensmith.toml).

Every key is optional; a project without a manifest builds the conventional
layout::

    tokens/color/**/*.json                  shared raw palette
    tokens/foundation/spacing.json          shared scales
    tokens/foundation/theme-<theme>.json    required per theme
    tokens/components/**/*.json             shared component tokens
"""

import logging
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from .errors import ManifestError

logger = logging.getLogger(__name__)

MANIFEST_FILE = "tokensmith.toml"

LOG_LEVEL_ENV = "TOKENSMITH_LOG_LEVEL"

KNOWN_PLATFORMS = ("css", "android", "ios", "json")


@dataclass
class SourcesConfig:
    """Where token JSON is read from (patterns are relative to ``root``)."""

    root: str = "tokens"
    shared: list[str] = field(
        default_factory=lambda: ["color/**/*.json", "foundation/spacing.json"]
    )
    theme: str = "foundation/theme-{theme}.json"  # required, one per theme
    components: list[str] = field(default_factory=lambda: ["components/**/*.json"])


@dataclass
class OutputConfig:
    """Where generated files go (paths are relative to ``root``)."""

    root: str = "build"
    css: str = "web/tokens.css"
    json: str = "web/tokens.json"  # empty string disables the dump
    android: str = "android"
    ios: str = "ios"
    swift_prefix: str = "StyleDictionary"
    platforms: list[str] = field(default_factory=lambda: list(KNOWN_PLATFORMS))


@dataclass
class ProjectConfig:
    """Resolved project configuration."""

    name: str
    project_root: Path
    sources: SourcesConfig = field(default_factory=SourcesConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    @property
    def sources_root(self) -> Path:
        return self.project_root / self.sources.root

    @property
    def output_root(self) -> Path:
        return self.project_root / self.output.root

    def theme_pattern(self, theme: str) -> str:
        return self.sources.theme.replace("{theme}", theme)


def load_manifest(path: Path) -> ProjectConfig:
    """
    Load a tokensmith.toml file.

    Args:
        path: Path to the manifest

    Returns:
        ProjectConfig rooted at the manifest's directory

    Raises:
        ManifestError: If the file is not valid TOML or has invalid values
    """
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ManifestError(f"Invalid TOML in {path}: {e}") from e
    except OSError as e:
        raise ManifestError(f"Cannot read {path}: {e}") from e

    project = data.get("project", {})
    sources_data = data.get("sources", {})
    output_data = data.get("output", {})

    defaults = SourcesConfig()
    sources = SourcesConfig(
        root=sources_data.get("root", defaults.root),
        shared=_string_list(sources_data, "shared", defaults.shared, path),
        theme=sources_data.get("theme", defaults.theme),
        components=_string_list(sources_data, "components", defaults.components, path),
    )
    if "{theme}" not in sources.theme:
        raise ManifestError(
            f"sources.theme must contain a {{theme}} placeholder in {path}, "
            f"got '{sources.theme}'"
        )

    out_defaults = OutputConfig()
    output = OutputConfig(
        root=output_data.get("root", out_defaults.root),
        css=output_data.get("css", out_defaults.css),
        json=output_data.get("json", out_defaults.json),
        android=output_data.get("android", out_defaults.android),
        ios=output_data.get("ios", out_defaults.ios),
        swift_prefix=output_data.get("swift_prefix", out_defaults.swift_prefix),
        platforms=_string_list(output_data, "platforms", out_defaults.platforms, path),
    )
    unknown = [p for p in output.platforms if p not in KNOWN_PLATFORMS]
    if unknown:
        raise ManifestError(
            f"Unknown platform(s) {', '.join(unknown)} in {path} "
            f"(expected: {', '.join(KNOWN_PLATFORMS)})"
        )
    if not output.swift_prefix.isidentifier():
        raise ManifestError(f"output.swift_prefix must be a Swift identifier in {path}")

    return ProjectConfig(
        name=project.get("name", path.parent.name),
        project_root=path.parent,
        sources=sources,
        output=output,
    )


def load_project_config(project_root: Path) -> ProjectConfig:
    """Load the project's manifest, or the defaults when it has none."""
    manifest_path = project_root / MANIFEST_FILE
    if not manifest_path.exists():
        logger.debug(f"No {MANIFEST_FILE} in {project_root}, using defaults")
        return ProjectConfig(name=project_root.resolve().name, project_root=project_root)
    return load_manifest(manifest_path)


def default_log_level() -> str:
    """Log level from TOKENSMITH_LOG_LEVEL (default WARNING)."""
    return os.getenv(LOG_LEVEL_ENV, "WARNING").upper()


def _string_list(data: dict, key: str, default: list[str], path: Path) -> list[str]:
    value = data.get(key)
    if value is None:
        return list(default)
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ManifestError(f"'{key}' must be a string or list of strings in {path}")
    return list(value)
