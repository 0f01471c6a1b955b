"""Core tokensmith functionality: IR, loading, flattening, resolution, formatters, builds."""

from . import ir
from .errors import (
    CircularReferenceError,
    ErrorContext,
    MalformedTokenError,
    ManifestError,
    SourceError,
    SourceNotFoundError,
    SourceParseError,
    TokenReferenceError,
    TokensmithError,
    UnresolvedReferenceError,
)
from .flattener import FlattenResult, flatten
from .loader import load_source, load_theme_tree, merge_nodes, parse_node
from .manifest import ProjectConfig, load_manifest, load_project_config
from .orchestrator import BuildReport, ThemeFailure, build_all, build_theme
from .resolver import ReferenceResolver, ResolveDepth, resolve, resolve_for_display

__all__ = [
    "ir",
    # Errors
    "CircularReferenceError",
    "ErrorContext",
    "MalformedTokenError",
    "ManifestError",
    "SourceError",
    "SourceNotFoundError",
    "SourceParseError",
    "TokenReferenceError",
    "TokensmithError",
    "UnresolvedReferenceError",
    # Pipeline
    "FlattenResult",
    "flatten",
    "load_source",
    "load_theme_tree",
    "merge_nodes",
    "parse_node",
    "ReferenceResolver",
    "ResolveDepth",
    "resolve",
    "resolve_for_display",
    # Projects and builds
    "ProjectConfig",
    "load_manifest",
    "load_project_config",
    "BuildReport",
    "ThemeFailure",
    "build_all",
    "build_theme",
]
