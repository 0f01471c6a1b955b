"""
tokensmith - design tokens to CSS, Android and iOS.

Loads hierarchical JSON token sources, merges them per theme, resolves
``{path}`` references and renders every theme for each output platform.
"""

from __future__ import annotations

from ._version import get_version

# Re-export commonly used types for convenience
from .core import ir
from .core.errors import (
    CircularReferenceError,
    ManifestError,
    SourceError,
    TokensmithError,
    UnresolvedReferenceError,
)
from .core.orchestrator import BuildReport, build_all, build_theme

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "BuildReport",
    "build_all",
    "build_theme",
    "CircularReferenceError",
    "ManifestError",
    "SourceError",
    "TokensmithError",
    "UnresolvedReferenceError",
]
