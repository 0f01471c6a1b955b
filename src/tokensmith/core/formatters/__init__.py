"""
Output formatters.

Each platform module exposes pure rendering functions plus a ``platform()``
factory; ``default_platforms`` assembles the list a build passes to the
orchestrator.
"""

from tokensmith.core.manifest import ProjectConfig

from . import android, css, ios, json_dump
from .android import (
    format_android_colors,
    format_android_dimens,
    format_android_font_dimens,
    to_android_dimension,
)
from .base import OutputFile, Platform, primary_snapshot
from .css import format_css_document, format_raw_colors_css, format_theme_css
from .ios import format_swift_colors, format_swift_shared
from .json_dump import format_json_document

_FACTORIES = {
    "css": css.platform,
    "android": android.platform,
    "ios": ios.platform,
    "json": json_dump.platform,
}


def default_platforms(config: ProjectConfig) -> list[Platform]:
    """Platforms enabled in the project's ``[output] platforms`` list, in that order."""
    return [_FACTORIES[name](config.output) for name in config.output.platforms]


__all__ = [
    "OutputFile",
    "Platform",
    "default_platforms",
    "format_android_colors",
    "format_android_dimens",
    "format_android_font_dimens",
    "format_css_document",
    "format_json_document",
    "format_raw_colors_css",
    "format_swift_colors",
    "format_swift_shared",
    "format_theme_css",
    "primary_snapshot",
    "to_android_dimension",
]
