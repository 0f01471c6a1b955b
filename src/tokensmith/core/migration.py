"""
Flat, schema-annotated token export.

Converts hierarchical tokens into the flat layout used by the Spectrum
design-data tooling: one kebab-case name per token, each carrying a
``$schema`` URL for its token type and a stable ``uuid``. Also compares two
generated stylesheets so a migrated build can be checked against the
hierarchical one.
"""

from __future__ import annotations

import logging
import re
import uuid
from dataclasses import dataclass
from typing import Any

from .ir import ThemeSnapshot, Token

logger = logging.getLogger(__name__)

SCHEMA_BASE = "https://opensource.adobe.com/spectrum-design-data/schemas/token-types"

SCHEMA_URLS = {
    "color": f"{SCHEMA_BASE}/color.json",
    "dimension": f"{SCHEMA_BASE}/dimension.json",
    "alias": f"{SCHEMA_BASE}/alias.json",
    "typography": f"{SCHEMA_BASE}/typography.json",
}

# uuid5 namespace for exported token ids
TOKEN_NAMESPACE = uuid.uuid5(uuid.NAMESPACE_URL, "https://tokensmith.dev/tokens")

_RAW_COLOR_NAME = re.compile(r"^([a-z]+)-(\d+)$")
_SEMANTIC_GROUPS = ("accent", "background", "text", "border")
_CSS_VARIABLE = re.compile(r"--([^:]+):\s*([^;]+);")


def to_flat_name(path: str) -> str:
    """
    Flat kebab-case name for a hierarchical path.

    Examples:
        color.rawColors.blue.500 -> blue-500
        color.accent.primary -> accent-primary
        component.button.primary.background -> button-primary-background
        spacing.md -> spacing-md
        borderRadius.md -> border-radius-md
    """
    parts = path.split(".")
    if parts[0] == "color" and len(parts) > 2 and parts[1] == "rawColors":
        return "-".join(parts[2:])
    if parts[0] in ("color", "component") and len(parts) > 1:
        return "-".join(parts[1:])
    if parts[0] == "borderRadius" and len(parts) > 1:
        return "border-radius-" + "-".join(parts[1:])
    return "-".join(parts)


def to_hierarchical_path(flat_name: str) -> str:
    """
    Best-effort reverse of ``to_flat_name`` for the common patterns.

    Names that match no known pattern come back unchanged.
    """
    match = _RAW_COLOR_NAME.match(flat_name)
    if match:
        return f"color.rawColors.{match.group(1)}.{match.group(2)}"
    parts = flat_name.split("-")
    if len(parts) > 1 and parts[0] in _SEMANTIC_GROUPS:
        return "color." + ".".join(parts)
    return flat_name


def detect_token_type(value: Any) -> str:
    if isinstance(value, str):
        text = value.strip()
        if text.startswith("#") or text.startswith("rgb") or text == "transparent":
            return "color"
        if text.endswith(("px", "dp", "sp")):
            return "dimension"
    return "alias"


def schema_url(token_type: str) -> str:
    """Schema URL for a token type; unknown types fall back to alias."""
    return SCHEMA_URLS.get(token_type, SCHEMA_URLS["alias"])


def token_uuid(path: str) -> str:
    return str(uuid.uuid5(TOKEN_NAMESPACE, path))


def convert_to_flat(token: Token, theme: str | None = None) -> tuple[str, dict[str, Any]]:
    """
    Convert one token to its flat name and flat document.

    Alias tokens exported for a theme also carry ``sets: {theme: {value}}``.
    """
    token_type = detect_token_type(token.raw_value)
    flat: dict[str, Any] = {
        "value": token.raw_value,
        "$schema": schema_url(token_type),
        "uuid": token_uuid(token.name),
    }
    if theme and token_type == "alias":
        flat["sets"] = {theme: {"value": token.raw_value}}
    return to_flat_name(token.name), flat


def export_flat(snapshot: ThemeSnapshot) -> dict[str, dict[str, Any]]:
    """Flat export of a whole theme, keyed by flat name in path order."""
    exported: dict[str, dict[str, Any]] = {}
    owners: dict[str, str] = {}
    for resolved in snapshot.sorted_tokens():
        name, flat = convert_to_flat(resolved.token, snapshot.theme.value)
        if name in exported:
            logger.warning(
                f"Flat name '{name}' for '{resolved.name}' already used by "
                f"'{owners[name]}', skipping"
            )
            continue
        exported[name] = flat
        owners[name] = resolved.name
    return exported


# =============================================================================
# Output comparison
# =============================================================================


@dataclass(frozen=True)
class CssDifference:
    """A custom property value present in one stylesheet and absent from another."""

    kind: str
    name: str
    value: str


def extract_css_variables(css: str) -> dict[str, str]:
    """Custom property names (without ``--``) to their declared values."""
    return {m.group(1).strip(): m.group(2).strip() for m in _CSS_VARIABLE.finditer(css)}


def compare_css_outputs(old_css: str, new_css: str) -> list[CssDifference]:
    """
    Values declared in ``old_css`` that ``new_css`` never declares.

    Variable names are ignored since the flat export renames tokens; only
    values are compared.
    """
    new_values = set(extract_css_variables(new_css).values())
    return [
        CssDifference(kind="missing", name=name, value=value)
        for name, value in extract_css_variables(old_css).items()
        if value not in new_values
    ]
