"""
Error types for token loading, flattening, and reference resolution.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional


class TokensmithError(Exception):
    """Base exception for all tokensmith errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}: {self.message}"
        return self.message


class ManifestError(TokensmithError):
    """
    Raised when tokensmith.toml cannot be read or is invalid.

    Examples:
    - TOML syntax errors
    - Unknown platform names
    - Theme pattern without a {theme} placeholder
    """

    pass


class SourceError(TokensmithError):
    """Raised when a token source file cannot be used."""

    def __init__(
        self,
        message: str,
        path: Path,
        theme: str | None = None,
    ):
        self.path = path
        self.theme = theme
        super().__init__(message, ErrorContext(theme=theme, source=path))


class SourceNotFoundError(SourceError):
    """Raised when a required source file (a theme file) is missing."""

    pass


class SourceParseError(SourceError):
    """
    Raised when a source file is not a valid token document.

    Examples:
    - Invalid JSON
    - A top-level array or scalar instead of an object
    """

    pass


class TokenReferenceError(TokensmithError):
    """
    Base for reference resolution failures.

    ``placeholder`` is the unresolved ``{...}`` text at the point of failure,
    which degraded-mode callers emit in place of a value.
    """

    def __init__(self, message: str, placeholder: str, token: str | None = None):
        self.placeholder = placeholder
        self.token = token
        context = ErrorContext(token=token) if token else None
        super().__init__(message, context)


class CircularReferenceError(TokenReferenceError):
    """Raised when a reference chain revisits a token path."""

    def __init__(self, chain: list[str], token: str | None = None):
        self.chain = chain
        super().__init__(
            f"Circular reference detected: {' -> '.join(chain)}",
            placeholder="{" + chain[-1] + "}",
            token=token,
        )


class UnresolvedReferenceError(TokenReferenceError):
    """Raised when a reference points at a path that is not in the token set."""

    def __init__(self, reference: str, referrer: str | None = None, token: str | None = None):
        self.reference = reference
        self.referrer = referrer
        if referrer:
            message = f"Reference {{{reference}}} in '{referrer}' does not resolve"
        else:
            message = f"Token '{reference}' does not exist"
        super().__init__(message, placeholder="{" + reference + "}", token=token)


class MalformedTokenError(TokensmithError):
    """
    Raised when a leaf cannot be used as a token.

    Examples:
    - ``{"value": null}`` or a list/object value
    - ``"{a}{b}"`` or ``"1px {size.base}"`` (references must be the whole value)
    """

    def __init__(self, path: str, value: Any, reason: str, source: str | None = None):
        self.path = path
        self.value = value
        self.reason = reason
        context = ErrorContext(token=path, source=Path(source) if source else None)
        super().__init__(f"{reason} (value: {value!r})", context)


@dataclass
class ErrorContext:
    """
    Where an error happened.

    Attributes:
        theme: Theme being built, if any
        source: Source file involved, if any
        token: Dotted token path involved, if any
    """

    theme: str | None = None
    source: Path | None = None
    token: str | None = None

    def format(self) -> str:
        """
        Format as a human-readable location.

        Returns:
            String like: "[classic-dark] tokens/foundation/theme-classic-dark.json"
        """
        parts = []
        if self.theme:
            parts.append(f"[{self.theme}]")
        if self.source:
            parts.append(str(self.source))
        if self.token:
            parts.append(f"token '{self.token}'")
        return " ".join(parts)
