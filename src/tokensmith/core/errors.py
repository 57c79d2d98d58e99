"""
Error types for token ingestion, reference resolution and CSS generation.
"""

from dataclasses import dataclass
from typing import Optional


class TokensmithError(Exception):
    """Base exception for all tokensmith errors."""

    def __init__(self, message: str, context: Optional["TokenContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        location = self.context.format() if self.context else ""
        if location:
            return f"{location}: {self.message}"
        return self.message


class InputError(TokensmithError):
    """
    Raised when a client's token export cannot be read.

    Examples:
    - Missing export file
    - Invalid JSON
    - Top-level document is not an object
    """

    pass


class AliasError(TokensmithError):
    """
    Raised when a token alias cannot be used.

    Examples:
    - Malformed braces (``"{primitives.color"``)
    - Reference to a token that does not exist
    - Circular references
    """

    pass


class ColorError(TokensmithError, ValueError):
    """Raised when a colour value cannot be parsed as hex."""

    pass


class ManifestError(TokensmithError):
    """Raised when tokensmith.toml is missing or invalid."""

    pass


@dataclass
class TokenContext:
    """
    Where an error happened: which client build and which token.

    Attributes:
        client: Client identifier of the build, if known
        path: Token path segments from the tree root
    """

    client: str | None = None
    path: tuple[str, ...] = ()

    def format(self) -> str:
        """
        Format as ``client: a.b.c`` (either side may be missing).
        """
        dotted = ".".join(self.path)
        if self.client and dotted:
            return f"{self.client}: {dotted}"
        return self.client or dotted


def make_alias_error(
    message: str,
    path: tuple[str, ...] | list[str],
    client: str | None = None,
) -> AliasError:
    """
    Helper to create an AliasError pointing at the offending token.

    Args:
        message: Error description
        path: Token path
        client: Optional client name

    Returns:
        AliasError with context attached
    """
    return AliasError(message, TokenContext(client=client, path=tuple(path)))
