"""
Token value formatting.

Converts one token into a CSS custom property declaration::

    --brand--500: #2f305e;
    --spacing--spacing-lg: 1.5rem;
    --heading--h1: var(--brand--500);

Decision order for the right-hand side (first match wins):

1. Alias: the authored value references another token -> ``var(--...)``.
   Applies even to dimension tokens; an alias is never converted.
2. Dimension: numeric value converted by unit. Paths containing
   ``line-height`` are unitless ratios: values of 10 and above are taken as
   pixels and divided by the base, smaller values are kept.
3. Font family: quoted if needed, followed by the system font stack.
4. Lists: items joined with commas; references are resolved to literals,
   an item left unresolved by a lenient build becomes ``var(--...)``.
5. Anything else is printed as-is.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Any

from .ir import NAMESPACE_SEGMENTS, Token, TokenType, Unit
from .numbers import format_number, is_number, js_string
from .references import alias_to_css_var, find_alias, is_alias

logger = logging.getLogger(__name__)

BASE_FONT_SIZE = 16

SYSTEM_FONT_STACK = (
    '-apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, "Helvetica Neue", Arial, '
    '"Noto Sans", sans-serif, "Apple Color Emoji", "Segoe UI Emoji", "Segoe UI Symbol", '
    '"Noto Color Emoji"'
)


def strip_namespaces(path: Iterable[str]) -> list[str]:
    """Drop primitives/typography/blocks/color segments wherever they occur."""
    return [segment for segment in path if segment not in NAMESPACE_SEGMENTS]


def variable_name(path: Iterable[str]) -> str:
    """
    Custom property name for a token path.

    Examples:
        >>> variable_name(["primitives", "color", "brand", "primary"])
        '--brand--primary'

    Raises:
        ValueError: If every segment is a namespace segment.
    """
    path = tuple(path)
    segments = strip_namespaces(path)
    if not segments:
        raise ValueError(f"No variable name for {'.'.join(path)!r}: only namespace segments")
    return "--" + "--".join(segments)


def nameable(tokens: Sequence[Token]) -> list[Token]:
    """Tokens that have a variable name; the rest are logged and left out."""
    kept: list[Token] = []
    for token in tokens:
        if strip_namespaces(token.path):
            kept.append(token)
        else:
            logger.warning("Skipping %s: path has no name outside namespaces", token.dotted_path)
    return kept


class TokenFormatter:
    """Formats tokens as CSS declarations against a fixed rem base."""

    def __init__(self, base: float = BASE_FONT_SIZE, font_stack: str = SYSTEM_FONT_STACK):
        self.base = base
        self.font_stack = font_stack

    def format_dimension(self, token: Token) -> str:
        raw = token.value
        if "line-height" in "--".join(token.path):
            return format_number(raw / self.base if raw >= 10 else raw)

        unit = token.unit if token.unit is not None else str(Unit.REM)
        if unit == Unit.NONE:
            return format_number(raw / self.base)
        if unit == Unit.PX:
            return f"{format_number(raw)}px"
        if unit in (Unit.EM, Unit.REM):
            return f"{format_number(raw / self.base)}{unit}"
        return f"{format_number(raw)}{unit}"

    def format_font_family(self, name: str) -> str:
        quoted = f'"{name}"' if " " in name else name
        return f"{quoted}, {self.font_stack}"

    def format_value(self, token: Token) -> str:
        """Right-hand side of the declaration."""
        original = token.raw_value
        if is_alias(original):
            return alias_to_css_var(find_alias(original, token.path))

        if token.type == TokenType.DIMENSION and is_number(token.value):
            return self.format_dimension(token)

        if (
            token.type == TokenType.STRING
            and "font-family" in token.path
            and isinstance(token.value, str)
        ):
            return self.format_font_family(token.value)

        if isinstance(token.value, list | tuple):
            return self._format_item(token.value, token)

        return js_string(token.value)

    def _format_item(self, item: Any, token: Token) -> str:
        # Items still holding a reference come from lenient builds
        if isinstance(item, list | tuple):
            return ",".join(self._format_item(child, token) for child in item)
        if is_alias(item):
            return alias_to_css_var(find_alias(item, token.path))
        return js_string(item)

    def format_token(self, token: Token) -> str:
        """Full declaration line, indented for a ``:root`` block."""
        return f"  {variable_name(token.path)}: {self.format_value(token)};"


_default_formatter = TokenFormatter()


def format_value(token: Token) -> str:
    return _default_formatter.format_value(token)


def format_token(token: Token) -> str:
    return _default_formatter.format_token(token)
