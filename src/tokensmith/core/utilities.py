"""
Colour utility classes.

Every colour token yields a text and a background utility::

    .has-color-brand-primary {
      color: var(--brand--primary) !important;
    }

Class names join path segments with a single dash while the referenced
custom property uses the double-dash variable name; the two derivations are
intentionally different.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from .formatter import nameable, strip_namespaces, variable_name
from .ir import Token, TokenType

UTILITIES_HEADER = (
    "/* ========================================= */\n"
    "/* AUTO-GENERATED UTILITY CLASSES           */\n"
    "/* Generated from Figma variables           */\n"
    "/* Do not edit manually                     */\n"
    "/* ========================================= */\n"
)

_DOUBLE_DASH = re.compile(r"--")


def class_name(token: Token) -> str:
    """
    Class-safe suffix for a colour token.

    Examples:
        ``("primitives", "color", "brand", "primary")`` -> ``brand-primary``
    """
    return _DOUBLE_DASH.sub("-", "-".join(strip_namespaces(token.path)))


def utility_rules(token: Token) -> str:
    name = class_name(token)
    var = variable_name(token.path)
    return (
        f".has-color-{name} {{\n"
        f"  color: var({var}) !important;\n"
        "}\n\n"
        f".has-bg-{name} {{\n"
        f"  background-color: var({var}) !important;\n"
        "}\n\n"
    )


def emit_utilities(tokens: Sequence[Token]) -> str:
    """Utility stylesheet for the colour tokens among ``tokens``."""
    parts = [UTILITIES_HEADER, "\n", "/* COLOR UTILITIES */\n\n"]
    colors = [t for t in tokens if t.type == TokenType.COLOR]
    parts.extend(utility_rules(t) for t in nameable(colors))
    parts.append("/* END COLOR UTILITIES */\n")
    return "".join(parts)


class UtilityEmitter:
    """Pipeline component wrapper around :func:`emit_utilities`."""

    def emit(self, tokens: Sequence[Token]) -> str:
        return emit_utilities(tokens)
