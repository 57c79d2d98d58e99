"""
Unit classification for dimension tokens.

Figma exports dimensions as bare numbers; the unit they should be emitted
in is inferred from the key the token sits under. Rules are checked in
declaration order and the first rule whose substring occurs in the key
wins, so ``letter-spacing`` must stay ahead of ``spacing``.
"""

from __future__ import annotations

from dataclasses import dataclass

from .ir import Unit


@dataclass(frozen=True)
class UnitRule:
    """Keys containing ``substring`` are emitted in ``unit``."""

    substring: str
    unit: str


UNIT_RULES: tuple[UnitRule, ...] = (
    UnitRule("line-height", Unit.NONE),
    UnitRule("letter-spacing", Unit.EM),
    UnitRule("border-width", Unit.PX),
    UnitRule("artboard", Unit.PX),
    UnitRule("max-width", Unit.PX),
    UnitRule("spacing", Unit.REM),
    UnitRule("radius", Unit.REM),
    UnitRule("padding", Unit.REM),
    UnitRule("margin", Unit.REM),
)


def classify_unit(key: str, rules: tuple[UnitRule, ...] = UNIT_RULES) -> str | None:
    """
    Return the unit for a token key, or None if no rule matches.

    Examples:
        >>> classify_unit("spacing-lg")
        'rem'
        >>> classify_unit("letter-spacing-tight")
        'em'
        >>> classify_unit("font-weight") is None
        True
    """
    for rule in rules:
        if rule.substring in key:
            return str(rule.unit)
    return None
