"""
Styleguide data read back from a generated variables stylesheet.

A client styleguide page shows colour swatches, a typography spec table
and every readable colour combination. All of it is derived from the
custom properties in ``variables-<client>.css``, so this module works on
the stylesheet text rather than on the token tree: what the page shows is
exactly what the browser will see.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from .contrast import contrast_combinations
from .ir import NamedColor, StyleguideReport, TypographySpec

logger = logging.getLogger(__name__)

ROOT_BLOCK_RE = re.compile(r":root\s*\{([^}]*)\}")
VAR_RE = re.compile(r"(?<![\w-])(?P<name>--[\w-]+)\s*:\s*(?P<value>[^;]+)")
COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)
HEX_VALUE_RE = re.compile(r"^#(?:[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")

MISSING = "--"
BREAKPOINTS: tuple[str, ...] = ("mobile", "tablet", "desktop")

# Name parts left out of swatch display names
_HIDDEN_NAME_PARTS = frozenset({"brand", "color"})


@dataclass(frozen=True)
class TypographyElement:
    """A text element shown in the typography spec table."""

    element: str
    label: str
    is_heading: bool


TYPOGRAPHY_ELEMENTS: tuple[TypographyElement, ...] = (
    TypographyElement("h1", "Heading 1", True),
    TypographyElement("h2", "Heading 2", True),
    TypographyElement("h3", "Heading 3", True),
    TypographyElement("h4", "Heading 4", True),
    TypographyElement("p--base", "Paragraph (Regular)", False),
    TypographyElement("p--large", "Paragraph (Large)", False),
    TypographyElement("p--small", "Paragraph (Small)", False),
)


def read_root_variables(css: str) -> dict[str, str]:
    """
    Custom properties declared inside ``:root`` rules, in order.

    Layout does not matter: minified rules and several declarations per
    line are read the same way. Later declarations of the same property
    win, as in the cascade.
    """
    variables: dict[str, str] = {}
    for block in ROOT_BLOCK_RE.findall(COMMENT_RE.sub("", css)):
        for match in VAR_RE.finditer(block):
            value = match.group("value").strip()
            if value:
                variables[match.group("name")] = value
    return variables


def human_name(var_name: str) -> str:
    """
    Display name for a variable.

    Examples:
        >>> human_name("--brand--dark-blue")
        'Dark-blue'
        >>> human_name("--gray--100")
        'Gray 100'
    """
    parts = var_name.removeprefix("--").split("--")
    visible = [p for p in parts if p.lower() not in _HIDDEN_NAME_PARTS]
    return " ".join(p[:1].upper() + p[1:] for p in visible)


def color_variables(variables: Mapping[str, str], pattern: str) -> list[NamedColor]:
    """Hex-valued variables whose name contains ``pattern``; aliases are skipped."""
    return [
        NamedColor(name=name, value=value, human_name=human_name(name))
        for name, value in variables.items()
        if pattern in name and HEX_VALUE_RE.match(value)
    ]


def lookup_first(
    variables: Mapping[str, str], keys: Sequence[str], default: str = MISSING
) -> str:
    """Value of the first key present in ``variables``."""
    for key in keys:
        value = variables.get(key)
        if value:
            return value
    return default


def typography_fallbacks(element: TypographyElement) -> dict[str, tuple[str, ...]]:
    """
    Ordered lookup keys for each typography property of ``element``.

    Element-specific variables come first, then the global heading or body
    default.
    """
    name = element.element
    if element.is_heading:
        return {
            "weight": (f"--font-weight--{name}", "--font-weight--headings"),
            "letter_spacing": (f"--letter-spacing--{name}", "--letter-spacing--headings"),
            "line_height": ("--line-height--headings",),
        }
    return {
        "weight": (f"--font-weight--{name}", "--font-weight--body"),
        "letter_spacing": (f"--letter-spacing--{name}", "--letter-spacing--p"),
        "line_height": ("--line-height--p", "--line-height--base"),
    }


TYPOGRAPHY_FALLBACKS: dict[str, dict[str, tuple[str, ...]]] = {
    element.element: typography_fallbacks(element) for element in TYPOGRAPHY_ELEMENTS
}


def typography_specs(variables: Mapping[str, str]) -> list[TypographySpec]:
    specs: list[TypographySpec] = []
    for element in TYPOGRAPHY_ELEMENTS:
        fallbacks = TYPOGRAPHY_FALLBACKS[element.element]
        sizes = {
            bp: lookup_first(variables, (f"--font-size--{element.element}--{bp}",))
            for bp in BREAKPOINTS
        }
        specs.append(
            TypographySpec(
                element=element.element,
                label=element.label,
                is_heading=element.is_heading,
                sizes=sizes,
                weight=lookup_first(variables, fallbacks["weight"]),
                letter_spacing=lookup_first(variables, fallbacks["letter_spacing"]),
                line_height=lookup_first(variables, fallbacks["line_height"]),
            )
        )
    return specs


def build_styleguide_report(css: str, client: str | None = None) -> StyleguideReport:
    """Swatches, typography table and brand contrast pairs for one stylesheet."""
    variables = read_root_variables(css)
    brand = color_variables(variables, "brand")
    report = StyleguideReport(
        client=client,
        brand=brand,
        gray=color_variables(variables, "gray"),
        typography=typography_specs(variables),
        contrast=contrast_combinations(brand),
    )
    logger.debug(
        "Styleguide %s: %d brand, %d gray, %d contrast pairs",
        client or "-",
        len(report.brand),
        len(report.gray),
        len(report.contrast),
    )
    return report
