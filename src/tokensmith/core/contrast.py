"""
WCAG contrast math.

Relative luminance and contrast ratio follow the WCAG 2.x definitions.
Compliance thresholds::

    AA large text    >= 3
    AA all sizes     >= 4.5
    AAA large text   >= 4.5
    AAA all sizes    >= 7
"""

from __future__ import annotations

from collections.abc import Sequence

from .errors import ColorError
from .ir import ContrastPair, NamedColor, WcagCompliance

AA_LARGE = 3.0
AA_ALL = 4.5
AAA_LARGE = 4.5
AAA_ALL = 7.0

_LUMINANCE_WEIGHTS = (0.2126, 0.7152, 0.0722)


def parse_hex(hex_color: str) -> tuple[float, float, float]:
    """
    Split a hex colour into R, G, B channels in [0, 1].

    The ``#`` is optional, 3-digit shorthand is expanded and an alpha byte
    is ignored.

    Raises:
        ColorError: If the value is not a hex colour.
    """
    digits = hex_color.strip().removeprefix("#")
    if len(digits) in (3, 4):
        digits = "".join(ch * 2 for ch in digits[:3])
    if len(digits) not in (6, 8):
        raise ColorError(f"Not a hex colour: {hex_color!r}")
    try:
        return tuple(int(digits[i : i + 2], 16) / 255 for i in (0, 2, 4))  # type: ignore[return-value]
    except ValueError:
        raise ColorError(f"Not a hex colour: {hex_color!r}") from None


def _linearize(channel: float) -> float:
    if channel <= 0.03928:
        return channel / 12.92
    return ((channel + 0.055) / 1.055) ** 2.4


def relative_luminance(hex_color: str) -> float:
    """Relative luminance in [0, 1]; black is 0 and white is 1."""
    channels = parse_hex(hex_color)
    return sum(w * _linearize(c) for w, c in zip(_LUMINANCE_WEIGHTS, channels, strict=True))


def contrast_ratio(hex_a: str, hex_b: str) -> float:
    """
    Contrast ratio between two colours, from 1 to 21.

    Symmetric: the lighter colour is always the numerator.
    """
    lum_a = relative_luminance(hex_a)
    lum_b = relative_luminance(hex_b)
    lighter = max(lum_a, lum_b)
    darker = min(lum_a, lum_b)
    return (lighter + 0.05) / (darker + 0.05)


def wcag_compliance(ratio: float) -> WcagCompliance:
    return WcagCompliance(
        aa_large=ratio >= AA_LARGE,
        aa_all=ratio >= AA_ALL,
        aaa_large=ratio >= AAA_LARGE,
        aaa_all=ratio >= AAA_ALL,
    )


def compliance_label(wcag: WcagCompliance) -> str:
    """Short description of the highest level passed, or empty string."""
    if wcag.aaa_all:
        return "AAA ✓ All sizes"
    if wcag.aaa_large:
        return "AA ✓ | AAA ✓ Large"
    if wcag.aa_all:
        return "AA ✓ All sizes"
    if wcag.aa_large:
        return "AA ✓ Large"
    return ""


def contrast_combinations(colors: Sequence[NamedColor]) -> list[ContrastPair]:
    """
    Every readable foreground/background pairing of ``colors``.

    Pairs are directional, so (A on B) and (B on A) are both listed. Only
    pairs passing AA large are kept, sorted by ratio from highest to
    lowest; equal ratios keep input order.
    """
    pairs: list[ContrastPair] = []
    for i, foreground in enumerate(colors):
        for j, background in enumerate(colors):
            if i == j:
                continue
            ratio = contrast_ratio(foreground.value, background.value)
            wcag = wcag_compliance(ratio)
            if not wcag.aa_large:
                continue
            pairs.append(
                ContrastPair(
                    foreground=foreground,
                    background=background,
                    ratio=ratio,
                    wcag=wcag,
                    label=compliance_label(wcag),
                )
            )
    return sorted(pairs, key=lambda pair: pair.ratio, reverse=True)
