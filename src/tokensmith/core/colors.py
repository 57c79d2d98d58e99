"""
Colour literal normalization.

Colour tokens are emitted as lowercase 6-digit hex, the way the Style
Dictionary ``color/hex`` transform (tinycolor's ``toHexString``) prints
them: alpha is dropped, and ``rgb()``, ``hsl()`` and CSS named colours are
converted. The styleguide read-back only recognises hex literals.

Strings tinycolor would reject are left unchanged and logged rather than
turned into black.
"""

from __future__ import annotations

import colorsys
import logging
import re
from collections.abc import Sequence

from .ir import Token, TokenType
from .references import is_alias

logger = logging.getLogger(__name__)

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
_NUM = r"[-+]?(?:\d+\.?\d*|\.\d+)"
_SEP = r"\s*[,\s]\s*"
_ALPHA = rf"(?:\s*[,/]\s*{_NUM}%?)?"
_RGB_RE = re.compile(
    rf"^rgba?\(\s*(?P<r>{_NUM})(?P<rp>%)?{_SEP}(?P<g>{_NUM})(?P<gp>%)?{_SEP}"
    rf"(?P<b>{_NUM})(?P<bp>%)?{_ALPHA}\s*\)$",
    re.IGNORECASE,
)
_HSL_RE = re.compile(
    rf"^hsla?\(\s*(?P<h>{_NUM})(?:deg)?{_SEP}(?P<s>{_NUM})(?P<sp>%)?{_SEP}"
    rf"(?P<l>{_NUM})(?P<lp>%)?{_ALPHA}\s*\)$",
    re.IGNORECASE,
)

# CSS Color Module Level 4 named colours
NAMED_COLORS: dict[str, str] = {
    "aliceblue": "f0f8ff", "antiquewhite": "faebd7", "aqua": "00ffff",
    "aquamarine": "7fffd4", "azure": "f0ffff", "beige": "f5f5dc", "bisque": "ffe4c4",
    "black": "000000", "blanchedalmond": "ffebcd", "blue": "0000ff",
    "blueviolet": "8a2be2", "brown": "a52a2a", "burlywood": "deb887",
    "cadetblue": "5f9ea0", "chartreuse": "7fff00", "chocolate": "d2691e",
    "coral": "ff7f50", "cornflowerblue": "6495ed", "cornsilk": "fff8dc",
    "crimson": "dc143c", "cyan": "00ffff", "darkblue": "00008b", "darkcyan": "008b8b",
    "darkgoldenrod": "b8860b", "darkgray": "a9a9a9", "darkgreen": "006400",
    "darkgrey": "a9a9a9", "darkkhaki": "bdb76b", "darkmagenta": "8b008b",
    "darkolivegreen": "556b2f", "darkorange": "ff8c00", "darkorchid": "9932cc",
    "darkred": "8b0000", "darksalmon": "e9967a", "darkseagreen": "8fbc8f",
    "darkslateblue": "483d8b", "darkslategray": "2f4f4f", "darkslategrey": "2f4f4f",
    "darkturquoise": "00ced1", "darkviolet": "9400d3", "deeppink": "ff1493",
    "deepskyblue": "00bfff", "dimgray": "696969", "dimgrey": "696969",
    "dodgerblue": "1e90ff", "firebrick": "b22222", "floralwhite": "fffaf0",
    "forestgreen": "228b22", "fuchsia": "ff00ff", "gainsboro": "dcdcdc",
    "ghostwhite": "f8f8ff", "gold": "ffd700", "goldenrod": "daa520", "gray": "808080",
    "green": "008000", "greenyellow": "adff2f", "grey": "808080", "honeydew": "f0fff0",
    "hotpink": "ff69b4", "indianred": "cd5c5c", "indigo": "4b0082", "ivory": "fffff0",
    "khaki": "f0e68c", "lavender": "e6e6fa", "lavenderblush": "fff0f5",
    "lawngreen": "7cfc00", "lemonchiffon": "fffacd", "lightblue": "add8e6",
    "lightcoral": "f08080", "lightcyan": "e0ffff", "lightgoldenrodyellow": "fafad2",
    "lightgray": "d3d3d3", "lightgreen": "90ee90", "lightgrey": "d3d3d3",
    "lightpink": "ffb6c1", "lightsalmon": "ffa07a", "lightseagreen": "20b2aa",
    "lightskyblue": "87cefa", "lightslategray": "778899", "lightslategrey": "778899",
    "lightsteelblue": "b0c4de", "lightyellow": "ffffe0", "lime": "00ff00",
    "limegreen": "32cd32", "linen": "faf0e6", "magenta": "ff00ff", "maroon": "800000",
    "mediumaquamarine": "66cdaa", "mediumblue": "0000cd", "mediumorchid": "ba55d3",
    "mediumpurple": "9370db", "mediumseagreen": "3cb371", "mediumslateblue": "7b68ee",
    "mediumspringgreen": "00fa9a", "mediumturquoise": "48d1cc",
    "mediumvioletred": "c71585", "midnightblue": "191970", "mintcream": "f5fffa",
    "mistyrose": "ffe4e1", "moccasin": "ffe4b5", "navajowhite": "ffdead",
    "navy": "000080", "oldlace": "fdf5e6", "olive": "808000", "olivedrab": "6b8e23",
    "orange": "ffa500", "orangered": "ff4500", "orchid": "da70d6",
    "palegoldenrod": "eee8aa", "palegreen": "98fb98", "paleturquoise": "afeeee",
    "palevioletred": "db7093", "papayawhip": "ffefd5", "peachpuff": "ffdab9",
    "peru": "cd853f", "pink": "ffc0cb", "plum": "dda0dd", "powderblue": "b0e0e6",
    "purple": "800080", "rebeccapurple": "663399", "red": "ff0000",
    "rosybrown": "bc8f8f", "royalblue": "4169e1", "saddlebrown": "8b4513",
    "salmon": "fa8072", "sandybrown": "f4a460", "seagreen": "2e8b57",
    "seashell": "fff5ee", "sienna": "a0522d", "silver": "c0c0c0", "skyblue": "87ceeb",
    "slateblue": "6a5acd", "slategray": "708090", "slategrey": "708090",
    "snow": "fffafa", "springgreen": "00ff7f", "steelblue": "4682b4", "tan": "d2b48c",
    "teal": "008080", "thistle": "d8bfd8", "tomato": "ff6347", "transparent": "000000",
    "turquoise": "40e0d0", "violet": "ee82ee", "wheat": "f5deb3", "white": "ffffff",
    "whitesmoke": "f5f5f5", "yellow": "ffff00", "yellowgreen": "9acd32",
}  # fmt: skip


def _byte(value: float) -> str:
    # Math.round: halves go up
    return f"{int(max(0.0, min(255.0, value)) + 0.5):02x}"


def _fraction(value: str, percent: bool) -> float:
    """0..1 from ``50%``, ``0.5`` or ``50`` (numbers above 1 are percentages)."""
    number = float(value)
    if percent or number > 1:
        number /= 100
    return max(0.0, min(1.0, number))


def _channel(value: str, percent: bool) -> float:
    return float(value) * 255 / 100 if percent else float(value)


def to_hex(value: str) -> str:
    """
    Normalize a colour literal to lowercase ``#rrggbb``.

    Examples:
        >>> to_hex("#FFF")
        '#ffffff'
        >>> to_hex("rgba(47, 48, 94, 0.5)")
        '#2f305e'
        >>> to_hex("hsl(0, 100%, 50%)")
        '#ff0000'
        >>> to_hex("Red")
        '#ff0000'
    """
    text = value.strip()
    match = _HEX_RE.match(text)
    if match:
        digits = match.group(1).lower()
        if len(digits) in (3, 4):
            digits = "".join(ch * 2 for ch in digits[:3])
        return f"#{digits[:6]}"

    match = _RGB_RE.match(text)
    if match:
        return "#" + "".join(
            _byte(_channel(match.group(c), bool(match.group(f"{c}p")))) for c in "rgb"
        )

    match = _HSL_RE.match(text)
    if match:
        hue = (float(match.group("h")) % 360) / 360
        saturation = _fraction(match.group("s"), bool(match.group("sp")))
        lightness = _fraction(match.group("l"), bool(match.group("lp")))
        rgb = colorsys.hls_to_rgb(hue, lightness, saturation)
        return "#" + "".join(_byte(c * 255) for c in rgb)

    named = NAMED_COLORS.get(text.lower())
    if named is not None:
        return f"#{named}"

    logger.warning("Leaving unrecognised colour %r unchanged", value)
    return value


def normalize_colors(tokens: Sequence[Token]) -> list[Token]:
    """Apply :func:`to_hex` to literal colour tokens; aliases are untouched."""
    normalized: list[Token] = []
    for token in tokens:
        if (
            token.type == TokenType.COLOR
            and isinstance(token.value, str)
            and not is_alias(token.raw_value)
        ):
            hex_value = to_hex(token.value)
            if hex_value != token.value:
                token = token.model_copy(update={"value": hex_value})
        normalized.append(token)
    return normalized
