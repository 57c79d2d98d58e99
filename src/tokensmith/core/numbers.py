"""Number and value stringification matching how browsers print them."""

from __future__ import annotations

import json
import math
from typing import Any


def format_number(value: int | float) -> str:
    """
    Print a number the way JavaScript would.

    Integral floats lose their ``.0`` so ``16 / 16`` prints as ``1``.

    Examples:
        >>> format_number(1.0)
        '1'
        >>> format_number(0.875)
        '0.875'
    """
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
    return repr(value)


def is_number(value: Any) -> bool:
    """True for ints and floats, but not bools."""
    return isinstance(value, int | float) and not isinstance(value, bool)


def js_string(value: Any) -> str:
    """Stringify a raw token value for CSS output."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if is_number(value):
        return format_number(value)
    if isinstance(value, str):
        return value
    if isinstance(value, list | tuple):
        return ",".join(js_string(item) for item in value)
    return json.dumps(value, separators=(",", ":"))
