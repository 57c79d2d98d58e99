"""
tokensmith - design-token build pipeline.

Turns Figma variable exports into CSS custom properties, colour utility
classes and styleguide data, one client at a time.
"""

from __future__ import annotations

from ._version import get_version
from .core import ir
from .core.errors import AliasError, ColorError, InputError, ManifestError, TokensmithError

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "TokensmithError",
    "InputError",
    "AliasError",
    "ColorError",
    "ManifestError",
]
