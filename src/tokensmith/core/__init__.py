"""Core tokensmith functionality: IR, normalization, formatting, serialization, contrast."""

from . import ir
from .contrast import contrast_combinations, contrast_ratio, relative_luminance, wcag_compliance
from .errors import (
    AliasError,
    ColorError,
    InputError,
    ManifestError,
    TokenContext,
    TokensmithError,
)
from .formatter import TokenFormatter, format_token, format_value, variable_name
from .normalizer import add_unit_metadata, filter_text_styles, flatten, normalize
from .pipeline import PipelineConfig, TokenPipeline
from .references import resolve_references
from .serializer import CssVariablesSerializer, serialize
from .units import UNIT_RULES, UnitRule, classify_unit
from .utilities import emit_utilities

__all__ = [
    "ir",
    "TokensmithError",
    "InputError",
    "AliasError",
    "ColorError",
    "ManifestError",
    "TokenContext",
    "UNIT_RULES",
    "UnitRule",
    "classify_unit",
    "normalize",
    "filter_text_styles",
    "add_unit_metadata",
    "flatten",
    "resolve_references",
    "TokenFormatter",
    "format_token",
    "format_value",
    "variable_name",
    "CssVariablesSerializer",
    "serialize",
    "emit_utilities",
    "relative_luminance",
    "contrast_ratio",
    "wcag_compliance",
    "contrast_combinations",
    "PipelineConfig",
    "TokenPipeline",
]
