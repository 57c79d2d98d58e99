"""
IR types for the token pipeline.

A token tree is a tagged union: every node is either a ``TokenGroup``
(a mapping of child nodes) or a ``TokenLeaf`` wrapping a ``Token``. The
decision is taken once, when the raw export is ingested
(see ``tokensmith.core.normalizer.build_tree``); later stages match on
``kind`` instead of re-inspecting raw dictionaries.
"""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Enums
# =============================================================================


class Unit(StrEnum):
    """Physical unit categories a dimension token can be emitted in."""

    NONE = ""
    PX = "px"
    EM = "em"
    REM = "rem"


class TokenType(StrEnum):
    """Token kinds with dedicated formatting. Other kinds pass through."""

    COLOR = "color"
    DIMENSION = "dimension"
    STRING = "string"


# =============================================================================
# Token tree
# =============================================================================


class Token(BaseModel):
    """
    A single design value.

    Example:
        Token(
            path=("primitives", "spacing", "spacing-lg"),
            type="dimension",
            value=24,
            unit="rem",
        )
    """

    model_config = ConfigDict(frozen=True)

    path: tuple[str, ...] = Field(description="Segments from the tree root to this token")
    type: str = Field(description="Semantic kind (color, dimension, string, ...)")
    value: Any = Field(default=None, description="Resolved value")
    original_value: Any = Field(
        default=None,
        description="Raw value before reference resolution (None if never resolved)",
    )
    unit: str | None = Field(default=None, description="Unit metadata; None means rem")
    attributes: dict[str, Any] = Field(
        default_factory=dict, description="Other raw fields, kept verbatim"
    )

    @property
    def dotted_path(self) -> str:
        return ".".join(self.path)

    @property
    def raw_value(self) -> Any:
        """The value as authored: the original if resolution replaced it."""
        if self.original_value is not None:
            return self.original_value
        return self.value


class TokenLeaf(BaseModel):
    """Tree node holding a token."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["leaf"] = "leaf"
    token: Token


class TokenGroup(BaseModel):
    """Tree node holding further groups or leaves, in declaration order."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["group"] = "group"
    children: dict[str, TokenGroup | TokenLeaf] = Field(default_factory=dict)


# =============================================================================
# Serialization layout
# =============================================================================


class Namespace(BaseModel):
    """
    One output bucket of the variables stylesheet.

    ``key`` is matched against ``path[0]``; ``None`` marks the catch-all
    bucket that receives every token no other namespace claimed.
    """

    model_config = ConfigDict(frozen=True)

    key: str | None
    title: str


DEFAULT_NAMESPACES: tuple[Namespace, ...] = (
    Namespace(key="primitives", title="PRIMITIVES"),
    Namespace(key="typography", title="TYPOGRAPHY"),
    Namespace(key="blocks", title="BLOCKS"),
    Namespace(key=None, title="UTILITY TOKENS"),
)

# Path segments that never appear in variable or class names
NAMESPACE_SEGMENTS: frozenset[str] = frozenset({"primitives", "typography", "blocks", "color"})


# =============================================================================
# Contrast / styleguide
# =============================================================================


class WcagCompliance(BaseModel):
    """Pass/fail flags for the four WCAG text contrast levels."""

    model_config = ConfigDict(frozen=True)

    aa_large: bool
    aa_all: bool
    aaa_large: bool
    aaa_all: bool


class NamedColor(BaseModel):
    """A colour variable read back from generated CSS."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="CSS custom property, e.g. --brand--500")
    value: str = Field(description="Hex colour literal")
    human_name: str = Field(default="", description="Display name, e.g. 500")


class ContrastPair(BaseModel):
    """A directional foreground-on-background combination."""

    model_config = ConfigDict(frozen=True)

    foreground: NamedColor
    background: NamedColor
    ratio: float
    wcag: WcagCompliance
    label: str = ""


class TypographySpec(BaseModel):
    """Spec table row for one text element."""

    model_config = ConfigDict(frozen=True)

    element: str
    label: str
    is_heading: bool
    sizes: dict[str, str] = Field(default_factory=dict, description="Breakpoint -> size")
    weight: str = "--"
    letter_spacing: str = "--"
    line_height: str = "--"


class StyleguideReport(BaseModel):
    """Everything a client styleguide page renders from the variables."""

    client: str | None = None
    brand: list[NamedColor] = Field(default_factory=list)
    gray: list[NamedColor] = Field(default_factory=list)
    typography: list[TypographySpec] = Field(default_factory=list)
    contrast: list[ContrastPair] = Field(default_factory=list)


# =============================================================================
# Build results
# =============================================================================


class ClientBuildResult(BaseModel):
    """Outcome of one client's build."""

    client: str
    success: bool
    token_count: int = 0
    artifacts: list[Path] = Field(default_factory=list)
    error: str | None = None


TokenGroup.model_rebuild()
