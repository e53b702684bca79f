"""
Token type registry types.

A handler is a plain record of functions for one token type: detection from
either source shape, parsing from either source shape, CSS/SCSS rendering,
and Tailwind namespace resolution. New token types are added by building a
new ``TokenTypeHandler`` and registering it; nothing else changes.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from tokenforge.errors import InvalidHandlerError
from tokenforge.schema.tokens import TokenValue

# =============================================================================
# Tailwind Namespaces
# =============================================================================


class TailwindNamespace(StrEnum):
    """Tailwind theme namespaces a token can be classified into."""

    COLOR = "color"
    SPACING = "spacing"
    FONT_FAMILY = "font-family"
    FONT_SIZE = "font-size"
    FONT_WEIGHT = "font-weight"
    LINE_HEIGHT = "line-height"
    LETTER_SPACING = "letter-spacing"
    RADIUS = "radius"
    SHADOW = "shadow"
    OPACITY = "opacity"
    TRANSITION_DURATION = "transition-duration"
    TRANSITION_TIMING_FUNCTION = "transition-timing-function"
    Z_INDEX = "z-index"
    BORDER = "border"
    GRADIENT = "gradient"
    ANIMATION = "animation"
    BLUR = "blur"


# =============================================================================
# Detection Contexts
# =============================================================================


class FigmaDetectionContext(BaseModel):
    """
    Detection hints for a native Figma variable.

    Example:
        FigmaDetectionContext(
            resolved_type="FLOAT",
            scopes=["CORNER_RADIUS"],
            name="radius/md",
        )
    """

    resolved_type: str = Field(description="Figma resolved type (COLOR, FLOAT, STRING, BOOLEAN)")
    scopes: list[str] = Field(default_factory=list, description="Figma variable scopes")
    name: str | None = Field(default=None, description="Variable name, for path-based hints")

    model_config = ConfigDict(frozen=True)


class VariableDefsContext(BaseModel):
    """
    Detection hints for a path/value variable definition.

    Example:
        VariableDefsContext(path="Color/Primary/500", value="#3b82f6")
    """

    path: str = Field(description="Full variable path")
    value: str = Field(description="Raw string value")

    model_config = ConfigDict(frozen=True)


# =============================================================================
# Conversion Options
# =============================================================================


class CssConversionOptions(BaseModel):
    """Options for CSS rendering. Unknown keys are ignored."""

    color_format: Literal["hex", "rgb", "oklch"] = "hex"
    prefix: str | None = Field(default=None, description="Variable prefix (consumed by renderers, not handlers)")

    model_config = ConfigDict(frozen=True, extra="ignore")


class ScssConversionOptions(BaseModel):
    """Options for SCSS rendering. Unknown keys are ignored."""

    color_format: Literal["hex", "rgb", "hsl"] = "hex"
    prefix: str | None = Field(default=None, description="Variable prefix (consumed by renderers, not handlers)")

    model_config = ConfigDict(frozen=True, extra="ignore")


# =============================================================================
# Handler Record
# =============================================================================

FigmaDetector = Callable[[FigmaDetectionContext], bool]
VariableDefsDetector = Callable[[VariableDefsContext], bool]
FigmaParser = Callable[[Any, Sequence[str]], TokenValue | None]
VariableDefsParser = Callable[[str], TokenValue | None]
CssRenderer = Callable[[Any, CssConversionOptions], str]
ScssRenderer = Callable[[Any, ScssConversionOptions], str]
NamespaceResolver = Callable[[Sequence[str]], TailwindNamespace | None]


@dataclass(frozen=True)
class TokenTypeHandler:
    """
    Detection, parsing and rendering functions for one token type.

    ``to_css`` is the only required capability. Parsers return ``None`` for
    input they cannot read. ``priority`` orders detection (higher first).
    """

    type: str
    name: str
    to_css: CssRenderer
    priority: int = 0
    detect_figma: FigmaDetector | None = None
    detect_variable_defs: VariableDefsDetector | None = None
    parse_figma_value: FigmaParser | None = None
    parse_variable_defs_value: VariableDefsParser | None = None
    to_scss: ScssRenderer | None = None
    get_namespace: NamespaceResolver | None = None
    default_namespace: TailwindNamespace | None = None

    def __post_init__(self) -> None:
        if not self.type:
            raise InvalidHandlerError(f"Handler '{self.name}' has an empty type tag")
        if not callable(self.to_css):
            raise InvalidHandlerError(f"Handler for '{self.type}' must provide a callable to_css")
