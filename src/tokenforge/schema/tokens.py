"""
Normalized design token value types.

These frozen models are the intermediate representation between design-tool
input (native Figma variables or path/value definitions) and rendered output
(CSS custom properties, SCSS variables, Tailwind theme namespaces).
"""

from __future__ import annotations

from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Token Types
# =============================================================================


class TokenType(StrEnum):
    """Built-in token type tags.

    The registry keys handlers by plain string, so extension handlers may
    use tags that are not listed here.
    """

    COLOR = "color"
    DIMENSION = "dimension"
    FONT_FAMILY = "fontFamily"
    FONT_WEIGHT = "fontWeight"
    DURATION = "duration"
    CUBIC_BEZIER = "cubicBezier"
    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"
    # Composite types
    SHADOW = "shadow"
    BORDER = "border"
    TYPOGRAPHY = "typography"
    GRADIENT = "gradient"
    TRANSITION = "transition"


DimensionUnit = Literal["px", "rem", "em", "%", "vw", "vh"]
BorderStyle = Literal["solid", "dashed", "dotted", "double", "groove", "ridge", "inset", "outset", "none"]
GradientType = Literal["linear", "radial", "conic"]
DurationUnit = Literal["ms", "s"]

# =============================================================================
# Primitive Values
# =============================================================================


class ColorValue(BaseModel):
    """RGBA color with every channel normalized to 0-1."""

    r: float = Field(ge=0, le=1)
    g: float = Field(ge=0, le=1)
    b: float = Field(ge=0, le=1)
    a: float = Field(default=1.0, ge=0, le=1)

    model_config = ConfigDict(frozen=True)


class DimensionValue(BaseModel):
    """Dimension with explicit unit. Negative values are allowed (offsets)."""

    value: float
    unit: DimensionUnit = "px"

    model_config = ConfigDict(frozen=True)


class DurationValue(BaseModel):
    """Duration for animations and transitions."""

    value: float
    unit: DurationUnit = "ms"

    model_config = ConfigDict(frozen=True)


class CubicBezierValue(BaseModel):
    """Cubic bezier easing curve. Control points are not range-checked."""

    x1: float
    y1: float
    x2: float
    y2: float

    model_config = ConfigDict(frozen=True)


# =============================================================================
# Composite Values
# =============================================================================


class BorderValue(BaseModel):
    """Border shorthand: width, style and color."""

    width: DimensionValue
    style: BorderStyle
    color: ColorValue

    model_config = ConfigDict(frozen=True)


class GradientStop(BaseModel):
    """
    A color stop in a gradient.

    ``position`` is 0-1. It is ``None`` for an interior stop whose position
    was not written in the source; renderers then emit the color alone.
    """

    color: ColorValue
    position: float | None = Field(default=None, ge=0, le=1)

    model_config = ConfigDict(frozen=True)


class GradientValue(BaseModel):
    """Gradient definition. ``angle`` is in degrees and only used for linear gradients."""

    type: GradientType
    angle: float | None = None
    stops: list[GradientStop] = Field(min_length=1)

    model_config = ConfigDict(frozen=True)


class TransitionValue(BaseModel):
    """Transition shorthand: duration, timing function, optional delay."""

    duration: DurationValue
    timing_function: CubicBezierValue | str
    delay: DurationValue | None = None

    model_config = ConfigDict(frozen=True)


class ShadowValue(BaseModel):
    """Box shadow layer."""

    offset_x: DimensionValue
    offset_y: DimensionValue
    blur: DimensionValue
    spread: DimensionValue | None = None
    color: ColorValue
    inset: bool = False

    model_config = ConfigDict(frozen=True)


class TypographyValue(BaseModel):
    """Composite typography token."""

    font_family: list[str]
    font_size: DimensionValue
    font_weight: int = 400
    line_height: float | DimensionValue = 1.5
    letter_spacing: DimensionValue | None = None

    model_config = ConfigDict(frozen=True)


TokenValue = (
    ColorValue
    | DimensionValue
    | DurationValue
    | CubicBezierValue
    | BorderValue
    | GradientValue
    | TransitionValue
    | ShadowValue
    | list[ShadowValue]
    | TypographyValue
    | list[str]
    | str
    | int
    | float
    | bool
)
"""Any normalized token value; the variant is determined by the token's type tag."""
