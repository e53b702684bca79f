"""Normalized token value schema."""

from .tokens import (
    BorderValue,
    ColorValue,
    CubicBezierValue,
    DimensionValue,
    DurationValue,
    GradientStop,
    GradientValue,
    ShadowValue,
    TokenType,
    TokenValue,
    TransitionValue,
    TypographyValue,
)

__all__ = [
    "TokenType",
    "TokenValue",
    "ColorValue",
    "DimensionValue",
    "DurationValue",
    "CubicBezierValue",
    "BorderValue",
    "GradientStop",
    "GradientValue",
    "TransitionValue",
    "ShadowValue",
    "TypographyValue",
]
