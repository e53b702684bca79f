"""
Primitive token type handlers: string, number and boolean.

These sit at low priority so that more specific handlers claim values first.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from tokenforge.registry.types import (
    CssConversionOptions,
    FigmaDetectionContext,
    TokenTypeHandler,
)
from tokenforge.schema.tokens import TokenType

from .dimension import format_number

# FLOAT scopes owned by the dimension and font weight handlers
_NON_NUMBER_SCOPES = frozenset(
    {
        "CORNER_RADIUS",
        "WIDTH_HEIGHT",
        "GAP",
        "STROKE_FLOAT",
        "FONT_SIZE",
        "LINE_HEIGHT",
        "LETTER_SPACING",
        "FONT_WEIGHT",
    }
)

# =============================================================================
# String Handler
# =============================================================================


def _detect_string_figma(context: FigmaDetectionContext) -> bool:
    return context.resolved_type == "STRING" and "FONT_FAMILY" not in context.scopes


def _parse_string_figma(value: Any, scopes: Sequence[str]) -> str | None:
    if value is None:
        return None
    return str(value)


def _parse_string(value: str) -> str:
    return value


def _string_to_css(value: str, options: CssConversionOptions) -> str:
    if " " in value and not value.startswith(('"', "'")):
        return f'"{value}"'
    return value


string_handler = TokenTypeHandler(
    type=TokenType.STRING,
    name="String",
    priority=10,
    detect_figma=_detect_string_figma,
    parse_figma_value=_parse_string_figma,
    parse_variable_defs_value=_parse_string,
    to_css=_string_to_css,
)

# =============================================================================
# Number Handler
# =============================================================================


def _detect_number_figma(context: FigmaDetectionContext) -> bool:
    if context.resolved_type != "FLOAT":
        return False
    return not any(scope in _NON_NUMBER_SCOPES for scope in context.scopes)


def _parse_number_figma(value: Any, scopes: Sequence[str]) -> float | None:
    if isinstance(value, bool) or not isinstance(value, int | float):
        return None
    return value


def _parse_number(value: str) -> float | None:
    try:
        return float(value.strip())
    except ValueError:
        return None


def _number_to_css(value: float, options: CssConversionOptions) -> str:
    return format_number(value)


number_handler = TokenTypeHandler(
    type=TokenType.NUMBER,
    name="Number",
    priority=20,
    detect_figma=_detect_number_figma,
    parse_figma_value=_parse_number_figma,
    parse_variable_defs_value=_parse_number,
    to_css=_number_to_css,
)

# =============================================================================
# Boolean Handler
# =============================================================================


def _detect_boolean_figma(context: FigmaDetectionContext) -> bool:
    return context.resolved_type == "BOOLEAN"


def _parse_boolean_figma(value: Any, scopes: Sequence[str]) -> bool:
    return bool(value)


def _parse_boolean(value: str) -> bool | None:
    if value == "true":
        return True
    if value == "false":
        return False
    return None


def _boolean_to_css(value: bool, options: CssConversionOptions) -> str:
    return "true" if value else "false"


boolean_handler = TokenTypeHandler(
    type=TokenType.BOOLEAN,
    name="Boolean",
    priority=50,
    detect_figma=_detect_boolean_figma,
    parse_figma_value=_parse_boolean_figma,
    parse_variable_defs_value=_parse_boolean,
    to_css=_boolean_to_css,
)
