"""
Color token type handler.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from pydantic import ValidationError

from tokenforge.colors import (
    color_to_hex,
    color_to_hsl,
    color_to_oklch,
    color_to_rgb,
    parse_hex_color,
)
from tokenforge.registry.types import (
    CssConversionOptions,
    FigmaDetectionContext,
    ScssConversionOptions,
    TailwindNamespace,
    TokenTypeHandler,
    VariableDefsContext,
)
from tokenforge.schema.tokens import ColorValue, TokenType

logger = logging.getLogger(__name__)

# Path keywords that relax the value check to "starts with #"
_COLOR_PATH_HINTS = ("color", "foundation")


def _detect_figma(context: FigmaDetectionContext) -> bool:
    return context.resolved_type == "COLOR"


def _detect_variable_defs(context: VariableDefsContext) -> bool:
    lower_path = context.path.lower()
    if any(hint in lower_path for hint in _COLOR_PATH_HINTS):
        return context.value.startswith("#")
    return context.value.startswith("#") and "gradient" not in context.value


def _parse_figma_value(value: Any, scopes: Sequence[str]) -> ColorValue | None:
    if isinstance(value, ColorValue):
        return value
    try:
        return ColorValue.model_validate(value)
    except ValidationError:
        logger.debug("Rejected Figma color value %r", value)
        return None


def _parse_variable_defs_value(value: str) -> ColorValue | None:
    if not value.startswith("#"):
        return None
    try:
        return parse_hex_color(value)
    except ValueError:
        logger.debug("Rejected hex color %r", value)
        return None


def _to_css(value: ColorValue, options: CssConversionOptions) -> str:
    if options.color_format == "rgb":
        return color_to_rgb(value)
    if options.color_format == "oklch":
        return color_to_oklch(value)
    return color_to_hex(value)


def _to_scss(value: ColorValue, options: ScssConversionOptions) -> str:
    if options.color_format == "rgb":
        return color_to_rgb(value)
    if options.color_format == "hsl":
        return color_to_hsl(value)
    return color_to_hex(value)


def _get_namespace(path: Sequence[str]) -> TailwindNamespace | None:
    hint = path[0].lower() if path else None
    if hint in ("colors", "color"):
        return TailwindNamespace.COLOR
    return None


color_handler = TokenTypeHandler(
    type=TokenType.COLOR,
    name="Color",
    priority=100,
    default_namespace=TailwindNamespace.COLOR,
    detect_figma=_detect_figma,
    detect_variable_defs=_detect_variable_defs,
    parse_figma_value=_parse_figma_value,
    parse_variable_defs_value=_parse_variable_defs_value,
    to_css=_to_css,
    to_scss=_to_scss,
    get_namespace=_get_namespace,
)
