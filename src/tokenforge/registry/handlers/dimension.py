"""
Dimension token type handler (spacing, radius, sizes).

Also hosts the number/dimension formatting shared by composite handlers.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Any

from tokenforge.registry.types import (
    CssConversionOptions,
    FigmaDetectionContext,
    TailwindNamespace,
    TokenTypeHandler,
    VariableDefsContext,
)
from tokenforge.schema.tokens import DimensionValue, TokenType

# Figma scopes that indicate a dimension
DIMENSION_SCOPES = frozenset(
    {
        "CORNER_RADIUS",
        "WIDTH_HEIGHT",
        "GAP",
        "STROKE_FLOAT",
        "FONT_SIZE",
        "LINE_HEIGHT",
        "LETTER_SPACING",
        "PARAGRAPH_SPACING",
        "PARAGRAPH_INDENT",
    }
)

_DIMENSION_PATH_HINTS = ("spacing", "radius", "gap", "size", "width", "height")
_DIMENSION_RE = re.compile(r"^(-?\d+(?:\.\d+)?)(px|rem|em)?$")


def format_number(value: float) -> str:
    """Shortest decimal form: integral floats lose their trailing ``.0``."""
    if isinstance(value, bool):
        return str(value).lower()
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return repr(number)


def dimension_to_css(dim: DimensionValue) -> str:
    return f"{format_number(dim.value)}{dim.unit}"


def px_to_rem(px: float, base_font_size: float = 16) -> str:
    return f"{format_number(px / base_font_size)}rem"


def _detect_figma(context: FigmaDetectionContext) -> bool:
    if context.resolved_type != "FLOAT":
        return False
    return any(scope in DIMENSION_SCOPES for scope in context.scopes)


def _detect_variable_defs(context: VariableDefsContext) -> bool:
    lower_path = context.path.lower()
    if any(hint in lower_path for hint in _DIMENSION_PATH_HINTS):
        return True
    return _DIMENSION_RE.match(context.value) is not None


def _parse_figma_value(value: Any, scopes: Sequence[str]) -> DimensionValue | None:
    # Figma FLOAT variables are unitless pixels
    if isinstance(value, bool) or not isinstance(value, int | float):
        return None
    return DimensionValue(value=value, unit="px")


def _parse_variable_defs_value(value: str) -> DimensionValue | None:
    match = _DIMENSION_RE.match(value.strip())
    if not match:
        return None
    return DimensionValue(value=float(match.group(1)), unit=match.group(2) or "px")


def _to_css(value: DimensionValue, options: CssConversionOptions) -> str:
    return dimension_to_css(value)


def _get_namespace(path: Sequence[str]) -> TailwindNamespace | None:
    hint = path[0].lower() if path else None

    if hint in ("spacing", "space"):
        return TailwindNamespace.SPACING
    if hint in ("radius", "border-radius", "radii"):
        return TailwindNamespace.RADIUS
    if hint in ("font", "typography"):
        segments = [p.lower() for p in path]
        if any("size" in p for p in segments):
            return TailwindNamespace.FONT_SIZE
        if any("height" in p or "leading" in p for p in segments):
            return TailwindNamespace.LINE_HEIGHT
        if any("spacing" in p or "tracking" in p for p in segments):
            return TailwindNamespace.LETTER_SPACING

    return None


dimension_handler = TokenTypeHandler(
    type=TokenType.DIMENSION,
    name="Dimension",
    priority=80,
    default_namespace=TailwindNamespace.SPACING,
    detect_figma=_detect_figma,
    detect_variable_defs=_detect_variable_defs,
    parse_figma_value=_parse_figma_value,
    parse_variable_defs_value=_parse_variable_defs_value,
    to_css=_to_css,
    get_namespace=_get_namespace,
)
