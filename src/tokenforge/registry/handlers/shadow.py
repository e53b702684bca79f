"""
Shadow token type handler.

Parses Figma effect strings such as::

    Effect(type: DROP_SHADOW, color: #1D293D05, offset: (0, 1), radius: 0.5, spread: 0.05)
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from tokenforge.colors import color_to_rgb, parse_hex_color
from tokenforge.registry.types import (
    CssConversionOptions,
    TailwindNamespace,
    TokenTypeHandler,
    VariableDefsContext,
)
from tokenforge.schema.tokens import ColorValue, DimensionValue, ShadowValue, TokenType

from .dimension import dimension_to_css

logger = logging.getLogger(__name__)

_EFFECT_RE = re.compile(r"^Effect\((.*)\)$")
_TYPE_RE = re.compile(r"type:\s*(\w+)")
_COLOR_RE = re.compile(r"color:\s*(#[A-Fa-f0-9]+)")
_OFFSET_RE = re.compile(r"offset:\s*\(([^)]+)\)")
_RADIUS_RE = re.compile(r"radius:\s*([\d.]+)")
_SPREAD_RE = re.compile(r"spread:\s*(-?[\d.]+)")

_DEFAULT_SHADOW_COLOR = ColorValue(r=0, g=0, b=0, a=0.1)


def _px(value: float) -> DimensionValue:
    return DimensionValue(value=value, unit="px")


def _float_or_zero(text: str) -> float:
    try:
        return float(text.strip())
    except ValueError:
        return 0.0


def parse_effect_string(value: str) -> ShadowValue | None:
    """Parse an ``Effect(...)`` string. Returns None for anything else."""
    match = _EFFECT_RE.match(value.strip())
    if not match:
        return None
    content = match.group(1)

    type_match = _TYPE_RE.search(content)
    inset = type_match is not None and type_match.group(1) == "INNER_SHADOW"

    color = _DEFAULT_SHADOW_COLOR
    color_match = _COLOR_RE.search(content)
    if color_match:
        try:
            color = parse_hex_color(color_match.group(1))
        except ValueError:
            logger.debug("Kept default shadow color; cannot read %r", color_match.group(1))

    offset_x = offset_y = 0.0
    offset_match = _OFFSET_RE.search(content)
    if offset_match:
        parts = [_float_or_zero(p) for p in offset_match.group(1).split(",")]
        offset_x = parts[0] if parts else 0.0
        offset_y = parts[1] if len(parts) > 1 else 0.0

    radius_match = _RADIUS_RE.search(content)
    blur = _float_or_zero(radius_match.group(1)) if radius_match else 0.0

    spread_match = _SPREAD_RE.search(content)

    return ShadowValue(
        offset_x=_px(offset_x),
        offset_y=_px(offset_y),
        blur=_px(blur),
        spread=_px(_float_or_zero(spread_match.group(1))) if spread_match else None,
        color=color,
        inset=inset,
    )


def shadow_to_css(shadow: ShadowValue) -> str:
    parts: list[str] = []
    if shadow.inset:
        parts.append("inset")
    parts.append(dimension_to_css(shadow.offset_x))
    parts.append(dimension_to_css(shadow.offset_y))
    parts.append(dimension_to_css(shadow.blur))
    if shadow.spread is not None:
        parts.append(dimension_to_css(shadow.spread))
    parts.append(color_to_rgb(shadow.color))
    return " ".join(parts)


def _detect_variable_defs(context: VariableDefsContext) -> bool:
    lower_path = context.path.lower()
    if "shadow" in lower_path or "elevation" in lower_path:
        return True
    return context.value.startswith("Effect(")


def _parse_variable_defs_value(value: str) -> ShadowValue | None:
    return parse_effect_string(value)


def _to_css(value: ShadowValue | Sequence[ShadowValue], options: CssConversionOptions) -> str:
    if isinstance(value, ShadowValue):
        return shadow_to_css(value)
    return ", ".join(shadow_to_css(layer) for layer in value)


def _get_namespace(path: Sequence[str]) -> TailwindNamespace | None:
    hint = path[0].lower() if path else None
    if hint in ("shadows", "shadow", "elevation"):
        return TailwindNamespace.SHADOW
    return None


shadow_handler = TokenTypeHandler(
    type=TokenType.SHADOW,
    name="Shadow",
    priority=85,
    default_namespace=TailwindNamespace.SHADOW,
    detect_variable_defs=_detect_variable_defs,
    parse_variable_defs_value=_parse_variable_defs_value,
    to_css=_to_css,
    get_namespace=_get_namespace,
)
