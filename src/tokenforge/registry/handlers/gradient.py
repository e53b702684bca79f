"""
Gradient token type handler.

Two independent parse paths:

- CSS text: ``linear-gradient(...)``, ``radial-gradient(...)``,
  ``conic-gradient(...)``. Linear gradients may start with an angle in
  deg, turn, rad or grad. Stops are hex or rgb()/rgba() colors with an
  optional ``%`` position. Named colors are recognized and dropped, since
  there is no name table. A stop positioned past 100% is dropped before
  defaults are assigned. Only the first and last stop receive default
  positions (0 and 1); interior stops without a position keep none.
- Figma paint objects: ``GRADIENT_LINEAR`` / ``GRADIENT_RADIAL`` /
  ``GRADIENT_ANGULAR`` with ``gradientHandlePositions`` and
  ``gradientStops``. A paint with no usable stops becomes a black to white
  linear gradient so one bad variable does not block a whole collection.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Sequence
from typing import Any

from pydantic import ValidationError

from tokenforge.colors import color_to_rgb, parse_css_color
from tokenforge.registry.types import (
    CssConversionOptions,
    TailwindNamespace,
    TokenTypeHandler,
    VariableDefsContext,
)
from tokenforge.schema.tokens import ColorValue, GradientStop, GradientValue, TokenType

from .dimension import format_number

logger = logging.getLogger(__name__)

_GRADIENT_FUNCTION_RE = re.compile(r"^(linear|radial|conic)-gradient\s*\(")
_ANGLE_RE = re.compile(r"^(\d+(?:\.\d+)?)(deg|turn|rad|grad)?\s*,\s*")
_STOP_RE = re.compile(r"(#[A-Fa-f0-9]+|rgba?\([^)]+\)|[a-z]+)\s*(\d+(?:\.\d+)?%)?", re.IGNORECASE)

# Degrees per unit
_ANGLE_UNITS = {
    "deg": 1.0,
    "turn": 360.0,
    "rad": 180 / math.pi,
    "grad": 0.9,
}

_FIGMA_GRADIENT_TYPES = {
    "GRADIENT_RADIAL": "radial",
    "GRADIENT_ANGULAR": "conic",
}


def default_gradient() -> GradientValue:
    """Black to white, used when a Figma paint has no readable stops."""
    return GradientValue(
        type="linear",
        angle=0,
        stops=[
            GradientStop(color=ColorValue(r=0, g=0, b=0, a=1), position=0),
            GradientStop(color=ColorValue(r=1, g=1, b=1, a=1), position=1),
        ],
    )


def normalize_angle(degrees: float) -> float:
    """Wrap an angle into [0, 360)."""
    wrapped = degrees % 360
    # -1e-17 % 360 == 360.0 in floating point
    return 0.0 if wrapped >= 360 else wrapped


# =============================================================================
# CSS Text
# =============================================================================


def parse_gradient_string(value: str) -> GradientValue | None:
    """
    Parse a CSS gradient function.

    Returns None when the function name is not recognized or no color
    stop can be read.
    """
    text = value.strip()
    type_match = _GRADIENT_FUNCTION_RE.match(text)
    if not type_match:
        return None

    gradient_type = type_match.group(1)
    content = text[type_match.end() :]
    if content.endswith(")"):
        content = content[:-1]

    angle: float | None = None
    if gradient_type == "linear":
        angle_match = _ANGLE_RE.match(content)
        if angle_match:
            unit = angle_match.group(2) or "deg"
            angle = normalize_angle(float(angle_match.group(1)) * _ANGLE_UNITS[unit])
            content = content[angle_match.end() :]

    # (color, position-or-None) pairs; named colors and positions outside 0-100% dropped
    raw_stops: list[tuple[ColorValue, float | None]] = []
    for match in _STOP_RE.finditer(content):
        color_text, position_text = match.group(1), match.group(2)
        color = parse_css_color(color_text)
        if color is None:
            logger.debug("Dropped gradient stop color %r", color_text)
            continue
        position = float(position_text[:-1]) / 100 if position_text else None
        if position is not None and position > 1:
            logger.debug("Dropped gradient stop %r at %s", color_text, position_text)
            continue
        raw_stops.append((color, position))

    stops: list[GradientStop] = []
    last_index = len(raw_stops) - 1
    for index, (color, position) in enumerate(raw_stops):
        if position is None:
            if index == 0:
                position = 0.0
            elif index == last_index:
                position = 1.0
        stops.append(GradientStop(color=color, position=position))

    if not stops:
        return None

    return GradientValue(type=gradient_type, angle=angle, stops=stops)


# =============================================================================
# Figma Paint Objects
# =============================================================================


def figma_handle_angle(start: dict[str, float], end: dict[str, float]) -> float:
    """
    CSS angle of a Figma linear gradient from its first two handles.

    ``atan2`` of the handle vector, rotated +90 so that CSS 0deg points up,
    wrapped into [0, 360). Figma's y axis grows downward, so a handle
    pointing down the frame gives 180deg ("to bottom").
    """
    dx = end["x"] - start["x"]
    dy = end["y"] - start["y"]
    return normalize_angle(math.degrees(math.atan2(dy, dx)) + 90)


def parse_figma_gradient(value: Any) -> GradientValue | None:
    """Parse a Figma gradient paint. Returns None when it has no readable stops."""
    if not isinstance(value, dict):
        return None

    raw_stops = value.get("gradientStops") or []
    try:
        stops = [
            GradientStop(color=ColorValue.model_validate(stop["color"]), position=stop["position"])
            for stop in raw_stops
        ]
    except (KeyError, TypeError, ValidationError):
        logger.debug("Rejected Figma gradient stops %r", raw_stops)
        return None

    if not stops:
        return None

    gradient_type = _FIGMA_GRADIENT_TYPES.get(value.get("type", ""), "linear")

    angle: float | None = None
    handles = value.get("gradientHandlePositions") or []
    if gradient_type == "linear" and len(handles) >= 2:
        try:
            angle = figma_handle_angle(handles[0], handles[1])
        except (KeyError, TypeError):
            logger.debug("Ignored unreadable gradient handles %r", handles)

    return GradientValue(type=gradient_type, angle=angle, stops=stops)


# =============================================================================
# Handler
# =============================================================================


def _detect_variable_defs(context: VariableDefsContext) -> bool:
    if "gradient" in context.path.lower():
        return True
    return _GRADIENT_FUNCTION_RE.match(context.value) is not None


def _parse_figma_value(value: Any, scopes: Sequence[str]) -> GradientValue:
    result = parse_figma_gradient(value)
    if result is None:
        logger.debug("Substituting default gradient for %r", value)
        return default_gradient()
    return result


def _parse_variable_defs_value(value: str) -> GradientValue | None:
    return parse_gradient_string(value)


def _format_stop(stop: GradientStop) -> str:
    if stop.position is None:
        return color_to_rgb(stop.color)
    return f"{color_to_rgb(stop.color)} {stop.position * 100:.1f}%"


def _to_css(value: GradientValue, options: CssConversionOptions) -> str:
    stops = ", ".join(_format_stop(stop) for stop in value.stops)

    if value.type == "radial":
        return f"radial-gradient({stops})"
    if value.type == "conic":
        return f"conic-gradient({stops})"
    return f"linear-gradient({format_number(value.angle or 0)}deg, {stops})"


def _get_namespace(path: Sequence[str]) -> TailwindNamespace | None:
    hint = path[0].lower() if path else None
    if hint in ("gradient", "gradients"):
        return TailwindNamespace.GRADIENT
    return None


gradient_handler = TokenTypeHandler(
    type=TokenType.GRADIENT,
    name="Gradient",
    priority=85,
    default_namespace=TailwindNamespace.GRADIENT,
    detect_variable_defs=_detect_variable_defs,
    parse_figma_value=_parse_figma_value,
    parse_variable_defs_value=_parse_variable_defs_value,
    to_css=_to_css,
    get_namespace=_get_namespace,
)
