"""
Timing token type handlers: duration, cubicBezier and transition.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Any

from tokenforge.registry.types import (
    CssConversionOptions,
    TailwindNamespace,
    TokenTypeHandler,
    VariableDefsContext,
)
from tokenforge.schema.tokens import (
    CubicBezierValue,
    DurationValue,
    TokenType,
    TransitionValue,
)

from .dimension import format_number

_DURATION_RE = re.compile(r"^(\d+(?:\.\d+)?)(ms|s)?$")
# Only values with an explicit unit are claimed during detection
_DURATION_WITH_UNIT_RE = re.compile(r"^\d+(?:\.\d+)?(ms|s)$")

_NUMBER = r"\s*(-?\d*\.?\d+)\s*"
_CUBIC_BEZIER_RE = re.compile(rf"cubic-bezier\s*\({_NUMBER},{_NUMBER},{_NUMBER},{_NUMBER}\)")

# Identity curve, used for missing trailing control points
_LINEAR_CURVE = (0.0, 0.0, 1.0, 1.0)


def duration_to_css(value: DurationValue) -> str:
    return f"{format_number(value.value)}{value.unit}"


def cubic_bezier_to_css(value: CubicBezierValue) -> str:
    return (
        f"cubic-bezier({format_number(value.x1)}, {format_number(value.y1)}, "
        f"{format_number(value.x2)}, {format_number(value.y2)})"
    )


# =============================================================================
# Duration Handler
# =============================================================================


def parse_duration(value: str) -> DurationValue | None:
    """``"250"`` -> 250ms, ``"2s"`` -> 2s."""
    match = _DURATION_RE.match(value.strip())
    if not match:
        return None
    return DurationValue(value=float(match.group(1)), unit=match.group(2) or "ms")


def _detect_duration(context: VariableDefsContext) -> bool:
    return _DURATION_WITH_UNIT_RE.match(context.value.strip()) is not None


def _parse_duration_figma(value: Any, scopes: Sequence[str]) -> DurationValue | None:
    # Figma stores durations as unitless milliseconds
    if isinstance(value, bool) or not isinstance(value, int | float):
        return None
    return DurationValue(value=value, unit="ms")


def _duration_to_css(value: DurationValue, options: CssConversionOptions) -> str:
    return duration_to_css(value)


def _duration_namespace(path: Sequence[str]) -> TailwindNamespace | None:
    hint = path[0].lower() if path else None
    if hint in ("duration", "timing", "animation"):
        return TailwindNamespace.TRANSITION_DURATION
    return None


duration_handler = TokenTypeHandler(
    type=TokenType.DURATION,
    name="Duration",
    priority=60,
    default_namespace=TailwindNamespace.TRANSITION_DURATION,
    detect_variable_defs=_detect_duration,
    parse_figma_value=_parse_duration_figma,
    parse_variable_defs_value=parse_duration,
    to_css=_duration_to_css,
    get_namespace=_duration_namespace,
)

# =============================================================================
# Cubic Bezier Handler
# =============================================================================


def parse_cubic_bezier(value: str) -> CubicBezierValue | None:
    """Parse ``cubic-bezier(x1, y1, x2, y2)``. Out-of-range points are kept."""
    match = _CUBIC_BEZIER_RE.search(value)
    if not match:
        return None
    x1, y1, x2, y2 = (float(group) for group in match.groups())
    return CubicBezierValue(x1=x1, y1=y1, x2=x2, y2=y2)


def _detect_cubic_bezier(context: VariableDefsContext) -> bool:
    return context.value.strip().startswith("cubic-bezier(")


def _parse_cubic_bezier_figma(value: Any, scopes: Sequence[str]) -> CubicBezierValue | None:
    if isinstance(value, CubicBezierValue):
        return value
    if isinstance(value, str | bytes) or not isinstance(value, Sequence):
        return None
    try:
        points = [float(v) for v in value[:4]]
    except (TypeError, ValueError):
        return None
    points.extend(_LINEAR_CURVE[len(points) :])
    x1, y1, x2, y2 = points
    return CubicBezierValue(x1=x1, y1=y1, x2=x2, y2=y2)


def _cubic_bezier_to_css(value: CubicBezierValue, options: CssConversionOptions) -> str:
    return cubic_bezier_to_css(value)


def _cubic_bezier_namespace(path: Sequence[str]) -> TailwindNamespace | None:
    hint = path[0].lower() if path else None
    if hint in ("easing", "timing", "animation"):
        return TailwindNamespace.TRANSITION_TIMING_FUNCTION
    return None


cubic_bezier_handler = TokenTypeHandler(
    type=TokenType.CUBIC_BEZIER,
    name="Cubic Bezier",
    priority=55,
    default_namespace=TailwindNamespace.TRANSITION_TIMING_FUNCTION,
    detect_variable_defs=_detect_cubic_bezier,
    parse_figma_value=_parse_cubic_bezier_figma,
    parse_variable_defs_value=parse_cubic_bezier,
    to_css=_cubic_bezier_to_css,
    get_namespace=_cubic_bezier_namespace,
)

# =============================================================================
# Transition Handler
# =============================================================================


def transition_to_css(value: TransitionValue) -> str:
    """``<duration> <timing-function> [<delay>]``."""
    if isinstance(value.timing_function, CubicBezierValue):
        timing = cubic_bezier_to_css(value.timing_function)
    else:
        timing = value.timing_function

    parts = [duration_to_css(value.duration), timing]
    if value.delay is not None:
        parts.append(duration_to_css(value.delay))
    return " ".join(parts)


def _transition_to_css(value: TransitionValue, options: CssConversionOptions) -> str:
    return transition_to_css(value)


# Render-only: transitions are assembled by callers, never detected or parsed
transition_handler = TokenTypeHandler(
    type=TokenType.TRANSITION,
    name="Transition",
    priority=50,
    to_css=_transition_to_css,
)
