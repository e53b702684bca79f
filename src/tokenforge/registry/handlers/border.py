"""
Border token type handler.

Grammar: ``<width><unit>? <style> <color>`` where color is a hex literal or
an rgb()/rgba() call. Borders always render their color as rgb(); the
requested color format is not applied.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from tokenforge.colors import color_to_rgb, parse_css_color
from tokenforge.registry.types import (
    CssConversionOptions,
    TailwindNamespace,
    TokenTypeHandler,
    VariableDefsContext,
)
from tokenforge.schema.tokens import BorderValue, DimensionValue, TokenType

from .dimension import dimension_to_css

logger = logging.getLogger(__name__)

_STYLES = "solid|dashed|dotted|double|groove|ridge|inset|outset|none"

_BORDER_RE = re.compile(
    rf"^(\d+(?:\.\d+)?)(px|rem|em)?\s+({_STYLES})\s+(#[A-Fa-f0-9]+|rgba?\([^)]+\))$",
    re.IGNORECASE,
)
# Prefix probe used for detection: width and style are enough
_BORDER_PREFIX_RE = re.compile(rf"^\d+(?:\.\d+)?(px|rem|em)?\s+({_STYLES})\s+")


def parse_border_string(value: str) -> BorderValue | None:
    """
    Parse a border shorthand such as ``"1px solid #000000"``.

    Returns None when the value does not match the grammar or its color
    cannot be read.
    """
    match = _BORDER_RE.match(value.strip())
    if not match:
        return None

    color = parse_css_color(match.group(4))
    if color is None:
        logger.debug("Rejected border color in %r", value)
        return None

    return BorderValue(
        width=DimensionValue(value=float(match.group(1)), unit=(match.group(2) or "px").lower()),
        style=match.group(3).lower(),
        color=color,
    )


def _detect_variable_defs(context: VariableDefsContext) -> bool:
    lower_path = context.path.lower()
    if "border" in lower_path and "radius" not in lower_path:
        return True
    return _BORDER_PREFIX_RE.match(context.value) is not None


def _parse_variable_defs_value(value: str) -> BorderValue | None:
    return parse_border_string(value)


def _to_css(value: BorderValue, options: CssConversionOptions) -> str:
    return f"{dimension_to_css(value.width)} {value.style} {color_to_rgb(value.color)}"


def _get_namespace(path: Sequence[str]) -> TailwindNamespace | None:
    hint = path[0].lower() if path else None
    if hint in ("border", "borders"):
        return TailwindNamespace.BORDER
    return None


border_handler = TokenTypeHandler(
    type=TokenType.BORDER,
    name="Border",
    priority=65,
    default_namespace=TailwindNamespace.BORDER,
    detect_variable_defs=_detect_variable_defs,
    parse_variable_defs_value=_parse_variable_defs_value,
    to_css=_to_css,
    get_namespace=_get_namespace,
)
