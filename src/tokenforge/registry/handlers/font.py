"""
Font token type handlers: fontFamily and fontWeight.
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
from tokenforge.schema.tokens import TokenType

_QUOTES_RE = re.compile(r"^[\"']|[\"']$")
_PLAIN_NUMBER_RE = re.compile(r"^\d+(\.\d+)?(px)?$")

VALID_WEIGHTS = (100, 200, 300, 400, 500, 600, 700, 800, 900)

WEIGHT_KEYWORDS: dict[str, int] = {
    "thin": 100,
    "hairline": 100,
    "extralight": 200,
    "ultralight": 200,
    "light": 300,
    "normal": 400,
    "regular": 400,
    "medium": 500,
    "semibold": 600,
    "demibold": 600,
    "bold": 700,
    "extrabold": 800,
    "ultrabold": 800,
    "black": 900,
    "heavy": 900,
}


def format_font_family(families: Sequence[str]) -> str:
    """Join a font stack, quoting names that contain spaces."""
    return ", ".join(f'"{f}"' if " " in f else f for f in families)


def split_font_stack(value: str) -> list[str]:
    return [_QUOTES_RE.sub("", f.strip()) for f in value.split(",") if f.strip()]


def nearest_font_weight(weight: float) -> int:
    """Snap to the closest of 100..900. Ties keep 400 when it is one of them, else the lighter weight."""
    closest = 400
    min_diff = abs(400 - weight)
    for candidate in VALID_WEIGHTS:
        diff = abs(candidate - weight)
        if diff < min_diff:
            min_diff = diff
            closest = candidate
    return closest


# =============================================================================
# Font Family Handler
# =============================================================================


def _detect_family_figma(context: FigmaDetectionContext) -> bool:
    return context.resolved_type == "STRING" and "FONT_FAMILY" in context.scopes


def _detect_family_variable_defs(context: VariableDefsContext) -> bool:
    lower_path = context.path.lower()
    if "font" in lower_path and "family" in lower_path:
        return True

    # Font family values are plain strings under a font path
    value = context.value
    return (
        "font" in lower_path
        and not value.startswith(("Font(", "#", "Effect("))
        and _PLAIN_NUMBER_RE.match(value) is None
    )


def _parse_family_figma(value: Any, scopes: Sequence[str]) -> list[str] | None:
    if value is None:
        return None
    return split_font_stack(str(value)) or None


def _parse_family_variable_defs(value: str) -> list[str] | None:
    return split_font_stack(value) or None


def _family_to_css(value: Sequence[str], options: CssConversionOptions) -> str:
    return format_font_family(value)


def _family_namespace(path: Sequence[str]) -> TailwindNamespace:
    return TailwindNamespace.FONT_FAMILY


font_family_handler = TokenTypeHandler(
    type=TokenType.FONT_FAMILY,
    name="Font Family",
    priority=70,
    default_namespace=TailwindNamespace.FONT_FAMILY,
    detect_figma=_detect_family_figma,
    detect_variable_defs=_detect_family_variable_defs,
    parse_figma_value=_parse_family_figma,
    parse_variable_defs_value=_parse_family_variable_defs,
    to_css=_family_to_css,
    get_namespace=_family_namespace,
)

# =============================================================================
# Font Weight Handler
# =============================================================================


def _detect_weight_figma(context: FigmaDetectionContext) -> bool:
    return context.resolved_type == "FLOAT" and "FONT_WEIGHT" in context.scopes


def _parse_weight_figma(value: Any, scopes: Sequence[str]) -> int | None:
    if isinstance(value, bool) or not isinstance(value, int | float):
        return None
    return nearest_font_weight(value)


def _parse_weight_variable_defs(value: str) -> int | None:
    text = value.strip()
    number = re.match(r"^\d+", text)
    if number:
        return nearest_font_weight(int(number.group(0)))
    return WEIGHT_KEYWORDS.get(text.lower())


def _weight_to_css(value: int | str, options: CssConversionOptions) -> str:
    if isinstance(value, str):
        return str(WEIGHT_KEYWORDS.get(value.lower(), 400))
    return str(value)


def _weight_namespace(path: Sequence[str]) -> TailwindNamespace:
    return TailwindNamespace.FONT_WEIGHT


font_weight_handler = TokenTypeHandler(
    type=TokenType.FONT_WEIGHT,
    name="Font Weight",
    priority=75,
    default_namespace=TailwindNamespace.FONT_WEIGHT,
    detect_figma=_detect_weight_figma,
    parse_figma_value=_parse_weight_figma,
    parse_variable_defs_value=_parse_weight_variable_defs,
    to_css=_weight_to_css,
    get_namespace=_weight_namespace,
)
