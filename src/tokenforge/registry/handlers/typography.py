"""
Typography token type handler.

Parses Figma font strings such as::

    Font(family: "DM Sans", style: Bold, size: 56, weight: 700, lineHeight: 64, letterSpacing: -1.5)

CSS output is a declaration list; SCSS output is a map.
"""

from __future__ import annotations

import re

from tokenforge.registry.types import (
    CssConversionOptions,
    ScssConversionOptions,
    TokenTypeHandler,
    VariableDefsContext,
)
from tokenforge.schema.tokens import DimensionValue, TokenType, TypographyValue

from .dimension import dimension_to_css, format_number
from .font import format_font_family, nearest_font_weight

_FONT_RE = re.compile(r"^Font\((.*)\)$")
_PAIR_RE = re.compile(r"(\w+):\s*(?:\"([^\"]+)\"|([^,)]+))")


def _read_pairs(content: str) -> dict[str, str | float]:
    result: dict[str, str | float] = {}
    for match in _PAIR_RE.finditer(content):
        raw = match.group(2) if match.group(2) is not None else match.group(3).strip()
        try:
            result[match.group(1)] = float(raw)
        except ValueError:
            result[match.group(1)] = raw
    return result


def _number(fields: dict[str, str | float], key: str) -> float | None:
    value = fields.get(key)
    # Zero counts as absent
    if isinstance(value, float) and value:
        return value
    return None


def parse_font_string(value: str) -> TypographyValue | None:
    """Parse a ``Font(...)`` string. Returns None for anything else."""
    match = _FONT_RE.match(value.strip())
    if not match:
        return None

    fields = _read_pairs(match.group(1))
    size = _number(fields, "size")
    weight = _number(fields, "weight")
    line_height = _number(fields, "lineHeight")
    letter_spacing = _number(fields, "letterSpacing")
    family = fields.get("family")

    return TypographyValue(
        font_family=[str(family)] if family else ["sans-serif"],
        font_size=DimensionValue(value=size if size is not None else 16, unit="px"),
        font_weight=nearest_font_weight(weight) if weight is not None else 400,
        line_height=DimensionValue(value=line_height, unit="px") if line_height is not None else 1.5,
        letter_spacing=DimensionValue(value=letter_spacing, unit="px") if letter_spacing is not None else None,
    )


def typography_declarations(value: TypographyValue) -> list[str]:
    """``property: value`` strings in a fixed order."""
    if isinstance(value.line_height, DimensionValue):
        line_height = dimension_to_css(value.line_height)
    else:
        line_height = format_number(value.line_height)

    parts = [
        f"font-family: {format_font_family(value.font_family)}",
        f"font-size: {dimension_to_css(value.font_size)}",
        f"font-weight: {value.font_weight}",
        f"line-height: {line_height}",
    ]
    if value.letter_spacing is not None:
        parts.append(f"letter-spacing: {dimension_to_css(value.letter_spacing)}")
    return parts


def _detect_variable_defs(context: VariableDefsContext) -> bool:
    # Typography comes from text styles, so only the Font() form is detected
    return context.value.startswith("Font(")


def _parse_variable_defs_value(value: str) -> TypographyValue | None:
    return parse_font_string(value)


def _to_css(value: TypographyValue, options: CssConversionOptions) -> str:
    return "; ".join(typography_declarations(value))


def _to_scss(value: TypographyValue, options: ScssConversionOptions) -> str:
    return f"({', '.join(typography_declarations(value))})"


typography_handler = TokenTypeHandler(
    type=TokenType.TYPOGRAPHY,
    name="Typography",
    priority=90,
    detect_variable_defs=_detect_variable_defs,
    parse_variable_defs_value=_parse_variable_defs_value,
    to_css=_to_css,
    to_scss=_to_scss,
)
