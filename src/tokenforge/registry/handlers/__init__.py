"""
Built-in token type handlers.

``BUILTIN_HANDLERS`` is registered by ``create_default_registry``. Order only
matters between handlers of equal priority.
"""

from .border import border_handler, parse_border_string
from .color import color_handler
from .dimension import dimension_handler, dimension_to_css, format_number, px_to_rem
from .font import font_family_handler, font_weight_handler
from .gradient import gradient_handler, parse_figma_gradient, parse_gradient_string
from .primitives import boolean_handler, number_handler, string_handler
from .shadow import parse_effect_string, shadow_handler
from .timing import (
    cubic_bezier_handler,
    duration_handler,
    parse_cubic_bezier,
    parse_duration,
    transition_handler,
)
from .typography import parse_font_string, typography_handler

BUILTIN_HANDLERS = (
    color_handler,
    dimension_handler,
    typography_handler,
    shadow_handler,
    border_handler,
    gradient_handler,
    font_family_handler,
    font_weight_handler,
    duration_handler,
    cubic_bezier_handler,
    transition_handler,
    string_handler,
    number_handler,
    boolean_handler,
)

__all__ = [
    "BUILTIN_HANDLERS",
    # Handlers
    "color_handler",
    "dimension_handler",
    "typography_handler",
    "shadow_handler",
    "border_handler",
    "gradient_handler",
    "font_family_handler",
    "font_weight_handler",
    "duration_handler",
    "cubic_bezier_handler",
    "transition_handler",
    "string_handler",
    "number_handler",
    "boolean_handler",
    # Parsers and formatters
    "parse_border_string",
    "parse_gradient_string",
    "parse_figma_gradient",
    "parse_duration",
    "parse_cubic_bezier",
    "parse_effect_string",
    "parse_font_string",
    "format_number",
    "dimension_to_css",
    "px_to_rem",
]
