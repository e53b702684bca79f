"""
Token type registry.

Detects which token type a raw value represents, parses it into the
normalized model, and renders it as CSS or SCSS.

Usage:
    from tokenforge.registry import init_registry, VariableDefsContext

    registry = init_registry()
    token_type = registry.detect_from_variable_defs(
        VariableDefsContext(path="Color/Primary/500", value="#3b82f6")
    )
    value = registry.parse_variable_defs_value(token_type, "#3b82f6")
    css = registry.to_css(token_type, value)

Adding a token type:
    1. Build a ``TokenTypeHandler`` with at least ``type``, ``name`` and ``to_css``
    2. Pass it in ``extra_handlers`` when creating the registry
"""

from .handlers import BUILTIN_HANDLERS
from .registry import (
    TokenTypeRegistry,
    create_default_registry,
    get_registry,
    init_registry,
)
from .types import (
    CssConversionOptions,
    FigmaDetectionContext,
    ScssConversionOptions,
    TailwindNamespace,
    TokenTypeHandler,
    VariableDefsContext,
)

__all__ = [
    "TokenTypeRegistry",
    "TokenTypeHandler",
    "BUILTIN_HANDLERS",
    # Construction
    "create_default_registry",
    "init_registry",
    "get_registry",
    # Types
    "FigmaDetectionContext",
    "VariableDefsContext",
    "CssConversionOptions",
    "ScssConversionOptions",
    "TailwindNamespace",
]
