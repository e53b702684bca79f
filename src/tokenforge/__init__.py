"""
tokenforge - design token type registry.

Converts design-tool variable data (colors, borders, gradients, timing
curves, ...) into a normalized token model and renders it as CSS custom
properties, SCSS variables and Tailwind namespaces.
"""

from __future__ import annotations

from ._version import get_version
from .errors import (
    ConfigError,
    DuplicateTypeError,
    NoMatchError,
    TokenForgeError,
    UnknownTypeError,
)

__version__ = get_version()

__all__ = [
    "__version__",
    "TokenForgeError",
    "DuplicateTypeError",
    "UnknownTypeError",
    "NoMatchError",
    "ConfigError",
]
