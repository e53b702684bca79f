"""
Token type registry.

Routes token type tags to handlers. Detection scans handlers in descending
priority (registration order breaks ties); parsing and rendering look the
handler up by tag.

The registry is mutable only while it is being built. Once ``freeze()`` has
been called it is read-only and safe to share between threads; all
``register`` calls must happen before the first concurrent read.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Any

from tokenforge.config import RegistryConfig
from tokenforge.errors import (
    ConfigError,
    DuplicateTypeError,
    NoMatchError,
    RegistryFrozenError,
    RegistryNotInitializedError,
    RegistryStateError,
    UnknownTypeError,
)
from tokenforge.logging import log_with_context
from tokenforge.schema.tokens import TokenValue

from .types import (
    CssConversionOptions,
    FigmaDetectionContext,
    ScssConversionOptions,
    TailwindNamespace,
    TokenTypeHandler,
    VariableDefsContext,
)

logger = logging.getLogger(__name__)


class TokenTypeRegistry:
    """Dispatch table from token type tag to handler."""

    def __init__(self, config: RegistryConfig | None = None):
        self.config = config or RegistryConfig()
        self._handlers: dict[str, TokenTypeHandler] = {}
        self._sorted: list[TokenTypeHandler] = []
        self._frozen = False

    # =========================================================================
    # Construction
    # =========================================================================

    def register(self, handler: TokenTypeHandler) -> None:
        """
        Register a handler under its type tag.

        Raises:
            DuplicateTypeError: If the tag already has a handler
            RegistryFrozenError: If the registry has been frozen
        """
        if self._frozen:
            raise RegistryFrozenError(f"Cannot register '{handler.type}': registry is frozen")
        if handler.type in self._handlers:
            raise DuplicateTypeError(handler.type)

        self._handlers[handler.type] = handler
        # sorted() is stable, so equal priorities keep registration order
        self._sorted = sorted(self._handlers.values(), key=lambda h: h.priority, reverse=True)
        log_with_context(
            logger,
            logging.DEBUG,
            f"Registered handler {handler.type}",
            priority=handler.priority,
        )

    def freeze(self) -> None:
        """
        Make the registry read-only.

        Raises:
            ConfigError: If the configured detection fallback has no handler
        """
        fallback = self.config.detection_fallback
        if fallback is not None and fallback not in self._handlers:
            raise ConfigError(f"detection_fallback '{fallback}' is not a registered token type")
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def __contains__(self, token_type: object) -> bool:
        return token_type in self._handlers

    def __len__(self) -> int:
        return len(self._handlers)

    def get_handler(self, token_type: str) -> TokenTypeHandler | None:
        """Get the handler for a type tag, or None."""
        return self._handlers.get(token_type)

    def get_all_handlers(self) -> list[TokenTypeHandler]:
        """All handlers in detection order."""
        return list(self._sorted)

    def _require(self, token_type: str) -> TokenTypeHandler:
        handler = self._handlers.get(token_type)
        if handler is None:
            raise UnknownTypeError(token_type)
        return handler

    # =========================================================================
    # Detection
    # =========================================================================

    def detect_from_figma(self, context: FigmaDetectionContext) -> str:
        """
        Detect the token type of a native Figma variable.

        Falls back to the configured resolved-type table, then to
        ``config.detection_fallback``.

        Raises:
            NoMatchError: If nothing matches and no fallback is configured
        """
        for handler in self._sorted:
            if handler.detect_figma is not None and handler.detect_figma(context):
                return handler.type

        mapped = self.config.figma_type_fallbacks.get(context.resolved_type)
        if mapped is not None and mapped in self._handlers:
            logger.debug("No handler matched %s; mapped resolved type to %s", context.name, mapped)
            return mapped

        return self._fallback(f"Figma variable {context.name or '<unnamed>'} ({context.resolved_type})")

    def detect_from_variable_defs(self, context: VariableDefsContext) -> str:
        """
        Detect the token type of a path/value definition.

        Raises:
            NoMatchError: If nothing matches and no fallback is configured
        """
        for handler in self._sorted:
            if handler.detect_variable_defs is not None and handler.detect_variable_defs(context):
                return handler.type

        return self._fallback(f"{context.path} = {context.value!r}")

    def _fallback(self, description: str) -> str:
        fallback = self.config.detection_fallback
        if fallback is None:
            raise NoMatchError(f"No handler matched {description}")
        logger.debug("No handler matched %s; using fallback type %s", description, fallback)
        return fallback

    # =========================================================================
    # Parsing
    # =========================================================================

    def parse_figma_value(
        self,
        token_type: str,
        value: Any,
        scopes: Sequence[str] = (),
    ) -> TokenValue | None:
        """Parse a native Figma value. Returns None when it cannot be parsed."""
        handler = self._require(token_type)
        if handler.parse_figma_value is None:
            return None
        return handler.parse_figma_value(value, scopes)

    def parse_variable_defs_value(self, token_type: str, value: str) -> TokenValue | None:
        """Parse a textual value. Returns None when it cannot be parsed."""
        handler = self._require(token_type)
        if handler.parse_variable_defs_value is None:
            return None
        return handler.parse_variable_defs_value(value)

    # =========================================================================
    # Rendering
    # =========================================================================

    def to_css(
        self,
        token_type: str,
        value: TokenValue,
        options: CssConversionOptions | None = None,
    ) -> str:
        """
        Render a value as CSS.

        Raises:
            UnknownTypeError: If no handler owns ``token_type``
        """
        handler = self._require(token_type)
        return handler.to_css(value, options or CssConversionOptions())

    def to_scss(
        self,
        token_type: str,
        value: TokenValue,
        options: ScssConversionOptions | None = None,
    ) -> str:
        """
        Render a value as SCSS, falling back to the CSS renderer.

        Raises:
            UnknownTypeError: If no handler owns ``token_type``
        """
        handler = self._require(token_type)
        options = options or ScssConversionOptions()

        if handler.to_scss is not None:
            return handler.to_scss(value, options)

        # hsl has no CSS renderer counterpart
        css_format = "hex" if options.color_format == "hsl" else options.color_format
        return handler.to_css(value, CssConversionOptions(color_format=css_format, prefix=options.prefix))

    def get_namespace(self, token_type: str, path: Sequence[str]) -> TailwindNamespace | None:
        """
        Resolve the Tailwind namespace for a token.

        Path hints win; otherwise the handler's default namespace.

        Raises:
            UnknownTypeError: If no handler owns ``token_type``
        """
        handler = self._require(token_type)
        if handler.get_namespace is not None:
            namespace = handler.get_namespace(path)
            if namespace is not None:
                return namespace
        return handler.default_namespace


# =============================================================================
# Shared Instance
# =============================================================================

_default_registry: TokenTypeRegistry | None = None


def create_default_registry(
    config: RegistryConfig | None = None,
    extra_handlers: Iterable[TokenTypeHandler] = (),
) -> TokenTypeRegistry:
    """
    Build a frozen registry holding every built-in handler plus extensions.

    Registration order does not affect detection except between handlers
    of equal priority.
    """
    from .handlers import BUILTIN_HANDLERS

    registry = TokenTypeRegistry(config)
    for handler in (*BUILTIN_HANDLERS, *extra_handlers):
        registry.register(handler)
    registry.freeze()
    logger.debug("Built token type registry with %d handlers", len(registry))
    return registry


def init_registry(
    config: RegistryConfig | None = None,
    extra_handlers: Iterable[TokenTypeHandler] = (),
    replace: bool = False,
) -> TokenTypeRegistry:
    """
    One-time construction of the shared registry.

    Must complete before any thread calls ``get_registry``.

    Raises:
        RegistryStateError: If already initialized and ``replace`` is False
    """
    global _default_registry

    if _default_registry is not None and not replace:
        raise RegistryStateError("Token type registry is already initialized")

    _default_registry = create_default_registry(config, extra_handlers)
    return _default_registry


def get_registry() -> TokenTypeRegistry:
    """
    Return the shared registry.

    Raises:
        RegistryNotInitializedError: If ``init_registry`` has not run
    """
    if _default_registry is None:
        raise RegistryNotInitializedError()
    return _default_registry
