"""
Error types for token type registration, dispatch, and configuration.

Value-level parse failures are not errors: parsers return ``None`` for
input they cannot read. The exceptions here signal programming or
configuration mistakes and should surface immediately.
"""


class TokenForgeError(Exception):
    """Base exception for all tokenforge errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class RegistryError(TokenForgeError):
    """Base class for registry construction and dispatch errors."""

    pass


class DuplicateTypeError(RegistryError):
    """
    Raised when a handler is registered for a tag that already has one.

    Each token type tag is owned by exactly one handler.
    """

    def __init__(self, token_type: str):
        self.token_type = token_type
        super().__init__(f"A handler for token type '{token_type}' is already registered")


class UnknownTypeError(RegistryError):
    """Raised when dispatching on a token type tag that no handler owns."""

    def __init__(self, token_type: str):
        self.token_type = token_type
        super().__init__(f"No handler registered for token type '{token_type}'")


class NoMatchError(RegistryError):
    """
    Raised when no handler claims a detection context and no
    fallback type is configured.
    """

    pass


class InvalidHandlerError(RegistryError):
    """
    Raised when a handler definition is incomplete.

    Examples:
    - Missing or non-callable ``to_css``
    - Empty type tag
    """

    pass


class RegistryFrozenError(RegistryError):
    """Raised when registering into a registry that has been frozen."""

    pass


class RegistryStateError(RegistryError):
    """Raised when the shared registry is initialized out of order."""

    pass


class RegistryNotInitializedError(RegistryStateError):
    """Raised when the shared registry is read before ``init_registry``."""

    def __init__(self) -> None:
        super().__init__("Token type registry is not initialized; call init_registry() first")


class ConfigError(TokenForgeError):
    """Raised when a configuration file cannot be read or validated."""

    pass
