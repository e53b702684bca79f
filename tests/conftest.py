"""Shared pytest fixtures for tokenforge tests."""

from collections.abc import Iterator

import pytest

from tokenforge.registry import TokenTypeRegistry, create_default_registry
from tokenforge.registry import registry as registry_module


@pytest.fixture
def registry() -> TokenTypeRegistry:
    """Return a frozen registry holding every built-in handler."""
    return create_default_registry()


@pytest.fixture
def reset_shared_registry(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Start with no shared registry; restore the previous one afterwards."""
    monkeypatch.setattr(registry_module, "_default_registry", None)
    yield
