"""
Configuration Builder Contract.

Walkers do not know what a configuration is. They only rely on these two
protocols: a factory that opens a builder for a base configuration, and a
builder that records ``(name, value)`` overrides and resolves them into a new
configuration.
"""

# Standard Imports
from typing import Any, Protocol


class ConfigurationBuilder(Protocol):
    """Accumulates overrides for one configuration and resolves them."""

    def set(self, name: str, value: Any) -> "ConfigurationBuilder":
        """Record an override; returns the builder for chaining."""
        ...  # pragma: no cover

    def build(self) -> Any:
        """
        Resolve the recorded overrides against the base configuration.

        Raises:
            InvalidValueError: If a value is not acceptable for its name
        """
        ...  # pragma: no cover


class ConfigurationBuilderFactory(Protocol):
    """Opens a fresh builder seeded with a base configuration."""

    def __call__(self, base: Any) -> ConfigurationBuilder:
        ...  # pragma: no cover
