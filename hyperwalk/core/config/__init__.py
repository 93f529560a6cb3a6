"""
Configuration Package Initialization.

Flat public API for configuration components, loaded lazily so that importing
``hyperwalk.core.config`` does not pull in Pydantic until a schema is used.

Architecture:
    - Lazy Import Pattern (PEP 562): ``__getattr__`` loads on first access
    - Caching: Loaded attributes are stored in ``globals()``

Example:
    >>> from hyperwalk.core.config import WalkerConfig
    >>> WalkerConfig(strategy="random", seed=7).seed
    7
"""

from __future__ import annotations

from importlib import import_module
from typing import Any

__all__ = [
    "Config",
    "WalkerConfig",
    "TelemetryConfig",
    "ValidatedPath",
]

_LAZY_IMPORTS: dict[str, str] = {
    "Config": "hyperwalk.core.config.manifest",
    "WalkerConfig": "hyperwalk.core.config.walker_config",
    "TelemetryConfig": "hyperwalk.core.config.telemetry_config",
    "ValidatedPath": "hyperwalk.core.config.types",
}


def __getattr__(name: str) -> Any:
    """Lazily import configuration components on first access."""
    if name not in _LAZY_IMPORTS:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    module = import_module(_LAZY_IMPORTS[name])
    attr = getattr(module, name)

    globals()[name] = attr
    return attr


def __dir__() -> list[str]:
    """Support for dir() and IDE auto-completion."""
    return sorted(__all__)
