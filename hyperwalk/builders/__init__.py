"""
Configuration Builders.

The contract walkers consume, and a reference implementation for frozen
Pydantic models.
"""

from .config_builder import (
    PydanticBuilderFactory,
    PydanticConfigBuilder,
    map_param_to_config_path,
    with_overrides,
)
from .contract import ConfigurationBuilder, ConfigurationBuilderFactory

__all__ = [
    "ConfigurationBuilder",
    "ConfigurationBuilderFactory",
    "PydanticConfigBuilder",
    "PydanticBuilderFactory",
    "map_param_to_config_path",
    "with_overrides",
]
