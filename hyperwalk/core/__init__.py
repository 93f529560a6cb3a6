"""
Core Utilities Package

Exposes the exception hierarchy, logging, YAML I/O and project constants
shared by the space, builder and walker packages. Configuration schemas live
in ``hyperwalk.core.config`` and are loaded lazily.
"""

# Exceptions
from .exceptions import (
    HyperWalkError,
    IndexOutOfRangeError,
    InvalidValueError,
    SamplingExhaustedError,
    SpaceDefinitionError,
    SpaceExhaustedError,
    WalkerStateError,
)

# Input/Output Utilities
from .io import load_config_from_yaml, save_config_as_yaml

# Logging
from .logger import Logger, LogStyle, log_point, log_walker_summary

# Constants & Paths
from .paths import LOGGER_NAME, LOGS_ROOT, PROJECT_ROOT, get_project_root

__all__ = [
    # Exceptions
    "HyperWalkError",
    "SpaceDefinitionError",
    "IndexOutOfRangeError",
    "SpaceExhaustedError",
    "SamplingExhaustedError",
    "WalkerStateError",
    "InvalidValueError",
    # I/O
    "save_config_as_yaml",
    "load_config_from_yaml",
    # Logging
    "Logger",
    "LogStyle",
    "log_walker_summary",
    "log_point",
    # Constants & Paths
    "PROJECT_ROOT",
    "LOGS_ROOT",
    "LOGGER_NAME",
    "get_project_root",
]
