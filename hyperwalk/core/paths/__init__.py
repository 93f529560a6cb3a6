"""
Filesystem Authority and Shared Constants.

Exposes the project root, the default log directory and the logger name
used by every module of the engine.
"""

from .constants import LOGGER_NAME, LOGS_ROOT, PROJECT_ROOT, get_project_root

__all__ = [
    "PROJECT_ROOT",
    "LOGS_ROOT",
    "LOGGER_NAME",
    "get_project_root",
]
