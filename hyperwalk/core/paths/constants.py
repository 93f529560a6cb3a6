"""
Project Constants.

Centralizes the identifiers shared across the engine: the project root used
to resolve relative resources and the logger name every module attaches to.
"""

# Standard Imports
from pathlib import Path
from typing import Final


# PATH CALCULATIONS
def get_project_root() -> Path:
    """
    Returns the absolute path to the project root directory.

    The root is assumed to be three levels above this file
    (hyperwalk/core/paths/constants.py).
    """
    return Path(__file__).resolve().parent.parent.parent.parent


PROJECT_ROOT: Final[Path] = get_project_root()

# Default directory for rotating log files when file logging is enabled
LOGS_ROOT: Final[Path] = (PROJECT_ROOT / "logs").resolve()

# LOGGING
LOGGER_NAME: Final[str] = "HyperWalk"
