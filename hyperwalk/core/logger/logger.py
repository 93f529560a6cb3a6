"""
Logging Management Module

Configures the engine-wide logger. Walkers, builders and loaders all log
through ``logging.getLogger(LOGGER_NAME)``; this module decides where those
records go.

Key Features:
    - Configure-once semantics per logger name, with explicit reconfiguration
      when a log directory is supplied
    - Console output on stdout, optional rotating file output
    - String level bridging ("DEBUG", "INFO", ...) with a DEBUG=1 override
"""

# Standard Imports
import logging
import os
import sys
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, Final, Optional

# Internal Imports
from ..paths import LOGGER_NAME


# LOGGER CLASS
class Logger:
    """
    Owns handler configuration for a named logger.

    The first instantiation for a name installs a console handler. Later
    instantiations are no-ops unless ``log_dir`` is given, in which case the
    handlers are rebuilt and a rotating file handler is added. The path of the
    most recent log file is kept on the class for inspection.

    Attributes:
        name (str): Logger identifier
        log_dir (Optional[Path]): Directory for log files (None = console only)
        log_to_file (bool): Whether a file handler is installed
        level (int): Numeric logging level
        max_bytes (int): Rotation threshold in bytes
        backup_count (int): Rotated files to keep
        logger (logging.Logger): Underlying logger

    Example:
        >>> log = Logger.setup(name=LOGGER_NAME, log_dir=Path("./logs"), level="DEBUG")
        >>> log.debug("walker ready")
    """

    _configured_names: Final[Dict[str, bool]] = {}
    _active_log_file: Optional[Path] = None

    def __init__(
        self,
        name: str = LOGGER_NAME,
        log_dir: Optional[Path] = None,
        log_to_file: bool = True,
        level: int = logging.INFO,
        max_bytes: int = 5 * 1024 * 1024,
        backup_count: int = 5,
    ):
        self.name = name
        self.log_dir = log_dir
        self.log_to_file = log_to_file and (log_dir is not None)
        self.level = level
        self.max_bytes = max_bytes
        self.backup_count = backup_count

        self.logger = logging.getLogger(name)

        if name not in Logger._configured_names or log_dir is not None:
            self._setup_logger()
            Logger._configured_names[name] = True

    def _setup_logger(self) -> None:
        """
        Rebuilds the handler set: stdout always, rotating file when a
        directory is known. Existing handlers are closed first.
        """
        formatter = logging.Formatter(
            "%(asctime)s - %(levelname)s - %(message)s",
            "%Y-%m-%d %H:%M:%S",
        )

        self.logger.setLevel(self.level)
        self.logger.propagate = False

        for handler in self.logger.handlers[:]:
            handler.close()
            self.logger.removeHandler(handler)

        console_h = logging.StreamHandler(sys.stdout)
        console_h.setFormatter(formatter)
        self.logger.addHandler(console_h)

        if self.log_to_file and self.log_dir:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            timestamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
            filename = self.log_dir / f"{self.name}_{timestamp}.log"

            file_h = RotatingFileHandler(
                filename, maxBytes=self.max_bytes, backupCount=self.backup_count, encoding="utf-8"
            )
            file_h.setFormatter(formatter)
            self.logger.addHandler(file_h)

            Logger._active_log_file = filename

    def get_logger(self) -> logging.Logger:
        """Returns the configured ``logging.Logger``."""
        return self.logger

    @classmethod
    def get_log_file(cls) -> Optional[Path]:
        """Returns the most recently opened log file, or None."""
        return cls._active_log_file

    @classmethod
    def setup(
        cls, name: str = LOGGER_NAME, log_dir: Optional[Path] = None, level: str = "INFO", **kwargs
    ) -> logging.Logger:
        """
        Configures a logger from a string level.

        Args:
            name: Logger identifier
            log_dir: Directory for log files (None = console only)
            level: One of DEBUG, INFO, WARNING, ERROR, CRITICAL
            **kwargs: Forwarded to the constructor (max_bytes, backup_count, ...)

        Returns:
            The configured ``logging.Logger``

        Environment Variables:
            DEBUG: "1" forces the DEBUG level
        """
        if os.getenv("DEBUG") == "1":
            numeric_level = logging.DEBUG
        else:
            numeric_level = getattr(logging, level.upper(), logging.INFO)

        return cls(name=name, log_dir=log_dir, level=numeric_level, **kwargs).get_logger()


# Bootstrap instance (console only), reconfigured through Logger.setup()
logger: Final[logging.Logger] = Logger().get_logger()
