"""
Telemetry Package.

Centralizes logger configuration and the formatting helpers used to report
traversal progress.

Available Components:
    - Logger: Stream and rotating-file logging initialization
    - LogStyle: Unified logging style constants
    - log_walker_summary / log_point: Traversal progress logging
"""

from .logger import Logger
from .progress import log_point, log_walker_summary
from .styles import LogStyle

__all__ = [
    "Logger",
    "LogStyle",
    "log_point",
    "log_walker_summary",
]
