"""
Telemetry Configuration Schema.

Controls where traversal logs go and how verbose they are.
"""

# Standard Imports
from typing import Optional

# Third-Party Imports
from pydantic import BaseModel, ConfigDict, Field

# Internal Imports
from .types import LogLevel, ValidatedPath


class TelemetryConfig(BaseModel):
    """
    Logging destination and verbosity.

    Attributes:
        log_dir: Directory for rotating log files (None = console only)
        log_level: Minimum level emitted by the engine logger
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    log_dir: Optional[ValidatedPath] = Field(default=None, description="Log directory")
    log_level: LogLevel = Field(default="INFO", description="Logging verbosity")
