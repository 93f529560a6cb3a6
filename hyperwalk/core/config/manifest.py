"""
Engine Configuration Manifest.

Aggregates the walker and telemetry sections into a single immutable object
and provides the YAML entry point used to load it.

Example YAML::

    walker:
      strategy: random
      seed: 7
    telemetry:
      log_level: DEBUG
"""

# Standard Imports
from pathlib import Path
from typing import Any, Dict

# Third-Party Imports
from pydantic import BaseModel, ConfigDict, Field

# Internal Imports
from ..io import load_config_from_yaml
from .telemetry_config import TelemetryConfig
from .walker_config import WalkerConfig


class Config(BaseModel):
    """
    Main manifest aggregating the engine sub-configurations.

    Attributes:
        walker: Traversal strategy and sampling controls
        telemetry: Logging destination and verbosity

    Example:
        >>> cfg = Config.from_yaml(Path("walk.yaml"))
        >>> cfg.walker.strategy
        'random'
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    walker: WalkerConfig = Field(default_factory=WalkerConfig)
    telemetry: TelemetryConfig = Field(default_factory=TelemetryConfig)

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> "Config":
        """
        Build a manifest from a YAML file.

        Only the ``walker`` and ``telemetry`` sections are read, so the same
        file may also carry a ``hyperparameters`` section for
        HyperParameterSpace.from_yaml().

        Raises:
            FileNotFoundError: If the file does not exist
            pydantic.ValidationError: If a section fails validation
        """
        raw: Dict[str, Any] = load_config_from_yaml(yaml_path) or {}
        sections = {k: raw[k] for k in ("walker", "telemetry") if k in raw}
        return cls.model_validate(sections)
