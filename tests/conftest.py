"""
Pytest Configuration and Shared Fixtures for the HyperWalk Test Suite.

Provides:
- A small frozen Pydantic model standing in for a trainer configuration
- Hyperparameter spaces of a few shapes (2x3 grid, single point, mixed types)
- Builder factories wired to the test model
- Temporary YAML documents for loader tests

Fixtures are automatically discovered by pytest across all test modules.
"""

# Standard Imports
from typing import Literal, Optional

# Third-Party Imports
import pytest
from pydantic import BaseModel, ConfigDict, Field

# Internal Imports
from hyperwalk.builders import PydanticBuilderFactory
from hyperwalk.space import HyperParameterSpace


# CONFIGURATION MODEL
class OptimizerParams(BaseModel):
    """Nested section used to exercise dotted override paths."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    momentum: float = Field(default=0.9, ge=0.0, lt=1.0)
    nesterov: bool = False


class TrainParams(BaseModel):
    """Stand-in for a trainer configuration."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    learning_rate: float = Field(default=1e-3, gt=0.0, lt=1.0)
    batch_size: int = Field(default=32, ge=1)
    activation: Literal["relu", "gelu", "tanh"] = "relu"
    hidden_sizes: Optional[list] = None
    optimizer: OptimizerParams = Field(default_factory=OptimizerParams)


@pytest.fixture
def base_config():
    """Default trainer configuration."""
    return TrainParams()


@pytest.fixture
def builder_factory():
    """Builder factory with a nested mapping for momentum."""
    return PydanticBuilderFactory({"momentum": "optimizer.momentum"})


# SPACE FIXTURES
@pytest.fixture
def grid_2x3():
    """Two dimensions with radices (2, 3)."""
    return HyperParameterSpace.from_mapping(
        {
            "learning_rate": [0.01, 0.1],
            "batch_size": [16, 32, 64],
        }
    )


@pytest.fixture
def single_point_space():
    """Degenerate space with one dimension holding one value."""
    return HyperParameterSpace.from_mapping({"learning_rate": [0.05]})


@pytest.fixture
def mixed_space():
    """Three dimensions mixing numeric, enum-like and nested values."""
    return HyperParameterSpace.from_mapping(
        {
            "learning_rate": [1e-4, 1e-3, 1e-2],
            "activation": ["relu", "gelu", "tanh"],
            "momentum": [0.8, 0.9],
            "batch_size": [8, 16, 32, 64],
        }
    )


# YAML FIXTURES
@pytest.fixture
def space_yaml(tmp_path):
    """YAML document with walker settings and a hyperparameters section."""
    yaml_content = """
walker:
  strategy: random
  seed: 7
  max_retries: 50
telemetry:
  log_level: DEBUG
hyperparameters:
  learning_rate: [0.001, 0.01, 0.1]
  activation:
    - {kind: enum, value: relu, choices: [relu, gelu]}
    - {kind: enum, value: gelu, choices: [relu, gelu]}
  use_bias: [true, false]
"""
    yaml_file = tmp_path / "walk.yaml"
    yaml_file.write_text(yaml_content)
    return yaml_file
