"""
HyperWalk: hyperparameter-space traversal.

Turns a grid of candidate hyperparameter values and a base configuration into
a sequence of resolved configurations, either exhaustively in odometer order
or by seeded random sampling without replacement.

Typical Usage:
    >>> from hyperwalk import HyperParameterSpace, CartesianWalker, PydanticBuilderFactory
    >>> space = HyperParameterSpace.from_mapping({"learning_rate": [1e-3, 1e-2]})
    >>> walker = CartesianWalker(base_cfg, space, PydanticBuilderFactory())
    >>> for cfg in walker.iterator():
    ...     train(cfg)
"""

__version__ = "0.1.0"

from .builders import (
    ConfigurationBuilder,
    ConfigurationBuilderFactory,
    PydanticBuilderFactory,
    PydanticConfigBuilder,
    with_overrides,
)
from .core import (
    HyperWalkError,
    IndexOutOfRangeError,
    InvalidValueError,
    SamplingExhaustedError,
    SpaceDefinitionError,
    SpaceExhaustedError,
    WalkerStateError,
)
from .space import Dimension, HyperParameterSpace, Point, RawValues
from .walkers import (
    WALKER_REGISTRY,
    CartesianWalker,
    HyperSpaceIterator,
    RandomDiscreteWalker,
    SpaceWalker,
    build_walker,
)

__all__ = [
    "__version__",
    # Space
    "HyperParameterSpace",
    "Dimension",
    "Point",
    "RawValues",
    # Builders
    "ConfigurationBuilder",
    "ConfigurationBuilderFactory",
    "PydanticConfigBuilder",
    "PydanticBuilderFactory",
    "with_overrides",
    # Walkers
    "SpaceWalker",
    "HyperSpaceIterator",
    "CartesianWalker",
    "RandomDiscreteWalker",
    "WALKER_REGISTRY",
    "build_walker",
    # Errors
    "HyperWalkError",
    "SpaceDefinitionError",
    "IndexOutOfRangeError",
    "SpaceExhaustedError",
    "SamplingExhaustedError",
    "WalkerStateError",
    "InvalidValueError",
]
