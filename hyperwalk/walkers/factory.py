"""
Walker Factory.

Maps strategy names to walker classes and builds a walker from a
WalkerConfig, the same way a sampler is picked from a registry by name.
"""

# Standard Imports
from typing import Any, Dict, Type

# Internal Imports
from hyperwalk.builders import ConfigurationBuilderFactory
from hyperwalk.core import log_walker_summary
from hyperwalk.core.config.walker_config import WalkerConfig
from hyperwalk.space import HyperParameterSpace

from .base import SpaceWalker
from .cartesian import CartesianWalker
from .random_discrete import RandomDiscreteWalker

WALKER_REGISTRY: Dict[str, Type[SpaceWalker]] = {
    "cartesian": CartesianWalker,
    "random": RandomDiscreteWalker,
}
"""Registry mapping strategy names to walker classes."""


def build_walker(
    cfg: WalkerConfig,
    base_configuration: Any,
    space: HyperParameterSpace,
    builder_factory: ConfigurationBuilderFactory,
) -> SpaceWalker:
    """
    Create the walker selected by ``cfg.strategy``.

    Args:
        cfg: Strategy selection and sampling controls
        base_configuration: Template every resolution starts from
        space: Hyperparameter space to walk
        builder_factory: Opens one builder per resolved configuration

    Returns:
        Configured walker

    Raises:
        ValueError: If the strategy is not in WALKER_REGISTRY

    Example:
        >>> walker = build_walker(WalkerConfig(strategy="random", seed=3), base, space, factory)
        >>> isinstance(walker, RandomDiscreteWalker)
        True
    """
    walker_cls = WALKER_REGISTRY.get(cfg.strategy)
    if walker_cls is None:
        raise ValueError(
            f"Unknown walker strategy: {cfg.strategy}. "
            f"Valid options: {list(WALKER_REGISTRY.keys())}"
        )

    if walker_cls is RandomDiscreteWalker:
        walker: SpaceWalker = RandomDiscreteWalker(
            base_configuration, space, builder_factory, seed=cfg.seed, max_retries=cfg.max_retries
        )
    else:
        walker = walker_cls(base_configuration, space, builder_factory)

    log_walker_summary(walker, cfg.strategy)
    return walker
