"""
Space Walkers.

Traversal strategies over a HyperParameterSpace:
    - CartesianWalker: every point once, odometer order
    - RandomDiscreteWalker: uniform sampling without replacement
    - build_walker: strategy selection from WalkerConfig
"""

from .base import HyperSpaceIterator, SpaceWalker
from .cartesian import CartesianWalker, find_carry_index, next_point
from .factory import WALKER_REGISTRY, build_walker
from .random_discrete import RandomDiscreteWalker

__all__ = [
    "SpaceWalker",
    "HyperSpaceIterator",
    "CartesianWalker",
    "RandomDiscreteWalker",
    "WALKER_REGISTRY",
    "build_walker",
    "find_carry_index",
    "next_point",
]
