"""
Random Discrete Space Walker.

Samples points uniformly at random without replacement. Each candidate point
is drawn one index per dimension; a point already emitted by the iterator is
discarded and redrawn whole. The set of emitted points is compared by exact
tuple equality.

Redraws are bounded: after ``max_retries`` consecutive duplicates the iterator
stops drawing blindly and picks uniformly among the points it has not
emitted yet, by counting through the space in odometer order. Once every
point has been emitted, ``next_configuration`` raises SamplingExhaustedError
without drawing.

Every iterator owns a ``numpy.random.Generator`` seeded with the walker's
seed, so iterators never share random state and each one replays the same
sequence for the same seed and space.
"""

# Standard Imports
import logging
from typing import Any, FrozenSet, Set

# Third-Party Imports
import numpy as np

# Internal Imports
from hyperwalk.builders import ConfigurationBuilderFactory
from hyperwalk.core import LOGGER_NAME, SamplingExhaustedError
from hyperwalk.core.config.walker_config import DEFAULT_MAX_RETRIES, DEFAULT_SEED
from hyperwalk.space import HyperParameterSpace, Point

from .base import HyperSpaceIterator, SpaceWalker

logger = logging.getLogger(LOGGER_NAME)


class _RandomDiscreteIterator(HyperSpaceIterator):
    def __init__(self, walker: "RandomDiscreteWalker"):
        super().__init__(walker)
        self._rng = np.random.default_rng(walker.seed)
        self._radices = np.asarray(walker.space.radices, dtype=np.int64)
        self._visited: Set[Point] = set()

    @property
    def visited(self) -> FrozenSet[Point]:
        return frozenset(self._visited)

    def _draw(self) -> Point:
        return tuple(int(j) for j in self._rng.integers(0, self._radices))

    def _pick_unvisited(self) -> Point:
        """Uniform choice among points not emitted yet, in odometer order."""
        space = self._walker.space
        target = int(self._rng.integers(0, space.size - len(self._visited)))
        for ordinal in range(space.size):
            point = space.point_at(ordinal)
            if point in self._visited:
                continue
            if target == 0:
                return point
            target -= 1
        raise SamplingExhaustedError("No unvisited point left in hyper-space")  # pragma: no cover

    def _advance(self) -> Point:
        size = self._walker.size
        if len(self._visited) >= size:
            raise SamplingExhaustedError(
                f"All {size} points of the hyper-space have already been sampled"
            )

        max_retries = self._walker.max_retries
        duplicates = 0
        point = self._draw()
        while point in self._visited:
            duplicates += 1
            if duplicates > max_retries:
                logger.debug(
                    f"{duplicates} duplicate draws ({len(self._visited)}/{size} visited), "
                    "picking among unvisited points"
                )
                point = self._pick_unvisited()
                break
            point = self._draw()

        self._visited.add(point)
        return point

    def has_next(self, previous_result: Any = None) -> bool:
        return self._emitted < self._walker.size


class RandomDiscreteWalker(SpaceWalker):
    """
    Walker drawing random points of the space without repetition.

    Args:
        base_configuration: Template every resolution starts from
        space: Hyperparameter space being walked
        builder_factory: Opens one builder per resolved configuration
        seed: Seed for every iterator's generator (default 123456)
        max_retries: Consecutive duplicate draws before the exhaustive fallback

    Example:
        >>> walker = RandomDiscreteWalker(base_cfg, space, PydanticBuilderFactory(), seed=7)
        >>> it = walker.iterator()
        >>> first = it.next_configuration()
    """

    def __init__(
        self,
        base_configuration: Any,
        space: HyperParameterSpace,
        builder_factory: ConfigurationBuilderFactory,
        seed: int = DEFAULT_SEED,
        max_retries: int = DEFAULT_MAX_RETRIES,
    ):
        super().__init__(base_configuration, space, builder_factory)
        if max_retries < 0:
            raise ValueError(f"max_retries must be >= 0, got {max_retries}")
        self._seed = seed
        self._max_retries = max_retries

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def max_retries(self) -> int:
        return self._max_retries

    def iterator(self) -> HyperSpaceIterator:
        return _RandomDiscreteIterator(self)
