"""
Space Walker Contract.

A SpaceWalker owns a hyperparameter space, a base configuration and a builder
factory. It hands out HyperSpaceIterators, each with private traversal state,
that turn points of the space into resolved configurations.

Iteration contract:
    - ``has_next(previous_result)`` tells whether ``next_configuration`` would
      succeed; it never consumes randomness or mutates state
    - ``next_configuration(previous_result)`` advances and resolves the next
      point, or raises SpaceExhaustedError
    - ``current_raw_values()`` returns the values of the last emitted point

``previous_result`` is the outcome of evaluating the previously returned
configuration. The current strategies ignore it; it is part of the signature
so that strategies which adapt to past results can share the contract.

Iterators also implement the Python iterator protocol, so a full traversal is
simply ``for cfg in walker.iterator(): ...``.
"""

# Standard Imports
from abc import ABC, abstractmethod
from typing import Any, Optional

# Internal Imports
from hyperwalk.builders import ConfigurationBuilderFactory
from hyperwalk.core import WalkerStateError, log_point
from hyperwalk.space import HyperParameterSpace, Point, RawValues


class HyperSpaceIterator(ABC):
    """
    Pull-based traversal over a walker's space.

    Subclasses implement ``_advance`` (choose the next point or raise
    SpaceExhaustedError) and ``has_next``. Resolution through the builder,
    bookkeeping and logging are shared here.

    Attributes:
        current_point: Last emitted point, None before the first advance
        emitted: Number of points emitted so far
    """

    def __init__(self, walker: "SpaceWalker"):
        self._walker = walker
        self._current_point: Optional[Point] = None
        self._emitted = 0

    @property
    def walker(self) -> "SpaceWalker":
        return self._walker

    @property
    def current_point(self) -> Optional[Point]:
        return self._current_point

    @property
    def emitted(self) -> int:
        return self._emitted

    @abstractmethod
    def _advance(self) -> Point:
        """Select the next point; raise SpaceExhaustedError if none remains."""

    @abstractmethod
    def has_next(self, previous_result: Any = None) -> bool:
        """True iff the next call to ``next_configuration`` would succeed."""

    def next_configuration(self, previous_result: Any = None) -> Any:
        """
        Advance to the next point and resolve it into a configuration.

        The point counts as emitted even if the builder rejects it, so
        ``current_raw_values()`` reports the values that were refused.

        Args:
            previous_result: Outcome of the previous configuration (unused)

        Returns:
            Configuration produced by the walker's builder

        Raises:
            SpaceExhaustedError: If no point remains
            InvalidValueError: If the builder rejects a value
        """
        point = self._advance()
        self._current_point = point
        self._emitted += 1

        log_point(self._emitted, self._walker.size, self._walker.names, self._walker.space.values_at(point))
        return self._walker.resolve(point)

    def current_raw_values(self) -> RawValues:
        """
        Raw values of the point returned by the last ``next_configuration``.

        Raises:
            WalkerStateError: If called before the first advance
        """
        if self._current_point is None:
            raise WalkerStateError("No point emitted yet; call next_configuration() first")
        return self._walker.space.values_at(self._current_point)

    def __iter__(self) -> "HyperSpaceIterator":
        return self

    def __next__(self) -> Any:
        if not self.has_next():
            raise StopIteration
        return self.next_configuration()


class SpaceWalker(ABC):
    """
    Base class of traversal strategies.

    Attributes:
        base_configuration: Template every resolution starts from (never mutated)
        space: Hyperparameter space being walked
        builder_factory: Opens one builder per resolved configuration
        names: Dimension names, in the order overrides are applied
        size: Number of points in the space
    """

    def __init__(
        self,
        base_configuration: Any,
        space: HyperParameterSpace,
        builder_factory: ConfigurationBuilderFactory,
    ):
        self._base_configuration = base_configuration
        self._space = space
        self._builder_factory = builder_factory

    @abstractmethod
    def iterator(self) -> HyperSpaceIterator:
        """Return a fresh iterator with its own traversal state."""

    @property
    def base_configuration(self) -> Any:
        return self._base_configuration

    @property
    def space(self) -> HyperParameterSpace:
        return self._space

    @property
    def builder_factory(self) -> ConfigurationBuilderFactory:
        return self._builder_factory

    @property
    def names(self):
        return self._space.names

    @property
    def size(self) -> int:
        return self._space.size

    def resolve(self, point: Point) -> Any:
        """
        Build the configuration for ``point`` with a fresh builder.

        Overrides are set in dimension order.
        """
        builder = self._builder_factory(self._base_configuration)
        for name, value in self._space.as_overrides(point):
            builder.set(name, value)
        return builder.build()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._space!r})"
