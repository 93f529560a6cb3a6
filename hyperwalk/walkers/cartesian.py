"""
Cartesian Space Walker.

Visits every point of the space exactly once in mixed-radix (odometer) order:
the first dimension is the fastest-varying digit, so the traversal matches
nested loops with the first dimension innermost. For radices (2, 3):

    (0,0) (1,0) (0,1) (1,1) (0,2) (1,2)

``has_next`` and the advance step share ``find_carry_index``, which keeps
the predicate and the actual step in agreement.
"""

# Standard Imports
from typing import Optional, Sequence

# Internal Imports
from hyperwalk.core import SpaceExhaustedError
from hyperwalk.space import Point

from .base import HyperSpaceIterator, SpaceWalker


def find_carry_index(point: Sequence[int], radices: Sequence[int]) -> Optional[int]:
    """First dimension whose index can still be incremented, or None."""
    for i, (index, radix) in enumerate(zip(point, radices)):
        if index + 1 < radix:
            return i
    return None


def next_point(point: Sequence[int], radices: Sequence[int]) -> Optional[Point]:
    """
    Odometer successor of ``point``: reset every digit below the carry index,
    increment the carry digit, keep the rest. None once the space is done.
    """
    i = find_carry_index(point, radices)
    if i is None:
        return None
    return (0,) * i + (point[i] + 1,) + tuple(point[i + 1 :])


class _CartesianIterator(HyperSpaceIterator):
    def __init__(self, walker: "CartesianWalker"):
        super().__init__(walker)
        self._radices = walker.space.radices

    def _advance(self) -> Point:
        if self._current_point is None:
            return (0,) * len(self._radices)
        successor = next_point(self._current_point, self._radices)
        if successor is None:
            raise SpaceExhaustedError("No more elements to explore in hyper-space!")
        return successor

    def has_next(self, previous_result=None) -> bool:
        if self._current_point is None:
            return True
        return find_carry_index(self._current_point, self._radices) is not None


class CartesianWalker(SpaceWalker):
    """
    Exhaustive walker producing each point of the space once.

    Example:
        >>> walker = CartesianWalker(base_cfg, space, PydanticBuilderFactory())
        >>> configs = list(walker.iterator())
        >>> len(configs) == walker.size
        True
    """

    def iterator(self) -> HyperSpaceIterator:
        return _CartesianIterator(self)
