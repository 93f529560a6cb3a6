"""
Hyperparameter Space Definition.

A HyperParameterSpace is an ordered collection of dimensions, each one a name
plus a non-empty ordered tuple of candidate values. Points of the space are
index tuples with one index per dimension; the first dimension is the
fastest-varying digit whenever points are ordered (see ``point_at``).

The space is immutable once built and shared read-only by every walker and
iterator that traverses it.
"""

# Standard Imports
import logging
import math
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Sequence, Tuple

# Third-Party Imports
from pydantic import BaseModel, ConfigDict, Field, ValidationError

# Internal Imports
from hyperwalk.core import (
    LOGGER_NAME,
    IndexOutOfRangeError,
    SpaceDefinitionError,
    load_config_from_yaml,
    save_config_as_yaml,
)

from .values import HyperValue, as_hyper_value

logger = logging.getLogger(LOGGER_NAME)

Point = Tuple[int, ...]
RawValues = Tuple[Any, ...]

SPACE_SECTION = "hyperparameters"


class Dimension(BaseModel):
    """
    One hyperparameter with its ordered candidate values.

    Duplicate candidates are kept: they occupy distinct indices and count
    towards the size of the space.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(min_length=1)
    values: Tuple[HyperValue, ...] = Field(min_length=1)

    @property
    def raw_values(self) -> Tuple[Any, ...]:
        return tuple(v.raw for v in self.values)

    def __len__(self) -> int:
        return len(self.values)


class HyperParameterSpace:
    """
    Immutable mapping from dimension name to candidate values.

    Attributes:
        dimensions: Dimensions in their fixed indexing order
        names: Dimension names in the same order
        radices: Number of candidates per dimension
        size: Total number of points, the product of the radices

    Example:
        >>> space = HyperParameterSpace.from_mapping(
        ...     {"learning_rate": [1e-3, 1e-2], "batch_size": [16, 32, 64]}
        ... )
        >>> space.size
        6
        >>> space.values_at((1, 2))
        (0.01, 64)
    """

    def __init__(self, dimensions: Iterable[Dimension]):
        dims = tuple(dimensions)
        if not dims:
            raise SpaceDefinitionError("A hyperparameter space needs at least one dimension")

        names = tuple(d.name for d in dims)
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise SpaceDefinitionError(f"Duplicate dimension names: {duplicates}")

        self._dimensions: Tuple[Dimension, ...] = dims
        self._names: Tuple[str, ...] = names
        self._radices: Tuple[int, ...] = tuple(len(d) for d in dims)
        # Python ints are unbounded, so the product is exact for any grid
        self._size: int = math.prod(self._radices)

    # CONSTRUCTORS
    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Sequence[Any]]) -> "HyperParameterSpace":
        """
        Build a space from ``{name: [candidate, ...]}``, preserving key order.

        Raises:
            SpaceDefinitionError: On empty or non-sequence candidate lists, or
                on candidates that fail tagged-value validation
        """
        dimensions = []
        for name, candidates in mapping.items():
            if isinstance(candidates, (str, bytes)) or not isinstance(candidates, Sequence):
                raise SpaceDefinitionError(
                    f"Candidates for '{name}' must be a list, got {type(candidates).__name__}"
                )
            if len(candidates) == 0:
                raise SpaceDefinitionError(f"Dimension '{name}' has no candidate values")
            try:
                values = tuple(as_hyper_value(c) for c in candidates)
                dimensions.append(Dimension(name=name, values=values))
            except ValidationError as e:
                raise SpaceDefinitionError(f"Invalid definition for dimension '{name}': {e}") from e
        return cls(dimensions)

    @classmethod
    def from_yaml(cls, yaml_path: Path, section: str = SPACE_SECTION) -> "HyperParameterSpace":
        """
        Load a space from YAML.

        The candidates are read from ``section`` when the document has it,
        otherwise the whole document is taken as the mapping.

        Raises:
            FileNotFoundError: If the file does not exist
            SpaceDefinitionError: If the document is not a mapping of lists
        """
        document = load_config_from_yaml(yaml_path)
        if isinstance(document, dict) and section in document:
            document = document[section]
        if not isinstance(document, dict):
            raise SpaceDefinitionError(f"{yaml_path} does not contain a hyperparameter mapping")

        space = cls.from_mapping(document)
        logger.info(f"Loaded {len(space.names)} dimensions ({space.size} points) from {yaml_path.name}")
        return space

    # EXPORT
    def to_mapping(self) -> Dict[str, List[Any]]:
        """Plain ``{name: [raw values]}`` view in dimension order."""
        return {d.name: list(d.raw_values) for d in self._dimensions}

    def to_yaml(self, yaml_path: Path, section: str = SPACE_SECTION) -> Path:
        """Write the plain mapping under ``section``."""
        return save_config_as_yaml({section: self.to_mapping()}, yaml_path)

    # INTROSPECTION
    @property
    def dimensions(self) -> Tuple[Dimension, ...]:
        return self._dimensions

    @property
    def names(self) -> Tuple[str, ...]:
        return self._names

    @property
    def radices(self) -> Tuple[int, ...]:
        return self._radices

    @property
    def size(self) -> int:
        return self._size

    def dimension(self, name: str) -> Dimension:
        """Return the dimension called ``name``; KeyError if absent."""
        for d in self._dimensions:
            if d.name == name:
                return d
        raise KeyError(name)

    # INDEXING
    def validate_point(self, point: Sequence[int]) -> Point:
        """
        Check arity and bounds of ``point`` and return it as a tuple.

        Raises:
            IndexOutOfRangeError: On wrong arity or an index outside [0, n_i)
        """
        if len(point) != len(self._radices):
            raise IndexOutOfRangeError(
                f"Point {tuple(point)} has {len(point)} indices, space has "
                f"{len(self._radices)} dimensions"
            )
        for name, index, radix in zip(self._names, point, self._radices):
            if not 0 <= index < radix:
                raise IndexOutOfRangeError(
                    f"Index {index} out of range for dimension '{name}' (size {radix})"
                )
        return tuple(int(i) for i in point)

    def values_at(self, point: Sequence[int]) -> RawValues:
        """Raw candidate values selected by ``point``."""
        point = self.validate_point(point)
        return tuple(d.values[j].raw for d, j in zip(self._dimensions, point))

    def as_overrides(self, point: Sequence[int]) -> List[Tuple[str, Any]]:
        """``(name, raw value)`` pairs for ``point`` in dimension order."""
        return list(zip(self._names, self.values_at(point)))

    def point_at(self, ordinal: int) -> Point:
        """
        Decode an ordinal in ``[0, size)`` into a point, first dimension
        fastest. ``point_at(0)`` is the all-zero point and consecutive
        ordinals follow odometer order.

        Raises:
            IndexOutOfRangeError: If ordinal is outside [0, size)
        """
        if not 0 <= ordinal < self._size:
            raise IndexOutOfRangeError(f"Ordinal {ordinal} out of range for space of size {self._size}")
        indices = []
        for radix in self._radices:
            ordinal, digit = divmod(ordinal, radix)
            indices.append(digit)
        return tuple(indices)

    def __repr__(self) -> str:
        dims = ", ".join(f"{n}[{r}]" for n, r in zip(self._names, self._radices))
        return f"HyperParameterSpace({dims}; size={self._size})"
