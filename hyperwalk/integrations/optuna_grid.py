"""
Optuna Grid Interop.

Exposes a HyperParameterSpace as an Optuna grid so the same space definition
can drive ``optuna.samplers.GridSampler`` when a study is preferred over a
walker. Only scalar candidates are accepted, matching what GridSampler
stores in its trial system attributes.
"""

# Standard Imports
from typing import Dict, List, Optional, Union

# Third-Party Imports
from optuna.samplers import GridSampler

# Internal Imports
from hyperwalk.core import SpaceDefinitionError
from hyperwalk.space import HyperParameterSpace

GridValue = Union[str, float, int, bool, None]

_GRID_TYPES = (str, float, int, bool, type(None))


def to_optuna_search_space(space: HyperParameterSpace) -> Dict[str, List[GridValue]]:
    """
    Convert a space into the mapping GridSampler expects.

    Raises:
        SpaceDefinitionError: If a candidate is not a str, number, bool or None
    """
    search_space: Dict[str, List[GridValue]] = {}
    for name, values in space.to_mapping().items():
        for value in values:
            if not isinstance(value, _GRID_TYPES):
                raise SpaceDefinitionError(
                    f"Candidate {value!r} of '{name}' cannot be used in an Optuna grid"
                )
        search_space[name] = values
    return search_space


def build_grid_sampler(space: HyperParameterSpace, seed: Optional[int] = None) -> GridSampler:
    """Create a GridSampler covering every point of ``space``."""
    return GridSampler(to_optuna_search_space(space), seed=seed)
