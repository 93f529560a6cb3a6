"""
Hyperparameter Space Package.

Static description of the grid being explored:
    - HyperParameterSpace: Ordered dimensions, size and index helpers
    - Dimension: One named hyperparameter with its candidates
    - Tagged candidate values (numeric, boolean, categorical, enum)
"""

from .space import SPACE_SECTION, Dimension, HyperParameterSpace, Point, RawValues
from .values import (
    BooleanValue,
    CategoricalValue,
    EnumValue,
    HyperValue,
    NumericValue,
    as_hyper_value,
)

__all__ = [
    "HyperParameterSpace",
    "Dimension",
    "Point",
    "RawValues",
    "SPACE_SECTION",
    "HyperValue",
    "NumericValue",
    "BooleanValue",
    "CategoricalValue",
    "EnumValue",
    "as_hyper_value",
]
