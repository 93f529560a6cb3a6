"""
Typed Candidate Values.

Each candidate value of a dimension is wrapped in a small frozen Pydantic
model tagged by ``kind``. The tag keeps numeric, boolean, categorical and
enumerated-string candidates apart (``True`` is never mistaken for ``1``) and
lets YAML documents spell out a variant explicitly::

    activation:
      - {kind: enum, value: relu, choices: [relu, gelu, tanh]}
      - {kind: enum, value: gelu, choices: [relu, gelu, tanh]}

Plain Python values are classified by ``as_hyper_value``.
"""

# Standard Imports
import numbers
from enum import Enum
from typing import Annotated, Any, Literal, Tuple, Union

# Third-Party Imports
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    TypeAdapter,
    model_validator,
)


class _BaseHyperValue(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    @property
    def raw(self) -> Any:
        """Plain value handed to configuration builders."""
        return self.value


class NumericValue(_BaseHyperValue):
    """Integer or float candidate (booleans excluded)."""

    kind: Literal["numeric"] = "numeric"
    value: Union[StrictInt, StrictFloat]


class BooleanValue(_BaseHyperValue):
    """Boolean switch candidate."""

    kind: Literal["boolean"] = "boolean"
    value: StrictBool


class CategoricalValue(_BaseHyperValue):
    """Any other candidate: strings, None, lists such as layer widths."""

    kind: Literal["categorical"] = "categorical"
    value: Any


class EnumValue(_BaseHyperValue):
    """String candidate restricted to a declared set of choices."""

    kind: Literal["enum"] = "enum"
    value: str
    choices: Tuple[str, ...] = Field(min_length=1)

    @model_validator(mode="after")
    def _check_membership(self) -> "EnumValue":
        if self.value not in self.choices:
            raise ValueError(f"'{self.value}' is not one of {list(self.choices)}")
        return self


HyperValue = Annotated[
    Union[NumericValue, BooleanValue, CategoricalValue, EnumValue],
    Field(discriminator="kind"),
]

_HYPER_VALUE_ADAPTER: TypeAdapter = TypeAdapter(HyperValue)


def as_hyper_value(raw: Any) -> _BaseHyperValue:
    """
    Classify a plain Python value into its tagged variant.

    Rules, in order:
        - already tagged values are returned unchanged
        - mappings carrying a ``kind`` key are validated as a tagged value
        - ``bool`` becomes BooleanValue (checked before numbers)
        - integral and real numbers (NumPy scalars included) become NumericValue
        - members of a string-valued ``Enum`` become EnumValue
        - anything else becomes CategoricalValue

    Raises:
        pydantic.ValidationError: If an explicit tagged mapping is invalid
    """
    if isinstance(raw, _BaseHyperValue):
        return raw
    if isinstance(raw, dict) and "kind" in raw:
        return _HYPER_VALUE_ADAPTER.validate_python(raw)
    if isinstance(raw, bool):
        return BooleanValue(value=raw)
    if isinstance(raw, Enum):
        if isinstance(raw.value, str):
            return EnumValue(value=raw.value, choices=tuple(m.value for m in type(raw)))
        return CategoricalValue(value=raw)
    if isinstance(raw, numbers.Integral):
        return NumericValue(value=int(raw))
    if isinstance(raw, numbers.Real):
        return NumericValue(value=float(raw))
    return CategoricalValue(value=raw)
