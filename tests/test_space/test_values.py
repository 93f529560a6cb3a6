"""
Unit tests for tagged candidate values and their classification.
"""

# Standard Imports
from enum import Enum, IntEnum

# Third-Party Imports
import numpy as np
import pytest
from pydantic import ValidationError

# Internal Imports
from hyperwalk.space import (
    BooleanValue,
    CategoricalValue,
    EnumValue,
    NumericValue,
    as_hyper_value,
)


class Activation(str, Enum):
    RELU = "relu"
    GELU = "gelu"


class Depth(IntEnum):
    SHALLOW = 2
    DEEP = 8


@pytest.mark.unit
def test_bool_is_boolean_not_numeric():
    """Test booleans are classified before numbers."""
    value = as_hyper_value(True)

    assert isinstance(value, BooleanValue)
    assert value.raw is True


@pytest.mark.unit
@pytest.mark.parametrize("raw, expected", [(3, 3), (0.5, 0.5), (np.int64(4), 4), (np.float64(0.25), 0.25)])
def test_numbers_are_numeric(raw, expected):
    """Test Python and NumPy numbers become NumericValue with plain values."""
    value = as_hyper_value(raw)

    assert isinstance(value, NumericValue)
    assert value.raw == expected
    assert type(value.raw) in (int, float)


@pytest.mark.unit
def test_numpy_integer_becomes_python_int():
    """Test NumPy integers are unwrapped to int."""
    assert type(as_hyper_value(np.int32(7)).raw) is int


@pytest.mark.unit
@pytest.mark.parametrize("raw", ["relu", None, [64, 64], (1, 2)])
def test_other_values_are_categorical(raw):
    """Test strings, None and sequences become CategoricalValue unchanged."""
    value = as_hyper_value(raw)

    assert isinstance(value, CategoricalValue)
    assert value.raw == raw


@pytest.mark.unit
def test_string_enum_member_becomes_enum_value():
    """Test str-valued Enum members carry their choices."""
    value = as_hyper_value(Activation.GELU)

    assert isinstance(value, EnumValue)
    assert value.raw == "gelu"
    assert value.choices == ("relu", "gelu")


@pytest.mark.unit
def test_non_string_enum_member_is_categorical():
    """Test IntEnum members are kept as categorical values."""
    value = as_hyper_value(Depth.DEEP)

    assert isinstance(value, CategoricalValue)
    assert value.raw is Depth.DEEP


@pytest.mark.unit
def test_tagged_mapping_is_validated():
    """Test mappings with a kind key are parsed as tagged values."""
    value = as_hyper_value({"kind": "enum", "value": "tanh", "choices": ["relu", "tanh"]})

    assert isinstance(value, EnumValue)
    assert value.raw == "tanh"


@pytest.mark.unit
def test_tagged_values_pass_through():
    """Test already tagged values are returned unchanged."""
    value = NumericValue(value=1)

    assert as_hyper_value(value) is value


@pytest.mark.unit
def test_enum_value_outside_choices_rejected():
    """Test EnumValue enforces membership in its choices."""
    with pytest.raises(ValidationError):
        EnumValue(value="swish", choices=("relu", "gelu"))

    with pytest.raises(ValidationError):
        as_hyper_value({"kind": "enum", "value": "swish", "choices": ["relu"]})


@pytest.mark.unit
def test_numeric_value_rejects_strings():
    """Test NumericValue is strict about its payload."""
    with pytest.raises(ValidationError):
        NumericValue(value="0.1")


@pytest.mark.unit
def test_values_are_frozen():
    """Test tagged values cannot be mutated."""
    value = NumericValue(value=1)

    with pytest.raises(ValidationError):
        value.value = 2
