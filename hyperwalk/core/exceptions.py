"""
Exception Hierarchy.

Every error raised by the engine derives from HyperWalkError and, where a
builtin category fits, from that builtin too, so callers may catch either.
"""

from typing import Any


class HyperWalkError(Exception):
    """Base exception for all engine errors."""


class SpaceDefinitionError(HyperWalkError, ValueError):
    """The hyperparameter space description is malformed."""


class IndexOutOfRangeError(HyperWalkError, IndexError):
    """A point references an index outside a dimension's bounds."""


class SpaceExhaustedError(HyperWalkError, LookupError):
    """No further point remains to be visited."""


class SamplingExhaustedError(SpaceExhaustedError):
    """More unique random samples were requested than the space holds."""


class WalkerStateError(HyperWalkError, RuntimeError):
    """An iterator was queried in a state where the answer is undefined."""


class InvalidValueError(HyperWalkError, ValueError):
    """
    A builder rejected a candidate value for a hyperparameter.

    Attributes:
        name: Hyperparameter name
        value: Rejected value
        reason: Human readable cause
    """

    def __init__(self, name: str, value: Any, reason: str = ""):
        self.name = name
        self.value = value
        self.reason = reason
        message = f"Invalid value {value!r} for hyperparameter '{name}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
