"""
Pydantic Configuration Builder.

Reference implementation of the builder contract for immutable Pydantic
models. Overrides never touch the base instance: the base is dumped to a
dict, overrides are written into the dict, and a new model is validated from
it. Validation failures are reported as InvalidValueError naming the
hyperparameter responsible.
"""

# Standard Imports
import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, TypeVar

# Third-Party Imports
from pydantic import BaseModel, ValidationError

# Internal Imports
from hyperwalk.core import LOGGER_NAME, InvalidValueError

logger = logging.getLogger(LOGGER_NAME)

ModelT = TypeVar("ModelT", bound=BaseModel)


def map_param_to_config_path(
    param_name: str, param_mapping: Optional[Mapping[str, str]] = None
) -> Tuple[str, ...]:
    """
    Map a hyperparameter name to its key path inside the dumped config.

    Names missing from ``param_mapping`` are used as-is; dots separate
    nested sections.

    Example:
        >>> map_param_to_config_path("lr", {"lr": "optimizer.learning_rate"})
        ('optimizer', 'learning_rate')
        >>> map_param_to_config_path("batch_size")
        ('batch_size',)
    """
    target = (param_mapping or {}).get(param_name, param_name)
    return tuple(target.split("."))


def _apply_override(config_dict: Dict[str, Any], path: Tuple[str, ...], name: str, value: Any) -> None:
    """Write ``value`` at ``path`` (in place); the path must already exist."""
    node = config_dict
    for key in path[:-1]:
        child = node.get(key) if isinstance(node, dict) else None
        if not isinstance(child, dict):
            raise InvalidValueError(name, value, f"no config section '{'.'.join(path[:-1])}'")
        node = child
    if path[-1] not in node:
        raise InvalidValueError(name, value, f"no config field '{'.'.join(path)}'")
    node[path[-1]] = value


def _blame(
    error: ValidationError, overrides: Sequence[Tuple[str, Any]], paths: Sequence[Tuple[str, ...]]
) -> InvalidValueError:
    """Attribute a validation error to the override whose path it hits."""
    for detail in error.errors():
        loc = tuple(str(part) for part in detail.get("loc", ()))
        for (name, value), path in zip(overrides, paths):
            if loc[: len(path)] == path:
                return InvalidValueError(name, value, detail.get("msg", str(error)))
    names = ", ".join(name for name, _ in overrides)
    return InvalidValueError(names, tuple(v for _, v in overrides), str(error))


def with_overrides(
    base: ModelT,
    overrides: Sequence[Tuple[str, Any]],
    param_mapping: Optional[Mapping[str, str]] = None,
) -> ModelT:
    """
    Return a new, validated copy of ``base`` with ``overrides`` applied.

    Args:
        base: Base configuration (left untouched)
        overrides: ``(name, value)`` pairs, applied in order
        param_mapping: Optional name → dotted path mapping

    Returns:
        New instance of ``type(base)``

    Raises:
        InvalidValueError: If a name maps to no field or a value fails validation
    """
    config_dict = base.model_dump()
    paths = [map_param_to_config_path(name, param_mapping) for name, _ in overrides]

    for (name, value), path in zip(overrides, paths):
        _apply_override(config_dict, path, name, value)

    try:
        return type(base).model_validate(config_dict)
    except ValidationError as e:
        raise _blame(e, overrides, paths) from e


class PydanticConfigBuilder:
    """
    Builds override configurations from a Pydantic base model.

    Attributes:
        base_cfg: Base configuration template
        param_mapping: Name → dotted path mapping for nested fields

    Example:
        >>> builder = PydanticConfigBuilder(base_cfg, {"lr": "optimizer.learning_rate"})
        >>> cfg = builder.set("lr", 0.01).set("batch_size", 64).build()
    """

    def __init__(self, base_cfg: BaseModel, param_mapping: Optional[Mapping[str, str]] = None):
        self.base_cfg = base_cfg
        self.param_mapping = dict(param_mapping or {})
        self._overrides: List[Tuple[str, Any]] = []

    def set(self, name: str, value: Any) -> "PydanticConfigBuilder":
        self._overrides.append((name, value))
        return self

    @property
    def overrides(self) -> List[Tuple[str, Any]]:
        return list(self._overrides)

    def build(self) -> BaseModel:
        try:
            return with_overrides(self.base_cfg, self._overrides, self.param_mapping)
        except InvalidValueError as e:
            logger.warning(f"Configuration rejected: {e}")
            raise


class PydanticBuilderFactory:
    """Opens a PydanticConfigBuilder per resolution, sharing one mapping."""

    def __init__(self, param_mapping: Optional[Mapping[str, str]] = None):
        self.param_mapping = dict(param_mapping or {})

    def __call__(self, base: BaseModel) -> PydanticConfigBuilder:
        return PydanticConfigBuilder(base, self.param_mapping)
