"""
Configuration Serialization & Persistence Utilities.

Reads and writes the YAML documents that describe walker settings and
hyperparameter spaces. Pydantic models are dumped in JSON mode so paths and
tuples land in YAML as plain strings and lists.
"""

# Standard Imports
import logging
import os
from pathlib import Path
from typing import Any, Dict

# Third-Party Imports
import yaml

# Internal Imports
from ..paths import LOGGER_NAME

logger = logging.getLogger(LOGGER_NAME)


def save_config_as_yaml(data: Any, yaml_path: Path) -> Path:
    """
    Saves a Pydantic model or a plain mapping as a YAML file.

    Args:
        data: The configuration data (Pydantic model or dict)
        yaml_path: Target path for the YAML file

    Returns:
        The path the document was written to

    Raises:
        OSError: If the filesystem write fails
        yaml.YAMLError: If the data cannot be represented as YAML
    """
    raw = data.model_dump(mode="json") if hasattr(data, "model_dump") else data
    final_data = _sanitize_for_yaml(raw)

    try:
        _persist_yaml_atomic(final_data, yaml_path)
    except (OSError, yaml.YAMLError) as e:
        logger.error(f"Failed to save configuration YAML: {e}")
        raise

    logger.info(f"Configuration saved → {yaml_path.name}")
    return yaml_path


def load_config_from_yaml(yaml_path: Path) -> Dict[str, Any]:
    """
    Loads a raw configuration mapping from a YAML file.

    Args:
        yaml_path: Path to the source YAML file

    Returns:
        The parsed document (an empty file yields None)

    Raises:
        FileNotFoundError: If the path does not exist
    """
    if not yaml_path.exists():
        raise FileNotFoundError(f"YAML configuration file not found at: {yaml_path}")

    with open(yaml_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def _sanitize_for_yaml(obj: Any) -> Any:
    """
    Recursively converts non-serializable types into YAML-standard formats.

    Paths become strings, tuples become lists, mappings and sequences are
    processed recursively.
    """
    if isinstance(obj, dict):
        return {k: _sanitize_for_yaml(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_sanitize_for_yaml(i) for i in obj]
    if isinstance(obj, Path):
        return str(obj)
    return obj


def _persist_yaml_atomic(data: Any, path: Path) -> None:
    """Writes with directory creation and an fsync before returning."""
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(
            data,
            f,
            default_flow_style=False,
            sort_keys=False,
            indent=4,
            allow_unicode=True,
        )
        f.flush()
        os.fsync(f.fileno())
