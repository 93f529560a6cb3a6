"""
Smoke Tests for Configuration Serialization Module.

Tests to validate YAML serialization and deserialization.
"""

# Standard Imports
from pathlib import Path
from unittest.mock import patch

# Third-Party Imports
import pytest
import yaml

# Internal Imports
from hyperwalk.core.config import WalkerConfig
from hyperwalk.core.io.serialization import (
    _persist_yaml_atomic,
    _sanitize_for_yaml,
    load_config_from_yaml,
    save_config_as_yaml,
)


# SANITIZE FOR YAML
@pytest.mark.unit
def test_sanitize_for_yaml_nested_structures():
    """Test _sanitize_for_yaml converts paths and tuples inside nested data."""
    data = {
        "telemetry": {"log_dir": Path("/tmp/logs")},
        "hyperparameters": {"batch_size": (16, 32), "paths": [Path("/a")]},
    }

    result = _sanitize_for_yaml(data)

    assert result["telemetry"]["log_dir"] == "/tmp/logs"
    assert result["hyperparameters"]["batch_size"] == [16, 32]
    assert result["hyperparameters"]["paths"] == ["/a"]


@pytest.mark.unit
def test_sanitize_for_yaml_primitives():
    """Test _sanitize_for_yaml preserves primitive types."""
    data = {"int": 42, "float": 3.14, "str": "relu", "bool": True, "none": None}

    assert _sanitize_for_yaml(data) == data


# SAVE CONFIG AS YAML
@pytest.mark.unit
def test_save_config_as_yaml_with_dict(tmp_path):
    """Test a mapping is written and can be read back."""
    config = {"hyperparameters": {"learning_rate": [0.01, 0.1]}}
    yaml_path = tmp_path / "space.yaml"

    result = save_config_as_yaml(config, yaml_path)

    assert result == yaml_path
    assert yaml.safe_load(yaml_path.read_text()) == config


@pytest.mark.unit
def test_save_config_as_yaml_with_model(tmp_path):
    """Test Pydantic models are dumped in JSON mode."""
    yaml_path = tmp_path / "walker.yaml"

    save_config_as_yaml(WalkerConfig(strategy="random", seed=5), yaml_path)

    assert yaml.safe_load(yaml_path.read_text()) == {
        "strategy": "random",
        "seed": 5,
        "max_retries": 1000,
    }


@pytest.mark.unit
def test_save_config_as_yaml_creates_directory(tmp_path):
    """Test parent directories are created."""
    yaml_path = tmp_path / "nested" / "dir" / "config.yaml"

    save_config_as_yaml({"test": "value"}, yaml_path)

    assert yaml_path.exists()


@pytest.mark.unit
def test_save_config_as_yaml_propagates_os_error(tmp_path):
    """Test write failures are logged and re-raised."""
    with patch(
        "hyperwalk.core.io.serialization._persist_yaml_atomic", side_effect=OSError("disk full")
    ), patch("hyperwalk.core.io.serialization.logger") as mock_logger:
        with pytest.raises(OSError, match="disk full"):
            save_config_as_yaml({"a": 1}, tmp_path / "a.yaml")

    mock_logger.error.assert_called_once()


# LOAD CONFIG FROM YAML
@pytest.mark.unit
def test_load_config_from_yaml_success(tmp_path):
    """Test a valid document is loaded."""
    yaml_path = tmp_path / "config.yaml"
    yaml_path.write_text("walker:\n  strategy: random\n")

    assert load_config_from_yaml(yaml_path) == {"walker": {"strategy": "random"}}


@pytest.mark.unit
def test_load_config_from_yaml_empty_file(tmp_path):
    """Test an empty document loads as None."""
    yaml_path = tmp_path / "empty.yaml"
    yaml_path.write_text("")

    assert load_config_from_yaml(yaml_path) is None


@pytest.mark.unit
def test_load_config_from_yaml_file_not_found():
    """Test a missing file raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError, match="not found"):
        load_config_from_yaml(Path("/nonexistent/config.yaml"))


# PERSIST YAML ATOMIC
@pytest.mark.unit
def test_persist_yaml_atomic_preserves_key_order(tmp_path):
    """Test keys are written in insertion order."""
    yaml_path = tmp_path / "ordered.yaml"

    _persist_yaml_atomic({"zeta": 1, "alpha": 2}, yaml_path)

    assert yaml_path.read_text().index("zeta") < yaml_path.read_text().index("alpha")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
