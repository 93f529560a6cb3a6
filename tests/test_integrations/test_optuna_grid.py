"""
Test Suite for the Optuna Grid Interop.
"""

# Third-Party Imports
import optuna
import pytest
from optuna.samplers import GridSampler

# Internal Imports
from hyperwalk.core import SpaceDefinitionError
from hyperwalk.integrations import build_grid_sampler, to_optuna_search_space
from hyperwalk.space import HyperParameterSpace


@pytest.mark.unit
def test_to_optuna_search_space(grid_2x3):
    """Test the mapping mirrors the space's raw values."""
    assert to_optuna_search_space(grid_2x3) == {
        "learning_rate": [0.01, 0.1],
        "batch_size": [16, 32, 64],
    }


@pytest.mark.unit
def test_to_optuna_search_space_rejects_lists():
    """Test non-scalar candidates cannot form a grid."""
    space = HyperParameterSpace.from_mapping({"hidden_sizes": [[64], [128, 64]]})

    with pytest.raises(SpaceDefinitionError, match="hidden_sizes"):
        to_optuna_search_space(space)


@pytest.mark.unit
def test_build_grid_sampler(grid_2x3):
    """Test a GridSampler is returned."""
    assert isinstance(build_grid_sampler(grid_2x3, seed=0), GridSampler)


@pytest.mark.integration
def test_grid_sampler_covers_every_point(grid_2x3):
    """Test a study over the grid visits the same points as the space."""
    optuna.logging.set_verbosity(optuna.logging.WARNING)
    study = optuna.create_study(sampler=build_grid_sampler(grid_2x3, seed=0))

    def objective(trial):
        lr = trial.suggest_float("learning_rate", 0.01, 0.1)
        bs = trial.suggest_int("batch_size", 16, 64)
        return lr * bs

    study.optimize(objective, n_trials=grid_2x3.size)

    visited = {(t.params["learning_rate"], t.params["batch_size"]) for t in study.trials}
    expected = {grid_2x3.values_at(grid_2x3.point_at(k)) for k in range(grid_2x3.size)}
    assert visited == expected
