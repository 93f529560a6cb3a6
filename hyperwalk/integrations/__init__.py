"""Bridges between hyperparameter spaces and third-party search tools."""

from .optuna_grid import build_grid_sampler, to_optuna_search_space

__all__ = [
    "to_optuna_search_space",
    "build_grid_sampler",
]
