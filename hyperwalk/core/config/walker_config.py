"""
Traversal Strategy Configuration Schema.

Selects how a hyperparameter space is walked and pins the knobs that make a
random walk reproducible.
"""

# Third-Party Imports
from pydantic import BaseModel, ConfigDict, Field

# Internal Imports
from .types import RetryLimit, Seed, WalkStrategy

DEFAULT_SEED = 123456
DEFAULT_MAX_RETRIES = 1000


class WalkerConfig(BaseModel):
    """
    Strategy selection and sampling controls.

    Attributes:
        strategy: "cartesian" (exhaustive, odometer order) or "random"
            (uniform sampling without replacement)
        seed: Seed of the random sampler; ignored by the cartesian strategy
        max_retries: Consecutive duplicate draws tolerated before the random
            sampler falls back to picking among unvisited points directly
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    strategy: WalkStrategy = Field(default="cartesian", description="Traversal strategy")
    seed: Seed = Field(default=DEFAULT_SEED, description="Random sampler seed")
    max_retries: RetryLimit = Field(
        default=DEFAULT_MAX_RETRIES, description="Duplicate redraws before exhaustive fallback"
    )
