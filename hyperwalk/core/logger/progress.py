"""
Traversal Progress Logging.

Formatting helpers used by walkers and the walker factory to report what is
being explored and how far along a traversal is.
"""

# Standard Imports
import logging
from typing import TYPE_CHECKING, Any, Sequence

# Internal Imports
from ..paths import LOGGER_NAME
from .styles import LogStyle

if TYPE_CHECKING:
    from hyperwalk.walkers.base import SpaceWalker

logger = logging.getLogger(LOGGER_NAME)


def _format_value(value: Any) -> str:
    if isinstance(value, float) and not isinstance(value, bool):
        if value != 0.0 and abs(value) < 0.001:
            return f"{value:.2e}"
        return f"{value:.4g}"
    return repr(value)


def log_walker_summary(walker: "SpaceWalker", strategy: str) -> None:
    """
    Log a header describing the space a walker is about to traverse.

    Args:
        walker: Freshly constructed walker
        strategy: Registry key the walker was built from
    """
    logger.info(LogStyle.DOUBLE)
    logger.info(f"{'HYPERPARAMETER SPACE WALK':^80}")
    logger.info(LogStyle.DOUBLE)
    logger.info(f"{LogStyle.INDENT}{LogStyle.ARROW} Strategy       : {strategy}")
    logger.info(f"{LogStyle.INDENT}{LogStyle.ARROW} Dimensions     : {len(walker.names)}")
    logger.info(f"{LogStyle.INDENT}{LogStyle.ARROW} Space Size     : {walker.size}")
    for name, radix in zip(walker.names, walker.space.radices):
        logger.info(f"{LogStyle.DOUBLE_INDENT}{LogStyle.BULLET} {name:<20} : {radix} values")
    logger.info(LogStyle.DOUBLE)


def log_point(index: int, size: int, names: Sequence[str], raw_values: Sequence[Any]) -> None:
    """
    Log one emitted point at DEBUG level.

    Args:
        index: One-based emission number
        size: Total size of the space
        names: Dimension names in walker order
        raw_values: Values at the emitted point
    """
    if not logger.isEnabledFor(logging.DEBUG):
        return
    params = ", ".join(f"{n}={_format_value(v)}" for n, v in zip(names, raw_values))
    logger.debug(f"{LogStyle.ARROW} Point {index}/{size}: {params}")
