"""
Semantic Type Definitions & Validation Primitives.

Annotated aliases shared by the configuration schemas. Bounds are enforced by
Pydantic at model construction, so invalid walker settings are rejected
before any traversal starts.
"""

# Standard Imports
from pathlib import Path
from typing import Annotated, Literal

# Third-Party Imports
from pydantic import AfterValidator, Field, PlainSerializer


def _sanitize_path(v: Path) -> Path:
    """Resolve path to absolute form without disk side-effects."""
    return v.expanduser().resolve()


# GENERIC PRIMITIVES
PositiveInt = Annotated[int, Field(gt=0)]
NonNegativeInt = Annotated[int, Field(ge=0)]

# FILESYSTEM
ValidatedPath = Annotated[
    Path,
    AfterValidator(_sanitize_path),
    PlainSerializer(lambda v: str(v), when_used="json", return_type=str),
]

# TRAVERSAL
Seed = Annotated[int, Field(ge=0, lt=2**63)]
RetryLimit = Annotated[int, Field(ge=0, le=1_000_000)]
WalkStrategy = Literal["cartesian", "random"]

# TELEMETRY
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
