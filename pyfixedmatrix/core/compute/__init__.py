"""
Shared numeric infrastructure for pyfixedmatrix.

Submodules:
    precision: Tolerance-based comparison
    tolerances: Named tolerance tiers for approximate comparison
"""

from pyfixedmatrix.core.compute.precision import is_close
from pyfixedmatrix.core.compute.tolerances import (
    ToleranceTier,
    EXACT,
    FP64,
    LOOSE,
    DEFAULT_TOLERANCE,
)

__all__ = [
    # Precision
    "is_close",
    # Tolerances
    "ToleranceTier",
    "EXACT",
    "FP64",
    "LOOSE",
    "DEFAULT_TOLERANCE",
]
