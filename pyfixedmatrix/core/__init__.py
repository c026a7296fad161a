"""
Core infrastructure for pyfixedmatrix.

This module provides shared abstractions and utilities used by the
matrix package.

Key components:
    conventions: Layout, dtype and default-initialisation constants
    protocols: MatrixLike protocol
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Precision constants and tolerance tiers
"""

from pyfixedmatrix.core.protocols import MatrixLike
from pyfixedmatrix.core.exceptions import (
    FixedMatrixError,
    ValidationError,
    ShapeMismatchError,
    DimensionError,
    IndexOutOfBoundsError,
    NumericalWarning,
)

__all__ = [
    # Protocols
    "MatrixLike",
    # Exceptions
    "FixedMatrixError",
    "ValidationError",
    "ShapeMismatchError",
    "DimensionError",
    "IndexOutOfBoundsError",
    "NumericalWarning",
]
