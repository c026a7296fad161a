"""
pyfixedmatrix: fixed-shape double-precision matrices for Python.

A matrix's row and column counts are part of its class:
``FixedMatrix[3, 3]`` is a distinct type from ``FixedMatrix[3, 1]``.
Elements live in a flat row-major float64 buffer. Shape compatibility
for arithmetic is checked when an operation is called, since Python
cannot check it before the program runs; mismatches raise
DimensionError before any data is touched.

Submodules:
    matrix: FixedMatrix, common shapes, named arithmetic
    core: Exceptions, validation, conventions, tolerances
"""

__version__ = "0.1.0"

from pyfixedmatrix.core.exceptions import (
    FixedMatrixError,
    ValidationError,
    ShapeMismatchError,
    DimensionError,
    IndexOutOfBoundsError,
    NumericalWarning,
)
from pyfixedmatrix.matrix import (
    FixedMatrix,
    Vector,
    Matrix2,
    Matrix3,
    Matrix4,
    Vector2,
    Vector3,
    Vector4,
    add,
    subtract,
    scale,
    multiply,
    columns,
    from_cols,
)

__all__ = [
    "__version__",
    # Matrix types
    "FixedMatrix",
    "Vector",
    "Matrix2",
    "Matrix3",
    "Matrix4",
    "Vector2",
    "Vector3",
    "Vector4",
    # Operations
    "add",
    "subtract",
    "scale",
    "multiply",
    "columns",
    "from_cols",
    # Exceptions
    "FixedMatrixError",
    "ValidationError",
    "ShapeMismatchError",
    "DimensionError",
    "IndexOutOfBoundsError",
    "NumericalWarning",
]
