"""
Fixed-shape matrices.

Public API:
    FixedMatrix                        Generic class; subscript with a shape
    Vector, Matrix2..4, Vector2..4     Common shapes
    add, subtract, scale, multiply     Named arithmetic
    columns, from_cols                 Column extraction and construction
"""

from pyfixedmatrix.matrix.fixed import FixedMatrix
from pyfixedmatrix.matrix.aliases import (
    Vector,
    Matrix2,
    Matrix3,
    Matrix4,
    Vector2,
    Vector3,
    Vector4,
)
from pyfixedmatrix.matrix.ops import (
    add,
    subtract,
    scale,
    multiply,
    columns,
    from_cols,
)

__all__ = [
    "FixedMatrix",
    "Vector",
    "Matrix2",
    "Matrix3",
    "Matrix4",
    "Vector2",
    "Vector3",
    "Vector4",
    "add",
    "subtract",
    "scale",
    "multiply",
    "columns",
    "from_cols",
]
