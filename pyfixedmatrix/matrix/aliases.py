"""
Common fixed-size specializations.

These are the cached shaped classes themselves, not copies, so
``Matrix3 is FixedMatrix[3, 3]`` and ``Vector3 is Vector[3]``.
"""

from __future__ import annotations

from typing import Any

from pyfixedmatrix.matrix.fixed import FixedMatrix


class _VectorAlias:
    """``Vector[R]`` is ``FixedMatrix[R, 1]``, a single-column matrix."""

    def __getitem__(self, rows: Any) -> type[FixedMatrix]:
        return FixedMatrix[rows, 1]

    def __repr__(self) -> str:
        return "Vector"


Vector = _VectorAlias()

Matrix2 = FixedMatrix[2, 2]
Matrix3 = FixedMatrix[3, 3]
Matrix4 = FixedMatrix[4, 4]

Vector2 = Vector[2]
Vector3 = Vector[3]
Vector4 = Vector[4]

__all__ = [
    'Vector',
    'Matrix2',
    'Matrix3',
    'Matrix4',
    'Vector2',
    'Vector3',
    'Vector4',
]
