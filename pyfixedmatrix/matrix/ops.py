"""
Named-function interface to matrix arithmetic.

Each function has the same contract as the corresponding operator:

    add(a, b)        a + b
    subtract(a, b)   a - b
    scale(a, k)      a * k
    multiply(a, b)   a * b  (also a @ b)
    columns(a)       a.columns()

from_cols is the generic, shape-inferring counterpart of
FixedMatrix[R, C].from_cols: the row count comes from the first column
and the column count from the number of columns supplied.
"""

from __future__ import annotations

from typing import Any, Iterable

from numpy.typing import ArrayLike

from pyfixedmatrix.core.exceptions import ShapeMismatchError, ValidationError
from pyfixedmatrix.core.protocols import MatrixLike
from pyfixedmatrix.core.validation import check_1d, check_array
from pyfixedmatrix.matrix.fixed import FixedMatrix


def _check_matrix(value: Any, name: str) -> None:
    if not isinstance(value, FixedMatrix):
        raise ValidationError(
            f"{name}: expected a FixedMatrix, got {type(value).__name__}"
        )


def add(a: FixedMatrix, b: FixedMatrix) -> FixedMatrix:
    """Elementwise sum; both operands must share a shape."""
    _check_matrix(a, "a")
    return a.add(b)


def subtract(a: FixedMatrix, b: FixedMatrix) -> FixedMatrix:
    """Elementwise difference; both operands must share a shape."""
    _check_matrix(a, "a")
    return a.subtract(b)


def scale(a: FixedMatrix, k: float) -> FixedMatrix:
    """Every element of ``a`` multiplied by ``k``."""
    _check_matrix(a, "a")
    return a.scale(k)


def multiply(a: FixedMatrix, b: FixedMatrix) -> FixedMatrix:
    """Matrix product; ``a.COLS`` must equal ``b.ROWS``."""
    _check_matrix(a, "a")
    return a.multiply(b)


def columns(a: FixedMatrix) -> tuple[FixedMatrix, ...]:
    """The columns of ``a`` as single-column matrices, left to right."""
    _check_matrix(a, "a")
    return a.columns()


def from_cols(cols: Iterable[MatrixLike | ArrayLike]) -> FixedMatrix:
    """
    Build a matrix from column vectors, inferring its shape.

    Args:
        cols: One or more columns, each a MatrixLike of shape (R, 1) or a
            flat sequence of R numbers

    Returns:
        FixedMatrix[R, len(cols)]

    Raises:
        ShapeMismatchError: If no columns are given or the columns
            disagree in length
    """
    cols = list(cols)
    if not cols:
        raise ShapeMismatchError(
            "columns: need at least one column",
            actual=0,
            name="columns",
        )
    first = cols[0]
    if isinstance(first, MatrixLike):
        rows = first.ROWS
    else:
        values = check_array(first, "columns[0]")
        check_1d(values, "columns[0]")
        rows = values.shape[0]
    if rows < 1:
        raise ShapeMismatchError(
            "columns[0]: columns must hold at least one element",
            actual=0,
            name="columns[0]",
        )
    return FixedMatrix[rows, len(cols)].from_cols(cols)
