"""
FixedMatrix: a matrix type whose shape is part of its class.

Subscripting the generic class with a shape, ``FixedMatrix[3, 3]``,
returns a cached subclass carrying ``ROWS`` and ``COLS`` as class
constants. Every instance of that subclass holds exactly ROWS * COLS
float64 elements in a flat row-major buffer.

Python has no compile-time dimension arithmetic, so shape compatibility
is a runtime precondition: add, subtract, multiply and approximate
comparison check operand shapes on every call and raise DimensionError
before touching any data.

Usage:
    from pyfixedmatrix import FixedMatrix

    A = FixedMatrix[2, 2].from_array([0.1, 92.3, 653.0, 2.0])
    v = FixedMatrix[2, 1].from_array([1.0, 2.0])
    A * v       # FixedMatrix[2, 1]
    A[1, 0]     # 653.0
"""

from __future__ import annotations

import numbers
import threading
from typing import Any, ClassVar, Iterable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyfixedmatrix.core.compute.precision import is_close
from pyfixedmatrix.core.compute.tolerances import DEFAULT_TOLERANCE, ToleranceTier
from pyfixedmatrix.core.conventions import ELEMENT_DTYPE, MATRIX_LAYOUT
from pyfixedmatrix.core.exceptions import (
    DimensionError,
    IndexOutOfBoundsError,
    ShapeMismatchError,
    ValidationError,
)
from pyfixedmatrix.core.protocols import MatrixLike
from pyfixedmatrix.core.validation import (
    check_1d,
    check_array,
    check_index,
    check_length,
    check_ndim,
    check_scalar,
    check_shape,
    warn_non_finite,
)
from pyfixedmatrix.matrix._layout import column_slice, diagonal_indices, flat_index

_SHAPED_CLASSES: dict[tuple[int, int], type[FixedMatrix]] = {}
_SHAPED_LOCK = threading.Lock()


def _shaped_class(rows: int, cols: int) -> type[FixedMatrix]:
    """Return the cached FixedMatrix subclass for (rows, cols)."""
    key = (rows, cols)
    with _SHAPED_LOCK:
        shaped = _SHAPED_CLASSES.get(key)
        if shaped is None:
            name = f"FixedMatrix[{rows}, {cols}]"
            shaped = type(name, (FixedMatrix,), {
                '__slots__': (),
                '__module__': __name__,
                '__qualname__': name,
                'ROWS': rows,
                'COLS': cols,
            })
            _SHAPED_CLASSES[key] = shaped
    return shaped


def _rebuild(rows: int, cols: int, elems: list[float]) -> FixedMatrix:
    # Pickle support: shaped classes are created at runtime and cannot be
    # looked up by qualified name.
    return _shaped_class(rows, cols)._wrap(np.array(elems, dtype=ELEMENT_DTYPE))


class FixedMatrix:
    """
    Fixed-shape matrix of float64 elements with value semantics.

    Construct via a shaped class, never the generic one:
        FixedMatrix[R, C]()                    identity (the default value)
        FixedMatrix[R, C].from_array(elems)    R*C elements, row-major
        FixedMatrix[R, C].from_slice(elems)    same, None on wrong length
        FixedMatrix[R, C].from_cols(columns)   C column vectors of R elements
        FixedMatrix[R, C].from_rows(rows)      R rows of C elements
        FixedMatrix[R, C].filled(value) / empty() / identity_elems(value)

    Elements are read with ``m[row, col]``, ``get`` (None when out of
    bounds) or ``get_or_raise``, and written with ``m[row, col] = v``,
    ``set`` (False when out of bounds) or ``set_or_raise``.

    Matrices are mutable and therefore unhashable. Construction copies
    its input and every arithmetic operation returns a new matrix, so no
    two matrices ever share a buffer.
    """
    ROWS: ClassVar[int] = 0
    COLS: ClassVar[int] = 0
    LAYOUT: ClassVar[str] = MATRIX_LAYOUT

    __slots__ = ('_elems',)
    __hash__ = None  # type: ignore[assignment]

    # Make numpy scalars and arrays defer to our reflected operators
    __array_ufunc__ = None

    _elems: NDArray[np.float64]

    def __class_getitem__(cls, shape: Any) -> type[FixedMatrix]:
        if cls.ROWS:
            raise TypeError(f"{cls.__name__} is already parameterized")
        rows, cols = check_shape(shape)
        return _shaped_class(rows, cols)

    def __init__(self, elems: ArrayLike | None = None):
        """
        Build a matrix from ``elems`` (see from_array), or the default
        value when ``elems`` is None.
        """
        cls = type(self)
        cls._require_shaped()
        if elems is None:
            buffer = np.zeros(cls.ROWS * cls.COLS, dtype=ELEMENT_DTYPE)
            buffer[diagonal_indices(cls.ROWS, cls.COLS)] = 1.0
            self._elems = buffer
        else:
            self._elems = cls._coerce(elems, "elems")

    # === Construction ===

    @classmethod
    def _require_shaped(cls) -> None:
        if not cls.ROWS:
            raise TypeError(
                f"{cls.__name__} must be parameterized with a shape, "
                f"e.g. FixedMatrix[2, 2]"
            )

    @classmethod
    def _wrap(cls, buffer: NDArray[np.float64]) -> FixedMatrix:
        """Adopt an already validated buffer without copying."""
        matrix = cls.__new__(cls)
        matrix._elems = buffer
        return matrix

    @classmethod
    def _coerce(cls, elems: ArrayLike, name: str) -> NDArray[np.float64]:
        buffer = check_array(elems, name)
        check_1d(buffer, name)
        check_length(buffer, cls.ROWS * cls.COLS, name)
        # Callers are public constructors, so level 4 is the user's frame
        warn_non_finite(buffer, name, stacklevel=4)
        return buffer

    @classmethod
    def from_array(cls, elems: ArrayLike) -> FixedMatrix:
        """
        Create a matrix from exactly ROWS * COLS elements in row-major order.

        Args:
            elems: Flat sequence of numbers; copied into the matrix

        Returns:
            New matrix

        Raises:
            ShapeMismatchError: If the length is not ROWS * COLS
            DimensionError: If elems is not one-dimensional
            ValidationError: If elems is not real numeric data
        """
        cls._require_shaped()
        return cls._wrap(cls._coerce(elems, "elems"))

    @classmethod
    def from_slice(cls, elems: ArrayLike) -> FixedMatrix | None:
        """
        Create a matrix from a sequence whose length is only known at runtime.

        Returns:
            New matrix, or None if the length is not ROWS * COLS
        """
        cls._require_shaped()
        try:
            buffer = cls._coerce(elems, "elems")
        except ShapeMismatchError:
            return None
        return cls._wrap(buffer)

    @classmethod
    def filled(cls, value: float) -> FixedMatrix:
        """Create a matrix with ``value`` as every element."""
        cls._require_shaped()
        scalar = check_scalar(value, "value")
        buffer = np.full(cls.ROWS * cls.COLS, scalar, dtype=ELEMENT_DTYPE)
        warn_non_finite(buffer, "value")
        return cls._wrap(buffer)

    @classmethod
    def empty(cls) -> FixedMatrix:
        """Create a matrix with every element 0.0."""
        cls._require_shaped()
        return cls._wrap(np.zeros(cls.ROWS * cls.COLS, dtype=ELEMENT_DTYPE))

    @classmethod
    def identity_elems(cls, value: float) -> FixedMatrix:
        """Create a zero matrix with ``value`` down the main diagonal."""
        cls._require_shaped()
        scalar = check_scalar(value, "value")
        buffer = np.zeros(cls.ROWS * cls.COLS, dtype=ELEMENT_DTYPE)
        buffer[diagonal_indices(cls.ROWS, cls.COLS)] = scalar
        warn_non_finite(buffer, "value")
        return cls._wrap(buffer)

    @classmethod
    def identity(cls) -> FixedMatrix:
        """Create an identity matrix (ones on the main diagonal)."""
        return cls.identity_elems(1.0)

    @classmethod
    def from_cols(cls, columns: Iterable[MatrixLike | ArrayLike]) -> FixedMatrix:
        """
        Create a matrix from COLS column vectors.

        Each column is either a MatrixLike of shape (ROWS, 1), such as a
        FixedMatrix[ROWS, 1], or a flat sequence of ROWS numbers. The
        columns are reordered into the row-major buffer.

        Raises:
            ShapeMismatchError: On a wrong number of columns or a column of
                the wrong length or shape
        """
        cls._require_shaped()
        cols = list(columns)
        if len(cols) != cls.COLS:
            raise ShapeMismatchError(
                f"columns: expected {cls.COLS} columns, got {len(cols)}",
                expected=cls.COLS,
                actual=len(cols),
                name="columns",
            )
        stacked = np.empty((cls.COLS, cls.ROWS), dtype=ELEMENT_DTYPE)
        for i, column in enumerate(cols):
            stacked[i] = _column_values(column, cls.ROWS, f"columns[{i}]")
        buffer = stacked.T.flatten()
        warn_non_finite(buffer, "columns")
        return cls._wrap(buffer)

    @classmethod
    def from_rows(cls, rows: ArrayLike) -> FixedMatrix:
        """
        Create a matrix from ROWS rows of COLS numbers each.

        Raises:
            ShapeMismatchError: If rows is not ROWS x COLS
            DimensionError: If rows is not two-dimensional
        """
        cls._require_shaped()
        grid = check_array(rows, "rows")
        check_ndim(grid, 2, "rows")
        if grid.shape != (cls.ROWS, cls.COLS):
            raise ShapeMismatchError(
                f"rows: expected shape {(cls.ROWS, cls.COLS)}, got {grid.shape}",
                expected=cls.ROWS * cls.COLS,
                actual=grid.size,
                name="rows",
            )
        buffer = grid.reshape(-1)
        warn_non_finite(buffer, "rows")
        return cls._wrap(buffer)

    def copy(self) -> FixedMatrix:
        """Return an independent matrix with the same shape and elements."""
        return type(self)._wrap(self._elems.copy())

    def __copy__(self) -> FixedMatrix:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> FixedMatrix:
        return self.copy()

    def __reduce__(self):
        return _rebuild, (self.ROWS, self.COLS, self._elems.tolist())

    # === Properties ===

    @property
    def shape(self) -> tuple[int, int]:
        """(ROWS, COLS)."""
        return self.ROWS, self.COLS

    @property
    def elems(self) -> NDArray[np.float64]:
        """
        Read-only copy of the flat row-major element buffer.

        Writes go through indexed access; re-enabling writes on the
        returned array does not reach the matrix.
        """
        snapshot = self._elems.copy()
        snapshot.flags.writeable = False
        return snapshot

    def to_numpy(self) -> NDArray[np.float64]:
        """Return a fresh (ROWS, COLS) array of the elements."""
        return self._elems.reshape(self.ROWS, self.COLS).copy()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_numpy().tolist()})"

    # === Element access ===

    @classmethod
    def _index(cls, row: int, col: int) -> int | None:
        return flat_index(check_index(row, "row"), check_index(col, "col"), cls.ROWS, cls.COLS)

    def _bounds_error(self, row: int, col: int) -> IndexOutOfBoundsError:
        return IndexOutOfBoundsError(
            check_index(row, "row"), check_index(col, "col"), self.ROWS, self.COLS
        )

    def get(self, row: int, col: int) -> float | None:
        """
        Return the element at (row, col), or None if it is out of bounds.

        Negative indices are out of bounds; they do not count from the end.
        """
        index = self._index(row, col)
        if index is None:
            return None
        return float(self._elems[index])

    def get_or_raise(self, row: int, col: int) -> float:
        """
        Return the element at (row, col).

        Raises:
            IndexOutOfBoundsError: If (row, col) is outside the matrix
        """
        index = self._index(row, col)
        if index is None:
            raise self._bounds_error(row, col)
        return float(self._elems[index])

    def set(self, row: int, col: int, value: float) -> bool:
        """
        Store ``value`` at (row, col).

        Returns:
            True if stored, False if (row, col) is out of bounds, in which
            case the matrix is unchanged
        """
        scalar = check_scalar(value, "value")
        index = self._index(row, col)
        if index is None:
            return False
        self._elems[index] = scalar
        return True

    def set_or_raise(self, row: int, col: int, value: float) -> None:
        """
        Store ``value`` at (row, col).

        Raises:
            IndexOutOfBoundsError: If (row, col) is outside the matrix
        """
        scalar = check_scalar(value, "value")
        index = self._index(row, col)
        if index is None:
            raise self._bounds_error(row, col)
        self._elems[index] = scalar

    @staticmethod
    def _unpack_key(key: Any) -> tuple[int, int]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError(
                f"matrix indices must be a (row, col) pair, got {key!r}"
            )
        return key

    def __getitem__(self, key: tuple[int, int]) -> float:
        row, col = self._unpack_key(key)
        return self.get_or_raise(row, col)

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        row, col = self._unpack_key(key)
        self.set_or_raise(row, col, value)

    # === Equality ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FixedMatrix) or other.shape != self.shape:
            return NotImplemented
        return bool(np.array_equal(self._elems, other._elems))

    def approx_equal(
        self,
        other: FixedMatrix,
        tolerance: ToleranceTier = DEFAULT_TOLERANCE,
    ) -> bool:
        """
        Elementwise comparison within a tolerance tier.

        Uses |a - b| <= atol + rtol * |b| per element.

        Raises:
            DimensionError: If the shapes differ
        """
        self._check_same_shape(other, "approx_equal")
        return bool(np.all(
            is_close(self._elems, other._elems, rtol=tolerance.rtol, atol=tolerance.atol)
        ))

    # === Arithmetic ===

    @staticmethod
    def _check_operand(other: Any, operation: str) -> None:
        if not isinstance(other, FixedMatrix):
            raise ValidationError(
                f"{operation}: expected a FixedMatrix operand, got {type(other).__name__}"
            )

    def _check_same_shape(self, other: Any, operation: str) -> None:
        self._check_operand(other, operation)
        if other.shape != self.shape:
            raise DimensionError(
                f"{operation}: shapes {self.ROWS}x{self.COLS} and "
                f"{other.ROWS}x{other.COLS} do not match",
                operation=operation,
                left_shape=self.shape,
                right_shape=other.shape,
            )

    def add(self, other: FixedMatrix) -> FixedMatrix:
        """Elementwise sum of two same-shape matrices."""
        self._check_same_shape(other, "add")
        return _shaped_class(self.ROWS, self.COLS)._wrap(self._elems + other._elems)

    def subtract(self, other: FixedMatrix) -> FixedMatrix:
        """Elementwise difference of two same-shape matrices."""
        self._check_same_shape(other, "subtract")
        return _shaped_class(self.ROWS, self.COLS)._wrap(self._elems - other._elems)

    def scale(self, k: float) -> FixedMatrix:
        """Every element multiplied by the real scalar ``k``."""
        scalar = check_scalar(k, "k")
        return _shaped_class(self.ROWS, self.COLS)._wrap(self._elems * scalar)

    def multiply(self, other: FixedMatrix) -> FixedMatrix:
        """
        Matrix product of an M x N matrix with an N x P matrix.

        result[i, j] = sum over k of self[i, k] * other[k, j]

        Returns:
            New FixedMatrix[M, P]

        Raises:
            DimensionError: If self.COLS != other.ROWS
        """
        self._check_operand(other, "multiply")
        if self.COLS != other.ROWS:
            raise DimensionError(
                f"multiply: cannot multiply {self.ROWS}x{self.COLS} by "
                f"{other.ROWS}x{other.COLS}; left columns ({self.COLS}) must "
                f"equal right rows ({other.ROWS})",
                operation="multiply",
                left_shape=self.shape,
                right_shape=other.shape,
            )
        left = self._elems.reshape(self.ROWS, self.COLS)
        right = other._elems.reshape(other.ROWS, other.COLS)
        product = left @ right
        return _shaped_class(self.ROWS, other.COLS)._wrap(product.reshape(-1))

    def __add__(self, other: object) -> FixedMatrix:
        if not isinstance(other, FixedMatrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> FixedMatrix:
        if not isinstance(other, FixedMatrix):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: object) -> FixedMatrix:
        if isinstance(other, FixedMatrix):
            return self.multiply(other)
        if isinstance(other, numbers.Real) and not isinstance(other, bool):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other: object) -> FixedMatrix:
        if isinstance(other, numbers.Real) and not isinstance(other, bool):
            return self.scale(other)
        return NotImplemented

    def __matmul__(self, other: object) -> FixedMatrix:
        if not isinstance(other, FixedMatrix):
            return NotImplemented
        return self.multiply(other)

    def __neg__(self) -> FixedMatrix:
        return self.scale(-1.0)

    # === Columns ===

    def columns(self) -> tuple[FixedMatrix, ...]:
        """
        Return the COLS columns as FixedMatrix[ROWS, 1] vectors, left to right.

        Inverse of from_cols: ``type(m).from_cols(m.columns()) == m``.
        """
        vector = _shaped_class(self.ROWS, 1)
        return tuple(
            vector._wrap(self._elems[column_slice(c, self.COLS)].copy())
            for c in range(self.COLS)
        )

    def transpose(self) -> FixedMatrix:
        """Return the COLS x ROWS transpose."""
        grid = self._elems.reshape(self.ROWS, self.COLS)
        return _shaped_class(self.COLS, self.ROWS)._wrap(grid.T.flatten())


def _column_values(column: Any, rows: int, name: str) -> NDArray[np.float64]:
    """Validate one from_cols input and return its ROWS values."""
    if isinstance(column, MatrixLike):
        if (column.ROWS, column.COLS) != (rows, 1):
            raise ShapeMismatchError(
                f"{name}: expected a {rows}x1 column vector, "
                f"got {column.ROWS}x{column.COLS}",
                expected=rows,
                actual=column.ROWS * column.COLS,
                name=name,
            )
        values = check_array(column.elems, name)
    else:
        values = check_array(column, name)
    check_1d(values, name)
    check_length(values, rows, name)
    return values
