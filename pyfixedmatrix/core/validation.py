"""
Input validation utilities for pyfixedmatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers
import operator
import warnings
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyfixedmatrix.core.conventions import ELEMENT_DTYPE
from pyfixedmatrix.core.exceptions import (
    DimensionError,
    NumericalWarning,
    ShapeMismatchError,
    ValidationError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.float64]:
    """
    Validate and convert input to a float64 numpy array.
    
    Accepts any array-like and converts to a freshly allocated array, so
    the result never aliases the caller's buffer. Rejects inputs that
    result in object dtype (indicating mixed types or ragged data) and
    non-numeric dtypes.
    
    Args:
        array: Input to validate
        name: Parameter name for error messages
        
    Returns:
        numpy.ndarray of dtype float64
        
    Raises:
        ValidationError: If input cannot be converted to a numeric array
    """
    try:
        result = np.array(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e
    
    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or ragged data"
        )

    if not np.issubdtype(result.dtype, np.number) or np.issubdtype(
        result.dtype, np.complexfloating
    ):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected real numeric data"
        )

    return result.astype(ELEMENT_DTYPE, copy=False)


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.
    
    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages
        
    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_length(array: NDArray[np.floating[Any]], expected: int, name: str) -> None:
    """
    Verify a 1D array holds exactly the expected number of elements.
    
    Args:
        array: 1D array to check
        expected: Required length
        name: Parameter name for error messages
        
    Raises:
        ShapeMismatchError: If the length differs
    """
    actual = array.shape[0]
    if actual != expected:
        raise ShapeMismatchError(
            f"{name}: expected {expected} elements, got {actual}",
            expected=expected,
            actual=actual,
            name=name,
        )


def check_shape(shape: Any) -> tuple[int, int]:
    """
    Validate a (rows, cols) pair used to parameterize a matrix type.
    
    Args:
        shape: Candidate (rows, cols) pair
        
    Returns:
        (rows, cols) as plain ints
        
    Raises:
        ValidationError: If shape is not a pair of positive integers
    """
    if not isinstance(shape, tuple) or len(shape) != 2:
        raise ValidationError(
            f"matrix shape must be a (rows, cols) pair, got {shape!r}"
        )
    dims = []
    for label, value in zip(("rows", "cols"), shape):
        if isinstance(value, bool):
            raise ValidationError(f"{label}: expected an integer, got {value!r}")
        try:
            dim = operator.index(value)
        except TypeError as e:
            raise ValidationError(f"{label}: expected an integer, got {value!r}") from e
        if dim < 1:
            raise ValidationError(f"{label}: must be at least 1, got {dim}")
        dims.append(dim)
    return dims[0], dims[1]


def check_index(value: Any, name: str) -> int:
    """
    Convert a row or column index to int.
    
    Bounds are not checked here; out-of-range handling belongs to the
    access path (absent value or IndexOutOfBoundsError).
    
    Raises:
        TypeError: If value is not an integer
    """
    if isinstance(value, bool):
        raise TypeError(f"{name}: matrix indices must be integers, got bool")
    try:
        return operator.index(value)
    except TypeError as e:
        raise TypeError(
            f"{name}: matrix indices must be integers, got {type(value).__name__}"
        ) from e


def check_scalar(value: Any, name: str) -> float:
    """
    Validate a real scalar operand.
    
    Raises:
        ValidationError: If value is not a real number
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValidationError(
            f"{name}: expected a real scalar, got {type(value).__name__}"
        )
    return float(value)


def warn_non_finite(
    array: NDArray[np.floating[Any]],
    name: str,
    stacklevel: int = 3,
) -> None:
    """
    Warn (without raising) when an array contains NaN or Inf values.
    
    Non-finite elements are legal matrix values, but NaN elements make a
    matrix compare unequal to itself, which is rarely intended.
    
    Args:
        array: Array to check
        name: Parameter name for the warning message
        stacklevel: Passed to warnings.warn. The default points at the
            caller of the function that calls warn_non_finite.
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        warnings.warn(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)",
            NumericalWarning,
            stacklevel=stacklevel,
        )
