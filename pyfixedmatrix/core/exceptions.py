"""
Exception hierarchy for pyfixedmatrix.

All exceptions inherit from FixedMatrixError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class FixedMatrixError(Exception):
    """Base exception for all pyfixedmatrix errors."""
    pass


class ValidationError(FixedMatrixError):
    """
    Input validation failed.
    
    Raised when user-provided inputs fail validation checks.
    """
    pass


class ShapeMismatchError(ValidationError):
    """
    A source of elements does not have the size the matrix requires.
    
    Raised when constructing a matrix from a sequence (or from columns or
    rows) whose length differs from what the matrix shape demands.
    
    Attributes:
        expected: Number of elements the matrix shape requires
        actual: Number of elements supplied
        name: Name of the offending input, if known
    """
    
    def __init__(
        self,
        message: str,
        expected: int | None = None,
        actual: int | None = None,
        name: str | None = None
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual
        self.name = name


class DimensionError(ValidationError):
    """
    Operand dimensions are incompatible for an operation.
    
    Raised when two matrices are combined (add, subtract, multiply,
    approximate comparison) and their shapes do not satisfy the
    operation's precondition.
    
    Attributes:
        operation: Name of the attempted operation
        left_shape: (rows, cols) of the left operand
        right_shape: (rows, cols) of the right operand
    """
    
    def __init__(
        self,
        message: str,
        operation: str | None = None,
        left_shape: tuple[int, int] | None = None,
        right_shape: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape


class IndexOutOfBoundsError(FixedMatrixError, IndexError):
    """
    Element access outside the matrix bounds.
    
    Raised by the raising access paths (get_or_raise, set_or_raise and
    subscription). The non-raising paths report the same condition by
    returning None or False instead.
    
    Attributes:
        row: Requested row
        col: Requested column
        rows: Row count of the matrix
        cols: Column count of the matrix
    """
    
    def __init__(self, row: int, col: int, rows: int, cols: int):
        super().__init__(
            f"matrix index {row},{col} out of bounds for matrix of size {rows}x{cols}"
        )
        self.row = row
        self.col = col
        self.rows = rows
        self.cols = cols


class NumericalWarning(UserWarning):
    """Non-fatal numerical issue, such as NaN or Inf matrix elements."""
    pass
