"""
Core protocols for pyfixedmatrix.

These define structural interfaces accepted wherever matrix-shaped data
is consumed. We use Protocol (structural typing) rather than ABC (nominal
typing) so that callers can pass their own fixed-shape containers to
from_cols without subclassing FixedMatrix.
"""

from typing import Protocol, runtime_checkable

import numpy as np
from numpy.typing import NDArray


@runtime_checkable
class MatrixLike(Protocol):
    """
    Minimal protocol for a fixed-shape container of float64 elements.
    
    FixedMatrix satisfies it. The flat ``elems`` buffer is interpreted in
    row-major order; see pyfixedmatrix.core.conventions.
    """
    
    ROWS: int
    COLS: int
    
    @property
    def elems(self) -> NDArray[np.float64]:
        """Flat element buffer of length ROWS * COLS."""
        ...
