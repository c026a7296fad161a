"""
Row-major linearization helpers.

Every element position a matrix computes goes through these helpers, so
bounds-checked reads, writes and column slicing address the same slot.
"""

import numpy as np
from numpy.typing import NDArray


def flat_index(row: int, col: int, rows: int, cols: int) -> int | None:
    """Flat buffer index of (row, col), or None when out of bounds."""
    if 0 <= row < rows and 0 <= col < cols:
        return row * cols + col
    return None


def diagonal_indices(rows: int, cols: int) -> NDArray[np.intp]:
    """Flat indices of the min(rows, cols) entries where row == col."""
    return np.arange(min(rows, cols), dtype=np.intp) * (cols + 1)


def column_slice(col: int, cols: int) -> slice:
    """Slice of the flat buffer holding column ``col``, top to bottom."""
    return slice(col, None, cols)
