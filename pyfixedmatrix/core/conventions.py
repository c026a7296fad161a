"""
Storage conventions for pyfixedmatrix.

This module is the SINGLE SOURCE OF TRUTH for the element dtype and the
name of the storage layout. Import from here, never use raw strings.

The layout is descriptive, not a switch: matrix/_layout.py implements
row-major indexing and every matrix uses it.

Usage:
    from pyfixedmatrix.core.conventions import ELEMENT_DTYPE

    buffer = np.zeros(rows * cols, dtype=ELEMENT_DTYPE)
"""

import numpy as np

# Element (row, col) lives at flat index row * COLS + col
MATRIX_LAYOUT = 'row_major'

# Element dtype for every backing buffer
ELEMENT_DTYPE = np.float64

__all__ = [
    'MATRIX_LAYOUT',
    'ELEMENT_DTYPE',
]
