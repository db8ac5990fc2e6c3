"""
densematrix - fixed-dimension dense numeric matrices

- Construction from rectangular data, zero and identity factories
- Bounds-checked access and row-major traversal
- Addition, scalar and matrix products, determinant, integer powers
- In-place elementary row operations for Gaussian elimination by hand
- Boxed-text and LaTeX rendering
"""

from .core.errors import (
    DimensionMismatchError,
    IndexOutOfRangeError,
    MalformedInputError,
    MatrixError,
    NotSquareError,
)
from .matrix import Matrix, MatrixLike
from .tolerance import ToleranceMode, fuzzy_compare

__version__ = "0.1.0"

__all__ = [
    "Matrix",
    "MatrixLike",
    "MatrixError",
    "IndexOutOfRangeError",
    "DimensionMismatchError",
    "NotSquareError",
    "MalformedInputError",
    "ToleranceMode",
    "fuzzy_compare",
]
