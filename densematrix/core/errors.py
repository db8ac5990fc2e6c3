"""
Matrix exceptions.

Every error is a precondition violation raised synchronously by the call
that detected it. Each subclass also derives from the matching builtin
(IndexError / ValueError) so generic handlers keep working.
"""

from typing import Any, Dict, Optional


class MatrixError(Exception):
    """Base exception for densematrix errors"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Standardized error payload"""
        return {
            "error": {
                "type": self.__class__.__name__,
                "message": self.message,
                "details": self.details,
            }
        }


class IndexOutOfRangeError(MatrixError, IndexError):
    """Raised when a row or column index is outside the matrix bounds"""

    def __init__(self, axis: str, index: int, size: int):
        super().__init__(
            message=f"{axis.capitalize()} index {index} out of range [0, {size})",
            details={"axis": axis, "index": index, "size": size}
        )


class DimensionMismatchError(MatrixError, ValueError):
    """Raised when two operands have incompatible shapes"""

    def __init__(self, operation: str, left: tuple[int, int], right: tuple[int, int]):
        super().__init__(
            message=f"Cannot {operation} {left[0]}x{left[1]} and {right[0]}x{right[1]} matrices",
            details={"operation": operation, "left": left, "right": right}
        )


class NotSquareError(MatrixError, ValueError):
    """Raised when a square-only operation is invoked on a non-square matrix"""

    def __init__(self, operation: str, shape: tuple[int, int]):
        super().__init__(
            message=f"{operation} is only defined for square matrices, got {shape[0]}x{shape[1]}",
            details={"operation": operation, "shape": shape}
        )


class MalformedInputError(MatrixError, ValueError):
    """Raised for ragged, non-numeric or negatively sized input"""

    def __init__(self, message: str, **details: Any):
        super().__init__(message=message, details=details)
