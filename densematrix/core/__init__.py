"""Core utilities package"""

from .config import settings, get_settings
from .logging import setup_logging, get_logger, get_context_logger
from .errors import (
    MatrixError,
    IndexOutOfRangeError,
    DimensionMismatchError,
    NotSquareError,
    MalformedInputError,
)

__all__ = [
    "settings",
    "get_settings",
    "setup_logging",
    "get_logger",
    "get_context_logger",
    "MatrixError",
    "IndexOutOfRangeError",
    "DimensionMismatchError",
    "NotSquareError",
    "MalformedInputError",
]
