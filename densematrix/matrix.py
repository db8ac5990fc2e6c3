"""
Dense matrix model.

A ``Matrix`` owns a rectangular, row-major list of float rows whose
dimensions are fixed at construction. Cell values change only through
``put`` and the elementary row operations (``permute``, ``multiply_row``,
``add_row``); every other operation returns a new matrix.

Example:
    >>> m = Matrix([[1, 2], [3, 4]])
    >>> _ = m.permute(0, 1).multiply_row(1, 4).add_row(0, 1, -2)
    >>> m.row(0)
    [-5.0, -12.0]
"""

from __future__ import annotations

import math
import numbers
from typing import Any, Callable, Iterable, Sequence, Union

import numpy as np
from pydantic import BaseModel, ConfigDict, Field

from .core.config import settings
from .core.errors import (
    DimensionMismatchError,
    IndexOutOfRangeError,
    MalformedInputError,
    NotSquareError,
)
from .core.logging import LoggerAdapter, get_context_logger
from .rendering import render_boxed, render_tex
from .tolerance import fuzzy_compare

MatrixLike = Union["Matrix", Sequence[Sequence[float]], np.ndarray]
CellCallback = Callable[[float, int, int], Any]


class Matrix(BaseModel):
    """
    Fixed-dimension dense numeric matrix.

    Supports bounds-checked access, traversal, addition, scalar and matrix
    products, determinant, integer powers, elementary row operations and
    boxed-text rendering.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    rows: int = Field(default=0, ge=0, frozen=True, description="Number of rows")
    columns: int = Field(default=0, ge=0, frozen=True, description="Number of columns")
    storage: list[list[float]] = Field(
        default_factory=list, frozen=True, description="Row-major cell values"
    )

    def __init__(
        self,
        source: MatrixLike | None = None,
        columns: int | None = None,
        *,
        storage: MatrixLike | None = None,
        rows: int | None = None,
    ) -> None:
        """
        Initialize a Matrix ensuring rectangular structure.

        Args:
            source: Nested rows of numbers, a 2-D NumPy array, or another
                Matrix (its values are copied)
            columns: Column count; only needed when ``source`` has no rows
            storage: Field-name alias for ``source``, used by
                ``model_validate`` and ``model_validate_json``
            rows: Expected row count, checked against the data

        Raises:
            MalformedInputError: If rows are ragged, cells are not numbers,
                or declared dimensions disagree with the data
        """
        if storage is not None:
            if source is not None:
                raise MalformedInputError("Pass either source or storage, not both")
            source = storage
        data, column_count = self._coerce_source(() if source is None else source, columns)
        if rows is not None and rows != len(data):
            raise MalformedInputError(
                f"Expected {rows} rows, data has {len(data)}",
                expected=rows, actual=len(data),
            )
        super().__init__(rows=len(data), columns=column_count, storage=data)

    
    @staticmethod
    def _coerce_cell(value: Any, row: int, column: int) -> float:
        """Convert one cell to float, rejecting non-real or unrepresentable values."""
        if not isinstance(value, numbers.Real):
            raise MalformedInputError(
                f"Cell ({row}, {column}) is not a number: {value!r}", row=row, column=column
            )
        try:
            return float(value)
        except OverflowError:
            raise MalformedInputError(
                f"Cell ({row}, {column}) is too large for a float", row=row, column=column
            ) from None

    @staticmethod
    def _coerce_source(source: Any, columns: int | None) -> tuple[list[list[float]], int]:
        """Convert raw input into float rows and a column count."""
        if isinstance(source, Matrix):
            if columns is not None and columns != source.columns:
                raise MalformedInputError(
                    f"Expected {columns} columns, source has {source.columns}",
                    expected=columns, actual=source.columns,
                )
            return [list(row) for row in source.storage], source.columns

        if isinstance(source, np.ndarray):
            if source.ndim != 2:
                raise MalformedInputError(
                    f"Matrix arrays must be 2-dimensional, got {source.ndim}",
                    ndim=source.ndim,
                )
            if columns is None:
                columns = source.shape[1]
            source = source.tolist()

        if isinstance(source, (str, bytes)) or not isinstance(source, Iterable):
            raise MalformedInputError("Matrix data must be a sequence of rows")

        storage: list[list[float]] = []
        for r, row in enumerate(source):
            if isinstance(row, np.ndarray):
                row = row.tolist()
            if isinstance(row, (str, bytes)) or not isinstance(row, Iterable):
                raise MalformedInputError(f"Row {r} is not a sequence", row=r)
            storage.append([Matrix._coerce_cell(cell, r, c) for c, cell in enumerate(row)])

        if not storage:
            if columns is not None and columns < 0:
                raise MalformedInputError(
                    f"Column count must be non-negative, got {columns}", columns=columns
                )
            return storage, columns or 0

        width = len(storage[0])
        for r, cells in enumerate(storage):
            if len(cells) != width:
                raise MalformedInputError(
                    "Matrix rows must all have same length",
                    row=r, expected=width, actual=len(cells),
                )
        if columns is not None and columns != width:
            raise MalformedInputError(
                f"Expected {columns} columns, rows have {width}",
                expected=columns, actual=width,
            )
        return storage, width

    # Factories

    @classmethod
    def from_data(cls, source: MatrixLike) -> Matrix:
        """Build a matrix from raw rectangular data or copy another matrix."""
        return cls(source)

    @classmethod
    def empty(cls, rows: int, columns: int) -> Matrix:
        """Zero-filled ``rows`` x ``columns`` matrix."""
        if rows < 0 or columns < 0:
            raise MalformedInputError(
                f"Dimensions must be non-negative, got {rows}x{columns}",
                rows=rows, columns=columns,
            )
        return cls([[0.0] * columns for _ in range(rows)], columns=columns)

    @classmethod
    def identity(cls, size: int) -> Matrix:
        """Square matrix with ones on the diagonal."""
        return cls.empty(size, size).map(lambda _, r, c: 1.0 if r == c else 0.0)

    def copy(self) -> Matrix:
        """
        Create a deep copy of the matrix.

        Returns:
            New Matrix with copied data
        """
        return Matrix(self)

    def __copy__(self) -> Matrix:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any] | None = None) -> Matrix:
        return self.copy()

    def model_copy(self, *, update: dict[str, Any] | None = None, deep: bool = False) -> Matrix:
        """
        Copy through the validating constructor so rows are never shared.

        ``update`` may replace ``storage`` (dimensions are then taken from
        the new data unless also given); ``deep`` is accepted for
        compatibility since copies are always deep.
        """
        if not update:
            return self.copy()
        if "storage" in update:
            return Matrix(
                storage=update["storage"], rows=update.get("rows"), columns=update.get("columns")
            )
        return Matrix(
            storage=self.storage,
            rows=update.get("rows", self.rows),
            columns=update.get("columns", self.columns),
        )

    # Dimensions

    @property
    def shape(self) -> tuple[int, int]:
        """Get matrix dimensions (rows, columns)."""
        return (self.rows, self.columns)

    @property
    def is_square(self) -> bool:
        return self.rows == self.columns

    # Accessors

    def _check_row(self, index: int) -> None:
        if not 0 <= index < self.rows:
            raise IndexOutOfRangeError("row", index, self.rows)

    def _check_column(self, index: int) -> None:
        if not 0 <= index < self.columns:
            raise IndexOutOfRangeError("column", index, self.columns)

    def get(self, row: int, column: int) -> float:
        """
        Get the value stored at (row, column).

        Raises:
            IndexOutOfRangeError: If either index is outside the matrix
        """
        self._check_row(row)
        self._check_column(column)
        return self.storage[row][column]

    def put(self, row: int, column: int, value: float) -> Matrix:
        """
        Store ``value`` at (row, column) in place.

        Returns:
            self (for method chaining)

        Raises:
            IndexOutOfRangeError: If either index is outside the matrix
            MalformedInputError: If ``value`` is not a real number
        """
        self._check_row(row)
        self._check_column(column)
        self.storage[row][column] = self._coerce_cell(value, row, column)
        return self

    def row(self, index: int) -> list[float]:
        """Copy of row ``index``; mutating it does not touch the matrix."""
        self._check_row(index)
        return list(self.storage[index])

    def column(self, index: int) -> list[float]:
        """Copy of column ``index`` (one value per row)."""
        self._check_column(index)
        return [row[index] for row in self.storage]

    def __getitem__(self, index: tuple[int, int] | int) -> float | list[float]:
        """Get element by (row, column) or a row copy by row index."""
        if isinstance(index, tuple):
            row, column = index
            return self.get(row, column)
        return self.row(index)

    # Traversal

    def for_each(self, callback: CellCallback) -> Matrix:
        """
        Call ``callback(value, row, column)`` for every cell in row-major order.

        Returns:
            self, unchanged
        """
        for r in range(self.rows):
            for c in range(self.columns):
                callback(self.storage[r][c], r, c)
        return self

    def map(self, callback: Callable[[float, int, int], float]) -> Matrix:
        """
        Build a new matrix whose cell (r, c) is ``callback(self.get(r, c), r, c)``.

        Cells are visited in row-major order. The receiver is not modified.
        """
        result = Matrix.empty(self.rows, self.columns)
        self.for_each(lambda value, r, c: result.put(r, c, callback(value, r, c)))
        return result

    # Arithmetic

    @staticmethod
    def _as_matrix(other: MatrixLike) -> Matrix:
        return other if isinstance(other, Matrix) else Matrix(other)

    def add(self, other: MatrixLike) -> Matrix:
        """
        Element-wise sum.

        Raises:
            DimensionMismatchError: If the shapes differ
        """
        other = self._as_matrix(other)
        if self.shape != other.shape:
            raise DimensionMismatchError("add", self.shape, other.shape)
        return self.map(lambda value, r, c: value + other.storage[r][c])

    def scalar(self, factor: float) -> Matrix:
        """Multiply every cell by ``factor``."""
        return self.map(lambda value, r, c: factor * value)

    def multiply(self, other: MatrixLike) -> Matrix:
        """
        Matrix product ``self x other``.

        Each result cell is accumulated from 0.0 in ascending order of the
        shared index using plain float arithmetic.

        Raises:
            DimensionMismatchError: If ``self.columns != other.rows``
        """
        other = self._as_matrix(other)
        if self.columns != other.rows:
            raise DimensionMismatchError("multiply", self.shape, other.shape)

        result = Matrix.empty(self.rows, other.columns)
        for r in range(self.rows):
            left = self.storage[r]
            target = result.storage[r]
            for c in range(other.columns):
                total = 0.0
                for k in range(self.columns):
                    total += left[k] * other.storage[k][c]
                target[c] = total
        return result

    # Square-only operations

    def determinant(self) -> float:
        """
        Determinant of a square matrix.

        Sizes 0, 1 and 2 are computed directly (size 0 yields ``nan``);
        larger matrices go through LU factorization.

        Raises:
            NotSquareError: If the matrix is not square
        """
        if not self.is_square:
            raise NotSquareError("determinant", self.shape)

        size = self.rows
        if size == 0:
            return math.nan
        if size == 1:
            return self.storage[0][0]
        if size == 2:
            (a, b), (c, d) = self.storage
            return a * d - b * c

        self._logger().debug("Computing determinant via LU factorization")
        return float(np.linalg.det(self.to_numpy()))

    def pow(self, amount: int) -> Matrix:
        """
        Repeated self-multiplication.

        Performs ``amount - 1`` products; for ``amount <= 1`` no product is
        taken and the receiver itself is returned.

        Raises:
            NotSquareError: If the matrix is not square
            TypeError: If ``amount`` is not an integer
        """
        if not self.is_square:
            raise NotSquareError("pow", self.shape)
        if not isinstance(amount, numbers.Integral):
            raise TypeError(f"Matrix power must be an integer, got {type(amount).__name__}")

        result = self
        for _ in range(amount - 1):
            result = result.multiply(self)
        return result

    # Elementary row operations (in place)

    def _logger(self) -> LoggerAdapter:
        return get_context_logger(__name__, shape=self.shape)

    def permute(self, row1: int, row2: int) -> Matrix:
        """Swap rows ``row1`` and ``row2``."""
        self._check_row(row1)
        self._check_row(row2)
        self.storage[row1], self.storage[row2] = self.storage[row2], self.storage[row1]
        self._logger().debug("permute", extra_data={"rows": (row1, row2)})
        return self

    def multiply_row(self, row: int, factor: float) -> Matrix:
        """Scale every cell of ``row`` by ``factor``."""
        self._check_row(row)
        self.storage[row] = [value * factor for value in self.storage[row]]
        self._logger().debug("multiply_row", extra_data={"row": row, "factor": factor})
        return self

    def add_row(self, manipulated: int, source: int, factor: float = 1.0) -> Matrix:
        """
        Add ``factor`` times row ``source`` to row ``manipulated``.

        Example:
            Matrix([[1, 2], [3, 4]]).add_row(0, 1, -2) leaves row 0 as [-5, -6].
        """
        self._check_row(manipulated)
        self._check_row(source)
        target = self.storage[manipulated]
        scaled = [value * factor for value in self.storage[source]]
        for i, value in enumerate(scaled):
            target[i] += value
        self._logger().debug(
            "add_row",
            extra_data={"manipulated": manipulated, "source": source, "factor": factor},
        )
        return self

    # Comparison

    def compare(
        self, other: MatrixLike, tolerance: float | None = None, mode: str | None = None
    ) -> bool:
        """
        Compare matrices element-wise within a tolerance.

        Args:
            other: Matrix or raw data to compare against
            tolerance: Defaults to ``settings.COMPARE_TOLERANCE``
            mode: Defaults to ``settings.COMPARE_MODE``
        """
        if not isinstance(other, Matrix):
            try:
                other = Matrix(other)
            except MalformedInputError:
                return False

        if self.shape != other.shape:
            return False

        tolerance = settings.COMPARE_TOLERANCE if tolerance is None else tolerance
        mode = settings.COMPARE_MODE if mode is None else mode
        for row1, row2 in zip(self.storage, other.storage):
            for a, b in zip(row1, row2):
                if not fuzzy_compare(a, b, tolerance, mode):
                    return False
        return True

    def __eq__(self, other: Any) -> bool:
        """Exact equality of shape and values."""
        if isinstance(other, (list, tuple, np.ndarray)):
            try:
                other = Matrix(other)
            except MalformedInputError:
                return False
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and self.storage == other.storage

    # Conversions

    def to_string(self) -> str:
        """Boxed text grid."""
        return render_boxed(self.storage, self.columns)

    def to_tex(self) -> str:
        """Convert to LaTeX (pmatrix)."""
        return render_tex(self.storage)

    def to_python(self) -> list[list[float]]:
        """Convert to Python nested list."""
        return [list(row) for row in self.storage]

    def to_numpy(self) -> np.ndarray:
        """Convert to NumPy array."""
        return np.array(self.storage, dtype=float).reshape(self.rows, self.columns)

    def __str__(self) -> str:
        return self.to_string()

    # Arithmetic operators

    def __add__(self, other: Any) -> Matrix:
        """Matrix addition."""
        if isinstance(other, (Matrix, list, tuple, np.ndarray)):
            return self.add(other)
        return NotImplemented

    def __radd__(self, other: Any) -> Matrix:
        """Right addition."""
        return self.__add__(other)

    def __sub__(self, other: Any) -> Matrix:
        """Matrix subtraction."""
        if isinstance(other, (Matrix, list, tuple, np.ndarray)):
            return self.add(self._as_matrix(other).scalar(-1))
        return NotImplemented

    def __neg__(self) -> Matrix:
        """Negation."""
        return self.scalar(-1)

    def __mul__(self, other: Any) -> Matrix:
        """Matrix multiplication or scalar multiplication."""
        if isinstance(other, numbers.Real):
            return self.scalar(other)
        if isinstance(other, Matrix):
            return self.multiply(other)
        return NotImplemented

    def __rmul__(self, other: Any) -> Matrix:
        """Right multiplication (scalar only)."""
        if isinstance(other, numbers.Real):
            return self.scalar(other)
        return NotImplemented

    def __matmul__(self, other: Any) -> Matrix:
        """Matrix product."""
        if isinstance(other, (Matrix, list, tuple, np.ndarray)):
            return self.multiply(other)
        return NotImplemented
