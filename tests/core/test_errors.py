"""Tests for the densematrix exception hierarchy."""

import pytest

from densematrix.core.errors import (
    DimensionMismatchError,
    IndexOutOfRangeError,
    MalformedInputError,
    MatrixError,
    NotSquareError,
)


class TestErrorHierarchy:
    """Test base classes and builtin compatibility."""

    @pytest.mark.parametrize(
        "error,builtin",
        [
            (IndexOutOfRangeError("row", 3, 2), IndexError),
            (DimensionMismatchError("add", (1, 2), (2, 1)), ValueError),
            (NotSquareError("pow", (2, 3)), ValueError),
            (MalformedInputError("bad"), ValueError),
        ],
    )
    def test_errors_derive_from_matrix_error_and_builtin(self, error, builtin):
        """Test every error is a MatrixError and its builtin counterpart."""
        assert isinstance(error, MatrixError)
        assert isinstance(error, builtin)

    def test_message_is_str(self):
        """Test str(error) is the message."""
        error = NotSquareError("determinant", (2, 3))
        assert str(error) == "determinant is only defined for square matrices, got 2x3"

    def test_index_message(self):
        """Test the index error names axis and bounds."""
        assert str(IndexOutOfRangeError("row", 3, 2)) == "Row index 3 out of range [0, 2)"

    def test_dimension_mismatch_message(self):
        """Test the mismatch error names both shapes."""
        error = DimensionMismatchError("multiply", (2, 3), (2, 3))
        assert error.message == "Cannot multiply 2x3 and 2x3 matrices"
        assert error.details == {"operation": "multiply", "left": (2, 3), "right": (2, 3)}


class TestErrorPayload:
    """Test to_dict() payloads."""

    def test_to_dict(self):
        """Test the payload carries type, message and details."""
        error = MalformedInputError("Row 0 is not a sequence", row=0)
        assert error.to_dict() == {
            "error": {
                "type": "MalformedInputError",
                "message": "Row 0 is not a sequence",
                "details": {"row": 0},
            }
        }

    def test_base_error_defaults_to_empty_details(self):
        """Test MatrixError without details."""
        assert MatrixError("boom").details == {}
