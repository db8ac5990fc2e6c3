"""
Shared pytest fixtures for densematrix tests.

This module provides:
- Sample matrices used across test modules
- Isolation of the ``densematrix`` logger tree between tests
"""

import logging

import pytest

from densematrix import Matrix


@pytest.fixture
def square() -> Matrix:
    """The 2x2 matrix [[1, 2], [3, 4]]."""
    return Matrix([[1, 2], [3, 4]])


@pytest.fixture
def rectangular() -> Matrix:
    """A 2x3 matrix."""
    return Matrix([[1, 2, 3], [4, 5, 6]])


@pytest.fixture
def assert_storage_equal():
    """Helper to compare a matrix against nested lists cell by cell with pytest.approx."""
    def _assert_equal(matrix: Matrix, expected: list[list[float]]) -> None:
        assert matrix.shape == (len(expected), len(expected[0]) if expected else 0)
        for actual_row, expected_row in zip(matrix.storage, expected):
            assert actual_row == pytest.approx(expected_row)

    return _assert_equal


@pytest.fixture(autouse=True)
def isolated_package_logger():
    """Restore the densematrix logger after tests that call setup_logging."""
    package_logger = logging.getLogger("densematrix")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    propagate = package_logger.propagate

    yield package_logger

    for handler in list(package_logger.handlers):
        if handler not in handlers:
            package_logger.removeHandler(handler)
            handler.close()
    package_logger.setLevel(level)
    package_logger.propagate = propagate
