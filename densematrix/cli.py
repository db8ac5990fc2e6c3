"""Command line interface for densematrix."""

from __future__ import annotations

import argparse
import sys

from .core.errors import MalformedInputError, MatrixError
from .core.logging import get_logger, setup_logging
from .matrix import Matrix
from .rendering import format_value

logger = get_logger(__name__)


def parse_literal(text: str) -> Matrix:
    """
    Parse a matrix literal such as ``"1,2;3,4"``.

    Rows are separated by ``;`` and cells by ``,``.

    Raises:
        MalformedInputError: If a cell is not a number or rows are ragged
    """
    rows = []
    for r, chunk in enumerate(text.split(";")):
        cells = []
        for c, cell in enumerate(chunk.split(",")):
            try:
                cells.append(float(cell))
            except ValueError:
                raise MalformedInputError(
                    f"Cell ({r}, {c}) is not a number: {cell.strip()!r}", row=r, column=c
                ) from None
        rows.append(cells)
    return Matrix(rows)


def walkthrough() -> list[str]:
    """Elementary row operations on [[1, 2], [3, 4]], one rendering per step."""
    matrix = Matrix([[1, 2], [3, 4]])
    steps = [str(matrix)]
    matrix.permute(0, 1)
    steps.append(str(matrix))
    matrix.multiply_row(1, 4)
    steps.append(str(matrix))
    matrix.add_row(0, 1, -2)
    steps.append(str(matrix))
    return steps


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="densematrix",
        description="Render matrices and step through elementary row operations.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level (defaults to DENSEMATRIX_LOG_LEVEL or WARNING).",
    )
    parser.add_argument(
        "--log-format",
        choices=("text", "json"),
        default=None,
        help="Log record format (defaults to DENSEMATRIX_LOG_FORMAT or text).",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser(
        "walkthrough",
        help="Print [[1, 2], [3, 4]] after permute, multiply_row and add_row.",
    )

    show = subparsers.add_parser("show", help="Render a matrix literal and its determinant.")
    show.add_argument(
        "literal",
        help='Matrix literal, rows separated by ";" and cells by "," (e.g. "1,2;3,4").',
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    setup_logging(level=args.log_level, fmt=args.log_format)

    try:
        if args.command == "walkthrough":
            for step in walkthrough():
                print(step)
        else:
            matrix = parse_literal(args.literal)
            print(matrix)
            if matrix.is_square:
                print(f"det = {format_value(matrix.determinant())}")
    except MatrixError as exc:
        logger.error("Command failed", extra={"extra_data": exc.to_dict()})
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    return 0
