"""
Text and LaTeX rendering of matrix storage.

The boxed grid looks like::

    ┌     ┐
    │ 3 4 │
    │ 4 8 │
    └     ┘

(every cell centred in a field as wide as the widest cell text).
"""

from __future__ import annotations

import math
from typing import Sequence

TOP_LEFT = "┌"
TOP_RIGHT = "┐"
RAIL = "│"
BOTTOM_LEFT = "└"
BOTTOM_RIGHT = "┘"


def format_value(value: float) -> str:
    """Convert a cell value to text, dropping ``.0`` for integral values."""
    if math.isfinite(value) and value == int(value) and abs(value) < 1e10:
        return str(int(value))
    return str(value)


def center_cell(text: str, width: int) -> str:
    """
    Center ``text`` in a field of ``width`` characters.

    The left pad brings the text up to ``(len(text) + width) // 2``
    characters; whatever remains is padded on the right.
    """
    return text.rjust((len(text) + width) // 2).ljust(width)


def render_boxed(storage: Sequence[Sequence[float]], columns: int) -> str:
    """
    Render rows of values as a boxed text grid.

    Args:
        storage: Row-major cell values
        columns: Column count (needed when there are no rows)

    Returns:
        The grid, one line per row plus top and bottom borders, ending
        with a newline
    """
    texts = [[format_value(value) for value in row] for row in storage]
    width = max((len(text) for row in texts for text in row), default=0)

    lines = [
        f"{RAIL} " + " ".join(center_cell(text, width) for text in row) + f" {RAIL}"
        for row in texts
    ]
    gap = " " * (width * columns + columns - 1)

    return (
        f"{TOP_LEFT} {gap} {TOP_RIGHT}\n"
        + "\n".join(lines)
        + f"\n{BOTTOM_LEFT} {gap} {BOTTOM_RIGHT}\n"
    )


def render_tex(storage: Sequence[Sequence[float]]) -> str:
    """Convert to LaTeX (pmatrix)."""
    rows_tex = " \\\\ ".join(
        " & ".join(format_value(value) for value in row) for row in storage
    )
    return f"\\begin{{pmatrix}} {rows_tex} \\end{{pmatrix}}"
