"""
Text rendering of matrices for diagnostics.

The layout is write-only; nothing parses it back.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from homatrix.model.matrix import Matrix

# (opening, closing) bracket glyphs for rows 0..3
ROW_GLYPHS: tuple[tuple[str, str], ...] = (
    ("/ ", "\\"),
    ("| ", "|"),
    ("| ", "|"),
    ("\\ ", "/"),
)


def format_cell(value: float) -> str:
    """Shortest positional decimal that round-trips, without a trailing '.0'."""
    return np.format_float_positional(value, trim="-")


def render_matrix(matrix: Matrix) -> str:
    """
    Render `matrix` as four bracketed lines, one per row.

    Lines are joined by newlines with no trailing newline after row 3, so
    `print(matrix)` does not leave a blank line.

    Example for the identity:

        / 1 0 0 0 \\
        | 0 1 0 0 |
        | 0 0 1 0 |
        \\ 0 0 0 1 /
    """
    lines = []
    for rownum, (opening, closing) in enumerate(ROW_GLYPHS):
        cells = "".join(f"{format_cell(value)} " for value in matrix.row(rownum))
        lines.append(f"{opening}{cells}{closing}")
    return "\n".join(lines)
