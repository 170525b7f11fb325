"""Decode a 4-row glyph entry into a 9-character digit string."""

from typing import Sequence

import numpy as np

from policyocr.engines.glyph_table import (
    CELL_HEIGHT,
    CELL_WIDTH,
    DIGITS_PER_ENTRY,
    UNRECOGNIZED,
    lookup_glyph,
)
from policyocr.parsing.validator import validate_entry


def decode_entry(rows: Sequence[str], first_row: int = 1) -> str:
    """
    Decode one entry into its digit string.

    Each of the nine 3x3 cells in the first three rows is matched against
    the glyph table. Cells that match nothing become '?', so the result is
    always 9 characters long. The fourth row carries no digit data.

    Args:
        rows: Exactly 4 rows of 27 characters from {' ', '_', '|'}.
        first_row: 1-based number of ``rows[0]`` in the surrounding input,
            used when reporting a malformed row.

    Returns:
        A 9-character string of '0'-'9' and '?'.

    Raises:
        MalformedEntry: If the entry has the wrong shape or alphabet.
    """
    validate_entry(rows, first_row=first_row)

    return "".join(_decode_cell(cell) for cell in _cells(rows))


def _cells(rows: Sequence[str]) -> list[str]:
    """Slice the glyph rows into nine row-major 9-character cell patterns."""
    grid = np.array([list(row) for row in rows[:CELL_HEIGHT]], dtype="<U1")
    # (row, position, column) -> (position, row, column)
    cells = grid.reshape(CELL_HEIGHT, DIGITS_PER_ENTRY, CELL_WIDTH).swapaxes(0, 1)
    return ["".join(cell.ravel()) for cell in cells]


def _decode_cell(pattern: str) -> str:
    digit = lookup_glyph(pattern)
    return UNRECOGNIZED if digit is None else str(digit)
