"""Canonical pipe-and-underscore glyphs for the digits 0-9."""

from types import MappingProxyType
from typing import Optional

from policyocr.errors import InvalidFormat

# Each entry is a 3x3 cell flattened row-major.
_DIGIT_GLYPHS = {
    0: " _ "
       "| |"
       "|_|",
    1: "   "
       "  |"
       "  |",
    2: " _ "
       " _|"
       "|_ ",
    3: " _ "
       " _|"
       " _|",
    4: "   "
       "|_|"
       "  |",
    5: " _ "
       "|_ "
       " _|",
    6: " _ "
       "|_ "
       "|_|",
    7: " _ "
       "  |"
       "  |",
    8: " _ "
       "|_|"
       "|_|",
    9: " _ "
       "|_|"
       " _|",
}

# Pattern -> digit. Read-only, shared by every decode call.
GLYPH_TABLE = MappingProxyType(
    {pattern: digit for digit, pattern in _DIGIT_GLYPHS.items()}
)

CELL_WIDTH = 3
CELL_HEIGHT = 3
DIGITS_PER_ENTRY = 9
ROW_WIDTH = CELL_WIDTH * DIGITS_PER_ENTRY
ROWS_PER_ENTRY = CELL_HEIGHT + 1
GLYPH_ALPHABET = frozenset(" _|")
UNRECOGNIZED = "?"
DIGIT_CHARS = "0123456789"
BLANK_ROW = " " * ROW_WIDTH
_BLANK_CELL = " " * (CELL_WIDTH * CELL_HEIGHT)


def lookup_glyph(pattern: str) -> Optional[int]:
    """Return the digit drawn by a 9-character cell pattern, or None if unknown."""
    return GLYPH_TABLE.get(pattern)


def glyph_for(digit: int) -> str:
    """Return the canonical 9-character pattern for a digit 0-9."""
    return _DIGIT_GLYPHS[digit]


def render_entry(number: str) -> list[str]:
    """
    Draw a 9-character number as a 4-row entry.

    Digits use their canonical glyph; '?' is drawn as a blank cell, which
    decodes back to '?'. The fourth row is the blank separator.
    """
    if len(number) != DIGITS_PER_ENTRY or not all(
        char in DIGIT_CHARS or char == UNRECOGNIZED for char in number
    ):
        raise InvalidFormat(number)

    cells = [
        _BLANK_CELL if char == UNRECOGNIZED else glyph_for(int(char))
        for char in number
    ]
    rows = [
        "".join(
            cell[row * CELL_WIDTH : (row + 1) * CELL_WIDTH] for cell in cells
        )
        for row in range(CELL_HEIGHT)
    ]
    rows.append(BLANK_ROW)
    return rows
