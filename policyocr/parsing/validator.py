"""Policy number and glyph row validation utilities."""

from typing import Optional, Sequence

from policyocr.engines.glyph_table import (
    DIGIT_CHARS,
    DIGITS_PER_ENTRY,
    GLYPH_ALPHABET,
    ROW_WIDTH,
    ROWS_PER_ENTRY,
    UNRECOGNIZED,
)
from policyocr.errors import MalformedEntry

CHECKSUM_MODULUS = 11


def validate_row(row: str, row_number: int) -> None:
    """
    Check that a single glyph row is 27 characters of space, '_' or '|'.

    Args:
        row: The row text, without its line terminator.
        row_number: 1-based position of the row, used in the error.

    Raises:
        MalformedEntry: On a wrong length or a character outside the alphabet.
    """
    if not isinstance(row, str) or len(row) != ROW_WIDTH:
        raise MalformedEntry("line length", row=row_number)
    if not GLYPH_ALPHABET.issuperset(row):
        raise MalformedEntry("invalid character", row=row_number)


def validate_entry(rows: Sequence[str], first_row: int = 1) -> None:
    """Check that ``rows`` is a complete 4-row entry of valid glyph rows."""
    if rows is None or len(rows) != ROWS_PER_ENTRY:
        raise MalformedEntry("row count")
    for offset, row in enumerate(rows):
        validate_row(row, first_row + offset)


def validate_policy_number(number: str) -> bool:
    """Return True if ``number`` is 9 characters, each a digit or '?'."""
    if not isinstance(number, str) or len(number) != DIGITS_PER_ENTRY:
        return False
    return all(c in DIGIT_CHARS or c == UNRECOGNIZED for c in number)


def compute_checksum(number: str) -> Optional[int]:
    """
    Compute the positional mod-11 checksum of a policy number.

    policy number:   3  4  5  8  8  2  8  6  5
    position names: d9 d8 d7 d6 d5 d4 d3 d2 d1

    checksum = (d1 + 2*d2 + 3*d3 + ... + 9*d9) mod 11

    Returns None when the number holds an unrecognized '?' digit; such
    numbers are never checksummed.
    """
    if UNRECOGNIZED in number:
        return None
    total = sum(
        weight * int(digit)
        for weight, digit in zip(range(len(number), 0, -1), number)
    )
    return total % CHECKSUM_MODULUS
