"""Split glyph rows into entries and decode them into policy numbers."""

import logging
from typing import Sequence

from policyocr.engines.decoder import decode_entry
from policyocr.engines.glyph_table import ROWS_PER_ENTRY
from policyocr.models import PolicyNumber
from policyocr.parsing.validator import validate_row

logger = logging.getLogger(__name__)


def parse_lines(lines: Sequence[str]) -> list[PolicyNumber]:
    """
    Parse a sequence of glyph rows into policy numbers.

    Input format, one entry per 4 rows:
          _  _     _  _  _  _  _
        | _| _||_||_ |_   ||_||_|
        ||_  _|  | _||_|  ||_||_|
        <27 spaces>

    Every row is validated before any entry is decoded, so a bad row
    fails the whole call and nothing is returned. A trailing group of
    fewer than 4 rows is dropped.

    Args:
        lines: Rows without line terminators.

    Returns:
        One PolicyNumber per complete entry, in input order, each keeping
        its source entry.

    Raises:
        MalformedEntry: Tagged with the 1-based number of the first bad row.
    """
    lines = list(lines)
    for index, line in enumerate(lines):
        validate_row(line, index + 1)

    complete = len(lines) - len(lines) % ROWS_PER_ENTRY
    if complete < len(lines):
        logger.warning(
            "Discarding %d trailing row(s) that do not form a complete entry",
            len(lines) - complete,
        )

    policy_numbers = []
    for start in range(0, complete, ROWS_PER_ENTRY):
        entry = lines[start : start + ROWS_PER_ENTRY]
        number = decode_entry(entry, first_row=start + 1)
        policy_numbers.append(PolicyNumber(number, entry=entry))

    logger.debug("Decoded %d policy number(s)", len(policy_numbers))
    return policy_numbers
