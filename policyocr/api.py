"""Public API for reading glyph files and writing policy number reports."""

import logging
from pathlib import Path
from typing import Iterable

from policyocr.errors import MalformedEntry
from policyocr.models import PolicyNumber
from policyocr.parsing.parser import parse_lines

logger = logging.getLogger(__name__)


class PolicyOCR:
    """
    Main entry point for decoding policy number files.

    Usage:
        ocr = PolicyOCR()
        policy_numbers = ocr.extract("path/to/entries.txt")
        ocr.write_report(policy_numbers, "path/to/report.txt")

    The report has one policy number per line. Illegible digits are
    shown as '?'; a wrong checksum is marked ERR and an illegible number
    ILL in a second column:
        457508000
        664371495 ERR
        86110??36 ILL
    """

    def __init__(self, encoding: str = "utf-8"):
        """
        Initialize the reader.

        Args:
            encoding: Text encoding used for input and report files.
        """
        self.encoding = encoding

    def extract(self, path: str | Path) -> list[PolicyNumber]:
        """
        Decode every entry in a glyph file.

        Args:
            path: Path to a file of 27-character glyph rows.

        Returns:
            Policy numbers in file order.

        Raises:
            FileNotFoundError: If the file doesn't exist.
            MalformedEntry: If any row is malformed or cannot be decoded
                in the configured encoding.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Input not found: {path}")

        logger.info("Reading policy numbers from %s", path)
        data = path.read_bytes()
        try:
            text = data.decode(self.encoding)
        except UnicodeDecodeError as e:
            row = data.count(b"\n", 0, e.start) + 1
            raise MalformedEntry("invalid character", row=row) from e
        return self.extract_from_text(text)

    def extract_from_text(self, text: str) -> list[PolicyNumber]:
        """Decode every entry in an in-memory block of glyph rows."""
        return parse_lines(_split_rows(text))

    def write_report(
        self, policy_numbers: Iterable[PolicyNumber], path: str | Path
    ) -> None:
        """Write one report line per policy number, overwriting ``path``."""
        path = Path(path)
        lines = [f"{policy_number.report_line()}\n" for policy_number in policy_numbers]
        path.write_text("".join(lines), encoding=self.encoding)
        logger.info("Wrote %d report line(s) to %s", len(lines), path)

    def report(
        self, input_path: str | Path, output_path: str | Path
    ) -> list[PolicyNumber]:
        """Decode ``input_path`` and write its report to ``output_path``."""
        policy_numbers = self.extract(input_path)
        self.write_report(policy_numbers, output_path)
        return policy_numbers


def _split_rows(text: str) -> list[str]:
    """Split on newlines only; other control characters stay in their row."""
    rows = text.split("\n")
    if rows[-1] == "":
        rows.pop()
    return [row[:-1] if row.endswith("\r") else row for row in rows]
