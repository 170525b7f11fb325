"""Data models for decoded policy numbers."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Sequence

from policyocr.engines.glyph_table import UNRECOGNIZED
from policyocr.errors import InvalidEntry, InvalidFormat, MalformedEntry
from policyocr.parsing.validator import (
    compute_checksum,
    validate_entry,
    validate_policy_number,
)


class PolicyStatus(Enum):
    """Classification of a policy number. The value is its report label."""

    OK = ""
    ERROR = "ERR"
    ILLEGIBLE = "ILL"

    @property
    def label(self) -> str:
        return self.value


@dataclass(frozen=True)
class PolicyNumber:
    """
    A 9-character policy number, optionally with the glyph entry it came from.

    The entry is kept only for display; it is shape-checked but never
    compared against ``number``.
    """

    number: str
    entry: Optional[tuple[str, ...]] = field(default=None, compare=False)

    def __post_init__(self):
        if not validate_policy_number(self.number):
            raise InvalidFormat(self.number)
        if self.entry is not None:
            if not _is_row_sequence(self.entry):
                raise InvalidEntry("Invalid entry: expected a sequence of rows")
            entry = tuple(self.entry)
            try:
                validate_entry(entry)
            except MalformedEntry as e:
                raise InvalidEntry(f"Invalid entry: {e}") from e
            object.__setattr__(self, "entry", entry)

    @property
    def checksum(self) -> Optional[int]:
        """Mod-11 checksum, or None for an illegible number."""
        return compute_checksum(self.number)

    @property
    def is_illegible(self) -> bool:
        return UNRECOGNIZED in self.number

    def is_valid(self) -> bool:
        """True iff every digit is legible and the checksum is 0."""
        return self.checksum == 0

    @property
    def status(self) -> PolicyStatus:
        # Illegibility wins over a bad checksum.
        if self.is_illegible:
            return PolicyStatus.ILLEGIBLE
        if not self.is_valid():
            return PolicyStatus.ERROR
        return PolicyStatus.OK

    def render(self) -> str:
        """
        Reproduce the glyph block this number was decoded from.

        Returns the four stored rows exactly as given, each followed by a
        newline. The separator row is not normalized, so a non-blank fourth
        row is reproduced unchanged.

        Raises:
            ValueError: If the number was built without an entry.
        """
        if self.entry is None:
            raise ValueError(f"No glyph entry retained for {self.number}")
        return "".join(f"{row}\n" for row in self.entry)

    def report_line(self) -> str:
        label = self.status.label
        return f"{self.number} {label}" if label else self.number

    def to_dict(self) -> dict:
        return {
            "number": self.number,
            "status": self.status.label,
            "valid": self.is_valid(),
            "checksum": self.checksum,
        }

    def __str__(self) -> str:
        return self.report_line()


def _is_row_sequence(value) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, str)
