"""Exceptions raised while decoding and validating policy numbers."""

from typing import Optional


class PolicyOCRError(Exception):
    """Base class for all policy number decoding errors."""


class MalformedEntry(PolicyOCRError, ValueError):
    """A glyph row or entry does not have the expected shape or alphabet."""

    def __init__(self, reason: str, row: Optional[int] = None):
        self.reason = reason
        self.row = row
        if row is None:
            message = f"Invalid entry format ({reason})"
        else:
            message = f"Line {row}: Invalid entry format ({reason})"
        super().__init__(message)


class InvalidFormat(PolicyOCRError, ValueError):
    """A policy number is not 9 characters of digits or '?'."""

    def __init__(self, number):
        self.number = number
        super().__init__(f"Invalid policy number format: {number!r}")


class InvalidEntry(PolicyOCRError, ValueError):
    """A glyph block attached to a policy number failed its shape check."""
