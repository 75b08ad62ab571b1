"""Exception types for pyhttpstatus."""

from __future__ import annotations


class StatusLookupError(Exception):
    """Base exception for expected application errors."""


class UsageError(StatusLookupError):
    """Raised when the lookup options are invalid or contradictory."""


class DatabaseError(StatusLookupError):
    """Raised when the embedded status table contains a malformed row."""

    def __init__(self, line_number: int, reason: str) -> None:
        self.line_number = line_number
        self.reason = reason
        super().__init__(f"Malformed status database row at line {line_number}: {reason}")
