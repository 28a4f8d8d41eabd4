"""
Exceptions raised while parsing combat log lines.
"""

from typing import Optional


class FieldFormatError(ValueError):
    """A single field does not match its expected grammar."""


class CombatLogParseError(ValueError):
    """
    A line is structurally malformed.

    Carries the line number and raw text so callers can report the line
    or decide to skip it and continue.
    """

    def __init__(self, reason: str, line_number: Optional[int] = None, raw_line: str = ""):
        self.reason = reason
        self.line_number = line_number
        self.raw_line = raw_line
        location = f"line {line_number}" if line_number is not None else "line ?"
        super().__init__(f"{location}: {reason} [{raw_line[:100]}]")
