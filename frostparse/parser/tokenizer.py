"""
Line tokenizer for parsing WoW combat log lines.
"""

import re
from datetime import datetime
from typing import List, Optional
from dataclasses import dataclass

from .errors import CombatLogParseError, FieldFormatError


# Numeric field grammars
_SIGNED = re.compile(r"^-?\d+$")
_UNSIGNED = re.compile(r"^\d+$")
_HEX = re.compile(r"^0x[0-9a-fA-F]+$")

_TRUE_TOKENS = {"1", "true", "t"}


def strip_quotes(value: str) -> str:
    """Remove the quote characters around names."""
    return value.replace('"', "")


def parse_int(value: str) -> int:
    """Parse a signed decimal field."""
    if not _SIGNED.match(value):
        raise FieldFormatError(f"expected signed integer, got {value!r}")
    return int(value)


def parse_uint(value: str) -> int:
    """Parse an unsigned decimal field."""
    if not _UNSIGNED.match(value):
        raise FieldFormatError(f"expected unsigned integer, got {value!r}")
    return int(value)


def parse_spell_school(value: str) -> int:
    """
    Parse a spell school bitmask.

    Schools are written either in decimal (``16``) or hexadecimal (``0x10``);
    both forms yield the same value.
    """
    if value.startswith("0x"):
        if not _HEX.match(value):
            raise FieldFormatError(f"expected hexadecimal spell school, got {value!r}")
        return int(value, 16)
    return parse_uint(value)


def parse_uint_or_nil(value: str) -> int:
    """Parse an optional amount; ``nil`` means not applicable and maps to 0."""
    if "nil" in value:
        return 0
    return parse_uint(value)


def parse_nil_bool(value: str) -> bool:
    """Parse an optional flag; ``nil`` and anything unrecognised map to False."""
    if "nil" in value:
        return False
    return value.strip().lower() in _TRUE_TOKENS


@dataclass
class ParsedLine:
    """Represents a tokenized combat log line."""

    timestamp: datetime
    event_type: str
    fields: List[str]
    raw_line: str
    line_number: int


class LineTokenizer:
    """
    Tokenizes individual lines from WoW combat logs.

    A line looks like ``10/23 21:14:36.123  SWING_DAMAGE,0x07...,"Name",...``:
    a time of day without a year, two spaces, then comma separated fields.
    """

    SEPARATOR = "  "

    # Format: "YEAR/M/D H:MM:SS.mmm", day may be space padded
    TIMESTAMP_PATTERN = re.compile(
        r"^(\d{4})/(\d{1,2})/ ?(\d{1,2}) (\d{1,2}):(\d{2}):(\d{2})\.(\d{3})$"
    )

    def __init__(self, reference_year: Optional[int] = None):
        """
        Initialize the tokenizer.

        Args:
            reference_year: Year to prepend to log timestamps (defaults to current year)
        """
        self.reference_year = reference_year or datetime.now().year
        self.line_count = 0
        self.error_count = 0

    def parse_line(self, line: str, line_number: Optional[int] = None) -> Optional[ParsedLine]:
        """
        Split a single combat log line into timestamp and fields.

        Args:
            line: Raw line from combat log file
            line_number: Position of the line in its file (defaults to a running count)

        Returns:
            ParsedLine object, or None for blank lines

        Raises:
            CombatLogParseError: If the timestamp or line structure is malformed
        """
        self.line_count += 1
        if line_number is None:
            line_number = self.line_count

        line = line.rstrip("\r\n")
        if not line.strip():
            return None

        head, sep, rest = line.partition(self.SEPARATOR)
        if not sep:
            self.error_count += 1
            raise CombatLogParseError("missing timestamp separator", line_number, line)

        try:
            timestamp = self.parse_timestamp(head)
        except FieldFormatError as e:
            self.error_count += 1
            raise CombatLogParseError(str(e), line_number, line) from e

        fields = self._split_params(rest)
        if len(fields) < 6:
            self.error_count += 1
            raise CombatLogParseError(
                f"expected at least 6 fields, got {len(fields)}", line_number, line
            )

        return ParsedLine(
            timestamp=timestamp,
            event_type=fields[0],
            fields=fields,
            raw_line=line,
            line_number=line_number,
        )

    def parse_timestamp(self, value: str) -> datetime:
        """
        Parse a log time of day using the reference year.

        Args:
            value: Timestamp segment like "10/23 21:14:36.123"

        Returns:
            Millisecond-resolution datetime
        """
        match = self.TIMESTAMP_PATTERN.match(f"{self.reference_year}/{value}")
        if not match:
            raise FieldFormatError(f"malformed timestamp {value!r}")

        year, month, day, hour, minute, second, millis = (int(g) for g in match.groups())
        try:
            return datetime(year, month, day, hour, minute, second, millis * 1000)
        except ValueError as e:
            raise FieldFormatError(f"invalid timestamp {value!r}: {e}") from e

    def _split_params(self, params_str: str) -> List[str]:
        """
        Split parameter string by commas, keeping quoted names intact.

        Args:
            params_str: Comma-separated parameter string

        Returns:
            List of raw parameter values
        """
        params = []
        current = []
        in_quotes = False

        for char in params_str:
            if char == '"':
                in_quotes = not in_quotes
                current.append(char)
            elif char == "," and not in_quotes:
                params.append("".join(current))
                current = []
            else:
                current.append(char)

        # Don't forget the last parameter
        params.append("".join(current))
        return params

    def get_stats(self) -> dict:
        """
        Get tokenizing statistics.

        Returns:
            Dictionary with line_count and error_count
        """
        return {
            "lines_processed": self.line_count,
            "errors": self.error_count,
            "success_rate": (self.line_count - self.error_count) / max(self.line_count, 1),
        }
