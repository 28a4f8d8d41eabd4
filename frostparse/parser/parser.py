"""
Main combat log parser that coordinates tokenization, record creation and callbacks.
"""

from pathlib import Path
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional
import logging

from .errors import CombatLogParseError
from .events import CombatLogRecord
from .factory import EventFactory
from .listeners import EventListener
from .tokenizer import LineTokenizer


logger = logging.getLogger(__name__)


class CombatLogParser:
    """
    Main parser for WoW combat log files.

    Handles file reading, line tokenization, record creation and the
    per-event-type listener hook. By default the first malformed line aborts
    the parse; with ``skip_malformed`` the error is recorded and parsing
    continues with the next line.
    """

    def __init__(
        self,
        reference_year: Optional[int] = None,
        event_listener: Optional[EventListener] = None,
        skip_malformed: bool = False,
    ):
        """
        Initialize the combat log parser.

        Args:
            reference_year: Year for log timestamps (defaults to current year)
            event_listener: Callbacks invoked for each parsed record
            skip_malformed: Record malformed lines and continue instead of raising
        """
        self.tokenizer = LineTokenizer(reference_year)
        self.event_factory = EventFactory()
        self.event_listener = event_listener or EventListener()
        self.skip_malformed = skip_malformed
        self.current_file: Optional[Path] = None
        self.events_processed = 0
        self.parse_errors: List[CombatLogParseError] = []

    @property
    def reference_year(self) -> int:
        return self.tokenizer.reference_year

    def parse_file(
        self, file_path: str, progress_callback: Optional[Callable[[int], None]] = None
    ) -> List[CombatLogRecord]:
        """
        Parse a combat log file.

        Args:
            file_path: Path to the combat log file
            progress_callback: Optional callback receiving the number of lines read

        Returns:
            Records in file order

        Raises:
            FileNotFoundError: If the file does not exist
            CombatLogParseError: On a malformed line unless skip_malformed is set
        """
        file_path = Path(file_path)
        if not file_path.exists():
            raise FileNotFoundError(f"Combat log file not found: {file_path}")

        self.current_file = file_path
        file_size = file_path.stat().st_size
        logger.info(f"Starting parse of {file_path.name} ({file_size / 1024 / 1024:.1f} MB)")

        with open(file_path, "r", encoding="utf-8") as f:
            records = list(self.iter_records(f, progress_callback))

        logger.info(
            f"Completed parsing {file_path.name}: "
            f"{self.events_processed} events, {len(self.parse_errors)} errors"
        )
        return records

    def parse_lines(self, lines: Iterable[str]) -> List[CombatLogRecord]:
        """
        Parse a sequence of lines and return records.

        Args:
            lines: Raw combat log lines

        Returns:
            Records in input order
        """
        return list(self.iter_records(lines))

    def iter_records(
        self,
        lines: Iterable[str],
        progress_callback: Optional[Callable[[int], None]] = None,
    ) -> Iterator[CombatLogRecord]:
        """
        Lazily parse lines, firing listener callbacks as each record is built.

        Args:
            lines: Raw combat log lines
            progress_callback: Optional callback receiving the number of lines read

        Yields:
            CombatLogRecord objects in input order
        """
        for line_number, line in enumerate(lines, start=1):
            record = self._process_line(line, line_number)
            if record is not None:
                self.event_listener.dispatch(record)
                yield record

            if progress_callback and line_number % 10000 == 0:
                progress_callback(line_number)

    def _process_line(self, line: str, line_number: int) -> Optional[CombatLogRecord]:
        """
        Process a single line.

        Args:
            line: Raw line from combat log
            line_number: 1-based position of the line

        Returns:
            CombatLogRecord, or None for blank or skipped lines
        """
        try:
            parsed = self.tokenizer.parse_line(line, line_number)
            if parsed is None:
                return None
            record = self.event_factory.create_record(parsed)
        except CombatLogParseError as e:
            if not self.skip_malformed:
                raise
            self.parse_errors.append(e)
            logger.debug(f"Skipping malformed line {line_number}: {e.reason}")
            return None

        self.events_processed += 1
        return record

    def get_stats(self) -> Dict[str, Any]:
        """
        Get parsing statistics.

        Returns:
            Dictionary with parsing stats
        """
        return {
            "file": str(self.current_file) if self.current_file else None,
            "events_processed": self.events_processed,
            "parse_errors": len(self.parse_errors),
            "unknown_event_types": dict(self.event_factory.unknown_event_types),
            "tokenizer_stats": self.tokenizer.get_stats(),
        }

    def reset(self):
        """Reset parser state for a new file."""
        self.tokenizer = LineTokenizer(self.tokenizer.reference_year)
        self.event_factory = EventFactory()
        self.events_processed = 0
        self.parse_errors = []
        self.current_file = None
