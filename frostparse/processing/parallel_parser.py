"""
Parallel line parsing with order-preserving reassembly.
"""

import os
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import List, Optional, Sequence, Tuple
import logging

from ..parser.events import CombatLogRecord
from ..parser.factory import EventFactory
from ..parser.listeners import EventListener
from ..parser.tokenizer import LineTokenizer

logger = logging.getLogger(__name__)


class ParallelLineParser:
    """
    Parses chunks of lines on a thread pool.

    Every line is parsed independently given the reference year, so chunks
    share no state. Results are reassembled in line order before listener
    callbacks fire, which keeps callback order identical to sequential
    parsing.
    """

    def __init__(
        self,
        reference_year: Optional[int] = None,
        max_workers: Optional[int] = None,
        chunk_size: int = 10000,
        event_listener: Optional[EventListener] = None,
    ):
        """
        Initialize the parallel parser.

        Args:
            reference_year: Year for log timestamps (defaults to current year)
            max_workers: Maximum number of worker threads (defaults to CPU count)
            chunk_size: Number of lines per work item
            event_listener: Callbacks invoked for each record, in line order
        """
        if chunk_size < 1:
            raise ValueError(f"chunk_size must be at least 1, got {chunk_size}")
        self.reference_year = reference_year or LineTokenizer().reference_year
        self.max_workers = max_workers or os.cpu_count()
        self.chunk_size = chunk_size
        self.event_listener = event_listener or EventListener()
        self.unknown_event_types = {}

    def parse_file(self, file_path: str) -> List[CombatLogRecord]:
        """
        Parse a combat log file in parallel.

        Args:
            file_path: Path to the combat log file

        Returns:
            Records in file order
        """
        file_path = Path(file_path)
        if not file_path.exists():
            raise FileNotFoundError(f"Combat log file not found: {file_path}")

        with open(file_path, "r", encoding="utf-8") as f:
            lines = f.readlines()
        return self.parse_lines(lines)

    def parse_lines(self, lines: Sequence[str]) -> List[CombatLogRecord]:
        """
        Parse lines in parallel and return records in input order.

        Raises:
            CombatLogParseError: For the first malformed line (by line number)
        """
        chunks = [
            (start, lines[start:start + self.chunk_size])
            for start in range(0, len(lines), self.chunk_size)
        ]
        logger.info(
            f"Parsing {len(lines)} lines in {len(chunks)} chunks "
            f"with {self.max_workers} threads"
        )

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            # map() yields results in submission order
            results = list(executor.map(self._parse_chunk, chunks))

        records: List[CombatLogRecord] = []
        self.unknown_event_types = {}
        for chunk_records, unknown in results:
            records.extend(chunk_records)
            for event_type, count in unknown.items():
                self.unknown_event_types[event_type] = (
                    self.unknown_event_types.get(event_type, 0) + count
                )

        for event_type, count in self.unknown_event_types.items():
            logger.warning(f"Unknown event type {event_type!r} seen {count} times")

        for record in records:
            self.event_listener.dispatch(record)

        return records

    def _parse_chunk(
        self, chunk: Tuple[int, Sequence[str]]
    ) -> Tuple[List[CombatLogRecord], dict]:
        start, lines = chunk
        tokenizer = LineTokenizer(self.reference_year)
        factory = EventFactory(warn_unknown=False)
        records = []

        for offset, line in enumerate(lines):
            parsed = tokenizer.parse_line(line, start + offset + 1)
            if parsed is None:
                continue
            records.append(factory.create_record(parsed))

        return records, dict(factory.unknown_event_types)


__all__ = ["ParallelLineParser"]
