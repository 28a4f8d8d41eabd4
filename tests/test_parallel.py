"""
Tests for parallel parsing.
"""

import pytest

from frostparse.parser import CombatLogParseError, CombatLogParser, EventListener
from frostparse.processing import ParallelLineParser
from tests.conftest import REFERENCE_YEAR, SAMPLE_PAYLOADS, make_line


@pytest.fixture
def many_lines():
    lines = []
    for i, event_type in enumerate(sorted(SAMPLE_PAYLOADS) * 3):
        ts = f"10/23 21:{10 + i // 60:02d}:{i % 60:02d}.000"
        lines.append(make_line(event_type, *SAMPLE_PAYLOADS[event_type], ts=ts))
    return lines


class TestParallelLineParser:
    """Test order preservation and error reporting."""

    def test_matches_sequential_parse(self, many_lines):
        sequential = CombatLogParser(reference_year=REFERENCE_YEAR).parse_lines(many_lines)
        parallel = ParallelLineParser(
            reference_year=REFERENCE_YEAR, max_workers=4, chunk_size=7
        ).parse_lines(many_lines)

        assert parallel == sequential

    def test_callbacks_fire_in_line_order(self, many_lines):
        seen = []
        listener = EventListener()
        listener.add_event_listener("SWING_DAMAGE", lambda r: seen.append(r.timestamp))

        ParallelLineParser(
            reference_year=REFERENCE_YEAR, max_workers=4, chunk_size=5, event_listener=listener
        ).parse_lines(many_lines)

        assert len(seen) == 3
        assert seen == sorted(seen)

    def test_error_reports_file_line_number(self, many_lines):
        many_lines[23] = make_line("SWING_DAMAGE", "oops", "0", "1", "nil", "nil", "nil", "nil")
        parser = ParallelLineParser(reference_year=REFERENCE_YEAR, max_workers=2, chunk_size=10)

        with pytest.raises(CombatLogParseError) as exc_info:
            parser.parse_lines(many_lines)
        assert exc_info.value.line_number == 24

    def test_unknown_event_types_are_merged(self):
        lines = [make_line("SPELL_ABSORBED", "1")] * 5
        parser = ParallelLineParser(reference_year=REFERENCE_YEAR, max_workers=2, chunk_size=2)

        records = parser.parse_lines(lines)
        assert len(records) == 5
        assert parser.unknown_event_types == {"SPELL_ABSORBED": 5}

    def test_unknown_event_type_warned_once(self, caplog):
        lines = [make_line("SPELL_ABSORBED", "1")] * 6
        parser = ParallelLineParser(reference_year=REFERENCE_YEAR, max_workers=3, chunk_size=2)

        with caplog.at_level("WARNING"):
            parser.parse_lines(lines)

        warnings = [r for r in caplog.records if "SPELL_ABSORBED" in r.message]
        assert len(warnings) == 1
        assert "6 times" in warnings[0].message

    def test_parse_file(self, log_file):
        records = ParallelLineParser(reference_year=REFERENCE_YEAR, max_workers=2).parse_file(str(log_file))
        assert [r.source_name for r in records] == ["Jaina", "Uther", "Jaina"]

    def test_invalid_chunk_size(self):
        with pytest.raises(ValueError):
            ParallelLineParser(chunk_size=0)
