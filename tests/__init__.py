"""
Tests for the frostparse combat log parser.

This package contains tests for:
- Line tokenizing and numeric field grammars
- The per-event-type layout table and record model
- Parsing files, listener callbacks and error handling
- Aggregation into SummaryStats and encounter spans
- Configuration loading and the CLI
"""
