"""
Unit tests for the tabular parser (csv_dashboard.parsers.tabular).

Covers the record contract (keys, order, string values), every anomaly
the parser degrades on, and the diagnostics it reports for each.
"""

from __future__ import annotations

import logging

import pytest

from csv_dashboard.parsers import Severity, parse_csv


# ---------------------------------------------------------------------------
# Well-formed input
# ---------------------------------------------------------------------------

class TestWellFormed:
    """Tests for clean header + data input."""

    def test_single_row(self):
        assert parse_csv("a,b\n1,2") == [{"a": "1", "b": "2"}]

    def test_record_count_and_keys(self):
        text = "Date,DailyVisits,Unique\n" + "\n".join(
            f"2024-01-0{i},{i * 100},{i * 80}" for i in range(1, 6)
        )
        records = parse_csv(text)
        assert len(records) == 5
        for record in records:
            assert list(record) == ["Date", "DailyVisits", "Unique"]

    def test_values_stay_strings(self):
        records = parse_csv("x,y\n1.5,2")
        assert records[0]["x"] == "1.5"
        assert isinstance(records[0]["y"], str)

    def test_whitespace_trimmed_everywhere(self):
        text = "  Primary Use Case , Budget \n   Gaming ,  1500  \n"
        assert parse_csv(text) == [{"Primary Use Case": "Gaming", "Budget": "1500"}]

    def test_crlf_line_endings(self):
        assert parse_csv("a,b\r\n1,2\r\n3,4\r\n") == [
            {"a": "1", "b": "2"},
            {"a": "3", "b": "4"},
        ]

    def test_empty_cells_are_kept(self):
        assert parse_csv("a,b,c\n1,,3") == [{"a": "1", "b": "", "c": "3"}]

    def test_no_diagnostics_for_clean_input(self, collector):
        parse_csv("a,b\n1,2\n3,4", sink=collector)
        assert len(collector) == 0


# ---------------------------------------------------------------------------
# Empty / insufficient input
# ---------------------------------------------------------------------------

class TestInsufficientInput:
    """Inputs that yield an empty result set."""

    def test_none(self, collector):
        assert parse_csv(None, sink=collector) == []
        assert collector.kinds() == ["input_absent"]
        assert collector.diagnostics[0].severity is Severity.INFO

    def test_empty_string(self, collector):
        assert parse_csv("", sink=collector) == []
        assert collector.kinds() == ["input_absent"]

    def test_whitespace_only(self, collector):
        assert parse_csv("   \n  \n", sink=collector) == []
        assert collector.kinds() == ["insufficient_lines"]
        assert collector.diagnostics[0].severity is Severity.WARNING

    def test_header_only(self, collector):
        assert parse_csv("a,b,c\n", sink=collector) == []
        assert collector.kinds() == ["insufficient_lines"]

    def test_insufficient_lines_message_includes_raw_text(self, collector):
        parse_csv("lonely header", sink=collector)
        assert "lonely header" in collector.diagnostics[0].message


# ---------------------------------------------------------------------------
# Row-shape mismatches
# ---------------------------------------------------------------------------

class TestRowShapeMismatch:
    """Rows whose field count differs from the header are dropped whole."""

    def test_too_many_fields(self, collector):
        assert parse_csv("a,b\n1,2,3", sink=collector) == []
        diag = collector.diagnostics[0]
        assert diag.kind == "row_shape_mismatch"
        assert diag.severity is Severity.WARNING
        assert diag.line == 2
        assert "(3)" in diag.message and "(2)" in diag.message
        assert "1,2,3" in diag.message

    def test_too_few_fields(self):
        assert parse_csv("a,b,c\n1,2") == []

    def test_only_bad_rows_dropped(self, collector):
        text = "a,b\n1,2\n3\n4,5\n6,7,8\n9,10"
        records = parse_csv(text, sink=collector)
        assert records == [
            {"a": "1", "b": "2"},
            {"a": "4", "b": "5"},
            {"a": "9", "b": "10"},
        ]
        assert [d.line for d in collector.diagnostics] == [3, 5]

    def test_display_row_ignores_blank_lines(self, collector):
        """Row numbers count non-empty lines only."""
        parse_csv("a,b\n\n\n1,2,3", sink=collector)
        assert collector.diagnostics[0].line == 2

    def test_quoted_comma_is_not_special(self):
        """No quoting support: the embedded comma splits the field."""
        assert parse_csv('name,city\n"Smith, J",Oslo') == []


# ---------------------------------------------------------------------------
# Header gaps and duplicates
# ---------------------------------------------------------------------------

class TestHeaderGaps:
    """Blank header cells drop their column but keep their position."""

    def test_blank_middle_column_dropped(self):
        assert parse_csv("a,,c\n1,2,3") == [{"a": "1", "c": "3"}]

    def test_gap_reported_per_row(self, collector):
        parse_csv("a,,c\n1,2,3\n4,5,6", sink=collector)
        assert collector.kinds() == ["header_gap", "header_gap"]
        assert [d.line for d in collector.diagnostics] == [2, 3]
        assert "index 1" in collector.diagnostics[0].message

    def test_row_count_still_uses_full_header_length(self):
        """A row matching only the non-blank columns is a mismatch."""
        assert parse_csv("a,,c\n1,3") == []

    def test_trailing_comma_header(self):
        assert parse_csv("a,b,\n1,2,") == [{"a": "1", "b": "2"}]


class TestDuplicateHeader:
    """Duplicated column names: last value wins, first position kept."""

    def test_last_occurrence_wins(self):
        assert parse_csv("a,b,a\n1,2,3") == [{"a": "3", "b": "2"}]

    def test_key_order_keeps_first_position(self):
        record = parse_csv("a,b,a\n1,2,3")[0]
        assert list(record) == ["a", "b"]

    def test_reported_once_per_parse(self, collector):
        parse_csv("a,b,a\n1,2,3\n4,5,6", sink=collector)
        assert collector.kinds() == ["duplicate_header"]


# ---------------------------------------------------------------------------
# Cross-cutting properties
# ---------------------------------------------------------------------------

class TestProperties:
    """Blank-line handling, ordering, idempotence, default sink."""

    def test_blank_lines_ignored(self, collector):
        assert parse_csv("a,b\n\n1,2\n\n", sink=collector) == [{"a": "1", "b": "2"}]
        assert len(collector) == 0

    def test_order_preserved_after_discards(self):
        text = "k,v\nbad\nfirst,1\nbad,row,here\nsecond,2\nthird,3"
        assert [r["k"] for r in parse_csv(text)] == ["first", "second", "third"]

    def test_idempotent(self):
        text = "a,,c\n1,2,3\n4,5\n6,7,8"
        assert parse_csv(text) == parse_csv(text)

    def test_uniform_key_set(self):
        text = "a,,c,a\n1,2,3,4\n5,6\n7,8,9,10"
        records = parse_csv(text)
        assert len(records) == 2
        assert all(list(r) == ["a", "c"] for r in records)

    @pytest.mark.parametrize("text", [None, "", "x", "a,b\n1", "a\n1\n2,3"])
    def test_never_raises(self, text):
        assert isinstance(parse_csv(text), list)

    def test_default_sink_logs(self, caplog):
        with caplog.at_level(logging.INFO, logger="csv_dashboard.parsers.diagnostics"):
            parse_csv("a,b\n1,2,3")
        assert any(
            rec.levelno == logging.WARNING and "row_shape_mismatch" in rec.getMessage()
            for rec in caplog.records
        )
