"""
Tabular parser for csv-dashboard.

Converts raw comma-separated text into an ordered list of records, each
a ``dict`` mapping header-derived column names to string cell values.

Input rules:
  - Line 0 (after dropping blank lines) is the header.
  - Fields are split on ``,`` with no quoting or escaping; surrounding
    whitespace on every field and line is stripped.
  - A data line becomes a record only if its field count equals the
    header length exactly. Other lines are dropped whole.

The parser never raises. Anomalies degrade to an empty or partial
result plus a ``Diagnostic`` sent to the sink, so one bad dataset or
row cannot stop the rest of the pipeline.

Duplicate column names: the last occurrence's value wins, and the key
keeps the position of its first occurrence in the record.
"""

from __future__ import annotations

from collections import Counter

from csv_dashboard.parsers.diagnostics import (
    Diagnostic,
    DiagnosticSink,
    Severity,
    log_diagnostic,
)

Record = dict[str, str]


def _split_fields(line: str) -> list[str]:
    return [field.strip() for field in line.split(",")]


def parse_csv(raw_text: str | None, sink: DiagnosticSink | None = None) -> list[Record]:
    """Parse delimited text into records.

    Args:
        raw_text: Full content of one CSV resource, or ``None``.
        sink: Receives a ``Diagnostic`` for every anomaly. Defaults to
            ``log_diagnostic`` (module logger).

    Returns:
        Records in input line order. Empty when the input is absent,
        blank, or has no data line after the header. Never ``None``.
    """
    emit = sink or log_diagnostic

    if not raw_text:
        emit(Diagnostic(Severity.INFO, "input_absent", "Attempted to parse null or empty CSV data."))
        return []

    lines = [line for line in raw_text.strip().split("\n") if line.strip()]
    if len(lines) < 2:
        emit(Diagnostic(
            Severity.WARNING,
            "insufficient_lines",
            f"CSV data has less than 2 lines (header + data). File content: {raw_text!r}",
        ))
        return []

    header = _split_fields(lines[0])

    for name, count in Counter(name for name in header if name).items():
        if count > 1:
            emit(Diagnostic(
                Severity.WARNING,
                "duplicate_header",
                f"Column '{name}' appears {count} times in header; last occurrence wins",
            ))

    records: list[Record] = []
    for i, line in enumerate(lines[1:], start=1):
        values = _split_fields(line)
        if len(values) != len(header):
            emit(Diagnostic(
                Severity.WARNING,
                "row_shape_mismatch",
                f"Skipping malformed row {i + 1}: Number of values ({len(values)}) "
                f"does not match header length ({len(header)}). Line: {line!r}",
                line=i + 1,
            ))
            continue

        record: Record = {}
        for j, name in enumerate(header):
            if name:
                record[name] = values[j]
            else:
                emit(Diagnostic(
                    Severity.WARNING,
                    "header_gap",
                    f"Undefined header at index {j} in row {i + 1}",
                    line=i + 1,
                ))
        records.append(record)

    return records
