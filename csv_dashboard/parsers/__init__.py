"""
Parsers sub-package for csv-dashboard.

- tabular.py implements ``parse_csv``: raw CSV text -> list of records.
- diagnostics.py defines the side channel the parser reports anomalies
  through (``Diagnostic``, ``Severity``, and the provided sinks).

Parsing is pure and stateless; it never raises for any input string.
"""

from csv_dashboard.parsers.diagnostics import (
    Diagnostic,
    DiagnosticCollector,
    DiagnosticSink,
    Severity,
    log_diagnostic,
)
from csv_dashboard.parsers.tabular import Record, parse_csv

__all__ = [
    "Diagnostic",
    "DiagnosticCollector",
    "DiagnosticSink",
    "Record",
    "Severity",
    "log_diagnostic",
    "parse_csv",
]
