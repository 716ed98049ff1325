"""
Diagnostics channel for the tabular parser.

The parser reports every anomaly (absent input, too few lines, blank or
duplicated header cells, mis-shaped rows) as a ``Diagnostic`` handed to
a sink callable instead of raising. Two sinks are provided:

- ``log_diagnostic``: the default; forwards to ``logging`` at the level
  matching the diagnostic's severity.
- ``DiagnosticCollector``: accumulates diagnostics in memory so callers
  (and tests) can inspect them without capturing log output.

Any ``Callable[[Diagnostic], None]`` works as a sink.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Literal

logger = logging.getLogger(__name__)

DiagnosticKind = Literal[
    "input_absent",
    "insufficient_lines",
    "header_gap",
    "row_shape_mismatch",
    "duplicate_header",
]


class Severity(Enum):
    """Diagnostic severity, valued by the matching ``logging`` level."""

    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


@dataclass(frozen=True)
class Diagnostic:
    """One anomaly found while parsing.

    Attributes:
        severity: How loudly to report it.
        kind: Machine-readable category.
        message: Human-readable description.
        line: 1-based display row number, or ``None`` when the
            diagnostic concerns the whole input.
    """

    severity: Severity
    kind: DiagnosticKind
    message: str
    line: int | None = None


DiagnosticSink = Callable[[Diagnostic], None]


def log_diagnostic(diagnostic: Diagnostic) -> None:
    """Default sink: route a diagnostic to the module logger."""
    logger.log(diagnostic.severity.value, "[%s] %s", diagnostic.kind, diagnostic.message)


@dataclass
class DiagnosticCollector:
    """Sink that keeps every diagnostic it receives, in arrival order."""

    diagnostics: list[Diagnostic] = field(default_factory=list)

    def __call__(self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)

    def __len__(self) -> int:
        return len(self.diagnostics)

    def kinds(self) -> list[str]:
        return [d.kind for d in self.diagnostics]

    def by_severity(self, severity: Severity) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.severity is severity]
