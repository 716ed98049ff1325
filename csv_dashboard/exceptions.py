"""
Custom exception hierarchy for csv-dashboard.

The tabular parser never raises: it degrades to an empty or partial
result and reports through the diagnostics channel. Everything around
it (fetching, rendering, exporting, config cross-checks) raises one of
these so the pipeline can catch failures per dataset.
"""


class CsvDashboardError(Exception):
    """Base exception for all csv-dashboard errors."""


class ConfigValidationError(CsvDashboardError):
    """Raised when dashboard.yaml is empty.

    Schema and cross-field errors (wrong types, unknown chart kinds,
    duplicate chart names) surface as ``pydantic.ValidationError``.
    """


class FetchError(CsvDashboardError):
    """Raised when a dataset cannot be retrieved.

    Covers non-2xx HTTP responses, transport errors and timeouts, and
    local file read failures. The message names the location.
    """


class RenderError(CsvDashboardError):
    """Raised when a chart cannot be drawn or saved."""


class ExportError(CsvDashboardError):
    """Raised when the exporter fails to write a table.

    For example, permission errors, disk full, or unsupported format.
    """
