"""
Exporter for csv-dashboard.

Writes a parsed dataset (its list of records) as a table next to the
chart image, in the configured format (CSV or Parquet).

Output file naming convention:
  {chart_name}.{format}  -- e.g., "website_traffic.parquet"

Cells are written as strings, exactly as parsed; numeric coercion is a
display concern and is not applied here.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Literal

import pandas as pd

from csv_dashboard.exceptions import ExportError

logger = logging.getLogger(__name__)

_SUPPORTED_FORMATS = {"csv", "parquet"}


def export_records(
    records: Sequence[dict[str, str]],
    path: str | Path,
    output_format: Literal["csv", "parquet"] = "parquet",
) -> str:
    """Write one parsed dataset to disk as a table.

    Column order follows the first record's key order (all records share
    the same keys). The parent directory is created if it does not exist.

    Args:
        records: Parsed records from ``parse_csv``.
        path: Output file path (including extension).
        output_format: "csv" or "parquet".

    Returns:
        The written path as a string.

    Raises:
        ExportError: If *output_format* is unsupported, or if the write fails.
    """
    if output_format not in _SUPPORTED_FORMATS:
        raise ExportError(
            f"Unsupported output format: '{output_format}'. "
            f"Supported formats: {sorted(_SUPPORTED_FORMATS)}"
        )

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    columns = list(records[0]) if records else []
    table = pd.DataFrame.from_records(list(records), columns=columns).astype("string")
    try:
        if output_format == "parquet":
            table.to_parquet(path, index=False, engine="pyarrow")
        else:
            # utf-8-sig: written with a BOM, read back the same way.
            table.to_csv(path, index=False, encoding="utf-8-sig")
    except (OSError, ValueError, TypeError, ImportError) as exc:
        raise ExportError(f"Failed to write {output_format} table {path}: {exc}") from exc
    logger.info(
        "Exported table -> %s (%d rows, %d cols)",
        path.name,
        len(table),
        len(table.columns),
    )
    return str(path)
