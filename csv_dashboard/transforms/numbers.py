"""
Numeric coercion for csv-dashboard.

The parser returns every cell as a string. Charts need numbers, so the
presentation side coerces each displayed field independently:

1. Strip leading/trailing whitespace.
2. Coerce with ``pd.to_numeric(errors='coerce')``.

Values that fail coercion (empty strings, ``N/A``, missing fields)
become ``NaN`` and are dropped from the plotted series, without dropping
the rest of the record. No locale handling: ``"1,234"`` is not a number.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

import pandas as pd


def to_numeric(values: Iterable[str | None]) -> pd.Series:
    """Coerce strings to a float Series; failures become ``NaN``.

    Args:
        values: Raw cell strings (``None`` for a missing field).

    Returns:
        A ``float64`` Series aligned with *values*.
    """
    series = pd.Series(list(values), dtype="object")
    cleaned = series.map(lambda v: v.strip() if isinstance(v, str) else v)
    return pd.to_numeric(cleaned, errors="coerce").astype("float64")


def numeric_values(records: Sequence[dict[str, str]], field: str) -> list[float]:
    """Coerced values of one field across records, failures dropped.

    Args:
        records: Parsed records.
        field: Column name to extract. Records lacking it count as a
            failed coercion.

    Returns:
        The numeric values in record order.
    """
    coerced = to_numeric(record.get(field) for record in records)
    return coerced.dropna().tolist()
