"""
Chart data shapes for csv-dashboard.

Maps parsed records onto the data shape each chart kind draws:

- line:      categorical labels + one numeric series.
- bar / pie: counts per category, labels in first-seen order.
- scatter:   ``(x, y)`` pairs.
- radar:     axis labels + one numeric series per value field.

Every builder returns ``None`` (with a warning logged) when there is
nothing coherent to draw, e.g. a missing field or series whose length no
longer matches the labels after coercion. They never raise on bad data.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from csv_dashboard.config import ChartConfig, ChartKind
from csv_dashboard.transforms.numbers import numeric_values, to_numeric

logger = logging.getLogger(__name__)

Records = Sequence[dict[str, str]]


@dataclass
class Series:
    """One labelled numeric series."""
    label: str
    values: list[float] = field(default_factory=list)


@dataclass
class ChartData:
    """Everything a renderer needs for one chart.

    Attributes:
        kind: Chart kind this data was shaped for.
        labels: Category / x-axis / radar-axis labels.
        series: Numeric series aligned with ``labels``. Empty for scatter.
        points: ``(x, y)`` pairs. Scatter only.
        series_label: Legend label for scatter points.
    """
    kind: ChartKind
    labels: list[str] = field(default_factory=list)
    series: list[Series] = field(default_factory=list)
    points: list[tuple[float, float]] = field(default_factory=list)
    series_label: str = ""


def _missing_fields(records: Records, fields: Sequence[str]) -> list[str]:
    """Fields absent from the records' key set."""
    keys = set(records[0]) if records else set()
    return [f for f in fields if f not in keys]


def build_line_data(
    records: Records,
    label_field: str,
    value_field: str,
    series_label: str | None = None,
) -> ChartData | None:
    """Labels from every record, values from those that coerce.

    If any value fails coercion the series no longer lines up with the
    labels, so nothing is drawn.
    """
    missing = _missing_fields(records, [label_field, value_field])
    if missing:
        logger.warning("Line chart: fields %s not found in records", missing)
        return None

    labels = [record[label_field] for record in records]
    values = numeric_values(records, value_field)
    logger.debug("Line chart: %d labels, %d values", len(labels), len(values))

    if not labels or not values or len(labels) != len(values):
        logger.warning(
            "Line chart: label/value mismatch (%d labels, %d numeric values)",
            len(labels), len(values),
        )
        return None

    return ChartData(
        kind="line",
        labels=labels,
        series=[Series(series_label or value_field, values)],
    )


def build_category_counts(
    records: Records,
    field_name: str,
    series_label: str | None = None,
    kind: ChartKind = "bar",
) -> ChartData | None:
    """Count records per non-empty value of *field_name*."""
    counts: dict[str, int] = {}
    for record in records:
        category = record.get(field_name)
        if category:
            counts[category] = counts.get(category, 0) + 1

    if not counts:
        logger.warning("%s chart: no non-empty values for '%s'", kind.capitalize(), field_name)
        return None

    return ChartData(
        kind=kind,
        labels=list(counts),
        series=[Series(series_label or field_name, [float(c) for c in counts.values()])],
    )


def build_scatter_data(
    records: Records,
    x_field: str,
    y_field: str,
    series_label: str | None = None,
) -> ChartData | None:
    """``(x, y)`` points; a record failing either coercion is skipped."""
    xs = to_numeric(record.get(x_field) for record in records)
    ys = to_numeric(record.get(y_field) for record in records)
    valid = xs.notna() & ys.notna()
    points = list(zip(xs[valid].tolist(), ys[valid].tolist()))

    logger.debug("Scatter chart: %d of %d records usable", len(points), len(records))
    if not points:
        logger.warning("Scatter chart: no numeric (%s, %s) pairs", x_field, y_field)
        return None

    return ChartData(
        kind="scatter",
        points=points,
        series_label=series_label or f"{x_field} vs. {y_field}",
    )


def build_radar_data(
    records: Records,
    label_field: str,
    value_fields: Sequence[str],
    series_labels: Sequence[str] | None = None,
) -> ChartData | None:
    """One series per value field over axes named by *label_field*."""
    missing = _missing_fields(records, [label_field, *value_fields])
    if missing:
        logger.warning("Radar chart: fields %s not found in records", missing)
        return None

    labels = [record[label_field] for record in records]
    series: list[Series] = []
    for i, value_field in enumerate(value_fields):
        values = numeric_values(records, value_field)
        if len(values) != len(labels):
            logger.warning(
                "Radar chart: '%s' has %d numeric values for %d labels",
                value_field, len(values), len(labels),
            )
            return None
        label = series_labels[i] if series_labels else value_field
        series.append(Series(label, values))

    if not labels:
        logger.warning("Radar chart: no labels")
        return None

    return ChartData(kind="radar", labels=labels, series=series)


def build_chart_data(records: Records, chart: ChartConfig) -> ChartData | None:
    """Shape *records* for ``chart.kind``."""
    if chart.kind == "line":
        return build_line_data(
            records, chart.label_field, chart.value_fields[0], chart.series_label(0)
        )
    if chart.kind in ("bar", "pie"):
        return build_category_counts(
            records, chart.label_field, chart.series_label(0), kind=chart.kind
        )
    if chart.kind == "scatter":
        x_field, y_field = chart.value_fields
        return build_scatter_data(records, x_field, y_field, chart.series_label(0))
    return build_radar_data(
        records,
        chart.label_field,
        chart.value_fields,
        [chart.series_label(i) for i in range(len(chart.value_fields))],
    )
