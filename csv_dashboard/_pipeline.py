"""
Internal pipeline orchestration for csv-dashboard.

Each configured chart runs its own fetch -> parse -> shape -> render
(-> export) pipeline. ``run_dashboard`` starts all of them at once with
``asyncio.gather`` over one shared ``httpx.AsyncClient``; a failure in
one pipeline is recorded in that chart's ``ChartOutcome`` and never
blocks or corrupts another.

This module is **not** part of the public API.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

import httpx

from csv_dashboard.config import ChartConfig, DashboardConfig
from csv_dashboard.exceptions import ExportError, FetchError, RenderError
from csv_dashboard.export import export_records
from csv_dashboard.fetch import fetch_text, resolve_location
from csv_dashboard.parsers.tabular import parse_csv
from csv_dashboard.render import render_chart
from csv_dashboard.transforms.shapes import build_chart_data

logger = logging.getLogger(__name__)

OutcomeStatus = Literal[
    "rendered",
    "fetch_failed",
    "no_records",
    "no_data",
    "render_failed",
    "export_failed",
    "failed",
]


@dataclass
class ChartOutcome:
    """Result of one chart's pipeline.

    Attributes:
        name: Chart name from the config.
        status: How far the pipeline got.
        records: Number of records the parser produced.
        image_path: Written image, if rendered.
        table_path: Written table, if exported.
        error: Error message for ``failed`` and the ``*_failed`` statuses.
    """

    name: str
    status: OutcomeStatus
    records: int = 0
    image_path: str | None = None
    table_path: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status == "rendered"


async def run_chart(
    chart: ChartConfig,
    config: DashboardConfig,
    client: httpx.AsyncClient | None = None,
) -> ChartOutcome:
    """Run one chart's pipeline end to end.

    Steps:
      1. Fetch the dataset's raw text.
      2. Parse it into records.
      3. Shape the records for the chart kind.
      4. Render the image.
      5. If ``output.export_tables`` is set, export the records.
    """
    location = resolve_location(config.source.base, chart.file)
    out_dir = Path(config.output.output_dir)

    # 1. Fetch
    try:
        raw_text = await fetch_text(location, client, timeout=config.source.timeout_seconds)
    except FetchError as exc:
        return ChartOutcome(chart.name, "fetch_failed", error=str(exc))

    # 2. Parse
    records = parse_csv(raw_text)
    if not records:
        logger.warning("No data parsed for chart '%s'", chart.name)
        return ChartOutcome(chart.name, "no_records")

    # 3. Shape
    data = build_chart_data(records, chart)
    if data is None:
        logger.warning("Data extraction failed for chart '%s'", chart.name)
        return ChartOutcome(chart.name, "no_data", records=len(records))

    # 4. Render
    image_path = out_dir / f"{chart.name}.{config.output.image_format}"
    try:
        render_chart(data, chart, image_path, dpi=config.output.dpi)
    except RenderError as exc:
        logger.error("%s", exc)
        return ChartOutcome(chart.name, "render_failed", records=len(records), error=str(exc))

    outcome = ChartOutcome(
        chart.name, "rendered", records=len(records), image_path=str(image_path)
    )

    # 5. Export
    if config.output.export_tables:
        fmt = config.output.table_format
        try:
            outcome.table_path = export_records(records, out_dir / f"{chart.name}.{fmt}", fmt)
        except ExportError as exc:
            logger.error("%s", exc)
            outcome.status = "export_failed"
            outcome.error = str(exc)

    return outcome


async def _gather_charts(
    config: DashboardConfig,
    client: httpx.AsyncClient,
) -> list[ChartOutcome]:
    results = await asyncio.gather(
        *(run_chart(chart, config, client) for chart in config.charts),
        return_exceptions=True,
    )
    outcomes = []
    for chart, result in zip(config.charts, results):
        if isinstance(result, Exception):
            # run_chart only handles CsvDashboardError; anything else still
            # fails just this chart.
            logger.error(
                "Chart '%s' failed unexpectedly",
                chart.name,
                exc_info=(type(result), result, result.__traceback__),
            )
            outcomes.append(
                ChartOutcome(chart.name, "failed", error=f"{type(result).__name__}: {result}")
            )
        elif isinstance(result, BaseException):
            # Cancellation and interpreter exits are not chart failures.
            raise result
        else:
            outcomes.append(result)
    return outcomes


async def run_dashboard(
    config: DashboardConfig,
    client: httpx.AsyncClient | None = None,
) -> list[ChartOutcome]:
    """Run every chart's pipeline concurrently.

    Args:
        config: The validated DashboardConfig.
        client: Optional shared HTTP client. When ``None``, one is created
            with ``source.timeout_seconds`` and closed afterwards.

    Returns:
        One ``ChartOutcome`` per chart, in config order.
    """
    logger.info("Rendering %d chart(s) into %s", len(config.charts), config.output.output_dir)

    if client is None:
        async with httpx.AsyncClient(timeout=config.source.timeout_seconds) as own_client:
            outcomes = await _gather_charts(config, own_client)
    else:
        outcomes = await _gather_charts(config, client)

    rendered = sum(o.ok for o in outcomes)
    logger.info("Dashboard complete: %d/%d chart(s) rendered", rendered, len(outcomes))
    return outcomes
