"""
csv-dashboard: fetch CSV datasets, parse them into records, render charts.

Public API surface:

- ``parse_csv(raw_text, sink=None)`` -- the tabular parser. Turns raw
  comma-separated text into a list of ``dict[str, str]`` records; never
  raises, reports anomalies through *sink*.

- ``init(...)`` -- First-run workflow. Writes the stock five-chart
  ``dashboard.yaml`` and, optionally, renders it straight away.

- ``render(...)`` -- Subsequent-run workflow. Loads and validates
  ``dashboard.yaml``, then fetches, parses and renders every chart
  concurrently.

Both workflows return one ``ChartOutcome`` per chart; a failed dataset
shows up as a non-``rendered`` outcome, never as an exception.
"""

from __future__ import annotations

import asyncio
import logging

from csv_dashboard._pipeline import ChartOutcome, run_dashboard
from csv_dashboard.config import DashboardConfig, default_config, load_config, save_config
from csv_dashboard.parsers import Diagnostic, DiagnosticCollector, Severity, parse_csv

__all__ = [
    "ChartOutcome",
    "DashboardConfig",
    "Diagnostic",
    "DiagnosticCollector",
    "Severity",
    "init",
    "parse_csv",
    "render",
]

logger = logging.getLogger(__name__)


def init(
    config_path: str = "dashboard.yaml",
    base: str = ".",
    output_dir: str = "outputs/",
    run_immediately: bool = True,
) -> list[ChartOutcome]:
    """First-run entry point: write the default config, optionally render.

    Args:
        config_path: Where to write the generated dashboard.yaml.
        base: Directory or http(s) URL the dataset files live under.
        output_dir: Directory where chart images are written.
        run_immediately: If True, render every chart after writing the
            config. If False, only write the config and stop.

    Returns:
        One ``ChartOutcome`` per chart, or ``[]`` when not rendering.
    """
    logger.info("init() -- config_path=%s, base=%s", config_path, base)
    config = default_config(base=base, output_dir=output_dir)
    save_config(config, config_path)

    if not run_immediately:
        return []
    logger.info("run_immediately=True -- rendering dashboard")
    return asyncio.run(run_dashboard(config))


def render(config_path: str = "dashboard.yaml") -> list[ChartOutcome]:
    """Subsequent-run entry point: load config, render every chart.

    Raises:
        FileNotFoundError: If *config_path* does not exist.
        pydantic.ValidationError: If config fails schema validation.
        ConfigValidationError: If the config file is empty.
    """
    logger.info("render() -- config_path=%s", config_path)
    config = load_config(config_path)
    logger.info("Loaded config: %d chart(s)", len(config.charts))
    return asyncio.run(run_dashboard(config))
