"""
Configuration models and YAML I/O for csv-dashboard.

This module defines the Pydantic models that map 1:1 to dashboard.yaml,
plus helper functions for loading, saving, and generating the default
config.

Key models:
- DashboardConfig: Top-level config (source + output + charts).
- SourceConfig: Where datasets are fetched from and the fetch timeout.
- OutputConfig: Output directory, image format, optional table export.
- ChartConfig: One dataset -> one chart (file, kind, fields, labels).

Key functions:
- load_config(path) -> DashboardConfig: Load and validate from YAML.
- save_config(config, path): Serialize to YAML.
- default_config(...) -> DashboardConfig: The five stock dashboard charts.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, model_validator

from csv_dashboard.exceptions import ConfigValidationError

logger = logging.getLogger(__name__)

ChartKind = Literal["line", "bar", "pie", "scatter", "radar"]


class SourceConfig(BaseModel):
    """Where raw CSV text comes from."""

    base: str = Field(
        ".", description="Directory or http(s) URL that chart files are relative to"
    )
    timeout_seconds: float = Field(10.0, gt=0, description="Per-request fetch timeout")


class OutputConfig(BaseModel):
    """Output settings."""

    output_dir: str = Field("outputs/", description="Directory for output files")
    image_format: Literal["png", "svg", "pdf"] = Field("png", description="Chart image format")
    dpi: int = Field(100, gt=0, description="Resolution for raster formats")
    export_tables: bool = Field(
        False, description="If True, also write each parsed dataset as a table"
    )
    table_format: Literal["csv", "parquet"] = Field(
        "parquet", description="Format for exported tables"
    )


class ChartConfig(BaseModel):
    """One dataset rendered as one chart.

    Field usage by kind:
      - line:    ``label_field`` (x labels) + one ``value_fields`` entry.
      - bar/pie: ``label_field`` is the category counted per record.
      - scatter: ``value_fields`` = ``[x_field, y_field]``.
      - radar:   ``label_field`` (axes) + one or more ``value_fields``.
    """

    name: str = Field(..., min_length=1, description="Chart id; also the output file stem")
    file: str = Field(..., min_length=1, description="CSV file, relative to source.base")
    kind: ChartKind
    title: str = ""
    label_field: str | None = None
    value_fields: list[str] = Field(default_factory=list)
    series_labels: list[str] | None = Field(
        None, description="Legend labels, one per value field (or one for counts)"
    )
    x_title: str | None = None
    y_title: str | None = None
    y_min: float | None = None
    y_max: float | None = None
    begin_at_zero: bool = True

    @model_validator(mode="after")
    def _check_fields_for_kind(self) -> ChartConfig:
        """Validate that the fields required by ``kind`` are present."""
        n_values = len(self.value_fields)
        if self.kind in ("line", "bar", "pie", "radar") and not self.label_field:
            raise ValueError(f"Chart '{self.name}': kind '{self.kind}' requires label_field")
        if self.kind == "line" and n_values != 1:
            raise ValueError(
                f"Chart '{self.name}': line chart needs exactly 1 value field, got {n_values}"
            )
        if self.kind in ("bar", "pie") and n_values:
            raise ValueError(
                f"Chart '{self.name}': {self.kind} chart counts label_field; "
                "value_fields must be empty"
            )
        if self.kind == "scatter" and n_values != 2:
            raise ValueError(
                f"Chart '{self.name}': scatter chart needs value_fields [x, y], got {n_values}"
            )
        if self.kind == "radar" and n_values < 1:
            raise ValueError(f"Chart '{self.name}': radar chart needs at least 1 value field")
        if self.series_labels is not None and self.kind in ("line", "radar"):
            if len(self.series_labels) != n_values:
                raise ValueError(
                    f"Chart '{self.name}': series_labels has {len(self.series_labels)} "
                    f"entries but there are {n_values} value fields"
                )
        return self

    def series_label(self, index: int = 0) -> str:
        """Legend label for the value series at *index*."""
        if self.series_labels and index < len(self.series_labels):
            return self.series_labels[index]
        if index < len(self.value_fields):
            return self.value_fields[index]
        return self.title or self.name


class DashboardConfig(BaseModel):
    """Top-level configuration for csv-dashboard.

    Maps 1:1 to dashboard.yaml.
    """

    source: SourceConfig = Field(default_factory=SourceConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    charts: list[ChartConfig] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_unique_chart_names(self) -> DashboardConfig:
        """Chart names double as output file stems, so they must be unique."""
        seen: set[str] = set()
        for chart in self.charts:
            if chart.name in seen:
                raise ValueError(f"Duplicate chart name '{chart.name}'")
            seen.add(chart.name)
        return self


def load_config(path: str | Path) -> DashboardConfig:
    """Load and validate dashboard.yaml into a DashboardConfig model.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ConfigValidationError: If the file is empty.
        pydantic.ValidationError: If the YAML content fails schema validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raise ConfigValidationError(f"Config file is empty: {path}")
    logger.info("Loaded config from %s", path)
    return DashboardConfig.model_validate(raw)


def save_config(config: DashboardConfig, path: str | Path) -> None:
    """Serialize a DashboardConfig to YAML with a header comment."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = config.model_dump(mode="json", exclude_none=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write("# csv-dashboard configuration\n")
        f.write("# Edit this file to add charts, change fields, or switch output format.\n\n")
        yaml.dump(
            data,
            f,
            allow_unicode=True,
            default_flow_style=False,
            sort_keys=False,
        )
    logger.info("Saved config to %s", path)


def default_config(base: str = ".", output_dir: str = "outputs/") -> DashboardConfig:
    """Build the stock five-chart dashboard.

    Expects the datasets shipped in ``inputs/``: website traffic, build
    recommendations, component click-through rates, user satisfaction,
    and marketing campaigns.
    """
    charts = [
        ChartConfig(
            name="website_traffic",
            file="website_traffic.csv",
            kind="line",
            title="Website Traffic",
            label_field="Date",
            value_fields=["DailyVisits"],
            series_labels=["Daily Website Visits"],
            x_title="Date",
            y_title="Number of Visits",
        ),
        ChartConfig(
            name="build_recommendations",
            file="build_recommendations.csv",
            kind="bar",
            title="Build Recommendations",
            label_field="Primary Use Case",
            series_labels=["Number of Build Requests"],
            x_title="Primary Use Case",
            y_title="Number of Requests",
        ),
        ChartConfig(
            name="component_ctr",
            file="component_click_through_rates.csv",
            kind="pie",
            title="Component Entries",
            label_field="Component Type",
            series_labels=["Component Entry Count"],
        ),
        ChartConfig(
            name="satisfaction_scatter",
            file="user_satisfaction.csv",
            kind="scatter",
            title="Budget vs. Satisfaction",
            value_fields=["BudgetSpecified", "SatisfactionScore"],
            series_labels=["Budget vs. Satisfaction"],
            x_title="Budget Specified ($)",
            y_title="Satisfaction Score (1-5)",
            y_min=1,
            y_max=5,
            begin_at_zero=False,
        ),
        ChartConfig(
            name="marketing_radar",
            file="marketing_campaigns.csv",
            kind="radar",
            title="Marketing Campaign Performance",
            label_field="CampaignName",
            value_fields=["Cost", "Clicks", "Conversions"],
            series_labels=["Cost ($)", "Clicks", "Conversions"],
        ),
    ]
    return DashboardConfig(
        source=SourceConfig(base=base),
        output=OutputConfig(output_dir=output_dir),
        charts=charts,
    )
