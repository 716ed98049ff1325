"""
Chart renderer for csv-dashboard.

Draws a ``ChartData`` with matplotlib and saves it as an image. Uses the
object-oriented ``Figure`` API rather than ``pyplot`` so no global
figure state is shared between charts.

Styling follows the stock dashboard: teal line, a four-colour palette
for bars and pie slices, purple scatter points, and translucent filled
polygons for radar series.
"""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from csv_dashboard.config import ChartConfig
from csv_dashboard.exceptions import RenderError
from csv_dashboard.transforms.shapes import ChartData

logger = logging.getLogger(__name__)

_LINE_COLOR = (75 / 255, 192 / 255, 192 / 255)
_SCATTER_COLOR = (153 / 255, 102 / 255, 255 / 255)
_PALETTE = [
    (255 / 255, 99 / 255, 132 / 255),
    (54 / 255, 162 / 255, 235 / 255),
    (255 / 255, 206 / 255, 86 / 255),
    (75 / 255, 192 / 255, 192 / 255),
]

_FIGSIZE = (8, 5)


def _palette(n: int, alpha: float) -> list[tuple[float, float, float, float]]:
    return [(*_PALETTE[i % len(_PALETTE)], alpha) for i in range(n)]


def _apply_axes(ax: Axes, chart: ChartConfig) -> None:
    """Axis titles and y-range from the chart config."""
    if chart.x_title:
        ax.set_xlabel(chart.x_title)
    if chart.y_title:
        ax.set_ylabel(chart.y_title)
    bottom = chart.y_min if chart.y_min is not None else (0 if chart.begin_at_zero else None)
    ax.set_ylim(bottom=bottom, top=chart.y_max)


def _draw_line(fig: Figure, data: ChartData, chart: ChartConfig) -> None:
    ax = fig.add_subplot()
    series = data.series[0]
    ax.plot(data.labels, series.values, color=_LINE_COLOR, label=series.label)
    ax.tick_params(axis="x", labelrotation=45)
    _apply_axes(ax, chart)
    ax.legend(loc="upper left")


def _draw_bar(fig: Figure, data: ChartData, chart: ChartConfig) -> None:
    ax = fig.add_subplot()
    n = len(data.labels)
    ax.bar(
        data.labels,
        data.series[0].values,
        color=_palette(n, 0.6),
        edgecolor=_palette(n, 1.0),
        linewidth=1,
    )
    _apply_axes(ax, chart)


def _draw_pie(fig: Figure, data: ChartData, chart: ChartConfig) -> None:
    ax = fig.add_subplot()
    n = len(data.labels)
    ax.pie(
        data.series[0].values,
        labels=data.labels,
        colors=_palette(n, 0.7),
        wedgeprops={"edgecolor": "white", "linewidth": 1},
        autopct=lambda pct: f"{pct:.0f}%",
    )
    ax.set_aspect("equal")
    ax.legend(loc="upper center", bbox_to_anchor=(0.5, 1.12), ncol=min(n, 4), frameon=False)


def _draw_scatter(fig: Figure, data: ChartData, chart: ChartConfig) -> None:
    ax = fig.add_subplot()
    xs, ys = zip(*data.points)
    ax.scatter(
        xs,
        ys,
        s=25,
        color=(*_SCATTER_COLOR, 0.6),
        edgecolors=[_SCATTER_COLOR],
        label=data.series_label,
    )
    ax.set_xlim(left=0)
    _apply_axes(ax, chart)
    ax.legend(loc="upper left")


def _draw_radar(fig: Figure, data: ChartData, chart: ChartConfig) -> None:
    ax = fig.add_subplot(projection="polar")
    n = len(data.labels)
    angles = np.linspace(0, 2 * np.pi, n, endpoint=False)
    closed = np.append(angles, angles[0])

    for i, series in enumerate(data.series):
        color = _PALETTE[i % len(_PALETTE)]
        values = np.append(series.values, series.values[0])
        ax.plot(closed, values, color=color, linewidth=3, label=series.label)
        ax.fill(closed, values, color=(*color, 0.2))

    ax.set_xticks(angles)
    ax.set_xticklabels(data.labels)
    ax.legend(loc="upper center", bbox_to_anchor=(0.5, 1.15), ncol=len(data.series), frameon=False)


_DRAWERS = {
    "line": _draw_line,
    "bar": _draw_bar,
    "pie": _draw_pie,
    "scatter": _draw_scatter,
    "radar": _draw_radar,
}


def render_chart(
    data: ChartData,
    chart: ChartConfig,
    path: str | Path,
    dpi: int = 100,
) -> Path:
    """Draw *data* and save it to *path*.

    The image format follows the file extension. The parent directory is
    created if needed.

    Args:
        data: Shaped chart data (from ``build_chart_data``).
        chart: The chart's config (titles, axis labels, y-range).
        path: Output image path.
        dpi: Resolution for raster formats.

    Returns:
        The written path.

    Raises:
        RenderError: If drawing or saving fails.
    """
    path = Path(path)
    drawer = _DRAWERS.get(data.kind)
    if drawer is None:
        raise RenderError(f"Unsupported chart kind: '{data.kind}'")

    fig = Figure(figsize=_FIGSIZE, layout="constrained")
    try:
        drawer(fig, data, chart)
        if chart.title:
            fig.suptitle(chart.title)
        path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(path, dpi=dpi)
    except Exception as exc:
        raise RenderError(f"Failed to render chart '{chart.name}' to {path.name}: {exc}") from exc

    logger.info("%s chart created: %s", data.kind.capitalize(), path)
    return path
