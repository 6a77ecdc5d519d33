"""Layout and drawing of a series as a line graph with its min, max and median."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .statistics import Series, Summary

WIDTH = 400
HEIGHT = 300

AXIS_MARGIN = 100
GRAPH_LINE_WIDTH = 2
POINT_RADIUS = 3
STATS_LINE_WIDTH = 1
TEXT_OFFSET = 5
AXIS_LABEL_OFFSET = 30
PADDING_FACTOR = 0.1

AXIS_LINE_WIDTH = 2
ARROW_SIZE = 10
TICK_SIZE = 8

BACKGROUND_COLOR = "white"
AXIS_COLOR = "black"
GRAPH_COLOR = "blue"
MIN_COLOR = "red"
MAX_COLOR = "#00ff00"
MEDIAN_COLOR = "magenta"

STATS_DASH = (4, 2)
X_TICK_DIVISIONS = 5
Y_TICK_DIVISIONS = 5.0


def _format_number(value: float) -> str:
    return f"{value:g}"


@dataclass(frozen=True)
class GraphLayout:
    """Scales and extents mapping years and values onto a drawing area.

    A series spanning a single year, or values that are all equal, get a
    scale of zero on that axis so that everything lies on the axis line.
    """

    width: int
    height: int
    min_year: int
    max_year: int
    padded_min: float
    padded_max: float
    x_scale: float
    y_scale: float

    def x(self, year: float) -> int:
        return AXIS_MARGIN + int((year - self.min_year) * self.x_scale)

    def value_y(self, value):
        """Return the vertical pixel position of ``value``."""
        return self.height - AXIS_MARGIN - int((value - self.padded_min) * self.y_scale)

    def point(self, year, value):
        """Return the pixel position of a data point."""
        return self.x(year), self.value_y(value)

    def x_ticks(self):
        """Return ``(year, x)`` pairs for the ticks along the year axis."""
        step = max(1, (self.max_year - self.min_year) // X_TICK_DIVISIONS)
        return [(year, self.x(year)) for year in range(self.min_year, self.max_year + 1, step)]

    def y_ticks(self):
        """Return ``(value, y)`` pairs for the ticks along the value axis."""
        step = (self.padded_max - self.padded_min) / Y_TICK_DIVISIONS
        if step <= 0:
            return [(self.padded_min, self.value_y(self.padded_min))]
        ticks = []
        value = self.padded_min
        while value <= self.padded_max:
            ticks.append((value, self.value_y(value)))
            value += step
        return ticks


def build_layout(series, summary, width, height):
    """Return the layout for ``series`` on a ``width`` by ``height`` area, or None if it is empty."""
    if len(series) == 0:
        return None
    min_year = min(series.years)
    max_year = max(series.years)
    padding = (summary.max - summary.min) * PADDING_FACTOR
    padded_min = summary.min - padding
    padded_max = summary.max + padding

    year_span = max_year - min_year
    value_span = padded_max - padded_min
    x_scale = (width - 2 * AXIS_MARGIN) / float(year_span) if year_span else 0.0
    y_scale = (height - 2 * AXIS_MARGIN) / value_span if value_span else 0.0
    return GraphLayout(
        width=width,
        height=height,
        min_year=min_year,
        max_year=max_year,
        padded_min=padded_min,
        padded_max=padded_max,
        x_scale=x_scale,
        y_scale=y_scale,
    )


def _draw_axes(canvas: Any, layout: GraphLayout) -> None:
    w, h = layout.width, layout.height
    pen = {"fill": AXIS_COLOR, "width": AXIS_LINE_WIDTH}
    outline = {"outline": AXIS_COLOR, "fill": "", "width": AXIS_LINE_WIDTH}

    canvas.create_line(AXIS_MARGIN, h - AXIS_MARGIN, w - AXIS_MARGIN, h - AXIS_MARGIN, **pen)
    canvas.create_polygon(
        w - AXIS_MARGIN, h - AXIS_MARGIN,
        w - AXIS_MARGIN - ARROW_SIZE, h - AXIS_MARGIN - ARROW_SIZE // 2,
        w - AXIS_MARGIN - ARROW_SIZE, h - AXIS_MARGIN + ARROW_SIZE // 2,
        **outline,
    )
    for year, x in layout.x_ticks():
        canvas.create_line(
            x, h - AXIS_MARGIN - TICK_SIZE // 2, x, h - AXIS_MARGIN + TICK_SIZE // 2, **pen
        )
        canvas.create_text(
            x - 20, h - AXIS_MARGIN + TICK_SIZE + 15,
            text=str(year), fill=AXIS_COLOR, anchor="sw",
        )

    canvas.create_line(AXIS_MARGIN, h - AXIS_MARGIN, AXIS_MARGIN, AXIS_MARGIN, **pen)
    canvas.create_polygon(
        AXIS_MARGIN, AXIS_MARGIN,
        AXIS_MARGIN - ARROW_SIZE // 2, AXIS_MARGIN + ARROW_SIZE,
        AXIS_MARGIN + ARROW_SIZE // 2, AXIS_MARGIN + ARROW_SIZE,
        **outline,
    )
    for value, y in layout.y_ticks():
        canvas.create_line(
            AXIS_MARGIN - TICK_SIZE // 2, y, AXIS_MARGIN + TICK_SIZE // 2, y, **pen
        )
        canvas.create_text(
            AXIS_MARGIN - TICK_SIZE - 30, y + 5,
            text=f"{value:.2f}", fill=AXIS_COLOR, anchor="sw",
        )


def _draw_points(canvas: Any, layout: GraphLayout, series: Series) -> None:
    if len(series) < 2:
        return
    points = [layout.point(year, value) for year, value in zip(series.years, series.values)]
    for (x1, y1), (x2, y2) in zip(points, points[1:]):
        canvas.create_line(x1, y1, x2, y2, fill=GRAPH_COLOR, width=GRAPH_LINE_WIDTH)
    for x, y in points:
        canvas.create_oval(
            x - POINT_RADIUS, y - POINT_RADIUS, x + POINT_RADIUS, y + POINT_RADIUS,
            outline=GRAPH_COLOR, width=GRAPH_LINE_WIDTH,
        )


def _draw_stats(canvas: Any, layout: GraphLayout, summary: Summary) -> None:
    lines = (
        ("Min", summary.min, MIN_COLOR),
        ("Max", summary.max, MAX_COLOR),
        ("Median", summary.median, MEDIAN_COLOR),
    )
    right = layout.width - AXIS_MARGIN
    for label, value, color in lines:
        y = layout.value_y(value)
        canvas.create_line(
            AXIS_MARGIN, y, right, y, fill=color, width=STATS_LINE_WIDTH, dash=STATS_DASH
        )
        canvas.create_text(
            right + TEXT_OFFSET, y - TEXT_OFFSET,
            text=f"{label}: {_format_number(value)}", fill=color, anchor="sw",
        )


def _draw_labels(canvas: Any, layout: GraphLayout) -> None:
    canvas.create_text(
        layout.width // 2 - AXIS_LABEL_OFFSET, layout.height - AXIS_MARGIN // 2,
        text="Year", fill=AXIS_COLOR, anchor="sw",
    )
    canvas.create_text(
        AXIS_MARGIN // 2, layout.height // 2,
        text="Value", fill=AXIS_COLOR, anchor="sw", angle=90,
    )


def draw_graph(canvas, series, summary, width, height):
    """Draw ``series`` and its ``summary`` on a Tk-style canvas.

    The background is always painted; the rest only when the series has
    values. Returns the layout used, or None when nothing was plotted.
    """
    canvas.create_rectangle(
        0, 0, width, height, fill=BACKGROUND_COLOR, outline=BACKGROUND_COLOR
    )
    if series is None or summary is None:
        return None
    layout = build_layout(series, summary, width, height)
    if layout is None:
        return None
    _draw_axes(canvas, layout)
    _draw_points(canvas, layout, series)
    _draw_stats(canvas, layout, summary)
    _draw_labels(canvas, layout)
    return layout