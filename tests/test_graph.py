import pytest

from demostats.graph import (
    AXIS_MARGIN,
    BACKGROUND_COLOR,
    GraphLayout,
    build_layout,
    draw_graph,
)
from demostats.statistics import Series, Summary


class RecordingCanvas:
    def __init__(self):
        self.calls = []

    def _record(self, kind, args, kwargs):
        self.calls.append((kind, args, kwargs))

    def create_rectangle(self, *args, **kwargs):
        self._record("rectangle", args, kwargs)

    def create_line(self, *args, **kwargs):
        self._record("line", args, kwargs)

    def create_oval(self, *args, **kwargs):
        self._record("oval", args, kwargs)

    def create_text(self, *args, **kwargs):
        self._record("text", args, kwargs)

    def create_polygon(self, *args, **kwargs):
        self._record("polygon", args, kwargs)

    def of_kind(self, kind):
        return [call for call in self.calls if call[0] == kind]

    def texts(self):
        return [kwargs["text"] for _, _, kwargs in self.of_kind("text")]


def make_series():
    return Series(years=[2000, 2005, 2010], values=[0.0, 20.0, 50.0])


def make_summary():
    return Summary(min=0.0, max=50.0, median=20.0)


def test_build_layout_empty_series_is_none():
    assert build_layout(Series(), make_summary(), 400, 300) is None


def test_layout_padding_and_years():
    layout = build_layout(make_series(), make_summary(), 300, 260)
    assert isinstance(layout, GraphLayout)
    assert layout.min_year == 2000
    assert layout.max_year == 2010
    assert layout.padded_min == pytest.approx(-5.0)
    assert layout.padded_max == pytest.approx(55.0)


def test_origin_maps_to_axis_corner():
    layout = build_layout(make_series(), make_summary(), 400, 300)
    assert layout.point(layout.min_year, layout.padded_min) == (
        AXIS_MARGIN,
        300 - AXIS_MARGIN,
    )


def test_value_y_decreases_with_value():
    layout = build_layout(make_series(), make_summary(), 400, 300)
    assert layout.value_y(0.0) > layout.value_y(20.0) > layout.value_y(50.0)


def test_points_stay_inside_plot_area():
    width, height = 400, 300
    series = make_series()
    layout = build_layout(series, make_summary(), width, height)
    for year, value in zip(series.years, series.values):
        x, y = layout.point(year, value)
        assert AXIS_MARGIN <= x <= width - AXIS_MARGIN
        assert AXIS_MARGIN <= y <= height - AXIS_MARGIN


def test_x_ticks_step_through_years():
    layout = build_layout(make_series(), make_summary(), 400, 300)
    ticks = layout.x_ticks()
    assert [year for year, _ in ticks] == list(range(2000, 2011, 2))
    xs = [x for _, x in ticks]
    assert xs == sorted(xs)
    assert xs[0] == AXIS_MARGIN


def test_x_ticks_step_at_least_one_year():
    series = Series(years=[2000, 2001, 2002], values=[1.0, 2.0, 3.0])
    layout = build_layout(series, Summary(1.0, 3.0, 2.0), 400, 300)
    assert [year for year, _ in layout.x_ticks()] == [2000, 2001, 2002]


def test_y_ticks_cover_padded_range():
    layout = build_layout(make_series(), make_summary(), 400, 300)
    ticks = layout.y_ticks()
    values = [value for value, _ in ticks]
    assert values[0] == layout.padded_min
    assert all(value <= layout.padded_max for value in values)
    assert 5 <= len(ticks) <= 6
    ys = [y for _, y in ticks]
    assert ys == sorted(ys, reverse=True)


def test_single_year_and_equal_values_do_not_fail():
    series = Series(years=[2000], values=[7.0])
    layout = build_layout(series, Summary(7.0, 7.0, 7.0), 400, 300)
    assert layout.x_scale == 0.0
    assert layout.y_scale == 0.0
    assert layout.x_ticks() == [(2000, AXIS_MARGIN)]
    assert layout.y_ticks() == [(7.0, 300 - AXIS_MARGIN)]


def test_draw_graph_empty_series_paints_background_only():
    canvas = RecordingCanvas()
    result = draw_graph(canvas, Series(), make_summary(), 400, 300)
    assert result is None
    assert len(canvas.calls) == 1
    kind, args, kwargs = canvas.calls[0]
    assert kind == "rectangle"
    assert args == (0, 0, 400, 300)
    assert kwargs["fill"] == BACKGROUND_COLOR


def test_draw_graph_draws_points_and_labels():
    canvas = RecordingCanvas()
    series = make_series()
    layout = draw_graph(canvas, series, make_summary(), 400, 300)
    assert layout == build_layout(series, make_summary(), 400, 300)
    assert len(canvas.of_kind("oval")) == len(series)
    assert len(canvas.of_kind("polygon")) == 2
    texts = canvas.texts()
    assert "Year" in texts
    assert "Value" in texts
    assert "Min: 0" in texts
    assert "Max: 50" in texts
    assert "Median: 20" in texts


def test_draw_graph_year_tick_labels():
    canvas = RecordingCanvas()
    draw_graph(canvas, make_series(), make_summary(), 400, 300)
    texts = canvas.texts()
    for year in range(2000, 2011, 2):
        assert str(year) in texts


def test_draw_graph_value_tick_labels_two_decimals():
    canvas = RecordingCanvas()
    layout = draw_graph(canvas, make_series(), make_summary(), 400, 300)
    texts = canvas.texts()
    for value, _ in layout.y_ticks():
        assert f"{value:.2f}" in texts


def test_draw_graph_single_point_has_no_line_or_marker():
    canvas = RecordingCanvas()
    series = Series(years=[2000], values=[3.0])
    layout = draw_graph(canvas, series, Summary(3.0, 3.0, 3.0), 400, 300)
    assert layout is not None
    assert canvas.of_kind("oval") == []
    assert "Median: 3" in canvas.texts()


def test_connecting_lines_join_consecutive_points():
    canvas = RecordingCanvas()
    series = make_series()
    layout = draw_graph(canvas, series, make_summary(), 400, 300)
    points = [layout.point(y, v) for y, v in zip(series.years, series.values)]
    segments = {
        args
        for kind, args, kwargs in canvas.calls
        if kind == "line" and kwargs.get("fill") == "blue"
    }
    assert segments == {(*a, *b) for a, b in zip(points, points[1:])}