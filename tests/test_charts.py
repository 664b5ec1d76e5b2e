"""Tests for the chart renderers' validation and output."""

from __future__ import annotations

import plotly.graph_objects as go
import pytest

from apps.datasets.transforms import count_by_category
from common.charts import (
    DEFAULT_COLOR,
    InvalidInputError,
    MissingFieldError,
    render_bar_chart,
    render_data_table,
    render_line_chart,
    render_pie_chart,
    render_scatter_chart,
    tooltip_caption,
)
from common.data_table import DataTable

pytestmark = pytest.mark.unit

CATEGORY_RENDERERS = [render_pie_chart, render_bar_chart]


def _xy(render):
    """Bind axis labels so XY renderers take just the data."""

    return lambda data: render(data, "Time", "Score")


XY_RENDERERS = [_xy(render_line_chart), _xy(render_scatter_chart)]


@pytest.mark.parametrize("render", CATEGORY_RENDERERS + XY_RENDERERS)
def test_empty_input_draws_nothing(render) -> None:
    """An empty point list is "no chart", not an error."""

    assert render([]) is None


@pytest.mark.parametrize("render", CATEGORY_RENDERERS + XY_RENDERERS)
@pytest.mark.parametrize("bad_input", [None, "name,value", {"name": "Red", "value": 1}, 42])
def test_non_sequence_input_is_rejected(render, bad_input) -> None:
    """Anything that is not a list of points raises InvalidInputError."""

    with pytest.raises(InvalidInputError, match="Expected an array of objects"):
        render(bad_input)


@pytest.mark.parametrize("render", CATEGORY_RENDERERS)
@pytest.mark.parametrize("first", [{"name": "Red"}, {"value": 2}, {"name": None, "value": 2}, "Red"])
def test_category_charts_require_name_and_value(render, first) -> None:
    """Pie/bar charts need 'name' and 'value' on the first point."""

    with pytest.raises(MissingFieldError) as excinfo:
        render([first, {"name": "Blue", "value": 1}])
    assert excinfo.value.kind == "MissingFieldKind"


@pytest.mark.parametrize("render", XY_RENDERERS)
@pytest.mark.parametrize("first", [{"x": "1"}, {"y": "2"}, {"x": None, "y": "2", "label": "A"}])
def test_xy_charts_require_x_and_y(render, first) -> None:
    """Line/scatter charts need 'x' and 'y' on the first point."""

    with pytest.raises(MissingFieldError):
        render([first])


def test_only_the_first_point_is_validated() -> None:
    """A bad point after a good first point is not rejected."""

    fig = render_pie_chart([{"name": "Red", "value": 2}, {"name": "Blue"}])

    assert isinstance(fig, go.Figure)


def test_pie_chart_sectors_and_colors() -> None:
    """Each point becomes a sector; missing colours use the default."""

    fig = render_pie_chart([
        {"name": "Red", "value": 2, "color": "red"},
        {"name": "Blue", "value": 1},
    ])

    pie = fig.data[0]
    assert list(pie.labels) == ["Red", "Blue"]
    assert list(pie.values) == [2, 1]
    assert list(pie.marker.colors) == ["red", DEFAULT_COLOR]
    assert fig.layout.width == 300
    assert fig.layout.height == 300


def test_bar_chart_bars_and_dimensions() -> None:
    """Bars follow the input order and honour explicit dimensions."""

    fig = render_bar_chart(
        [{"name": "Red", "value": 2, "color": "red"}, {"name": "Blue", "value": 1, "color": "blue"}],
        800,
        400,
    )

    bar = fig.data[0]
    assert list(bar.x) == ["Red", "Blue"]
    assert list(bar.y) == [2, 1]
    assert list(bar.marker.color) == ["red", "blue"]
    assert (fig.layout.width, fig.layout.height) == (800, 400)


def test_scatter_chart_plots_numeric_strings_as_numbers(xy_points) -> None:
    """CSV strings that read as numbers are plotted numerically."""

    fig = render_scatter_chart(xy_points, "Time", "Score")

    trace = fig.data[0]
    assert list(trace.x) == [10.0, 12.0]
    assert list(trace.y) == [5.0, 3.0]
    assert trace.mode == "markers"
    assert (fig.layout.width, fig.layout.height) == (600, 300)
    assert fig.layout.xaxis.title.text == "Time"
    assert fig.layout.yaxis.title.text == "Score"


def test_line_chart_tooltip_uses_axis_labels(xy_points) -> None:
    """The tooltip lists the point caption, then the labelled x and y."""

    fig = render_line_chart(xy_points, "Time", "Score")

    template = fig.data[0].hovertemplate
    assert "Time: %{customdata[1]}" in template
    assert "Score: %{customdata[2]}" in template
    assert fig.data[0].mode == "lines+markers"


def test_tooltip_caption_falls_back_to_x() -> None:
    """Points without a label get a synthesized caption."""

    assert tooltip_caption({"x": "10", "y": "5", "label": "A"}) == "A"
    assert tooltip_caption({"x": "12", "y": "3"}) == "Point at x=12"
    assert tooltip_caption({"x": "12", "y": "3", "label": ""}) == "Point at x=12"


@pytest.mark.parametrize(
    "render, data",
    [
        (render_pie_chart, [{"name": "Red", "value": 2, "color": "red"}]),
        (render_bar_chart, [{"name": "Red", "value": 2}]),
        (_xy(render_line_chart), [{"x": "1", "y": "2", "label": "A"}]),
        (_xy(render_scatter_chart), [{"x": "1", "y": "2"}]),
    ],
)
def test_renderers_are_repeatable(render, data) -> None:
    """Rendering the same points twice gives the same figure."""

    assert render(data).to_json() == render(data).to_json()


@pytest.mark.parametrize("render", CATEGORY_RENDERERS)
def test_unknown_colour_names_fall_back_to_default(render) -> None:
    """Categories that aren't CSS colours still chart, in the default colour."""

    points = count_by_category(
        [{"Favorite Color": "Burgundy"}, {"Favorite Color": "Red"}], "Favorite Color"
    )

    fig = render(points)

    assert isinstance(fig, go.Figure)
    trace = fig.data[0]
    colors = trace.marker.colors if isinstance(trace, go.Pie) else trace.marker.color
    assert list(colors) == [DEFAULT_COLOR, "red"]


def test_render_data_table_returns_table(color_rows) -> None:
    """The table renderer hands back a paginated DataTable."""

    table = render_data_table(color_rows, ["Name", "Age"], page_size=2)

    assert isinstance(table, DataTable)
    assert table.total_pages == 2
    assert table.page().rows == [{"Name": "Ann", "Age": "17"}, {"Name": "Ben", "Age": "16"}]
