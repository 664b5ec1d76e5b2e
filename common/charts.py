"""
common/charts.py

Chart renderers for the dashboard.

Each renderer takes a list of point dicts, validates it and returns a
plotly Figure describing the chart. The rules are the same for every chart:

  1. The input must be a list (or tuple) of dicts, otherwise
     InvalidInputError is raised.
  2. An empty list means "no chart" and returns None.
  3. The FIRST point must carry the chart's required keys
     ('name' + 'value' for pie/bar, 'x' + 'y' for line/scatter),
     otherwise MissingFieldError is raised. Later points are not checked.

Renderers never touch Streamlit. Display (and catching the errors above)
happens in dataset_service.try_render and common/layout.py.
"""

from collections.abc import Mapping, Sequence
from typing import Optional, TypedDict

import plotly.graph_objects as go
from _plotly_utils.basevalidators import ColorValidator

from common.data_table import DataTable

# Colour used when a point doesn't bring its own
DEFAULT_COLOR = "#8884d8"

PIE_SIZE = (300, 300)
BAR_SIZE = (300, 300)
LINE_SIZE = (600, 300)
SCATTER_SIZE = (600, 300)

DEFAULT_TABLE_PAGE_SIZE = 20


class CategoryPoint(TypedDict, total=False):
    """One pie sector or bar."""

    name: str
    value: float
    color: str


class XYPoint(TypedDict, total=False):
    """One plotted position on a line or scatter chart."""

    x: float | str
    y: float | str
    label: str


# --- Errors ---

class ChartInputError(ValueError):
    """Base class for renderer input problems."""

    kind = "ChartInputKind"


class InvalidInputError(ChartInputError):
    """The renderer was not given a list of points."""

    kind = "InvalidInputKind"


class MissingFieldError(ChartInputError):
    """The first point is missing a field the chart needs."""

    kind = "MissingFieldKind"


# --- Validation ---

def _validate_points(data, required: tuple[str, ...]) -> bool:
    """
    Apply the shared input rules.
    Returns False when there is nothing to draw, True when the chart
    should be built. Raises ChartInputError subclasses otherwise.
    """
    if isinstance(data, (str, bytes, Mapping)) or not isinstance(data, Sequence):
        raise InvalidInputError("Expected an array of objects")
    if len(data) == 0:
        return False

    first = data[0]
    fields = " and ".join(f"'{field}'" for field in required)
    if not isinstance(first, Mapping):
        raise MissingFieldError(f"Expected objects with {fields} fields")
    if any(first.get(field) is None for field in required):
        raise MissingFieldError(f"Expected objects with {fields} fields")
    return True


def _as_number(value):
    """Read CSV strings as numbers where possible; leave everything else alone."""
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value
    try:
        return float(value)
    except (TypeError, ValueError):
        return value


def point_color(point: Mapping) -> str:
    """The point's colour if plotly accepts it, otherwise DEFAULT_COLOR."""
    color = point.get("color")
    if color and ColorValidator.perform_validate_coerce(color) is not None:
        return color
    return DEFAULT_COLOR


def tooltip_caption(point: Mapping) -> str:
    """First tooltip line: the point's label, or a synthesized caption."""
    label = point.get("label")
    if label:
        return str(label)
    return f"Point at x={point.get('x')}"


def _xy_hover(point_data: Sequence[Mapping], x_axis_label: str, y_axis_label: str):
    customdata = [[tooltip_caption(p), p.get("x"), p.get("y")] for p in point_data]
    hovertemplate = (
        "<b>%{customdata[0]}</b><br>"
        f"{x_axis_label}: %{{customdata[1]}}<br>"
        f"{y_axis_label}: %{{customdata[2]}}"
        "<extra></extra>"
    )
    return customdata, hovertemplate


# --- Renderers ---

def render_pie_chart(pie_data: Sequence[CategoryPoint], width: int = PIE_SIZE[0], height: int = PIE_SIZE[1]) -> Optional[go.Figure]:
    """
    Render a pie chart, one sector per point.

    Points need 'name' and 'value'; 'color' is optional; missing or unrecognised colours fall
    back to DEFAULT_COLOR. Sector labels are the point names.
    """
    if not _validate_points(pie_data, ("name", "value")):
        return None

    fig = go.Figure(
        go.Pie(
            labels=[p.get("name") for p in pie_data],
            values=[p.get("value") for p in pie_data],
            marker=dict(colors=[point_color(p) for p in pie_data]),
            textinfo="label+value",
            sort=False,
        )
    )
    fig.update_layout(width=width, height=height, showlegend=False)
    return fig


def render_bar_chart(bar_data: Sequence[CategoryPoint], width: int = BAR_SIZE[0], height: int = BAR_SIZE[1]) -> Optional[go.Figure]:
    """
    Render a bar chart, one bar per point.

    Points need 'name' and 'value'; 'color' is optional and falls back to
    DEFAULT_COLOR, as do colours plotly doesn't recognise.
    """
    if not _validate_points(bar_data, ("name", "value")):
        return None

    fig = go.Figure(
        go.Bar(
            x=[p.get("name") for p in bar_data],
            y=[p.get("value") for p in bar_data],
            marker=dict(color=[point_color(p) for p in bar_data]),
        )
    )
    fig.update_layout(width=width, height=height)
    return fig


def render_line_chart(
    line_data: Sequence[XYPoint],
    x_axis_label: str,
    y_axis_label: str,
    width: int = LINE_SIZE[0],
    height: int = LINE_SIZE[1],
) -> Optional[go.Figure]:
    """
    Render a line chart through the points, in the order given.

    Points need 'x' and 'y'; 'label' is optional and heads the tooltip.
    """
    if not _validate_points(line_data, ("x", "y")):
        return None

    customdata, hovertemplate = _xy_hover(line_data, x_axis_label, y_axis_label)
    fig = go.Figure(
        go.Scatter(
            x=[_as_number(p.get("x")) for p in line_data],
            y=[_as_number(p.get("y")) for p in line_data],
            mode="lines+markers",
            line=dict(color=DEFAULT_COLOR, width=2),
            marker=dict(color="white", size=8, line=dict(color=DEFAULT_COLOR, width=2)),
            customdata=customdata,
            hovertemplate=hovertemplate,
        )
    )
    fig.update_layout(
        width=width,
        height=height,
        xaxis_title=x_axis_label,
        yaxis_title=y_axis_label,
        margin=dict(t=20, r=30, l=20, b=20),
    )
    return fig


def render_scatter_chart(
    scatter_data: Sequence[XYPoint],
    x_axis_label: str,
    y_axis_label: str,
    width: int = SCATTER_SIZE[0],
    height: int = SCATTER_SIZE[1],
) -> Optional[go.Figure]:
    """
    Render a scatter chart, one marker per point.

    Points need 'x' and 'y'; 'label' is optional and heads the tooltip.
    """
    if not _validate_points(scatter_data, ("x", "y")):
        return None

    customdata, hovertemplate = _xy_hover(scatter_data, x_axis_label, y_axis_label)
    fig = go.Figure(
        go.Scatter(
            x=[_as_number(p.get("x")) for p in scatter_data],
            y=[_as_number(p.get("y")) for p in scatter_data],
            mode="markers",
            name="Data Points",
            marker=dict(color=DEFAULT_COLOR, symbol="circle", size=10),
            customdata=customdata,
            hovertemplate=hovertemplate,
        )
    )
    fig.update_layout(
        width=width,
        height=height,
        xaxis_title=x_axis_label,
        yaxis_title=y_axis_label,
        margin=dict(t=20, r=20, l=20, b=20),
    )
    return fig


def render_data_table(rows, fields, page_size: int = DEFAULT_TABLE_PAGE_SIZE) -> DataTable:
    """Wrap rows in a paginated DataTable showing only `fields`."""
    return DataTable(rows, fields, page_size=page_size)
