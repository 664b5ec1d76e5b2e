# visualizations.py

"""
The concrete visualizations wired up in config.DATA_VISUALIZATIONS.

Each function takes one dataset's rows (or, for the cross-dataset
overview, {dataset_key: rows or None}) and returns a chart descriptor.
They are free to raise: dataset_service.try_render turns the failure
into an inline error for that one chart.
"""

from collections.abc import Mapping

import config
from apps.datasets.transforms import count_by_category, project_fields
from common.charts import (
    InvalidInputError,
    render_bar_chart,
    render_data_table,
    render_line_chart,
    render_pie_chart,
    render_scatter_chart,
)

# --- Colors dataset ---

COLOR_COLUMN = "Favorite Color"
COLOR_TABLE_FIELDS = ["Name", "Age", "Favorite Color", "Favorite Sport"]


def favorite_color_counts(rows):
    return count_by_category(rows, COLOR_COLUMN)


def color_bar_chart(rows):
    return render_bar_chart(favorite_color_counts(rows), 800, 400)


def color_pie_chart(rows):
    return render_pie_chart(favorite_color_counts(rows), 500, 500)


def color_table(rows):
    return render_data_table(rows, COLOR_TABLE_FIELDS, page_size=config.DEFAULT_TABLE_PAGE_SIZE)


# --- Scatter dataset ---

DASH_COLUMN = "100 Yard Dash Time"
SCORE_COLUMN = "APCSP Score"
SCATTER_TABLE_FIELDS = ["Name", DASH_COLUMN, SCORE_COLUMN]


def dash_vs_score_points(rows):
    return project_fields(rows, x=DASH_COLUMN, y=SCORE_COLUMN, label="Name")


def _x_sort_key(point):
    # Numeric x first, in order; anything unreadable keeps its place at the end
    try:
        return (0, float(point["x"]))
    except (TypeError, ValueError):
        return (1, 0.0)


def dash_vs_score_scatter(rows):
    return render_scatter_chart(dash_vs_score_points(rows), DASH_COLUMN, SCORE_COLUMN, 800, 400)


def dash_vs_score_line(rows):
    points = sorted(dash_vs_score_points(rows), key=_x_sort_key)
    return render_line_chart(points, DASH_COLUMN, SCORE_COLUMN, 800, 400)


def scatter_table(rows):
    return render_data_table(rows, SCATTER_TABLE_FIELDS, page_size=config.DEFAULT_TABLE_PAGE_SIZE)


# --- All datasets ---

def render_dataset_overview(rows_by_key):
    """
    Bar chart of row counts, one bar per loaded dataset.
    Returns None until at least one dataset is loaded.
    """
    if not isinstance(rows_by_key, Mapping):
        raise InvalidInputError("Expected a mapping of dataset key to rows")

    points = [
        {"name": config.DATA_SOURCES.get(key, {}).get("name", key), "value": len(rows)}
        for key, rows in rows_by_key.items()
        if rows is not None
    ]
    return render_bar_chart(points, 600, 300)
