# config.py

import os
from pathlib import Path

APP_TITLE = "Data Visualization"

# Folder the relative source locators are read from (the repo root by default,
# so "data/colorDemo.csv" resolves to ./data/colorDemo.csv)
APP_ROOT = Path(__file__).resolve().parent
DATA_ROOT = Path(os.environ.get("DASHBOARD_DATA_ROOT", APP_ROOT))

# When set, relative locators are downloaded from this base URL instead
DATA_BASE_URL = os.environ.get("DASHBOARD_DATA_BASE_URL") or None

# Seconds before a download is abandoned
FETCH_TIMEOUT_S = float(os.environ.get("DASHBOARD_FETCH_TIMEOUT", "30"))

LOG_LEVEL = os.environ.get("DASHBOARD_LOG_LEVEL", "INFO")

DEFAULT_TABLE_PAGE_SIZE = 20

# Which datasets exist.
# Each dataset has a source locator and a display name.
DATA_SOURCES = {
    "color_demo": {
        "url": "data/colorDemo.csv",
        "name": "Colors",
    },
    "scatter_demo": {
        "url": "data/scatterDemo.csv",
        "name": "Fake Scatter Data",
    },
}

# Which visualizations each dataset shows, in display order.
# Each entry is the dotted path of a function taking the dataset's rows.
# The special "all" key takes {dataset_key: rows or None} for every dataset.
DATA_VISUALIZATIONS = {
    "color_demo": [
        "apps.datasets.visualizations.color_bar_chart",
        "apps.datasets.visualizations.color_pie_chart",
        "apps.datasets.visualizations.color_table",
    ],
    "scatter_demo": [
        "apps.datasets.visualizations.dash_vs_score_scatter",
        "apps.datasets.visualizations.dash_vs_score_line",
        "apps.datasets.visualizations.scatter_table",
    ],
    "all": [
        "apps.datasets.visualizations.render_dataset_overview",
    ],
}

# Sidebar icons for dataset load state
STATUS_ICONS = {
    "loaded":     "✅",
    "not_loaded": "⏳",
}
