"""Shared fixtures for the dashboard tests."""

from __future__ import annotations

import pytest

COLOR_CSV = """Name,Age,Favorite Color,Favorite Sport
Ann,17,Red,Soccer
Ben,16,Red,Tennis
Cat,15,Blue,Track
"""

SCATTER_CSV = """Name,100 Yard Dash Time,APCSP Score
Ann,12.5,4
Ben,11.9,5
"""


@pytest.fixture
def color_rows() -> list[dict[str, str]]:
    """Rows shaped like the Colors dataset."""

    return [
        {"Name": "Ann", "Age": "17", "Favorite Color": "Red", "Favorite Sport": "Soccer"},
        {"Name": "Ben", "Age": "16", "Favorite Color": "Red", "Favorite Sport": "Tennis"},
        {"Name": "Cat", "Age": "15", "Favorite Color": "Blue", "Favorite Sport": "Track"},
    ]


@pytest.fixture
def xy_points() -> list[dict[str, str]]:
    """Line/scatter points as the projection transform produces them."""

    return [
        {"x": "10", "y": "5", "label": "A"},
        {"x": "12", "y": "3", "label": None},
    ]


@pytest.fixture
def fake_sources() -> dict[str, dict[str, str]]:
    """A two-dataset registry in config.DATA_SOURCES shape."""

    return {
        "color_demo": {"url": "data/color.csv", "name": "Colors"},
        "scatter_demo": {"url": "data/scatter.csv", "name": "Fake Scatter Data"},
    }


@pytest.fixture
def fake_fetch():
    """Fetch stub serving the fixture CSVs by locator."""

    texts = {"data/color.csv": COLOR_CSV, "data/scatter.csv": SCATTER_CSV}

    def fetch(locator: str) -> str:
        return texts[locator]

    return fetch
