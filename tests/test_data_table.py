"""Tests for DataTable pagination."""

from __future__ import annotations

import pytest

from common.data_table import DataTable

pytestmark = pytest.mark.unit


def _rows(count: int) -> list[dict[str, str]]:
    return [{"Name": f"row{i}", "Extra": "x"} for i in range(1, count + 1)]


def test_pagination_over_25_rows() -> None:
    """25 rows at 10 per page gives 3 pages with correct slices and controls."""

    table = DataTable(_rows(25), ["Name"], page_size=10)
    assert table.total_pages == 3

    first = table.page()
    assert [row["Name"] for row in first.rows] == [f"row{i}" for i in range(1, 11)]
    assert first.page_index == 1
    assert first.has_previous is False
    assert first.has_next is True
    assert first.show_controls is True
    assert first.summary == "Showing 1-10 of 25"

    table.go_to_page(3)
    last = table.page()
    assert [row["Name"] for row in last.rows] == [f"row{i}" for i in range(21, 26)]
    assert last.has_next is False
    assert last.has_previous is True
    assert last.summary == "Showing 21-25 of 25"
    assert last.status == "Page 3 of 3"


@pytest.mark.parametrize("page", [0, 4, -1, None])
def test_out_of_range_pages_are_ignored(page) -> None:
    """goToPage outside 1..total_pages leaves the current page alone."""

    table = DataTable(_rows(25), ["Name"], page_size=10)
    table.go_to_page(2)

    table.go_to_page(page)

    assert table.current_page == 2


def test_next_and_previous_stop_at_the_ends() -> None:
    """Previous on page 1 and Next on the last page are no-ops."""

    table = DataTable(_rows(15), ["Name"], page_size=10)

    table.previous_page()
    assert table.current_page == 1
    table.next_page()
    table.next_page()
    assert table.current_page == 2


def test_rows_are_projected_onto_fields() -> None:
    """Columns follow the field list; extras dropped, missing ones None."""

    table = DataTable([{"Name": "A", "Extra": "x"}], ["Missing", "Name"])

    assert table.page().rows == [{"Missing": None, "Name": "A"}]


def test_single_page_has_no_controls() -> None:
    """Controls only appear when there is more than one page."""

    page = DataTable(_rows(5), ["Name"], page_size=20).page()

    assert page.total_pages == 1
    assert page.show_controls is False


def test_empty_table() -> None:
    """No rows means zero pages while staying on page 1."""

    table = DataTable([], ["Name"], page_size=10)
    page = table.page()

    assert page.total_pages == 0
    assert page.page_index == 1
    assert page.rows == []
    assert page.end_index == 0
    table.go_to_page(1)
    assert table.current_page == 1


@pytest.mark.parametrize("page_size", [0, -5, 2.5, True])
def test_page_size_must_be_positive(page_size) -> None:
    """Non-positive or non-integer page sizes fail fast."""

    with pytest.raises(ValueError, match="page_size"):
        DataTable(_rows(3), ["Name"], page_size=page_size)
