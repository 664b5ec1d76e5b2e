"""
common/data_table.py

Pagination model behind the dashboard's data tables.

A DataTable holds the full row list plus the current page. Everything
shown on screen (visible rows, Previous/Next state, "Showing A-B of N")
is derived from those two in `page()`. The Streamlit widget that draws
it lives in common/layout.py.
"""

import math
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence


@dataclass(frozen=True)
class TablePage:
    """One page of a DataTable, already projected onto the table's fields."""

    rows: list[dict[str, Any]]
    page_index: int
    page_size: int
    total_pages: int
    total_rows: int
    start_index: int
    end_index: int

    @property
    def has_previous(self) -> bool:
        return self.page_index > 1

    @property
    def has_next(self) -> bool:
        return self.page_index < self.total_pages

    @property
    def show_controls(self) -> bool:
        return self.total_pages > 1

    @property
    def status(self) -> str:
        return f"Page {self.page_index} of {self.total_pages}"

    @property
    def summary(self) -> str:
        return f"Showing {self.start_index + 1}-{self.end_index} of {self.total_rows}"


class DataTable:
    """
    Paginated view over an ordered list of row dicts.

    `fields` is the column projection: the header uses it in order and each
    visible row is read through it, so extra keys are dropped and missing
    keys show up as None.
    """

    def __init__(self, rows: Sequence[Mapping], fields: Sequence[str], page_size: int = 20):
        if isinstance(page_size, bool) or not isinstance(page_size, int) or page_size <= 0:
            raise ValueError(f"page_size must be a positive integer, got {page_size!r}")
        self.rows = list(rows)
        self.fields = list(fields)
        self.page_size = page_size
        self.current_page = 1

    @property
    def total_rows(self) -> int:
        return len(self.rows)

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_rows / self.page_size)

    def go_to_page(self, page: Optional[int]) -> None:
        """Move to `page` if it exists; out-of-range requests are ignored."""
        if page is not None and 1 <= page <= self.total_pages:
            self.current_page = page

    def next_page(self) -> None:
        self.go_to_page(self.current_page + 1)

    def previous_page(self) -> None:
        self.go_to_page(self.current_page - 1)

    def page(self) -> TablePage:
        start_index = (self.current_page - 1) * self.page_size
        end_index = min(start_index + self.page_size, self.total_rows)
        visible = [
            {field: row.get(field) for field in self.fields}
            for row in self.rows[start_index:end_index]
        ]
        return TablePage(
            rows=visible,
            page_index=self.current_page,
            page_size=self.page_size,
            total_pages=self.total_pages,
            total_rows=self.total_rows,
            start_index=start_index,
            end_index=end_index,
        )
