"""
common/layout.py

Shared layout helpers for the dashboard.

- render_frame(): thin header bar + page body
- render_outcome(): draws one RenderOutcome (figure, table or red error)
- show_data_table(): the paginated table widget around common.data_table
"""

import html
from typing import Callable, Optional

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from common.data_table import DataTable
from dataset_service import RenderOutcome


HEADER_CSS = """
<style>
    .dash-header {
        display: flex;
        justify-content: space-between;
        align-items: center;
        padding: 0.3rem 1.25rem;
        background-image: linear-gradient(90deg, #000000, #4B9FFF);
        border-radius: 10px;
        margin-bottom: 1.5rem;
        color: white;
    }
    .dash-header h2 {
        font-size: 1.1rem;
        font-weight: 500;
        margin: 0;
        color: white;
    }
    .dash-header .meta-item {
        font-size: 0.8rem;
        white-space: nowrap;
    }
    .dash-header .meta-item strong {
        color: #aaa;
    }
    .render-error {
        color: red;
    }
</style>
"""


def render_frame(
    title_override: str,
    body_component: Optional[Callable],
    data_source: str,
    loaded_summary: str,
    last_updated: str = "N/A",
) -> None:
    """
    Render the header strip for the dashboard, then the page body.
    """
    header_html = f"""
<div class="dash-header">
<h2>{html.escape(title_override)}</h2>
<div class="meta-item"><strong>Loaded:</strong> {html.escape(loaded_summary)}</div>
<div class="meta-item"><strong>Updated:</strong> {html.escape(last_updated)}</div>
<div class="meta-item"><strong>Source:</strong> {html.escape(data_source)}</div>
</div>
"""
    st.markdown(HEADER_CSS, unsafe_allow_html=True)
    st.markdown(header_html, unsafe_allow_html=True)

    if body_component:
        body_component()
    else:
        st.error(
            f"**Page Rendering Error:** The page '{title_override}' "
            "did not provide a valid body component to render."
        )
        st.stop()


def render_error(message: str) -> None:
    """Inline red error in place of a chart."""
    st.markdown(
        f'<p class="render-error">Error rendering visualization: {html.escape(message)}</p>',
        unsafe_allow_html=True,
    )


def show_data_table(table: DataTable, key: str) -> None:
    """
    Draw a DataTable with Previous / Next controls.
    The current page is kept in st.session_state under `key`, so it
    survives reruns of the same table.
    """
    state_key = f"table_page::{key}"
    table.go_to_page(st.session_state.get(state_key, 1))
    page = table.page()

    frame = pd.DataFrame(page.rows, columns=table.fields).fillna("")
    st.dataframe(frame, hide_index=True, width="stretch")

    if not page.show_controls:
        return

    col_prev, col_info, col_next = st.columns([1, 3, 1])
    with col_prev:
        if st.button("« Previous", key=f"{state_key}::prev", disabled=not page.has_previous):
            table.previous_page()
            st.session_state[state_key] = table.current_page
            st.rerun()
    with col_info:
        st.caption(f"{page.status} ({page.summary})")
    with col_next:
        if st.button("Next »", key=f"{state_key}::next", disabled=not page.has_next):
            table.next_page()
            st.session_state[state_key] = table.current_page
            st.rerun()


def render_outcome(outcome: RenderOutcome, key: str) -> None:
    """Display one renderer result according to what it produced."""
    if not outcome.ok:
        render_error(outcome.error)
        return

    descriptor = outcome.descriptor
    if descriptor is None:
        # Renderer had no data to draw
        return
    if isinstance(descriptor, go.Figure):
        st.plotly_chart(descriptor, key=key)
    elif isinstance(descriptor, DataTable):
        show_data_table(descriptor, key=key)
    else:
        st.markdown(str(descriptor))
