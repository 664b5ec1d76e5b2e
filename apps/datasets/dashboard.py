"""
apps/datasets/dashboard.py

The single dashboard page: one section per configured dataset, then an
"All Data" section across datasets.

- A dataset that isn't loaded shows a "Load <name>" button.
- A loaded dataset shows its heading and its configured visualizations.
- Any visualization that fails is replaced by a red inline error; the rest
  of the page carries on.
"""

from datetime import datetime

import streamlit as st

import config
import dataset_service  # <-- The "Engine"
from common.data_access import DatasetLoadError
from common.layout import render_outcome
from common.logging_utils import get_logger

logger = get_logger(__name__)


# --- Helper Functions (specific to this dashboard) ---

def load_dataset(store, key):
    """Button handler: load one dataset, report failures, rerun on success."""
    dataset = store.get(key)
    try:
        with st.spinner(f"Loading {dataset.display_name}..."):
            store.load(key)
    except DatasetLoadError as e:
        logger.error("Could not load dataset '%s': %s", key, e)
        st.error(f"Could not load {dataset.display_name}: {e}")
    else:
        st.rerun()


# --- Streamlit Page Class ---

class Page:
    def __init__(self, store):
        self.store = store
        self.visualizations = config.DATA_VISUALIZATIONS

        self.meta = {
            "title_override": config.APP_TITLE,
            "last_updated": datetime.now().strftime("%Y-%m-%d %H:%M"),
            "data_source": config.DATA_BASE_URL or str(config.DATA_ROOT),
        }

    def _render_dataset_section(self, key, dataset):
        if not dataset.is_loaded:
            if st.button(f"Load {dataset.display_name}", key=f"load::{key}"):
                load_dataset(self.store, key)
            return

        outcomes = dataset_service.render_dataset_visualizations(
            dataset, self.visualizations.get(key, [])
        )
        st.header(dataset.display_name)
        for index, outcome in enumerate(outcomes):
            render_outcome(outcome, key=f"{key}::{index}")

    def _render_cross_dataset_section(self):
        outcomes = dataset_service.render_cross_dataset_visualizations(
            self.store.snapshot(), self.visualizations.get("all", [])
        )
        st.header("All Data")
        for index, outcome in enumerate(outcomes):
            render_outcome(outcome, key=f"all::{index}")

    # --- This is the "recipe" function that gets returned ---

    def render_body(self) -> None:
        """
        This is the main function called by render_frame.
        """
        for key, dataset in self.store.snapshot().items():
            with st.container():
                self._render_dataset_section(key, dataset)

        self._render_cross_dataset_section()


# -----------------------------------------------------------------------------
# META HEADER DETAILS BACK TO MAIN
# -----------------------------------------------------------------------------

def render_page(store) -> (callable, dict):
    """
    This is the public function that main_app.py interacts with.
    """
    page = Page(store=store)
    return page.render_body, page.meta
