import streamlit as st

from apps.datasets import dashboard
from common.layout import render_frame
from common.logging_utils import setup_logging
from config import APP_TITLE, DATA_SOURCES, LOG_LEVEL, STATUS_ICONS
from dataset_service import DatasetStore
from ui_nav import build_sidebar

# ─── Page Config ──────────────────────────────────────────────────────────────
st.set_page_config(
    page_title=APP_TITLE,
    page_icon="📊",
    layout="centered",
    initial_sidebar_state="expanded"
)

setup_logging(LOG_LEVEL)

# 1. Dataset collection (one per browser session) ---
if "dataset_store" not in st.session_state:
    st.session_state["dataset_store"] = DatasetStore.from_sources(DATA_SOURCES)
store = st.session_state["dataset_store"]

# 2. Sidebar ----------------------------------------
nav_state = build_sidebar(
    snapshot=store.snapshot(),
    status_icons=STATUS_ICONS,
)

# 3. Build the page ---------------------------------
try:
    body_component, meta = dashboard.render_page(store=store)
except Exception as e:
    st.error("An error occurred while building the dashboard.")
    st.exception(e)  # Show the full traceback for debugging
    body_component = None
    meta = {"title_override": "Page Error"}

# 4. Wrap it in the frame ---------------------------
render_frame(
    title_override=meta.get("title_override", APP_TITLE),
    body_component=body_component,
    data_source=meta.get("data_source", "N/A"),
    loaded_summary=f"{nav_state['loaded']} of {nav_state['total']} datasets",
    last_updated=meta.get("last_updated", "N/A"),
)
