# ui_nav.py

import streamlit as st


def build_sidebar(snapshot, status_icons):
    """
    Draw the sidebar: one line per dataset with its load state.

    The sidebar is read-only; loading happens from the buttons on the page.

    Returns a dict:
      {
        "loaded": number of loaded datasets,
        "total": number of configured datasets
      }
    """
    loaded = sum(1 for dataset in snapshot.values() if dataset.is_loaded)

    with st.sidebar:
        st.title("Datasets")

        for key, dataset in snapshot.items():
            if dataset.is_loaded:
                icon = status_icons.get("loaded", "✅")
                st.write(f"{icon} **{dataset.display_name}** ({len(dataset.rows)} rows)")
            else:
                icon = status_icons.get("not_loaded", "⏳")
                st.write(f"{icon} **{dataset.display_name}** (not loaded)")
            st.caption(f"`{key}` · {dataset.source_locator}")

        st.markdown("---")
        st.write(f"**Loaded:** {loaded} of {len(snapshot)}")

    return {
        "loaded": loaded,
        "total": len(snapshot),
    }
