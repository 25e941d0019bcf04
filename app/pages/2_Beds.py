"""Bed tracking page.

Filter choices are saved to the preferences store only from widget
callbacks and the reset button, never while the page loads.
"""

import sys
from pathlib import Path

import streamlit as st

app_dir = Path(__file__).parent.parent
if str(app_dir) not in sys.path:
    sys.path.insert(0, str(app_dir))

from neighbors_light.backend import BackendError
from neighbors_light.prefs.store import (
    PROGRAM_FILTER_OPTIONS,
    STATUS_FILTER_OPTIONS,
    BedTrackingPreferences,
)
from neighbors_light.views.charts import build_utilization_figure
from neighbors_light.views.display import get_program_label
from neighbors_light.views.pipeline import BedRow, build_bed_rows, rows_to_frame
from neighbors_light.views.summary import summarize_bed_utilization
from components.session import get_preferences, load_snapshot

st.set_page_config(page_title="Beds - Neighbors Light", page_icon="🛏️", layout="wide")

st.title("🛏️ Bed Tracking")

store = get_preferences()

# Initialize widget state from saved preferences
if "bed_prefs_loaded" not in st.session_state:
    saved = store.load()
    st.session_state.bed_program_filter = saved.program_filter
    st.session_state.bed_status_filter = saved.status_filter
    st.session_state.bed_show_archived = saved.show_archived
    st.session_state.bed_prefs_loaded = True


def current_preferences() -> BedTrackingPreferences:
    return BedTrackingPreferences(
        program_filter=st.session_state.bed_program_filter,
        status_filter=st.session_state.bed_status_filter,
        show_archived=st.session_state.bed_show_archived,
    )


def on_filter_change():
    store.save(current_preferences())


def on_reset():
    defaults = store.get_defaults()
    st.session_state.bed_program_filter = defaults.program_filter
    st.session_state.bed_status_filter = defaults.status_filter
    st.session_state.bed_show_archived = defaults.show_archived
    store.clear()


try:
    snapshot, _ = load_snapshot()
except BackendError as e:
    st.error(f"Could not load beds: {e}")
    st.stop()

# ===== FILTERS =====
filter_cols = st.columns([1, 1, 1, 1])

with filter_cols[0]:
    st.selectbox(
        "Program",
        PROGRAM_FILTER_OPTIONS,
        key="bed_program_filter",
        format_func=lambda p: "All programs" if p == "all" else get_program_label(p),
        on_change=on_filter_change,
    )

with filter_cols[1]:
    st.selectbox(
        "Status",
        STATUS_FILTER_OPTIONS,
        key="bed_status_filter",
        format_func=str.capitalize,
        on_change=on_filter_change,
    )

with filter_cols[2]:
    st.toggle("Show archived", key="bed_show_archived", on_change=on_filter_change)

with filter_cols[3]:
    st.button("Reset filters", on_click=on_reset, help="Reset filters to defaults")

rows = build_bed_rows(snapshot.beds, snapshot.intakes, current_preferences())

if not rows:
    st.info("No beds match your saved filters. Try adjusting your filters or reset them to see all beds.")
else:
    st.dataframe(rows_to_frame(rows, BedRow), use_container_width=True, hide_index=True)

st.divider()

# ===== UTILIZATION =====
st.header("Bed Utilization")

if not snapshot.active_beds:
    st.info("No active beds to summarize")
else:
    summary = summarize_bed_utilization(snapshot.active_beds)
    cols = st.columns(3)
    with cols[0]:
        st.metric("Total Beds", summary.total)
    with cols[1]:
        st.metric("Available", summary.available)
    with cols[2]:
        st.metric("Occupied", summary.occupied)
    st.plotly_chart(build_utilization_figure(summary), use_container_width=True)
