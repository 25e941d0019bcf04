"""Neighbors Light - Home page."""

import sys
from pathlib import Path

import streamlit as st

app_dir = Path(__file__).parent
if str(app_dir) not in sys.path:
    sys.path.insert(0, str(app_dir))

from neighbors_light.backend import BackendError
from neighbors_light.views.risk import build_risk_overview
from neighbors_light.views.summary import count_referrals_by_status, summarize_bed_utilization
from components.session import get_config, load_snapshot

st.set_page_config(
    page_title="Neighbors Light",
    page_icon="",
    layout="wide",
)

config = get_config()

st.title("Neighbors Light: Case Management")

st.markdown("""
Partner agencies submit client referrals, staff review them and convert
them into intakes, and intakes are matched to beds across facilities.

**Use the sidebar** to navigate:
1. **Referrals** - Filter, sort and review incoming referrals
2. **Beds** - Track bed availability with saved filters
3. **Risk Overview** - Items needing attention now
""")

try:
    snapshot, now = load_snapshot()
except BackendError as e:
    st.error(f"Could not load data: {e}")
    st.stop()

counts = count_referrals_by_status(snapshot.referrals)
beds = summarize_bed_utilization(snapshot.active_beds)
overview = build_risk_overview(
    snapshot.referrals, snapshot.intakes, snapshot.active_beds, now, config.at_risk_threshold_ms
)

cols = st.columns(4)
with cols[0]:
    st.metric("Referrals", counts.total)
    st.caption(f"{counts.submitted} awaiting review")
with cols[1]:
    st.metric("Active Intakes", len([i for i in snapshot.intakes if i.status != "exited"]))
with cols[2]:
    st.metric("Beds Available", beds.available)
    st.caption(f"{beds.occupied} of {beds.total} occupied")
with cols[3]:
    st.metric("Risk Flags", overview.total_flags)

if overview.total_flags:
    st.warning("Some items need attention. See the Risk Overview page.")
