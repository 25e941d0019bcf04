"""Operational risk overview page."""

import sys
from pathlib import Path

import streamlit as st

app_dir = Path(__file__).parent.parent
if str(app_dir) not in sys.path:
    sys.path.insert(0, str(app_dir))

from neighbors_light.backend import BackendError
from neighbors_light.views.display import get_program_label, get_user_display_name
from neighbors_light.views.elapsed import format_waiting_time
from neighbors_light.views.pipeline import IntakeRow, build_intake_rows, rows_to_frame
from neighbors_light.views.risk import (
    build_risk_overview,
    get_bed_at_risk_label,
    get_intake_at_risk_label,
    get_referral_at_risk_label,
)
from components.session import get_config, load_snapshot

st.set_page_config(page_title="Risk Overview - Neighbors Light", page_icon="⚠️", layout="wide")

st.title("⚠️ Operational Risk Overview")
st.caption("Items requiring immediate attention across referrals, intakes, and beds")

config = get_config()

try:
    snapshot, now = load_snapshot()
except BackendError as e:
    st.error(f"Could not load data: {e}")
    st.stop()

overview = build_risk_overview(
    snapshot.referrals, snapshot.intakes, snapshot.active_beds, now, config.at_risk_threshold_ms
)

MAX_LISTED = 5

# ===== REFERRALS =====
st.header("Referrals Waiting Review")
if not overview.referrals_waiting_review:
    st.success("No referrals waiting review")
else:
    st.metric("Waiting", len(overview.referrals_waiting_review))
    at_risk_ids = {r.id for r in overview.at_risk_referrals}
    for referral in overview.referrals_waiting_review[:MAX_LISTED]:
        line = (
            f"**{referral.client_name}** ({referral.partner_agency_name}) - "
            f"{format_waiting_time(referral.created_at, now)}"
        )
        if referral.id in at_risk_ids:
            st.error(f"{line} - {get_referral_at_risk_label(config.at_risk_threshold_ms)}")
        else:
            st.write(line)
    if len(overview.referrals_waiting_review) > MAX_LISTED:
        st.caption(f"+{len(overview.referrals_waiting_review) - MAX_LISTED} more")

if overview.approved_not_converted:
    st.subheader("Approved, Not Yet Converted")
    for referral in overview.approved_not_converted[:MAX_LISTED]:
        staff = get_user_display_name(referral.assigned_staff, snapshot.users)
        st.write(f"**{referral.client_name}** - {get_program_label(referral.program_requested)} - {staff}")

st.divider()

# ===== INTAKES =====
st.header("Intakes")
cols = st.columns(2)
with cols[0]:
    st.metric(get_intake_at_risk_label(), len(overview.intakes_without_bed))
with cols[1]:
    st.metric("No case manager", len(overview.intakes_without_case_manager))

rows = [row for row in build_intake_rows(snapshot.intakes, snapshot.users) if row.is_at_risk]
if rows:
    st.dataframe(rows_to_frame(rows, IntakeRow), use_container_width=True, hide_index=True)

st.divider()

# ===== BEDS =====
st.header("Beds")
st.metric(get_bed_at_risk_label(), len(overview.beds_without_exit_date))
for bed in overview.beds_without_exit_date[:MAX_LISTED]:
    st.warning(f"Bed {bed.bed_number} ({get_program_label(bed.program)})")
