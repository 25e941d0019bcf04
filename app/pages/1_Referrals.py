"""Referral review page."""

import sys
from pathlib import Path

import streamlit as st

app_dir = Path(__file__).parent.parent
if str(app_dir) not in sys.path:
    sys.path.insert(0, str(app_dir))

from neighbors_light.backend import BackendError
from neighbors_light.core.entities import Program, ReferralStatus
from neighbors_light.views.charts import build_referral_status_figure
from neighbors_light.views.display import get_program_label, get_status_label
from neighbors_light.views.filters import ALL, get_unique_program_options
from neighbors_light.views.pipeline import ReferralRow, build_referral_rows, rows_to_frame
from neighbors_light.views.sorting import SortMode
from neighbors_light.views.validation import (
    get_error_message,
    has_validation_errors,
    validate_referral_form,
)
from components.session import get_backend, get_config, load_snapshot

st.set_page_config(page_title="Referrals - Neighbors Light", page_icon="📋", layout="wide")

st.title("📋 Referrals")

config = get_config()

try:
    snapshot, now = load_snapshot()
except BackendError as e:
    st.error(f"Could not load referrals: {e}")
    st.stop()

submitted_message = st.session_state.pop("referral_submitted", None)
if submitted_message:
    st.success(submitted_message)

# ===== FILTERS =====
filter_cols = st.columns([1, 1, 1, 1, 1])

with filter_cols[0]:
    status = st.selectbox(
        "Status",
        [ALL] + [s.value for s in ReferralStatus],
        format_func=lambda s: "All statuses" if s == ALL else get_status_label(s),
    )

with filter_cols[1]:
    program = st.selectbox(
        "Program",
        [ALL] + get_unique_program_options(snapshot.referrals),
        format_func=lambda p: "All programs" if p == ALL else get_program_label(p),
    )

with filter_cols[2]:
    start = st.date_input("Submitted from", value=None)

with filter_cols[3]:
    end = st.date_input("Submitted to", value=None)

with filter_cols[4]:
    sort_mode = st.radio(
        "Sort by",
        [SortMode.SUBMISSION_DATE.value, SortMode.STATUS.value],
        format_func=lambda m: "Newest first" if m == SortMode.SUBMISSION_DATE.value else "Status",
    )

rows = build_referral_rows(
    snapshot.referrals,
    snapshot.users,
    now,
    status=status,
    program=program,
    start=start,
    end=end,
    sort_mode=sort_mode,
    threshold_ms=config.at_risk_threshold_ms,
)

st.caption(f"Showing {len(rows)} of {len(snapshot.referrals)} referrals")

if not rows:
    st.info("No referrals match the current filters.")
else:
    at_risk = sum(1 for row in rows if row.is_at_risk)
    if at_risk:
        st.warning(f"{at_risk} referral(s) waiting over {config.at_risk_threshold_hours:.0f} hours")
    st.dataframe(rows_to_frame(rows, ReferralRow), use_container_width=True, hide_index=True)

st.divider()
st.plotly_chart(build_referral_status_figure(snapshot.referrals), use_container_width=True)

# ===== NEW REFERRAL =====
st.divider()
with st.expander("Submit a new referral"):
    with st.form("new_referral"):
        col1, col2 = st.columns(2)
        with col1:
            partner_agency_name = st.text_input("Partner agency *")
            referrer_name = st.text_input("Referrer name *")
            source = st.text_input("Referral source *")
        with col2:
            client_name = st.text_input("Client name *")
            contact_info = st.text_input("Client contact info *")
            program_requested = st.selectbox(
                "Program requested *",
                [p.value for p in Program],
                index=None,
                format_func=get_program_label,
            )
        reason = st.text_area("Reason for referral *")
        notes = st.text_area("Additional notes (optional)")
        submit = st.form_submit_button("Submit referral", type="primary")

    if submit:
        form = {
            "partnerAgencyName": partner_agency_name,
            "referrerName": referrer_name,
            "clientName": client_name,
            "reason": reason,
            "programRequested": program_requested,
            "contactInfo": contact_info,
            "source": source,
            "notes": notes,
        }
        errors = validate_referral_form(form)
        if has_validation_errors(errors):
            st.error("Please fill in all required fields")
            for message in errors.values():
                st.caption(f"- {message}")
        else:
            try:
                referral_id = get_backend().create_referral(form, int(now * 1_000_000))
            except ValueError as e:
                st.error(get_error_message(e))
            else:
                st.session_state.referral_submitted = f"Referral #{referral_id} submitted"
                st.rerun()
