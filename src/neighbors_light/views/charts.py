"""Plotly figures for the dashboard."""

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from neighbors_light.core.models import Referral
from neighbors_light.views.display import get_status_label
from neighbors_light.views.summary import BedUtilization, count_referrals_by_status

BED_STATUS_COLOURS = {
    "Available": "#29b09d",
    "Occupied": "#ff4b4b",
}


def utilization_frame(summary: BedUtilization) -> pd.DataFrame:
    """Long-form bed counts: one row per (program, status)."""
    records = []
    for program in summary.programs:
        records.append({"Program": program.label, "Status": "Available", "Beds": program.available})
        records.append({"Program": program.label, "Status": "Occupied", "Beds": program.occupied})
    return pd.DataFrame(records, columns=["Program", "Status", "Beds"])


def build_utilization_figure(summary: BedUtilization) -> go.Figure:
    """Stacked bar of available and occupied beds per program."""
    fig = px.bar(
        utilization_frame(summary),
        x="Program",
        y="Beds",
        color="Status",
        title="Bed Utilization by Program",
        color_discrete_map=BED_STATUS_COLOURS,
    )
    fig.update_layout(barmode="stack", yaxis_title="Beds")
    return fig


def build_referral_status_figure(referrals: list[Referral]) -> go.Figure:
    """Pie of referrals by status."""
    counts = count_referrals_by_status(referrals)
    data = pd.DataFrame({
        "Status": [get_status_label(s) for s in
                   ("submitted", "needsInfo", "waitlisted", "approved", "declined")],
        "Referrals": [counts.submitted, counts.needs_info, counts.waitlisted,
                      counts.approved, counts.declined],
    })
    return px.pie(data, names="Status", values="Referrals", title="Referrals by Status")
