"""Tests for dashboard summaries and charts."""

from neighbors_light.views.charts import (
    build_referral_status_figure,
    build_utilization_figure,
    utilization_frame,
)
from neighbors_light.views.summary import (
    ProgramUtilization,
    count_referrals_by_status,
    summarize_bed_utilization,
)

from conftest import make_bed


class TestReferralCounts:
    def test_counts(self, mixed_referrals):
        """Each status is counted once."""
        counts = count_referrals_by_status(mixed_referrals)
        assert counts.total == 8
        assert counts.submitted == 3
        assert counts.needs_info == 1
        assert counts.waitlisted == 1
        assert counts.approved == 2
        assert counts.declined == 1

    def test_empty(self):
        """No referrals give zero counts."""
        counts = count_referrals_by_status([])
        assert counts.total == 0
        assert counts.submitted == 0


class TestBedUtilization:
    """Test bed utilization aggregation."""

    def test_totals_and_programs(self):
        """Totals and per-program counts in first-seen order."""
        beds = [
            make_bed(1, "available", program="workforceHousing"),
            make_bed(2, "occupied", program="medicalStepDown"),
            make_bed(3, "maintenance", program="workforceHousing"),
            make_bed(4, "occupied", program="workforceHousing"),
        ]
        summary = summarize_bed_utilization(beds)

        assert (summary.total, summary.available, summary.occupied) == (4, 1, 2)
        assert [p.program for p in summary.programs] == ["workforceHousing", "medicalStepDown"]

        workforce = summary.programs[0]
        assert workforce.label == "Workforce Housing"
        assert (workforce.total, workforce.available, workforce.occupied) == (3, 1, 1)
        assert abs(workforce.occupancy_rate - 1 / 3) < 1e-9

    def test_empty(self):
        """No beds give an empty summary."""
        summary = summarize_bed_utilization([])
        assert summary.total == 0
        assert summary.programs == []

    def test_occupancy_rate_zero_beds(self):
        """A program with no beds has zero occupancy."""
        assert ProgramUtilization(program="x", label="x").occupancy_rate == 0.0


class TestCharts:
    """Test figure construction from summaries."""

    def test_utilization_frame_long_form(self):
        """The chart frame has one row per program and status."""
        summary = summarize_bed_utilization([
            make_bed(1, "available"),
            make_bed(2, "occupied"),
        ])
        frame = utilization_frame(summary)
        assert list(frame.columns) == ["Program", "Status", "Beds"]
        assert frame["Beds"].tolist() == [1, 1]
        assert set(frame["Status"]) == {"Available", "Occupied"}

    def test_utilization_figure_has_trace_per_status(self):
        """The bar chart has one trace per status."""
        summary = summarize_bed_utilization([make_bed(1, "available"), make_bed(2, "occupied")])
        fig = build_utilization_figure(summary)
        assert {trace.name for trace in fig.data} == {"Available", "Occupied"}

    def test_status_figure_values(self, mixed_referrals):
        """The pie chart counts referrals per status label."""
        fig = build_referral_status_figure(mixed_referrals)
        pie = fig.data[0]
        values = dict(zip(pie.labels, pie.values))
        assert values["Submitted"] == 3
        assert values["Approved"] == 2
        assert values["Declined"] == 1
