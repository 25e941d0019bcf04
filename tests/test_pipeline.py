"""Tests for table row builders."""

from datetime import date, datetime

from neighbors_light.core.entities import ReferralStatus
from neighbors_light.core.models import Client, UserProfile
from neighbors_light.prefs.store import BedTrackingPreferences
from neighbors_light.views.pipeline import (
    BedRow,
    build_bed_rows,
    build_intake_rows,
    build_referral_rows,
    rows_to_frame,
)

from conftest import HOUR_MS, make_bed, make_intake, make_referral, to_nanos

STAFF = "rrkah-fqaaa-aaaaa-aaaaq-cai"
USERS = [(STAFF, UserProfile(name="Dana Whitfield"))]


class TestReferralRows:
    """Test filter, sort, risk and names combined."""

    def test_rows_sorted_and_labelled(self, now_ms):
        """Rows carry risk, waiting text, labels and staff names."""
        old = int(now_ms - 80 * HOUR_MS) * 1_000_000
        recent = int(now_ms - 2 * HOUR_MS) * 1_000_000
        referrals = [
            make_referral(1, ReferralStatus.SUBMITTED, old, assigned_staff=STAFF),
            make_referral(2, ReferralStatus.SUBMITTED, recent),
            make_referral(3, ReferralStatus.APPROVED, old, program="workforceHousing"),
        ]

        rows = build_referral_rows(referrals, USERS, now_ms, sort_mode="status")

        assert [r.id for r in rows] == [2, 1, 3]
        first_old = rows[1]
        assert first_old.is_at_risk
        assert first_old.risk_label == "Over 72 hours"
        assert first_old.assigned_staff == "Dana Whitfield"
        assert first_old.waiting == "Waiting 3 days"
        assert first_old.status == "Submitted"
        assert first_old.program == "Medical Step-Down"

        assert not rows[0].is_at_risk
        assert rows[0].assigned_staff == "System"

    def test_only_submitted_flagged(self, now_ms):
        """Referrals past review are never flagged."""
        old = int(now_ms - 100 * HOUR_MS) * 1_000_000
        rows = build_referral_rows(
            [make_referral(1, ReferralStatus.APPROVED, old)], USERS, now_ms
        )
        assert not rows[0].is_at_risk
        assert rows[0].risk_label is None

    def test_filters_applied(self, now_ms):
        """Status, program and date filters apply before sorting."""
        referrals = [
            make_referral(1, created_at=to_nanos(datetime(2024, 3, 1, 10, 0))),
            make_referral(2, created_at=to_nanos(datetime(2024, 3, 10, 10, 0))),
            make_referral(3, created_at=to_nanos(datetime(2024, 3, 10, 11, 0)), program="workforceHousing"),
        ]
        rows = build_referral_rows(
            referrals, USERS, now_ms,
            status="submitted", program="medicalStepDown",
            start=date(2024, 3, 5), end=date(2024, 3, 15),
        )
        assert [r.id for r in rows] == [2]

    def test_custom_threshold(self, now_ms):
        """A shorter threshold flags earlier and names itself."""
        created = int(now_ms - 30 * HOUR_MS) * 1_000_000
        rows = build_referral_rows(
            [make_referral(1, created_at=created)], USERS, now_ms, threshold_ms=24 * HOUR_MS
        )
        assert rows[0].is_at_risk
        assert rows[0].risk_label == "Over 24 hours"


class TestIntakeRows:
    def test_rows(self):
        """Intake rows sort by update time with names resolved."""
        intakes = [
            make_intake(1, "pending", updated_at=5, client=Client(name="Robin")),
            make_intake(2, "approved", updated_at=9, assigned_bed_id=0, case_manager=STAFF),
        ]
        rows = build_intake_rows(intakes, USERS)

        assert [r.id for r in rows] == [2, 1]
        assert rows[0].case_manager == "Dana Whitfield"
        assert not rows[0].is_at_risk
        assert rows[1].client_name == "Robin"
        assert rows[1].risk_label == "No bed assigned"


class TestBedRows:
    def test_rows_follow_preferences(self):
        """Bed rows follow preferences, sorted with risk flags."""
        beds = [
            make_bed(3, "occupied", occupant=Client(name="Casey")),
            make_bed(1, "available"),
            make_bed(2, "available", is_archived=True),
        ]
        intakes = [make_intake(1, "approved", assigned_bed_id=3)]

        rows = build_bed_rows(beds, intakes, BedTrackingPreferences("all", "all", False))

        assert [r.id for r in rows] == [1, 3]
        assert rows[1].is_at_risk
        assert rows[1].risk_label == "Missing exit date"
        assert rows[1].occupant == "Casey"
        assert rows[0].status == "available"

    def test_default_preferences_hide_occupied(self):
        """Default preferences hide occupied beds."""
        beds = [make_bed(1, "occupied"), make_bed(2, "available")]
        rows = build_bed_rows(beds, [], BedTrackingPreferences())
        assert [r.id for r in rows] == [2]


class TestRowsToFrame:
    def test_frame_columns(self, now_ms):
        """Rows become one DataFrame row each."""
        rows = build_referral_rows([make_referral(1, created_at=0)], USERS, now_ms)
        frame = rows_to_frame(rows)
        assert len(frame) == 1
        assert "risk_label" in frame.columns

    def test_empty_frame_keeps_columns(self):
        """An empty row list keeps the row type's columns."""
        frame = rows_to_frame([], BedRow)
        assert frame.empty
        assert list(frame.columns) == [
            "id", "bed_number", "program", "status",
            "facility_id", "occupant", "is_at_risk", "risk_label",
        ]

    def test_empty_without_type(self):
        """An empty list with no type gives an empty frame."""
        assert rows_to_frame([]).empty

