"""Row builders that turn fetched entities into table-ready records.

Each builder runs the same fixed chain: filter, sort, risk, display names.
Rows are plain dataclasses so the Streamlit pages can render them with
``rows_to_frame`` and tests can inspect them directly.
"""

from dataclasses import asdict, dataclass, fields
from datetime import date, datetime

import pandas as pd

from neighbors_light.core.entities import BedStatus, ReferralStatus
from neighbors_light.core.models import Bed, Intake, Referral, UserDirectory
from neighbors_light.prefs.store import BedTrackingPreferences
from neighbors_light.views.display import (
    get_program_label,
    get_status_label,
    get_user_display_name,
)
from neighbors_light.views.elapsed import format_waiting_time, nanos_to_datetime
from neighbors_light.views.filters import ALL, apply_all_filters, filter_beds_with_preferences
from neighbors_light.views.risk import (
    AT_RISK_THRESHOLD_MS,
    BED_AT_RISK_LABEL,
    INTAKE_AT_RISK_LABEL,
    get_referral_at_risk_label,
    is_bed_at_risk,
    is_intake_at_risk,
    is_referral_at_risk,
)
from neighbors_light.views.sorting import SortMode, sort_beds, sort_by_updated_at, sort_referrals


@dataclass
class ReferralRow:
    """One line of the referral table."""
    id: int
    client_name: str
    partner_agency_name: str
    program: str
    status: str
    submitted: datetime
    waiting: str
    is_at_risk: bool
    risk_label: str | None
    assigned_staff: str


@dataclass
class IntakeRow:
    """One line of the intake table."""
    id: int
    client_name: str
    status: str
    updated: datetime
    assigned_bed_id: int | None
    case_manager: str
    is_at_risk: bool
    risk_label: str | None


@dataclass
class BedRow:
    """One line of the bed tracking table."""
    id: int
    bed_number: str
    program: str
    status: str
    facility_id: int
    occupant: str | None
    is_at_risk: bool
    risk_label: str | None


def build_referral_rows(
    referrals: list[Referral],
    users: UserDirectory,
    now: float,
    status: str = ALL,
    program: str | None = ALL,
    start: date | datetime | None = None,
    end: date | datetime | None = None,
    sort_mode: SortMode | str = SortMode.SUBMISSION_DATE,
    threshold_ms: float = AT_RISK_THRESHOLD_MS,
) -> list[ReferralRow]:
    """Filtered, sorted referral rows with risk flags and staff names.

    Only referrals still awaiting review ("submitted") are flagged as
    waiting too long.
    """
    filtered = apply_all_filters(referrals, status, program, start, end)

    rows = []
    for referral in sort_referrals(filtered, sort_mode):
        at_risk = referral.status == ReferralStatus.SUBMITTED and is_referral_at_risk(
            referral.created_at, now, threshold_ms
        )
        rows.append(ReferralRow(
            id=referral.id,
            client_name=referral.client_name,
            partner_agency_name=referral.partner_agency_name,
            program=get_program_label(referral.program_requested),
            status=get_status_label(referral.status),
            submitted=nanos_to_datetime(referral.created_at),
            waiting=format_waiting_time(referral.created_at, now),
            is_at_risk=at_risk,
            risk_label=get_referral_at_risk_label(threshold_ms) if at_risk else None,
            assigned_staff=get_user_display_name(referral.assigned_staff, users),
        ))
    return rows


def build_intake_rows(intakes: list[Intake], users: UserDirectory) -> list[IntakeRow]:
    """Intake rows, most recently updated first."""
    rows = []
    for intake in sort_by_updated_at(intakes):
        at_risk = is_intake_at_risk(intake)
        rows.append(IntakeRow(
            id=intake.id,
            client_name=intake.client.name if intake.client is not None else "",
            status=intake.status,
            updated=nanos_to_datetime(intake.updated_at),
            assigned_bed_id=intake.assigned_bed_id,
            case_manager=get_user_display_name(intake.case_manager, users),
            is_at_risk=at_risk,
            risk_label=INTAKE_AT_RISK_LABEL if at_risk else None,
        ))
    return rows


def build_bed_rows(
    beds: list[Bed],
    intakes: list[Intake],
    preferences: BedTrackingPreferences,
) -> list[BedRow]:
    """Bed rows matching the saved filters, available beds first."""
    rows = []
    for bed in sort_beds(filter_beds_with_preferences(beds, preferences)):
        at_risk = is_bed_at_risk(bed, intakes)
        rows.append(BedRow(
            id=bed.id,
            bed_number=bed.bed_number,
            program=get_program_label(bed.program),
            status=BedStatus(bed.status).value,
            facility_id=bed.facility_id,
            occupant=bed.occupant.name if bed.occupant is not None else None,
            is_at_risk=at_risk,
            risk_label=BED_AT_RISK_LABEL if at_risk else None,
        ))
    return rows


def rows_to_frame(
    rows: list[ReferralRow] | list[IntakeRow] | list[BedRow],
    row_type: type | None = None,
) -> pd.DataFrame:
    """DataFrame with one column per row field.

    Args:
        rows: Rows from one of the builders.
        row_type: Row dataclass, used for the columns when ``rows`` is empty.
    """
    if rows:
        return pd.DataFrame([asdict(row) for row in rows])
    columns = [f.name for f in fields(row_type)] if row_type is not None else []
    return pd.DataFrame(columns=columns)
