"""Pytest fixtures for Neighbors Light tests."""

from datetime import datetime

import pytest

from neighbors_light.core.entities import BedStatus, ReferralStatus
from neighbors_light.core.models import Bed, Intake, Referral

HOUR_MS = 60 * 60 * 1000


def to_nanos(moment: datetime) -> int:
    """Backend timestamp for a naive local datetime."""
    return int(moment.timestamp() * 1000) * 1_000_000


def make_referral(
    id: int,
    status: ReferralStatus | str = ReferralStatus.SUBMITTED,
    created_at: int = 0,
    program: str = "medicalStepDown",
    **kwargs,
) -> Referral:
    return Referral(
        id=id,
        status=ReferralStatus(status),
        created_at=created_at,
        updated_at=kwargs.pop("updated_at", created_at),
        client_name=kwargs.pop("client_name", f"Client {id}"),
        partner_agency_name=kwargs.pop("partner_agency_name", "Eastside Clinic"),
        program_requested=program,
        **kwargs,
    )


def make_intake(id: int, status: str = "pending", **kwargs) -> Intake:
    return Intake(
        id=id,
        status=status,
        created_at=kwargs.pop("created_at", 0),
        updated_at=kwargs.pop("updated_at", 0),
        **kwargs,
    )


def make_bed(id: int, status: BedStatus | str = BedStatus.AVAILABLE, **kwargs) -> Bed:
    return Bed(
        id=id,
        status=BedStatus(status),
        program=kwargs.pop("program", "medicalStepDown"),
        bed_number=kwargs.pop("bed_number", f"B-{id}"),
        facility_id=kwargs.pop("facility_id", 1),
        **kwargs,
    )


@pytest.fixture
def now_ms() -> float:
    """Fixed reference time: 2024-03-15 12:00 local, in ms."""
    return datetime(2024, 3, 15, 12, 0).timestamp() * 1000


@pytest.fixture
def t0() -> int:
    """Fixed backend timestamp (ns) used as a base for ordering tests."""
    return to_nanos(datetime(2024, 1, 10, 9, 30))


@pytest.fixture
def mixed_referrals(t0) -> list[Referral]:
    """Referrals covering every status, with shared timestamps for tie-breaks."""
    hour = HOUR_MS * 1_000_000
    return [
        make_referral(1, ReferralStatus.APPROVED, t0, program="workforceHousing"),
        make_referral(2, ReferralStatus.SUBMITTED, t0 + hour),
        make_referral(3, ReferralStatus.DECLINED, t0 + 2 * hour),
        make_referral(4, ReferralStatus.SUBMITTED, t0 + hour),
        make_referral(5, ReferralStatus.NEEDS_INFO, t0 - hour, program="workforceHousing"),
        make_referral(6, ReferralStatus.WAITLISTED, t0 + 3 * hour),
        make_referral(7, ReferralStatus.APPROVED, t0 + 5 * hour, program=""),
        make_referral(8, ReferralStatus.SUBMITTED, t0 + 4 * hour),
    ]
