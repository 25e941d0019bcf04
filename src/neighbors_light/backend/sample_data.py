"""
Sample dataset for the demo app.

Times are placed relative to a caller-supplied "now" so the same risk
flags show up whenever the demo runs:
- One submitted referral waiting 4 days (over 72 hours)
- One approved referral not yet converted to an intake
- One active intake with no bed
- One bed held by an active intake with no exit date
"""

from neighbors_light.backend.memory import InMemoryBackend
from neighbors_light.core.entities import BedStatus, Program, ReferralStatus
from neighbors_light.core.models import (
    Bed,
    Client,
    Facility,
    Intake,
    Referral,
    UserProfile,
)

NANOS_PER_HOUR = 60 * 60 * 1_000_000_000

STAFF_ID = "rrkah-fqaaa-aaaaa-aaaaq-cai"
CASE_MANAGER_ID = "ryjl3-tyaaa-aaaaa-aaaba-cai"
UNNAMED_ID = "qoctq-giaaa-aaaaa-aaaea-cai"


def create_sample_backend(now_ms: float) -> InMemoryBackend:
    """
    Create an in-memory backend populated with demo records.

    Args:
        now_ms: Reference time in milliseconds; records are dated relative to it.
    """
    now_ns = int(now_ms) * 1_000_000

    def hours_ago(hours: float) -> int:
        return now_ns - int(hours * NANOS_PER_HOUR)

    users = [
        (STAFF_ID, UserProfile(name="Dana Whitfield", role="staff")),
        (CASE_MANAGER_ID, UserProfile(name="Marcus Ortega", role="staff")),
        (UNNAMED_ID, UserProfile(name="", role="partner")),
    ]

    facilities = [
        Facility(id=1, name="Harbor House", facility_type="Shelter", address="12 Pier Rd"),
        Facility(id=2, name="Elm Street Residence", facility_type="Transitional"),
    ]

    referrals = [
        Referral(
            id=1,
            status=ReferralStatus.SUBMITTED,
            created_at=hours_ago(96),
            updated_at=hours_ago(96),
            client_name="Alex Moreno",
            partner_agency_name="Eastside Clinic",
            program_requested=Program.MEDICAL_STEP_DOWN.value,
            submitted_by=UNNAMED_ID,
        ),
        Referral(
            id=2,
            status=ReferralStatus.SUBMITTED,
            created_at=hours_ago(5),
            updated_at=hours_ago(5),
            client_name="Jordan Lee",
            partner_agency_name="County Hospital",
            program_requested=Program.WORKFORCE_HOUSING.value,
        ),
        Referral(
            id=3,
            status=ReferralStatus.NEEDS_INFO,
            created_at=hours_ago(30),
            updated_at=hours_ago(20),
            client_name="Sam Patel",
            partner_agency_name="Eastside Clinic",
            program_requested=Program.MEDICAL_STEP_DOWN.value,
            assigned_staff=STAFF_ID,
            last_updated_by=STAFF_ID,
        ),
        Referral(
            id=4,
            status=ReferralStatus.APPROVED,
            created_at=hours_ago(50),
            updated_at=hours_ago(10),
            client_name="Riley Chen",
            partner_agency_name="Veterans Outreach",
            program_requested=Program.WORKFORCE_HOUSING.value,
            assigned_staff=STAFF_ID,
            last_updated_by=STAFF_ID,
        ),
        Referral(
            id=5,
            status=ReferralStatus.APPROVED,
            created_at=hours_ago(120),
            updated_at=hours_ago(100),
            client_name="Casey Brooks",
            partner_agency_name="County Hospital",
            program_requested=Program.MEDICAL_STEP_DOWN.value,
            assigned_staff=CASE_MANAGER_ID,
            last_updated_by=CASE_MANAGER_ID,
            converted_intake_id=1,
        ),
        Referral(
            id=6,
            status=ReferralStatus.WAITLISTED,
            created_at=hours_ago(200),
            updated_at=hours_ago(150),
            client_name="Morgan Diaz",
            partner_agency_name="Veterans Outreach",
            program_requested=Program.WORKFORCE_HOUSING.value,
        ),
        Referral(
            id=7,
            status=ReferralStatus.DECLINED,
            created_at=hours_ago(300),
            updated_at=hours_ago(280),
            client_name="Taylor Kim",
            partner_agency_name="Eastside Clinic",
            program_requested=Program.MEDICAL_STEP_DOWN.value,
            last_updated_by=UNNAMED_ID,
        ),
    ]

    intakes = [
        Intake(
            id=1,
            status="approved",
            created_at=hours_ago(100),
            updated_at=hours_ago(90),
            assigned_bed_id=1,
            case_manager=CASE_MANAGER_ID,
            client=Client(name="Casey Brooks"),
        ),
        Intake(
            id=2,
            status="pending",
            created_at=hours_ago(8),
            updated_at=hours_ago(8),
            client=Client(name="Robin Shaw"),
        ),
        Intake(
            id=3,
            status="approved",
            created_at=hours_ago(400),
            updated_at=hours_ago(48),
            assigned_bed_id=3,
            exit_date=now_ns + 14 * 24 * NANOS_PER_HOUR,
            case_manager=STAFF_ID,
            client=Client(name="Quinn Foster"),
        ),
        Intake(
            id=4,
            status="exited",
            created_at=hours_ago(900),
            updated_at=hours_ago(500),
            assigned_bed_id=2,
            exit_date=hours_ago(500),
            case_manager=STAFF_ID,
            client=Client(name="Avery Hill"),
        ),
    ]

    beds = [
        Bed(id=1, status=BedStatus.OCCUPIED, program=Program.MEDICAL_STEP_DOWN.value,
            bed_number="HH-101", facility_id=1, occupant=Client(name="Casey Brooks")),
        Bed(id=2, status=BedStatus.AVAILABLE, program=Program.MEDICAL_STEP_DOWN.value,
            bed_number="HH-102", facility_id=1),
        Bed(id=3, status=BedStatus.OCCUPIED, program=Program.WORKFORCE_HOUSING.value,
            bed_number="ES-201", facility_id=2, occupant=Client(name="Quinn Foster")),
        Bed(id=4, status=BedStatus.AVAILABLE, program=Program.WORKFORCE_HOUSING.value,
            bed_number="ES-202", facility_id=2),
        Bed(id=5, status=BedStatus.MAINTENANCE, program=Program.WORKFORCE_HOUSING.value,
            bed_number="ES-203", facility_id=2),
        Bed(id=6, status=BedStatus.AVAILABLE, program=Program.MEDICAL_STEP_DOWN.value,
            bed_number="HH-103", facility_id=1, is_archived=True),
    ]

    return InMemoryBackend(
        referrals=referrals,
        intakes=intakes,
        beds=beds,
        users=users,
        facilities=facilities,
    )
