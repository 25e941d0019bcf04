"""Core entity definitions for the case-management views.

This module contains enums and fixed lookup tables that are used across
the codebase, placed here to avoid circular imports.
"""

from enum import Enum


class ReferralStatus(str, Enum):
    """Referral workflow states, as reported by the backend."""
    SUBMITTED = "submitted"
    NEEDS_INFO = "needsInfo"
    WAITLISTED = "waitlisted"
    APPROVED = "approved"
    DECLINED = "declined"


class BedStatus(str, Enum):
    """Operational state of a single bed."""
    AVAILABLE = "available"
    OCCUPIED = "occupied"
    MAINTENANCE = "maintenance"


class Program(str, Enum):
    """Housing programs a bed can belong to."""
    MEDICAL_STEP_DOWN = "medicalStepDown"
    WORKFORCE_HOUSING = "workforceHousing"


# Intake status is free-form on the backend; only "exited" carries meaning here
INTAKE_EXITED = "exited"

# Lower rank sorts first in status mode
STATUS_RANK: dict[ReferralStatus, int] = {
    ReferralStatus.SUBMITTED: 1,
    ReferralStatus.NEEDS_INFO: 2,
    ReferralStatus.WAITLISTED: 3,
    ReferralStatus.APPROVED: 4,
    ReferralStatus.DECLINED: 5,
}

STATUS_LABELS: dict[ReferralStatus, str] = {
    ReferralStatus.SUBMITTED: "Submitted",
    ReferralStatus.NEEDS_INFO: "Needs Info",
    ReferralStatus.WAITLISTED: "Waitlisted",
    ReferralStatus.APPROVED: "Approved",
    ReferralStatus.DECLINED: "Declined",
}

PROGRAM_LABELS: dict[str, str] = {
    Program.MEDICAL_STEP_DOWN.value: "Medical Step-Down",
    Program.WORKFORCE_HOUSING.value: "Workforce Housing",
}
