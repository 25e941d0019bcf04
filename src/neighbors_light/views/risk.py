"""At-risk detection for referrals, intakes and beds.

All risk state is derived from existing fields and timestamps with no
side effects. Each predicate has a fixed human-readable label used by the
badges in the UI.

Example usage:
    from neighbors_light.views.risk import build_risk_overview

    overview = build_risk_overview(referrals, intakes, beds, now_ms())
    if overview.total_flags:
        print(f"{len(overview.at_risk_referrals)} referrals over 72 hours")
"""

from dataclasses import dataclass, field

from neighbors_light.core.entities import INTAKE_EXITED, ReferralStatus
from neighbors_light.core.models import Bed, Intake, Referral
from neighbors_light.views.elapsed import MILLIS_PER_HOUR, elapsed_ms

AT_RISK_THRESHOLD_MS = 72 * MILLIS_PER_HOUR

REFERRAL_AT_RISK_LABEL = "Over 72 hours"
INTAKE_AT_RISK_LABEL = "No bed assigned"
BED_AT_RISK_LABEL = "Missing exit date"


def is_referral_at_risk(
    created_at: int,
    now: float,
    threshold_ms: float = AT_RISK_THRESHOLD_MS,
) -> bool:
    """True when the referral has waited strictly longer than the threshold."""
    return elapsed_ms(created_at, now) > threshold_ms


def is_intake_at_risk(intake: Intake) -> bool:
    """True when the intake is active (not exited) and has no bed."""
    return intake.status != INTAKE_EXITED and intake.assigned_bed_id is None


def find_active_intake_for_bed(bed: Bed, intakes: list[Intake]) -> Intake | None:
    """First non-exited intake assigned to ``bed``, if any.

    Linear scan of ``intakes``; bed counts are in the tens, so no index
    is kept.
    """
    for intake in intakes:
        if (
            intake.assigned_bed_id is not None
            and intake.assigned_bed_id == bed.id
            and intake.status != INTAKE_EXITED
        ):
            return intake
    return None


def is_bed_at_risk(bed: Bed, intakes: list[Intake]) -> bool:
    """True when an active intake holds the bed but has no exit date.

    A bed with no active intake is never at risk, whatever its own
    status field says.
    """
    intake = find_active_intake_for_bed(bed, intakes)
    if intake is None:
        return False
    return intake.exit_date is None


def get_referral_at_risk_label(threshold_ms: float = AT_RISK_THRESHOLD_MS) -> str:
    """Badge text for a referral over ``threshold_ms`` ("Over 72 hours" by default)."""
    if threshold_ms == AT_RISK_THRESHOLD_MS:
        return REFERRAL_AT_RISK_LABEL
    hours = threshold_ms / MILLIS_PER_HOUR
    unit = "hour" if hours == 1 else "hours"
    return f"Over {hours:g} {unit}"


def get_intake_at_risk_label() -> str:
    return INTAKE_AT_RISK_LABEL


def get_bed_at_risk_label() -> str:
    return BED_AT_RISK_LABEL


@dataclass
class RiskOverview:
    """Items needing attention across referrals, intakes and beds.

    Attributes:
        referrals_waiting_review: Referrals still in "submitted".
        at_risk_referrals: Waiting referrals over the threshold.
        intakes_without_bed: Active intakes with no assigned bed.
        beds_without_exit_date: Beds held by an active intake lacking an exit date.
        intakes_without_case_manager: Active intakes with no case manager.
        approved_not_converted: Approved referrals with no intake yet.
    """

    referrals_waiting_review: list[Referral] = field(default_factory=list)
    at_risk_referrals: list[Referral] = field(default_factory=list)
    intakes_without_bed: list[Intake] = field(default_factory=list)
    beds_without_exit_date: list[Bed] = field(default_factory=list)
    intakes_without_case_manager: list[Intake] = field(default_factory=list)
    approved_not_converted: list[Referral] = field(default_factory=list)

    @property
    def total_flags(self) -> int:
        """Count of at-risk items (warnings excluded)."""
        return (
            len(self.at_risk_referrals)
            + len(self.intakes_without_bed)
            + len(self.beds_without_exit_date)
        )


def build_risk_overview(
    referrals: list[Referral],
    intakes: list[Intake],
    beds: list[Bed],
    now: float,
    threshold_ms: float = AT_RISK_THRESHOLD_MS,
) -> RiskOverview:
    """Collect every at-risk and warning item for the overview page."""
    waiting = [r for r in referrals if r.status == ReferralStatus.SUBMITTED]
    active_intakes = [i for i in intakes if i.status != INTAKE_EXITED]

    return RiskOverview(
        referrals_waiting_review=waiting,
        at_risk_referrals=[
            r for r in waiting if is_referral_at_risk(r.created_at, now, threshold_ms)
        ],
        intakes_without_bed=[i for i in active_intakes if is_intake_at_risk(i)],
        beds_without_exit_date=[b for b in beds if is_bed_at_risk(b, intakes)],
        intakes_without_case_manager=[
            i for i in active_intakes if i.case_manager is None
        ],
        approved_not_converted=[
            r for r in referrals
            if r.status == ReferralStatus.APPROVED and r.converted_intake_id is None
        ],
    )
