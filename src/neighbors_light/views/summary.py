"""Headline counts for the dashboard cards."""

from dataclasses import dataclass, field

from neighbors_light.core.entities import BedStatus, ReferralStatus
from neighbors_light.core.models import Bed, Referral
from neighbors_light.views.display import get_program_label


@dataclass
class ReferralCounts:
    """Referral totals by status."""
    total: int = 0
    submitted: int = 0
    needs_info: int = 0
    waitlisted: int = 0
    approved: int = 0
    declined: int = 0


_COUNT_FIELDS = {
    ReferralStatus.SUBMITTED: "submitted",
    ReferralStatus.NEEDS_INFO: "needs_info",
    ReferralStatus.WAITLISTED: "waitlisted",
    ReferralStatus.APPROVED: "approved",
    ReferralStatus.DECLINED: "declined",
}


def count_referrals_by_status(referrals: list[Referral]) -> ReferralCounts:
    counts = ReferralCounts(total=len(referrals))
    for referral in referrals:
        name = _COUNT_FIELDS[ReferralStatus(referral.status)]
        setattr(counts, name, getattr(counts, name) + 1)
    return counts


@dataclass
class ProgramUtilization:
    """Bed counts for one program."""
    program: str
    label: str
    total: int = 0
    available: int = 0
    occupied: int = 0

    @property
    def occupancy_rate(self) -> float:
        """Occupied share of the program's beds (0 when it has none)."""
        if self.total == 0:
            return 0.0
        return self.occupied / self.total


@dataclass
class BedUtilization:
    """Bed counts overall and per program.

    Attributes:
        total: Number of beds summarized.
        available: Beds with status "available".
        occupied: Beds with status "occupied".
        programs: Per-program breakdown in first-seen order.
    """
    total: int = 0
    available: int = 0
    occupied: int = 0
    programs: list[ProgramUtilization] = field(default_factory=list)


def summarize_bed_utilization(beds: list[Bed]) -> BedUtilization:
    """Aggregate bed statuses; callers pass active (non-archived) beds."""
    summary = BedUtilization(total=len(beds))
    by_program: dict[str, ProgramUtilization] = {}

    for bed in beds:
        stats = by_program.get(bed.program)
        if stats is None:
            stats = ProgramUtilization(
                program=bed.program, label=get_program_label(bed.program)
            )
            by_program[bed.program] = stats
        stats.total += 1

        if bed.status == BedStatus.AVAILABLE:
            summary.available += 1
            stats.available += 1
        elif bed.status == BedStatus.OCCUPIED:
            summary.occupied += 1
            stats.occupied += 1

    summary.programs = list(by_program.values())
    return summary
