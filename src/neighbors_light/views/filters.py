"""Referral and bed list filters.

Every filter returns a new list, keeps the input order, and treats the
sentinel ``"all"`` as pass-through. Filters are ANDed together.
"""

from datetime import date, datetime

from neighbors_light.core.models import Bed, Referral
from neighbors_light.prefs.store import BedTrackingPreferences
from neighbors_light.views.elapsed import nanos_to_datetime

ALL = "all"


def _to_day(value: date | datetime) -> date:
    # datetime is a subclass of date, so check it first
    if isinstance(value, datetime):
        return value.date()
    return value


def get_unique_program_options(referrals: list[Referral]) -> list[str]:
    """Distinct non-empty requested programs, sorted ascending."""
    return sorted({r.program_requested for r in referrals if r.program_requested})


def filter_by_program(referrals: list[Referral], program: str | None) -> list[Referral]:
    """Exact match on ``program_requested``; None or "all" passes everything."""
    if program is None or program == ALL:
        return list(referrals)
    return [r for r in referrals if r.program_requested == program]


def filter_by_date_range(
    referrals: list[Referral],
    start: date | datetime | None,
    end: date | datetime | None,
) -> list[Referral]:
    """Keep referrals submitted between ``start`` and ``end`` inclusive.

    Both the bounds and each referral's ``created_at`` are reduced to a
    local calendar day before comparing, so time of day is ignored.
    Either bound may be omitted.
    """
    if start is None and end is None:
        return list(referrals)

    start_day = _to_day(start) if start is not None else None
    end_day = _to_day(end) if end is not None else None

    result = []
    for referral in referrals:
        submitted = nanos_to_datetime(referral.created_at).date()
        if start_day is not None and submitted < start_day:
            continue
        if end_day is not None and submitted > end_day:
            continue
        result.append(referral)
    return result


def apply_all_filters(
    referrals: list[Referral],
    status: str,
    program: str | None,
    start: date | datetime | None,
    end: date | datetime | None,
) -> list[Referral]:
    """Status, then program, then date range."""
    filtered = list(referrals)

    if status != ALL:
        filtered = [r for r in filtered if r.status == status]

    filtered = filter_by_program(filtered, program)
    return filter_by_date_range(filtered, start, end)


def filter_beds(
    beds: list[Bed],
    program_filter: str = ALL,
    status_filter: str = ALL,
    show_archived: bool = False,
) -> list[Bed]:
    """Bed tracking filter.

    ``show_archived`` switches the view to archived beds only; otherwise
    only non-archived beds are shown.
    """
    return [
        bed for bed in beds
        if bed.is_archived == show_archived
        and (program_filter == ALL or bed.program == program_filter)
        and (status_filter == ALL or bed.status == status_filter)
    ]


def filter_beds_with_preferences(
    beds: list[Bed], preferences: BedTrackingPreferences
) -> list[Bed]:
    return filter_beds(
        beds,
        program_filter=preferences.program_filter,
        status_filter=preferences.status_filter,
        show_archived=preferences.show_archived,
    )
