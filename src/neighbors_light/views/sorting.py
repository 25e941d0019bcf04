"""Deterministic orderings for referral, intake and bed lists.

Every sort returns a new list and breaks ties down to the record id, so
no two distinct records compare equal and repeated renders paginate the
same way.
"""

from enum import Enum
from typing import Protocol, TypeVar

from neighbors_light.core.entities import STATUS_RANK, BedStatus, ReferralStatus
from neighbors_light.core.models import Bed, Referral


class SortMode(str, Enum):
    """Referral list sort modes."""
    SUBMISSION_DATE = "submissionDate"
    STATUS = "status"


class _Timestamped(Protocol):
    id: int
    updated_at: int


T = TypeVar("T", bound=_Timestamped)


def _submission_key(referral: Referral) -> tuple[int, int]:
    # Negated so a single ascending sort gives newest first
    return (-referral.created_at, -referral.id)


def _status_key(referral: Referral) -> tuple[int, int, int]:
    rank = STATUS_RANK[ReferralStatus(referral.status)]
    return (rank, -referral.created_at, -referral.id)


def sort_referrals(referrals: list[Referral], mode: SortMode | str) -> list[Referral]:
    """Sort referrals without touching the input list.

    Args:
        referrals: Referrals to order.
        mode: "submissionDate" (newest first, then id descending) or
            "status" (submitted, needsInfo, waitlisted, approved, declined;
            then newest first, then id descending).

    Raises:
        ValueError: If mode is not a known sort mode.
    """
    mode = SortMode(mode)
    if mode == SortMode.STATUS:
        return sorted(referrals, key=_status_key)
    return sorted(referrals, key=_submission_key)


def sort_by_updated_at(items: list[T]) -> list[T]:
    """Most recently updated first, then id descending."""
    return sorted(items, key=lambda item: (-item.updated_at, -item.id))


def sort_beds(beds: list[Bed]) -> list[Bed]:
    """Available beds first, then by id ascending."""
    return sorted(beds, key=lambda bed: (bed.status != BedStatus.AVAILABLE, bed.id))
