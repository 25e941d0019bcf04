"""Human-readable labels for actors, programs and statuses."""

from neighbors_light.core.entities import PROGRAM_LABELS, STATUS_LABELS, Program, ReferralStatus
from neighbors_light.core.models import UserDirectory

SYSTEM_ACTOR_LABEL = "System"
SHORT_ID_LENGTH = 8


def get_user_display_name(actor_id: str | None, user_directory: UserDirectory) -> str:
    """Resolve an actor id to the label shown next to a record.

    Fallback chain:
    1. No actor -> "System"
    2. Directory entry with a non-empty name -> that name
    3. Otherwise the first 8 characters of the id followed by "..."

    Args:
        actor_id: Actor identifier, or None when the backend recorded none.
        user_directory: (actor id, profile) pairs from the backend.
    """
    if actor_id is None:
        return SYSTEM_ACTOR_LABEL

    key = str(actor_id)
    for directory_id, profile in user_directory:
        if str(directory_id) == key:
            if profile.name:
                return profile.name
            break

    return key[:SHORT_ID_LENGTH] + "..."


def get_program_label(program: Program | str) -> str:
    """Display label for a program; unknown programs are shown as-is."""
    key = program.value if isinstance(program, Program) else program
    return PROGRAM_LABELS.get(key, key)


def get_status_label(status: ReferralStatus | str) -> str:
    try:
        return STATUS_LABELS[ReferralStatus(status)]
    except ValueError:
        return str(status)
