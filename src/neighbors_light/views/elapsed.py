"""Elapsed-time helpers for backend nanosecond timestamps.

"Now" is always passed in by the caller so every function here stays pure;
the UI samples the wall clock once per render with ``now_ms()``.
"""

import time
from datetime import datetime

NANOS_PER_MILLI = 1_000_000
MILLIS_PER_HOUR = 60 * 60 * 1000


def now_ms() -> float:
    """Current wall-clock time in milliseconds."""
    return time.time() * 1000


def nanos_to_millis(nanos: int) -> float:
    return nanos / NANOS_PER_MILLI


def nanos_to_datetime(nanos: int) -> datetime:
    """Local-time datetime for a backend timestamp."""
    return datetime.fromtimestamp(nanos / 1_000_000_000)


def elapsed_ms(created_at: int, now: float) -> float:
    """Milliseconds between a nanosecond timestamp and ``now`` (ms).

    Args:
        created_at: Backend timestamp in nanoseconds.
        now: Reference time in milliseconds.

    Returns:
        Elapsed milliseconds; negative if ``created_at`` is in the future.
    """
    return now - nanos_to_millis(created_at)


def format_waiting_time(created_at: int, now: float) -> str:
    """Render elapsed time as "Waiting N hours" or "Waiting N days"."""
    hours = int(elapsed_ms(created_at, now) // MILLIS_PER_HOUR)

    if hours < 24:
        return f"Waiting {hours} {'hour' if hours == 1 else 'hours'}"

    days = hours // 24
    return f"Waiting {days} {'day' if days == 1 else 'days'}"
