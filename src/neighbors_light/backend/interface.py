"""Backend contract consumed by the views.

The remote backend owns all persistence and workflow rules. The views only
need its read operations, so the protocol below exposes exactly those.
Integration code supplies a concrete client; tests and the demo app use
``InMemoryBackend``.
"""

import logging
from typing import Protocol, runtime_checkable

from neighbors_light.core.models import (
    Bed,
    Facility,
    Intake,
    Referral,
    Snapshot,
    UserDirectory,
)

logger = logging.getLogger(__name__)


class BackendError(Exception):
    """A backend call failed.

    Attributes:
        method: Name of the backend operation that failed.
    """

    def __init__(self, method: str, message: str):
        super().__init__(f"{method}: {message}")
        self.method = method


@runtime_checkable
class Backend(Protocol):
    """Read operations the views depend on."""

    def get_all_referrals(self) -> list[Referral]:
        ...

    def get_all_intakes(self) -> list[Intake]:
        ...

    def get_all_beds(self) -> list[Bed]:
        ...

    def get_active_beds(self) -> list[Bed]:
        """Beds that are not archived."""
        ...

    def get_all_users(self) -> UserDirectory:
        ...

    def get_all_facilities(self) -> list[Facility]:
        ...


def fetch_snapshot(backend: Backend) -> Snapshot:
    """Fetch every list a dashboard render needs.

    Raises:
        BackendError: If any call fails. Failures that are not already
            BackendError are wrapped with the failing method name.
    """
    methods = {
        "referrals": "get_all_referrals",
        "intakes": "get_all_intakes",
        "beds": "get_all_beds",
        "active_beds": "get_active_beds",
        "users": "get_all_users",
        "facilities": "get_all_facilities",
    }
    fetched = {}
    for name, method in methods.items():
        try:
            fetched[name] = list(getattr(backend, method)())
        except BackendError:
            raise
        except Exception as e:
            logger.error(f"Backend call {method} failed: {e}")
            raise BackendError(method, str(e)) from e

    logger.debug(
        f"Fetched {len(fetched['referrals'])} referrals, "
        f"{len(fetched['intakes'])} intakes, {len(fetched['beds'])} beds"
    )
    return Snapshot(**fetched)
