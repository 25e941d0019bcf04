"""In-memory backend over plain entity lists."""

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from neighbors_light.core.entities import ReferralStatus
from neighbors_light.core.models import (
    Bed,
    Client,
    Facility,
    Intake,
    Referral,
    UserDirectory,
    UserProfile,
)
from neighbors_light.views.validation import has_validation_errors, validate_referral_form


class InMemoryBackend:
    """Backend implementation over plain lists.

    Every getter returns a new list, so callers cannot alter the stored
    records through the returned value.
    """

    def __init__(
        self,
        referrals: list[Referral] | None = None,
        intakes: list[Intake] | None = None,
        beds: list[Bed] | None = None,
        users: UserDirectory | None = None,
        facilities: list[Facility] | None = None,
    ):
        self._referrals = list(referrals or [])
        self._intakes = list(intakes or [])
        self._beds = list(beds or [])
        self._users = list(users or [])
        self._facilities = list(facilities or [])

    def get_all_referrals(self) -> list[Referral]:
        return list(self._referrals)

    def get_all_intakes(self) -> list[Intake]:
        return list(self._intakes)

    def get_all_beds(self) -> list[Bed]:
        return list(self._beds)

    def get_active_beds(self) -> list[Bed]:
        return [bed for bed in self._beds if not bed.is_archived]

    def get_all_users(self) -> UserDirectory:
        return list(self._users)

    def get_all_facilities(self) -> list[Facility]:
        return list(self._facilities)

    def create_referral(
        self,
        form: Mapping[str, Any],
        created_at: int,
        submitted_by: str | None = None,
    ) -> int:
        """Store a new "submitted" referral and return its id.

        ``form`` uses the referral form's camelCase field names.

        Raises:
            ValueError: If a required field is missing or blank
        """
        errors = validate_referral_form(form)
        if has_validation_errors(errors):
            raise ValueError(f"Invalid input: missing required fields {sorted(errors)}")

        referral_id = max((r.id for r in self._referrals), default=0) + 1
        notes = str(form.get("notes") or "").strip()
        self._referrals.append(Referral(
            id=referral_id,
            status=ReferralStatus.SUBMITTED,
            created_at=created_at,
            updated_at=created_at,
            client_name=str(form["clientName"]).strip(),
            partner_agency_name=str(form["partnerAgencyName"]).strip(),
            program_requested=str(form["programRequested"]).strip(),
            referrer_name=str(form["referrerName"]).strip(),
            reason=str(form["reason"]).strip(),
            source=str(form["source"]).strip(),
            submitted_by=submitted_by,
            client=Client(
                name=str(form["clientName"]).strip(),
                contact_info=str(form["contactInfo"]).strip(),
                notes=notes or None,
            ),
        ))
        return referral_id

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "InMemoryBackend":
        """Build from a snapshot in the backend's camelCase JSON shape.

        ``users`` is a list of ``[actor_id, profile]`` pairs.
        """
        return cls(
            referrals=[Referral.from_dict(r) for r in payload.get("referrals", [])],
            intakes=[Intake.from_dict(i) for i in payload.get("intakes", [])],
            beds=[Bed.from_dict(b) for b in payload.get("beds", [])],
            users=[
                (str(actor_id), UserProfile.from_dict(profile))
                for actor_id, profile in payload.get("users", [])
            ],
            facilities=[Facility.from_dict(f) for f in payload.get("facilities", [])],
        )

    @classmethod
    def from_json_file(cls, path: Path) -> "InMemoryBackend":
        """Load a snapshot file.

        Raises:
            FileNotFoundError: If the file doesn't exist
        """
        if not path.exists():
            raise FileNotFoundError(f"Data file not found: {path}")
        with open(path) as f:
            return cls.from_dict(json.load(f))
