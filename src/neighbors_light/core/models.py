"""Read-only record types fetched from the backend.

All timestamps are integer nanoseconds since the Unix epoch, matching the
backend's wire representation. Actor identifiers are carried as their
canonical text form.

Optional fields are ``None`` when absent. Callers must test them with
``is None`` / ``is not None``: bed id ``0`` and exit timestamp ``0`` are
valid values.
"""

from dataclasses import dataclass, field
from typing import Any

from neighbors_light.core.entities import BedStatus, ReferralStatus


def _optional_int(value: Any) -> int | None:
    if value is None:
        return None
    return int(value)


def _optional_str(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)


@dataclass(frozen=True)
class Client:
    """Client contact details attached to referrals, intakes and beds."""
    name: str
    contact_info: str = ""
    notes: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Client":
        return cls(
            name=data.get("name", ""),
            contact_info=data.get("contactInfo", ""),
            notes=data.get("notes"),
        )


@dataclass(frozen=True)
class Referral:
    """A client referral submitted by a partner agency.

    Attributes:
        id: Backend record id.
        status: Workflow state.
        created_at: Submission time (ns).
        updated_at: Last modification time (ns), never before created_at.
        client_name: Name of the referred client.
        partner_agency_name: Submitting agency.
        program_requested: Program the referral asks for (may be empty).
        assigned_staff: Actor id of the staff member handling it, if any.
        last_updated_by: Actor id of the last editor, if known.
        converted_intake_id: Intake created from this referral, if any.
        client: Contact details of the referred client, if supplied.
    """
    id: int
    status: ReferralStatus
    created_at: int
    updated_at: int
    client_name: str
    partner_agency_name: str
    program_requested: str = ""
    referrer_name: str = ""
    reason: str = ""
    source: str = ""
    assigned_staff: str | None = None
    last_updated_by: str | None = None
    submitted_by: str | None = None
    converted_intake_id: int | None = None
    client: Client | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Referral":
        """Build from the backend's camelCase JSON shape.

        Raises:
            ValueError: If the status is not a known referral status.
        """
        return cls(
            id=int(data["id"]),
            status=ReferralStatus(data["status"]),
            created_at=int(data["createdAt"]),
            updated_at=int(data.get("updatedAt", data["createdAt"])),
            client_name=data.get("clientName", ""),
            partner_agency_name=data.get("partnerAgencyName", ""),
            program_requested=data.get("programRequested", ""),
            referrer_name=data.get("referrerName", ""),
            reason=data.get("reason", ""),
            source=data.get("source", ""),
            assigned_staff=_optional_str(data.get("assignedStaff")),
            last_updated_by=_optional_str(data.get("lastUpdatedBy")),
            submitted_by=_optional_str(data.get("submittedBy")),
            converted_intake_id=_optional_int(data.get("convertedIntakeId")),
            client=Client.from_dict(data["client"]) if data.get("client") is not None else None,
        )


@dataclass(frozen=True)
class Intake:
    """An intake created from an approved referral (or directly by staff).

    ``status`` is free-form on the backend; ``"exited"`` marks departure,
    and ``exit_date`` is only set once the client has left.
    """
    id: int
    status: str
    created_at: int
    updated_at: int
    assigned_bed_id: int | None = None
    exit_date: int | None = None
    case_manager: str | None = None
    last_updated_by: str | None = None
    client: Client | None = None
    details: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Intake":
        client = data.get("client")
        return cls(
            id=int(data["id"]),
            status=str(data["status"]),
            created_at=int(data["createdAt"]),
            updated_at=int(data.get("updatedAt", data["createdAt"])),
            assigned_bed_id=_optional_int(data.get("assignedBedId")),
            exit_date=_optional_int(data.get("exitDate")),
            case_manager=_optional_str(data.get("caseManager")),
            last_updated_by=_optional_str(data.get("lastUpdatedBy")),
            client=Client.from_dict(client) if client is not None else None,
            details=data.get("details", ""),
        )


@dataclass(frozen=True)
class Bed:
    """A physical bed in a facility.

    Beds carry no intake reference; occupancy by an intake is only known
    through ``Intake.assigned_bed_id``.
    """
    id: int
    status: BedStatus
    program: str
    bed_number: str
    facility_id: int
    is_archived: bool = False
    occupant: Client | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Bed":
        """Build from the backend's camelCase JSON shape.

        Raises:
            ValueError: If the status is not a known bed status.
        """
        occupant = data.get("occupant")
        return cls(
            id=int(data["id"]),
            status=BedStatus(data["status"]),
            program=str(data["program"]),
            bed_number=str(data.get("bedNumber", "")),
            facility_id=int(data.get("facilityId", 0)),
            is_archived=bool(data.get("isArchived", False)),
            occupant=Client.from_dict(occupant) if occupant is not None else None,
        )


@dataclass(frozen=True)
class UserProfile:
    """Directory entry for an actor. Used only for display names."""
    name: str | None = None
    role: str | None = None
    email: str | None = None
    phone: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "UserProfile":
        return cls(
            name=data.get("name"),
            role=data.get("role"),
            email=data.get("email"),
            phone=data.get("phone"),
        )


@dataclass(frozen=True)
class Facility:
    """A site holding beds."""
    id: int
    name: str
    facility_type: str = ""
    address: str = ""
    contact_info: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Facility":
        return cls(
            id=int(data["id"]),
            name=data.get("name", ""),
            facility_type=data.get("facilityType", ""),
            address=data.get("address", ""),
            contact_info=data.get("contactInfo", ""),
        )


# (actor id, profile) pairs as returned by the backend user listing
UserDirectory = list[tuple[str, UserProfile]]


@dataclass
class Snapshot:
    """One fetch of every entity list the views consume."""
    referrals: list[Referral] = field(default_factory=list)
    intakes: list[Intake] = field(default_factory=list)
    beds: list[Bed] = field(default_factory=list)
    active_beds: list[Bed] = field(default_factory=list)
    users: UserDirectory = field(default_factory=list)
    facilities: list[Facility] = field(default_factory=list)
