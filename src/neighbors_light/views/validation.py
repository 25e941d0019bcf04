"""Referral form validation and backend error messages."""

from collections.abc import Mapping
from typing import Any

# Field name -> message shown when the field is missing or blank
REQUIRED_REFERRAL_FIELDS = {
    "partnerAgencyName": "Partner agency name is required",
    "referrerName": "Referrer name is required",
    "clientName": "Client name is required",
    "reason": "Reason for referral is required",
    "programRequested": "Program requested is required",
    "contactInfo": "Contact info is required",
    "source": "Referral source is required",
}

REQUIRED_FIELDS_MESSAGE = "Please fill in all required fields correctly"
MISSING_PROFILE_MESSAGE = "Please complete your Partner Agency profile first"
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"


def validate_referral_form(data: Mapping[str, Any]) -> dict[str, str]:
    """Return a message per required field that is missing or blank.

    ``notes`` is optional and never reported.
    """
    errors = {}
    for name, message in REQUIRED_REFERRAL_FIELDS.items():
        value = data.get(name)
        if value is None or not str(value).strip():
            errors[name] = message
    return errors


def has_validation_errors(errors: Mapping[str, str]) -> bool:
    return len(errors) > 0


def get_error_message(error: object) -> str:
    """Map a backend failure to the message shown in the form."""
    if isinstance(error, Exception):
        message = str(error)
        lowered = message.lower()
        if "invalid input" in lowered or "missing required" in lowered:
            return REQUIRED_FIELDS_MESSAGE
        if "partner agency profile not found" in lowered:
            return MISSING_PROFILE_MESSAGE
        return message
    return UNEXPECTED_ERROR_MESSAGE
