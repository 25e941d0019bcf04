"""Core foundation layer: entity enums, record types, configuration."""

from neighbors_light.core.config import AppConfig, configure_logging, get_app_config
from neighbors_light.core.entities import BedStatus, Program, ReferralStatus
from neighbors_light.core.models import (
    Bed,
    Client,
    Facility,
    Intake,
    Referral,
    Snapshot,
    UserProfile,
)

__all__ = [
    "AppConfig",
    "configure_logging",
    "get_app_config",
    "BedStatus",
    "Program",
    "ReferralStatus",
    "Bed",
    "Client",
    "Facility",
    "Intake",
    "Referral",
    "Snapshot",
    "UserProfile",
]
