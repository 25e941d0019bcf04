"""Bed tracking preferences persisted between sessions.

Preferences are a small validated record kept under one key of a durable
key-value storage. Loading never raises: a missing key, unreadable storage
or a corrupted payload all fall back to the defaults, and each field is
validated on its own so one bad field does not discard the others.
Saving and clearing are best-effort and only log on failure.

Preferences are written only in response to explicit user actions (a
filter change or the reset button), never while a page is loading.

Example usage:
    from neighbors_light.prefs.store import PreferencesStore
    from neighbors_light.prefs.storage import JsonFileStorage

    store = PreferencesStore(JsonFileStorage(Path("prefs.json")))
    prefs = store.load()
    prefs.status_filter = "occupied"
    store.save(prefs)
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from neighbors_light.core.config import get_app_config
from neighbors_light.prefs.storage import JsonFileStorage, KeyValueStorage

logger = logging.getLogger(__name__)

STORAGE_KEY = "bedTrackingPreferences_v1"

PROGRAM_FILTER_OPTIONS = ("all", "medicalStepDown", "workforceHousing")
STATUS_FILTER_OPTIONS = ("all", "available", "occupied")


@dataclass
class BedTrackingPreferences:
    """Saved filter state of the bed tracking view.

    Attributes:
        program_filter: "all", "medicalStepDown" or "workforceHousing".
        status_filter: "all", "available" or "occupied".
        show_archived: Show archived beds instead of active ones.
    """

    program_filter: str = "all"
    status_filter: str = "available"
    show_archived: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Stored JSON shape (camelCase keys)."""
        return {
            "programFilter": self.program_filter,
            "statusFilter": self.status_filter,
            "showArchived": self.show_archived,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BedTrackingPreferences":
        """Validate each stored field, substituting its default when invalid."""
        defaults = cls()

        program_filter = data.get("programFilter")
        if program_filter not in PROGRAM_FILTER_OPTIONS:
            program_filter = defaults.program_filter

        status_filter = data.get("statusFilter")
        if status_filter not in STATUS_FILTER_OPTIONS:
            status_filter = defaults.status_filter

        show_archived = data.get("showArchived")
        if not isinstance(show_archived, bool):
            show_archived = defaults.show_archived

        return cls(
            program_filter=program_filter,
            status_filter=status_filter,
            show_archived=show_archived,
        )


def get_default_preferences() -> BedTrackingPreferences:
    """Fresh default record; safe for the caller to mutate."""
    return BedTrackingPreferences()


class PreferencesStore:
    """Loads, saves and clears preferences on a key-value storage.

    Attributes:
        storage: Backing storage.
        key: Storage key holding the JSON-encoded record.
    """

    def __init__(self, storage: KeyValueStorage, key: str = STORAGE_KEY):
        self.storage = storage
        self.key = key

    def get_defaults(self) -> BedTrackingPreferences:
        return get_default_preferences()

    def load(self) -> BedTrackingPreferences:
        """Stored preferences, or defaults on any failure."""
        try:
            raw = self.storage.get_item(self.key)
            if raw is None:
                return self.get_defaults()

            data = json.loads(raw)
            if not isinstance(data, dict):
                raise ValueError(f"expected a JSON object, got {type(data).__name__}")

            return BedTrackingPreferences.from_dict(data)
        except Exception as e:
            logger.warning(f"Failed to load bed tracking preferences, using defaults: {e}")
            return self.get_defaults()

    def save(self, preferences: BedTrackingPreferences) -> None:
        try:
            self.storage.set_item(self.key, json.dumps(preferences.to_dict()))
        except Exception as e:
            logger.warning(f"Failed to save bed tracking preferences: {e}")

    def clear(self) -> None:
        try:
            self.storage.remove_item(self.key)
        except Exception as e:
            logger.warning(f"Failed to clear bed tracking preferences: {e}")


def get_preferences_store(path: Path | None = None) -> PreferencesStore:
    """Store backed by the configured preferences file.

    Args:
        path: JSON file to use. Defaults to AppConfig.preferences_path.

    Raises:
        FileNotFoundError: If ``path`` is None and NEIGHBORS_LIGHT_CONFIG
            names a missing file
        ValueError: If ``path`` is None and the app config is invalid
    """
    if path is None:
        path = get_app_config().preferences_path
    return PreferencesStore(JsonFileStorage(path))


def _open_store(path: Path | None) -> PreferencesStore | None:
    try:
        return get_preferences_store(path)
    except Exception as e:
        logger.warning(f"Could not resolve preferences location: {e}")
        return None


def load_preferences(path: Path | None = None) -> BedTrackingPreferences:
    store = _open_store(path)
    if store is None:
        return get_default_preferences()
    return store.load()


def save_preferences(preferences: BedTrackingPreferences, path: Path | None = None) -> None:
    store = _open_store(path)
    if store is not None:
        store.save(preferences)


def clear_preferences(path: Path | None = None) -> None:
    store = _open_store(path)
    if store is not None:
        store.clear()
