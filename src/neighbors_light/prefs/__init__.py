"""Client-side preferences persisted on durable key-value storage."""

from neighbors_light.prefs.storage import JsonFileStorage, KeyValueStorage, MemoryStorage
from neighbors_light.prefs.store import (
    STORAGE_KEY,
    BedTrackingPreferences,
    PreferencesStore,
    clear_preferences,
    get_default_preferences,
    load_preferences,
    save_preferences,
)

__all__ = [
    "JsonFileStorage",
    "KeyValueStorage",
    "MemoryStorage",
    "STORAGE_KEY",
    "BedTrackingPreferences",
    "PreferencesStore",
    "clear_preferences",
    "get_default_preferences",
    "load_preferences",
    "save_preferences",
]
