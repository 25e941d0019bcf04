"""Durable key-value storage backing client-side preferences.

The storage mirrors a browser local-storage API: string keys to string
values, with get / set / remove. ``JsonFileStorage`` keeps every key in a
single JSON object file so values survive between sessions;
``MemoryStorage`` is for tests and throwaway sessions.
"""

import json
import logging
from pathlib import Path
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class KeyValueStorage(Protocol):
    """Minimal string key-value store."""

    def get_item(self, key: str) -> str | None:
        """Stored value, or None when the key is absent."""
        ...

    def set_item(self, key: str, value: str) -> None:
        ...

    def remove_item(self, key: str) -> None:
        """Delete the key. Succeeds when the key is absent."""
        ...


class MemoryStorage:
    """In-process storage; contents are lost with the process."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class JsonFileStorage:
    """Storage persisted as one JSON object in a file.

    The file is read on every access and rewritten on every change, so
    several stores pointing at the same path see each other's writes.

    Attributes:
        path: Location of the JSON file. Its parent directory is created on
            first write.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def _read_all(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        with open(self.path) as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Storage file {self.path} does not hold a JSON object")
        return data

    def _read_for_update(self) -> dict[str, str]:
        # An unreadable file is replaced rather than blocking every later write
        try:
            return self._read_all()
        except ValueError as e:
            logger.warning(f"Discarding unreadable storage file {self.path}: {e}")
            return {}

    def _write_all(self, items: dict[str, str]) -> None:
        # Swapped in whole; a failed write leaves the previous file intact
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_name(f".{self.path.name}.tmp")
        try:
            with open(tmp_path, "w") as f:
                json.dump(items, f, indent=2)
            tmp_path.replace(self.path)
        finally:
            tmp_path.unlink(missing_ok=True)

    def get_item(self, key: str) -> str | None:
        value = self._read_all().get(key)
        if value is None:
            return None
        return str(value)

    def set_item(self, key: str, value: str) -> None:
        items = self._read_for_update()
        items[key] = value
        self._write_all(items)

    def remove_item(self, key: str) -> None:
        items = self._read_for_update()
        if key in items:
            del items[key]
            self._write_all(items)
