"""
Key-value settings storage.

A settings store maps string keys to opaque byte values. The file-backed
store keeps all keys in one JSON object on disk.
"""

import json
from pathlib import Path
from typing import Any, Protocol

from ..core.config import SETTINGS_FILE_NAME
from ..core.config_loader import get_data_dir, load_user_config


class SettingsStore(Protocol):
    """Minimal key-value interface used by RecordStore."""

    def get(self, key: str) -> bytes | None: ...

    def set(self, key: str, value: bytes) -> None: ...


class MemorySettingsStore:
    """Dict-backed settings store; nothing survives the process."""

    def __init__(self, initial: dict[str, bytes] | None = None):
        self._values: dict[str, bytes] = dict(initial or {})

    def get(self, key: str) -> bytes | None:
        return self._values.get(key)

    def set(self, key: str, value: bytes) -> None:
        self._values[key] = bytes(value)


class JsonFileSettingsStore:
    """
    Settings stored as a single JSON object file.

    Values written here are kept as UTF-8 text; other keys in the file keep
    whatever JSON values they hold. Every ``set`` rewrites the whole file; a
    missing, unreadable or non-object file reads as empty.
    """

    def __init__(self, path: str | Path):
        """
        Initialize the settings store.

        Args:
            path: Path to the JSON settings file
        """
        self.path = Path(path)

    def _read_all(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError, OSError):
            return {}
        if not isinstance(data, dict):
            return {}
        return data

    def get(self, key: str) -> bytes | None:
        """Return the value stored under key, or None if absent or not text."""
        value = self._read_all().get(key)
        return value.encode("utf-8") if isinstance(value, str) else None

    def set(self, key: str, value: bytes) -> None:
        """
        Store value under key, replacing any previous value.

        Args:
            key: Settings key
            value: UTF-8 encoded bytes

        Raises:
            UnicodeDecodeError: If value is not valid UTF-8
        """
        data = self._read_all()
        data[key] = value.decode("utf-8")

        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)


def get_default_settings_path() -> Path:
    """
    Get the settings file path.

    ``settings_path`` from ~/.fitness-tracker/config.yaml wins over the
    default ~/.fitness-tracker/settings.json.
    """
    configured = load_user_config().get("settings_path")
    if configured:
        return Path(configured).expanduser()
    return get_data_dir() / SETTINGS_FILE_NAME
