"""Durable local key-value storage for visitor markers."""

import json
import os
from pathlib import Path
from typing import Protocol

from loguru import logger


class Storage(Protocol):
    """Minimal key-value store; implementations may raise on any call."""

    def get_item(self, key: str) -> str | None: ...

    def set_item(self, key: str, value: str) -> None: ...


class FileStorage:
    """JSON object persisted at `path`; writes replace the file atomically."""

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    def _load(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        data = json.loads(self.path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"Corrupted storage file: {self.path}")
        return data

    def get_item(self, key: str) -> str | None:
        value = self._load().get(key)
        return str(value) if value is not None else None

    def set_item(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp.write_text(json.dumps(data, indent=2), encoding="utf-8")
        os.replace(tmp, self.path)


class MemoryStorage:
    """In-process storage, lost on exit."""

    def __init__(self):
        self._data: dict[str, str] = {}

    def get_item(self, key: str) -> str | None:
        return self._data.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._data[key] = value


def safe_get(storage: Storage, key: str) -> str | None:
    """Read from storage; None if storage is unavailable."""
    try:
        return storage.get_item(key)
    except (OSError, ValueError, TypeError) as e:
        logger.warning("Storage not available: {}", e)
        return None


def safe_set(storage: Storage, key: str, value: str) -> None:
    """Write to storage; no-op if storage is unavailable."""
    try:
        storage.set_item(key, value)
    except (OSError, ValueError, TypeError) as e:
        logger.warning("Storage not available: {}", e)
