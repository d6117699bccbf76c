"""Key-value persistence for history and preferences.

This module provides:
- A minimal key-value store protocol (string keys, string values)
- An in-memory store for tests and embedding
- A JSON file store that survives process restarts, written atomically
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Protocol

from .config import STORE_PATH
from .logging_config import get_logger

logger = get_logger("storage")


class KeyValueStore(Protocol):
    """Durable string-to-string mapping."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...


class MemoryStore:
    """Dict-backed store. Contents are lost when the process exits."""

    def __init__(self, data: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(data or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def __contains__(self, key: object) -> bool:
        return key in self._data


class JsonFileStore:
    """Store backed by a single JSON object file.

    The file is re-read on every ``get`` so that several processes sharing
    the file see each other's writes. A missing or corrupt file reads as an
    empty store.
    """

    def __init__(self, path: str | Path | None = None):
        self.path = Path(path) if path is not None else STORE_PATH

    def _read(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, RecursionError, OSError, UnicodeDecodeError) as e:
            logger.warning(f"Failed to read store {self.path}: {e}, starting empty")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Store {self.path} does not hold an object, starting empty")
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _write(self, data: dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        # Write atomically (write to temp file then rename)
        temp_file = self.path.with_suffix(".tmp")
        with open(temp_file, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
        temp_file.replace(self.path)

    def get(self, key: str) -> str | None:
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)
        logger.debug(f"Stored {len(value)} characters under {key!r}")

    def delete(self, key: str) -> None:
        data = self._read()
        if data.pop(key, None) is not None:
            self._write(data)
