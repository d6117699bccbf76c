"""Bounded, newest-first log of solved equations.

This module provides:
- HistoryLog: append (with eviction), clear, find
- JSON serialization of entries including the root result variant
- Load/save against a key-value store; load never fails the caller
"""

from __future__ import annotations

import json
import uuid
from collections.abc import Iterable, Iterator
from datetime import datetime, timezone
from typing import Any

from .config import HISTORY_CAPACITY, HISTORY_KEY
from .logging_config import get_logger
from .storage import KeyValueStore
from .types import HistoryEntry, RootResult

logger = get_logger("history")


class HistoryLog:
    """Newest-first sequence of HistoryEntry with at most ``capacity`` items.

    When bound to a store (see ``load``), ``clear`` writes through to it.
    ``append`` does not persist on its own; call ``save`` afterwards.
    """

    def __init__(
        self,
        entries: Iterable[HistoryEntry] = (),
        capacity: int = HISTORY_CAPACITY,
        store: KeyValueStore | None = None,
        key: str = HISTORY_KEY,
    ):
        if capacity < 1:
            raise ValueError(f"History capacity must be positive, got {capacity}")
        self.capacity = capacity
        self.store = store
        self.key = key
        self._entries: list[HistoryEntry] = list(entries)[:capacity]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[HistoryEntry]:
        return iter(self._entries)

    def __getitem__(self, index: int) -> HistoryEntry:
        return self._entries[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HistoryLog):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self) -> str:
        return f"HistoryLog(len={len(self)}, capacity={self.capacity})"

    @property
    def entries(self) -> tuple[HistoryEntry, ...]:
        return tuple(self._entries)

    def append(self, entry: HistoryEntry) -> None:
        """Insert at the front, evicting the oldest entries beyond capacity."""
        self._entries.insert(0, entry)
        if len(self._entries) > self.capacity:
            evicted = len(self._entries) - self.capacity
            del self._entries[self.capacity :]
            logger.debug(f"Evicted {evicted} oldest history entr{'y' if evicted == 1 else 'ies'}")

    def record(
        self,
        a: float,
        b: float,
        c: float,
        result: RootResult,
        now: datetime | None = None,
    ) -> HistoryEntry:
        """Create an entry for a fresh solve and append it."""
        entry = HistoryEntry(
            id=uuid.uuid4().hex,
            a=float(a),
            b=float(b),
            c=float(c),
            result=result,
            created_at=now or datetime.now(timezone.utc),
        )
        self.append(entry)
        return entry

    def clear(self) -> None:
        """Remove every entry and persist the empty log when bound to a store."""
        self._entries.clear()
        if self.store is not None:
            self.save()

    def find(self, entry_id: str) -> HistoryEntry | None:
        for entry in self._entries:
            if entry.id == entry_id:
                return entry
        return None

    def to_list(self) -> list[dict[str, Any]]:
        return [entry.to_dict() for entry in self._entries]

    @classmethod
    def from_list(
        cls, items: Iterable[Any], capacity: int = HISTORY_CAPACITY
    ) -> HistoryLog:
        """Build a log from serialized entries, skipping malformed ones."""
        entries = []
        for index, item in enumerate(items):
            try:
                entries.append(HistoryEntry.from_dict(item))
            except ValueError as e:
                logger.warning(f"Skipping history entry {index}: {e}")
        return cls(entries, capacity=capacity)

    @classmethod
    def load(
        cls,
        store: KeyValueStore,
        key: str = HISTORY_KEY,
        capacity: int = HISTORY_CAPACITY,
    ) -> HistoryLog:
        """Restore the log from ``store``.

        Missing data, invalid JSON and unexpected shapes all yield an empty
        log; the problem is logged, never raised.
        """
        log = cls(capacity=capacity, store=store, key=key)
        try:
            raw = store.get(key)
        except OSError as e:
            logger.warning(f"Failed to read history: {e}, starting with empty history")
            return log
        if raw is None:
            return log

        try:
            items = json.loads(raw)
        except (json.JSONDecodeError, RecursionError) as e:
            logger.warning(f"Corrupt history data: {e}, starting with empty history")
            return log
        if not isinstance(items, list):
            logger.warning(
                f"History data is {type(items).__name__}, not a list; starting with empty history"
            )
            return log

        loaded = cls.from_list(items, capacity=capacity)
        log._entries = loaded._entries
        logger.debug(f"Loaded {len(log)} history entries")
        return log

    def save(self, store: KeyValueStore | None = None, key: str | None = None) -> None:
        """Write the ordered entries to ``store`` (or the bound store)."""
        target = store if store is not None else self.store
        if target is None:
            raise ValueError("No store to save history to")
        try:
            target.set(key or self.key, json.dumps(self.to_list(), ensure_ascii=False))
        except (OSError, TypeError) as e:
            logger.warning(f"Failed to save history: {e}")
            return
        logger.debug(f"Saved {len(self)} history entries")
