"""Application context: owns the history log and the theme preference.

One AppContext replaces process-wide state. Pass it to whichever layer
needs history or theme access.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime, timezone

from .config import DEFAULT_THEME, HISTORY_CAPACITY, HISTORY_KEY, THEME_KEY, THEMES
from .history import HistoryLog
from .logging_config import get_logger
from .solver import solve
from .storage import JsonFileStore, KeyValueStore
from .types import HistoryEntry

logger = get_logger("context")


@dataclass
class AppContext:
    store: KeyValueStore
    history: HistoryLog
    theme: str = DEFAULT_THEME

    @classmethod
    def open(
        cls,
        store: KeyValueStore | None = None,
        capacity: int = HISTORY_CAPACITY,
    ) -> AppContext:
        """Load history and theme from ``store`` (the default JSON file store if omitted)."""
        if store is None:
            store = JsonFileStore()
        history = HistoryLog.load(store, key=HISTORY_KEY, capacity=capacity)
        theme = store.get(THEME_KEY) or DEFAULT_THEME
        if theme not in THEMES:
            logger.warning(f"Ignoring unknown stored theme {theme!r}")
            theme = DEFAULT_THEME
        return cls(store=store, history=history, theme=theme)

    def solve(self, a: float, b: float, c: float, record: bool = True) -> HistoryEntry:
        """Solve (a, b, c) and, unless ``record`` is False, append and persist it.

        An unrecorded entry still gets its own id but is never added to the log.

        Raises:
            ValidationError: If the coefficients are invalid (nothing is recorded)
        """
        result = solve(a, b, c)
        if not record:
            return HistoryEntry(
                id=uuid.uuid4().hex, a=float(a), b=float(b), c=float(c), result=result,
                created_at=datetime.now(timezone.utc),
            )
        entry = self.history.record(a, b, c, result)
        self.history.save(self.store)
        return entry

    def rerun(self, entry_id: str) -> HistoryEntry | None:
        """Solve a past entry's coefficients again as a new history entry."""
        entry = self.history.find(entry_id)
        if entry is None:
            return None
        return self.solve(entry.a, entry.b, entry.c)

    def clear_history(self) -> None:
        self.history.clear()
        if self.history.store is not self.store:
            self.history.save(self.store)

    def set_theme(self, theme: str) -> str:
        if theme not in THEMES:
            raise ValueError(f"Unknown theme {theme!r}; expected one of {', '.join(THEMES)}")
        self.theme = theme
        self.store.set(THEME_KEY, theme)
        return theme

    def toggle_theme(self) -> str:
        return self.set_theme("light" if self.theme == "dark" else "dark")

