"""Bounded calculation history."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Optional

from core.presets import MAX_HISTORY

logger = logging.getLogger(__name__)


@dataclass
class HistoryEntry:
    expression: str
    result: str
    timestamp: datetime


class HistoryLog:
    """Newest-first log of ``(expression, result)`` pairs.

    Holds at most ``capacity`` entries; recording past that evicts the oldest.
    When a ``store`` is given, every change is written through it.
    """

    def __init__(self, capacity: int = MAX_HISTORY, store=None) -> None:
        self.capacity = capacity
        self.store = store
        self.entries: List[HistoryEntry] = []

    def __len__(self) -> int:
        return len(self.entries)

    def record(self, expression: str, result: str) -> HistoryEntry:
        """Prepend a calculation and drop whatever no longer fits."""
        entry = HistoryEntry(
            expression=expression,
            result=result,
            timestamp=datetime.now(timezone.utc),
        )
        self.entries.insert(0, entry)
        del self.entries[self.capacity:]
        logger.debug("history: %s = %s", expression, result)
        self._persist()
        return entry

    def clear(self) -> None:
        self.entries = []
        self._persist()

    def latest(self) -> Optional[HistoryEntry]:
        return self.entries[0] if self.entries else None

    def as_dict(self) -> List[dict]:
        """Return log entries as dictionaries for persistence or inspection."""
        return [
            {
                "expr": e.expression,
                "result": e.result,
                "timestamp": e.timestamp.isoformat(),
            }
            for e in self.entries
        ]

    def load(self) -> None:
        """Replace the entries with whatever the store holds."""
        if self.store is None:
            return
        rows = self.store.load().get("history", [])
        if not isinstance(rows, list):
            logger.warning("Ignoring stored history: expected a list, got %s", type(rows).__name__)
            rows = []
        entries: List[HistoryEntry] = []
        for row in rows:
            try:
                entries.append(
                    HistoryEntry(
                        expression=str(row["expr"]),
                        result=str(row["result"]),
                        timestamp=datetime.fromisoformat(row["timestamp"]),
                    )
                )
            except (KeyError, TypeError, ValueError):
                logger.warning("Skipping malformed history row: %r", row)
        self.entries = entries[: self.capacity]

    def _persist(self) -> None:
        if self.store is not None:
            self.store.update({"history": self.as_dict()})
