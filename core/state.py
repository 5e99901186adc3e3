"""Persistence strategies for history and preferences.

The engine never touches storage directly. A store is handed to
``HistoryLog`` (and to the app for preferences) and only has to provide
``load()``, ``save(data)`` and ``update(data)``.
"""
import json
import logging
import os
from typing import Any, Dict, Optional

import streamlit as st

logger = logging.getLogger(__name__)

SESSION_FILE = "calculator_session.json"

# Only a curated subset of keys is persisted. Streamlit widgets inject their
# own keys (e.g. ``digit_7``) into ``session_state``; writing those back on
# the next run raises ``StreamlitAPIException``.
PERSISTED_KEYS = {
    "history",
    "theme",
    "angle_mode",
}


def _serializable(value: Any) -> bool:
    return isinstance(value, (int, float, str, bool, list, dict))


def _curated(data: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in data.items() if k in PERSISTED_KEYS and _serializable(v)}


class MemoryStore:
    """Keeps persisted data in a plain dict; used by tests and scripts."""

    def __init__(self) -> None:
        self.data: Dict[str, Any] = {}

    def load(self) -> Dict[str, Any]:
        return dict(self.data)

    def save(self, data: Dict[str, Any]) -> None:
        self.data = _curated(data)

    def update(self, data: Dict[str, Any]) -> None:
        merged = self.load()
        merged.update(data)
        self.save(merged)


class JsonFileStore(MemoryStore):
    """Reads and writes the persisted keys as a JSON document on disk."""

    def __init__(self, path: Optional[str] = None) -> None:
        super().__init__()
        self.path = path or SESSION_FILE

    def load(self) -> Dict[str, Any]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as exc:
            logger.warning("Could not read %s: %s", self.path, exc)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring %s: expected a JSON object", self.path)
            return {}
        return _curated(data)

    def save(self, data: Dict[str, Any]) -> None:
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(_curated(data), f)
        except OSError as exc:
            logger.warning("Could not write %s: %s", self.path, exc)


class SessionStateStore(MemoryStore):
    """Keeps persisted data in ``st.session_state`` for the current browser session."""

    def load(self) -> Dict[str, Any]:
        return {k: st.session_state[k] for k in PERSISTED_KEYS if k in st.session_state}

    def save(self, data: Dict[str, Any]) -> None:
        for key, val in _curated(data).items():
            st.session_state[key] = val


def load_state(store) -> Dict[str, Any]:
    """Restore preferences from ``store`` into ``st.session_state``."""
    data = store.load()
    for key, val in data.items():
        if key != "history":
            st.session_state.setdefault(key, val)
    return data


def save_state(store) -> None:
    """Persist serializable preferences from ``st.session_state`` through ``store``."""
    store.update(
        {k: st.session_state[k] for k in PERSISTED_KEYS - {"history"} if k in st.session_state}
    )
