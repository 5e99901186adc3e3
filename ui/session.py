import logging

import streamlit as st

from core.accumulator import AccumulatorEngine
from core.history import HistoryLog
from core.models import AngleMode, Settings
from core.presets import THEMES
from core.state import JsonFileStore, load_state

logger = logging.getLogger(__name__)


def _restore_preferences(settings: Settings):
    """Reset persisted preferences that no longer hold a known value."""
    ss = st.session_state
    if ss.get("theme") not in THEMES:
        logger.warning("Unknown theme %r, using %s", ss.get("theme"), settings.theme)
        ss["theme"] = settings.theme
    if ss.get("angle_mode") not in [m.value for m in AngleMode]:
        logger.warning("Unknown angle mode %r, using %s", ss.get("angle_mode"), settings.angle_mode.value)
        ss["angle_mode"] = settings.angle_mode.value


def init_state(store=None) -> AccumulatorEngine:
    """Create the per-session engine, history and preferences on first run."""
    ss = st.session_state
    if "store" not in ss:
        ss["store"] = store or JsonFileStore()
        load_state(ss["store"])
    settings = Settings()
    ss.setdefault("theme", settings.theme)
    ss.setdefault("angle_mode", settings.angle_mode.value)
    _restore_preferences(settings)
    if "history_log" not in ss:
        log = HistoryLog(capacity=settings.max_history, store=ss["store"])
        log.load()
        ss["history_log"] = log
    if "engine" not in ss:
        ss["engine"] = AccumulatorEngine(
            angle_mode=AngleMode(ss["angle_mode"]),
            history=ss["history_log"],
            max_input_length=settings.max_input_length,
        )
    return ss["engine"]
