import streamlit as st

from core.models import AngleMode
from core.state import save_state


def _recall(result: str):
    st.session_state["engine"].recall(result)


def _clear_history():
    st.session_state["history_log"].clear()


def render_sidebar():
    """Theme, angle mode and calculation history."""
    ss = st.session_state
    engine = ss["engine"]

    dark_on = st.sidebar.toggle("Dark mode", value=ss["theme"] == "dark")
    ss["theme"] = "dark" if dark_on else "light"
    modes = [m.value for m in AngleMode]
    ss["angle_mode"] = st.sidebar.radio(
        "Angle mode", modes, index=modes.index(ss["angle_mode"]), format_func=lambda m: m[:3].upper()
    )
    engine.angle_mode = AngleMode(ss["angle_mode"])
    save_state(ss["store"])

    st.sidebar.header("History")
    log = ss["history_log"]
    if not log.entries:
        st.sidebar.caption("No calculations yet")
    for i, entry in enumerate(log.entries):
        c1, c2 = st.sidebar.columns([4, 1])
        c1.markdown(f"{entry.expression}  \n**= {entry.result}**")
        c2.button("↩", key=f"recall_{i}", on_click=_recall, args=(entry.result,))
    st.sidebar.button("Clear history", key="clear_history", on_click=_clear_history)
