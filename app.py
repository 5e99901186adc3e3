import logging

import streamlit as st

from core.version import __version__
from ui.converters import render_converters
from ui.equations import render_equations
from ui.keypad import render_keypad
from ui.session import init_state
from ui.sidebar import render_sidebar
from ui.stats_panel import render_statistics

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

st.set_page_config(page_title="calcdeck", layout="centered")

init_state()
render_sidebar()

if st.session_state.theme == "dark":
    st.markdown(
        """
        <style>
        [data-testid=\"stAppViewContainer\"]{background-color:#0e1117;color:#fafafa;}
        </style>
        """,
        unsafe_allow_html=True,
    )
else:
    st.markdown(
        """
        <style>
        [data-testid=\"stAppViewContainer\"]{background-color:#ffffff;color:#000000;}
        </style>
        """,
        unsafe_allow_html=True,
    )

st.title("Scientific Calculator")
st.caption(f"calcdeck v{__version__} • Keypad • Equations • Statistics • Converters")

calc_tab, eq_tab, stats_tab, conv_tab = st.tabs(["Calculator", "Equations", "Statistics", "Converters"])
with calc_tab:
    render_keypad()
with eq_tab:
    render_equations()
with stats_tab:
    render_statistics()
with conv_tab:
    render_converters()
