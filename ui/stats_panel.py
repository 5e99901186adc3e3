import streamlit as st

from core.stats import as_display, statistics_from_text

LABELS = {
    "n": "Count (n)",
    "sum": "Sum",
    "mean": "Mean",
    "median": "Median",
    "mode": "Mode",
    "range": "Range",
    "min": "Min",
    "max": "Max",
    "variance": "Variance (population)",
    "std_dev": "Std Dev (population)",
    "sample_variance": "Variance (sample)",
    "sample_std_dev": "Std Dev (sample)",
}


def render_statistics():
    """Descriptive statistics for a comma or whitespace separated list."""
    text = st.text_area("Data (comma or space separated)", key="stats_data")
    values = as_display(statistics_from_text(text))
    for key, label in LABELS.items():
        st.markdown(f"**{label}:** {values.get(key, '-')}")
