import streamlit as st

from core.converters import convert_bases, convert_temperature, convert_unit
from core.formatting import format_number
from core.presets import UNIT_TABLES, TEMPERATURE_UNITS

RADIX_NAMES = {"Decimal": 10, "Binary": 2, "Octal": 8, "Hexadecimal": 16}


def render_base_converter():
    name = st.selectbox("Input base", list(RADIX_NAMES), key="base_from")
    text = st.text_input("Value", key="base_value")
    result = convert_bases(text, RADIX_NAMES[name])
    cols = st.columns(4)
    cols[0].metric("DEC", result.decimal)
    cols[1].metric("BIN", result.binary)
    cols[2].metric("OCT", result.octal)
    cols[3].metric("HEX", result.hexadecimal)


def render_unit_converter(category: str):
    units = list(UNIT_TABLES[category])
    value = st.text_input("Value", key=f"{category}_val")
    c1, c2 = st.columns(2)
    from_unit = c1.selectbox("From", units, key=f"{category}_from")
    to_unit = c2.selectbox("To", units, index=min(1, len(units) - 1), key=f"{category}_to")
    st.markdown(f"**Result:** {format_number(convert_unit(category, value, from_unit, to_unit))}")


def render_temperature_converter():
    value = st.text_input("Value", key="temp_val")
    c1, c2 = st.columns(2)
    from_unit = c1.selectbox("From", TEMPERATURE_UNITS, format_func=str.upper, key="temp_from")
    to_unit = c2.selectbox("To", TEMPERATURE_UNITS, index=1, format_func=str.upper, key="temp_to")
    st.markdown(f"**Result:** {format_number(convert_temperature(value, from_unit, to_unit))}")


def render_converters():
    tab = st.radio("Converter", ["Base", "Length", "Mass", "Area", "Temperature"], horizontal=True, key="conv_kind")
    if tab == "Base":
        render_base_converter()
    elif tab == "Temperature":
        render_temperature_converter()
    else:
        render_unit_converter(tab.lower())
