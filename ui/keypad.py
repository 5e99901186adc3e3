import streamlit as st

from core.operators import OPERATOR_SYMBOLS, Function, function_label
from core.models import Operator
from core.presets import CONSTANTS
from ui.session import init_state

DIGIT_ROWS = [["7", "8", "9"], ["4", "5", "6"], ["1", "2", "3"]]
BASIC_OPERATORS = [Operator.DIV, Operator.MUL, Operator.SUB, Operator.ADD]
EXTRA_OPERATORS = [op for op in Operator if op not in BASIC_OPERATORS]


def _press(action: str, *args):
    engine = st.session_state["engine"]
    getattr(engine, action)(*args)


def _apply_selected_function():
    _press("apply_function", Function(st.session_state["function_choice"]))


def _apply_selected_operator():
    _press("apply_operator", Operator(st.session_state["operator_choice"]))


def _insert_selected_constant():
    _press("insert_constant", st.session_state["constant_choice"])


def render_keypad():
    """Render the display and keypad of the accumulator calculator."""
    engine = init_state()

    st.caption(engine.expression or " ")
    st.markdown(f"## {engine.formatted_display()}")

    top = st.columns(4)
    top[0].button("C", key="clear", on_click=_press, args=("clear",))
    top[1].button("CE", key="clear_entry", on_click=_press, args=("clear_entry",))
    top[2].button("⌫", key="backspace", on_click=_press, args=("backspace",))
    top[3].button("±", key="negate", on_click=_press, args=("negate",))

    for row, op in zip(DIGIT_ROWS, BASIC_OPERATORS[:3]):
        cols = st.columns(4)
        for col, digit in zip(cols, row):
            col.button(digit, key=f"digit_{digit}", on_click=_press, args=("input_digit", digit))
        cols[3].button(OPERATOR_SYMBOLS[op], key=f"op_{op.value}", on_click=_press, args=("apply_operator", op))

    bottom = st.columns(4)
    bottom[0].button("0", key="digit_0", on_click=_press, args=("input_digit", "0"))
    bottom[1].button(".", key="decimal", on_click=_press, args=("input_decimal_point",))
    bottom[2].button("=", key="equals", on_click=_press, args=("equals",))
    bottom[3].button(
        OPERATOR_SYMBOLS[Operator.ADD], key="op_add", on_click=_press, args=("apply_operator", Operator.ADD)
    )

    with st.expander("Scientific", expanded=False):
        c1, c2 = st.columns([3, 1])
        c1.selectbox(
            "Function",
            [f.value for f in Function],
            format_func=lambda v: function_label(Function(v)),
            key="function_choice",
        )
        c2.button("Apply", key="apply_function", on_click=_apply_selected_function)

        c1, c2 = st.columns([3, 1])
        c1.selectbox(
            "Operator",
            [op.value for op in EXTRA_OPERATORS],
            format_func=lambda v: OPERATOR_SYMBOLS[Operator(v)],
            key="operator_choice",
        )
        c2.button("Use", key="apply_operator", on_click=_apply_selected_operator)

        c1, c2 = st.columns([3, 1])
        c1.selectbox("Constant", list(CONSTANTS) + ["rand"], key="constant_choice")
        c2.button("Insert", key="insert_constant", on_click=_insert_selected_constant)
