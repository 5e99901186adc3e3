import streamlit as st

from core.solvers import result_lines, solve_cubic, solve_linear, solve_linear_system_2x2, solve_quadratic
from core.utils import nz

EQUATIONS = {
    "Linear": ("ax + b = 0", ["a", "b"], solve_linear),
    "Quadratic": ("ax² + bx + c = 0", ["a", "b", "c"], solve_quadratic),
    "Cubic": ("ax³ + bx² + cx + d = 0", ["a", "b", "c", "d"], solve_cubic),
    "System 2×2": ("a₁x + b₁y = c₁, a₂x + b₂y = c₂", ["a1", "b1", "c1", "a2", "b2", "c2"], solve_linear_system_2x2),
}


def render_equations():
    """Coefficient inputs and results for the equation solvers."""
    kind = st.radio("Equation", list(EQUATIONS), horizontal=True, key="equation_kind")
    title, names, solver = EQUATIONS[kind]
    st.caption(title)
    per_row = 3 if len(names) == 6 else len(names)
    coefficients = []
    for start in range(0, len(names), per_row):
        cols = st.columns(per_row)
        for col, name in zip(cols, names[start:start + per_row]):
            raw = col.text_input(name, key=f"coef_{kind}_{name}")
            coefficients.append(nz(raw))
    result = solver(*coefficients)
    for line in result_lines(result):
        st.markdown(f"`{line}`")
