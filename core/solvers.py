"""Closed-form equation solvers.

Every solver is a pure function that returns a classified result instead of
raising: degenerate input (zero leading coefficient, zero determinant) is a
result kind like any other.
"""
from __future__ import annotations

import math
from typing import List

from core.formatting import format_number
from core.models import ComplexRoot, EquationResult, SolutionKind, SystemKind, SystemResult
from core.presets import SYSTEM_TOLERANCE
from core.primitives import cbrt

_SUBSCRIPTS = str.maketrans("0123456789", "₀₁₂₃₄₅₆₇₈₉")


def _x(i: int) -> str:
    return "x" + str(i).translate(_SUBSCRIPTS)


def solve_linear(a: float, b: float) -> EquationResult:
    """Solve ``a·x + b = 0``."""

    if a == 0:
        if b == 0:
            return EquationResult(kind=SolutionKind.INFINITE, message="Infinite solutions (0 = 0)")
        return EquationResult(kind=SolutionKind.NONE, message="No solution (contradiction)")
    return EquationResult(kind=SolutionKind.REAL, roots=[-b / a])


def solve_quadratic(a: float, b: float, c: float) -> EquationResult:
    """Solve ``a·x² + b·x + c = 0``; falls back to the linear case when ``a == 0``."""

    if a == 0:
        return solve_linear(b, c)

    disc = b * b - 4 * a * c
    if disc > 0:
        root = math.sqrt(disc)
        return EquationResult(
            kind=SolutionKind.REAL,
            roots=[(-b + root) / (2 * a), (-b - root) / (2 * a)],
            discriminant=disc,
            degree=2,
        )
    if disc == 0:
        return EquationResult(kind=SolutionKind.DOUBLE_ROOT, roots=[-b / (2 * a)], discriminant=0.0, degree=2)

    real = -b / (2 * a)
    imag = math.sqrt(-disc) / (2 * a)
    return EquationResult(
        kind=SolutionKind.COMPLEX,
        complex_roots=[ComplexRoot(real=real, imag=imag), ComplexRoot(real=real, imag=-imag)],
        discriminant=disc,
        degree=2,
    )


def solve_cubic(a: float, b: float, c: float, d: float) -> EquationResult:
    """Solve ``a·x³ + b·x² + c·x + d = 0``.

    The equation is normalised by ``a`` and depressed to ``t³ + p·t + q = 0``.
    The sign of ``Δ = q²/4 + p³/27`` picks the method:

    * ``Δ > 0`` – Cardano's formula, one real root and a conjugate pair;
    * ``Δ == 0`` – a simple root and a double root;
    * ``Δ < 0`` – three real roots via the trigonometric method.
    """

    if a == 0:
        return EquationResult(kind=SolutionKind.NOT_APPLICABLE, message="Not a cubic equation (a = 0)", degree=3)

    b, c, d = b / a, c / a, d / a
    p = (3 * c - b * b) / 3
    q = (2 * b * b * b - 9 * b * c + 27 * d) / 27
    disc = q * q / 4 + p * p * p / 27
    shift = b / 3

    if disc > 0:
        sqrt_d = math.sqrt(disc)
        u = cbrt(-q / 2 + sqrt_d)
        v = cbrt(-q / 2 - sqrt_d)
        real = -(u + v) / 2 - shift
        imag = abs(math.sqrt(3) * (u - v) / 2)
        return EquationResult(
            kind=SolutionKind.COMPLEX,
            roots=[u + v - shift],
            complex_roots=[ComplexRoot(real=real, imag=imag), ComplexRoot(real=real, imag=-imag)],
            discriminant=disc,
            degree=3,
        )
    if disc == 0:
        u = cbrt(-q / 2)
        return EquationResult(
            kind=SolutionKind.DOUBLE_ROOT,
            roots=[2 * u - shift, -u - shift],
            discriminant=0.0,
            message="double root",
            degree=3,
        )

    r = math.sqrt(-p * p * p / 27)
    phi = math.acos(max(-1.0, min(1.0, -q / (2 * r))))
    t = 2 * cbrt(r)
    roots = [t * math.cos((phi + 2 * math.pi * k) / 3) - shift for k in range(3)]
    return EquationResult(kind=SolutionKind.REAL, roots=roots, discriminant=disc, degree=3)


def solve_linear_system_2x2(a1: float, b1: float, c1: float, a2: float, b2: float, c2: float) -> SystemResult:
    """Solve ``a1·x + b1·y = c1`` and ``a2·x + b2·y = c2`` by Cramer's rule."""

    det = a1 * b2 - a2 * b1
    if det == 0:
        ratio1 = c1 / a1 if a1 != 0 else (c1 / b1 if b1 != 0 else 0.0)
        ratio2 = c2 / a2 if a2 != 0 else (c2 / b2 if b2 != 0 else 0.0)
        if abs(ratio1 - ratio2) < SYSTEM_TOLERANCE:
            return SystemResult(kind=SystemKind.DEPENDENT, message="Infinite solutions (dependent equations)")
        return SystemResult(kind=SystemKind.PARALLEL, message="No solution (parallel lines)")

    return SystemResult(
        kind=SystemKind.UNIQUE,
        x=(c1 * b2 - c2 * b1) / det,
        y=(a1 * c2 - a2 * c1) / det,
    )


def _complex_text(root: ComplexRoot) -> str:
    sign = "-" if root.imag < 0 else "+"
    return f"{format_number(root.real)} {sign} {format_number(abs(root.imag))}i"


def result_lines(result) -> List[str]:
    """Human readable lines for a solver result, e.g. ``["x₁ = 2", "x₂ = -2", "Δ = 16"]``."""

    if isinstance(result, SystemResult):
        if result.kind is SystemKind.UNIQUE:
            return [f"x = {format_number(result.x)}", f"y = {format_number(result.y)}"]
        return [result.message]

    kind = result.kind
    if kind in (SolutionKind.INFINITE, SolutionKind.NONE, SolutionKind.NOT_APPLICABLE):
        return [result.message]

    lines: List[str] = []
    if kind is SolutionKind.DOUBLE_ROOT and len(result.roots) == 1:
        lines.append(f"x = {format_number(result.roots[0])} (double root)")
    elif kind is SolutionKind.DOUBLE_ROOT:
        lines.append(f"{_x(1)} = {format_number(result.roots[0])}")
        lines.append(f"{_x(2)} = {_x(3)} = {format_number(result.roots[1])} (double root)")
    elif len(result.roots) == 1 and not result.complex_roots:
        lines.append(f"x = {format_number(result.roots[0])}")
    else:
        values = [format_number(r) for r in result.roots] + [_complex_text(z) for z in result.complex_roots]
        lines.extend(f"{_x(i)} = {v}" for i, v in enumerate(values, start=1))

    if result.degree == 2 and result.discriminant is not None:
        suffix = " (complex roots)" if kind is SolutionKind.COMPLEX else ""
        lines.append(f"Δ = {format_number(result.discriminant)}{suffix}")
    return lines
