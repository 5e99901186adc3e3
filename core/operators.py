"""Binary operators and single-argument functions of the keypad.

Both sets are closed enums with exhaustive dispatch; an unhandled member
raises ``ValueError``.
"""
from __future__ import annotations

import math
from enum import Enum

from core import primitives
from core.errors import MathDomainError
from core.models import AngleMode, Operator

OPERATOR_SYMBOLS = {
    Operator.ADD: "+",
    Operator.SUB: "−",
    Operator.MUL: "×",
    Operator.DIV: "÷",
    Operator.POW: "^",
    Operator.MOD: "mod",
    Operator.GCD: "gcd",
    Operator.LCM: "lcm",
    Operator.NPR: "P",
    Operator.NCR: "C",
    Operator.NTHROOT: "√",
    Operator.LOGBASE: "log",
    Operator.ATAN2: "atan2",
}


def _divide(a: float, b: float, what: str) -> float:
    if b == 0:
        raise MathDomainError(f"{what} by zero")
    return a / b


def perform_calculation(a: float, b: float, op: Operator, angle_mode: AngleMode = AngleMode.RADIANS) -> float:
    """Apply ``op`` to the pending value ``a`` and the current value ``b``.

    Raises ``MathDomainError`` (or the ``ArithmeticError``/``ValueError``
    coming out of :mod:`math`) for invalid arguments; callers are expected to
    also reject non-finite return values.
    """

    op = Operator(op)
    angle_mode = AngleMode(angle_mode)
    if op is Operator.ADD:
        return a + b
    if op is Operator.SUB:
        return a - b
    if op is Operator.MUL:
        return a * b
    if op is Operator.DIV:
        return _divide(a, b, "division")
    if op is Operator.POW:
        return math.pow(a, b)
    if op is Operator.MOD:
        # remainder takes the sign of the dividend
        return math.fmod(a, b)
    if op is Operator.GCD:
        return primitives.gcd(a, b)
    if op is Operator.LCM:
        return primitives.lcm(a, b)
    if op is Operator.NPR:
        return primitives.permutation(a, b)
    if op is Operator.NCR:
        return primitives.combination(a, b)
    if op is Operator.NTHROOT:
        # zeroth root: the exponent 1/0 is a signed infinity, so |a| < 1 gives 0
        exponent = math.copysign(math.inf, b) if b == 0 else 1.0 / b
        return math.pow(a, exponent)
    if op is Operator.LOGBASE:
        return _divide(math.log(a), math.log(b), "logarithm base 1")
    if op is Operator.ATAN2:
        angle = math.atan2(a, b)
        return primitives.to_degrees(angle) if angle_mode is AngleMode.DEGREES else angle
    raise ValueError(f"Unsupported operator: {op}")


class Function(str, Enum):
    PERCENT = "percent"
    SQRT = "sqrt"
    CBRT = "cbrt"
    SQUARE = "square"
    CUBE = "cube"
    EXP10 = "exp10"
    INVERSE = "inverse"
    ABS = "abs"
    SIN = "sin"
    COS = "cos"
    TAN = "tan"
    CSC = "csc"
    SEC = "sec"
    COT = "cot"
    ASIN = "asin"
    ACOS = "acos"
    ATAN = "atan"
    SINH = "sinh"
    COSH = "cosh"
    TANH = "tanh"
    CSCH = "csch"
    SECH = "sech"
    COTH = "coth"
    ASINH = "asinh"
    ACOSH = "acosh"
    ATANH = "atanh"
    EXP = "exp"
    LOG = "log"
    LN = "ln"
    LOG2 = "log2"
    FACTORIAL = "factorial"


# Label used in history entries, e.g. ``√(9) = 3``.
FUNCTION_LABELS = {
    Function.PERCENT: "%",
    Function.SQRT: "√",
    Function.CBRT: "³√",
    Function.SQUARE: "sqr",
    Function.CUBE: "cube",
    Function.EXP10: "10^",
    Function.INVERSE: "1/",
    Function.ABS: "abs",
    Function.EXP: "e^",
    Function.LOG2: "log₂",
    Function.FACTORIAL: "fact",
}

_DIRECT_TRIG = {Function.SIN, Function.COS, Function.TAN, Function.CSC, Function.SEC, Function.COT}
_INVERSE_TRIG = {Function.ASIN, Function.ACOS, Function.ATAN}


def function_label(fn: Function) -> str:
    fn = Function(fn)
    return FUNCTION_LABELS.get(fn, fn.value)


def _reciprocal(x: float, name: str) -> float:
    if x == 0:
        raise MathDomainError(f"{name} undefined")
    return 1 / x


def _plain(fn: Function, x: float) -> float:
    if fn is Function.PERCENT:
        return x / 100
    if fn is Function.SQRT:
        return math.sqrt(x)
    if fn is Function.CBRT:
        return primitives.cbrt(x)
    if fn is Function.SQUARE:
        return x * x
    if fn is Function.CUBE:
        return x * x * x
    if fn is Function.EXP10:
        return math.pow(10, x)
    if fn is Function.INVERSE:
        return _reciprocal(x, "inverse")
    if fn is Function.ABS:
        return abs(x)
    if fn is Function.SIN:
        return math.sin(x)
    if fn is Function.COS:
        return math.cos(x)
    if fn is Function.TAN:
        return math.tan(x)
    if fn is Function.CSC:
        return _reciprocal(math.sin(x), "csc")
    if fn is Function.SEC:
        return _reciprocal(math.cos(x), "sec")
    if fn is Function.COT:
        return _reciprocal(math.tan(x), "cot")
    if fn is Function.ASIN:
        return math.asin(x)
    if fn is Function.ACOS:
        return math.acos(x)
    if fn is Function.ATAN:
        return math.atan(x)
    if fn is Function.SINH:
        return math.sinh(x)
    if fn is Function.COSH:
        return math.cosh(x)
    if fn is Function.TANH:
        return math.tanh(x)
    if fn is Function.CSCH:
        return _reciprocal(math.sinh(x), "csch")
    if fn is Function.SECH:
        return _reciprocal(math.cosh(x), "sech")
    if fn is Function.COTH:
        return _reciprocal(math.tanh(x), "coth")
    if fn is Function.ASINH:
        return math.asinh(x)
    if fn is Function.ACOSH:
        return math.acosh(x)
    if fn is Function.ATANH:
        return math.atanh(x)
    if fn is Function.EXP:
        return math.exp(x)
    if fn is Function.LOG:
        return math.log10(x)
    if fn is Function.LN:
        return math.log(x)
    if fn is Function.LOG2:
        return math.log2(x)
    if fn is Function.FACTORIAL:
        return primitives.factorial(x)
    raise ValueError(f"Unsupported function: {fn}")


def evaluate_function(fn: Function, x: float, angle_mode: AngleMode = AngleMode.RADIANS) -> float:
    """Evaluate a keypad function, honouring the angle mode for trigonometry."""

    fn = Function(fn)
    degrees = AngleMode(angle_mode) is AngleMode.DEGREES
    if fn in _DIRECT_TRIG and degrees:
        return _plain(fn, primitives.to_radians(x))
    if fn in _INVERSE_TRIG and degrees:
        return primitives.to_degrees(_plain(fn, x))
    return _plain(fn, x)
