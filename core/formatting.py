"""Canonical number rendering for every engine result.

``format_number`` is the single place where a float becomes display text.
Its output uses the usual calculator conventions:
shortest round-trip digits, no trailing ``.0`` on integers, and exponential
form only for very small or very large magnitudes.
"""
from __future__ import annotations

import math
import re
from decimal import Decimal

from core.presets import DISPLAY_LENGTH_LIMIT, LARGE_THRESHOLD, SMALL_THRESHOLD

ERROR_TEXT = "Error"

_GROUPS = re.compile(r"\B(?=(\d{3})+(?!\d))")


def round_half_up(x: float) -> int:
    """Round to the nearest integer with halves going towards +infinity."""
    return math.floor(x + 0.5)


def _strip_exponent(text: str) -> str:
    mantissa, exp = text.split("e")
    sign = "-" if exp.startswith("-") else "+"
    return f"{mantissa}e{sign}{int(exp.lstrip('+-'))}"


def to_exponential(x: float, digits: int = 6) -> str:
    """``1.234000e-10`` style text, exponent without zero padding."""
    return _strip_exponent(f"{x:.{digits}e}")


def to_precision(x: float, precision: int = 10) -> str:
    """Render ``x`` with ``precision`` significant digits.

    Fixed notation is used unless the decimal exponent is below -6 or at least
    ``precision``.
    """
    if x == 0:
        return "0." + "0" * (precision - 1) if precision > 1 else "0"
    text = f"{x:.{precision - 1}e}"
    exp = int(text.split("e")[1])
    if exp < -6 or exp >= precision:
        return _strip_exponent(text)
    return f"{x:.{precision - 1 - exp}f}"


def number_to_string(x: float) -> str:
    """Shortest text that reads back as ``x``.

    Plain notation is used for decimal exponents between -6 and 21, matching
    how the keypad shows values such as ``0.00001`` or ``3``.
    """
    if not math.isfinite(x):
        return ERROR_TEXT
    if x == 0:
        return "0"
    sign = "-" if x < 0 else ""
    dec = Decimal(repr(abs(x))).normalize()
    _, digit_tuple, exponent = dec.as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    k = len(digits)
    n = exponent + k
    if k <= n <= 21:
        body = digits + "0" * (n - k)
    elif 0 < n <= 21:
        body = digits[:n] + "." + digits[n:]
    elif -6 < n <= 0:
        body = "0." + "0" * (-n) + digits
    else:
        e = n - 1
        mantissa = digits[0] + ("." + digits[1:] if k > 1 else "")
        body = f"{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"
    return sign + body


def format_number(x, length_limit: int = DISPLAY_LENGTH_LIMIT) -> str:
    """Return the canonical display string for ``x``."""
    if isinstance(x, str):
        return x
    x = float(x)
    if not math.isfinite(x):
        return ERROR_TEXT
    if x != 0 and abs(x) < SMALL_THRESHOLD:
        return to_exponential(x)
    if abs(x) >= LARGE_THRESHOLD:
        return to_exponential(x)

    rounded = round_half_up(x * 1e10) / 1e10
    text = number_to_string(rounded)
    if len(text) > length_limit and "e" not in text:
        text = to_precision(rounded, 10)
    return text


def group_thousands(text: str) -> str:
    """Insert ``,`` separators into the integer part of a display string."""
    if text == ERROR_TEXT or "e" in text:
        return text
    int_part, dot, frac = text.partition(".")
    return _GROUPS.sub(",", int_part) + dot + frac
