"""Assorted utility helpers."""
from __future__ import annotations

import math
import re


def nz(x, default=0.0):
    """Return a float for ``x`` or a fallback value.

    Solver coefficients and converter inputs arrive as raw text from the UI.
    Empty fields, ``None``, unparseable text and non-finite values all fall
    back to ``default`` so the calculation still produces an answer.
    """

    if x is None:
        return default
    if isinstance(x, str):
        x = x.strip()
        if not x:
            return default
    try:
        value = float(x)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(value):
        return default
    return value


_FLOAT_PREFIX = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def float_prefix(text, default=0.0):
    """Read the longest leading number in ``text``.

    ``"1.000000e"`` reads as ``1.0``; text with no leading number gives
    ``default``.
    """

    match = _FLOAT_PREFIX.match(str(text or ""))
    if match is None:
        return default
    return float(match.group(0))
