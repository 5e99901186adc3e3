from __future__ import annotations

import math

from core.errors import MathDomainError
from core.formatting import round_half_up

MAX_FACTORIAL = 170


def to_radians(deg: float) -> float:
    return deg * math.pi / 180


def to_degrees(rad: float) -> float:
    return rad * 180 / math.pi


def cbrt(x: float) -> float:
    """Real cube root that keeps the sign of ``x``."""
    if x == 0:
        return 0.0
    return math.copysign(abs(x) ** (1 / 3), x)


def factorial(n: float) -> float:
    """``n!`` for ``n`` rounded to the nearest integer in ``[0, 170]``.

    170! is the largest factorial a double can hold; anything past it, or a
    negative argument, is a domain error.
    """

    k = round_half_up(n)
    if k < 0 or k > MAX_FACTORIAL:
        raise MathDomainError(f"factorial undefined for {k}")
    return float(math.factorial(k))


def gcd(a: float, b: float) -> float:
    """Greatest common divisor of ``|round(a)|`` and ``|round(b)|``."""
    x, y = abs(round_half_up(a)), abs(round_half_up(b))
    while y:
        x, y = y, x % y
    return float(x)


def lcm(a: float, b: float) -> float:
    x, y = abs(round_half_up(a)), abs(round_half_up(b))
    divisor = gcd(x, y)
    if divisor == 0:
        raise MathDomainError("lcm undefined for (0, 0)")
    return x * y / divisor


def permutation(n: float, r: float) -> float:
    """Ordered selections ``n! / (n - r)!``."""
    n, r = round_half_up(n), round_half_up(r)
    if r > n or n < 0 or r < 0:
        raise MathDomainError(f"nPr requires 0 <= r <= n, got n={n}, r={r}")
    return factorial(n) / factorial(n - r)


def combination(n: float, r: float) -> float:
    """Unordered selections ``n! / (r! (n - r)!)``."""
    n, r = round_half_up(n), round_half_up(r)
    if r > n or n < 0 or r < 0:
        raise MathDomainError(f"nCr requires 0 <= r <= n, got n={n}, r={r}")
    return factorial(n) / (factorial(r) * factorial(n - r))
