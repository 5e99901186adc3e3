"""Number-base and unit conversions."""
from __future__ import annotations

from core.errors import UnknownUnitError
from core.models import BaseConversion
from core.presets import RADICES, TEMPERATURE_UNITS, UNIT_TABLES
from core.utils import nz

_DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_PREFIXES = {2: "0b", 8: "0o", 16: "0x"}


def parse_int_prefix(text, radix: int = 10) -> int:
    """Parse the leading integer of ``text`` in ``radix``.

    Mirrors lenient keypad entry: surrounding whitespace, a sign and a
    ``0b``/``0o``/``0x`` prefix matching the radix are accepted, parsing stops
    at the first invalid digit, and empty or invalid input yields ``0``.
    """

    if radix not in RADICES:
        raise ValueError(f"Unsupported radix: {radix}")
    s = str(text or "").strip().upper()
    sign = 1
    if s[:1] in ("+", "-"):
        sign = -1 if s[0] == "-" else 1
        s = s[1:]
    prefix = _PREFIXES.get(radix)
    if prefix and s.startswith(prefix.upper()):
        s = s[2:]
    valid = _DIGITS[:radix]
    end = 0
    while end < len(s) and s[end] in valid:
        end += 1
    if end == 0:
        return 0
    return sign * int(s[:end], radix)


def to_radix(n: int, radix: int) -> str:
    """Render ``n`` in ``radix`` with upper-case digits and a leading ``-`` if negative."""
    if radix not in RADICES:
        raise ValueError(f"Unsupported radix: {radix}")
    n = int(n)
    if n == 0:
        return "0"
    sign = "-" if n < 0 else ""
    n = abs(n)
    out = []
    while n:
        n, rem = divmod(n, radix)
        out.append(_DIGITS[rem])
    return sign + "".join(reversed(out))


def convert_bases(text, radix: int = 10) -> BaseConversion:
    """Re-render an integer typed in ``radix`` in all four supported bases."""
    n = parse_int_prefix(text, radix)
    return BaseConversion(
        binary=to_radix(n, 2),
        octal=to_radix(n, 8),
        decimal=to_radix(n, 10),
        hexadecimal=to_radix(n, 16),
    )


def base_convert(text, source_radix: int, target_radix: int) -> str:
    return to_radix(parse_int_prefix(text, source_radix), target_radix)


def convert_unit(category: str, value, from_unit: str, to_unit: str) -> float:
    """Convert ``value`` between two units of a linear category (length, mass, area)."""
    try:
        factors = UNIT_TABLES[category]
    except KeyError:
        raise UnknownUnitError(f"Unknown unit category: {category}") from None
    for unit in (from_unit, to_unit):
        if unit not in factors:
            raise UnknownUnitError(f"Unknown {category} unit: {unit}")
    return nz(value) * factors[from_unit] / factors[to_unit]


def to_celsius(value: float, unit: str) -> float:
    if unit == "c":
        return value
    if unit == "f":
        return (value - 32) * 5 / 9
    if unit == "k":
        return value - 273.15
    raise UnknownUnitError(f"Unknown temperature unit: {unit}")


def from_celsius(celsius: float, unit: str) -> float:
    if unit == "c":
        return celsius
    if unit == "f":
        return celsius * 9 / 5 + 32
    if unit == "k":
        return celsius + 273.15
    raise UnknownUnitError(f"Unknown temperature unit: {unit}")


def convert_temperature(value, from_unit: str, to_unit: str) -> float:
    """Convert between Celsius, Fahrenheit and Kelvin via Celsius."""
    from_unit, to_unit = from_unit.lower(), to_unit.lower()
    for unit in (from_unit, to_unit):
        if unit not in TEMPERATURE_UNITS:
            raise UnknownUnitError(f"Unknown temperature unit: {unit}")
    return from_celsius(to_celsius(nz(value), from_unit), to_unit)
