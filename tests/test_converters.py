import pytest

from core.converters import (
    base_convert,
    convert_bases,
    convert_temperature,
    convert_unit,
    parse_int_prefix,
    to_radix,
)
from core.errors import UnknownUnitError


def test_convert_bases_from_decimal():
    result = convert_bases("255", 10)
    assert result.binary == "11111111"
    assert result.octal == "377"
    assert result.hexadecimal == "FF"
    assert result.by_radix()[10] == "255"


@pytest.mark.parametrize("n", [0, 1, 42, 255, 65535])
@pytest.mark.parametrize("radix", [2, 8, 16])
def test_radix_round_trip(n, radix):
    assert parse_int_prefix(to_radix(n, radix), radix) == n


def test_lenient_parsing():
    assert parse_int_prefix("0x1f", 16) == 31
    assert parse_int_prefix("12abc", 10) == 12
    assert parse_int_prefix("-101", 2) == -5
    assert parse_int_prefix("zz", 16) == 0
    assert convert_bases("", 10).decimal == "0"
    assert base_convert("-ff", 16, 10) == "-255"


def test_unsupported_radix():
    with pytest.raises(ValueError):
        parse_int_prefix("1", 3)


def test_linear_units():
    assert convert_unit("length", 1, "km", "m") == 1000
    assert convert_unit("length", "12", "in", "ft") == pytest.approx(1)
    assert convert_unit("mass", 1, "kg", "g") == pytest.approx(1000)
    assert convert_unit("area", 1, "ha", "m2") == 10000
    assert convert_unit("length", "", "m", "km") == 0


def test_temperatures():
    assert convert_temperature(100, "c", "f") == pytest.approx(212)
    assert convert_temperature(0, "c", "k") == pytest.approx(273.15)
    assert convert_temperature(32, "F", "C") == pytest.approx(0)


def test_unknown_units_raise():
    with pytest.raises(UnknownUnitError):
        convert_unit("length", 1, "m", "parsec")
    with pytest.raises(UnknownUnitError):
        convert_unit("volume", 1, "l", "ml")
    with pytest.raises(UnknownUnitError):
        convert_temperature(1, "c", "r")


@pytest.mark.parametrize("n", [0, 9, 255, 4096, 123456789])
def test_decimal_hex_decimal_round_trip(n):
    assert base_convert(base_convert(str(n), 10, 16), 16, 10) == str(n)
