import pytest

from core.stats import as_display, compute_statistics, parse_values, statistics_from_text


def test_parse_values_drops_bad_tokens():
    assert parse_values("1, 2 x 3\n4.5") == [1, 2, 3, 4.5]
    assert parse_values("") == []
    assert parse_values(" , ") == []


def test_basic_statistics():
    stats = compute_statistics([4, 1, 3, 2])
    assert stats.n == 4
    assert stats.total == 10
    assert stats.mean == 2.5
    assert stats.median == 2.5
    assert stats.minimum == 1
    assert stats.maximum == 4
    assert stats.range == 3
    assert stats.variance == pytest.approx(1.25)
    assert stats.sample_variance == pytest.approx(5 / 3)
    assert stats.std_dev == pytest.approx(1.25 ** 0.5)
    assert stats.mode == "None"
    assert stats.modes == []


def test_multiple_modes_are_sorted():
    stats = compute_statistics([3, 3, 1, 2, 2, 5])
    assert stats.modes == [2, 3]
    assert stats.mode == "2, 3"
    assert stats.median == 2.5


def test_single_value_has_no_sample_variance():
    stats = compute_statistics([7])
    assert stats.variance == 0
    assert stats.sample_variance is None
    assert as_display(stats)["sample_std_dev"] == "-"


def test_empty_input():
    assert compute_statistics([]) is None
    assert statistics_from_text("abc") is None
    assert as_display(None) == {"n": "-"}


def test_display_formatting():
    shown = as_display(statistics_from_text("1 2 2"))
    assert shown["n"] == "3"
    assert shown["mean"] == "1.6666666667"
    assert shown["mode"] == "2"
