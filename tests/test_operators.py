import math

import pytest

from core.errors import MathDomainError
from core.models import AngleMode, Operator
from core.operators import Function, evaluate_function, function_label, perform_calculation


@pytest.mark.parametrize("a,b", [(1.5, 2.25), (-3, 7), (1e10, 0.1)])
def test_add_commutes_and_sub_inverts(a, b):
    assert perform_calculation(a, b, Operator.ADD) == perform_calculation(b, a, Operator.ADD)
    total = perform_calculation(a, b, Operator.ADD)
    assert perform_calculation(total, b, Operator.SUB) == pytest.approx(a)


def test_binary_table():
    assert perform_calculation(6, 3, Operator.DIV) == 2
    assert perform_calculation(2, 10, Operator.POW) == 1024
    assert perform_calculation(-7, 3, Operator.MOD) == -1
    assert perform_calculation(12, 18, Operator.GCD) == 6
    assert perform_calculation(4, 6, Operator.LCM) == 12
    assert perform_calculation(5, 2, Operator.NPR) == 20
    assert perform_calculation(5, 2, Operator.NCR) == 10
    assert perform_calculation(27, 3, Operator.NTHROOT) == pytest.approx(3)
    assert perform_calculation(8, 2, Operator.LOGBASE) == pytest.approx(3)
    assert perform_calculation(1, 1, Operator.ATAN2) == pytest.approx(math.pi / 4)
    assert perform_calculation(1, 1, Operator.ATAN2, AngleMode.DEGREES) == pytest.approx(45)


def test_operator_accepts_tag_strings():
    assert perform_calculation(2, 3, "mul") == 6


def test_division_by_zero_is_domain_error():
    with pytest.raises(MathDomainError):
        perform_calculation(1, 0, Operator.DIV)


def test_trig_honours_angle_mode():
    assert evaluate_function(Function.SIN, 90, AngleMode.DEGREES) == pytest.approx(1)
    assert evaluate_function(Function.SIN, math.pi / 2) == pytest.approx(1)
    assert evaluate_function(Function.ASIN, 1, AngleMode.DEGREES) == pytest.approx(90)


def test_function_domain_errors():
    with pytest.raises(ValueError):
        evaluate_function(Function.SQRT, -1)
    with pytest.raises(ValueError):
        evaluate_function(Function.LN, 0)
    with pytest.raises(MathDomainError):
        evaluate_function(Function.INVERSE, 0)


def test_function_labels():
    assert function_label(Function.SQRT) == "√"
    assert function_label(Function.SIN) == "sin"


def test_zeroth_root():
    assert perform_calculation(0.5, 0, Operator.NTHROOT) == 0
    assert perform_calculation(1, 0, Operator.NTHROOT) == 1
    assert perform_calculation(8, 0, Operator.NTHROOT) == math.inf
