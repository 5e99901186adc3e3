from core.accumulator import AccumulatorEngine
from core.history import HistoryLog
from core.models import AngleMode, DomainError, Ok, Operator
from core.operators import Function


def press(engine, *keys):
    for key in keys:
        if key.isdigit():
            engine.input_digit(key)
        elif key == ".":
            engine.input_decimal_point()
        elif key == "=":
            engine.equals()
        else:
            engine.apply_operator(Operator(key))
    return engine


def test_initial_state():
    engine = AccumulatorEngine()
    assert engine.display == "0"
    assert engine.current == Ok(value=0.0)
    assert engine.state.pending_operator is None


def test_digits_replace_leading_zero_and_append():
    engine = press(AccumulatorEngine(), "0", "1", "2")
    assert engine.display == "12"


def test_input_is_truncated():
    engine = AccumulatorEngine()
    for _ in range(20):
        engine.input_digit("9")
    assert engine.display == "9" * 16


def test_decimal_point_is_idempotent():
    once = press(AccumulatorEngine(), "3", ".")
    twice = press(AccumulatorEngine(), "3", ".", ".")
    assert once.display == twice.display == "3."


def test_simple_calculation_records_history():
    log = HistoryLog()
    engine = press(AccumulatorEngine(history=log), "1", "2", "mul", "3", "=")
    assert engine.display == "36"
    assert log.entries[0].expression == "12 × 3"
    assert log.entries[0].result == "36"
    assert engine.last_entry is log.entries[0]


def test_chained_operators_resolve_immediately():
    engine = press(AccumulatorEngine(), "1", "add", "2", "add")
    assert engine.display == "3"
    assert engine.state.pending_value == 3
    assert engine.expression == "3 +"
    press(engine, "4", "=")
    assert engine.display == "7"


def test_operator_switch_while_awaiting_does_not_calculate():
    engine = press(AccumulatorEngine(), "5", "add", "mul", "2", "=")
    assert engine.display == "10"


def test_bare_equals_is_noop():
    engine = press(AccumulatorEngine(), "5", "=")
    assert engine.display == "5"
    press(engine, "add", "=")
    assert engine.display == "5"
    assert engine.state.pending_operator == Operator.ADD


def test_digit_after_equals_starts_new_number():
    engine = press(AccumulatorEngine(), "2", "add", "3", "=", "7")
    assert engine.display == "7"


def test_division_by_zero_sets_error_and_clears_pending():
    engine = press(AccumulatorEngine(), "8", "div", "0", "=")
    assert engine.display == "Error"
    assert isinstance(engine.current, DomainError)
    assert engine.state.pending_operator is None
    assert engine.state.pending_value is None


def test_error_mid_chain_and_recovery():
    engine = press(AccumulatorEngine(), "8", "div", "0", "add")
    assert engine.is_error
    assert engine.state.pending_value is None
    press(engine, "sub")
    assert engine.state.pending_operator is None
    press(engine, "4", "add", "1", "=")
    assert engine.display == "5"


def test_unary_function_and_history_label():
    log = HistoryLog()
    engine = press(AccumulatorEngine(history=log), "9")
    engine.apply_function(Function.SQRT)
    assert engine.display == "3"
    assert log.latest().expression == "√(9)"


def test_unary_domain_error():
    engine = press(AccumulatorEngine(), "1")
    engine.negate()
    engine.apply_function(Function.SQRT)
    assert engine.is_error
    engine.input_digit("4")
    assert engine.display == "4"
    assert not engine.is_error


def test_apply_unary_with_custom_function():
    engine = press(AccumulatorEngine(), "2")
    engine.apply_unary(lambda x: x * 10, "ten")
    assert engine.display == "20"
    assert engine.last_entry.expression == "ten(2)"


def test_degrees_mode_trig():
    engine = press(AccumulatorEngine(angle_mode=AngleMode.DEGREES), "3", "0")
    engine.apply_function(Function.SIN)
    assert engine.display == "0.5"


def test_clear_entry_backspace_and_negate():
    engine = press(AccumulatorEngine(), "1", "2", "add", "4", "5")
    engine.backspace()
    assert engine.display == "4"
    engine.backspace()
    assert engine.display == "0"
    engine.input_digit("7")
    engine.negate()
    assert engine.display == "-7"
    engine.negate()
    assert engine.display == "7"
    engine.clear_entry()
    assert engine.display == "0"
    assert engine.state.pending_operator == Operator.ADD
    engine.clear()
    assert engine.state.pending_operator is None
    assert engine.state.pending_value is None


def test_backspace_resets_error():
    engine = press(AccumulatorEngine(), "1", "div", "0", "=")
    engine.backspace()
    assert engine.display == "0"
    assert not engine.is_error


def test_negate_leaves_zero_alone():
    engine = AccumulatorEngine()
    engine.negate()
    assert engine.display == "0"


def test_constants_complete_an_operand():
    engine = press(AccumulatorEngine(), "2", "mul")
    engine.insert_constant("pi")
    engine.equals()
    assert engine.display == "6.2831853072"


def test_recall_strips_separators():
    engine = AccumulatorEngine()
    engine.recall("1,234.5")
    assert engine.display == "1234.5"
    assert engine.current == Ok(value=1234.5)


def test_formatted_display_groups_thousands():
    engine = press(AccumulatorEngine(), "1", "2", "3", "4", "5", "6", "7")
    assert engine.formatted_display() == "1,234,567"
    assert engine.formatted_display(grouped=False) == "1234567"


def test_backspace_drops_exponent_as_a_whole():
    engine = AccumulatorEngine()
    for digit in "10000000000000":
        engine.input_digit(digit)
    press(engine, "mul", "1", "0", "0", "=")
    assert engine.display == "1.000000e+15"
    engine.backspace()
    assert engine.display == "1.000000"
    press(engine, "add", "1", "=")
    assert engine.display == "2"


def test_partial_exponent_reads_leading_number():
    engine = AccumulatorEngine()
    engine.state.display = "1.5e"
    assert engine.current == Ok(value=1.5)


def test_decimal_point_while_awaiting_operand():
    engine = press(AccumulatorEngine(), "7", "add", ".", "5", "=")
    assert engine.display == "7.5"


def test_decimal_point_after_error_starts_fresh():
    engine = press(AccumulatorEngine(), "1", "div", "0", "=", ".")
    assert not engine.is_error
    assert engine.display == "0."
