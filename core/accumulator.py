"""Keypad calculator state machine.

The engine keeps one running value and at most one pending binary operator.
Pressing a second operator resolves the first (``1 + 2 +`` shows ``3``);
there is no precedence and no parentheses.
"""
from __future__ import annotations

import logging
import math
import random
from datetime import datetime, timezone
from typing import Callable, Optional

from core.formatting import ERROR_TEXT, format_number, group_thousands, number_to_string
from core.history import HistoryEntry, HistoryLog
from core.models import AccumulatorState, AngleMode, DomainError, Ok, Operand, Operator
from core.operators import OPERATOR_SYMBOLS, Function, evaluate_function, function_label, perform_calculation
from core.presets import CONSTANTS, MAX_INPUT_LENGTH

logger = logging.getLogger(__name__)


def _evaluate(compute: Callable[[], float]) -> Operand:
    """Run ``compute`` and fold every failure into ``DomainError``."""
    try:
        value = compute()
    except (ArithmeticError, ValueError) as exc:
        return DomainError(reason=str(exc) or exc.__class__.__name__)
    if not math.isfinite(value):
        return DomainError(reason="result is not finite")
    return Ok(value=value)


class AccumulatorEngine:
    """Applies key presses to an :class:`AccumulatorState`.

    ``angle_mode`` belongs to the caller and may be flipped at any time.
    Completed calculations are reported as ``last_entry`` and, when a
    ``history`` log is supplied, recorded there.
    """

    def __init__(
        self,
        angle_mode: AngleMode = AngleMode.RADIANS,
        history: Optional[HistoryLog] = None,
        state: Optional[AccumulatorState] = None,
        max_input_length: int = MAX_INPUT_LENGTH,
    ) -> None:
        self.angle_mode = AngleMode(angle_mode)
        self.history = history
        self.state = state or AccumulatorState()
        self.max_input_length = max_input_length
        self.last_entry: Optional[HistoryEntry] = None

    # -- reading ---------------------------------------------------------

    @property
    def display(self) -> str:
        return self.state.display

    @property
    def current(self) -> Operand:
        return self.state.current

    @property
    def is_error(self) -> bool:
        return self.state.error is not None

    @property
    def expression(self) -> str:
        """Pending part of the calculation, e.g. ``"12 ×"``."""
        s = self.state
        if s.pending_operator is None or s.pending_value is None:
            return ""
        return f"{format_number(s.pending_value)} {OPERATOR_SYMBOLS[s.pending_operator]}"

    def formatted_display(self, grouped: bool = True) -> str:
        return group_thousands(self.display) if grouped else self.display

    # -- entry -----------------------------------------------------------

    def _start_fresh(self) -> bool:
        s = self.state
        if s.error is not None or s.awaiting_operand:
            s.error = None
            s.awaiting_operand = False
            return True
        return False

    def input_digit(self, digit) -> None:
        d = str(digit)
        if len(d) != 1 or not d.isdigit():
            raise ValueError(f"Not a digit: {digit!r}")
        s = self.state
        if self._start_fresh():
            s.display = d
        else:
            s.display = d if s.display == "0" else s.display + d
        s.display = s.display[: self.max_input_length]

    def input_decimal_point(self) -> None:
        s = self.state
        if self._start_fresh():
            s.display = "0."
        elif "." not in s.display:
            s.display = (s.display + ".")[: self.max_input_length]

    def insert_constant(self, name: str) -> None:
        """Replace the current value with a named constant (or ``rand``)."""
        if name == "rand":
            value = random.random()
        else:
            try:
                value = CONSTANTS[name]
            except KeyError:
                raise ValueError(f"Unknown constant: {name}") from None
        self._set_value_text(number_to_string(value))

    def recall(self, text: str) -> None:
        """Load a previous result (e.g. picked from the history) as the current value."""
        cleaned = str(text).replace(",", "").strip()
        try:
            value = float(cleaned)
        except ValueError:
            raise ValueError(f"Not a number: {text!r}") from None
        if not math.isfinite(value):
            raise ValueError(f"Not a finite number: {text!r}")
        self._set_value_text(cleaned)

    def _set_value_text(self, text: str) -> None:
        s = self.state
        s.error = None
        s.awaiting_operand = False
        s.display = text

    # -- editing ---------------------------------------------------------

    def clear(self) -> None:
        self.state = AccumulatorState()

    def clear_entry(self) -> None:
        self.state.error = None
        self.state.display = "0"

    def backspace(self) -> None:
        s = self.state
        if s.error is not None:
            s.error = None
            s.display = "0"
            return
        if "e" in s.display:
            # an exponent is removed as a whole
            text = s.display.split("e")[0]
        else:
            text = s.display[:-1] if len(s.display) > 1 else "0"
        if text in ("", "-"):
            text = "0"
        s.display = text

    def negate(self) -> None:
        s = self.state
        if s.error is not None or s.display == "0":
            return
        s.display = s.display[1:] if s.display.startswith("-") else "-" + s.display

    # -- evaluation ------------------------------------------------------

    def _fail(self, error: DomainError) -> None:
        logger.debug("calculation failed: %s", error.reason)
        s = self.state
        s.error = error
        s.display = ERROR_TEXT
        s.pending_value = None
        s.pending_operator = None
        s.awaiting_operand = False

    def _emit(self, expression: str, result: str) -> None:
        if self.history is not None:
            self.last_entry = self.history.record(expression, result)
        else:
            self.last_entry = HistoryEntry(expression, result, datetime.now(timezone.utc))

    def apply_unary(self, fn: Callable[[float], float], label: str) -> None:
        """Replace the current value with ``fn(current)``; ``label`` names it in the history."""
        current = self.current
        if isinstance(current, DomainError):
            return
        x = current.value
        outcome = _evaluate(lambda: fn(x))
        if isinstance(outcome, DomainError):
            self._fail(outcome)
            return
        result = format_number(outcome.value)
        self.state.display = result
        self._emit(f"{label}({format_number(x)})", result)

    def apply_function(self, fn: Function) -> None:
        fn = Function(fn)
        self.apply_unary(lambda x: evaluate_function(fn, x, self.angle_mode), function_label(fn))

    def apply_operator(self, op: Operator) -> None:
        op = Operator(op)
        s = self.state
        current = self.current
        if isinstance(current, DomainError):
            return
        value = current.value
        if s.pending_value is None:
            s.pending_value = value
        elif s.pending_operator is not None and not s.awaiting_operand:
            outcome = _evaluate(
                lambda: perform_calculation(s.pending_value, value, s.pending_operator, self.angle_mode)
            )
            if isinstance(outcome, DomainError):
                self._fail(outcome)
                return
            s.display = format_number(outcome.value)
            s.pending_value = outcome.value
        s.pending_operator = op
        s.awaiting_operand = True

    def equals(self) -> None:
        s = self.state
        if s.pending_operator is None or s.pending_value is None or s.awaiting_operand:
            return
        current = self.current
        if isinstance(current, DomainError):
            return
        prev, value, op = s.pending_value, current.value, s.pending_operator
        outcome = _evaluate(lambda: perform_calculation(prev, value, op, self.angle_mode))
        if isinstance(outcome, DomainError):
            self._fail(outcome)
            return
        result = format_number(outcome.value)
        s.display = result
        s.pending_value = None
        s.pending_operator = None
        s.awaiting_operand = True
        self._emit(f"{format_number(prev)} {OPERATOR_SYMBOLS[op]} {format_number(value)}", result)
