"""Exception types raised inside the calculator engine."""
from __future__ import annotations


class CalculatorError(Exception):
    """Base class for engine errors."""


class MathDomainError(CalculatorError, ValueError):
    """An argument falls outside the domain of the requested operation."""


class UnknownUnitError(CalculatorError, KeyError):
    """A converter was asked for a unit or category it does not know."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else "unknown unit"
