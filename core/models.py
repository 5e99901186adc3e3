from __future__ import annotations

from enum import Enum
from typing import Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field

from core.presets import DEFAULT_THEME, MAX_HISTORY, MAX_INPUT_LENGTH
from core.utils import float_prefix


class AngleMode(str, Enum):
    RADIANS = "radians"
    DEGREES = "degrees"


class Ok(BaseModel):
    value: float


class DomainError(BaseModel):
    reason: str = "Error"


Operand = Union[Ok, DomainError]


class Operator(str, Enum):
    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV = "div"
    POW = "pow"
    MOD = "mod"
    GCD = "gcd"
    LCM = "lcm"
    NPR = "npr"
    NCR = "ncr"
    NTHROOT = "nthroot"
    LOGBASE = "logbase"
    ATAN2 = "atan2"


class AccumulatorState(BaseModel):
    """Running value of the keypad calculator plus at most one pending operator."""

    display: str = "0"
    error: Optional[DomainError] = None
    pending_value: Optional[float] = None
    pending_operator: Optional[Operator] = None
    awaiting_operand: bool = False

    @property
    def current(self) -> Operand:
        if self.error is not None:
            return self.error
        return Ok(value=float_prefix(self.display))


class SolutionKind(str, Enum):
    REAL = "real"
    DOUBLE_ROOT = "double_root"
    COMPLEX = "complex"
    INFINITE = "infinite_solutions"
    NONE = "no_solution"
    NOT_APPLICABLE = "not_applicable"


class ComplexRoot(BaseModel):
    real: float
    imag: float


class EquationResult(BaseModel):
    kind: SolutionKind
    roots: List[float] = Field(default_factory=list)
    complex_roots: List[ComplexRoot] = Field(default_factory=list)
    discriminant: Optional[float] = None
    degree: int = 1
    message: str = ""


class SystemKind(str, Enum):
    UNIQUE = "unique"
    DEPENDENT = "dependent"
    PARALLEL = "parallel"


class SystemResult(BaseModel):
    kind: SystemKind
    x: Optional[float] = None
    y: Optional[float] = None
    message: str = ""


class Stats(BaseModel):
    n: int
    total: float
    mean: float
    median: float
    mode: str
    modes: List[float] = Field(default_factory=list)
    minimum: float
    maximum: float
    range: float
    variance: float
    std_dev: float
    sample_variance: Optional[float] = None
    sample_std_dev: Optional[float] = None


class BaseConversion(BaseModel):
    binary: str
    octal: str
    decimal: str
    hexadecimal: str

    def by_radix(self) -> Dict[int, str]:
        return {2: self.binary, 8: self.octal, 10: self.decimal, 16: self.hexadecimal}


class Settings(BaseModel):
    max_history: int = MAX_HISTORY
    max_input_length: int = MAX_INPUT_LENGTH
    angle_mode: AngleMode = AngleMode.RADIANS
    theme: Literal["dark", "light"] = DEFAULT_THEME
