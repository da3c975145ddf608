"""Core data structures shared by the solver port and the hint translators."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, List, Tuple, Union

import kiwisolver as kiwi

if TYPE_CHECKING:
    from .kiwi_solver import LayoutVariable

ConstraintId = str
Operand = Union["LayoutVariable", float, int]
Term = Tuple[float, Operand]


class LayoutError(Exception):
    """Base class for every error raised by the layout engine."""


class ConstraintChainError(LayoutError):
    """Raised when the fluent constraint builder is driven out of order."""


class ForeignVariableError(LayoutError, TypeError):
    """Raised when an operand was not created by the solver it is used with."""


class UnsolvedLayoutError(LayoutError, RuntimeError):
    """Raised when a variable value is read before the first solve."""


class SuggestHandleDisposedError(LayoutError, RuntimeError):
    """Raised when an edit handle is used after ``dispose()``."""


class LayoutUnsatisfiableError(LayoutError):
    """Raised by ``solve()`` when required constraints contradict each other."""

    def __init__(self, conflicts: List["ConstraintConflict"]):
        self.conflicts = list(conflicts)
        summary = "; ".join(conflict.describe() for conflict in self.conflicts[:5])
        if len(self.conflicts) > 5:
            summary += f"; ... ({len(self.conflicts) - 5} more)"
        super().__init__(
            f"layout unsatisfiable: {len(self.conflicts)} required constraint(s) conflict: {summary}"
        )


class Strength(Enum):
    """Constraint priority tiers, strongest first."""

    REQUIRED = "required"
    STRONG = "strong"
    MEDIUM = "medium"
    WEAK = "weak"

    @property
    def weight(self) -> float:
        return float(getattr(kiwi.strength, self.value))

    @classmethod
    def parse(cls, value: Union["Strength", str]) -> "Strength":
        if isinstance(value, Strength):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            names = ", ".join(member.value for member in cls)
            raise ValueError(f"unknown strength {value!r}; expected one of {names}") from None

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Strength):
            return NotImplemented
        return self.weight < other.weight


class Operator(Enum):
    EQ = "=="
    GE = ">="
    LE = "<="


@dataclass
class ConstraintRecord:
    """Group of raw solver constraints produced by one hint or registration."""

    id: ConstraintId
    raw_constraints: List[Any] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.raw_constraints)


@dataclass
class ConstraintConflict:
    """A required constraint the solver refused to insert."""

    record_id: ConstraintId
    expression: str
    reason: str

    def describe(self) -> str:
        return f"{self.record_id}: {self.expression} ({self.reason})"
