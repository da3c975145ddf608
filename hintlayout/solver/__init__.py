"""Solver port: variables, fluent constraints and the single solve pass."""

from __future__ import annotations

from .expression import BuilderState, ConstraintBuilder, ConstraintExpr, format_terms
from .kiwi_solver import ConstraintSpec, KiwiSolver, LayoutVariable, SuggestHandle
from .model import (
    ConstraintChainError,
    ConstraintConflict,
    ConstraintId,
    ConstraintRecord,
    ForeignVariableError,
    LayoutError,
    LayoutUnsatisfiableError,
    Operand,
    Operator,
    Strength,
    SuggestHandleDisposedError,
    Term,
    UnsolvedLayoutError,
)

__all__ = [
    "BuilderState",
    "ConstraintBuilder",
    "ConstraintChainError",
    "ConstraintConflict",
    "ConstraintExpr",
    "ConstraintId",
    "ConstraintRecord",
    "ConstraintSpec",
    "ForeignVariableError",
    "KiwiSolver",
    "LayoutError",
    "LayoutUnsatisfiableError",
    "LayoutVariable",
    "Operand",
    "Operator",
    "Strength",
    "SuggestHandle",
    "SuggestHandleDisposedError",
    "Term",
    "UnsolvedLayoutError",
    "format_terms",
]
