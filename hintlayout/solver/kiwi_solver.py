"""Solver port backed by kiwisolver (Cassowary)."""

from __future__ import annotations

import logging
import numbers
from typing import Callable, Dict, List, Optional, Sequence

import kiwisolver as kiwi

from ..ids import IdGenerator
from .expression import ConstraintBuilder, ConstraintExpr
from .model import (
    ConstraintConflict,
    ConstraintId,
    ConstraintRecord,
    ForeignVariableError,
    LayoutUnsatisfiableError,
    Operator,
    Strength,
    SuggestHandleDisposedError,
    Term,
    UnsolvedLayoutError,
)

logger = logging.getLogger(__name__)

ConstraintSpec = Callable[[ConstraintBuilder], None]


class LayoutVariable:
    """Named scalar unknown owned by one :class:`KiwiSolver`."""

    def __init__(self, owner: "KiwiSolver", name: str, variable: kiwi.Variable) -> None:
        self.owner = owner
        self.name = name
        self.variable = variable

    @property
    def id(self) -> str:
        return self.name

    def value(self) -> float:
        """Solved value; only meaningful after ``update_variables()``."""

        if not self.owner.solved:
            raise UnsolvedLayoutError(f"variable {self.name!r} was read before the layout was solved")
        return float(self.variable.value())

    def __repr__(self) -> str:
        return f"LayoutVariable({self.name!r})"


class SuggestHandle:
    """Edit-variable handle for suggesting values between solves."""

    def __init__(self, solver: kiwi.Solver, variable: LayoutVariable, strength: Strength) -> None:
        self._solver = solver
        self.variable = variable
        self.strength = strength
        self.disposed = False

    def suggest(self, value: float) -> None:
        if self.disposed:
            raise SuggestHandleDisposedError(
                f"SuggestHandle for {self.variable.name!r} was already disposed"
            )
        self._solver.suggestValue(self.variable.variable, float(value))

    def dispose(self) -> None:
        if self.disposed:
            return
        self._solver.removeEditVariable(self.variable.variable)
        self.disposed = True


class KiwiSolver:
    """Creates variables and constraints and runs the single solve pass."""

    def __init__(self, ids: Optional[IdGenerator] = None) -> None:
        self._solver = kiwi.Solver()
        self.ids = ids or IdGenerator()
        self._variables: Dict[str, LayoutVariable] = {}
        self.conflicts: List[ConstraintConflict] = []
        self.constraint_count = 0
        self.solve_count = 0

    @property
    def solved(self) -> bool:
        return self.solve_count > 0

    # ------------------------------------------------------------------
    # Variables

    def create_variable(self, name: str) -> LayoutVariable:
        if name in self._variables:
            raise ValueError(f"variable {name!r} already exists")
        variable = LayoutVariable(self, name, kiwi.Variable(name))
        self._variables[name] = variable
        return variable

    def variables(self) -> List[LayoutVariable]:
        return list(self._variables.values())

    def has_variable(self, name: str) -> bool:
        return name in self._variables

    # ------------------------------------------------------------------
    # Constraints

    def create_constraint(self, constraint_id: Optional[ConstraintId], spec: ConstraintSpec) -> ConstraintRecord:
        """Run ``spec`` against a fresh builder and register what it commits."""

        record = ConstraintRecord(id=constraint_id or self.ids.constraint_id())
        builder = ConstraintBuilder(lambda expression: self._insert(record, expression))
        spec(builder)
        builder.finish()
        logger.debug("Registered %s with %d raw constraint(s)", record.id, len(record.raw_constraints))
        return record

    def add(self, expressions: Sequence[ConstraintExpr], constraint_id: Optional[ConstraintId] = None) -> ConstraintRecord:
        def spec(builder: ConstraintBuilder) -> None:
            for expression in expressions:
                builder.commit(expression)

        return self.create_constraint(constraint_id, spec)

    def _insert(self, record: ConstraintRecord, expression: ConstraintExpr) -> None:
        constraint = self._to_kiwi(expression)
        try:
            self._solver.addConstraint(constraint)
        except kiwi.UnsatisfiableConstraint:
            conflict = ConstraintConflict(
                record_id=record.id,
                expression=expression.describe(),
                reason="required constraint cannot be satisfied",
            )
            self.conflicts.append(conflict)
            logger.warning("Solver rejected constraint %s", conflict.describe())
            return
        record.raw_constraints.append(constraint)
        self.constraint_count += 1

    def _to_kiwi(self, expression: ConstraintExpr) -> kiwi.Constraint:
        lhs = self._expression(expression.lhs)
        rhs = self._expression(expression.rhs)
        if expression.op is Operator.EQ:
            constraint = lhs == rhs
        elif expression.op is Operator.GE:
            constraint = lhs >= rhs
        else:
            constraint = lhs <= rhs
        return constraint | expression.strength.weight

    def _expression(self, terms: Sequence[Term]) -> kiwi.Expression:
        kiwi_terms = []
        constant = 0.0
        for coefficient, operand in terms:
            if isinstance(operand, LayoutVariable):
                if operand.owner is not self:
                    raise ForeignVariableError(
                        f"variable {operand.name!r} belongs to a different solver"
                    )
                kiwi_terms.append(kiwi.Term(operand.variable, coefficient))
            elif isinstance(operand, numbers.Real):
                constant += coefficient * float(operand)
            else:
                raise ForeignVariableError(
                    f"operand {operand!r} is neither a number nor a LayoutVariable created by this solver"
                )
        return kiwi.Expression(tuple(kiwi_terms), constant)

    # ------------------------------------------------------------------
    # Solving

    def update_variables(self) -> None:
        """Solve; afterwards every variable's ``value()`` is current."""

        if self.conflicts:
            raise LayoutUnsatisfiableError(self.conflicts)
        self._solver.updateVariables()
        self.solve_count += 1
        logger.debug(
            "Solver pass %d finished: %d variables, %d constraints",
            self.solve_count,
            len(self._variables),
            self.constraint_count,
        )

    def create_edit_handle(self, variable: LayoutVariable, strength: Strength = Strength.STRONG) -> SuggestHandle:
        strength = Strength.parse(strength)
        if strength is Strength.REQUIRED:
            raise ValueError("edit handles cannot use required strength")
        if variable.owner is not self:
            raise ForeignVariableError(f"variable {variable.name!r} belongs to a different solver")
        try:
            self._solver.addEditVariable(variable.variable, strength.weight)
        except kiwi.DuplicateEditVariable:
            raise ValueError(f"variable {variable.name!r} already has an edit handle") from None
        return SuggestHandle(self._solver, variable, strength)
