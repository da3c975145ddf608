"""Fluent constraint-expression builder.

A constraint is written as a chain::

    builder.expr([1, a.x]).eq([1, b.x], [1, b.width], [gap, 1]).strong()

Each link moves the builder through ``Empty -> HasLhs -> HasLhsOpRhs`` and the
strength call commits the pending chain as one immutable :class:`ConstraintExpr`.
After a commit the builder is empty again and can describe the next constraint.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Sequence, Tuple, Union

from .model import ConstraintChainError, Operator, Strength, Term

logger = logging.getLogger(__name__)

ZERO: Tuple[Term, ...] = ((0.0, 1),)


@dataclass(frozen=True)
class ConstraintExpr:
    """Immutable ``lhs <op> rhs`` at a given strength."""

    lhs: Tuple[Term, ...]
    op: Operator
    rhs: Tuple[Term, ...]
    strength: Strength = Strength.REQUIRED

    def describe(self) -> str:
        return f"{format_terms(self.lhs)} {self.op.value} {format_terms(self.rhs)} [{self.strength.value}]"


def format_terms(terms: Sequence[Term]) -> str:
    if not terms:
        return "0"
    parts = []
    for coefficient, operand in terms:
        name = getattr(operand, "name", None)
        if name is None:
            parts.append(f"{coefficient * float(operand):g}")
        elif coefficient == 1:
            parts.append(str(name))
        else:
            parts.append(f"{coefficient:g}*{name}")
    return " + ".join(parts)


class BuilderState(Enum):
    EMPTY = "empty"
    HAS_LHS = "lhs"
    HAS_LHS_OP_RHS = "lhs-op-rhs"


class ConstraintBuilder:
    """Stateful accumulator that hands finished expressions to ``commit``."""

    def __init__(self, commit: Callable[[ConstraintExpr], None]) -> None:
        self._commit = commit
        self._lhs: Optional[Tuple[Term, ...]] = None
        self._op: Optional[Operator] = None
        self._rhs: Optional[Tuple[Term, ...]] = None
        self.committed = 0

    @property
    def state(self) -> BuilderState:
        if self._lhs is None:
            return BuilderState.EMPTY
        if self._op is None:
            return BuilderState.HAS_LHS
        return BuilderState.HAS_LHS_OP_RHS

    # ------------------------------------------------------------------
    # Left-hand side

    def expr(self, *lhs: Term) -> "ConstraintBuilder":
        if self.state is not BuilderState.EMPTY:
            raise ConstraintChainError(
                "ConstraintBuilder.expr(): previous constraint chain was not committed "
                f"(pending {self._pending_text()})"
            )
        self._lhs = _normalize_terms(lhs)
        return self

    ct = expr

    # ------------------------------------------------------------------
    # Operator + right-hand side

    def eq(self, *rhs: Term) -> "ConstraintBuilder":
        return self._set_rhs("eq", Operator.EQ, rhs)

    def ge(self, *rhs: Term) -> "ConstraintBuilder":
        return self._set_rhs("ge", Operator.GE, rhs)

    def le(self, *rhs: Term) -> "ConstraintBuilder":
        return self._set_rhs("le", Operator.LE, rhs)

    def eq0(self) -> "ConstraintBuilder":
        return self._set_rhs("eq0", Operator.EQ, ZERO)

    def ge0(self) -> "ConstraintBuilder":
        return self._set_rhs("ge0", Operator.GE, ZERO)

    def le0(self) -> "ConstraintBuilder":
        return self._set_rhs("le0", Operator.LE, ZERO)

    # ------------------------------------------------------------------
    # Commit

    def required(self) -> "ConstraintBuilder":
        return self._finalize(Strength.REQUIRED)

    def strong(self) -> "ConstraintBuilder":
        return self._finalize(Strength.STRONG)

    def medium(self) -> "ConstraintBuilder":
        return self._finalize(Strength.MEDIUM)

    def weak(self) -> "ConstraintBuilder":
        return self._finalize(Strength.WEAK)

    def at(self, strength: Union[Strength, str]) -> "ConstraintBuilder":
        return self._finalize(Strength.parse(strength))

    def commit(self, expression: ConstraintExpr) -> "ConstraintBuilder":
        """Commit a ready-made expression, bypassing the fluent chain."""

        if self.state is not BuilderState.EMPTY:
            raise ConstraintChainError(
                f"ConstraintBuilder.commit(): pending chain {self._pending_text()} was not committed"
            )
        self._commit(expression)
        self.committed += 1
        return self

    def finish(self) -> None:
        """Fail if a chain was started but never committed."""

        if self.state is not BuilderState.EMPTY:
            raise ConstraintChainError(
                f"ConstraintBuilder: incomplete constraint chain {self._pending_text()}"
            )

    # ------------------------------------------------------------------
    # Internals

    def _set_rhs(self, method: str, op: Operator, rhs: Sequence[Term]) -> "ConstraintBuilder":
        if self._lhs is None:
            raise ConstraintChainError(
                f"ConstraintBuilder.{method}(): call expr(...) before defining rhs"
            )
        if self._op is not None:
            raise ConstraintChainError(
                f"ConstraintBuilder.{method}(): operator already set to {self._op.value!r}"
            )
        if not rhs:
            raise ConstraintChainError(
                f"ConstraintBuilder.{method}(): rhs needs at least one term (use {method}0() for zero)"
            )
        self._op = op
        self._rhs = _normalize_terms(rhs)
        return self

    def _finalize(self, strength: Strength) -> "ConstraintBuilder":
        if self._lhs is None or self._op is None or self._rhs is None:
            raise ConstraintChainError(
                f"ConstraintBuilder: incomplete constraint chain {self._pending_text()}"
            )
        expression = ConstraintExpr(lhs=self._lhs, op=self._op, rhs=self._rhs, strength=strength)
        self._lhs = self._op = self._rhs = None
        logger.debug("Committing constraint %s", expression.describe())
        self._commit(expression)
        self.committed += 1
        return self

    def _pending_text(self) -> str:
        lhs = format_terms(self._lhs) if self._lhs is not None else "<no lhs>"
        if self._op is None or self._rhs is None:
            return f"({lhs} ?)"
        return f"({lhs} {self._op.value} {format_terms(self._rhs)})"


def _normalize_terms(terms: Sequence[Term]) -> Tuple[Term, ...]:
    normalized = []
    for term in terms:
        try:
            coefficient, operand = term
        except (TypeError, ValueError):
            raise ConstraintChainError(
                f"constraint term must be a (coefficient, operand) pair, got {term!r}"
            ) from None
        normalized.append((float(coefficient), operand))
    return tuple(normalized)
