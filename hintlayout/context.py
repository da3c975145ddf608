"""Layout context: one diagram build from symbol creation to the solved snapshot."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Sequence

import numpy as np

from .bounds import Bounds, BoundsFactory, BoundsType, BoundsValues, HintTarget, as_target, bounds_values
from .config import LayoutConfig, get_layout_config
from .figure import FigureBuilder
from .fluent import AlignBuilder, ArrangeBuilder, EncloseBuilder
from .grid import GridBuilder
from .guide import Guide
from .hints import Hints
from .ids import IdGenerator
from .solver import ConstraintId, ConstraintRecord, ConstraintSpec, KiwiSolver
from .symbols import Symbol, SymbolRegistry, default_registry, diagram

logger = logging.getLogger(__name__)

VALUE_FIELDS = ("x", "y", "width", "height", "right", "bottom", "center_x", "center_y", "z")


@dataclass(frozen=True)
class LayoutSolution:
    """Solved values of every bounds, keyed by bounds id."""

    bounds: Dict[str, BoundsValues]

    def __getitem__(self, key: Any) -> BoundsValues:
        if isinstance(key, str):
            return self.bounds[key]
        return self.bounds[as_target(key).bounds.bound_id]

    def __contains__(self, key: object) -> bool:
        return key in self.bounds

    def __len__(self) -> int:
        return len(self.bounds)

    def content(self, value: Any) -> BoundsValues:
        """Values of the area children are enclosed in."""

        return self.bounds[as_target(value).enclosing.bound_id]

    def as_array(self, bound_ids: Optional[Iterable[str]] = None) -> np.ndarray:
        """``(n, 9)`` array with the columns of :data:`VALUE_FIELDS`."""

        ids = list(self.bounds) if bound_ids is None else list(bound_ids)
        if not ids:
            return np.zeros((0, len(VALUE_FIELDS)), dtype=float)
        return np.array(
            [[getattr(self.bounds[bound_id], name) for name in VALUE_FIELDS] for bound_id in ids],
            dtype=float,
        )

    def allclose(self, other: "LayoutSolution", atol: float = 1e-6) -> bool:
        if set(self.bounds) != set(other.bounds):
            return False
        ids = sorted(self.bounds)
        return bool(np.allclose(self.as_array(ids), other.as_array(ids), rtol=0.0, atol=atol))


class LayoutContext:
    """Owns the solver and every builder of one diagram.

    Symbols and hints may be issued in any order; :meth:`solve` runs the
    solver once over everything registered so far.
    """

    def __init__(
        self,
        config: Optional[LayoutConfig] = None,
        registry: Optional[SymbolRegistry] = None,
        ids: Optional[IdGenerator] = None,
        solver: Optional[KiwiSolver] = None,
    ) -> None:
        self.config = config or get_layout_config()
        self.ids = ids or (solver.ids if solver is not None else IdGenerator())
        self.solver = solver or KiwiSolver(self.ids)
        self.bounds = BoundsFactory(self.solver, self.config)
        self.hints = Hints(self.solver, self.ids, self.config)
        self.registry = registry or default_registry()
        self.symbols: Dict[str, Symbol] = {}
        self._solve_lock = threading.Lock()
        self.diagram = self._add(diagram(self, self.ids.symbol_id("diagram")))

    # ------------------------------------------------------------------
    # Symbols and bounds

    def symbol(self, kind: str, **options: Any) -> Symbol:
        return self._add(self.registry.create(kind, self, **options))

    def rectangle(self, **options: Any) -> Symbol:
        return self.symbol("rectangle", **options)

    def container(self, **options: Any) -> Symbol:
        return self.symbol("container", **options)

    def create_bounds(self, prefix: str, type: BoundsType = BoundsType.LAYOUT) -> Bounds:
        return self.bounds.create_bounds(prefix, type)

    def create_constraint(self, constraint_id: Optional[ConstraintId], spec: ConstraintSpec) -> ConstraintRecord:
        return self.solver.create_constraint(constraint_id, spec)

    def target(self, value: Any) -> HintTarget:
        if isinstance(value, str):
            try:
                return self.symbols[value].target
            except KeyError:
                raise KeyError(f"Unknown symbol {value!r}") from None
        return as_target(value)

    def _add(self, symbol: Symbol) -> Symbol:
        if symbol.id in self.symbols:
            raise ValueError(f"symbol {symbol.id!r} already exists")
        self.symbols[symbol.id] = symbol
        return symbol

    def _targets(self, values: Sequence[Any]) -> List[HintTarget]:
        return [self.target(value) for value in values]

    # ------------------------------------------------------------------
    # Hints

    def arrange(self, *targets: Any) -> ArrangeBuilder:
        return ArrangeBuilder(self.hints, self._targets(targets))

    def align(self, *targets: Any) -> AlignBuilder:
        return AlignBuilder(self.hints, self._targets(targets))

    def enclose(self, *children: Any) -> EncloseBuilder:
        return EncloseBuilder(self.hints, self._targets(children), self.diagram)

    def grid(self, matrix: Sequence[Sequence[Any]]) -> GridBuilder:
        resolved = [[None if item is None else self.target(item) for item in row] for row in matrix]
        return GridBuilder(self.hints, resolved, self.diagram)

    def figure(self, rows: Sequence[Sequence[Any]]) -> FigureBuilder:
        return FigureBuilder(self.hints, [self._targets(row) for row in rows], self.diagram)

    def guide_x(self, value: Optional[float] = None, name: Optional[str] = None) -> Guide:
        return Guide(self.hints, "x", name=name, value=value)

    def guide_y(self, value: Optional[float] = None, name: Optional[str] = None) -> Guide:
        return Guide(self.hints, "y", name=name, value=value)

    # ------------------------------------------------------------------
    # Solving

    def solve(self) -> LayoutSolution:
        """Solve every registered constraint and snapshot all bounds.

        Raises :class:`~hintlayout.solver.LayoutUnsatisfiableError` when required
        constraints contradict each other.
        """

        with self._solve_lock:
            self.solver.update_variables()
            solution = LayoutSolution({bounds.bound_id: bounds_values(bounds) for bounds in self.bounds.all()})
        logger.info(
            "Solved layout: %d symbol(s), %d bounds, %d constraint(s), %d hint record(s)",
            len(self.symbols),
            len(self.bounds),
            self.solver.constraint_count,
            len(self.hints.list()),
        )
        return solution
