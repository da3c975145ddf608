"""Translate layout hints (arrange, align, enclose) into solver constraints.

Every public method registers its constraints immediately and returns the
:class:`~hintlayout.solver.ConstraintRecord` it produced, or ``None`` when the
hint had nothing to constrain (fewer than two targets, no children).
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from .bounds import Bounds, as_target
from .config import LayoutConfig, get_layout_config
from .ids import IdGenerator
from .logging_utils import apply_debug_logging
from .solver import ConstraintBuilder, ConstraintRecord, KiwiSolver, LayoutVariable, Strength, Term

logger = logging.getLogger(__name__)

HORIZONTAL = "horizontal"
VERTICAL = "vertical"

EdgeTerms = Callable[[Bounds], Tuple[Term, ...]]

# Edges are written over the primary variables only.
EDGES: Dict[str, EdgeTerms] = {
    "left": lambda b: ((1, b.x),),
    "right": lambda b: ((1, b.x), (1, b.width)),
    "top": lambda b: ((1, b.y),),
    "bottom": lambda b: ((1, b.y), (1, b.height)),
    "center_x": lambda b: ((1, b.x), (0.5, b.width)),
    "center_y": lambda b: ((1, b.y), (0.5, b.height)),
    "width": lambda b: ((1, b.width),),
    "height": lambda b: ((1, b.height),),
}

_EDGE_SCOPES = {
    "left": "alignLeft",
    "right": "alignRight",
    "top": "alignTop",
    "bottom": "alignBottom",
    "center_x": "alignCenterX",
    "center_y": "alignCenterY",
    "width": "alignWidth",
    "height": "alignHeight",
    "size": "alignSize",
}


def edge_terms(bounds: Bounds, edge: str) -> Tuple[Term, ...]:
    try:
        return EDGES[edge](bounds)
    except KeyError:
        raise ValueError(f"unknown edge {edge!r}; expected one of {', '.join(EDGES)}") from None


class Hints:
    """Hint translators bound to one solver."""

    def __init__(
        self,
        solver: KiwiSolver,
        ids: Optional[IdGenerator] = None,
        config: Optional[LayoutConfig] = None,
    ) -> None:
        self.solver = solver
        self.ids = ids or solver.ids
        self.config = config or get_layout_config()
        self._records: List[ConstraintRecord] = []
        self._hint_variables: Dict[str, LayoutVariable] = {}

    # ------------------------------------------------------------------
    # Bookkeeping

    def register(self, scope: str, spec: Callable[[ConstraintBuilder], None]) -> ConstraintRecord:
        """Register ``spec`` under a fresh ``constraints/{scope}/n`` id."""

        record = self.solver.create_constraint(self.ids.constraint_id(scope), spec)
        self._records.append(record)
        return record

    def list(self) -> List[ConstraintRecord]:
        return list(self._records)

    def create_hint_variable(self, base: str = "var", name: Optional[str] = None) -> LayoutVariable:
        """Variable owned by the hint engine rather than by a symbol."""

        variable = self.solver.create_variable(self.ids.hint_variable_name(base, name))
        self._hint_variables[variable.name] = variable
        return variable

    def hint_variables(self) -> List[LayoutVariable]:
        return list(self._hint_variables.values())

    # ------------------------------------------------------------------
    # Arrangement

    def arrange_horizontal(self, targets: Sequence[Any], gap: Optional[float] = None) -> Optional[ConstraintRecord]:
        return self.arrange(targets, HORIZONTAL, gap)

    def arrange_vertical(self, targets: Sequence[Any], gap: Optional[float] = None) -> Optional[ConstraintRecord]:
        return self.arrange(targets, VERTICAL, gap)

    def arrange(
        self,
        targets: Sequence[Any],
        axis: str = HORIZONTAL,
        gap: Optional[float] = None,
    ) -> Optional[ConstraintRecord]:
        """Chain adjacent targets: ``next.lead = prev.lead + prev.size + gap`` (strong)."""

        if axis == HORIZONTAL:
            gap = self.config.horizontal_gap if gap is None else gap
            lead, size, scope = "x", "width", "arrangeHorizontal"
        elif axis == VERTICAL:
            gap = self.config.vertical_gap if gap is None else gap
            lead, size, scope = "y", "height", "arrangeVertical"
        else:
            raise ValueError(f"unknown arrangement axis {axis!r}; expected 'horizontal' or 'vertical'")

        boxes = [as_target(target).bounds for target in targets]
        if len(boxes) < 2:
            return None

        def spec(builder: ConstraintBuilder) -> None:
            for prev, current in zip(boxes, boxes[1:]):
                builder.ct([1, getattr(current, lead)]).eq(
                    [1, getattr(prev, lead)], [1, getattr(prev, size)], [gap, 1]
                ).strong()

        return self.register(scope, spec)

    # ------------------------------------------------------------------
    # Alignment

    def align(
        self,
        edge: str,
        targets: Sequence[Any],
        strength: Strength = Strength.STRONG,
    ) -> Optional[ConstraintRecord]:
        """Constrain ``edge`` of every target to equal the first target's.

        The first target is the anchor, so the order of ``targets`` decides
        which value wins when weaker constraints pull them apart.
        """

        if edge not in _EDGE_SCOPES:
            raise ValueError(f"unknown edge {edge!r}; expected one of {', '.join(_EDGE_SCOPES)}")
        edges = ("width", "height") if edge == "size" else (edge,)
        boxes = [as_target(target).bounds for target in targets]
        if len(boxes) < 2:
            return None
        anchor = boxes[0]
        strength = Strength.parse(strength)

        def spec(builder: ConstraintBuilder) -> None:
            for other in boxes[1:]:
                for name in edges:
                    builder.ct(*edge_terms(other, name)).eq(*edge_terms(anchor, name)).at(strength)

        return self.register(_EDGE_SCOPES[edge], spec)

    def align_left(self, targets: Sequence[Any]) -> Optional[ConstraintRecord]:
        return self.align("left", targets)

    def align_right(self, targets: Sequence[Any]) -> Optional[ConstraintRecord]:
        return self.align("right", targets)

    def align_top(self, targets: Sequence[Any]) -> Optional[ConstraintRecord]:
        return self.align("top", targets)

    def align_bottom(self, targets: Sequence[Any]) -> Optional[ConstraintRecord]:
        return self.align("bottom", targets)

    def align_center_x(self, targets: Sequence[Any]) -> Optional[ConstraintRecord]:
        return self.align("center_x", targets)

    def align_center_y(self, targets: Sequence[Any]) -> Optional[ConstraintRecord]:
        return self.align("center_y", targets)

    def align_width(self, targets: Sequence[Any]) -> Optional[ConstraintRecord]:
        return self.align("width", targets)

    def align_height(self, targets: Sequence[Any]) -> Optional[ConstraintRecord]:
        return self.align("height", targets)

    def align_size(self, targets: Sequence[Any]) -> Optional[ConstraintRecord]:
        return self.align("size", targets)

    # ------------------------------------------------------------------
    # Enclosure

    def enclose(self, container: Any, children: Sequence[Any]) -> Optional[ConstraintRecord]:
        """Keep every child inside the container (required) and above it in z (strong)."""

        outer = as_target(container).enclosing
        boxes = [as_target(child).bounds for child in children]
        if not boxes:
            return None

        def spec(builder: ConstraintBuilder) -> None:
            for child in boxes:
                builder.ct([1, child.x]).ge([1, outer.x]).required()
                builder.ct([1, child.y]).ge([1, outer.y]).required()
                builder.ct([1, outer.x], [1, outer.width]).ge([1, child.x], [1, child.width]).required()
                builder.ct([1, outer.y], [1, outer.height]).ge([1, child.y], [1, child.height]).required()
                builder.ct([1, child.z]).ge([1, outer.z], [1, 1]).strong()

        record = self.register("enclose", spec)
        logger.debug("Enclosed %d child(ren) in %s", len(boxes), outer.bound_id)
        return record

    # ------------------------------------------------------------------
    # Direct placement

    def pin(
        self,
        target: Any,
        x: Optional[float] = None,
        y: Optional[float] = None,
        strength: Strength = Strength.STRONG,
    ) -> Optional[ConstraintRecord]:
        if x is None and y is None:
            return None
        bounds = as_target(target).bounds
        strength = Strength.parse(strength)

        def spec(builder: ConstraintBuilder) -> None:
            if x is not None:
                builder.ct([1, bounds.x]).eq([x, 1]).at(strength)
            if y is not None:
                builder.ct([1, bounds.y]).eq([y, 1]).at(strength)

        return self.register("pin", spec)

    def set_size(
        self,
        target: Any,
        width: Optional[float] = None,
        height: Optional[float] = None,
        strength: Strength = Strength.STRONG,
    ) -> Optional[ConstraintRecord]:
        if width is None and height is None:
            return None
        bounds = as_target(target).bounds
        strength = Strength.parse(strength)

        def spec(builder: ConstraintBuilder) -> None:
            if width is not None:
                builder.ct([1, bounds.width]).eq([width, 1]).at(strength)
            if height is not None:
                builder.ct([1, bounds.height]).eq([height, 1]).at(strength)

        return self.register("setSize", spec)

    def min_size(
        self,
        target: Any,
        width: float,
        height: float,
        strength: Strength = Strength.WEAK,
    ) -> ConstraintRecord:
        bounds = as_target(target).bounds
        strength = Strength.parse(strength)

        def spec(builder: ConstraintBuilder) -> None:
            builder.ct([1, bounds.width]).ge([width, 1]).at(strength)
            builder.ct([1, bounds.height]).ge([height, 1]).at(strength)

        return self.register("minSize", spec)


apply_debug_logging(globals(), logger=logger, skip={"Hints.list", "Hints.register", "edge_terms"})
