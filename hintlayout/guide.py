"""Guides: shared coordinate lines that symbols align to or that follow a symbol."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

from .bounds import HintTarget, as_target
from .hints import Hints, edge_terms
from .solver import ConstraintBuilder, LayoutError, LayoutVariable, Term

logger = logging.getLogger(__name__)

_GUIDE_CLASS = {"x": "GuideX", "y": "GuideY"}


class AxisMismatchError(LayoutError, TypeError):
    """A method for one axis was called on a guide of the other axis."""


class GuideFollowError(LayoutError, RuntimeError):
    """A guide was asked to follow a second symbol."""


class Guide:
    """Axis-tagged guide variable.

    ``align_*`` pins a symbol edge to the guide and may be repeated;
    ``follow_*`` drives the guide from one symbol edge and may be called once.
    """

    def __init__(
        self,
        hints: Hints,
        axis: str,
        name: Optional[str] = None,
        value: Optional[float] = None,
    ) -> None:
        if axis not in _GUIDE_CLASS:
            raise ValueError(f"guide axis must be 'x' or 'y', got {axis!r}")
        self.hints = hints
        self.axis = axis
        if name is None:
            name = str(hints.ids.next(f"guide_{axis}"))
        self.name = name
        self.variable = hints.create_hint_variable(f"guide_{axis}", name)
        self._aligned: Dict[str, HintTarget] = {}
        self.follows: Optional[str] = None

        if value is not None:
            guide = self.variable

            def spec(builder: ConstraintBuilder) -> None:
                builder.ct([1, guide]).eq([value, 1]).strong()

            hints.register(f"guide/{name}/initial", spec)

    @property
    def x(self) -> LayoutVariable:
        self._ensure_axis("x", "x")
        return self.variable

    @property
    def y(self) -> LayoutVariable:
        self._ensure_axis("y", "y")
        return self.variable

    @property
    def aligned(self) -> List[HintTarget]:
        return list(self._aligned.values())

    # ------------------------------------------------------------------
    # x-guides

    def align_left(self, *targets: Any) -> "Guide":
        self._ensure_axis("x", "align_left")
        return self._align("left", targets)

    def align_right(self, *targets: Any) -> "Guide":
        self._ensure_axis("x", "align_right")
        return self._align("right", targets)

    def follow_left(self, target: Any) -> "Guide":
        self._ensure_axis("x", "follow_left")
        return self._follow("left", target)

    def follow_right(self, target: Any) -> "Guide":
        self._ensure_axis("x", "follow_right")
        return self._follow("right", target)

    # ------------------------------------------------------------------
    # y-guides

    def align_top(self, *targets: Any) -> "Guide":
        self._ensure_axis("y", "align_top")
        return self._align("top", targets)

    def align_bottom(self, *targets: Any) -> "Guide":
        self._ensure_axis("y", "align_bottom")
        return self._align("bottom", targets)

    def follow_top(self, target: Any) -> "Guide":
        self._ensure_axis("y", "follow_top")
        return self._follow("top", target)

    def follow_bottom(self, target: Any) -> "Guide":
        self._ensure_axis("y", "follow_bottom")
        return self._follow("bottom", target)

    # ------------------------------------------------------------------
    # both axes

    def align_center(self, *targets: Any) -> "Guide":
        return self._align(self._center_edge(), targets)

    def follow_center(self, target: Any) -> "Guide":
        return self._follow(self._center_edge(), target)

    def arrange(self, gap: Optional[float] = None) -> "Guide":
        """Arrange aligned targets along the other axis (an x-guide makes a column)."""

        targets = self.aligned
        if not targets:
            return self
        if self.axis == "x":
            self.hints.arrange_vertical(targets, gap)
        else:
            self.hints.arrange_horizontal(targets, gap)
        return self

    # ------------------------------------------------------------------
    # Internals

    def _center_edge(self) -> str:
        return "center_x" if self.axis == "x" else "center_y"

    def _align(self, edge: str, targets: Tuple[Any, ...]) -> "Guide":
        resolved = [as_target(target) for target in targets]
        for target in resolved:
            self._aligned.setdefault(target.bound_id, target)
            self._equality(
                f"guide/{self.name}/align_{edge}",
                edge_terms(target.bounds, edge),
                ((1, self.variable),),
            )
        return self

    def _follow(self, edge: str, target: Any) -> "Guide":
        method = f"follow_{'center' if edge.startswith('center') else edge}"
        if self.follows is not None:
            raise GuideFollowError(
                f"{_GUIDE_CLASS[self.axis]}.{method}(): guide already follows another symbol "
                f"({self.follows}); a guide can follow only one symbol"
            )
        resolved = as_target(target)
        self.follows = resolved.bound_id
        self._equality(
            f"guide/{self.name}/{method}",
            ((1, self.variable),),
            edge_terms(resolved.bounds, edge),
        )
        logger.debug("Guide %s follows %s (%s)", self.variable.name, resolved.bound_id, edge)
        return self

    def _equality(self, scope: str, lhs: Tuple[Term, ...], rhs: Tuple[Term, ...]) -> None:
        def spec(builder: ConstraintBuilder) -> None:
            builder.ct(*lhs).eq(*rhs).strong()

        self.hints.register(scope, spec)

    def _ensure_axis(self, expected: str, method: str) -> None:
        if self.axis != expected:
            raise AxisMismatchError(
                f"{_GUIDE_CLASS[self.axis]}.{method}(): this method is only available "
                f"for {_GUIDE_CLASS[expected]}"
            )

    def __repr__(self) -> str:
        return f"Guide({self.axis!r}, {self.variable.name!r})"
