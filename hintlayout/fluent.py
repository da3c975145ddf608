"""Chained hint builders.

Each step returns an object exposing only the calls that are legal next::

    arrange(a, b, c)                 -> ArrangeBuilder
    arrange(a, b, c).margin(20)      -> ArrangeReady
    arrange(a, b, c).margin(20).horizontal()

    align(a, b).left()
    enclose(a, b).through(label).in_(box)
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence

from .bounds import HintTarget, as_target
from .hints import HORIZONTAL, VERTICAL, Hints
from .solver import ConstraintRecord


class ArrangeReady:
    """Arrangement with its gap chosen; only the axis is left."""

    def __init__(self, hints: Hints, targets: Sequence[HintTarget], gap: Optional[float]) -> None:
        self._hints = hints
        self._targets = list(targets)
        self.gap = gap

    def horizontal(self) -> Optional[ConstraintRecord]:
        return self._hints.arrange(self._targets, HORIZONTAL, self.gap)

    def vertical(self) -> Optional[ConstraintRecord]:
        return self._hints.arrange(self._targets, VERTICAL, self.gap)


class ArrangeBuilder(ArrangeReady):
    def __init__(self, hints: Hints, targets: Sequence[Any]) -> None:
        super().__init__(hints, [as_target(target) for target in targets], None)

    def margin(self, value: float) -> ArrangeReady:
        return ArrangeReady(self._hints, self._targets, value)


class AlignBuilder:
    def __init__(self, hints: Hints, targets: Sequence[Any]) -> None:
        self._hints = hints
        self._targets = [as_target(target) for target in targets]

    def left(self) -> Optional[ConstraintRecord]:
        return self._hints.align_left(self._targets)

    def right(self) -> Optional[ConstraintRecord]:
        return self._hints.align_right(self._targets)

    def top(self) -> Optional[ConstraintRecord]:
        return self._hints.align_top(self._targets)

    def bottom(self) -> Optional[ConstraintRecord]:
        return self._hints.align_bottom(self._targets)

    def center_x(self) -> Optional[ConstraintRecord]:
        return self._hints.align_center_x(self._targets)

    def center_y(self) -> Optional[ConstraintRecord]:
        return self._hints.align_center_y(self._targets)

    def width(self) -> Optional[ConstraintRecord]:
        return self._hints.align_width(self._targets)

    def height(self) -> Optional[ConstraintRecord]:
        return self._hints.align_height(self._targets)

    def size(self) -> Optional[ConstraintRecord]:
        return self._hints.align_size(self._targets)


class EncloseReady:
    def __init__(self, hints: Hints, children: List[HintTarget], default_container: Any) -> None:
        self._hints = hints
        self._children = children
        self._default_container = default_container

    def in_(self, container: Any) -> Optional[ConstraintRecord]:
        return self._hints.enclose(container, self._children)

    def layout(self) -> Optional[ConstraintRecord]:
        """Enclose in the diagram root."""

        return self._hints.enclose(self._default_container, self._children)


class EncloseBuilder(EncloseReady):
    def __init__(self, hints: Hints, children: Sequence[Any], default_container: Any) -> None:
        super().__init__(hints, [as_target(child) for child in children], default_container)

    def through(self, *overlays: Any) -> EncloseReady:
        """Add overlay symbols (labels, borders) that are enclosed like children."""

        extra = [as_target(overlay) for overlay in overlays]
        return EncloseReady(self._hints, self._children + extra, self._default_container)
