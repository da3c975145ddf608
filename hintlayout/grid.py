"""Grid layout: an N x M matrix of symbols placed between shared guide lines."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence

import numpy as np

from .bounds import HintTarget, as_target
from .hints import Hints
from .solver import ConstraintBuilder, LayoutVariable

logger = logging.getLogger(__name__)


def is_rect_matrix(matrix: Sequence[Sequence[Any]]) -> bool:
    """True when the matrix has at least one cell and all rows share a length."""

    if len(matrix) == 0:
        return False
    width = len(matrix[0])
    if width == 0:
        return False
    return all(len(row) == width for row in matrix)


@dataclass(frozen=True)
class Cell:
    left: LayoutVariable
    top: LayoutVariable
    right: LayoutVariable
    bottom: LayoutVariable


class GridBuilder:
    """Lay a rectangular matrix of symbols out on ``M+1`` x- and ``N+1`` y-guides.

    ``None`` cells are allowed and leave their cell empty. Call :meth:`in_` or
    :meth:`layout` exactly once to register the constraints.
    """

    def __init__(self, hints: Hints, matrix: Sequence[Sequence[Any]], default_container: Any) -> None:
        if len(matrix) == 0 or len(matrix[0]) == 0:
            raise ValueError("GridBuilder requires a non-empty matrix")
        if not is_rect_matrix(matrix):
            raise ValueError(
                "GridBuilder requires a rectangular matrix. All rows must have the same number of columns."
            )
        self.hints = hints
        self.rows = len(matrix)
        self.cols = len(matrix[0])
        self.cells: List[List[Optional[HintTarget]]] = [
            [None if item is None else as_target(item) for item in row] for row in matrix
        ]
        self.default_container = default_container
        self.container: Optional[HintTarget] = None
        self.grid_id = hints.ids.scope_id("grid")
        self.row_gap: float = 0.0
        self.column_gap: float = 0.0

        self.x: List[LayoutVariable] = []
        self.y: List[LayoutVariable] = []
        self.width: List[LayoutVariable] = []
        self.height: List[LayoutVariable] = []

    @property
    def applied(self) -> bool:
        return self.container is not None

    def gap(self, row_gap: float, column_gap: Optional[float] = None) -> "GridBuilder":
        """Space between adjacent cells; ``column_gap`` defaults to ``row_gap``.

        Every column and row but the last reserves the gap after its symbol, so
        column widths and row heights include it.
        """

        if self.applied:
            raise RuntimeError(f"GridBuilder {self.grid_id}.gap(): the grid is already laid out")
        self.row_gap = row_gap
        self.column_gap = row_gap if column_gap is None else column_gap
        return self

    def in_(self, container: Any) -> "GridBuilder":
        self._apply(as_target(container))
        return self

    def layout(self) -> "GridBuilder":
        """Lay the grid out in the diagram root."""

        self._apply(as_target(self.default_container))
        return self

    def area(self, top: int, left: int, bottom: int, right: int) -> Cell:
        """Guide lines bounding the cells ``[top, bottom) x [left, right)``."""

        if not self.applied:
            raise RuntimeError("GridBuilder.area(): call in_() or layout() first")
        if top < 0 or top > self.rows or bottom < 0 or bottom > self.rows:
            raise ValueError(
                f"Invalid row indices: top={top}, bottom={bottom}. Must be in [0, {self.rows}]"
            )
        if left < 0 or left > self.cols or right < 0 or right > self.cols:
            raise ValueError(
                f"Invalid column indices: left={left}, right={right}. Must be in [0, {self.cols}]"
            )
        if top >= bottom:
            raise ValueError(f"Invalid row indices: top={top} must be less than bottom={bottom}")
        if left >= right:
            raise ValueError(f"Invalid column indices: left={left} must be less than right={right}")
        return Cell(left=self.x[left], top=self.y[top], right=self.x[right], bottom=self.y[bottom])

    def column_widths(self) -> np.ndarray:
        return np.array([variable.value() for variable in self.width], dtype=float)

    def row_heights(self) -> np.ndarray:
        return np.array([variable.value() for variable in self.height], dtype=float)

    # ------------------------------------------------------------------

    def _apply(self, container: HintTarget) -> None:
        if self.applied:
            raise RuntimeError(f"GridBuilder {self.grid_id} was already laid out")
        self.container = container
        outer = container.enclosing
        create = self.hints.create_hint_variable
        self.x = [create(f"{self.grid_id}_x", str(i)) for i in range(self.cols + 1)]
        self.y = [create(f"{self.grid_id}_y", str(i)) for i in range(self.rows + 1)]
        self.width = [create(f"{self.grid_id}_width", str(i)) for i in range(self.cols)]
        self.height = [create(f"{self.grid_id}_height", str(i)) for i in range(self.rows)]

        def guides(builder: ConstraintBuilder) -> None:
            for col, size in enumerate(self.width):
                builder.ct([1, self.x[col + 1]]).eq([1, self.x[col]], [1, size]).required()
                builder.ct([1, size]).ge0().required()
            for row, size in enumerate(self.height):
                builder.ct([1, self.y[row + 1]]).eq([1, self.y[row]], [1, size]).required()
                builder.ct([1, size]).ge0().required()
            builder.ct([1, outer.width]).eq(*[(1, size) for size in self.width]).required()
            builder.ct([1, outer.height]).eq(*[(1, size) for size in self.height]).required()
            builder.ct([1, self.x[0]]).eq([1, outer.x]).required()
            builder.ct([1, self.y[0]]).eq([1, outer.y]).required()

        self.hints.register(f"grid/{self.grid_id}/layout", guides)

        children: List[HintTarget] = []
        for row, items in enumerate(self.cells):
            for col, target in enumerate(items):
                if target is None:
                    continue
                children.append(target)
                self._place(target, row, col)

        self.hints.enclose(container, children)
        logger.info(
            "Grid %s: %dx%d cells, %d symbol(s) in %s",
            self.grid_id,
            self.rows,
            self.cols,
            len(children),
            container.bound_id,
        )

    def _place(self, target: HintTarget, row: int, col: int) -> None:
        box = target.bounds
        top, bottom = self.y[row], self.y[row + 1]
        left, right = self.x[col], self.x[col + 1]
        cell_width, cell_height = self.width[col], self.height[row]
        right_gap = self.column_gap if col < self.cols - 1 else 0.0
        bottom_gap = self.row_gap if row < self.rows - 1 else 0.0

        def inside_cell(builder: ConstraintBuilder) -> None:
            edges = (
                (((1, box.y),), top, bottom, bottom_gap),
                (((1, box.x),), left, right, right_gap),
                (((1, box.y), (1, box.height)), top, bottom, bottom_gap),
                (((1, box.x), (1, box.width)), left, right, right_gap),
            )
            for terms, low, high, gap in edges:
                builder.ct(*terms).ge([1, low]).medium()
                builder.ct(*terms).le([1, high], [-gap, 1]).medium()

        def cell_size(builder: ConstraintBuilder) -> None:
            builder.ct([1, cell_width]).ge([1, box.width], [right_gap, 1]).strong()
            builder.ct([1, cell_height]).ge([1, box.height], [bottom_gap, 1]).strong()

        self.hints.register(f"grid/{self.grid_id}/symbol", inside_cell)
        self.hints.register(f"grid/{self.grid_id}/cell", cell_size)
