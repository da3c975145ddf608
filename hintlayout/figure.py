"""Figure layout: ragged rows stacked top to bottom inside a container."""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Sequence

from .bounds import HintTarget, as_target
from .hints import Hints

logger = logging.getLogger(__name__)

_ALIGN_EDGES = {"left": "left", "center": "center_x", "right": "right"}


class FigureBuilder:
    def __init__(self, hints: Hints, rows: Sequence[Sequence[Any]], default_container: Any) -> None:
        self.hints = hints
        self.rows: List[List[HintTarget]] = [
            [as_target(item) for item in row] for row in rows if len(row) > 0
        ]
        self.default_container = default_container
        self._row_gap: Optional[float] = None
        self._column_gap: Optional[float] = None
        self._align: Optional[str] = None
        self.container: Optional[HintTarget] = None

    def gap(self, row_gap: float) -> "FigureBuilder":
        """Vertical gap between rows."""

        self._row_gap = row_gap
        return self

    def column_gap(self, gap: float) -> "FigureBuilder":
        self._column_gap = gap
        return self

    def align(self, align: str) -> "FigureBuilder":
        if align not in _ALIGN_EDGES:
            raise ValueError(f"figure alignment must be one of {', '.join(_ALIGN_EDGES)}, got {align!r}")
        self._align = align
        return self

    def in_(self, container: Any) -> "FigureBuilder":
        self._apply(as_target(container))
        return self

    def layout(self) -> "FigureBuilder":
        self._apply(as_target(self.default_container))
        return self

    def _apply(self, container: HintTarget) -> None:
        if self.container is not None:
            raise RuntimeError("FigureBuilder was already laid out")
        self.container = container
        hints = self.hints

        for row in self.rows:
            hints.arrange_horizontal(row, self._column_gap)
        hints.arrange_vertical([row[0] for row in self.rows], self._row_gap)

        # rows[0][0] leads, so it is the alignment anchor.
        children = [target for row in self.rows for target in row]
        if self._align is not None:
            hints.align(_ALIGN_EDGES[self._align], children)
        hints.enclose(container, children)
        logger.info(
            "Figure in %s: %d row(s), %d symbol(s)", container.bound_id, len(self.rows), len(children)
        )
