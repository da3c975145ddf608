"""Layout configuration defaults."""

from __future__ import annotations

import copy
from dataclasses import dataclass

from .solver.model import Strength


@dataclass
class LayoutConfig:
    """Gaps, sizes and strengths used when a hint does not specify its own."""

    horizontal_gap: float = 80.0
    vertical_gap: float = 50.0
    # derived-edge equalities (right, bottom, center_x, center_y)
    derived_strength: Strength = Strength.STRONG
    diagram_min_width: float = 200.0
    diagram_min_height: float = 150.0
    container_padding_x: float = 40.0
    container_padding_y: float = 25.0
    container_header: float = 0.0
    item_width: float = 100.0
    item_height: float = 50.0


_LAYOUT_CONFIG = LayoutConfig()


def get_layout_config() -> LayoutConfig:
    return copy.deepcopy(_LAYOUT_CONFIG)


def set_layout_config(config: LayoutConfig) -> None:
    global _LAYOUT_CONFIG
    _LAYOUT_CONFIG = copy.deepcopy(config)
