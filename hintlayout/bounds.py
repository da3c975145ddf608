"""Rectangle variables and the factory that wires their derived edges."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from .config import LayoutConfig, get_layout_config
from .solver import ConstraintBuilder, KiwiSolver, LayoutError, LayoutVariable

logger = logging.getLogger(__name__)


class DuplicateBoundsError(LayoutError, ValueError):
    """Raised when bounds are created twice for the same prefix and role."""


class BoundsType(Enum):
    LAYOUT = "layout"  # outer rectangle of a symbol
    CONTAINER = "container"  # area that can hold child symbols
    ITEM = "item"  # text, icon or other drawable part


@dataclass(frozen=True)
class Bounds:
    """Variables describing one rectangle.

    ``right``, ``bottom``, ``center_x`` and ``center_y`` are products of the
    primary variables and are only ever read by hint code.
    """

    bound_id: str
    type: BoundsType
    x: LayoutVariable
    y: LayoutVariable
    width: LayoutVariable
    height: LayoutVariable
    right: LayoutVariable
    bottom: LayoutVariable
    center_x: LayoutVariable
    center_y: LayoutVariable
    z: LayoutVariable

    @property
    def left(self) -> LayoutVariable:
        return self.x

    @property
    def top(self) -> LayoutVariable:
        return self.y

    def __repr__(self) -> str:
        return f"Bounds({self.bound_id!r}, {self.type.value})"


@dataclass(frozen=True)
class HintTarget:
    """A symbol as seen by the hint translators."""

    bound_id: str
    bounds: Bounds
    container: Optional[Bounds] = None

    @property
    def enclosing(self) -> Bounds:
        """Bounds children are laid out in: the container if any, else the outline."""

        return self.container if self.container is not None else self.bounds

    def __repr__(self) -> str:
        return f"HintTarget({self.bound_id!r})"


def as_target(value: Any) -> HintTarget:
    """Coerce bounds, symbols and targets into a :class:`HintTarget`."""

    if isinstance(value, HintTarget):
        return value
    if isinstance(value, Bounds):
        return HintTarget(bound_id=value.bound_id, bounds=value)
    target = getattr(value, "target", None)
    if isinstance(target, HintTarget):
        return target
    raise TypeError(f"cannot use {value!r} as a layout hint target")


@dataclass(frozen=True)
class BoundsValues:
    x: float
    y: float
    width: float
    height: float
    right: float
    bottom: float
    center_x: float
    center_y: float
    z: float

    @property
    def left(self) -> float:
        return self.x

    @property
    def top(self) -> float:
        return self.y


def bounds_values(bounds: Bounds) -> BoundsValues:
    """Read solved values, warning about non-finite numbers or negative sizes.

    Values are returned unchanged; clamping is left to the renderer.
    """

    values = BoundsValues(
        x=bounds.x.value(),
        y=bounds.y.value(),
        width=bounds.width.value(),
        height=bounds.height.value(),
        right=bounds.right.value(),
        bottom=bounds.bottom.value(),
        center_x=bounds.center_x.value(),
        center_y=bounds.center_y.value(),
        z=bounds.z.value(),
    )
    if not all(math.isfinite(value) for value in vars(values).values()):
        logger.warning("Invalid bounds detected for %s: %s", bounds.bound_id, values)
    if values.width < 0:
        logger.warning("Negative width detected for %s: %s", bounds.bound_id, values.width)
    if values.height < 0:
        logger.warning("Negative height detected for %s: %s", bounds.bound_id, values.height)
    return values


class BoundsFactory:
    """Creates :class:`Bounds` with their derived-edge constraints.

    Bounds are identified by ``{prefix}#{role}`` and variables are named
    ``{prefix}#{role}.{field}``, so one prefix may carry one bounds per role.
    """

    def __init__(self, solver: KiwiSolver, config: Optional[LayoutConfig] = None) -> None:
        self.solver = solver
        self.config = config or get_layout_config()
        self._bounds: Dict[Tuple[str, BoundsType], Bounds] = {}

    def create_bounds(self, prefix: str, type: BoundsType = BoundsType.LAYOUT) -> Bounds:
        type = BoundsType(type)
        if (prefix, type) in self._bounds:
            raise DuplicateBoundsError(f"{type.value} bounds with prefix {prefix!r} already exist")
        bound_id = f"{prefix}#{type.value}"

        create = self.solver.create_variable
        x = create(f"{bound_id}.x")
        y = create(f"{bound_id}.y")
        width = create(f"{bound_id}.width")
        height = create(f"{bound_id}.height")
        bounds = Bounds(
            bound_id=bound_id,
            type=type,
            x=x,
            y=y,
            width=width,
            height=height,
            right=create(f"{bound_id}.right"),
            bottom=create(f"{bound_id}.bottom"),
            center_x=create(f"{bound_id}.centerX"),
            center_y=create(f"{bound_id}.centerY"),
            z=create(f"{bound_id}.z"),
        )
        derived = self.config.derived_strength

        def spec(builder: ConstraintBuilder) -> None:
            builder.ct([1, bounds.right]).eq([1, x], [1, width]).at(derived)
            builder.ct([1, bounds.bottom]).eq([1, y], [1, height]).at(derived)
            builder.ct([1, bounds.center_x]).eq([1, x], [0.5, width]).at(derived)
            builder.ct([1, bounds.center_y]).eq([1, y], [0.5, height]).at(derived)
            builder.ct([1, width]).ge0().required()
            builder.ct([1, height]).ge0().required()

        self.solver.create_constraint(f"bounds/{bound_id}", spec)
        self._bounds[(prefix, type)] = bounds
        logger.debug("Created %s bounds %s", type.value, bound_id)
        return bounds

    def get(self, prefix: str, type: BoundsType = BoundsType.LAYOUT) -> Bounds:
        try:
            return self._bounds[(prefix, BoundsType(type))]
        except KeyError:
            raise KeyError(f"Unknown {BoundsType(type).value} bounds {prefix!r}") from None

    def all(self) -> List[Bounds]:
        return list(self._bounds.values())

    def __len__(self) -> int:
        return len(self._bounds)
