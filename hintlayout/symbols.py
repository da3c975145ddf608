"""Diagram symbols and the registry that maps a kind to its factory."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional

from .bounds import Bounds, BoundsType, HintTarget
from .solver import ConstraintBuilder, Strength

if TYPE_CHECKING:
    from .context import LayoutContext

logger = logging.getLogger(__name__)


@dataclass
class Symbol:
    id: str
    kind: str
    bounds: Bounds
    container: Optional[Bounds] = None
    label: Optional[str] = None

    @property
    def target(self) -> HintTarget:
        return HintTarget(bound_id=self.id, bounds=self.bounds, container=self.container)


SymbolFactory = Callable[..., Symbol]


class SymbolRegistry:
    """Explicit ``kind -> factory`` table.

    A factory is called as ``factory(context, symbol_id, **options)`` and
    returns the :class:`Symbol` it built.
    """

    def __init__(self) -> None:
        self._factories: Dict[str, SymbolFactory] = {}

    def register(self, kind: str, factory: SymbolFactory) -> None:
        if kind in self._factories:
            raise ValueError(f"symbol kind {kind!r} is already registered")
        self._factories[kind] = factory

    def kinds(self) -> List[str]:
        return sorted(self._factories)

    def __contains__(self, kind: object) -> bool:
        return kind in self._factories

    def create(self, kind: str, context: "LayoutContext", **options: Any) -> Symbol:
        try:
            factory = self._factories[kind]
        except KeyError:
            raise KeyError(
                f"unknown symbol kind {kind!r}; registered kinds: {', '.join(self.kinds()) or '<none>'}"
            ) from None
        symbol_id = options.pop("id", None) or context.ids.symbol_id(kind)
        symbol = factory(context, symbol_id, **options)
        logger.debug("Created %s symbol %s", kind, symbol.id)
        return symbol


# ----------------------------------------------------------------------
# Core factories


def rectangle(
    context: "LayoutContext",
    symbol_id: str,
    width: Optional[float] = None,
    height: Optional[float] = None,
    label: Optional[str] = None,
) -> Symbol:
    """Plain box. Explicit sizes are strong; the default item size is medium."""

    bounds = context.create_bounds(symbol_id, BoundsType.LAYOUT)
    config = context.config
    if width is None:
        context.hints.set_size(bounds, width=config.item_width, strength=Strength.MEDIUM)
    else:
        context.hints.set_size(bounds, width=width, strength=Strength.STRONG)
    if height is None:
        context.hints.set_size(bounds, height=config.item_height, strength=Strength.MEDIUM)
    else:
        context.hints.set_size(bounds, height=height, strength=Strength.STRONG)
    return Symbol(id=symbol_id, kind="rectangle", bounds=bounds, label=label)


def container(
    context: "LayoutContext",
    symbol_id: str,
    padding_x: Optional[float] = None,
    padding_y: Optional[float] = None,
    header: Optional[float] = None,
    label: Optional[str] = None,
    kind: str = "container",
) -> Symbol:
    """Box whose children live in a content area inset by padding and header."""

    config = context.config
    padding_x = config.container_padding_x if padding_x is None else padding_x
    padding_y = config.container_padding_y if padding_y is None else padding_y
    header = config.container_header if header is None else header

    layout = context.create_bounds(symbol_id, BoundsType.LAYOUT)
    content = context.create_bounds(symbol_id, BoundsType.CONTAINER)

    def spec(builder: ConstraintBuilder) -> None:
        builder.ct([1, content.x]).eq([1, layout.x], [padding_x, 1]).strong()
        builder.ct([1, content.y]).eq([1, layout.y], [padding_y + header, 1]).strong()
        builder.ct([1, content.width]).eq([1, layout.width], [-2 * padding_x, 1]).strong()
        builder.ct([1, content.height]).eq([1, layout.height], [-(2 * padding_y + header), 1]).strong()
        builder.ct([1, content.z]).eq([1, layout.z]).required()

    context.hints.register(f"symbol/{symbol_id}/content", spec)
    return Symbol(id=symbol_id, kind=kind, bounds=layout, container=content, label=label)


def diagram(context: "LayoutContext", symbol_id: str, label: Optional[str] = None) -> Symbol:
    """Root container: anchored at the origin (strong) with a minimum size (weak)."""

    symbol = container(context, symbol_id, label=label, kind="diagram")
    config = context.config
    context.hints.pin(symbol, x=0, y=0, strength=Strength.STRONG)
    context.hints.min_size(symbol, config.diagram_min_width, config.diagram_min_height, Strength.WEAK)
    return symbol


def default_registry() -> SymbolRegistry:
    registry = SymbolRegistry()
    registry.register("rectangle", rectangle)
    registry.register("container", container)
    registry.register("diagram", diagram)
    return registry
