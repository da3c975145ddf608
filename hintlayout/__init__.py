from .bounds import (
    Bounds,
    BoundsFactory,
    BoundsType,
    BoundsValues,
    DuplicateBoundsError,
    HintTarget,
    as_target,
    bounds_values,
)
from .config import LayoutConfig, get_layout_config, set_layout_config
from .context import LayoutContext, LayoutSolution
from .figure import FigureBuilder
from .fluent import AlignBuilder, ArrangeBuilder, ArrangeReady, EncloseBuilder, EncloseReady
from .grid import Cell, GridBuilder, is_rect_matrix
from .guide import AxisMismatchError, Guide, GuideFollowError
from .hints import Hints
from .ids import IdGenerator
from .solver import (
    ConstraintBuilder,
    ConstraintChainError,
    ConstraintExpr,
    ConstraintRecord,
    ForeignVariableError,
    KiwiSolver,
    LayoutError,
    LayoutUnsatisfiableError,
    LayoutVariable,
    Strength,
    SuggestHandle,
    SuggestHandleDisposedError,
    UnsolvedLayoutError,
)
from .symbols import Symbol, SymbolRegistry, default_registry

__all__ = [
    'Bounds',
    'BoundsFactory',
    'BoundsType',
    'BoundsValues',
    'DuplicateBoundsError',
    'HintTarget',
    'as_target',
    'bounds_values',
    'LayoutConfig',
    'get_layout_config',
    'set_layout_config',
    'LayoutContext',
    'LayoutSolution',
    'FigureBuilder',
    'AlignBuilder',
    'ArrangeBuilder',
    'ArrangeReady',
    'EncloseBuilder',
    'EncloseReady',
    'Cell',
    'GridBuilder',
    'is_rect_matrix',
    'AxisMismatchError',
    'Guide',
    'GuideFollowError',
    'Hints',
    'IdGenerator',
    'ConstraintBuilder',
    'ConstraintChainError',
    'ConstraintExpr',
    'ConstraintRecord',
    'ForeignVariableError',
    'KiwiSolver',
    'LayoutError',
    'LayoutUnsatisfiableError',
    'LayoutVariable',
    'Strength',
    'SuggestHandle',
    'SuggestHandleDisposedError',
    'UnsolvedLayoutError',
    'Symbol',
    'SymbolRegistry',
    'default_registry',
]
