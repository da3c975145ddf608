"""DEBUG call tracing for the hint translators."""

from __future__ import annotations

import inspect
import logging
import reprlib
from functools import wraps
from typing import Any, Callable, Iterable, MutableMapping, Optional, TypeVar, cast

import numpy as np

from .bounds import Bounds, HintTarget
from .solver import LayoutVariable

F = TypeVar("F", bound=Callable[..., Any])

_MAX_ITEMS = 5

_repr = reprlib.Repr()
_repr.maxother = 160
_repr.maxlist = 10


def _layout_summary(value: Any) -> Optional[str]:
    """Short form for layout objects whose default repr drags in the solver."""

    if isinstance(value, LayoutVariable):
        return f"var({value.name})"
    if isinstance(value, Bounds):
        return f"bounds({value.bound_id}:{value.type.value})"
    if isinstance(value, HintTarget):
        if value.container is not None:
            return f"target({value.bound_id}, container={value.container.bound_id})"
        return f"target({value.bound_id})"
    symbol_target = getattr(value, "target", None)
    if isinstance(symbol_target, HintTarget) and hasattr(value, "kind"):
        return f"symbol({value.kind}:{symbol_target.bound_id})"
    return None


def _array_summary(value: np.ndarray) -> str:
    parts = [f"ndarray(shape={tuple(value.shape)}, dtype={value.dtype})", f"size={value.size}"]
    if 0 < value.size <= _MAX_ITEMS:
        parts.append(f"values={_repr.repr(value.tolist())}")
    elif value.size and np.issubdtype(value.dtype, np.number):
        parts.append(f"min={float(value.min()):.6g}")
        parts.append(f"max={float(value.max()):.6g}")
    return ", ".join(parts)


def _safe_repr(value: Any) -> str:
    if isinstance(value, np.ndarray):
        return _array_summary(value)
    summary = _layout_summary(value)
    if summary is not None:
        return summary
    if isinstance(value, (list, tuple)):
        items = [_safe_repr(item) for item in value[:_MAX_ITEMS]]
        if len(value) > _MAX_ITEMS:
            items.append("...")
        text = ", ".join(items)
        return f"({text})" if isinstance(value, tuple) else f"[{text}]"
    return _repr.repr(value)


def _format_arguments(args: Iterable[Any], kwargs: MutableMapping[str, Any]) -> str:
    parts = [_safe_repr(arg) for arg in args]
    parts.extend(f"{key}={_safe_repr(value)}" for key, value in kwargs.items())
    if not parts:
        return "no-args"
    return "args=[" + ", ".join(parts) + "]"


def debug_log_call(logger: logging.Logger, *, name: Optional[str] = None) -> Callable[[F], F]:
    """Return a decorator that emits DEBUG logs when a hint entry point runs."""

    def decorator(func: F) -> F:
        if getattr(func, "_debug_logging_wrapped", False):
            return func

        qualname = name or getattr(func, "__qualname__", func.__name__)

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any):
            if not logger.isEnabledFor(logging.DEBUG):
                return func(*args, **kwargs)
            logger.debug("Entering %s (%s)", qualname, _format_arguments(args, kwargs))
            try:
                result = func(*args, **kwargs)
            except Exception:
                logger.debug("Exception in %s", qualname, exc_info=True)
                raise
            logger.debug("Exiting %s -> %s", qualname, _safe_repr(result))
            return result

        setattr(wrapper, "_debug_logging_wrapped", True)
        return cast(F, wrapper)

    return decorator


def apply_debug_logging(
    namespace: MutableMapping[str, Any],
    *,
    logger: Optional[logging.Logger] = None,
    skip: Optional[Iterable[str]] = None,
) -> None:
    """Wrap the public functions and methods defined in a module namespace.

    Private names (leading underscore) and anything named in ``skip``, either
    ``"name"`` or ``"Class.name"``, are left untouched.
    """

    module_name = namespace.get("__name__")
    logger = logger or logging.getLogger(str(module_name))
    skip_set = set(skip or ())

    for name, value in list(namespace.items()):
        if name in skip_set or name.startswith("_") or getattr(value, "__module__", None) != module_name:
            continue
        if inspect.isfunction(value):
            namespace[name] = debug_log_call(logger, name=name)(value)
        elif inspect.isclass(value):
            for attr_name, attr_value in list(vars(value).items()):
                qualified = f"{name}.{attr_name}"
                if attr_name.startswith("_") or attr_name in skip_set or qualified in skip_set:
                    continue
                if inspect.isfunction(attr_value) and attr_value.__module__ == module_name:
                    setattr(value, attr_name, debug_log_call(logger, name=qualified)(attr_value))
