"""Deterministic identifier generation.

Every counter lives on an :class:`IdGenerator` instance that is passed to the
objects needing ids, so two layouts built side by side never share numbering.
"""

from __future__ import annotations

from collections import defaultdict
from typing import DefaultDict, Optional


class IdGenerator:
    def __init__(self, namespace: str = "diagram") -> None:
        self.namespace = namespace
        self._counters: DefaultDict[str, int] = defaultdict(int)

    def next(self, key: str) -> int:
        value = self._counters[key]
        self._counters[key] = value + 1
        return value

    def symbol_id(self, kind: str) -> str:
        """``"diagram:rectangle-0"``, ``"diagram:rectangle-1"``, ..."""

        return f"{self.namespace}:{kind}-{self.next('symbol:' + kind)}"

    def constraint_id(self, scope: Optional[str] = None) -> str:
        if scope is None:
            return f"constraints/{self.next('constraint')}"
        return f"constraints/{scope}/{self.next('constraint:' + scope)}"

    def hint_variable_name(self, base: str = "var", name: Optional[str] = None) -> str:
        suffix = name if name is not None else str(self.next("hint:" + base))
        return f"hint:{base}_{suffix}"

    def scope_id(self, kind: str) -> str:
        """Short id for composite builders such as grids and figures."""

        return f"{kind}-{self.next('scope:' + kind)}"
