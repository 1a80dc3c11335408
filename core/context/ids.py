"""
Opaque identifiers for animations and layers.

A ``WidgetId`` is derived from a caller supplied name (string, tuple or
another id). Sub-keys are built with ``with_suffix`` so that several values
can be stored per animation without colliding.
"""
from __future__ import annotations

from dataclasses import dataclass
from collections.abc import Hashable
from typing import Tuple, Union

IdSource = Union["WidgetId", str, Tuple[Hashable, ...], Hashable]


@dataclass(frozen=True)
class WidgetId:
    """Hashable composite identifier."""
    parts: Tuple[Hashable, ...]

    @classmethod
    def of(cls, source: IdSource) -> "WidgetId":
        if isinstance(source, WidgetId):
            return source
        if isinstance(source, tuple):
            return cls(source)
        if not isinstance(source, Hashable):
            raise TypeError(f"Animation id must be hashable, got {type(source).__name__}")
        return cls((source,))

    def with_suffix(self, suffix: Hashable) -> "WidgetId":
        return WidgetId(self.parts + (suffix,))

    def __str__(self) -> str:
        return "/".join(str(part) for part in self.parts)

    def __repr__(self) -> str:
        return f"WidgetId({str(self)!r})"


ROOT_LAYER = WidgetId(("__root_layer__",))

