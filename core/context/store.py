"""
Per-context keyed storage.

``KeyedStore`` is the persistent (across frames) memory used by animations to
remember their start time and start value. ``LayerRegistry`` holds transient
layer transforms written by effects. Both are owned by a single ``UiContext``
and accessed from the UI thread only, so neither takes a lock.
"""
from __future__ import annotations

from typing import Any, Callable, Dict, Hashable, Iterator, Optional

from core.context.geometry import Transform
from core.logging.logger import get_logger, is_verbose_logging

logger = get_logger(__name__)

_MISSING = object()


class KeyedStore:
    """Dictionary backed key/value memory scoped to one UI context."""

    def __init__(self) -> None:
        self._data: Dict[Hashable, Any] = {}

    def get(self, key: Hashable, default: Any = None) -> Any:
        return self._data.get(key, default)

    def get_or_insert(self, key: Hashable, default: Any) -> Any:
        """Return the stored value, inserting ``default`` first if absent."""
        value = self._data.get(key, _MISSING)
        if value is _MISSING:
            self._data[key] = default
            value = default
        return value

    def get_or_insert_with(self, key: Hashable, factory: Callable[[], Any]) -> Any:
        """Like ``get_or_insert`` but only builds the default when needed."""
        value = self._data.get(key, _MISSING)
        if value is _MISSING:
            value = factory()
            self._data[key] = value
        return value

    def insert(self, key: Hashable, value: Any) -> None:
        self._data[key] = value

    def remove(self, key: Hashable) -> Optional[Any]:
        """Remove ``key`` and return its previous value, or None."""
        return self._data.pop(key, None)

    def clear(self) -> None:
        if self._data:
            logger.debug("Clearing %d stored entries", len(self._data))
        self._data.clear()

    def keys(self) -> Iterator[Hashable]:
        return iter(list(self._data.keys()))

    def __contains__(self, key: Hashable) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)


class LayerRegistry:
    """Transforms applied to whole layers, keyed by layer id."""

    def __init__(self) -> None:
        self._transforms: Dict[Hashable, Transform] = {}

    def set_transform(self, layer_id: Hashable, transform: Transform) -> None:
        if transform.is_identity():
            self._transforms.pop(layer_id, None)
            return
        self._transforms[layer_id] = transform

    def get_transform(self, layer_id: Hashable) -> Transform:
        return self._transforms.get(layer_id, Transform.IDENTITY)

    def remove_transform(self, layer_id: Hashable) -> Optional[Transform]:
        removed = self._transforms.pop(layer_id, None)
        if removed is not None and is_verbose_logging():
            logger.debug("Removed layer transform for %s: %r", layer_id, removed)
        return removed

    def clear(self) -> None:
        self._transforms.clear()

    def __contains__(self, layer_id: Hashable) -> bool:
        return layer_id in self._transforms

    def __len__(self) -> int:
        return len(self._transforms)
