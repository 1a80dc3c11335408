"""Helpers that read and write animation sessions in the context store."""
from __future__ import annotations

import copy
from typing import TYPE_CHECKING, Any, Optional, TypeVar

from core.context.ids import WidgetId

if TYPE_CHECKING:  # pragma: no cover - imported for typing only
    from core.context.context import UiContext
    from core.context.geometry import Transform

T = TypeVar("T")

START_TIME_SUFFIX = "start_time"
START_VALUE_SUFFIX = "start_value"
ANIMATION_LAYER_SUFFIX = "animation_layer"


def start_time_key(id: WidgetId) -> WidgetId:
    return id.with_suffix(START_TIME_SUFFIX)


def start_value_key(id: WidgetId) -> WidgetId:
    return id.with_suffix(START_VALUE_SUFFIX)


def animation_layer(id: WidgetId) -> WidgetId:
    """Layer id used by the scoped child of animation ``id``."""
    return id.with_suffix(ANIMATION_LAYER_SUFFIX)


def get_or_insert_start_time(ctx: "UiContext", id: WidgetId, current_time: float) -> float:
    return ctx.memory.get_or_insert(start_time_key(id), float(current_time))


def get_start_time(ctx: "UiContext", id: WidgetId) -> Optional[float]:
    return ctx.memory.get(start_time_key(id))


def clear_start_time(ctx: "UiContext", id: WidgetId) -> Optional[float]:
    return ctx.memory.remove(start_time_key(id))


def get_or_insert_start_value(ctx: "UiContext", id: WidgetId, current_value: T) -> T:
    """Return the baseline value, storing a copy of ``current_value`` if absent.

    The stored copy is frozen for the lifetime of the session, so callers that
    mutate their value in place still trigger an animation.
    """
    return ctx.memory.get_or_insert_with(
        start_value_key(id), lambda: copy.deepcopy(current_value)
    )


def clear_start_value(ctx: "UiContext", id: WidgetId) -> Optional[Any]:
    return ctx.memory.remove(start_value_key(id))


def clear_animation_layer(ctx: "UiContext", id: WidgetId) -> Optional["Transform"]:
    return ctx.layers.remove_transform(animation_layer(id))
