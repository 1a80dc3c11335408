"""
Trigger/session controller.

``animate()`` is called once per frame for each animated value. It compares
the value against the stored baseline, lazily starts a session when they
differ, and delegates to the timing engine to pick which segment effect to
apply and whether the previous or the new value is shown.

A value change while a session is running does not restart it: the session
keeps its start time and baseline, the in segment shows whatever value is
current on each frame, and the next change after cleanup starts a fresh
session. A change back to the baseline ends the running session at once.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Optional, TypeVar

from core.animation import memory
from core.animation.timing import AnimationTimeline
from core.animation.types import Animation, Phase, RunState
from core.context.ids import IdSource, WidgetId
from core.logging.logger import get_logger, is_verbose_logging

if TYPE_CHECKING:  # pragma: no cover - imported for typing only
    from core.context.ui import Ui

logger = get_logger(__name__)

T = TypeVar("T")
R = TypeVar("R")


def animate(
    ui: "Ui",
    id: IdSource,
    value: T,
    animation: Animation,
    add_contents: Callable[["Ui", T], R],
) -> R:
    """
    Animate transitions between changes of ``value``.

    Args:
        ui: The current scope. Its context provides the store and clock.
        id: A unique identifier for this animation.
        value: The value that triggers the animation when it changes.
        animation: The out/in definition to use for the current frame.
        add_contents: Renders the given value into the given scope.

    Returns:
        Whatever ``add_contents`` returns.

    Example:
        FADE = Animation.new(0.3, fade_out, fade_in)

        animate(ui, "counter", count, FADE, lambda ui, value: ui.label(str(value)))
    """
    id = WidgetId.of(id)
    ctx = ui.ctx
    current_time = ctx.time

    start_value = memory.get_or_insert_start_value(ctx, id, value)
    if start_value == value:
        if memory.get_start_time(ctx, id) is not None:
            # Reverted mid-flight: drop the session but keep the baseline.
            _end_session(ui, id, keep_baseline=True)
        return add_contents(ui, value)

    if memory.get_start_time(ctx, id) is None:
        logger.debug(
            "Animation %s triggered at t=%.3f (out=%.3fs, in=%.3fs)",
            id, current_time, animation.out_seg.duration, animation.in_seg.duration,
        )
    start_time = memory.get_or_insert_start_time(ctx, id, current_time)

    timeline = AnimationTimeline(start_time, current_time, animation)
    state = timeline.run_state()
    if is_verbose_logging():
        logger.debug("Animation %s: %r via %r", id, state, timeline)

    return _animate_state(ui, id, state, animation, start_value, value, add_contents)


def _animate_state(
    ui: "Ui",
    id: WidgetId,
    state: RunState,
    animation: Animation,
    start_value: T,
    current_value: T,
    add_contents: Callable[["Ui", T], R],
) -> R:
    ctx = ui.ctx

    if state.phase is Phase.OUT:
        ctx.request_repaint()
        return animation.out_seg.animate(
            ui, id, state.normal, lambda child: add_contents(child, start_value)
        )

    if state.phase is Phase.IN:
        ctx.request_repaint()
        memory.clear_animation_layer(ctx, id)
        return animation.in_seg.animate(
            ui, id, state.normal, lambda child: add_contents(child, current_value)
        )

    _end_session(ui, id)
    return add_contents(ui, current_value)


def _end_session(ui: "Ui", id: WidgetId, keep_baseline: bool = False) -> None:
    ctx = ui.ctx
    if not keep_baseline:
        memory.clear_start_value(ctx, id)
    start_time: Optional[float] = memory.clear_start_time(ctx, id)
    memory.clear_animation_layer(ctx, id)
    if start_time is not None:
        logger.debug(
            "Animation %s finished after %.3fs", id, ctx.time - start_time
        )


def run_state(ui: "Ui", id: IdSource, animation: Animation) -> RunState:
    """
    Get the ``RunState`` of the animation ``id`` without triggering it.

    Returns ``RunState.NONE`` for animations with no running session.

    Example:
        if run_state(ui, "counter", FADE).is_running():
            ui.button("Increment", enabled=False)
    """
    id = WidgetId.of(id)
    ctx = ui.ctx
    start_time = memory.get_start_time(ctx, id)
    if start_time is None:
        return RunState.NONE
    return AnimationTimeline(start_time, ctx.time, animation).run_state()
