"""
Animation types, enums, and dataclasses.

Defines the immutable animation definitions (segments and out/in pairs) and
the derived ``RunState`` reported by the timing engine.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import TYPE_CHECKING, Callable, TypeVar

from core.animation.errors import AnimationConfigError
from core.animation import memory

if TYPE_CHECKING:  # pragma: no cover - imported for typing only
    from core.context.ids import WidgetId
    from core.context.ui import Ui

R = TypeVar("R")

# Effect callback: mutates the scoped ``Ui`` given the segment normal (0.0-1.0).
Effect = Callable[["Ui", float], None]


class EasingCurve(Enum):
    """
    Easing curve types for effects.

    Easing functions control the rate of change of the animated value over time.
    """
    LINEAR = "linear"

    QUAD_IN = "quad_in"
    QUAD_OUT = "quad_out"
    QUAD_IN_OUT = "quad_in_out"

    CUBIC_IN = "cubic_in"
    CUBIC_OUT = "cubic_out"
    CUBIC_IN_OUT = "cubic_in_out"

    SINE_IN = "sine_in"
    SINE_OUT = "sine_out"
    SINE_IN_OUT = "sine_in_out"


class Phase(IntEnum):
    """Animation segment phase, ordered by progression."""
    OUT = 0
    IN = 1
    NONE = 2


@dataclass(frozen=True, order=True)
class RunState:
    """
    An identified animation segment and *normal*.

    ``normal`` is the fractional completion of the active segment in
    ``[0.0, 1.0)``. The terminal state (``RunState.NONE``) always carries a
    normal of ``0.0``. Instances order by phase first, so a sequence of run
    states for one animation never decreases.
    """
    phase: Phase
    normal: float = 0.0

    @classmethod
    def out_seg(cls, normal: float) -> "RunState":
        return cls(Phase.OUT, normal)

    @classmethod
    def in_seg(cls, normal: float) -> "RunState":
        return cls(Phase.IN, normal)

    def is_running(self) -> bool:
        """Return True if the animation is in either the out or in segment."""
        return self.phase is not Phase.NONE

    def is_out(self) -> bool:
        return self.phase is Phase.OUT

    def is_in(self) -> bool:
        return self.phase is Phase.IN

    def __repr__(self) -> str:
        if self.phase is Phase.OUT:
            return f"RunState.out_seg({self.normal!r})"
        if self.phase is Phase.IN:
            return f"RunState.in_seg({self.normal!r})"
        return "RunState.NONE"


RunState.NONE = RunState(Phase.NONE)


def _no_effect(ui: "Ui", normal: float) -> None:
    pass


@dataclass(frozen=True)
class AnimationSegment:
    """
    One half (out or in) of an animation.

    Args:
        duration: Segment length in seconds. ``0`` means instantaneous.
        effect: Callback mutating the scoped ``Ui`` for the given normal.

    Raises:
        AnimationConfigError: If the duration is negative or not finite, or
            the effect is not callable.
    """
    duration: float
    effect: Effect = _no_effect

    def __post_init__(self) -> None:
        if isinstance(self.duration, bool):
            raise AnimationConfigError(
                f"Segment duration must be a number, got {self.duration!r}"
            )
        try:
            duration = float(self.duration)
        except (TypeError, ValueError) as exc:
            raise AnimationConfigError(
                f"Segment duration must be a number, got {self.duration!r}"
            ) from exc
        if not math.isfinite(duration) or duration < 0.0:
            raise AnimationConfigError(
                f"Segment duration must be finite and >= 0, got {duration!r}"
            )
        if not callable(self.effect):
            raise AnimationConfigError("Segment effect must be callable")
        object.__setattr__(self, "duration", duration)

    def is_instant(self) -> bool:
        return self.duration == 0.0

    def animate(
        self,
        ui: "Ui",
        id: "WidgetId",
        normal: float,
        add_contents: Callable[["Ui"], R],
    ) -> R:
        """Run the effect and contents inside a scope on the animation layer.

        The child handle is invalidated as soon as this call returns.
        """
        with ui.scope(memory.animation_layer(id)) as child:
            self.effect(child, normal)
            return add_contents(child)


AnimationSegment.EMPTY = AnimationSegment(0.0, _no_effect)


@dataclass(frozen=True)
class Animation:
    """
    An out/in animation definition.

    The out segment runs first and shows the previous value; the in segment
    follows and shows the new value. Definitions hold no mutable state and may
    be shared freely between animations.

    Example:
        FADE = Animation.new(
            0.3,
            lambda ui, normal: ui.set_opacity(1.0 - normal),
            lambda ui, normal: ui.set_opacity(normal),
        )
    """
    out_seg: AnimationSegment = AnimationSegment.EMPTY
    in_seg: AnimationSegment = AnimationSegment.EMPTY

    def __post_init__(self) -> None:
        for name in ("out_seg", "in_seg"):
            if not isinstance(getattr(self, name), AnimationSegment):
                raise AnimationConfigError(f"{name} must be an AnimationSegment")

    @classmethod
    def new(cls, duration: float, out_fn: Effect, in_fn: Effect) -> "Animation":
        """Create an animation whose segments share one duration."""
        return cls(AnimationSegment(duration, out_fn), AnimationSegment(duration, in_fn))

    @classmethod
    def new_out(cls, duration: float, out_fn: Effect) -> "Animation":
        """Create an out-only animation, used for hiding."""
        return cls(AnimationSegment(duration, out_fn), AnimationSegment.EMPTY)

    @classmethod
    def new_in(cls, duration: float, in_fn: Effect) -> "Animation":
        """Create an in-only animation, used for presenting."""
        return cls(AnimationSegment.EMPTY, AnimationSegment(duration, in_fn))

    @classmethod
    def from_segments(cls, out_seg: AnimationSegment, in_seg: AnimationSegment) -> "Animation":
        return cls(out_seg, in_seg)

    @property
    def total_duration(self) -> float:
        return self.out_seg.duration + self.in_seg.duration

    def with_durations(self, out_duration: float, in_duration: float) -> "Animation":
        """Return a copy with the same effects and new segment durations."""
        return Animation(
            AnimationSegment(out_duration, self.out_seg.effect),
            AnimationSegment(in_duration, self.in_seg.effect),
        )


Animation.EMPTY = Animation(AnimationSegment.EMPTY, AnimationSegment.EMPTY)


__all__ = [
    "Animation",
    "AnimationSegment",
    "EasingCurve",
    "Effect",
    "Phase",
    "RunState",
]
