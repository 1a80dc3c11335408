"""
Animation timing engine.

Maps a session start time, the current frame time and an ``Animation`` to the
active ``RunState``. The engine is pure: replaying the same times always gives
the same states.

The out segment spans ``[start, start + out_dur)`` and the in segment spans
``[start + out_dur, start + out_dur + in_dur)``. Elapsed time is clamped to
zero, so times before the start report a normal of ``0.0``. Boundaries are
exclusive, so a running segment never reports a normal of exactly ``1.0``.
"""
from __future__ import annotations

from typing import Optional

from core.animation.types import Animation, RunState


class AnimationTimeline:
    """The two segments of one animation session laid out on the clock."""

    __slots__ = ("start_time", "current_time", "animation")

    def __init__(self, start_time: float, current_time: float, animation: Animation) -> None:
        self.start_time = float(start_time)
        self.current_time = float(current_time)
        self.animation = animation

    @property
    def out_dur(self) -> float:
        return self.animation.out_seg.duration

    @property
    def out_start(self) -> float:
        return self.start_time

    @property
    def out_end(self) -> float:
        return self.out_start + self.out_dur

    def out_elapsed(self) -> Optional[float]:
        """Elapsed time of the out segment, or None once it has finished.

        Returns ``0.0`` if the animation has yet to begin.
        """
        elapsed = max(0.0, self.current_time - self.out_start)
        return elapsed if elapsed < self.out_dur else None

    def out_elapsed_normal(self) -> Optional[float]:
        elapsed = self.out_elapsed()
        return None if elapsed is None else elapsed / self.out_dur

    @property
    def in_dur(self) -> float:
        return self.animation.in_seg.duration

    @property
    def in_start(self) -> float:
        return self.out_end

    @property
    def in_end(self) -> float:
        return self.in_start + self.in_dur

    def in_elapsed(self) -> Optional[float]:
        """Elapsed time of the in segment, or None once it has finished.

        Returns ``0.0`` while the out segment is still running.
        """
        elapsed = max(0.0, self.current_time - self.in_start)
        return elapsed if elapsed < self.in_dur else None

    def in_elapsed_normal(self) -> Optional[float]:
        elapsed = self.in_elapsed()
        return None if elapsed is None else elapsed / self.in_dur

    def run_state(self) -> RunState:
        normal = self.out_elapsed_normal()
        if normal is not None:
            return RunState.out_seg(normal)
        normal = self.in_elapsed_normal()
        if normal is not None:
            return RunState.in_seg(normal)
        return RunState.NONE

    def __repr__(self) -> str:
        return (
            f"AnimationTimeline(start={self.start_time:.4f}, now={self.current_time:.4f}, "
            f"out={self.out_dur:.3f}s, in={self.in_dur:.3f}s)"
        )


def evaluate(start_time: float, current_time: float, animation: Animation) -> RunState:
    """Return the run state of ``animation`` at ``current_time``."""
    return AnimationTimeline(start_time, current_time, animation).run_state()
