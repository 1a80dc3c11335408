"""
Named effect pairs and ready-made animations.

``EffectType`` maps a persisted setting name to its out/in effect functions so
that an ``Animation`` can be assembled from configuration at runtime.
"""
from enum import Enum
from typing import Dict, Optional, Tuple

from core.animation.types import Animation, AnimationSegment, Effect
from core.constants.timing import DEFAULT_SEGMENT_DURATION_S
from core.logging.logger import get_logger
from transitions import effects

logger = get_logger(__name__)


class EffectType(Enum):
    """Effects selectable in the showcase demo and settings."""
    FADE = "fade"
    SLIDE_FADE_EASE_LEFT = "slide_fade_ease_left"
    SLIDE_FADE_EASE_RIGHT = "slide_fade_ease_right"
    CLIP_WIDTH = "clip_width"
    CLIP_HEIGHT = "clip_height"
    FADE_RED = "fade_red"
    FADE_GREEN = "fade_green"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def out_fn(self) -> Effect:
        return _EFFECTS[self][0]

    @property
    def in_fn(self) -> Effect:
        return _EFFECTS[self][1]

    def next(self) -> "EffectType":
        """Return the following effect type, wrapping around."""
        members = list(EffectType)
        return members[(members.index(self) + 1) % len(members)]

    @classmethod
    def from_name(cls, name: str, default: Optional["EffectType"] = None) -> "EffectType":
        """Look up an effect type by its setting value.

        Unknown names fall back to ``default`` (or ``SLIDE_FADE_EASE_RIGHT``).
        """
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            fallback = default or cls.SLIDE_FADE_EASE_RIGHT
            logger.warning("[FALLBACK] Unknown effect type %r, using %s", name, fallback.value)
            return fallback


_LABELS: Dict[EffectType, str] = {
    EffectType.FADE: "Fade",
    EffectType.SLIDE_FADE_EASE_LEFT: "Slide fade ease left",
    EffectType.SLIDE_FADE_EASE_RIGHT: "Slide fade ease right",
    EffectType.CLIP_WIDTH: "Clip width",
    EffectType.CLIP_HEIGHT: "Clip height",
    EffectType.FADE_RED: "Fade red",
    EffectType.FADE_GREEN: "Fade green",
}

_EFFECTS: Dict[EffectType, Tuple[Effect, Effect]] = {
    EffectType.FADE: (effects.fade_out, effects.fade_in),
    EffectType.SLIDE_FADE_EASE_LEFT: (
        effects.slide_fade_ease_left_out, effects.slide_fade_ease_left_in,
    ),
    EffectType.SLIDE_FADE_EASE_RIGHT: (
        effects.slide_fade_ease_right_out, effects.slide_fade_ease_right_in,
    ),
    EffectType.CLIP_WIDTH: (effects.clip_width_out, effects.clip_width_in),
    EffectType.CLIP_HEIGHT: (effects.clip_height_out, effects.clip_height_in),
    EffectType.FADE_RED: (effects.fade_red_out, effects.fade_red_in),
    EffectType.FADE_GREEN: (effects.fade_green_out, effects.fade_green_in),
}


def build_animation(out_type: EffectType, out_duration: float,
                    in_type: EffectType, in_duration: float) -> Animation:
    """Assemble an animation from two configured effect types."""
    return Animation.from_segments(
        AnimationSegment(out_duration, out_type.out_fn),
        AnimationSegment(in_duration, in_type.in_fn),
    )


FADE = Animation.new(DEFAULT_SEGMENT_DURATION_S, effects.fade_out, effects.fade_in)
FADE_IN = Animation.new_in(DEFAULT_SEGMENT_DURATION_S, effects.fade_in)
FADE_OUT = Animation.new_out(DEFAULT_SEGMENT_DURATION_S, effects.fade_out)
SLIDE_FADE_LEFT = Animation.new(
    DEFAULT_SEGMENT_DURATION_S,
    effects.slide_fade_ease_left_out,
    effects.slide_fade_ease_left_in,
)
SLIDE_FADE_RIGHT = Animation.new(
    DEFAULT_SEGMENT_DURATION_S,
    effects.slide_fade_ease_right_out,
    effects.slide_fade_ease_right_in,
)
