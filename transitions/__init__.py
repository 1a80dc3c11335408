"""Effects and ready-made out/in animations."""

from .effects import SlideDirection, compose, reverse, slide, slide_fade_ease, tint
from .presets import (
    EffectType,
    build_animation,
    FADE,
    FADE_IN,
    FADE_OUT,
    SLIDE_FADE_LEFT,
    SLIDE_FADE_RIGHT,
)

__all__ = [
    'SlideDirection',
    'compose',
    'reverse',
    'slide',
    'slide_fade_ease',
    'tint',
    'EffectType',
    'build_animation',
    'FADE',
    'FADE_IN',
    'FADE_OUT',
    'SLIDE_FADE_LEFT',
    'SLIDE_FADE_RIGHT',
]
