"""
Effect functions for out/in animation segments.

Every effect has the signature ``(ui, normal) -> None`` and mutates only the
scoped ``Ui`` it is given. Out effects go from the resting look at ``0.0``
towards hidden; in effects go from hidden towards the resting look.
"""
from enum import Enum
from typing import Tuple

from core.animation.easing import eased
from core.animation.types import EasingCurve, Effect
from core.constants.sizes import SLIDE_DISTANCE
from core.context.geometry import Transform


class SlideDirection(Enum):
    """Direction the content travels while sliding."""
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"

    def vector(self, distance: float = SLIDE_DISTANCE) -> Tuple[float, float]:
        return {
            SlideDirection.LEFT: (-distance, 0.0),
            SlideDirection.RIGHT: (distance, 0.0),
            SlideDirection.UP: (0.0, -distance),
            SlideDirection.DOWN: (0.0, distance),
        }[self]


# ---------------------------------------------------------------------------
# Composition helpers
# ---------------------------------------------------------------------------

def compose(*effects: Effect) -> Effect:
    """Chain effects; each receives the same scope and normal, in order."""

    def _composed(ui, normal: float) -> None:
        for effect in effects:
            effect(ui, normal)

    return _composed


def reverse(effect: Effect) -> Effect:
    """Play ``effect`` backwards (normal ``n`` becomes ``1 - n``)."""

    def _reversed(ui, normal: float) -> None:
        effect(ui, 1.0 - normal)

    return _reversed


# ---------------------------------------------------------------------------
# Fade
# ---------------------------------------------------------------------------

def fade_out(ui, normal: float) -> None:
    ui.set_opacity(1.0 - normal)


def fade_in(ui, normal: float) -> None:
    ui.set_opacity(normal)


# ---------------------------------------------------------------------------
# Slide
# ---------------------------------------------------------------------------

def slide(direction: SlideDirection, distance: float = SLIDE_DISTANCE) -> Tuple[Effect, Effect]:
    """
    Build an (out, in) pair that slides the layer along ``direction``.

    The out effect moves the content away from its resting position; the in
    effect brings it back from the opposite side.
    """
    vx, vy = direction.vector(distance)

    def _slide_out(ui, normal: float) -> None:
        ui.set_layer_transform(Transform.from_translation(vx * normal, vy * normal))

    def _slide_in(ui, normal: float) -> None:
        remaining = 1.0 - normal
        ui.set_layer_transform(Transform.from_translation(-vx * remaining, -vy * remaining))

    return _slide_out, _slide_in


slide_left_out, slide_left_in = slide(SlideDirection.LEFT)
slide_right_out, slide_right_in = slide(SlideDirection.RIGHT)
slide_up_out, slide_up_in = slide(SlideDirection.UP)
slide_down_out, slide_down_in = slide(SlideDirection.DOWN)


def slide_fade_ease(direction: SlideDirection,
                    distance: float = SLIDE_DISTANCE) -> Tuple[Effect, Effect]:
    """Slide plus fade, quadratic ease-in on the way out and ease-out on the way in."""
    out_fn, in_fn = slide(direction, distance)
    return (
        eased(EasingCurve.QUAD_IN, compose(fade_out, out_fn)),
        eased(EasingCurve.QUAD_OUT, compose(fade_in, in_fn)),
    )


slide_fade_ease_left_out, slide_fade_ease_left_in = slide_fade_ease(SlideDirection.LEFT)
slide_fade_ease_right_out, slide_fade_ease_right_in = slide_fade_ease(SlideDirection.RIGHT)


# ---------------------------------------------------------------------------
# Clip
# ---------------------------------------------------------------------------

def clip_width_in(ui, normal: float) -> None:
    rect = ui.clip_rect
    ui.set_clip_rect(rect.with_width(rect.width * normal))


def clip_height_in(ui, normal: float) -> None:
    rect = ui.clip_rect
    ui.set_clip_rect(rect.with_height(rect.height * normal))


clip_width_out = reverse(clip_width_in)
clip_height_out = reverse(clip_height_in)


# ---------------------------------------------------------------------------
# Colour tint
# ---------------------------------------------------------------------------

def tint(channel: int) -> Effect:
    """
    Build an in effect that fades in while the text colour settles from a
    saturated ``channel`` (0 = red, 1 = green, 2 = blue) to its resting value.
    """
    if channel not in (0, 1, 2):
        raise ValueError(f"channel must be 0, 1 or 2, got {channel!r}")

    def _tint_in(ui, normal: float) -> None:
        color = list(ui.text_color)
        color[channel] += (255 - color[channel]) * (1.0 - normal)
        ui.override_text_color(tuple(color))
        ui.set_opacity(normal)

    return _tint_in


fade_red_in = tint(0)
fade_red_out = reverse(fade_red_in)
fade_green_in = tint(1)
fade_green_out = reverse(fade_green_in)
