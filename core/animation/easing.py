"""
Easing functions for effects.

All functions take t (segment normal) in range [0.0, 1.0] and return a value
in range [0.0, 1.0].

Based on standard easing equations:
- Robert Penner's Easing Functions
- https://easings.net/
"""
import math
from typing import Callable, Dict

from core.animation.types import EasingCurve, Effect


def linear(t: float) -> float:
    """Linear interpolation - no easing."""
    return t


# Quadratic easing
def quad_in(t: float) -> float:
    """Quadratic ease-in - accelerating from zero velocity."""
    return t * t


def quad_out(t: float) -> float:
    """Quadratic ease-out - decelerating to zero velocity."""
    return t * (2 - t)


def quad_in_out(t: float) -> float:
    if t < 0.5:
        return 2 * t * t
    return -1 + (4 - 2 * t) * t


# Cubic easing
def cubic_in(t: float) -> float:
    return t * t * t


def cubic_out(t: float) -> float:
    t -= 1
    return t * t * t + 1


def cubic_in_out(t: float) -> float:
    if t < 0.5:
        return 4 * t * t * t
    t -= 1
    return 1 + 4 * t * t * t


# Sine easing
def sine_in(t: float) -> float:
    return 1 - math.cos(t * math.pi / 2)


def sine_out(t: float) -> float:
    return math.sin(t * math.pi / 2)


def sine_in_out(t: float) -> float:
    return -(math.cos(math.pi * t) - 1) / 2


EASING_FUNCTIONS: Dict[EasingCurve, Callable[[float], float]] = {
    EasingCurve.LINEAR: linear,
    EasingCurve.QUAD_IN: quad_in,
    EasingCurve.QUAD_OUT: quad_out,
    EasingCurve.QUAD_IN_OUT: quad_in_out,
    EasingCurve.CUBIC_IN: cubic_in,
    EasingCurve.CUBIC_OUT: cubic_out,
    EasingCurve.CUBIC_IN_OUT: cubic_in_out,
    EasingCurve.SINE_IN: sine_in,
    EasingCurve.SINE_OUT: sine_out,
    EasingCurve.SINE_IN_OUT: sine_in_out,
}


def get_easing_function(curve: EasingCurve) -> Callable[[float], float]:
    """
    Get easing function for a curve type.

    Args:
        curve: Easing curve type

    Returns:
        Easing function that takes t (0.0-1.0) and returns eased value
    """
    return EASING_FUNCTIONS.get(curve, linear)


def ease(t: float, curve: EasingCurve = EasingCurve.LINEAR) -> float:
    """
    Apply easing to a normal value.

    Args:
        t: Normal value (clamped to 0.0-1.0)
        curve: Easing curve to apply

    Returns:
        Eased value (0.0-1.0)
    """
    t = max(0.0, min(1.0, t))
    return get_easing_function(curve)(t)


def eased(curve: EasingCurve, effect: Effect) -> Effect:
    """Wrap an effect so it receives the eased normal instead of the raw one."""
    easing_fn = get_easing_function(curve)

    def _eased_effect(ui, normal: float) -> None:
        effect(ui, easing_fn(max(0.0, min(1.0, normal))))

    return _eased_effect
