"""Out/in animation framework."""

from .errors import AnimationError, AnimationConfigError, ScopeInvalidatedError
from .types import (
    Animation,
    AnimationSegment,
    EasingCurve,
    Effect,
    Phase,
    RunState,
)
from .easing import ease, eased, get_easing_function, EASING_FUNCTIONS
from .timing import AnimationTimeline, evaluate
from .controller import animate, run_state

__all__ = [
    # Errors
    'AnimationError',
    'AnimationConfigError',
    'ScopeInvalidatedError',

    # Types
    'Animation',
    'AnimationSegment',
    'EasingCurve',
    'Effect',
    'Phase',
    'RunState',

    # Easing
    'ease',
    'eased',
    'get_easing_function',
    'EASING_FUNCTIONS',

    # Timing and control
    'AnimationTimeline',
    'evaluate',
    'animate',
    'run_state',
]
