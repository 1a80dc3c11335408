"""
Exceptions raised by the animation framework.

All failures surface at configuration time. The timing engine itself is
total over its numeric domain and never raises.
"""


class AnimationError(Exception):
    """Base class for animation framework errors."""


class AnimationConfigError(AnimationError, ValueError):
    """An animation or segment was constructed with invalid parameters."""


class ScopeInvalidatedError(AnimationError, RuntimeError):
    """A scoped ``Ui`` handle was used after its owning call returned."""
