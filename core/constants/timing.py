"""Timing constants for animations and the Qt host.

Animation durations are in seconds; host intervals are in milliseconds.
"""

# =============================================================================
# Animation Durations (seconds)
# =============================================================================

DEFAULT_SEGMENT_DURATION_S = 0.4
"""Default out/in segment length used by the showcase demo."""

MENU_SEGMENT_DURATION_S = 0.3
"""Segment length of the menu demo slide transitions."""

VARIABLE_SEGMENT_DURATION_S = 0.4
"""Segment length of the variable demo increment/decrement transitions."""

MIN_SEGMENT_DURATION_S = 0.0
"""Shortest selectable segment (an instant snap)."""

MAX_SEGMENT_DURATION_S = 2.0
"""Longest selectable segment in the showcase demo."""

SEGMENT_DURATION_STEP_S = 0.1
"""Increment used by the showcase duration buttons."""

# =============================================================================
# Host Timing (milliseconds)
# =============================================================================

REPAINT_INTERVAL_MS = 16
"""Delay before a requested repaint is delivered (~60 FPS)."""

MIN_REPAINT_INTERVAL_MS = 1
MAX_REPAINT_INTERVAL_MS = 100
