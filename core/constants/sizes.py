"""Size constants for effects and the painter based UI.

All values are logical pixels.
"""

SLIDE_DISTANCE = 10.0
"""Distance covered by the slide effects."""

HEADING_FONT_SIZE = 20
LABEL_FONT_SIZE = 12
VALUE_FONT_SIZE = 48
"""Font size of animated values in the demos."""

ITEM_SPACING = 6.0
"""Gap between consecutive items in a layout."""

BUTTON_PADDING_X = 10.0
BUTTON_PADDING_Y = 4.0

CANVAS_MARGIN = 12.0
"""Inset of the root layout from the canvas edge."""

DEFAULT_WINDOW_WIDTH = 520
DEFAULT_WINDOW_HEIGHT = 420
