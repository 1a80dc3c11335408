"""
Per-frame pointer input for the immediate-mode canvas.

Clicks are queued by the widget's mouse handlers and consumed by widgets
during the next frame. Unconsumed clicks are dropped when the frame ends.
"""
from __future__ import annotations

from typing import List, Tuple

from core.context.geometry import Rect
from core.logging.logger import get_logger, is_verbose_logging

logger = get_logger(__name__)


class FrameInput:
    """Queue of click positions (widget coordinates) awaiting a frame."""

    def __init__(self) -> None:
        self._clicks: List[Tuple[float, float]] = []
        self._consumed = 0

    def push_click(self, x: float, y: float) -> None:
        self._clicks.append((float(x), float(y)))

    def take_click(self, rect: Rect) -> bool:
        """Consume the first pending click inside ``rect``."""
        for index, (x, y) in enumerate(self._clicks):
            if rect.contains(x, y):
                del self._clicks[index]
                self._consumed += 1
                return True
        return False

    @property
    def pending(self) -> int:
        return len(self._clicks)

    def end_frame(self) -> int:
        """Drop leftover clicks and return how many were consumed this frame."""
        consumed = self._consumed
        if self._clicks and is_verbose_logging():
            logger.debug("Dropping %d unhandled click(s)", len(self._clicks))
        self._clicks.clear()
        self._consumed = 0
        return consumed
