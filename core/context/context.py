"""
Host UI context.

``UiContext`` is the explicit context object threaded into every animation
call. It owns the persistent keyed store, the transient layer registry, the
frame clock and the render-request signal. A host drives it once per frame:

    ctx.begin_frame(now)
    ui = ctx.root_ui()
    build(ui)
    ui.invalidate()
    if ctx.repaint_pending:
        schedule_next_frame()
"""
from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QObject, Signal

from core.context.geometry import Color, Rect
from core.context.store import KeyedStore, LayerRegistry
from core.context.ui import Ui
from core.logging.logger import get_logger, is_verbose_logging

logger = get_logger(__name__)

DEFAULT_SCREEN_RECT = Rect(0.0, 0.0, 480.0, 360.0)
DEFAULT_TEXT_COLOR: Color = (200, 200, 200, 255)


class UiContext(QObject):
    """
    Per-window UI state shared by all animations drawn in that window.

    Signals:
    - repaint_requested: emitted at most once per frame when an animation
      needs another frame even without new input.
    """

    repaint_requested = Signal()

    def __init__(
        self,
        screen_rect: Optional[Rect] = None,
        text_color: Color = DEFAULT_TEXT_COLOR,
    ) -> None:
        super().__init__()
        self.memory = KeyedStore()
        self.layers = LayerRegistry()
        self.screen_rect = screen_rect if screen_rect is not None else DEFAULT_SCREEN_RECT
        self.text_color = text_color
        self._time = 0.0
        self._frame_nr = 0
        self._repaint_pending = False

    @property
    def time(self) -> float:
        """Clock reading for the current frame, in seconds."""
        return self._time

    @property
    def frame_nr(self) -> int:
        return self._frame_nr

    @property
    def repaint_pending(self) -> bool:
        """True when a repaint was requested during the current frame."""
        return self._repaint_pending

    def begin_frame(self, time: float) -> None:
        """Start a new frame at ``time`` (seconds, monotonic)."""
        time = float(time)
        if time < self._time:
            logger.debug("Frame clock went backwards: %.4f -> %.4f", self._time, time)
        self._time = time
        self._frame_nr += 1
        self._repaint_pending = False
        if is_verbose_logging():
            logger.debug("Frame %d begins at t=%.4f", self._frame_nr, time)

    def request_repaint(self) -> None:
        """Ask the host to schedule another frame."""
        if self._repaint_pending:
            return
        self._repaint_pending = True
        self.repaint_requested.emit()

    def root_ui(self) -> Ui:
        """Return a headless root scope for this frame."""
        return Ui(self)

    def reset(self) -> None:
        """Drop all stored animation state and layer transforms."""
        self.memory.clear()
        self.layers.clear()
