"""
Immediate-mode canvas widget.

``ImmediateCanvas`` hosts a ``UiContext`` and rebuilds its whole UI from a
``build(ui)`` callback on every paint. Animations drive further frames
through the context's render-request signal, which schedules a single-shot
repaint after ``repaint_interval_ms``; without that request the canvas only
repaints on input or resize.
"""
from __future__ import annotations

import time
from typing import Callable, Optional

from PySide6.QtCore import Qt, QTimer, Signal
from PySide6.QtGui import QColor, QMouseEvent, QPainter, QPaintEvent
from PySide6.QtWidgets import QWidget

from core.constants.timing import REPAINT_INTERVAL_MS
from core.context.context import UiContext
from core.context.geometry import Rect
from core.logging.logger import get_logger, is_verbose_logging
from rendering.frame_input import FrameInput
from rendering.painter_ui import PainterUi

logger = get_logger(__name__)

BuildFn = Callable[[PainterUi], None]

DEFAULT_BACKGROUND = QColor(27, 27, 27)


class ImmediateCanvas(QWidget):
    """
    Widget that paints an immediate-mode UI.

    Signals:
    - frame_rendered(int): emitted after each frame with the frame number
    """

    frame_rendered = Signal(int)

    def __init__(
        self,
        build: BuildFn,
        parent: Optional[QWidget] = None,
        repaint_interval_ms: int = REPAINT_INTERVAL_MS,
        clock: Callable[[], float] = time.monotonic,
        background: QColor = DEFAULT_BACKGROUND,
    ) -> None:
        """
        Args:
            build: Called once per frame with the root scope.
            parent: Optional parent widget.
            repaint_interval_ms: Delay before a requested repaint is delivered.
            clock: Monotonic clock in seconds; frame times are relative to
                its reading at construction.
            background: Fill colour painted before each frame.
        """
        super().__init__(parent)
        self._build = build
        self._clock = clock
        self._epoch = clock()
        self._background = QColor(background)
        self._ctx = UiContext()
        self._input = FrameInput()

        self._repaint_timer = QTimer(self)
        self._repaint_timer.setSingleShot(True)
        self._repaint_timer.setInterval(int(repaint_interval_ms))
        self._repaint_timer.timeout.connect(self.update)
        self._ctx.repaint_requested.connect(self._schedule_repaint)

        self.setAttribute(Qt.WidgetAttribute.WA_OpaquePaintEvent, True)
        logger.debug("ImmediateCanvas created (repaint_interval=%dms)", repaint_interval_ms)

    @property
    def ctx(self) -> UiContext:
        return self._ctx

    @property
    def frame_input(self) -> FrameInput:
        return self._input

    def set_repaint_interval(self, interval_ms: int) -> None:
        self._repaint_timer.setInterval(int(interval_ms))

    def repaint_scheduled(self) -> bool:
        return self._repaint_timer.isActive()

    def _schedule_repaint(self) -> None:
        if not self._repaint_timer.isActive():
            self._repaint_timer.start()

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:  # type: ignore[override]
        if event.button() == Qt.MouseButton.LeftButton:
            pos = event.position()
            self._input.push_click(pos.x(), pos.y())
            self.update()
            event.accept()
            return
        super().mouseReleaseEvent(event)

    def paintEvent(self, event: QPaintEvent) -> None:  # type: ignore[override]
        self._ctx.screen_rect = Rect(0.0, 0.0, float(self.width()), float(self.height()))
        self._ctx.begin_frame(self._clock() - self._epoch)

        painter = QPainter(self)
        ui: Optional[PainterUi] = None
        try:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
            painter.fillRect(self.rect(), self._background)
            ui = PainterUi(self._ctx, painter, self._input)
            self._build(ui)
        except Exception:
            logger.exception("Frame %d build failed", self._ctx.frame_nr)
            raise
        finally:
            if ui is not None:
                ui.invalidate()
            painter.end()

        # A consumed click may have changed application state after it was
        # drawn, so draw once more.
        if self._input.end_frame():
            self._schedule_repaint()

        if is_verbose_logging():
            logger.debug(
                "Frame %d painted (repaint_pending=%s)",
                self._ctx.frame_nr, self._ctx.repaint_pending,
            )
        self.frame_rendered.emit(self._ctx.frame_nr)
