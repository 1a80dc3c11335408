"""
QPainter backed ``Ui`` scope.

``PainterUi`` adds a handful of immediate-mode primitives (labels, buttons,
separators, horizontal rows) on top of the headless ``Ui`` style state. Each
primitive applies the scope's clip rectangle, opacity, layer transform and
text colour to the painter, draws, and restores the painter, so nothing an
effect sets leaks outside its scope.
"""
from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING, Iterator, Optional, Tuple

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QColor, QFont, QFontMetricsF, QPainter

from core.constants.sizes import (
    BUTTON_PADDING_X,
    BUTTON_PADDING_Y,
    CANVAS_MARGIN,
    HEADING_FONT_SIZE,
    ITEM_SPACING,
    LABEL_FONT_SIZE,
)
from core.context.geometry import Rect
from core.context.ids import ROOT_LAYER, WidgetId
from core.context.ui import Ui
from rendering.frame_input import FrameInput

if TYPE_CHECKING:  # pragma: no cover - imported for typing only
    from core.context.context import UiContext


BUTTON_FILL = QColor(60, 60, 60)
BUTTON_FILL_DISABLED = QColor(40, 40, 40)
SEPARATOR_COLOR = QColor(90, 90, 90)


class Layout:
    """Cursor shared by a root scope and all of its children."""

    def __init__(self, left: float, top: float, right: float,
                 spacing: float = ITEM_SPACING) -> None:
        self.left = left
        self.right = right
        self.x = left
        self.y = top
        self.spacing = spacing
        self.horizontal = False
        self.row_height = 0.0

    def allocate(self, width: float, height: float) -> Rect:
        rect = Rect(self.x, self.y, width, height)
        if self.horizontal:
            self.x += width + self.spacing
            self.row_height = max(self.row_height, height)
        else:
            self.y += height + self.spacing
        return rect

    @property
    def available_width(self) -> float:
        return max(0.0, self.right - self.left)


class PainterUi(Ui):
    """Immediate-mode drawing scope for one frame of an ``ImmediateCanvas``."""

    def __init__(
        self,
        ctx: "UiContext",
        painter: QPainter,
        frame_input: FrameInput,
        layout: Optional[Layout] = None,
        layer_id: WidgetId = ROOT_LAYER,
        parent: Optional["PainterUi"] = None,
    ) -> None:
        super().__init__(ctx, layer_id, parent)
        self._painter = painter
        self._input = frame_input
        if layout is None:
            screen = ctx.screen_rect
            layout = Layout(
                screen.x + CANVAS_MARGIN,
                screen.y + CANVAS_MARGIN,
                screen.right - CANVAS_MARGIN,
            )
        self._layout = layout
        self._enabled = parent.enabled if parent is not None else True

    def _spawn(self, layer_id: WidgetId) -> "PainterUi":
        return PainterUi(self._ctx, self._painter, self._input, self._layout, layer_id, parent=self)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def enabled(self) -> bool:
        return self._enabled

    def disable(self) -> None:
        """Render every following widget in this scope as disabled."""
        self._check()
        self._enabled = False

    @property
    def cursor(self) -> Tuple[float, float]:
        return self._layout.x, self._layout.y

    # ------------------------------------------------------------------
    # Painting helpers
    # ------------------------------------------------------------------

    def _font(self, point_size: float) -> QFont:
        font = QFont(self._painter.font())
        font.setPointSizeF(float(point_size))
        return font

    @staticmethod
    def _text_size(text: str, font: QFont) -> Tuple[float, float]:
        metrics = QFontMetricsF(font)
        return metrics.horizontalAdvance(text), metrics.height()

    def _text_qcolor(self, dimmed: bool = False) -> QColor:
        r, g, b, a = self.text_color
        return QColor(r, g, b, a // 2 if dimmed else a)

    @contextmanager
    def _paint(self) -> Iterator[QPainter]:
        """Apply this scope's style to the painter for a single primitive."""
        painter = self._painter
        painter.save()
        try:
            clip = self.clip_rect
            painter.setClipRect(QRectF(clip.x, clip.y, clip.width, clip.height))
            painter.setOpacity(self.opacity)
            transform = self.total_transform
            painter.translate(transform.dx, transform.dy)
            yield painter
        finally:
            painter.restore()

    def _screen_rect(self, rect: Rect) -> Rect:
        """Where ``rect`` ends up on screen once the layer transform applies."""
        transform = self.total_transform
        return rect.translated(transform.dx, transform.dy).intersected(self.clip_rect)

    # ------------------------------------------------------------------
    # Widgets
    # ------------------------------------------------------------------

    def label(self, text: str, size: float = LABEL_FONT_SIZE) -> Rect:
        """Draw a line of text and return its layout rectangle."""
        self._check()
        text = str(text)
        font = self._font(size)
        width, height = self._text_size(text, font)
        rect = self._layout.allocate(width, height)
        with self._paint() as painter:
            painter.setFont(font)
            painter.setPen(self._text_qcolor(dimmed=not self._enabled))
            painter.drawText(
                QRectF(rect.x, rect.y, rect.width, rect.height),
                int(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter),
                text,
            )
        return rect

    def heading(self, text: str) -> Rect:
        return self.label(text, HEADING_FONT_SIZE)

    def button(self, text: str, enabled: bool = True) -> bool:
        """Draw a button; return True if it was clicked since the last frame."""
        self._check()
        enabled = enabled and self._enabled
        font = self._font(LABEL_FONT_SIZE)
        text_width, text_height = self._text_size(text, font)
        rect = self._layout.allocate(
            text_width + 2 * BUTTON_PADDING_X, text_height + 2 * BUTTON_PADDING_Y
        )
        with self._paint() as painter:
            qrect = QRectF(rect.x, rect.y, rect.width, rect.height)
            painter.setPen(self._text_qcolor(dimmed=True))
            painter.setBrush(BUTTON_FILL if enabled else BUTTON_FILL_DISABLED)
            painter.drawRoundedRect(qrect, 4.0, 4.0)
            painter.setFont(font)
            painter.setPen(self._text_qcolor(dimmed=not enabled))
            painter.drawText(qrect, int(Qt.AlignmentFlag.AlignCenter), text)

        if not enabled:
            return False
        return self._input.take_click(self._screen_rect(rect))

    def separator(self) -> None:
        self._check()
        rect = self._layout.allocate(self._layout.available_width, 1.0)
        with self._paint() as painter:
            painter.setPen(SEPARATOR_COLOR)
            painter.drawLine(QPointF(rect.x, rect.y), QPointF(rect.right, rect.y))

    def add_space(self, amount: float) -> None:
        self._check()
        self._layout.allocate(0.0, max(0.0, amount - self._layout.spacing))

    @contextmanager
    def horizontal(self) -> Iterator["PainterUi"]:
        """Lay out the widgets added inside the block left to right."""
        self._check()
        layout = self._layout
        if layout.horizontal:
            yield self
            return
        layout.horizontal = True
        layout.row_height = 0.0
        try:
            yield self
        finally:
            layout.horizontal = False
            layout.x = layout.left
            layout.y += layout.row_height + layout.spacing
            layout.row_height = 0.0
