"""Tests for the ImmediateCanvas Qt host."""
import pytest
from PySide6.QtCore import QEvent, QPointF, Qt
from PySide6.QtGui import QMouseEvent

from core.animation import Animation, animate
from rendering.immediate_canvas import ImmediateCanvas
from rendering.painter_ui import PainterUi


class FakeClock:
    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


def make_canvas(qtbot, build, clock):
    canvas = ImmediateCanvas(build, clock=clock, repaint_interval_ms=5)
    qtbot.addWidget(canvas)
    canvas.resize(300, 200)
    return canvas


def test_build_called_each_frame(qtbot, clock):
    frames = []

    def build(ui):
        assert isinstance(ui, PainterUi)
        frames.append(ui.ctx.time)

    canvas = make_canvas(qtbot, build, clock)
    canvas.grab()
    clock.now += 0.5
    canvas.grab()

    assert frames == [pytest.approx(0.0), pytest.approx(0.5)]


def test_frame_rendered_signal(qtbot, clock):
    canvas = make_canvas(qtbot, lambda ui: ui.label("x"), clock)
    with qtbot.waitSignal(canvas.frame_rendered, timeout=1000) as blocker:
        canvas.grab()
    assert blocker.args == [1]


def test_screen_rect_follows_widget_size(qtbot, clock):
    canvas = make_canvas(qtbot, lambda ui: None, clock)
    canvas.grab()
    assert canvas.ctx.screen_rect.width == 300
    assert canvas.ctx.screen_rect.height == 200


def test_root_scope_invalidated_after_frame(qtbot, clock):
    escaped = []
    canvas = make_canvas(qtbot, escaped.append, clock)
    canvas.grab()
    assert not escaped[0].is_valid


def test_running_animation_schedules_repaint(qtbot, clock):
    state = {"value": 0}
    anim = Animation.new(1.0, lambda ui, n: ui.set_opacity(1.0 - n), lambda ui, n: ui.set_opacity(n))

    def build(ui):
        animate(ui, "value", state["value"], anim, lambda child, v: child.label(str(v)))

    canvas = make_canvas(qtbot, build, clock)
    canvas.grab()
    assert not canvas.repaint_scheduled()

    state["value"] = 1
    clock.now += 0.1
    canvas.grab()
    assert canvas.ctx.repaint_pending
    assert canvas.repaint_scheduled()


def test_idle_canvas_does_not_schedule_repaint(qtbot, clock):
    canvas = make_canvas(qtbot, lambda ui: ui.label("idle"), clock)
    canvas.grab()
    canvas.grab()
    assert not canvas.repaint_scheduled()


def test_click_reaches_button_and_schedules_repaint(qtbot, clock):
    clicked = []

    def build(ui):
        x, y = ui.cursor
        if ui.button("Press"):
            clicked.append((x, y))

    canvas = make_canvas(qtbot, build, clock)
    canvas.grab()

    event = QMouseEvent(
        QEvent.Type.MouseButtonRelease,
        QPointF(15.0, 15.0),
        QPointF(15.0, 15.0),
        Qt.MouseButton.LeftButton,
        Qt.MouseButton.NoButton,
        Qt.KeyboardModifier.NoModifier,
    )
    canvas.mouseReleaseEvent(event)
    assert canvas.frame_input.pending == 1

    canvas.grab()
    assert len(clicked) == 1
    assert canvas.repaint_scheduled()


def test_set_repaint_interval(qtbot, clock):
    canvas = make_canvas(qtbot, lambda ui: None, clock)
    canvas.set_repaint_interval(40)
    assert canvas._repaint_timer.interval() == 40
