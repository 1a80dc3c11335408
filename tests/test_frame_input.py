"""Tests for the per-frame click queue."""
from core.context import Rect
from rendering.frame_input import FrameInput


def test_take_click_inside_rect():
    frame_input = FrameInput()
    frame_input.push_click(5, 5)
    assert frame_input.take_click(Rect(0, 0, 10, 10))
    assert not frame_input.take_click(Rect(0, 0, 10, 10))


def test_take_click_outside_rect():
    frame_input = FrameInput()
    frame_input.push_click(50, 50)
    assert not frame_input.take_click(Rect(0, 0, 10, 10))
    assert frame_input.pending == 1


def test_end_frame_drops_leftovers_and_counts():
    frame_input = FrameInput()
    frame_input.push_click(1, 1)
    frame_input.push_click(99, 99)
    frame_input.take_click(Rect(0, 0, 10, 10))
    assert frame_input.end_frame() == 1
    assert frame_input.pending == 0
    assert frame_input.end_frame() == 0
