"""Rendering and display modules."""

from .frame_input import FrameInput
from .painter_ui import Layout, PainterUi
from .immediate_canvas import ImmediateCanvas

__all__ = ['FrameInput', 'ImmediateCanvas', 'Layout', 'PainterUi']
