"""Explicit host context, scoped handles and identifiers."""

from .ids import ROOT_LAYER, WidgetId
from .geometry import Color, Rect, Transform
from .store import KeyedStore, LayerRegistry
from .ui import Ui
from .context import UiContext

__all__ = [
    'Color',
    'KeyedStore',
    'LayerRegistry',
    'Rect',
    'ROOT_LAYER',
    'Transform',
    'Ui',
    'UiContext',
    'WidgetId',
]
